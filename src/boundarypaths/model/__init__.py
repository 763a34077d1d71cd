"""
The MODEL layer contains the geometry kernel: pure data structures and
algorithms for boundary paths. It has no knowledge of meshes or solvers.
It deals with Geometry, Validation and I/O of path blocks.
"""
