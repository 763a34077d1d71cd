"""
boundarypaths
=============
Geometry kernel for the boundary paths of an electromagnetic field solver:
loading and validating ``Path`` blocks, rotating planar 3D paths into a
canonical XY frame, point containment, segment intersection, subdivision of
overlapping edges and merging of open pieces into closed boundaries.
"""
from boundarypaths.model.diagnostics import Diagnostic, DiagnosticCode, DiagnosticLog, PathUsageError, Severity
from boundarypaths.model.geometry_primitives import BoundingBox, Point, Vector
from boundarypaths.model.input_file import InputFile
from boundarypaths.model.io import IOManager
from boundarypaths.model.merge import merge_paths
from boundarypaths.model.path import Path

__all__ = [
    "BoundingBox",
    "Diagnostic",
    "DiagnosticCode",
    "DiagnosticLog",
    "InputFile",
    "IOManager",
    "Path",
    "PathUsageError",
    "Point",
    "Severity",
    "Vector",
    "merge_paths",
]
