"""
Configuration & Global Constants
================================
This module serves as the central registry for numerical tolerances, input
limits and file paths used across the geometry kernel.

Why is this file needed?
------------------------
1. Consistency: Every comparison of floating point coordinates in the kernel
   must agree on the same tolerances. Scattering literal 1e-11 values through
   the code makes it impossible to reason about which check wins.
2. Discoverability: The bundled example path files live in the assets
   directory, which has to be located both from a source checkout and from an
   installed package.

Exports:
    DBL_TOLERANCE (float): Relative-or-absolute tolerance for coordinate equality.
    CLOSE_POINT_TOLERANCE (float): Tighter tolerance used to deduplicate vertices.
    LINE_TOLERANCE (float): Tolerance for point-on-segment tests.
    PARALLEL_TOLERANCE (float): Angular tolerance (radians) for parallel edges.
    PLANARITY_TOLERANCE (float): Allowed spread of rotated z values, relative to path extent.
    POINT_LOWER_LIMIT / POINT_UPPER_LIMIT (float): Accepted coordinate range on input.
    ASSETS_PATH (str): Absolute path to the assets directory.
    EXAMPLE_PATHS_PATH (str): Absolute path to the bundled example path files.
"""
import os
from pathlib import Path


def get_resource_path(relative_path: str) -> str:
    """
    Get absolute path to a resource shipped next to the source tree.
    """
    # config.py is in src/boundarypaths/
    current_file_path: Path = Path(__file__)
    project_root: Path = current_file_path.parent.parent.parent
    return os.path.join(str(project_root), relative_path)


# Tolerances
DBL_TOLERANCE: float = 1e-11
CLOSE_POINT_TOLERANCE: float = 1e-12
LINE_TOLERANCE: float = 1e-8
PARALLEL_TOLERANCE: float = 1e-12
PLANARITY_TOLERANCE: float = 1e-8

# Input limits for point coordinates
POINT_LOWER_LIMIT: float = -100.0
POINT_UPPER_LIMIT: float = 100.0

# Input file keywords
PATH_BLOCK_BEGIN: str = "Path"
PATH_BLOCK_END: str = "EndPath"

ASSETS_PATH: str = get_resource_path("assets")
EXAMPLE_PATHS_PATH: str = os.path.join(ASSETS_PATH, "paths")
