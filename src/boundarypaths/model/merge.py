"""
Merging open paths into one closed boundary.

Users often describe a boundary as several open pieces (for example one path
per side of a port). ``merge_paths`` stitches the listed pieces end to end,
optionally reversing some of them, and closes the result.
"""
from __future__ import annotations

import logging
from typing import List, Optional, Sequence

from boundarypaths.model.diagnostics import DiagnosticCode, DiagnosticLog
from boundarypaths.model.geometry_utils import point_compare
from boundarypaths.model.path import Path

logger = logging.getLogger(__name__)


def merge_paths(
    path_list: Sequence[Path],
    indices: Sequence[int],
    reverse: Sequence[bool],
    boundary_type: str,
    boundary_name: str,
    log: DiagnosticLog
) -> Optional[Path]:
    """
    Concatenates open paths into a single closed path.

    Consecutive duplicate vertices (the shared end of one piece and start of
    the next) are collapsed, and a final vertex equal to the first is dropped
    because the result is closed.

    Args:
        path_list: All paths of the input.
        indices: Which paths to merge, in order.
        reverse: Per entry of ``indices``, whether to walk that path backwards.
        boundary_type: Kind of boundary being built, used in messages (e.g. "Port").
        boundary_name: Name of that boundary, used in messages.
        log: Receives closed-member, duplicate-vertex and too-few-point errors.

    Returns:
        The merged closed path, or None on failure.
    """
    if not indices:
        log.error(DiagnosticCode.EMPTY_MERGE, f"No paths given to merge for {boundary_type} {boundary_name}.")
        return None

    if len(reverse) != len(indices):
        raise ValueError(f"Got {len(indices)} path indices but {len(reverse)} reverse flags.")

    members: List[Path] = [path_list[i] for i in indices]

    ok = True
    for member in members:
        if member.closed:
            line = member.closed_field.line_number
            log.error(
                DiagnosticCode.CLOSED_PATH_IN_MERGE,
                f"Path at line {line} must not be closed when it is merged into {boundary_type} {boundary_name}.",
                line if line > 0 else None,
            )
            ok = False
    if not ok:
        return None

    merged = Path(-1, -1)
    merged.set_name(boundary_name)
    for member, backwards in zip(members, reverse):
        points = reversed(member.points) if backwards else member.points
        for point in points:
            if merged.points and point_compare(point, merged.points[-1], merged.tol):
                continue
            merged.push_point(point)

    if len(merged.points) > 1 and point_compare(merged.points[-1], merged.points[0], merged.tol):
        merged.pop_point()
    merged.set_closed(True)

    if len(merged.points) < 3:
        log.error(
            DiagnosticCode.TOO_FEW_MERGED_POINTS,
            f"Merged path for {boundary_type} {boundary_name} has only {len(merged.points)} distinct point(s); "
            f"a closed path needs at least 3.",
        )
        return None

    for i in range(len(merged.points) - 1):
        for j in range(i + 1, len(merged.points)):
            if point_compare(merged.points[i], merged.points[j], merged.tol):
                log.error(
                    DiagnosticCode.DUPLICATE_MERGED_POINT,
                    f"Merged path for {boundary_type} {boundary_name} has duplicate point at "
                    f"{merged.points[i].format()}.",
                )
                return None

    merged.calculate_bounding_box()
    merged.calculate_normal()
    logger.debug(f"Merged {len(members)} path(s) into {boundary_type} {boundary_name} with {len(merged.points)} points")
    return merged
