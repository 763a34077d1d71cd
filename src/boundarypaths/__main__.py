"""Command-line interface."""
from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional, Sequence

from boundarypaths.logging_config import setup_logging
from boundarypaths.model.diagnostics import DiagnosticCode, DiagnosticLog
from boundarypaths.model.io import IOManager
from boundarypaths.model.merge import merge_paths
from boundarypaths.model.path import Path

logger = logging.getLogger("boundarypaths")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="boundarypaths",
        description="Check, merge and query the Path blocks of a boundary description file.",
    )
    parser.add_argument("input", help="Input file with Path ... EndPath blocks.")
    parser.add_argument("--dim", type=int, choices=(2, 3), default=3, help="Point dimensionality (default: 3).")
    parser.add_argument("--lower", type=float, nargs="+", metavar="V", help="Lower-left corner of the mesh box.")
    parser.add_argument("--upper", type=float, nargs="+", metavar="V", help="Upper-right corner of the mesh box.")
    parser.add_argument("--dump", action="store_true", help="Print the full state of every path.")
    parser.add_argument(
        "--merge",
        nargs="+",
        metavar="NAME",
        help="Merge the named open paths into one closed path; prefix a name with '~' to reverse it.",
    )
    parser.add_argument("--merged-name", default="merged", help="Name of the merged path (default: merged).")
    parser.add_argument("--inside", metavar="NAME", help="Path to test --point against.")
    parser.add_argument("--point", type=float, nargs="+", metavar="V", help="Point for --inside.")
    parser.add_argument("--output", help="Write the resulting paths to this file instead of stdout.")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging.")
    parser.add_argument("--log-file", help="Also write the log to this file.")
    return parser


def _merge(paths: List[Path], names: Sequence[str], merged_name: str, log: DiagnosticLog) -> Optional[Path]:
    indices: List[int] = []
    reverse: List[bool] = []
    for raw in names:
        backwards = raw.startswith("~")
        name = raw[1:] if backwards else raw
        index = next((i for i, p in enumerate(paths) if p.name == name), None)
        if index is None:
            log.error(DiagnosticCode.UNKNOWN_PATH, f"No path named \"{name}\" to merge.")
            return None
        indices.append(index)
        reverse.append(backwards)
    return merge_paths(paths, indices, reverse, "Path", merged_name, log)


def _query_inside(paths: List[Path], name: str, coords: Sequence[float], log: DiagnosticLog) -> Optional[bool]:
    path = IOManager.find_path(paths, name)
    if path is None:
        log.error(DiagnosticCode.UNKNOWN_PATH, f"No path named \"{name}\" to query.")
        return None
    rotated = path.rotate_to_xy_plane(log)
    if rotated is None:
        return None
    x, y = coords[0], coords[1]
    z = coords[2] if len(coords) > 2 else 0.0
    return rotated.is_point_inside(x, y, z)


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.inside and not args.point:
        parser.error("--inside requires --point")
    if args.point and len(args.point) not in (2, 3):
        parser.error("--point takes 2 or 3 values")

    setup_logging(logging.DEBUG if args.verbose else logging.INFO, args.log_file)

    log = DiagnosticLog()
    paths = IOManager.load_paths(args.input, args.dim, log)

    if args.lower and args.upper:
        for path in paths:
            path.check_bounding_box(args.lower, args.upper, log)

    results = list(paths)
    if args.merge:
        merged = _merge(paths, args.merge, args.merged_name, log)
        if merged is not None:
            results = [merged]

    if args.inside:
        inside = _query_inside(paths, args.inside, args.point, log)
        if inside is not None:
            print(f"{args.inside}: point {tuple(args.point)} is {'inside' if inside else 'outside'}")

    if args.dump:
        for path in results:
            print(path.dump())
    if args.output:
        IOManager.save_paths(results, args.output, args.dim)
    elif args.merge and not args.dump:
        sys.stdout.write(IOManager.format_paths(results, args.dim))

    if log.has_errors:
        logger.error(f"{len(log.errors)} error(s) found in {args.input}")
        return 1
    logger.info(f"{args.input}: {len(paths)} path(s) OK")
    return 0


if __name__ == "__main__":
    sys.exit(main())
