"""
Input/Output Manager
Reads every Path block of a boundary description file and writes paths back
out in the same format.
"""
import io
import logging
from typing import List, Optional, Sequence, Union

from boundarypaths.config import PATH_BLOCK_BEGIN, PATH_BLOCK_END
from boundarypaths.model.diagnostics import DiagnosticLog
from boundarypaths.model.input_file import InputFile
from boundarypaths.model.path import Path

# Get module logger
logger = logging.getLogger(__name__)


class IOManager:
    @staticmethod
    def load_paths(source: Union[str, InputFile], dim: int, log: DiagnosticLog) -> List[Path]:
        """
        Loads and checks every Path block.

        Args:
            source: File path or an already read InputFile.
            dim: Dimensionality of the points (2 or 3).
            log: Receives every problem found. Paths with problems are still returned.

        Returns:
            The paths in file order.
        """
        inputs = source if isinstance(source, InputFile) else InputFile.from_file(source)

        paths: List[Path] = []
        for start_line, end_line in inputs.find_blocks(PATH_BLOCK_BEGIN, PATH_BLOCK_END, log):
            path = Path(start_line, end_line)
            path.load(dim, inputs, log)
            path.check(log)
            paths.append(path)

        logger.info(f"Loaded {len(paths)} path(s) from {inputs.filename}")
        return paths

    @staticmethod
    def find_path(paths: Sequence[Path], name: str) -> Optional[Path]:
        for path in paths:
            if path.name == name:
                return path
        return None

    @staticmethod
    def format_paths(paths: Sequence[Path], force_dim: Optional[int] = None) -> str:
        buffer = io.StringIO()
        for path in paths:
            path.output(buffer, force_dim)
        return buffer.getvalue()

    @staticmethod
    def save_paths(paths: Sequence[Path], filepath: str, force_dim: Optional[int] = None) -> None:
        logger.info(f"Saving {len(paths)} path(s) to: {filepath}")
        with open(filepath, "w", encoding="utf-8") as f:
            for path in paths:
                path.output(f, force_dim)
