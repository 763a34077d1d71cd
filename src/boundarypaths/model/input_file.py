"""
Line-indexed reader for boundary description files.

Lines are addressed by their 1-based number in the source file so that every
diagnostic can point at the exact line the user wrote. Comments (``//`` or
``#``) and surrounding whitespace are stripped; blank lines are kept in the
index but skipped by the navigation helpers.
"""
from __future__ import annotations

import logging
import os
from typing import List, Tuple

from boundarypaths.model.diagnostics import DiagnosticCode, DiagnosticLog

logger = logging.getLogger(__name__)

COMMENT_MARKERS: Tuple[str, ...] = ("//", "#")


def strip_comment(line: str) -> str:
    cut = len(line)
    for marker in COMMENT_MARKERS:
        index = line.find(marker)
        if index != -1:
            cut = min(cut, index)
    return line[:cut].strip()


def get_token_pair(line: str) -> Tuple[str, str]:
    """
    Splits ``keyword=value`` at the first ``=``.

    Returns:
        (token, value), both stripped. A line without ``=`` yields (line, "").
    """
    token, _, value = line.partition("=")
    return token.strip(), value.strip()


class InputFile:
    def __init__(self, lines: List[str], filename: str = "<text>") -> None:
        self.filename = filename
        self._lines: List[str] = [strip_comment(line) for line in lines]

    @classmethod
    def from_text(cls, text: str, filename: str = "<text>") -> InputFile:
        return cls(text.splitlines(), filename)

    @classmethod
    def from_file(cls, filepath: str) -> InputFile:
        logger.info(f"Reading input file: {filepath}")
        with open(filepath, "r", encoding="utf-8") as f:
            return cls(f.read().splitlines(), os.path.basename(filepath))

    @property
    def line_count(self) -> int:
        return len(self._lines)

    def get_line(self, line_number: int) -> str:
        """Returns the comment-stripped text of a 1-based line, '' outside the file."""
        if 1 <= line_number <= len(self._lines):
            return self._lines[line_number - 1]
        return ""

    def get_next_line_number(self, line_number: int) -> int:
        """First non-blank line after ``line_number``, or ``line_count + 1``."""
        n = line_number + 1
        while n <= len(self._lines) and not self._lines[n - 1]:
            n += 1
        return n

    def get_previous_line_number(self, line_number: int) -> int:
        """Last non-blank line before ``line_number``, or 0."""
        n = min(line_number - 1, len(self._lines))
        while n >= 1 and not self._lines[n - 1]:
            n -= 1
        return n

    def find_blocks(self, begin: str, end: str, log: DiagnosticLog) -> List[Tuple[int, int]]:
        """
        Locates every ``begin ... end`` block.

        Args:
            begin: Keyword opening a block, e.g. "Path".
            end: Keyword closing a block, e.g. "EndPath".
            log: Receives an error for a block that is never closed or nested.

        Returns:
            (start_line, end_line) pairs of the keyword lines, in file order.
        """
        blocks: List[Tuple[int, int]] = []
        start = None
        for number, line in enumerate(self._lines, start=1):
            keyword = line.lower()
            if keyword == begin.lower():
                if start is not None:
                    log.error(
                        DiagnosticCode.UNTERMINATED_BLOCK,
                        f"{begin} block at line {start} is missing \"{end}\" before line {number}.",
                        start,
                    )
                start = number
            elif keyword == end.lower():
                if start is None:
                    log.error(
                        DiagnosticCode.UNTERMINATED_BLOCK,
                        f"\"{end}\" at line {number} has no matching \"{begin}\".",
                        number,
                    )
                    continue
                blocks.append((start, number))
                start = None
        if start is not None:
            log.error(
                DiagnosticCode.UNTERMINATED_BLOCK,
                f"{begin} block at line {start} is missing \"{end}\".",
                start,
            )
        logger.debug(f"Found {len(blocks)} {begin} block(s) in {self.filename}")
        return blocks
