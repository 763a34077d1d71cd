"""
Diagnostics
===========
Structured records for everything the kernel reports back to the user.

Input files are written by hand, so a single typo should not hide the other
problems in the same file. Loaders and validators therefore never stop on the
first problem: they append a ``Diagnostic`` to a ``DiagnosticLog`` and carry on,
returning a plain success flag to the caller.

Programming errors (asking a path that was never rotated whether it contains a
point, computing a distance without a plane normal, ...) are a different class
of problem. They raise ``PathUsageError`` immediately.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import StrEnum
from typing import Callable, Iterator, List, Optional

logger = logging.getLogger(__name__)


class PathUsageError(RuntimeError):
    """Raised when a Path operation is called in a state that makes it meaningless."""


class Severity(StrEnum):
    ERROR = "error"


class DiagnosticCode(StrEnum):
    # Keyword and value problems
    DUPLICATE_ENTRY = "duplicate-entry"
    UNRECOGNIZED_KEYWORD = "unrecognized-keyword"
    INVALID_VALUE = "invalid-value"
    NOT_POSITIVE = "not-positive"
    NEGATIVE = "negative"
    BELOW_LOWER_LIMIT = "below-lower-limit"
    ABOVE_UPPER_LIMIT = "above-upper-limit"

    # Block structure
    UNTERMINATED_BLOCK = "unterminated-block"
    MISSING_NAME = "missing-name"
    MISSING_CLOSED = "missing-closed"
    MISSING_POINTS = "missing-points"
    SINGLE_POINT = "single-point"
    CLOSED_WITH_TWO_POINTS = "closed-with-two-points"
    POINT_OUTSIDE_BOUNDING_BOX = "point-outside-bounding-box"

    # Geometric consistency
    COLLINEAR_PATH = "collinear-path"
    NON_PLANAR_PATH = "non-planar-path"
    MISSING_NORMAL = "missing-normal"
    CLOSED_PATH_IN_MERGE = "closed-path-in-merge"
    DUPLICATE_MERGED_POINT = "duplicate-merged-point"
    EMPTY_MERGE = "empty-merge"
    TOO_FEW_MERGED_POINTS = "too-few-merged-points"
    UNKNOWN_PATH = "unknown-path"


@dataclass(frozen=True)
class Diagnostic:
    """A single message tied to an optional 1-based input line."""
    severity: Severity
    code: DiagnosticCode
    message: str
    line: Optional[int] = None

    def format(self) -> str:
        location = f" line {self.line}" if self.line is not None else ""
        return f"{self.severity.upper()} [{self.code}]{location}: {self.message}"

    def __str__(self) -> str:
        return self.format()


def log_diagnostic(diagnostic: Diagnostic) -> None:
    """Default reporter: forwards a diagnostic to the package logger."""
    logger.error(diagnostic.format())


class DiagnosticLog:
    """
    Accumulates diagnostics and forwards each one to a reporter as it arrives.

    Args:
        reporter: Callable receiving every new Diagnostic. Defaults to the
            package logger. ``None`` (or ``DiagnosticLog.silent()``) only collects.
    """

    def __init__(self, reporter: Optional[Callable[[Diagnostic], None]] = log_diagnostic) -> None:
        self._reporter = reporter
        self._records: List[Diagnostic] = []

    @classmethod
    def silent(cls) -> DiagnosticLog:
        return cls(reporter=None)

    def add(self, diagnostic: Diagnostic) -> Diagnostic:
        self._records.append(diagnostic)
        if self._reporter is not None:
            self._reporter(diagnostic)
        return diagnostic

    def error(self, code: DiagnosticCode, message: str, line: Optional[int] = None) -> Diagnostic:
        return self.add(Diagnostic(Severity.ERROR, code, message, line))

    @property
    def records(self) -> List[Diagnostic]:
        return list(self._records)

    @property
    def errors(self) -> List[Diagnostic]:
        return [d for d in self._records if d.severity == Severity.ERROR]

    @property
    def has_errors(self) -> bool:
        return any(d.severity == Severity.ERROR for d in self._records)

    def codes(self) -> List[DiagnosticCode]:
        return [d.code for d in self._records]

    def clear(self) -> None:
        self._records.clear()

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[Diagnostic]:
        return iter(self._records)
