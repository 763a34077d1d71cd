"""
Scalar Fields
=============
Typed, bounds-checked values read from ``keyword=value`` input lines.

A ``ScalarField`` describes one keyword of an input block: the aliases it is
recognized by, what kind of value it holds and which limits apply. Loading a
value records the source line so that later diagnostics (duplicates, missing
entries, merge conflicts) can point the user back at the input file.
"""
from __future__ import annotations

import logging
import math
import re
from dataclasses import dataclass, field
from enum import StrEnum
from typing import List, Optional

from boundarypaths.config import DBL_TOLERANCE
from boundarypaths.model.diagnostics import DiagnosticCode, DiagnosticLog
from boundarypaths.model.geometry_primitives import Point

logger = logging.getLogger(__name__)

_POINT_PATTERN = re.compile(r"^\(\s*([^(),]+)\s*,\s*([^(),]+)\s*(?:,\s*([^(),]+)\s*)?\)$")


class FieldKind(StrEnum):
    STRING = "string"
    BOOL = "bool"
    INT = "int"
    REAL = "real"
    POINT = "point"


@dataclass
class FieldLimits:
    """Accepted range of a numeric field. Point fields apply it per coordinate."""
    lower: float = -math.inf
    upper: float = math.inf
    positive_required: bool = False
    non_negative_required: bool = False


def parse_real(text: str) -> Optional[float]:
    try:
        value = float(text)
    except ValueError:
        return None
    if not math.isfinite(value):
        return None
    return value


def parse_int(text: str) -> Optional[int]:
    try:
        return int(text)
    except ValueError:
        return None


def parse_bool(text: str) -> Optional[bool]:
    lowered = text.strip().lower()
    if lowered == "true":
        return True
    if lowered == "false":
        return False
    return None


def parse_point(text: str, dim: int) -> Optional[Point]:
    """Parses ``(x,y)`` or ``(x,y,z)``; the number of coordinates must equal ``dim``."""
    match = _POINT_PATTERN.match(text.strip())
    if match is None:
        return None
    groups = [g for g in match.groups() if g is not None]
    if len(groups) != dim:
        return None
    coords = [parse_real(g) for g in groups]
    if any(c is None for c in coords):
        return None
    return Point.from_sequence(coords)


@dataclass
class ScalarField:
    """
    One keyword of an input block.

    Attributes:
        aliases: Keywords this field answers to, compared case-insensitively.
        kind: What kind of value the field holds.
        limits: Range checks for numeric kinds, None to skip them.
        tolerance: Relative slack applied to the limits.
    """
    aliases: List[str]
    kind: FieldKind
    limits: Optional[FieldLimits] = None
    tolerance: float = DBL_TOLERANCE

    keyword: str = ""
    text: str = ""
    line_number: int = -1
    loaded: bool = False
    value: object = field(default=None, repr=False)

    def match_alias(self, token: str) -> bool:
        token = token.strip().lower()
        return any(token == alias.lower() for alias in self.aliases)

    @property
    def string_value(self) -> str:
        return str(self.value) if self.value is not None else ""

    @property
    def bool_value(self) -> bool:
        return bool(self.value)

    @property
    def int_value(self) -> int:
        return int(self.value)

    @property
    def real_value(self) -> float:
        return float(self.value)

    @property
    def point_value(self) -> Point:
        if not isinstance(self.value, Point):
            raise TypeError(f"Field '{self.keyword}' does not hold a point.")
        return self.value

    def set(self, value: object, line_number: int = -1) -> None:
        """Assigns a value programmatically, bypassing parsing and limit checks."""
        self.value = value
        self.line_number = line_number
        self.loaded = True

    def load(
        self,
        token: str,
        text: str,
        line_number: int,
        log: DiagnosticLog,
        dim: Optional[int] = None
    ) -> bool:
        """
        Parses ``text`` into this field.

        Args:
            token: The keyword as written in the input.
            text: The raw value.
            line_number: 1-based source line.
            log: Receives duplicate, invalid value and limit diagnostics.
            dim: Required number of coordinates for point fields.

        Returns:
            True if the value was accepted.
        """
        if self.loaded:
            log.error(
                DiagnosticCode.DUPLICATE_ENTRY,
                f"Duplicate entry at line {line_number} for previous entry at line {self.line_number}.",
                line_number,
            )
            return False

        match self.kind:
            case FieldKind.STRING:
                value: object = text.strip()
                expected = "a string"
            case FieldKind.BOOL:
                value = parse_bool(text)
                expected = "\"true\" or \"false\""
            case FieldKind.INT:
                value = parse_int(text)
                expected = "an integer"
            case FieldKind.REAL:
                value = parse_real(text)
                expected = "a real number"
            case FieldKind.POINT:
                value = parse_point(text, dim or 3)
                expected = f"a {dim or 3}D point"

        if value is None or value == "":
            log.error(
                DiagnosticCode.INVALID_VALUE,
                f"Invalid value \"{text.strip()}\" for \"{token.strip()}\" at line {line_number}, expected {expected}.",
                line_number,
            )
            return False

        self.keyword = token.strip()
        self.text = text.strip()
        self.line_number = line_number
        self.value = value

        if self.limits is not None and not self.limit_check(log):
            return False

        self.loaded = True
        logger.debug(f"Loaded {self.kind} '{self.keyword}' = {self.text} from line {line_number}")
        return True

    def limit_check(self, log: DiagnosticLog) -> bool:
        """Applies ``limits`` to the current value. Non-numeric kinds always pass."""
        match self.kind:
            case FieldKind.INT | FieldKind.REAL:
                return self._check_number(float(self.value), self.keyword, log)
            case FieldKind.POINT:
                point = self.point_value
                names = ("x", "y", "z")[:point.dim]
                return all([
                    self._check_number(c, f"{self.keyword} {name}", log)
                    for name, c in zip(names, point.coordinates)
                ])
            case FieldKind.STRING | FieldKind.BOOL:
                return True

    def _check_number(self, value: float, label: str, log: DiagnosticLog) -> bool:
        limits = self.limits
        line = self.line_number
        if limits.positive_required and value <= 0.0:
            log.error(DiagnosticCode.NOT_POSITIVE, f"\"{label}\" at line {line} must be positive.", line)
            return False
        if limits.non_negative_required and value < 0.0:
            log.error(DiagnosticCode.NEGATIVE, f"\"{label}\" at line {line} must be non-negative.", line)
            return False
        if value < limits.lower - abs(limits.lower) * self.tolerance:
            log.error(
                DiagnosticCode.BELOW_LOWER_LIMIT,
                f"\"{label}\" at line {line} must be >= {limits.lower:g}.",
                line,
            )
            return False
        if value > limits.upper + abs(limits.upper) * self.tolerance:
            log.error(
                DiagnosticCode.ABOVE_UPPER_LIMIT,
                f"\"{label}\" at line {line} must be <= {limits.upper:g}.",
                line,
            )
            return False
        return True
