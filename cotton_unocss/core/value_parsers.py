"""
Value parsing helpers for the built-in class generator.

CSS values arrive as text from the design tool. The generator needs to know
whether a value is a plain length (``12px``, ``1.5em``, ``50%``, ``0``), a
keyword (``auto``, ``center``) or something that must be passed through as an
arbitrary value (colours, functions, lists).
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import List, Optional, Tuple

from .logger import get_logger
from .normalizer import format_number

log = get_logger(__name__)

__all__ = [
    "FloatValue",
    "VALID_UNITS",
    "expand_shorthand_box",
    "is_keyword",
    "parse_float_value",
    "split_top_level",
]


@dataclass
class FloatValue:
    """Represents a number with an optional unit."""

    value: float
    unit: Optional[str] = None  # px, em, %, etc.

    def __str__(self) -> str:
        return f"{format_number(self.value)}{self.unit or ''}"

    @property
    def is_negative(self) -> bool:
        return self.value < 0

    def to_rem(self, root_font_size: float = 16.0) -> "FloatValue":
        """Convert a pixel value to rem; other units are returned unchanged."""
        if self.unit != "px":
            return self
        return FloatValue(value=self.value / root_font_size, unit="rem")

    def absolute(self) -> "FloatValue":
        return FloatValue(value=abs(self.value), unit=self.unit)


_FLOAT_PATTERN = re.compile(r"^([+-]?(?:\d+\.?\d*|\.\d+))([a-zA-Z%]*)$")
_KEYWORD_PATTERN = re.compile(r"^-?[a-zA-Z][a-zA-Z0-9-]*$")

VALID_UNITS = {
    "px",
    "em",
    "rem",
    "%",
    "pt",
    "vw",
    "vh",
    "deg",
    "s",
    "ms",
}


def parse_float_value(value_str: str) -> Optional[FloatValue]:
    """
    Parse a number with an optional unit.

    Examples:
        - "12px" -> FloatValue(12.0, "px")
        - "1.5em" -> FloatValue(1.5, "em")
        - "100%" -> FloatValue(100.0, "%")
        - "0.5" -> FloatValue(0.5, None)

    Args:
        value_str: The CSS value string to parse

    Returns:
        FloatValue if parsing succeeds, None otherwise (including unknown units)
    """
    value_str = value_str.strip()
    if not value_str:
        return None

    match = _FLOAT_PATTERN.match(value_str)
    if not match:
        return None

    number_str, unit = match.groups()

    try:
        number = float(number_str)
    except ValueError:
        return None

    unit = unit.lower() if unit else None
    if unit and unit not in VALID_UNITS:
        log.debug(f"Unknown unit '{unit}' in value '{value_str}'")
        return None

    return FloatValue(value=number, unit=unit)


def is_keyword(value_str: str) -> bool:
    return bool(_KEYWORD_PATTERN.match(value_str.strip()))


def split_top_level(value_str: str) -> List[str]:
    """
    Split on whitespace outside parentheses.

    Examples:
        - "10px 20px" -> ["10px", "20px"]
        - "1px solid rgba(0, 0, 0, 0.1)" -> ["1px", "solid", "rgba(0, 0, 0, 0.1)"]
    """
    parts: List[str] = []
    depth = 0
    current: List[str] = []

    for char in value_str.strip():
        if char == "(":
            depth += 1
        elif char == ")":
            depth = max(depth - 1, 0)

        if char.isspace() and depth == 0:
            if current:
                parts.append("".join(current))
                current = []
            continue
        current.append(char)

    if current:
        parts.append("".join(current))
    return parts


def expand_shorthand_box(values: List[str]) -> Tuple[str, str, str, str]:
    """
    Expand CSS box model shorthand (padding, margin) to individual sides.

    CSS box model rules:
    - 1 value: all sides
    - 2 values: top/bottom, left/right
    - 3 values: top, left/right, bottom
    - 4 values: top, right, bottom, left (clockwise)

    Returns:
        Tuple of (top, right, bottom, left)
    """
    count = len(values)

    if count == 1:
        return values[0], values[0], values[0], values[0]
    elif count == 2:
        return values[0], values[1], values[0], values[1]
    elif count == 3:
        return values[0], values[1], values[2], values[1]
    elif count >= 4:
        return values[0], values[1], values[2], values[3]
    else:
        raise ValueError(f"Cannot expand shorthand with {count} values")
