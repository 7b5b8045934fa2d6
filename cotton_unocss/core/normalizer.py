"""
Numeric clean-up for generated UnoCSS classes.

The generator keeps pixel units (``p-16px``, ``border-1px``) and raw design
numbers. These rules move them onto the theme's spacing scale:

- border widths use a quarter-unit scale, so ``border-2`` becomes ``border-8``
- explicit ``px`` suffixes are dropped without rescaling
- bracketed bare numbers lose their brackets
- unitless padding values are multiplied by four
"""

from __future__ import annotations

import re
import sys

__all__ = [
    "format_number",
    "normalize_uno_class",
]

_NUMBER = r"(\d+\.\d+|\d+)"
_INTEGER_TOLERANCE = 1e-6

_BORDER_PATTERN = re.compile(rf"\bborder-{_NUMBER}(?![\w-])")
_BORDER_SIDE_PATTERN = re.compile(rf"\b(border-[xylrtb]-){_NUMBER}(?![\w-])")
_PADDING_PX_PATTERN = re.compile(rf"(p[trblxy]?)-{_NUMBER}px\b")
_PX_UNIT_PATTERN = re.compile(r"(-?\d+(?:\.\d+)?)px\b")
_BRACKET_NUMBER_PATTERN = re.compile(r"\[(\d+(?:\.\d+)?)\]")
_PADDING_UNITLESS_PATTERN = re.compile(rf"(p[trblxy]?)-{_NUMBER}(?![\w-])")


def format_number(value: float) -> str:
    """
    Render a number the same way everywhere a class is rewritten.

    The value is rounded to six decimals. A residue of one unit in the sixth
    decimal around a whole number counts as float noise, so genuine values
    within 0.000001 of an integer collapse as well (0.000001 and 7.999999
    both render as integers). Two units away is kept.

    Examples:
        - 4.000001 -> "4"
        - 7.999999 -> "8"
        - 7.999998 -> "7.999998"
        - 1.5 -> "1.5"
        - 0.1 + 0.2 -> "0.3"
    """
    rounded = float(f"{value:.6f}")
    nearest = round(rounded)
    tolerance = _INTEGER_TOLERANCE + sys.float_info.epsilon * max(1.0, abs(rounded))
    if abs(rounded - nearest) <= tolerance:
        return str(int(nearest))

    return f"{rounded:.6f}".rstrip("0").rstrip(".")


def _scale(value: str, factor: float = 4) -> str:
    return format_number(float(value) * factor)


def normalize_uno_class(class_name: str, has_px: bool) -> str:
    """
    Apply the numeric rewrites to one generated class fragment.

    Args:
        class_name: Class fragment produced by the generator
        has_px: Whether the substituted CSS value contained ``px``

    Returns:
        The rewritten fragment
    """
    if not class_name:
        return class_name

    result = _BORDER_PATTERN.sub(lambda m: f"border-{_scale(m.group(1))}", class_name)
    result = _BORDER_SIDE_PATTERN.sub(
        lambda m: f"{m.group(1)}{_scale(m.group(2))}", result
    )
    result = _PADDING_PX_PATTERN.sub(
        lambda m: f"{m.group(1)}-{format_number(float(m.group(2)))}", result
    )
    result = _PX_UNIT_PATTERN.sub(r"\1", result)
    result = _BRACKET_NUMBER_PATTERN.sub(r"\1", result)

    if not has_px:
        result = _PADDING_UNITLESS_PATTERN.sub(
            lambda m: f"{m.group(1)}-{_scale(m.group(2))}", result
        )

    return result
