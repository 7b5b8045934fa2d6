"""
``var()`` extraction and fallback substitution.

Values coming out of the design tool look like
``var(--background-bg2, #FFFFFF)`` or
``0 1px 2px var(--shadow, rgba(0, 0, 0, 0.1))``. The parser walks the
string counting parentheses so fallbacks containing their own function calls
(``calc()``, nested ``var()``) stay intact.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

from .logger import get_logger

log = get_logger(__name__)

__all__ = [
    "CssVarUsage",
    "parse_css_vars",
    "replace_var_fallbacks",
    "split_var_content",
]

_VAR_OPEN = "var("


@dataclass(frozen=True)
class CssVarUsage:
    """One ``var(...)`` occurrence; ``start``/``end`` span the full text."""

    name: str
    fallback: Optional[str]
    start: int
    end: int


def split_var_content(content: str) -> Tuple[str, Optional[str]]:
    """Split ``name, fallback`` at the first comma outside parentheses."""
    depth = 0
    for index, char in enumerate(content):
        if char == "(":
            depth += 1
        elif char == ")":
            depth -= 1
        elif char == "," and depth == 0:
            return content[:index].strip(), content[index + 1 :].strip()

    return content.strip(), None


def parse_css_vars(value: str) -> List[CssVarUsage]:
    """
    Find every ``var(...)`` usage in a CSS value, left to right.

    Scanning stops at the first unbalanced ``var(``; usages found before it
    are still returned.

    Args:
        value: CSS value text

    Returns:
        List of CssVarUsage in order of occurrence
    """
    usages: List[CssVarUsage] = []
    offset = 0

    while offset < len(value):
        start = value.find(_VAR_OPEN, offset)
        if start == -1:
            break

        cursor = start + len(_VAR_OPEN)
        depth = 1
        while cursor < len(value):
            char = value[cursor]
            if char == "(":
                depth += 1
            elif char == ")":
                depth -= 1
                if depth == 0:
                    break
            cursor += 1

        if depth != 0:
            log.debug(f"Unbalanced var() at offset {start} in '{value}'")
            break

        end = cursor + 1
        name, fallback = split_var_content(value[start + len(_VAR_OPEN) : cursor])
        usages.append(CssVarUsage(name=name, fallback=fallback, start=start, end=end))
        offset = end

    return usages


def replace_var_fallbacks(value: str, usages: Sequence[CssVarUsage]) -> str:
    """
    Replace each usage with its fallback text.

    Usages without a fallback are left as the original ``var(...)`` text.
    """
    if not usages:
        return value

    parts: List[str] = []
    last_index = 0

    for usage in usages:
        parts.append(value[last_index : usage.start])
        if usage.fallback:
            parts.append(usage.fallback)
        else:
            parts.append(value[usage.start : usage.end])
        last_index = usage.end

    parts.append(value[last_index:])
    return "".join(parts)
