"""
Colour token rules.

Maps design-tool CSS custom property names (``--background-bg2``,
``--text-symbol-text-1`` ...) onto the short palette token names used by the
UnoCSS theme (``bg_2``, ``text_1`` ...). The table is ordered and the first
matching rule wins; new palette entries need new rules.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Callable, Optional, Tuple

__all__ = [
    "ColorTokenRule",
    "COLOR_TOKEN_RULES",
    "create_rule",
    "resolve_color_token_name",
]


@dataclass(frozen=True)
class ColorTokenRule:
    """A single name pattern and the token it produces."""

    pattern: re.Pattern
    resolver: Callable[[re.Match], str]

    def resolve(self, name: str) -> Optional[str]:
        match = self.pattern.fullmatch(name)
        if match is None:
            return None
        return self.resolver(match)


def create_rule(pattern: str, resolver: Callable[[re.Match], str]) -> ColorTokenRule:
    return ColorTokenRule(re.compile(pattern, re.IGNORECASE), resolver)


COLOR_TOKEN_RULES: Tuple[ColorTokenRule, ...] = (
    create_rule(r"background-bg(\d+)", lambda m: f"bg_{m.group(1)}"),
    create_rule(r"text-symbol-text-(\d+)", lambda m: f"text_{m.group(1)}"),
    create_rule(r"text-(\d+)", lambda m: f"text_{m.group(1)}"),
    create_rule(r"norm-brand_pink", lambda m: "brand_pink"),
    create_rule(r"norm-brand_blue", lambda m: "brand_blue"),
    create_rule(r"line-line_light", lambda m: "line_light"),
)


def resolve_color_token_name(variable_name: str) -> Optional[str]:
    """
    Resolve a CSS custom property name to its palette token.

    Examples:
        - "--background-bg2" -> "bg_2"
        - "--Text-Symbol-Text-10" -> "text_10"
        - "--unknown" -> None

    Args:
        variable_name: Custom property name, with or without the ``--`` prefix

    Returns:
        The token name, or None when no rule matches
    """
    normalized = variable_name[2:] if variable_name.startswith("--") else variable_name

    for rule in COLOR_TOKEN_RULES:
        token = rule.resolve(normalized)
        if token is not None:
            return token

    return None
