"""
Palette token re-injection.

The class generator only ever sees the fallback value of a ``var()``, so a
``color: var(--background-bg2, #FFFFFF)`` declaration comes back as
``text-[#FFFFFF]``. This module puts the palette token back:
``text-bg_2``.
"""

from __future__ import annotations

import re
from typing import List, Optional, Sequence

from .color_tokens import resolve_color_token_name
from .css_vars import CssVarUsage
from .logger import get_logger

log = get_logger(__name__)

__all__ = [
    "apply_token_replacements",
    "fallback_variants",
    "replace_fallback_with_token",
    "replace_var_expressions",
]

_WHITESPACE = re.compile(r"\s+")
_BRACKET_WORD = re.compile(r"\[([\w-]+)\]")


def fallback_variants(fallback: str) -> List[str]:
    """
    Spellings of a fallback the generator may have emitted.

    The trimmed text and its whitespace-free form, each as written, lower
    cased and upper cased. Longest first so alternation prefers the widest
    match.
    """
    trimmed = fallback.strip()
    if not trimmed:
        return []

    compact = _WHITESPACE.sub("", trimmed)
    variants = {
        trimmed,
        compact,
        trimmed.lower(),
        compact.lower(),
        trimmed.upper(),
        compact.upper(),
    }
    return sorted((v for v in variants if v), key=lambda v: (-len(v), v))


def _variant_pattern(variants: Sequence[str]) -> Optional[re.Pattern]:
    if not variants:
        return None
    alternation = "|".join(re.escape(v) for v in variants)
    return re.compile(
        rf"\[\s*(?:{alternation})\s*\]|(-)(?:{alternation})(?![\w-])"
    )


def replace_fallback_with_token(class_name: str, fallback: str, token: str) -> str:
    """
    Replace bracketed or hyphen-prefixed fallback text with ``token``.

    ``[ #fff ]`` becomes ``token`` and ``-#fff`` becomes ``-token``. All
    variants are matched in a single pass so replaced text is never scanned
    again.
    """
    pattern = _variant_pattern(fallback_variants(fallback))
    if pattern is None:
        return class_name

    return pattern.sub(lambda m: f"{m.group(1) or ''}{token}", class_name)


def replace_var_expressions(class_name: str, name: str, token: str) -> str:
    pattern = re.compile(rf"var\(\s*{re.escape(name)}\s*\)")
    return pattern.sub(lambda m: token, class_name)


def _cleanup_bracket_tokens(class_name: str) -> str:
    return _BRACKET_WORD.sub(r"\1", class_name)


def apply_token_replacements(class_name: str, usages: Sequence[CssVarUsage]) -> str:
    """
    Rewrite a generated class so palette variables appear as tokens.

    Usages are handled in parse order; a usage whose variable has no palette
    token is skipped.

    Args:
        class_name: Normalised class fragment
        usages: ``var()`` usages parsed from the declaration value

    Returns:
        The class fragment with tokens injected
    """
    if not class_name or not usages:
        return class_name

    result = class_name
    for usage in usages:
        token = resolve_color_token_name(usage.name)
        if token is None:
            log.debug(f"No palette token for {usage.name}")
            continue

        if usage.fallback:
            result = replace_fallback_with_token(result, usage.fallback, token)

        result = replace_var_expressions(result, usage.name, token)

    return _cleanup_bracket_tokens(result)
