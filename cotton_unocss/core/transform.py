"""
Style mapping to atomic UnoCSS classes.

Per declaration: strip comments, swap ``var()`` usages for their fallbacks,
ask the class generator for a class, normalise numbers onto the spacing scale
and put palette tokens back in place of the fallback colours.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Mapping, Optional

from .class_generator import ClassGenerator, default_generator
from .css_utils import format_css_code, strip_comments
from .css_vars import CssVarUsage, parse_css_vars, replace_var_fallbacks
from .logger import get_logger
from .normalizer import normalize_uno_class
from .settings import TransformSettings, load_settings
from .token_injector import apply_token_replacements

log = get_logger(__name__)

__all__ = [
    "AtomicResult",
    "PreparedDeclaration",
    "TransformOptions",
    "prepare_declaration",
    "transform_to_atomic",
]


@dataclass(frozen=True)
class TransformOptions:
    is_rem: bool = False
    prefix: str = ""


@dataclass
class PreparedDeclaration:
    """Intermediate state for one declaration within a single transform."""

    key: str
    css_value: str
    uno_value: str
    css_vars: List[CssVarUsage] = field(default_factory=list)
    has_px: bool = False
    uno_class: Optional[str] = None

    def to_class(self) -> str:
        """Normalised, token-injected class fragment ('' when none)."""
        normalized = normalize_uno_class(self.uno_class or "", self.has_px)
        if not normalized:
            return ""
        return apply_token_replacements(normalized, self.css_vars)


@dataclass(frozen=True)
class AtomicResult:
    css_code: str
    uno: str

    @property
    def class_list(self) -> str:
        return self.uno


def prepare_declaration(
    key: str,
    value: str,
    *,
    is_rem: bool = False,
    generator: Optional[ClassGenerator] = None,
) -> PreparedDeclaration:
    generate = generator or default_generator
    css_value = strip_comments(value).strip()
    css_vars = parse_css_vars(css_value)
    uno_value = replace_var_fallbacks(css_value, css_vars).strip()

    candidates = generate(f"{key}: {uno_value}", is_rem)
    uno_class = candidates[0] if candidates else None
    if not uno_class:
        log.debug(f"No class generated for '{key}: {uno_value}'")

    return PreparedDeclaration(
        key=key,
        css_value=css_value,
        uno_value=uno_value,
        css_vars=css_vars,
        has_px="px" in uno_value,
        uno_class=uno_class,
    )


def transform_to_atomic(
    style: Mapping[str, str],
    options: Optional[TransformOptions] = None,
    *,
    settings: Optional[TransformSettings] = None,
    generator: Optional[ClassGenerator] = None,
) -> AtomicResult:
    """
    Convert a style mapping into a UnoCSS class list.

    Args:
        style: Property name to raw value, in declaration order
        options: rem conversion flag and class prefix
        settings: Ignore-list settings; the packaged settings when omitted
        generator: Class generator callable; the built-in one when omitted

    The prefix is added once per declaration fragment. A fragment holding
    several classes (``py-8 px-16`` from a padding shorthand) gets it only on
    its first class.

    Returns:
        AtomicResult with the css block and the space-joined class list
    """
    options = options or TransformOptions()
    settings = settings if settings is not None else load_settings()

    prepared: List[PreparedDeclaration] = []
    for key, value in style.items():
        if settings.is_ignored(key):
            log.debug(f"Ignoring style key '{key}'")
            continue
        prepared.append(
            prepare_declaration(
                key, value, is_rem=options.is_rem, generator=generator
            )
        )

    css_code = format_css_code({item.key: item.css_value for item in prepared})

    classes = [item.to_class() for item in prepared]
    uno = " ".join(f"{options.prefix}{cls}" for cls in classes if cls)

    log.debug(f"Transformed {len(prepared)} declarations into '{uno}'")
    return AtomicResult(css_code=css_code, uno=uno)
