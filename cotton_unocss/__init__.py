"""
UnoCSS code generation for design tool inspectors.

Turns resolved CSS declarations into atomic UnoCSS classes, keeping palette
variables as theme tokens.
"""

from .core.color_tokens import resolve_color_token_name
from .core.css_vars import CssVarUsage, parse_css_vars, replace_var_fallbacks
from .core.normalizer import format_number, normalize_uno_class
from .core.plugin import PLUGIN, transform_css_code
from .core.token_injector import apply_token_replacements
from .core.transform import AtomicResult, TransformOptions, transform_to_atomic

__version__ = "0.3.0"

__all__ = [
    "AtomicResult",
    "CssVarUsage",
    "PLUGIN",
    "TransformOptions",
    "apply_token_replacements",
    "format_number",
    "normalize_uno_class",
    "parse_css_vars",
    "replace_var_fallbacks",
    "resolve_color_token_name",
    "transform_css_code",
    "transform_to_atomic",
]
