"""
Built-in UnoCSS class generator.

The transform pipeline accepts any callable ``(declaration, is_rem) ->
Sequence[str]`` and only uses the first candidate it returns. This module
provides the default: a property table covering the declarations a design
tool inspector emits (box model, sizing, flex layout, typography, colours,
borders). Anything it does not know becomes a ``[property:value]``
arbitrary-property class.
"""

from __future__ import annotations

import re
from typing import Callable, Dict, List, Optional, Sequence, Tuple

from .logger import get_logger
from .normalizer import format_number
from .value_parsers import (
    expand_shorthand_box,
    is_keyword,
    parse_float_value,
    split_top_level,
)

log = get_logger(__name__)

__all__ = [
    "ClassGenerator",
    "BaseClassGenerator",
    "UnoClassGenerator",
    "default_generator",
]

ClassGenerator = Callable[[str, bool], Sequence[str]]

_IMPORTANT = re.compile(r"\s*!important\s*$", re.IGNORECASE)
_COMMA_SPACE = re.compile(r"\s*,\s*")
_WHITESPACE = re.compile(r"\s+")

LENGTH_PREFIXES: Dict[str, str] = {
    "width": "w",
    "height": "h",
    "min-width": "min-w",
    "max-width": "max-w",
    "min-height": "min-h",
    "max-height": "max-h",
    "top": "top",
    "right": "right",
    "bottom": "bottom",
    "left": "left",
    "inset": "inset",
    "gap": "gap",
    "row-gap": "gap-y",
    "column-gap": "gap-x",
    "flex-basis": "basis",
    "font-size": "text",
    "line-height": "lh",
    "letter-spacing": "tracking",
    "text-indent": "indent",
    "padding-top": "pt",
    "padding-right": "pr",
    "padding-bottom": "pb",
    "padding-left": "pl",
    "margin-top": "mt",
    "margin-right": "mr",
    "margin-bottom": "mb",
    "margin-left": "ml",
    "border-radius": "rounded",
    "border-top-left-radius": "rounded-tl",
    "border-top-right-radius": "rounded-tr",
    "border-bottom-right-radius": "rounded-br",
    "border-bottom-left-radius": "rounded-bl",
}

# Border widths stay in design units; rem conversion does not apply.
BORDER_WIDTH_PREFIXES: Dict[str, str] = {
    "border-width": "border",
    "border-top-width": "border-t",
    "border-right-width": "border-r",
    "border-bottom-width": "border-b",
    "border-left-width": "border-l",
    "outline-width": "outline",
}

COLOR_PREFIXES: Dict[str, str] = {
    "color": "text",
    "background-color": "bg",
    "background": "bg",
    "border-color": "border",
    "border-top-color": "border-t",
    "border-right-color": "border-r",
    "border-bottom-color": "border-b",
    "border-left-color": "border-l",
    "outline-color": "outline",
    "fill": "fill",
    "stroke": "stroke",
    "caret-color": "caret",
}

BORDER_SIDES: Dict[str, str] = {
    "border": "border",
    "border-top": "border-t",
    "border-right": "border-r",
    "border-bottom": "border-b",
    "border-left": "border-l",
}

BORDER_STYLES = {"solid", "dashed", "dotted", "double", "none", "hidden"}

# (all sides, top, right, bottom, left, vertical, horizontal)
BOX_SHORTHANDS: Dict[str, Tuple[str, ...]] = {
    "padding": ("p", "pt", "pr", "pb", "pl", "py", "px"),
    "margin": ("m", "mt", "mr", "mb", "ml", "my", "mx"),
}

FLEX_ALIGNMENT = {
    "flex-start": "start",
    "flex-end": "end",
    "space-between": "between",
    "space-around": "around",
    "space-evenly": "evenly",
}

KEYWORD_CLASSES: Dict[str, Dict[str, str]] = {
    "display": {"none": "hidden"},
    "flex-direction": {
        "row": "flex-row",
        "row-reverse": "flex-row-reverse",
        "column": "flex-col",
        "column-reverse": "flex-col-reverse",
    },
    "flex-wrap": {
        "wrap": "flex-wrap",
        "nowrap": "flex-nowrap",
        "wrap-reverse": "flex-wrap-reverse",
    },
    "font-style": {"italic": "italic", "normal": "not-italic"},
    "text-decoration": {
        "underline": "underline",
        "line-through": "line-through",
        "overline": "overline",
        "none": "no-underline",
    },
    "text-transform": {
        "uppercase": "uppercase",
        "lowercase": "lowercase",
        "capitalize": "capitalize",
        "none": "normal-case",
    },
    "text-overflow": {"ellipsis": "text-ellipsis", "clip": "text-clip"},
    "visibility": {"visible": "visible", "hidden": "invisible"},
    "box-sizing": {"border-box": "box-border", "content-box": "box-content"},
}

KEYWORD_PREFIXES: Dict[str, str] = {
    "align-items": "items",
    "align-self": "self",
    "align-content": "content",
    "justify-content": "justify",
    "justify-items": "justify-items",
    "text-align": "text",
    "vertical-align": "align",
    "overflow": "overflow",
    "overflow-x": "overflow-x",
    "overflow-y": "overflow-y",
    "white-space": "whitespace",
    "word-break": "break",
    "cursor": "cursor",
    "pointer-events": "pointer-events",
    "border-style": "border",
    "object-fit": "object",
    "font-weight": "font",
    "z-index": "z",
    "order": "order",
}

ARBITRARY_PREFIXES: Dict[str, str] = {
    "box-shadow": "shadow",
    "font-family": "font",
    "aspect-ratio": "aspect",
    "transform": "transform",
    "transition": "transition",
    "grid-template-columns": "grid-cols",
    "grid-template-rows": "grid-rows",
    "backdrop-filter": "backdrop",
    "filter": "filter",
}


def arbitrary_value(value: str) -> str:
    """Wrap a value for UnoCSS arbitrary syntax, spaces encoded as ``_``."""
    compact = _COMMA_SPACE.sub(",", value.strip())
    return f"[{_WHITESPACE.sub('_', compact)}]"


class BaseClassGenerator:
    """Base class for declaration to class-name generators."""

    def generate(self, declaration: str, is_rem: bool = False) -> List[str]:
        """Return candidate class names for ``property: value``, best first."""
        raise NotImplementedError

    def __call__(self, declaration: str, is_rem: bool = False) -> List[str]:
        return self.generate(declaration, is_rem)


class UnoClassGenerator(BaseClassGenerator):
    """Property-table generator following UnoCSS preset naming."""

    def __init__(self, root_font_size: float = 16.0) -> None:
        self.root_font_size = root_font_size
        self._handlers: Dict[str, Callable[[str, str, bool], Optional[str]]] = {}
        for name in LENGTH_PREFIXES:
            self._handlers[name] = self._length_property
        for name in BORDER_WIDTH_PREFIXES:
            self._handlers[name] = self._border_width_property
        for name in COLOR_PREFIXES:
            self._handlers[name] = self._color_property
        for name in BORDER_SIDES:
            self._handlers[name] = self._border_shorthand
        for name in BOX_SHORTHANDS:
            self._handlers[name] = self._box_shorthand
        for name in KEYWORD_CLASSES:
            self._handlers[name] = self._keyword_class
        for name in KEYWORD_PREFIXES:
            self._handlers[name] = self._keyword_prefixed
        for name in ARBITRARY_PREFIXES:
            self._handlers[name] = self._arbitrary_property
        self._handlers["display"] = self._display
        self._handlers["position"] = self._position
        self._handlers["opacity"] = self._opacity
        self._handlers["flex"] = self._flex
        self._handlers["flex-grow"] = self._flex_factor
        self._handlers["flex-shrink"] = self._flex_factor

    def generate(self, declaration: str, is_rem: bool = False) -> List[str]:
        prop, sep, value = declaration.partition(":")
        prop = prop.strip().lower()
        value = value.strip().rstrip(";").strip()
        if not sep or not prop or not value:
            return []

        important = bool(_IMPORTANT.search(value))
        value = _IMPORTANT.sub("", value)
        if not value:
            return []

        fallback = f"[{prop}:{arbitrary_value(value)[1:-1]}]"
        handler = self._handlers.get(prop)
        primary = handler(prop, value, is_rem) if handler else None
        if primary is None:
            log.debug(f"No class rule for '{prop}', using arbitrary property")

        candidates = [c for c in (primary, fallback) if c]
        candidates = list(dict.fromkeys(candidates))
        if important:
            candidates = [
                " ".join(f"!{part}" for part in c.split(" ")) for c in candidates
            ]
        return candidates

    # -- value helpers -------------------------------------------------

    def _length(self, value: str, is_rem: bool) -> Tuple[str, bool]:
        """Return ``(text, negative)`` for a length value."""
        parsed = parse_float_value(value)
        if parsed is not None:
            if is_rem:
                parsed = parsed.to_rem(self.root_font_size)
            return str(parsed.absolute()), parsed.is_negative
        if is_keyword(value):
            return value, False
        return arbitrary_value(value), False

    def _length_class(self, prefix: str, value: str, is_rem: bool) -> str:
        text, negative = self._length(value, is_rem)
        return f"{'-' if negative else ''}{prefix}-{text}"

    @staticmethod
    def _color_class(prefix: str, value: str) -> str:
        if is_keyword(value):
            return f"{prefix}-{value}"
        return f"{prefix}-{arbitrary_value(value)}"

    # -- handlers ------------------------------------------------------

    def _length_property(self, prop: str, value: str, is_rem: bool) -> Optional[str]:
        if len(split_top_level(value)) != 1:
            return f"{LENGTH_PREFIXES[prop]}-{arbitrary_value(value)}"
        return self._length_class(LENGTH_PREFIXES[prop], value, is_rem)

    def _border_width_property(
        self, prop: str, value: str, is_rem: bool
    ) -> Optional[str]:
        if len(split_top_level(value)) != 1:
            return f"{BORDER_WIDTH_PREFIXES[prop]}-{arbitrary_value(value)}"
        return self._length_class(BORDER_WIDTH_PREFIXES[prop], value, False)

    def _color_property(self, prop: str, value: str, is_rem: bool) -> Optional[str]:
        return self._color_class(COLOR_PREFIXES[prop], value)

    def _box_shorthand(self, prop: str, value: str, is_rem: bool) -> Optional[str]:
        parts = split_top_level(value)
        if not parts:
            return None
        every, top_p, right_p, bottom_p, left_p, y_p, x_p = BOX_SHORTHANDS[prop]
        top, right, bottom, left = expand_shorthand_box(parts)

        if top == right == bottom == left:
            return self._length_class(every, top, is_rem)
        if top == bottom and left == right:
            return " ".join(
                [
                    self._length_class(y_p, top, is_rem),
                    self._length_class(x_p, left, is_rem),
                ]
            )
        return " ".join(
            [
                self._length_class(top_p, top, is_rem),
                self._length_class(right_p, right, is_rem),
                self._length_class(bottom_p, bottom, is_rem),
                self._length_class(left_p, left, is_rem),
            ]
        )

    def _border_shorthand(self, prop: str, value: str, is_rem: bool) -> Optional[str]:
        prefix = BORDER_SIDES[prop]
        classes: List[str] = []
        for part in split_top_level(value):
            if part.lower() in BORDER_STYLES:
                classes.append(f"{prefix}-{part.lower()}")
            elif parse_float_value(part) is not None:
                classes.append(self._length_class(prefix, part, False))
            else:
                classes.append(self._color_class(prefix, part))
        return " ".join(classes) or None

    def _keyword_class(self, prop: str, value: str, is_rem: bool) -> Optional[str]:
        return KEYWORD_CLASSES[prop].get(value.lower())

    def _keyword_prefixed(self, prop: str, value: str, is_rem: bool) -> Optional[str]:
        prefix = KEYWORD_PREFIXES[prop]
        lowered = value.lower()
        if prop.startswith(("align-", "justify-")):
            lowered = FLEX_ALIGNMENT.get(lowered, lowered)
        if lowered.startswith("-") and parse_float_value(lowered) is not None:
            return f"-{prefix}-{lowered[1:]}"
        if is_keyword(lowered) or parse_float_value(lowered) is not None:
            return f"{prefix}-{lowered}"
        return f"{prefix}-{arbitrary_value(value)}"

    def _arbitrary_property(
        self, prop: str, value: str, is_rem: bool
    ) -> Optional[str]:
        if value.lower() == "none":
            return f"{ARBITRARY_PREFIXES[prop]}-none"
        return f"{ARBITRARY_PREFIXES[prop]}-{arbitrary_value(value)}"

    def _display(self, prop: str, value: str, is_rem: bool) -> Optional[str]:
        lowered = value.lower()
        mapped = KEYWORD_CLASSES["display"].get(lowered)
        if mapped:
            return mapped
        return lowered if is_keyword(lowered) else None

    def _position(self, prop: str, value: str, is_rem: bool) -> Optional[str]:
        lowered = value.lower()
        return lowered if is_keyword(lowered) else None

    def _opacity(self, prop: str, value: str, is_rem: bool) -> Optional[str]:
        parsed = parse_float_value(value)
        if parsed is None:
            return None
        if parsed.unit == "%":
            return f"op-{format_number(abs(parsed.value))}"
        return f"op-{format_number(abs(parsed.value) * 100)}"

    def _flex(self, prop: str, value: str, is_rem: bool) -> Optional[str]:
        parsed = parse_float_value(value)
        if parsed is not None and parsed.unit is None:
            return f"flex-{parsed}"
        if value.lower() in {"auto", "initial", "none"}:
            return f"flex-{value.lower()}"
        return f"flex-{arbitrary_value(value)}"

    def _flex_factor(self, prop: str, value: str, is_rem: bool) -> Optional[str]:
        prefix = "grow" if prop == "flex-grow" else "shrink"
        parsed = parse_float_value(value)
        if parsed is None or parsed.unit is not None:
            return None
        if parsed.value == 1:
            return prefix
        return f"{prefix}-{parsed}"


default_generator = UnoClassGenerator()
