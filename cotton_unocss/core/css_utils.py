from __future__ import annotations

import json
import re
from typing import Dict, List, Mapping

from .logger import get_logger

log = get_logger(__name__)

__all__ = [
    "StyleInputError",
    "format_css_code",
    "load_style_input",
    "parse_declarations",
    "strip_comments",
]

# Greedy on purpose: everything from the first /* to the last */ on a line goes.
_VALUE_COMMENT_PATTERN = re.compile(r"/\*.*\*/")
_BLOCK_COMMENT_PATTERN = re.compile(r"/\*.*?\*/", re.DOTALL)
_PROPERTY_NAME_PATTERN = re.compile(r"^-{0,2}[A-Za-z_][\w-]*$")


class StyleInputError(ValueError):
    """Raised when style input is neither a JSON object nor declaration text."""


def strip_comments(value: str) -> str:
    """Remove ``/* ... */`` comments from a declaration value."""
    return _VALUE_COMMENT_PATTERN.sub("", value)


def _split_top_level(text: str, separator: str) -> List[str]:
    chunks: List[str] = []
    depth = 0
    start = 0
    for index, char in enumerate(text):
        if char == "(":
            depth += 1
        elif char == ")":
            depth = max(depth - 1, 0)
        elif char == separator and depth == 0:
            chunks.append(text[start:index])
            start = index + 1
    chunks.append(text[start:])
    return chunks


def parse_declarations(text: str) -> Dict[str, str]:
    """
    Parse ``property: value;`` text into an ordered mapping.

    Semicolons inside parentheses do not end a declaration. Comments in front
    of a property name are dropped; comments inside a value are kept so the
    transform sees the value as authored. A repeated property keeps its first
    position and its last value.

    Args:
        text: Declaration block text, with or without surrounding braces

    Returns:
        Mapping of property name to raw value
    """
    body = text.strip()
    if body.startswith("{") and body.endswith("}"):
        body = body[1:-1]

    declarations: Dict[str, str] = {}
    for chunk in _split_top_level(body, ";"):
        name, sep, value = chunk.partition(":")
        name = _BLOCK_COMMENT_PATTERN.sub("", name).strip()
        if not sep or not name:
            if chunk.strip() and _BLOCK_COMMENT_PATTERN.sub("", chunk).strip():
                log.debug(f"Skipping malformed declaration '{chunk.strip()}'")
            continue
        if not _PROPERTY_NAME_PATTERN.match(name):
            log.warning(f"Skipping declaration with invalid property name '{name}'")
            continue
        declarations[name] = value.strip()

    return declarations


def load_style_input(text: str) -> Dict[str, str]:
    """
    Load a style mapping from JSON object text or CSS declaration text.

    Raises:
        StyleInputError: If JSON is given but is not an object of strings, or
            the text contains no declarations
    """
    stripped = text.strip()
    if not stripped:
        raise StyleInputError("Style input is empty")

    if stripped.startswith(("{", "[")):
        try:
            data = json.loads(stripped)
        except json.JSONDecodeError:
            data = None
        if data is not None:
            if not isinstance(data, dict):
                raise StyleInputError("JSON style input must be an object")
            bad_keys = [k for k, v in data.items() if not isinstance(v, str)]
            if bad_keys:
                raise StyleInputError(
                    f"JSON style values must be strings: {', '.join(bad_keys)}"
                )
            return dict(data)

    declarations = parse_declarations(stripped)
    if not declarations:
        raise StyleInputError("No CSS declarations found in style input")
    return declarations


def format_css_code(declarations: Mapping[str, str]) -> str:
    """Render ``key: value;`` lines joined by newlines."""
    return "\n".join(f"{key}: {value};" for key, value in declarations.items())
