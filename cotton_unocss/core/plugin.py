"""
Inspector plugin surface.

The design tool inspector hands each code-generation request a style mapping
and its own options (``useRem``). The plugin renders the UnoCSS class list as
the "css" code block and provides no JavaScript output.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Optional

from .class_generator import ClassGenerator
from .settings import TransformSettings
from .transform import TransformOptions, transform_to_atomic

__all__ = [
    "CodeBlock",
    "Plugin",
    "PLUGIN",
    "transform_css_code",
]

PLUGIN_NAME = "@cotton/unocss"


def transform_css_code(
    style: Mapping[str, str],
    options: Optional[Mapping[str, Any]] = None,
    *,
    settings: Optional[TransformSettings] = None,
    generator: Optional[ClassGenerator] = None,
) -> str:
    """Render one inspector request; ``options`` uses the host's key names."""
    use_rem = bool((options or {}).get("useRem", False))
    result = transform_to_atomic(
        style,
        TransformOptions(is_rem=use_rem, prefix=""),
        settings=settings,
        generator=generator,
    )
    return result.uno


@dataclass(frozen=True)
class CodeBlock:
    title: str
    lang: str

    def transform(
        self,
        style: Mapping[str, str],
        options: Optional[Mapping[str, Any]] = None,
    ) -> str:
        return transform_css_code(style, options)


@dataclass(frozen=True)
class Plugin:
    name: str
    code: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        code: Dict[str, Any] = {}
        for lang_key, block in self.code.items():
            if isinstance(block, CodeBlock):
                code[lang_key] = {"title": block.title, "lang": block.lang}
            else:
                code[lang_key] = block
        return {"name": self.name, "code": code}


# Class lists are shown as plain text, not highlighted as CSS.
PLUGIN = Plugin(
    name=PLUGIN_NAME,
    code={
        "css": CodeBlock(title="UnoCSS", lang="text"),
        "js": False,
    },
)
