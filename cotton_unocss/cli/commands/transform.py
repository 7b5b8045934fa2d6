"""
Transform Command

Reads a style mapping (JSON object or CSS declaration text) and prints the
UnoCSS class list.
"""

from __future__ import annotations
from argparse import Namespace
from pathlib import Path
import sys

from ...core.css_utils import StyleInputError, load_style_input
from ...core.logger import get_logger
from ...core.settings import SettingsError, load_settings
from ...core.transform import TransformOptions, transform_to_atomic


log = get_logger(__name__)


def _read_input(source: str) -> str:
    if source == "-":
        return sys.stdin.read()
    path = Path(source)
    if not path.exists():
        raise StyleInputError(f"Input file does not exist: {path}")
    return path.read_text(encoding="utf-8")


def run(args: Namespace) -> None:
    """
    Run transform command.

    Args:
        args: Parsed command-line arguments
    """
    try:
        style = load_style_input(_read_input(args.input))
        settings = load_settings(Path(args.settings) if args.settings else None)
    except (StyleInputError, SettingsError) as e:
        log.error(str(e))
        raise SystemExit(1)

    log.info(f"Transforming {len(style)} declarations")
    result = transform_to_atomic(
        style,
        TransformOptions(is_rem=args.rem, prefix=args.prefix),
        settings=settings,
    )

    if args.show_css:
        sys.stdout.write(result.css_code + "\n\n")
    sys.stdout.write(result.uno + "\n")
