from __future__ import annotations
from argparse import Namespace
import sys

from ...core.color_tokens import COLOR_TOKEN_RULES, resolve_color_token_name


def run(args: Namespace) -> None:
    if not args.names:
        for rule in COLOR_TOKEN_RULES:
            sys.stdout.write(f"{rule.pattern.pattern}\n")
        return

    for name in args.names:
        token = resolve_color_token_name(name)
        sys.stdout.write(f"{name} -> {token or '-'}\n")
