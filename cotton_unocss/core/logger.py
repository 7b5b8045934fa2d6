from __future__ import annotations

import logging
import os
import sys

ROOT_LOGGER_NAME = "cotton_unocss"
LOG_LEVEL_ENV = "COTTON_UNOCSS_LOG_LEVEL"

_configured = False


def _configure_root() -> None:
    global _configured
    if _configured:
        return
    root = logging.getLogger(ROOT_LOGGER_NAME)
    if not root.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter("%(levelname)s: %(message)s"))
        root.addHandler(handler)
    root.setLevel(level_from_env())
    _configured = True


def level_from_env() -> int:
    """Level named by COTTON_UNOCSS_LOG_LEVEL; WARNING when unset or unknown."""
    level_name = os.environ.get(LOG_LEVEL_ENV, "WARNING").strip().upper()
    level = logging.getLevelName(level_name)
    if isinstance(level, int):
        return level
    return logging.WARNING


def get_logger(name: str) -> logging.Logger:
    """Return a logger below the package root, configuring the root once."""
    _configure_root()
    if name != ROOT_LOGGER_NAME and not name.startswith(ROOT_LOGGER_NAME + "."):
        name = f"{ROOT_LOGGER_NAME}.{name}"
    return logging.getLogger(name)


def set_level(level: int) -> None:
    _configure_root()
    logging.getLogger(ROOT_LOGGER_NAME).setLevel(level)
