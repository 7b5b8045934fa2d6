from __future__ import annotations

import json
import os
from functools import lru_cache
from pathlib import Path
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .logger import get_logger

log = get_logger(__name__)

__all__ = [
    "DEFAULT_SETTINGS_PATH",
    "SETTINGS_ENV",
    "SettingsError",
    "TransformSettings",
    "load_settings",
    "settings_path",
]

SETTINGS_ENV = "COTTON_UNOCSS_SETTINGS"
DEFAULT_SETTINGS_PATH = Path(__file__).resolve().parent.parent / "settings.json"


class SettingsError(ValueError):
    """Raised when a settings file cannot be read or validated."""


class TransformSettings(BaseModel):
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    # Style keys that never produce classes or css output
    no_need_styles_key: List[str] = Field(
        default_factory=list, alias="noNeedStylesKey"
    )

    def is_ignored(self, key: str) -> bool:
        return key in self.no_need_styles_key


def settings_path(path: Optional[Path] = None) -> Path:
    """
    Resolve which settings file to use.

    An explicit path wins, then the COTTON_UNOCSS_SETTINGS environment
    variable, then the settings.json shipped with the package.
    """
    if path is not None:
        return Path(path)
    env_path = os.environ.get(SETTINGS_ENV)
    if env_path:
        log.debug(f"Using settings from {SETTINGS_ENV}: {env_path}")
        return Path(env_path)
    return DEFAULT_SETTINGS_PATH


@lru_cache(maxsize=None)
def _load_cached(resolved: Path) -> TransformSettings:
    try:
        data = json.loads(resolved.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as exc:
        raise SettingsError(f"Cannot read settings file {resolved}: {exc}") from exc

    try:
        settings = TransformSettings.model_validate(data)
    except ValidationError as exc:
        raise SettingsError(f"Invalid settings file {resolved}: {exc}") from exc

    log.debug(
        f"Loaded {len(settings.no_need_styles_key)} ignored style keys from {resolved}"
    )
    return settings


def load_settings(path: Optional[Path] = None) -> TransformSettings:
    return _load_cached(settings_path(path).resolve())
