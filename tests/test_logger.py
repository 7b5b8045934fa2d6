import logging

import pytest

from cotton_unocss.core.logger import LOG_LEVEL_ENV, get_logger, level_from_env


class TestLevelFromEnv:
    def test_default_is_warning(self, monkeypatch):
        monkeypatch.delenv(LOG_LEVEL_ENV, raising=False)
        assert level_from_env() == logging.WARNING

    @pytest.mark.parametrize(
        "name, level",
        [("debug", logging.DEBUG), (" INFO ", logging.INFO), ("ERROR", logging.ERROR)],
    )
    def test_named_levels(self, monkeypatch, name, level):
        monkeypatch.setenv(LOG_LEVEL_ENV, name)
        assert level_from_env() == level

    @pytest.mark.parametrize("name", ["BASIC_FORMAT", "getLogger", "loud", ""])
    def test_unknown_names_fall_back_to_warning(self, monkeypatch, name):
        """Module attributes that are not levels must not reach setLevel."""
        monkeypatch.setenv(LOG_LEVEL_ENV, name)
        assert level_from_env() == logging.WARNING


def test_logger_names_are_rooted():
    assert get_logger("core.transform").name == "cotton_unocss.core.transform"
    assert get_logger("cotton_unocss.cli").name == "cotton_unocss.cli"
