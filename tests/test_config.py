# test_config.py

import pytest

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from tailwind_term.config import Settings


class TestSettings:
    """Environment driven configuration."""

    def test_defaults(self):
        settings = Settings.from_env({})
        assert settings == Settings()
        assert not settings.debug
        assert settings.fallback_width == 80
        assert settings.enable_ansi

    @pytest.mark.parametrize("value", ["1", "true", "YES", " on "])
    def test_debug_flag(self, value):
        assert Settings.from_env({"TW_DEBUG": value}).debug

    @pytest.mark.parametrize("value", ["0", "false", "", "maybe"])
    def test_debug_flag_off(self, value):
        assert not Settings.from_env({"TW_DEBUG": value}).debug

    def test_log_file_and_ansi_setup(self):
        settings = Settings.from_env({"TW_LOG_FILE": "tw.log", "TW_NO_ANSI_SETUP": "1"})
        assert settings.log_file == "tw.log"
        assert not settings.enable_ansi

    @pytest.mark.parametrize("value, expected", [("120", 120), ("abc", 80), ("0", 80), ("-4", 80)])
    def test_fallback_width(self, value, expected):
        assert Settings.from_env({"TW_FALLBACK_WIDTH": value}).fallback_width == expected

    def test_rejects_non_positive_width(self):
        with pytest.raises(ValueError):
            Settings(fallback_width=0)
