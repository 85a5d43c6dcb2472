# test_terminal.py

import pytest
from unittest.mock import Mock, patch

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from tailwind_term import terminal
from tailwind_term.terminal import DEFAULT_WIDTH, TerminalWidth


class TestTerminalWidth:
    """Cached width provider."""

    def test_queries_once_and_caches(self):
        query = Mock(return_value=132)
        source = TerminalWidth(query)
        assert source.width == 132
        assert source.width == 132
        query.assert_called_once()

    def test_refresh_requeries(self):
        query = Mock(side_effect=[100, 60])
        source = TerminalWidth(query)
        assert source.width == 100
        assert source.refresh() == 60
        assert source.width == 60

    def test_uncached_queries_every_time(self):
        query = Mock(side_effect=[100, 60])
        source = TerminalWidth(query, cache=False)
        assert source.width == 100
        assert source.width == 60

    @pytest.mark.parametrize("query", [
        Mock(side_effect=OSError("no tty")),
        Mock(return_value=0),
        Mock(return_value=None),
    ])
    def test_falls_back_when_unavailable(self, query):
        assert TerminalWidth(query).width == DEFAULT_WIDTH
        assert TerminalWidth(query, fallback=100).width == 100

    def test_default_query_uses_os_size(self):
        size = Mock(columns=97)
        with patch("tailwind_term.terminal.shutil.get_terminal_size", return_value=size) as get_size:
            assert TerminalWidth().width == 97
        get_size.assert_called_once_with((DEFAULT_WIDTH, 24))

    def test_rejects_bad_configuration(self):
        with pytest.raises(TypeError):
            TerminalWidth(query=42)
        with pytest.raises(ValueError):
            TerminalWidth(fallback=0)


class TestEnableAnsi:
    """One-time console setup."""

    def setup_method(self):
        terminal._ansi_enabled = False

    def teardown_method(self):
        terminal._ansi_enabled = False

    def test_runs_setup_once(self):
        with patch("tailwind_term.terminal.colorama.just_fix_windows_console") as fix:
            assert terminal.enable_ansi()
            assert terminal.enable_ansi()
        fix.assert_called_once()
