# test_logger.py

import logging

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from tailwind_term.logger import Logger


class TestLogger:
    """Handler and level management for the logging wrapper."""

    NAME = "tailwind_term.tests.logger"

    def teardown_method(self):
        Logger(self.NAME)

    def underlying(self):
        return logging.getLogger(self.NAME)

    def test_disabled_logger_drops_debug(self):
        Logger(self.NAME)
        logger = self.underlying()
        assert logger.level == logging.WARNING
        assert all(isinstance(h, logging.NullHandler) for h in logger.handlers)

    def test_enabled_logger_writes_debug_to_stderr(self, capsys):
        log = Logger(self.NAME, logging_enabled=True)
        log.debug("visible")
        assert "DEBUG - visible" in capsys.readouterr().err

    def test_disabling_replaces_previous_configuration(self, capsys):
        Logger(self.NAME, logging_enabled=True)
        quiet = Logger(self.NAME)
        logger = self.underlying()
        assert logger.level == logging.WARNING
        assert len(logger.handlers) == 1
        assert isinstance(logger.handlers[0], logging.NullHandler)

        quiet.debug("hidden")
        assert capsys.readouterr().err == ""

    def test_reenabling_switches_log_file(self, tmp_path):
        Logger(self.NAME, True, str(tmp_path / "a.log")).debug("first")
        Logger(self.NAME, True, str(tmp_path / "b.log")).debug("second")
        assert "second" not in (tmp_path / "a.log").read_text()
        assert "second" in (tmp_path / "b.log").read_text()
        assert len(self.underlying().handlers) == 1

    def test_name(self):
        assert Logger(self.NAME).name == self.NAME
