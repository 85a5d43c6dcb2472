# terminal.py

import shutil
import threading
from typing import Callable, Optional

import colorama

DEFAULT_WIDTH = 80

_ansi_enabled = False
_ansi_lock = threading.Lock()


def enable_ansi() -> bool:
    """
    Make the output stream interpret ANSI escape sequences.

    Only does work on consoles that need it (legacy Windows); safe to call
    any number of times. Returns True once the setup has run.
    """
    global _ansi_enabled
    with _ansi_lock:
        if not _ansi_enabled:
            colorama.just_fix_windows_console()
            _ansi_enabled = True
    return _ansi_enabled


def query_terminal_width(fallback: int = DEFAULT_WIDTH) -> int:
    """Ask the OS for the current column count."""
    return shutil.get_terminal_size((fallback, 24)).columns


class TerminalWidth:
    """
    Cached terminal width provider.

    The first access runs the query and the value is reused until
    ``refresh()`` is called, so a resize mid-run is not picked up.
    A custom query can be injected, which is how tests pin the width.
    """

    def __init__(self, query: Optional[Callable[[], int]] = None,
                 fallback: int = DEFAULT_WIDTH, cache: bool = True):
        if query is not None and not callable(query):
            raise TypeError("query must be callable")
        if fallback < 1:
            raise ValueError(f"fallback must be positive, got {fallback}")
        self.fallback = fallback
        self.cache = cache
        self._query = query or (lambda: query_terminal_width(self.fallback))
        self._width: Optional[int] = None
        self._lock = threading.Lock()

    @property
    def width(self) -> int:
        """Return terminal width."""
        if not self.cache:
            return self._resolve()
        with self._lock:
            if self._width is None:
                self._width = self._resolve()
            return self._width

    def refresh(self) -> int:
        """Drop the cached value and query again."""
        with self._lock:
            self._width = None
        return self.width

    def _resolve(self) -> int:
        try:
            columns = int(self._query())
        except (OSError, TypeError, ValueError):
            return self.fallback
        return columns if columns > 0 else self.fallback


class FixedWidth:
    """Width source that always reports the same column count."""

    def __init__(self, width: int):
        self._width = width

    @property
    def width(self) -> int:
        return self._width
