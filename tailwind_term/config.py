# config.py

import os
from dataclasses import dataclass
from typing import Mapping, Optional

_TRUTHY = {'1', 'true', 'yes', 'on'}


def _flag(value: Optional[str]) -> bool:
    return (value or '').strip().lower() in _TRUTHY


@dataclass
class Settings:
    """
    Runtime options for a Tailwind instance.

    debug enables the unknown-utility diagnostics that a plain run keeps
    silent; fallback_width is used when the terminal size is unavailable.
    """
    debug: bool = False
    log_file: Optional[str] = None
    fallback_width: int = 80
    enable_ansi: bool = True

    def __post_init__(self):
        if self.fallback_width < 1:
            raise ValueError(f"fallback_width must be positive, got {self.fallback_width}")

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        """Build settings from TW_* environment variables."""
        env = os.environ if environ is None else environ
        settings = cls(
            debug=_flag(env.get('TW_DEBUG')),
            log_file=env.get('TW_LOG_FILE') or None,
            enable_ansi=not _flag(env.get('TW_NO_ANSI_SETUP')),
        )
        width = env.get('TW_FALLBACK_WIDTH', '').strip()
        if width.isdecimal() and int(width) > 0:
            settings.fallback_width = int(width)
        return settings
