import sys, logging
from typing import Optional
from functools import partial

LOG_FORMAT = '%(asctime)s - %(levelname)s - %(message)s'

class Logger:
    def __init__(self, name: str, logging_enabled: bool = False, log_file: Optional[str] = None):
        self._logger = logging.getLogger(name)
        # A new Logger fully replaces whatever the previous one configured
        for handler in list(self._logger.handlers):
            self._logger.removeHandler(handler)
            handler.close()

        if logging_enabled:
            # "-" or no file means the error stream
            if log_file and log_file != '-':
                handler = logging.FileHandler(log_file)
            else:
                handler = logging.StreamHandler(sys.stderr)
            handler.setFormatter(logging.Formatter(LOG_FORMAT))
            self._logger.addHandler(handler)
            self._logger.setLevel(logging.DEBUG)
        else:
            self._logger.addHandler(logging.NullHandler())
            self._logger.setLevel(logging.WARNING)

        # Dynamically create logging methods
        for level in ['debug', 'info', 'warning', 'error']:
            setattr(self, level, partial(self._log, level))

    @property
    def name(self) -> str:
        return self._logger.name

    def _log(self, level: str, msg: str, exc_info: Optional[bool] = None) -> None:
        getattr(self._logger, level)(msg, exc_info=exc_info)
