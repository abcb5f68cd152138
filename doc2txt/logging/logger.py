import logging
import sys
from typing import TextIO


class Log:
    """Centralized logging for the converter, one named logger for every module."""

    _logger: logging.Logger = logging.getLogger("doc2txt")
    _FORMAT = "%(asctime)s [%(levelname)s] %(message)s"

    @classmethod
    def configure(cls, log_level: str, stream: TextIO | None = None) -> None:
        """Set the level and attach a single handler writing to stream (stdout by default).

        Calling it again replaces the previous handler instead of stacking another one.
        """
        cls._logger.setLevel(log_level.upper())
        cls._logger.propagate = False
        for handler in list(cls._logger.handlers):
            cls._logger.removeHandler(handler)
        handler = logging.StreamHandler(stream if stream is not None else sys.stdout)
        handler.setFormatter(logging.Formatter(cls._FORMAT))
        cls._logger.addHandler(handler)

    @classmethod
    def info(cls, message: str, **kwargs: object) -> None:
        cls._logger.info(message, extra=kwargs)

    @classmethod
    def error(cls, message: str, **kwargs: object) -> None:
        cls._logger.error(message, extra=kwargs)

    @classmethod
    def warning(cls, message: str, **kwargs: object) -> None:
        cls._logger.warning(message, extra=kwargs)

    @classmethod
    def debug(cls, message: str, **kwargs: object) -> None:
        cls._logger.debug(message, extra=kwargs)
