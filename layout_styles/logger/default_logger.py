"""Default logger backed by the standard logging module."""

import logging
from typing import Any, Dict

from layout_styles.logger.interface import Logger


def format_fields(message: str, fields: Dict[str, Any]) -> str:
    """Append structured fields to a message as key=value pairs."""
    if not fields:
        return message
    rendered = " ".join(f"{key}={value}" for key, value in fields.items())
    return f"{message} | {rendered}"


class DefaultLogger(Logger):
    """Logger that forwards to ``logging.getLogger(name)``.

    Records propagate to the root logger, so whatever handlers the host
    application (or pytest's caplog) installs will see them.
    """

    def __init__(self, name: str = "layout_styles", level: int = logging.INFO):
        self._logger = logging.getLogger(name)
        self._logger.setLevel(level)

    @property
    def name(self) -> str:
        return self._logger.name

    def _log(self, level: int, message: str, **kwargs: Any) -> None:
        if self._logger.isEnabledFor(level):
            self._logger.log(level, format_fields(message, kwargs))

    def debug(self, message: str, **kwargs: Any) -> None:
        self._log(logging.DEBUG, message, **kwargs)

    def info(self, message: str, **kwargs: Any) -> None:
        self._log(logging.INFO, message, **kwargs)

    def warning(self, message: str, **kwargs: Any) -> None:
        self._log(logging.WARNING, message, **kwargs)

    def error(self, message: str, **kwargs: Any) -> None:
        self._log(logging.ERROR, message, **kwargs)

    def critical(self, message: str, **kwargs: Any) -> None:
        self._log(logging.CRITICAL, message, **kwargs)
