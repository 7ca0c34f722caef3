"""Logger interface used across layout_styles."""

from abc import ABC, abstractmethod
from typing import Any


class Logger(ABC):
    """Minimal structured logger.

    Implementations accept a human readable message plus arbitrary keyword
    fields which are rendered next to the message.
    """

    @abstractmethod
    def debug(self, message: str, **kwargs: Any) -> None:
        pass

    @abstractmethod
    def info(self, message: str, **kwargs: Any) -> None:
        pass

    @abstractmethod
    def warning(self, message: str, **kwargs: Any) -> None:
        pass

    @abstractmethod
    def error(self, message: str, **kwargs: Any) -> None:
        pass

    @abstractmethod
    def critical(self, message: str, **kwargs: Any) -> None:
        pass
