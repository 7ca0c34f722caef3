"""Console logger with its own stdout handler."""

import logging
import sys

from layout_styles.logger.default_logger import DefaultLogger

_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


class ConsoleLogger(DefaultLogger):
    """Logger that writes to stdout regardless of root logger configuration."""

    def __init__(self, name: str = "layout_styles.console", level: int = logging.INFO):
        super().__init__(name=name, level=level)
        if not self._logger.handlers:
            handler = logging.StreamHandler(sys.stdout)
            handler.setFormatter(logging.Formatter(_FORMAT))
            self._logger.addHandler(handler)
        self._logger.propagate = False
