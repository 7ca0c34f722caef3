"""Configuration for layout_styles.

Environment Variables:
    LAYOUT_STYLES_LOG_LEVEL            Logging verbosity            (default: INFO)
                                       Values: DEBUG, INFO, WARNING, ERROR, CRITICAL
    LAYOUT_STYLES_PREDEFINED_STYLES    YAML seed file for predefined styles
                                       (default: bundled content/predefined_styles.yaml)
    LAYOUT_STYLES_EDIT_MODE            Edit mode used when a caller passes none
                                       Values: silent, auto_unlink, interactive, update_shared
                                       (camelCase spellings such as autoUnlink accepted)
                                       (default: interactive)
    LAYOUT_STYLES_EXPORT_DIR           Directory the CLI writes exports to (default: cwd)

Invalid values fall back to the default with a warning.
"""

import logging
import os
from pathlib import Path
from typing import Optional

from layout_styles.logger import Logger, session_logger

# =============================================================================
# CONFIGURATION DEFAULTS
# =============================================================================

ENV_PREFIX = "LAYOUT_STYLES"

DEFAULT_LOG_LEVEL = "INFO"
DEFAULT_EDIT_MODE = "interactive"
DEFAULT_PREDEFINED_STYLES_FILE = Path(__file__).parent / "content" / "predefined_styles.yaml"

VALID_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
VALID_EDIT_MODES = ("silent", "auto_unlink", "interactive", "update_shared")


def _env(name: str) -> Optional[str]:
    raw = os.environ.get(f"{ENV_PREFIX}_{name}")
    if raw is None or raw.strip() == "":
        return None
    return raw.strip()


def _edit_mode_name(raw: str) -> str:
    """Map ``autoUnlink`` / ``auto-unlink`` / ``AUTO_UNLINK`` to ``auto_unlink``."""
    key = raw.replace("-", "").replace("_", "").lower()
    return {mode.replace("_", ""): mode for mode in VALID_EDIT_MODES}.get(key, raw)


def _parse_choice_env(name: str, default: str, choices: tuple, logger: Logger,
                      normalise=str.lower) -> str:
    """Parse an enumerated value from an environment variable with fallback."""
    raw = _env(name)
    if raw is None:
        return default
    value = normalise(raw)
    if value not in choices:
        logger.warning(
            "config.invalid_env",
            variable=f"{ENV_PREFIX}_{name}",
            provided_value=raw,
            default_value=default,
        )
        return default
    return value


class Config:
    """Reads configuration from the environment on every call."""

    @classmethod
    def get_log_level_name(cls, logger: Logger = session_logger) -> str:
        return _parse_choice_env("LOG_LEVEL", DEFAULT_LOG_LEVEL, VALID_LOG_LEVELS, logger,
                                 normalise=str.upper)

    @classmethod
    def get_log_level(cls, logger: Logger = session_logger) -> int:
        return getattr(logging, cls.get_log_level_name(logger))

    @classmethod
    def get_edit_mode(cls, logger: Logger = session_logger) -> str:
        return _parse_choice_env("EDIT_MODE", DEFAULT_EDIT_MODE, VALID_EDIT_MODES, logger,
                                 normalise=_edit_mode_name)

    @classmethod
    def get_predefined_styles_file(cls) -> Path:
        raw = _env("PREDEFINED_STYLES")
        if raw is None:
            return DEFAULT_PREDEFINED_STYLES_FILE
        return Path(raw).expanduser()

    @classmethod
    def get_export_dir(cls) -> Path:
        raw = _env("EXPORT_DIR")
        if raw is None:
            return Path.cwd()
        return Path(raw).expanduser()

    @classmethod
    def summary(cls) -> dict:
        """Current configuration values, for diagnostics."""
        return {
            "log_level": cls.get_log_level_name(),
            "edit_mode": cls.get_edit_mode(),
            "predefined_styles_file": str(cls.get_predefined_styles_file()),
            "export_dir": str(cls.get_export_dir()),
        }
