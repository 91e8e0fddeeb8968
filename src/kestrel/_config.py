"""Library settings: Settings, init() and get_settings()."""

from __future__ import annotations

import os
from dataclasses import dataclass

from kestrel._logging import configure_logging, get_logger

__all__ = [
    'Settings',
    'get_settings',
    'init',
]

_logger = get_logger(__name__)


@dataclass(frozen=True)
class Settings:
    """Settings for kestrel.

    Attributes:
        log_level: Logging level (e.g. "DEBUG", "INFO"). None = leave logging alone.
        json_logs: Emit JSON log lines when True, console output otherwise.
    """

    log_level: str | None = None
    json_logs: bool = True


_settings: Settings | None = None


def _detect_log_level() -> str | None:
    """Read KESTREL_LOG_LEVEL; empty or unset means no level."""
    level = os.environ.get('KESTREL_LOG_LEVEL', '').strip()
    return level.upper() or None


def _detect_json_logs() -> bool:
    """Read KESTREL_LOG_FORMAT ("json" or "console"), defaulting to JSON."""
    fmt = os.environ.get('KESTREL_LOG_FORMAT', '').strip().lower()
    if fmt == 'console':
        return False
    if fmt and fmt != 'json':
        _logger.warning('unknown_log_format', value=fmt, fallback='json')
    return True


def init(log_level: str | None = None, json_logs: bool | None = None) -> Settings:
    """Initialize kestrel settings, configuring logging when a level is known.

    Unspecified arguments are read from the environment.

    Args:
        log_level: Logging level. Falls back to KESTREL_LOG_LEVEL.
        json_logs: JSON output toggle. Falls back to KESTREL_LOG_FORMAT.

    Returns:
        The Settings that were stored.

    Example:
        ```python
        import kestrel

        kestrel.init(log_level='DEBUG', json_logs=False)
        ```
    """
    global _settings  # noqa: PLW0603

    _settings = Settings(
        log_level=log_level.upper() if log_level is not None else _detect_log_level(),
        json_logs=json_logs if json_logs is not None else _detect_json_logs(),
    )

    if _settings.log_level is not None:
        configure_logging(_settings.log_level, json_output=_settings.json_logs)

    return _settings


def get_settings() -> Settings:
    """Return the settings stored by init().

    Raises:
        RuntimeError: If init() has not been called.
    """
    if _settings is None:
        msg = 'kestrel not initialized. Call kestrel.init() first.'
        raise RuntimeError(msg)
    return _settings
