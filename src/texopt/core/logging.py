"""Centralized logging facility for TextureOptimizer.

Provides a console sink for the startup report and, when a settings
document turns on ``logging.enableDebugLogs``, a DEBUG file sink at the
configured ``logging.logFile`` with rotation and retention.

Usage:
    from texopt.core.logging import setup_logging, enable_debug_log
    setup_logging()
    enable_debug_log(settings.logging, root_dir)

All modules use loguru via `from loguru import logger`.
This module configures loguru's sinks (file output, rotation, format).
"""

import sys
from pathlib import Path

from loguru import logger

from texopt.config.schema import LoggingSettings


_LOG_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | "
    "<level>{level: <8}</level> | "
    "<level>{message}</level>"
)

_LOG_FILE_FORMAT = (
    "{time:YYYY-MM-DD HH:mm:ss.SSS} | "
    "{level: <8} | "
    "{name}:{function}:{line} | "
    "{message}"
)

_LOG_ROTATION = "10 MB"
_LOG_RETENTION = "14 days"

# Resolved log file path -> loguru handler id
_file_sinks: dict[Path, int] = {}


def setup_logging(level: str = "INFO", console_output: bool = True):
    """Configure the console sink.

    Call once during startup, before any plugin resolves its settings.
    Removes loguru's default handler and any debug file sinks added since.
    """
    logger.remove()
    _file_sinks.clear()

    if console_output:
        logger.add(
            sys.stderr,
            format=_LOG_FORMAT,
            level=level,
            colorize=True,
        )


def get_log_path(settings: LoggingSettings, base_dir: str | Path) -> Path:
    """Return the absolute debug log path; relative paths are under base_dir."""
    path = Path(settings.log_file)
    if not path.is_absolute():
        path = Path(base_dir) / path
    return path.resolve()


def enable_debug_log(
    settings: LoggingSettings, base_dir: str | Path, tag: str = "TextureOptimizer"
) -> Path | None:
    """Add a DEBUG file sink if the settings ask for detailed logs.

    Returns the log file path, or None when debug logs are disabled or the
    file cannot be opened. A path that already has a sink is not added twice.
    """
    if not settings.enable_debug_logs:
        return None

    log_path = get_log_path(settings, base_dir)
    if log_path in _file_sinks:
        return log_path

    try:
        log_path.parent.mkdir(parents=True, exist_ok=True)
        _file_sinks[log_path] = logger.add(
            str(log_path),
            format=_LOG_FILE_FORMAT,
            level="DEBUG",
            rotation=_LOG_ROTATION,
            retention=_LOG_RETENTION,
            compression="zip",
            encoding="utf-8",
        )
    except OSError as e:
        logger.error(f"[{tag}] Cannot open debug log {log_path}: {e}")
        return None

    logger.info(f"Log file: {log_path}")
    return log_path


def disable_debug_logs():
    """Remove every debug file sink added by enable_debug_log.

    Called by the host on shutdown so log files are flushed and closed.
    """
    for handler_id in _file_sinks.values():
        logger.remove(handler_id)
    _file_sinks.clear()
