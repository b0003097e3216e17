"""Logging configuration using structlog.

Every line is rendered as time, a 3-letter level and the event, followed by
its key=value context:
    09:14:02 INF view pushed title=Form
    09:14:05 DBG field set logger=model record=Mix field=name observers=2
    09:14:07 WRN config key ignored key=colour
    09:14:09 ERR observer failed record=Mix
"""

import logging
import sys
from datetime import datetime
from typing import TextIO

import structlog

LEVEL_NAMES = {
    "debug": "DBG",
    "info": "INF",
    "warning": "WRN",
    "error": "ERR",
    "critical": "CRT",
}

# Context key holding the component name, rendered as "logger".
# get_logger(logger=...) would collide with wrap_logger's own argument.
NAME_KEY = "logger_name"

# Set by configure()
_debug_enabled = False


def _level_to_3letter(logger, method_name, event_dict):
    """Convert log level to 3-letter abbreviation."""
    level = event_dict.get("level", method_name)
    event_dict["level"] = LEVEL_NAMES.get(level, level.upper()[:3])
    return event_dict


def _format_timestamp(logger, method_name, event_dict):
    """Add timestamp in HH:MM:SS format."""
    event_dict["timestamp"] = datetime.now().strftime("%H:%M:%S")
    return event_dict


def _render_kv_pairs(logger, method_name, event_dict):
    """Render event dict as 'timestamp LEVEL message key=value ...' string."""
    timestamp = event_dict.pop("timestamp", "")
    level = event_dict.pop("level", "???")
    event = event_dict.pop("event", "")

    # Build key=value pairs for remaining fields
    kv_parts = []
    for key, value in event_dict.items():
        if key.startswith("_"):
            continue
        if key == NAME_KEY:
            key = "logger"
        if isinstance(value, str) and " " in value:
            kv_parts.append(f'{key}="{value}"')
        else:
            kv_parts.append(f"{key}={value}")

    kv_str = " ".join(kv_parts)
    if kv_str:
        return f"{timestamp} {level} {event} {kv_str}"
    return f"{timestamp} {level} {event}"


def configure(level: str = "INFO", debug: bool = False, stream: TextIO | None = None) -> None:
    """Configure structlog for console output.

    Args:
        level: Log level name (DEBUG, INFO, WARNING, ERROR).
        debug: Shortcut for level="DEBUG".
        stream: Where lines are written. Defaults to stdout.
    """
    global _debug_enabled
    if debug:
        level = "DEBUG"
    _debug_enabled = level.upper() == "DEBUG"

    structlog.configure(
        processors=[
            structlog.stdlib.add_log_level,
            _format_timestamp,
            _level_to_3letter,
            _render_kv_pairs,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(getattr(logging, level.upper(), logging.INFO)),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=stream or sys.stdout),
        cache_logger_on_first_use=False,
    )


def get_logger(name: str | None = None) -> structlog.BoundLogger:
    """Get a logger, optionally bound to a component name.

    The logger resolves the configuration on every call, so module-level
    loggers follow later configure() calls.
    """
    if name:
        return structlog.get_logger(**{NAME_KEY: name})
    return structlog.get_logger()


def is_debug_enabled() -> bool:
    """Check if debug logging is enabled."""
    return _debug_enabled
