import logging
from datetime import timedelta
from typing import cast, Iterable, TypeAlias

import structlog
from structlog.stdlib import BoundLogger

def format_log_level(_: object, value: object):
    level = cast(str, value)
    match level:
        case "debug": return "[*]"
        case "info": return "[+]"
        case "warning": return "[-]"
        case "error" | "critical": return "[!]"

def format_timer_name(_: object, value: object):
    if not isinstance(value, str) and isinstance(value, Iterable):
        value = "/".join(map(str, value))
    return f"{value}:"

def format_value(value: object) -> str:
    if isinstance(value, timedelta):
        return f"{value.total_seconds() * 1000:.3f}ms"
    return str(value)

renderer = structlog.dev.ConsoleRenderer(
    columns=[
        structlog.dev.Column(
            "level",
            format_log_level
        ),
        structlog.dev.Column(
            "timer",
            format_timer_name
        ),
        structlog.dev.Column(
            "event",
            lambda _, value: value
        ),
        structlog.dev.Column(
            "",
            structlog.dev.KeyValueColumnFormatter(
                key_style="",
                value_style="",
                reset_style="",
                value_repr=format_value
            )
        ),
    ]
)

def configure_logging(verbose = False):
    structlog.configure_once(
        processors=[
            structlog.processors.add_log_level,
            renderer
        ],
        wrapper_class=structlog.make_filtering_bound_logger(logging.DEBUG if verbose else logging.INFO),
        logger_factory=structlog.PrintLoggerFactory()
    )

Logger: TypeAlias = BoundLogger

def get_logger() -> Logger:
    return structlog.stdlib.get_logger()

__all__ = ["configure_logging", "format_value", "get_logger", "Logger"]
