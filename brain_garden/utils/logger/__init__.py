"""Логирование brain_garden: rich-консоль, эмодзи модулей, маскирование ключей.

Функции:
    get_logger(name) -> GardenLogger
        Логгер для модуля (ленивая инициализация с дефолтами).
    setup_logging(config) -> None
        (Пере)настраивает хендлеры корневого логгера brain_garden.
    dump_debug_info(), check_config()
        Диагностика.

Environment Variables:
    GARDEN_LOG_LEVEL, GARDEN_LOG_FILE, GARDEN_LOG_JSON, GARDEN_LOG_REDACT.

Example:
    >>> from brain_garden.utils.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.bind(slug="alpha").info("Overlay opened")
"""

import logging

from rich.console import Console
from rich.logging import RichHandler

from .config import LoggingConfig
from .diagnostics import ROOT_LOGGER_NAME, check_config, dump_debug_info, get_handlers_info
from .filters import SensitiveDataFilter
from .formatters import FileFormatter, JSONFormatter
from .levels import TRACE, install_trace_level
from .logger import GardenLogger

install_trace_level()

_logging_configured: bool = False
_current_config: LoggingConfig | None = None


def setup_logging(config: LoggingConfig | None = None) -> None:
    """Настраивает RichHandler для консоли и, опционально, файловый хендлер.

    Повторный вызов заменяет ранее установленные хендлеры.
    """
    global _logging_configured, _current_config

    config = config or LoggingConfig()
    _current_config = config

    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)
        handler.close()

    root_logger.setLevel(TRACE)

    sensitive_filter = SensitiveDataFilter() if config.redact_secrets else None

    # markup=False: префикс [slug] не должен трактоваться как rich-стиль
    console_handler = RichHandler(
        console=Console(stderr=True),
        level=getattr(logging, config.level, TRACE),
        show_time=True,
        show_level=False,
        show_path=config.show_path,
        rich_tracebacks=True,
        markup=False,
    )
    if sensitive_filter:
        console_handler.addFilter(sensitive_filter)
    root_logger.addHandler(console_handler)

    if config.log_file:
        file_handler = logging.FileHandler(config.log_file, mode="a", encoding="utf-8")
        file_handler.setLevel(getattr(logging, config.file_level, TRACE))
        file_handler.setFormatter(
            JSONFormatter() if config.json_format else FileFormatter()
        )
        if sensitive_filter:
            file_handler.addFilter(sensitive_filter)
        root_logger.addHandler(file_handler)

    root_logger.propagate = False
    _logging_configured = True


def get_logger(name: str) -> GardenLogger:
    """Логгер для модуля (обычно __name__)."""
    if not _logging_configured:
        setup_logging()

    return GardenLogger(name)


def get_current_config() -> LoggingConfig:
    return _current_config or LoggingConfig()


__all__ = [
    "TRACE",
    "get_logger",
    "setup_logging",
    "get_current_config",
    "dump_debug_info",
    "check_config",
    "get_handlers_info",
    "GardenLogger",
    "LoggingConfig",
    "FileFormatter",
    "JSONFormatter",
    "SensitiveDataFilter",
]
