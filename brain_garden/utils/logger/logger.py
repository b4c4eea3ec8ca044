"""Логгер с привязкой контекста.

Классы:
    GardenLogger
        Адаптер над logging.Logger с контекстом (bind) и эмодзи модулей.
"""

from __future__ import annotations

import logging
import traceback
from typing import Any

from .levels import TRACE
from .formatters import _STANDARD_FIELDS, CONTEXT_ID_KEYS, LEVEL_EMOJI, get_module_emoji


class GardenLogger:
    """Адаптер для структурированного логирования.

    Контекст передаётся именованными аргументами и попадает в extra
    записи; ключи из CONTEXT_ID_KEYS дополнительно выводятся префиксом.

    Example:
        >>> logger = GardenLogger("brain_garden.core.overlay")
        >>> log = logger.bind(slug="alpha")
        >>> log.info("Overlay opened")  # -> 🪟 [alpha] Overlay opened
    """

    def __init__(self, name: str, context: dict[str, Any] | None = None) -> None:
        self.name = name
        self._logger = logging.getLogger(name)
        self._context: dict[str, Any] = context or {}

    def bind(self, **context: Any) -> GardenLogger:
        """Новый логгер с объединённым контекстом."""
        return GardenLogger(self.name, {**self._context, **context})

    def _log(self, level: int, msg: str, **context: Any) -> None:
        merged = {**self._context, **context}

        # Ключи, совпадающие с полями LogRecord, logging не принимает в extra
        extra = {
            (f"ctx_{key}" if key in _STANDARD_FIELDS else key): value
            for key, value in merged.items()
        }
        extra["_context_keys"] = tuple(extra)

        context_ids = [str(extra[key]) for key in CONTEXT_ID_KEYS if extra.get(key)]
        context_prefix = f"[{'/'.join(context_ids)}] " if context_ids else ""

        emoji = LEVEL_EMOJI.get(level, "") or get_module_emoji(self.name)

        self._logger.log(level, f"{emoji} {context_prefix}{msg}", extra=extra)

    def trace(self, msg: str, **context: Any) -> None:
        """TRACE (5): сырые данные и события клавиатуры."""
        self._log(TRACE, msg, **context)

    def debug(self, msg: str, **context: Any) -> None:
        self._log(logging.DEBUG, msg, **context)

    def info(self, msg: str, **context: Any) -> None:
        self._log(logging.INFO, msg, **context)

    def warning(self, msg: str, **context: Any) -> None:
        self._log(logging.WARNING, msg, **context)

    def error(self, msg: str, **context: Any) -> None:
        self._log(logging.ERROR, msg, **context)

    def critical(self, msg: str, **context: Any) -> None:
        self._log(logging.CRITICAL, msg, **context)

    def error_with_context(
        self,
        exc: BaseException,
        msg: str | None = None,
        *,
        include_traceback: bool = False,
        **context: Any,
    ) -> None:
        """Логирует исключение с типом и текстом ошибки в контексте.

        Args:
            exc: Исключение.
            msg: Сообщение (по умолчанию str(exc)).
            include_traceback: Добавить traceback в контекст.
            **context: Дополнительный контекст.
        """
        error_context: dict[str, Any] = {
            "exception_type": type(exc).__name__,
            "exception_msg": str(exc),
            **context,
        }

        if include_traceback:
            error_context["traceback"] = "".join(
                traceback.format_exception(type(exc), exc, exc.__traceback__)
            )

        self.error(msg or str(exc), **error_context)

    def is_enabled_for(self, level: int) -> bool:
        return self._logger.isEnabledFor(level)

    @property
    def level(self) -> int:
        """Эффективный уровень обёрнутого логгера."""
        return self._logger.getEffectiveLevel()
