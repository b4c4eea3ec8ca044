"""Кастомный уровень логирования TRACE.

Функции:
    install_trace_level()
        Регистрирует уровень TRACE (5) и добавляет Logger.trace().

Константы:
    TRACE: int
        Значение уровня TRACE (5), ниже DEBUG (10).
"""

import logging
from typing import Any

# TRACE: сырые строки из хранилища, переходы оверлея, события клавиатуры
TRACE: int = 5

_trace_installed: bool = False


def _trace_method(
    self: logging.Logger, message: str, *args: Any, **kwargs: Any
) -> None:
    if self.isEnabledFor(TRACE):
        self._log(TRACE, message, args, **kwargs)


def install_trace_level() -> None:
    """Регистрирует уровень TRACE и метод trace() у Logger.

    Повторные вызовы игнорируются.
    """
    global _trace_installed

    if _trace_installed:
        return

    logging.addLevelName(TRACE, "TRACE")
    logging.TRACE = TRACE  # type: ignore[attr-defined]
    logging.Logger.trace = _trace_method  # type: ignore[attr-defined]

    _trace_installed = True


install_trace_level()
