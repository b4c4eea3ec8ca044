"""Форматтеры логирования с эмодзи модулей.

Классы:
    FileFormatter
        Подробный текстовый форматтер для файла.
    JSONFormatter
        Структурированный JSON для агрегаторов логов.
"""

import json
import logging
from datetime import datetime
from typing import Any

from .levels import TRACE

# Паттерн части имени модуля -> эмодзи
EMOJI_MAP: dict[str, str] = {
    # Каталог и представление
    "catalog": "🗂️",
    "archive": "🌱",
    "note": "📝",
    "notes": "📝",
    # Оверлей и навигация
    "overlay": "🪟",
    "location_sync": "🧭",
    "location": "🧭",
    "keyboard": "⌨️",
    # Шаринг и уведомления
    "share": "🔗",
    "clipboard": "📋",
    "notifications": "🔔",
    "scheduler": "⏱️",
    # Хранилища
    "store": "💾",
    "supabase": "💾",
    "json_store": "💾",
    # Инфраструктура
    "config": "⚙️",
    "diagnostics": "🩺",
    "cli": "🖥️",
    "commands": "🖥️",
    "browse": "🖥️",
    "slash": "🖥️",
}

LEVEL_EMOJI: dict[int, str] = {
    logging.CRITICAL: "💀",
    logging.ERROR: "❌",
    logging.WARNING: "⚠️",
    logging.INFO: "",
    logging.DEBUG: "🔧",
    TRACE: "🔬",
}

FALLBACK_EMOJI: str = "📌"

# Ключи контекста, которые выводятся префиксом [slug/notification_id]
CONTEXT_ID_KEYS: tuple[str, ...] = (
    "slug",
    "notification_id",
)


def get_module_emoji(logger_name: str) -> str:
    """Эмодзи модуля по имени логгера (поиск с конца имени)."""
    parts = logger_name.lower().split(".")

    for part in reversed(parts):
        if part in EMOJI_MAP:
            return EMOJI_MAP[part]

    return FALLBACK_EMOJI


def format_context_prefix(record: logging.LogRecord) -> str:
    context_ids: list[str] = []
    for key in CONTEXT_ID_KEYS:
        value = getattr(record, key, None)
        if value:
            context_ids.append(str(value))

    if context_ids:
        return f"[{'/'.join(context_ids)}] "
    return ""


_STANDARD_FIELDS = frozenset(
    {
        "name",
        "msg",
        "args",
        "created",
        "filename",
        "funcName",
        "levelname",
        "levelno",
        "lineno",
        "module",
        "msecs",
        "pathname",
        "process",
        "processName",
        "relativeCreated",
        "stack_info",
        "exc_info",
        "exc_text",
        "thread",
        "threadName",
        "taskName",
        "message",
    }
)


def format_extra_context(record: logging.LogRecord) -> dict[str, Any]:
    """Пользовательский контекст записи без стандартных полей LogRecord."""
    context_fields = set(CONTEXT_ID_KEYS)

    extra: dict[str, Any] = {}
    for key, value in record.__dict__.items():
        if key in _STANDARD_FIELDS or key in context_fields:
            continue
        if not key.startswith("_"):
            extra[key] = value

    return extra


class FileFormatter(logging.Formatter):
    """Форматтер для файла.

    Формат: 2026-01-05 14:20:02 | OVERLAY | INFO | 🪟 [slug] Message | key=value
    """

    def __init__(self, json_context: bool = False) -> None:
        super().__init__()
        self.json_context = json_context

    def format(self, record: logging.LogRecord) -> str:
        time_str = datetime.fromtimestamp(record.created).strftime("%Y-%m-%d %H:%M:%S")
        module = record.name.split(".")[-1].upper()
        emoji = get_module_emoji(record.name)
        context_prefix = format_context_prefix(record)
        extra = format_extra_context(record)

        parts = [
            time_str,
            module,
            record.levelname,
            f"{emoji} {context_prefix}{record.getMessage()}",
        ]

        if extra:
            if self.json_context:
                parts.append(json.dumps(extra, ensure_ascii=False, default=str))
            else:
                parts.append(" ".join(f"{k}={v}" for k, v in extra.items()))

        result = " | ".join(parts)

        if record.exc_info:
            result += "\n" + self.formatException(record.exc_info)

        return result


class JSONFormatter(logging.Formatter):
    """JSON-форматтер.

    Формат:
        {
            "timestamp": "2026-01-05T14:30:00.123",
            "level": "INFO",
            "logger": "brain_garden.core.overlay",
            "message": "Overlay opened",
            "context": {"slug": "alpha"},
            "extra": {"source": "card"}
        }
    """

    def __init__(self, include_location: bool = True) -> None:
        super().__init__()
        self.include_location = include_location

    def format(self, record: logging.LogRecord) -> str:
        data: dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        context = {
            key: getattr(record, key)
            for key in CONTEXT_ID_KEYS
            if getattr(record, key, None) is not None
        }
        if context:
            data["context"] = context

        extra = format_extra_context(record)
        if extra:
            data["extra"] = extra

        if self.include_location:
            data["location"] = {
                "file": record.filename,
                "line": record.lineno,
                "function": record.funcName,
            }

        if record.exc_info:
            data["exception"] = {
                "type": record.exc_info[0].__name__ if record.exc_info[0] else None,
                "message": str(record.exc_info[1]) if record.exc_info[1] else None,
                "traceback": self.formatException(record.exc_info),
            }

        return json.dumps(data, ensure_ascii=False, default=str)
