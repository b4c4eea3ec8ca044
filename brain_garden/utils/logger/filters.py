"""Фильтр секретов для логов.

Классы:
    SensitiveDataFilter
        Маскирует anon-ключи Supabase, JWT и bearer-токены.
"""

import logging
import re
from typing import Pattern

SENSITIVE_PATTERNS: list[Pattern[str]] = [
    # JWT (anon/service_role ключи Supabase имеют такой вид)
    re.compile(r"eyJ[0-9A-Za-z_-]{10,}\.[0-9A-Za-z_-]{10,}\.[0-9A-Za-z_-]{10,}"),
    re.compile(r"sb_(?:publishable|secret)_[0-9A-Za-z_-]{16,}"),
    re.compile(r"(?i)bearer\s+[a-zA-Z0-9._-]{20,}"),
]

REDACTED: str = "***REDACTED***"


class SensitiveDataFilter(logging.Filter):
    """Заменяет найденные секреты на ***REDACTED***.

    Обрабатывает record.msg, record.args и пользовательский контекст
    (extra), который GardenLogger кладёт в атрибуты записи.
    """

    def __init__(
        self,
        patterns: list[Pattern[str]] | None = None,
        redacted: str = REDACTED,
        name: str = "",
    ) -> None:
        super().__init__(name)
        self.patterns = patterns or SENSITIVE_PATTERNS
        self.redacted = redacted

    def _redact_string(self, text: str) -> str:
        result = text
        for pattern in self.patterns:
            result = pattern.sub(self.redacted, result)
        return result

    def _redact_value(self, value: object) -> object:
        if isinstance(value, str):
            return self._redact_string(value)
        elif isinstance(value, dict):
            return {k: self._redact_value(v) for k, v in value.items()}
        elif isinstance(value, (list, tuple)):
            return type(value)(self._redact_value(item) for item in value)
        return value

    def filter(self, record: logging.LogRecord) -> bool:
        """Маскирует секреты; запись никогда не отбрасывается."""
        if isinstance(record.msg, str):
            record.msg = self._redact_string(record.msg)

        if record.args:
            if isinstance(record.args, dict):
                record.args = {k: self._redact_value(v) for k, v in record.args.items()}
            elif isinstance(record.args, tuple):
                record.args = tuple(self._redact_value(arg) for arg in record.args)

        for key in getattr(record, "_context_keys", ()):
            setattr(record, key, self._redact_value(getattr(record, key, None)))

        return True
