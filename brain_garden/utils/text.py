"""Текстовые помощники для карточек и оверлея.

Функции:
    strip_html
        Убирает HTML-теги из тела заметки.
    reading_time_minutes
        Время чтения при 200 словах в минуту.
    format_published
        Дата вида "January 1, 2024" или "Thinking Lab" без даты.
"""

import html
import math
import re
from datetime import datetime
from typing import Optional

WORDS_PER_MINUTE: int = 200
UNDATED_LABEL: str = "Thinking Lab"

_TAG_RE = re.compile(r"<[^>]*>")
_BLOCK_TAG_RE = re.compile(r"</?(p|div|br|li|h[1-6]|blockquote|pre|ul|ol)\b[^>]*>", re.IGNORECASE)


def looks_like_html(text: str) -> bool:
    return bool(_TAG_RE.search(text or ""))


def strip_html(text: Optional[str]) -> str:
    """Текст без тегов; блочные теги превращаются в переводы строк."""
    if not text:
        return ""
    text = _BLOCK_TAG_RE.sub("\n", text)
    text = _TAG_RE.sub("", text)
    text = html.unescape(text)
    return re.sub(r"\n{3,}", "\n\n", text).strip()


def reading_time_minutes(content: Optional[str]) -> int:
    """Минуты чтения с округлением вверх; пустое тело -> 0."""
    words = strip_html(content).split()
    if not words:
        return 0
    return math.ceil(len(words) / WORDS_PER_MINUTE)


def format_published(value: Optional[datetime]) -> str:
    if value is None:
        return UNDATED_LABEL
    return f"{value.strftime('%B')} {value.day}, {value.year}"
