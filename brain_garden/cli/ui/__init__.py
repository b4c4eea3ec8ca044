"""UI слой CLI: Rich виджеты и рендереры.

Модули:
    renderers: Карточки, превью, уведомления
    spinners: Индикатор загрузки
"""

from brain_garden.cli.ui.renderers import (
    render_cards,
    render_error,
    render_note,
    render_notification,
    render_topics,
)
from brain_garden.cli.ui.spinners import progress_spinner

__all__ = [
    "render_cards",
    "render_error",
    "render_note",
    "render_notification",
    "render_topics",
    "progress_spinner",
]
