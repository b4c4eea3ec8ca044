"""Копирование ссылки на заметку.

Классы:
    ShareLinkAction
        Строит канонический URL заметки и копирует его в буфер обмена.
"""

from __future__ import annotations

from typing import Optional
from urllib.parse import quote

from brain_garden.core.location_sync import DEFAULT_BASE_PATH, normalize_base_path
from brain_garden.core.notifications import NotificationCenter
from brain_garden.domain.events import UIEvent
from brain_garden.domain.note import NoteRecord
from brain_garden.domain.notification import COPY_FAILED, LINK_COPIED, NotificationKind
from brain_garden.exceptions import ClipboardError
from brain_garden.interfaces.clipboard import BaseClipboard
from brain_garden.interfaces.location import BaseLocationProvider
from brain_garden.utils.logger import get_logger

logger = get_logger(__name__)


class ShareLinkAction:
    """Действие "Поделиться".

    Никогда не открывает и не закрывает оверлей: событие клика
    останавливается до копирования, чтобы не дойти до карточки или фона.

    Attributes:
        clipboard: Буфер обмена.
        notifications: Центр уведомлений.
        location: Провайдер адреса (источник origin).
        base_path: Путь списка заметок.
    """

    def __init__(
        self,
        clipboard: BaseClipboard,
        notifications: NotificationCenter,
        location: BaseLocationProvider,
        base_path: str = DEFAULT_BASE_PATH,
    ) -> None:
        self.clipboard = clipboard
        self.notifications = notifications
        self.location = location
        self.base_path = normalize_base_path(base_path)

    def build_url(self, record: NoteRecord) -> str:
        """{origin}{base}/{slug}; slug кодируется как сегмент пути."""
        return f"{self.location.origin}{self.base_path}/{quote(record.slug, safe='')}"

    def share(self, record: NoteRecord, event: Optional[UIEvent] = None) -> bool:
        """Копирует ссылку и показывает уведомление.

        Ошибка буфера обмена не пробрасывается: пользователь видит
        "Copy failed", а в журнал пишется предупреждение.

        Returns:
            True если ссылка скопирована.
        """
        if event is not None:
            event.stop_propagation()

        url = self.build_url(record)
        try:
            self.clipboard.write_text(url)
        except ClipboardError as e:
            logger.warning("Failed to copy link", slug=record.slug, error=str(e))
            self.notifications.notify(COPY_FAILED, NotificationKind.ERROR, detail=str(e))
            return False

        logger.info("Link copied", slug=record.slug, url=url)
        self.notifications.notify(LINK_COPIED, NotificationKind.SUCCESS, detail=url)
        return True
