"""Иерархия исключений brain_garden.

Ни одно из этих исключений не фатально для страницы: ядро перехватывает
их на границе и переходит в безопасное состояние (пустой каталог,
закрытый оверлей, уведомление "Copy failed").
"""


class BrainGardenError(Exception):
    """Базовое исключение пакета."""


class NoteFetchError(BrainGardenError):
    """Хранилище недоступно или вернуло ошибку."""


class InvalidNoteRowError(BrainGardenError, ValueError):
    """Строка из хранилища не может быть превращена в NoteRecord."""


class ClipboardError(BrainGardenError):
    """Запись в буфер обмена запрещена или недоступна."""
