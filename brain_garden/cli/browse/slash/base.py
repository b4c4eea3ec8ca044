"""Базовый класс для slash-команд.

Классы:
    SlashAction
        Enum действий после выполнения команды.
    SlashResult
        Результат выполнения команды.
    BaseSlashCommand
        Абстрактный базовый класс для slash-команд.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum, auto
from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from brain_garden.cli.browse.slash.handler import BrowseContext


class SlashAction(Enum):
    """Действие после выполнения команды."""

    CONTINUE = auto()
    EXIT = auto()
    CLEAR = auto()


@dataclass
class SlashResult:
    """Результат выполнения slash-команды.

    Attributes:
        action: Действие после выполнения.
        message: Сообщение для вывода (опционально).
    """

    action: SlashAction = SlashAction.CONTINUE
    message: Optional[str] = None


class BaseSlashCommand(ABC):
    """Slash-команда каталога.

    Каждая команда определяет name, description и execute();
    aliases и usage опциональны.

    Example:
        >>> class EscapeCommand(BaseSlashCommand):
        ...     name = "esc"
        ...     description = "Press Escape"
        ...
        ...     def execute(self, ctx, args):
        ...         ctx.archive.press_key("Escape")
        ...         return SlashResult()
    """

    name: str
    description: str
    aliases: list[str] = []
    usage: Optional[str] = None

    @abstractmethod
    def execute(self, ctx: "BrowseContext", args: str) -> SlashResult:
        """Выполнить команду.

        Args:
            ctx: Контекст каталога.
            args: Аргументы команды (строка после имени).
        """
        pass

    @property
    def help_text(self) -> str:
        """Полный текст справки для команды."""
        text = f"/{self.name}"
        if self.aliases:
            text += f" ({', '.join('/' + a for a in self.aliases)})"
        text += f": {self.description}"
        if self.usage:
            text += f"\n    {self.usage}"
        return text


__all__ = ["SlashAction", "SlashResult", "BaseSlashCommand"]
