"""Обработчик slash-команд каталога.

Классы:
    BrowseContext
        Контекст REPL для передачи в команды.
    SlashCommandHandler
        Регистрирует и роутит slash-команды.
"""

from dataclasses import dataclass
from typing import Optional

from rich.console import Console

from brain_garden.cli.browse.slash.base import BaseSlashCommand, SlashAction, SlashResult
from brain_garden.core.archive import NotesArchive
from brain_garden.domain.note import NoteRecord
from brain_garden.utils.logger import get_logger

logger = get_logger(__name__)


@dataclass
class BrowseContext:
    """Контекст интерактивного каталога.

    Attributes:
        console: Rich console для вывода.
        archive: Страница каталога (состояние, оверлей, адрес).
    """

    console: Console
    archive: NotesArchive

    def resolve(self, ref: str) -> Optional[NoteRecord]:
        """Запись по номеру карточки в текущем списке (с 1) или по slug."""
        ref = ref.strip()
        if not ref:
            return None
        if ref.isdigit():
            view = self.archive.view
            index = int(ref) - 1
            return view[index] if 0 <= index < len(view) else None
        return self.archive.find(ref)


class SlashCommandHandler:
    """Регистрирует и обрабатывает slash-команды.

    Example:
        >>> handler = SlashCommandHandler()
        >>> handler.register(OpenCommand())
        >>> handler.handle("/open 1", ctx)
    """

    def __init__(self):
        self._commands: dict[str, BaseSlashCommand] = {}

    def register(self, command: BaseSlashCommand) -> None:
        self._commands[command.name] = command
        for alias in command.aliases:
            self._commands[alias] = command

        logger.trace("Command registered", name=command.name, aliases=command.aliases)

    def get_command(self, name: str) -> Optional[BaseSlashCommand]:
        """Команда по имени или алиасу."""
        return self._commands.get(name.lower())

    def list_commands(self) -> list[BaseSlashCommand]:
        """Уникальные команды (без дублей по алиасам)."""
        seen = set()
        result = []
        for cmd in self._commands.values():
            if cmd.name not in seen:
                seen.add(cmd.name)
                result.append(cmd)
        return sorted(result, key=lambda c: c.name)

    def is_slash_command(self, input_text: str) -> bool:
        return input_text.strip().startswith("/")

    def handle(self, input_text: str, ctx: BrowseContext) -> Optional[SlashResult]:
        """Обработать slash-команду.

        Returns:
            SlashResult если команда обработана, None если не slash-команда.
        """
        if not self.is_slash_command(input_text):
            return None

        text = input_text.strip()[1:]
        parts = text.split(maxsplit=1)
        cmd_name = parts[0].lower() if parts else ""
        args = parts[1] if len(parts) > 1 else ""

        command = self.get_command(cmd_name)
        if not command:
            ctx.console.print(f"[yellow]Unknown command: /{cmd_name}[/yellow]")
            ctx.console.print("[dim]Type /help for available commands[/dim]")
            return SlashResult(action=SlashAction.CONTINUE)

        logger.debug("Executing slash command", command=cmd_name, args=args)

        try:
            return command.execute(ctx, args)
        except Exception as e:
            logger.error_with_context(e, "Slash command failed", command=cmd_name)
            ctx.console.print(f"[red]Command error: {e}[/red]")
            return SlashResult(action=SlashAction.CONTINUE)


__all__ = ["BrowseContext", "SlashCommandHandler"]
