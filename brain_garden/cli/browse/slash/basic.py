"""Базовые slash-команды.

Команды:
    HelpCommand: /help, /h, /?
    ClearCommand: /clear, /cls
    QuitCommand: /quit, /q, /exit
"""

from rich.table import Table

from brain_garden.cli.browse.slash.base import BaseSlashCommand, SlashAction, SlashResult
from brain_garden.cli.browse.slash.handler import BrowseContext, SlashCommandHandler


class HelpCommand(BaseSlashCommand):
    """Показать справку по командам."""

    name = "help"
    description = "Показать справку по командам"
    aliases = ["h", "?"]

    def __init__(self, handler: SlashCommandHandler):
        self._handler = handler

    def execute(self, ctx: BrowseContext, args: str) -> SlashResult:
        table = Table(title="📚 Доступные команды", show_header=True)
        table.add_column("Команда", style="cyan")
        table.add_column("Описание")

        for cmd in self._handler.list_commands():
            name = f"/{cmd.name}"
            if cmd.aliases:
                name += f" ({', '.join('/' + a for a in cmd.aliases)})"
            description = cmd.description
            if cmd.usage:
                description += f"\n[dim]{cmd.usage}[/dim]"
            table.add_row(name, description)

        ctx.console.print(table)
        ctx.console.print("[dim]Текст без / задаёт строку поиска[/dim]")
        return SlashResult()


class ClearCommand(BaseSlashCommand):
    name = "clear"
    description = "Очистить экран"
    aliases = ["cls"]

    def execute(self, ctx: BrowseContext, args: str) -> SlashResult:
        return SlashResult(action=SlashAction.CLEAR)


class QuitCommand(BaseSlashCommand):
    name = "quit"
    description = "Выйти из каталога"
    aliases = ["q", "exit"]

    def execute(self, ctx: BrowseContext, args: str) -> SlashResult:
        return SlashResult(action=SlashAction.EXIT, message="[dim]Bye! 👋[/dim]")


__all__ = ["HelpCommand", "ClearCommand", "QuitCommand"]
