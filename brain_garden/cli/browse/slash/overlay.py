"""Slash-команды оверлея и истории.

Каждая команда соответствует событию интерфейса страницы:
клик по карточке, кнопка закрытия, клик по фону, Escape,
кнопка "Поделиться", кнопки браузера назад/вперёд.

Команды:
    OpenCommand: /open, /o
    CloseCommand: /close, /x
    OutsideCommand: /outside, /backdrop
    EscapeCommand: /esc, /escape
    ShareCommand: /share, /s
    BackCommand: /back, /b
    ForwardCommand: /forward, /f
    WhereCommand: /where, /pwd
"""

from rich.markup import escape

from brain_garden.cli.browse.slash.base import BaseSlashCommand, SlashResult
from brain_garden.cli.browse.slash.handler import BrowseContext
from brain_garden.core.keyboard import ESCAPE
from brain_garden.infrastructure import MemoryLocation


class OpenCommand(BaseSlashCommand):
    """Клик по карточке."""

    name = "open"
    description = "Открыть превью заметки"
    aliases = ["o"]
    usage = "/open 2 | /open my-note-slug"

    def execute(self, ctx: BrowseContext, args: str) -> SlashResult:
        if not args.strip():
            ctx.console.print("[yellow]Usage: /open <number|slug>[/yellow]")
            return SlashResult()

        record = ctx.resolve(args)
        if record is None:
            ctx.console.print(f"[yellow]No note: {escape(args.strip())}[/yellow]")
            return SlashResult()

        ctx.archive.click_card(record)
        return SlashResult()


class CloseCommand(BaseSlashCommand):
    """Кнопка закрытия превью."""

    name = "close"
    description = "Закрыть превью"
    aliases = ["x"]

    def execute(self, ctx: BrowseContext, args: str) -> SlashResult:
        if not ctx.archive.state.is_open:
            ctx.console.print("[dim]Preview is already closed[/dim]")
            return SlashResult()
        ctx.archive.click_close()
        return SlashResult()


class OutsideCommand(BaseSlashCommand):
    """Клик по затемнённому фону вокруг превью."""

    name = "outside"
    description = "Клик вне превью (по фону)"
    aliases = ["backdrop"]

    def execute(self, ctx: BrowseContext, args: str) -> SlashResult:
        ctx.archive.click_backdrop()
        return SlashResult()


class EscapeCommand(BaseSlashCommand):
    name = "esc"
    description = "Нажать Escape"
    aliases = ["escape"]

    def execute(self, ctx: BrowseContext, args: str) -> SlashResult:
        if not ctx.archive.press_key(ESCAPE):
            ctx.console.print("[dim]Nothing listens for Escape[/dim]")
        return SlashResult()


class ShareCommand(BaseSlashCommand):
    """Кнопка "Поделиться" на карточке или в открытом превью."""

    name = "share"
    description = "Скопировать ссылку на заметку"
    aliases = ["s"]
    usage = "/share (открытая заметка) | /share 3 | /share my-note-slug"

    def execute(self, ctx: BrowseContext, args: str) -> SlashResult:
        archive = ctx.archive
        opened = archive.overlay.record

        if args.strip():
            record = ctx.resolve(args)
            if record is None:
                ctx.console.print(f"[yellow]No note: {escape(args.strip())}[/yellow]")
                return SlashResult()
        elif opened is not None:
            record = opened
        else:
            ctx.console.print("[yellow]Open a note or pass a card number[/yellow]")
            return SlashResult()

        within = "overlay" if opened is not None and opened.slug == record.slug else "card"
        archive.click_share(record, within=within)
        return SlashResult()


class BackCommand(BaseSlashCommand):
    name = "back"
    description = "Назад по истории"
    aliases = ["b"]

    def execute(self, ctx: BrowseContext, args: str) -> SlashResult:
        if not ctx.archive.navigate_back():
            ctx.console.print("[dim]No previous history entry[/dim]")
        return SlashResult()


class ForwardCommand(BaseSlashCommand):
    name = "forward"
    description = "Вперёд по истории"
    aliases = ["f"]

    def execute(self, ctx: BrowseContext, args: str) -> SlashResult:
        if not ctx.archive.navigate_forward():
            ctx.console.print("[dim]No next history entry[/dim]")
        return SlashResult()


class WhereCommand(BaseSlashCommand):
    """Текущий адрес и стек истории."""

    name = "where"
    description = "Показать адрес и историю"
    aliases = ["pwd"]

    def execute(self, ctx: BrowseContext, args: str) -> SlashResult:
        location = ctx.archive.location
        ctx.console.print(f"📍 {escape(location.href)}  [dim]{ctx.archive.state!r}[/dim]")

        if isinstance(location, MemoryLocation):
            for i, entry in enumerate(location.entries):
                marker = "→" if i == location.index else " "
                ctx.console.print(f"  {marker} {escape(entry)}")
        return SlashResult()


__all__ = [
    "OpenCommand",
    "CloseCommand",
    "OutsideCommand",
    "EscapeCommand",
    "ShareCommand",
    "BackCommand",
    "ForwardCommand",
    "WhereCommand",
]
