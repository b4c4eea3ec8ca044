"""Команда browse: интерактивный каталог заметок.

Запускает REPL: slash-команды отображаются на события страницы
(клик по карточке, закрытие, фон, Escape, "Поделиться", назад/вперёд),
обычный текст задаёт строку поиска.

Usage:
    garden browse                     # Список заметок
    garden browse --at /notes/alpha   # Открыть по deep-link
    garden browse --topic AI
"""

from typing import Optional

import typer
from rich.console import Console
from rich.panel import Panel
from rich.prompt import Prompt

from brain_garden.cli.app import get_cli_context
from brain_garden.cli.browse import BrowseContext, build_handler
from brain_garden.cli.browse.slash import SlashAction, show_catalog
from brain_garden.cli.ui import render_note, render_notification
from brain_garden.core.archive import NotesArchive
from brain_garden.domain.notification import Notification
from brain_garden.domain.overlay import OverlayTransition
from brain_garden.infrastructure import MemoryLocation

app = typer.Typer(
    help="🌿 Интерактивный каталог заметок",
    no_args_is_help=False,
)


class OverlayPrinter:
    """Выводит превью при каждом открытии оверлея (включая историю)."""

    def __init__(self, console: Console, archive: NotesArchive):
        self.console = console
        self.archive = archive

    def on_transition(self, transition: OverlayTransition) -> None:
        record = transition.current.record
        if record is not None:
            render_note(record, url=self.archive.sharing.build_url(record), console=self.console)


def _status_line(console: Console, archive: NotesArchive) -> None:
    console.print(f"[dim]📍 {archive.path}  ·  {archive.state!r}[/dim]")


@app.callback(invoke_without_command=True)
def browse(
    ctx: typer.Context,
    at: Optional[str] = typer.Option(
        None,
        "--at",
        "-a",
        help="Начальный путь, например /notes/my-note (deep-link).",
    ),
    topic: Optional[str] = typer.Option(
        None,
        "--topic",
        "-t",
        help="Начальная тема.",
    ),
) -> None:
    """Интерактивный каталог с превью и ссылками."""
    cli_ctx = get_cli_context()
    console = cli_ctx.console
    config = cli_ctx.get_config()

    location = MemoryLocation(config.site_origin, at or config.notes_base_path)
    try:
        archive = cli_ctx.build_archive(location=location)
    except ValueError as e:
        console.print(Panel(f"[red]{e}[/red]", title="❌ Configuration error"))
        raise typer.Exit(1)

    archive.overlay.subscribe(OverlayPrinter(console, archive))

    def on_notification(event: str, notification: Notification) -> None:
        if event == "shown":
            render_notification(notification, console=console)

    archive.notifications.add_listener(on_notification)

    if topic:
        archive.set_topic(topic)

    with console.status("[bold green]Loading notes...[/bold green]", spinner="dots"):
        archive.mount()

    if archive.load_error is not None:
        console.print("[dim]Notes are unavailable right now; the catalog is empty.[/dim]")

    _show_welcome(console, archive)
    if not archive.state.is_open:
        show_catalog(BrowseContext(console, archive))

    _repl(console, archive)
    archive.unmount()


def _repl(console: Console, archive: NotesArchive) -> None:
    browse_ctx = BrowseContext(console=console, archive=archive)
    handler = build_handler()

    while True:
        try:
            text = Prompt.ask("\n[bold cyan]garden[/bold cyan]", console=console)

            if handler.is_slash_command(text):
                result = handler.handle(text, browse_ctx)

                if result.message:
                    console.print(result.message)

                if result.action == SlashAction.EXIT:
                    break
                if result.action == SlashAction.CLEAR:
                    console.clear()
                    _show_welcome(console, archive)
                    continue

                _status_line(console, archive)
                continue

            # Обычный текст работает как поле поиска
            archive.set_search(text)
            show_catalog(browse_ctx)

        except KeyboardInterrupt:
            console.print("\n[dim]Interrupted. Type /quit to exit.[/dim]")
            continue

        except EOFError:
            console.print("\n[dim]Bye! 👋[/dim]")
            break


def _show_welcome(console: Console, archive: NotesArchive) -> None:
    console.print(
        Panel(
            f"[bold]🌱 Brain Garden[/bold]  [dim]{archive.total} notes · {archive.location.origin}[/dim]\n"
            "[dim]/open N · /share · /esc · /back · /topic AI · /help · /quit[/dim]",
            border_style="green",
        )
    )


__all__ = ["app", "OverlayPrinter"]
