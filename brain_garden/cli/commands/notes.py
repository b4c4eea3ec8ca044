"""Команда notes: список, превью и ссылка на заметку.

Подкоманды:
    list: Карточки каталога с фильтром по теме и поиском.
    show: Превью заметки по slug (как переход по /notes/{slug}).
    share: Скопировать ссылку на заметку в буфер обмена.

Usage:
    garden notes list --topic AI --search agents
    garden notes show my-first-note
    garden notes share my-first-note
"""

import json
from typing import Optional
from urllib.parse import quote

import typer

from brain_garden.cli.app import get_cli_context
from brain_garden.cli.console import console
from brain_garden.cli.context import CLIContext
from brain_garden.cli.ui import (
    progress_spinner,
    render_cards,
    render_error,
    render_note,
    render_notification,
    render_topics,
)
from brain_garden.core.archive import NotesArchive
from brain_garden.domain.note import Topic
from brain_garden.exceptions import NoteFetchError
from brain_garden.infrastructure import MemoryLocation
from brain_garden.infrastructure.store import rows_from_records
from brain_garden.interfaces import BaseLocationProvider

app = typer.Typer(
    help="📝 Заметки: список, превью, ссылка.",
    no_args_is_help=True,
)


def mount_archive(
    cli_ctx: CLIContext,
    location: Optional[BaseLocationProvider] = None,
) -> NotesArchive:
    """Собирает страницу каталога и загружает записи.

    Ошибка конфигурации или загрузки завершает команду с кодом 1.
    """
    try:
        archive = cli_ctx.build_archive(location=location)
    except ValueError as e:
        render_error(str(e), title="Configuration error")
        raise typer.Exit(1)

    if cli_ctx.json_output:
        archive.mount()
    else:
        with progress_spinner("Loading notes..."):
            archive.mount()

    if archive.load_error is not None:
        render_error(str(archive.load_error), title="Failed to load notes")
        raise typer.Exit(1)

    return archive


@app.command("list")
def list_notes(
    ctx: typer.Context,
    topic: str = typer.Option(
        Topic.ALL.value,
        "--topic",
        "-t",
        help="Тема: All, AI, Systems, Collaboration.",
    ),
    search: str = typer.Option(
        "",
        "--search",
        "-s",
        help="Подстрока заголовка или описания.",
    ),
    featured: bool = typer.Option(
        False,
        "--featured",
        help="Только избранные заметки (как на главной).",
    ),
    limit: int = typer.Option(
        2,
        "--limit",
        "-n",
        help="Количество избранных заметок.",
        min=1,
        max=50,
    ),
) -> None:
    """Показать карточки каталога."""
    cli_ctx = get_cli_context()

    if featured:
        _list_featured(cli_ctx, limit)
        return

    archive = mount_archive(cli_ctx)
    selected = archive.set_topic(topic)
    archive.set_search(search)
    view = archive.view

    if cli_ctx.json_output:
        data = {
            "topic": selected.value,
            "search": archive.query.search_text,
            "total": archive.total,
            "counts": {key.value: value for key, value in archive.counts.items()},
            "notes": rows_from_records(view),
        }
        console.print_json(json.dumps(data))
        return

    render_topics(archive.counts, selected)
    render_cards(view, latest=archive.latest, total=archive.total)


def _list_featured(cli_ctx: CLIContext, limit: int) -> None:
    try:
        store = cli_ctx.get_store()
        records = store.fetch_featured_notes(limit)
    except ValueError as e:
        render_error(str(e), title="Configuration error")
        raise typer.Exit(1)
    except NoteFetchError as e:
        render_error(str(e), title="Failed to load notes")
        raise typer.Exit(1)

    if cli_ctx.json_output:
        console.print_json(json.dumps({"notes": rows_from_records(records)}))
        return

    render_cards(records)


@app.command("show")
def show(
    ctx: typer.Context,
    slug: str = typer.Argument(..., help="Slug заметки."),
) -> None:
    """Открыть превью заметки по slug."""
    cli_ctx = get_cli_context()
    config = cli_ctx.get_config()

    location = MemoryLocation(config.site_origin, f"{config.notes_base_path}/{quote(slug, safe='')}")
    archive = mount_archive(cli_ctx, location)

    record = archive.overlay.record
    if record is None:
        render_error(f"Note not found: {slug}", title="Not found")
        raise typer.Exit(1)

    url = archive.sharing.build_url(record)
    if cli_ctx.json_output:
        console.print_json(json.dumps({**record.to_row(), "url": url}))
        return

    render_note(record, url=url)


@app.command("share")
def share(
    ctx: typer.Context,
    slug: str = typer.Argument(..., help="Slug заметки."),
) -> None:
    """Скопировать ссылку на заметку в буфер обмена."""
    cli_ctx = get_cli_context()
    archive = mount_archive(cli_ctx)

    record = archive.find(slug)
    if record is None:
        render_error(f"Note not found: {slug}", title="Not found")
        raise typer.Exit(1)

    copied = archive.click_share(record)
    notification = archive.notifications.history[-1]
    archive.unmount()

    if cli_ctx.json_output:
        console.print_json(
            json.dumps(
                {
                    "url": archive.sharing.build_url(record),
                    "copied": copied,
                    "message": notification.message,
                }
            )
        )
    else:
        render_notification(notification)

    if not copied:
        raise typer.Exit(1)


__all__ = ["app", "mount_archive"]
