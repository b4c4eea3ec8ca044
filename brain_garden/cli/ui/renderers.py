"""Рендереры для CLI вывода.

Карточки каталога, бейджи тем, панель превью заметки,
уведомления и сообщения об ошибках.
"""

from typing import Mapping, Optional, Sequence

from rich.console import Console, Group
from rich.markdown import Markdown
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from brain_garden.cli.console import console as default_console
from brain_garden.domain.note import NoteRecord, Topic
from brain_garden.domain.notification import Notification, NotificationKind
from brain_garden.utils.text import format_published, looks_like_html, reading_time_minutes, strip_html

TOPIC_STYLES: dict[str, str] = {
    Topic.AI.value: "magenta",
    Topic.SYSTEMS.value: "cyan",
    Topic.COLLABORATION.value: "green",
}

LATEST_BADGE = "✨ Latest"
PINNED_BADGE = "📌"


def _topic_text(category: Optional[str]) -> Text:
    if not category:
        return Text("—", style="dim")
    return Text(category, style=TOPIC_STYLES.get(category, "white"))


def render_topics(
    counts: Mapping[Topic, int],
    selected: Topic = Topic.ALL,
    console: Optional[Console] = None,
) -> None:
    """Строка фильтров тем со счётчиками; выбранная тема выделена."""
    console = console or default_console
    line = Text()
    for topic in Topic.selectable():
        label = f" {topic.value} ({counts.get(topic, 0)}) "
        style = "bold reverse" if topic is selected else TOPIC_STYLES.get(topic.value, "white")
        line.append(label, style=style)
        line.append(" ")
    console.print(line)


def render_cards(
    view: Sequence[NoteRecord],
    latest: Optional[NoteRecord] = None,
    total: Optional[int] = None,
    console: Optional[Console] = None,
) -> None:
    """Отображает карточки заметок в порядке представления.

    Args:
        view: Упорядоченный список из compute_view().
        latest: Карточка с бейджем "Latest".
        total: Всего записей (для подписи "N of M").
    """
    console = console or default_console

    if not view:
        console.print(Panel("[yellow]No notes match the current filters[/yellow]", title="🌱 Brain Garden"))
        return

    caption = f"{len(view)} of {total} notes" if total is not None else f"{len(view)} notes"
    table = Table(show_header=True, header_style="bold magenta", caption=caption)
    table.add_column("#", style="dim", width=3)
    table.add_column("Title", overflow="fold")
    table.add_column("Topic", width=14)
    table.add_column("Published", width=18)
    table.add_column("Read", justify="right", width=7)
    table.add_column("Slug", style="dim", overflow="fold")

    for i, record in enumerate(view, 1):
        title = Text()
        if record.is_pinned:
            title.append(f"{PINNED_BADGE} ")
        title.append(record.title, style="bold")
        if latest is not None and record.slug == latest.slug:
            title.append(f"  {LATEST_BADGE}", style="yellow")
        if record.summary:
            title.append(f"\n{record.summary}", style="dim")

        minutes = reading_time_minutes(record.content)
        table.add_row(
            str(i),
            title,
            _topic_text(record.category),
            format_published(record.published_date),
            f"{minutes} min" if minutes else "—",
            record.slug,
        )

    console.print(table)


def render_note(record: NoteRecord, url: Optional[str] = None, console: Optional[Console] = None) -> None:
    """Панель превью заметки.

    HTML-тело выводится как текст без тегов, остальное как Markdown.
    """
    console = console or default_console

    meta = Text()
    meta.append_text(_topic_text(record.category))
    meta.append(f"  ·  {format_published(record.published_date)}", style="dim")
    minutes = reading_time_minutes(record.content)
    if minutes:
        meta.append(f"  ·  {minutes} min read", style="dim")
    if record.tags:
        meta.append("\n" + " ".join(f"#{tag}" for tag in record.tags), style="blue")

    parts = [meta]
    if record.summary:
        parts.append(Text(f"\n{record.summary}", style="italic"))
    if record.content:
        body = Text(strip_html(record.content)) if looks_like_html(record.content) else Markdown(record.content)
        parts.extend([Text(""), body])

    console.print(
        Panel(
            Group(*parts),
            title=f"📝 {escape(record.title)}",
            subtitle=escape(url) if url else None,
            border_style="cyan",
        )
    )


def render_notification(notification: Notification, console: Optional[Console] = None) -> None:
    console = console or default_console
    if notification.kind is NotificationKind.SUCCESS:
        console.print(f"[green]✓ {escape(notification.message)}[/green] [dim]{escape(notification.detail)}[/dim]")
    else:
        console.print(f"[red]✗ {escape(notification.message)}[/red] [dim]{escape(notification.detail)}[/dim]")


def render_error(message: str, title: str = "Error", console: Optional[Console] = None) -> None:
    """Отображает сообщение об ошибке.

    Args:
        message: Текст ошибки.
        title: Заголовок панели.
    """
    console = console or default_console
    console.print(Panel(f"[red]{escape(message)}[/red]", title=f"❌ {title}"))


__all__ = [
    "TOPIC_STYLES",
    "render_topics",
    "render_cards",
    "render_note",
    "render_notification",
    "render_error",
]
