"""Прогресс-индикаторы для CLI."""

from contextlib import contextmanager
from typing import Iterator

from rich.progress import Progress, SpinnerColumn, TextColumn

from brain_garden.cli.console import console


@contextmanager
def progress_spinner(message: str = "Loading notes...") -> Iterator[None]:
    """Контекстный менеджер для спиннера.

    Example:
        with progress_spinner("Loading notes..."):
            archive.mount()
    """
    with Progress(
        SpinnerColumn(),
        TextColumn("[progress.description]{task.description}"),
        console=console,
        transient=True,
    ) as progress:
        progress.add_task(description=f"[cyan]{message}[/cyan]", total=None)
        yield
