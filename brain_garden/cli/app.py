"""Typer приложение: главный CLI.

Определяет глобальные опции и монтирует команды.

Attributes:
    app: Главное Typer приложение.
"""

from pathlib import Path
from typing import Optional

import typer

from brain_garden.cli.context import CLIContext

app = typer.Typer(
    name="garden",
    help="🌱 Brain Garden: каталог заметок в терминале.",
    add_completion=True,
    no_args_is_help=True,
    rich_markup_mode="rich",
)

# Хранение контекста между callback и командами
_cli_context: Optional[CLIContext] = None


def get_cli_context() -> CLIContext:
    """Текущий CLI контекст (дефолтный, если команда вызвана напрямую)."""
    if _cli_context is None:
        return CLIContext()
    return _cli_context


def version_callback(value: bool) -> None:
    """Показать версию и выйти."""
    if value:
        from brain_garden import __version__

        typer.echo(f"Brain Garden CLI v{__version__}")
        raise typer.Exit()


@app.callback()
def main_callback(
    ctx: typer.Context,
    notes_file: Optional[Path] = typer.Option(
        None,
        "--notes-file",
        "-f",
        help="Локальный JSON-экспорт заметок (вместо Supabase).",
        envvar="GARDEN_NOTES_FILE",
    ),
    log_level: Optional[str] = typer.Option(
        None,
        "--log-level",
        "-l",
        help="Уровень логирования: TRACE, DEBUG, INFO, WARNING, ERROR.",
    ),
    json_output: bool = typer.Option(
        False,
        "--json",
        "-j",
        help="Вывод в формате JSON (для скриптов).",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Подробный вывод (эквивалент --log-level INFO).",
    ),
    version: bool = typer.Option(
        False,
        "--version",
        "-V",
        help="Показать версию и выйти.",
        callback=version_callback,
        is_eager=True,
    ),
) -> None:
    """🌱 Brain Garden: каталог заметок в терминале."""
    global _cli_context

    _cli_context = CLIContext(
        log_level=log_level,
        json_output=json_output,
        verbose=verbose,
        notes_file=notes_file,
    )
    ctx.obj = _cli_context


# === Монтирование команд ===

from brain_garden.cli.commands import browse, config_cmd, doctor_cmd, notes

app.add_typer(notes.app, name="notes")
app.add_typer(browse.app, name="browse")
app.add_typer(config_cmd.app, name="config")
app.add_typer(doctor_cmd.app, name="doctor")


__all__ = ["app", "get_cli_context"]
