"""Команда config: просмотр конфигурации.

Usage:
    garden config show
    garden config show --reveal
"""

import json
from typing import Optional

import typer
from rich.table import Table

from brain_garden.cli.app import get_cli_context
from brain_garden.cli.console import console
from brain_garden.cli.ui import render_error
from brain_garden.config import find_config_file

app = typer.Typer(
    help="🔧 Просмотр конфигурации.",
    no_args_is_help=True,
)


def _mask_secret(value: Optional[str]) -> str:
    """Маскирует секретное значение для вывода."""
    if not value:
        return "[dim]not set[/dim]"
    if len(value) <= 8:
        return "****"
    return f"{value[:4]}***{value[-4:]}"


@app.command("show")
def show(
    ctx: typer.Context,
    reveal_secrets: bool = typer.Option(
        False,
        "--reveal",
        "-r",
        help="Показать ключ Supabase без маскировки.",
    ),
) -> None:
    """Показать текущую конфигурацию."""
    cli_ctx = get_cli_context()

    try:
        config = cli_ctx.get_config()
    except ValueError as e:
        render_error(str(e), title="Config error")
        raise typer.Exit(1)

    toml_path = find_config_file()

    if cli_ctx.json_output:
        data = {
            "source": str(toml_path) if toml_path else None,
            "config": config.to_toml_dict(),
        }
        data["config"]["supabase"]["anon_key"] = (
            config.supabase_anon_key if reveal_secrets else ("***" if config.supabase_anon_key else None)
        )
        console.print_json(json.dumps(data))
        return

    source = f"{toml_path}" if toml_path else "[dim]defaults + environment[/dim]"
    console.print("\n[bold]⚙️  Текущая конфигурация[/bold]")
    console.print(f"[dim]Источник: {source}[/dim]\n")

    table = Table(show_header=True, header_style="bold magenta")
    table.add_column("Настройка", style="cyan")
    table.add_column("Значение")

    not_set = "[dim]not set[/dim]"
    key_display = config.supabase_anon_key if reveal_secrets else _mask_secret(config.supabase_anon_key)

    table.add_row("supabase.url", config.supabase_url or not_set)
    table.add_row("supabase.anon_key", key_display or not_set)
    table.add_row("supabase.table", config.notes_table)
    table.add_row("supabase.timeout", f"{config.request_timeout:g}s")
    table.add_row("site.origin", config.site_origin)
    table.add_row("notes.base_path", config.notes_base_path)
    table.add_row("notes.file", str(config.notes_file) if config.notes_file else not_set)
    table.add_row("notes.history_mode", config.history_mode.value)
    table.add_row("notes.notification_duration", f"{config.notification_duration:g}s")
    table.add_row("logging.level", config.log_level)
    table.add_row("logging.file", str(config.log_file) if config.log_file else not_set)

    console.print(table)


__all__ = ["app"]
