"""Команда doctor: диагностика окружения.

Проверяет:
- Python версию и зависимости
- Конфигурацию и источник заметок
- Буфер обмена
- Логирование
- (--verbose) загрузку заметок из источника

Usage:
    garden doctor [--verbose] [--debug-info]
"""

import json
import platform
import sys

import typer

from brain_garden.cli.app import get_cli_context
from brain_garden.cli.console import console
from brain_garden.config import find_config_file
from brain_garden.exceptions import NoteFetchError
from brain_garden.infrastructure import SystemClipboard
from brain_garden.utils.logger import check_config, dump_debug_info, get_current_config
from brain_garden.utils.logger.diagnostics import get_package_versions

app = typer.Typer(
    help="🩺 Диагностика окружения Brain Garden.",
    invoke_without_command=True,
)

Check = tuple[str, str, str]

STATUS_ICONS = {
    "ok": "[green]✅[/green]",
    "warning": "[yellow]⚠️[/yellow]",
    "error": "[red]❌[/red]",
}


@app.callback(invoke_without_command=True)
def doctor(
    ctx: typer.Context,
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Подробный вывод (включая пробную загрузку заметок).",
    ),
    debug_info: bool = typer.Option(
        False,
        "--debug-info",
        help="Вывести отчёт о логировании и окружении.",
    ),
) -> None:
    """Выполнить диагностику окружения."""
    cli_ctx = get_cli_context()
    sections: list[tuple[str, list[Check]]] = []

    # === Environment ===
    env_checks: list[Check] = []
    py_version = platform.python_version()
    if sys.version_info >= (3, 10):
        env_checks.append(("Python", "ok", py_version))
    else:
        env_checks.append(("Python", "error", f"{py_version} (requires 3.10+)"))

    versions = get_package_versions()
    missing = [name for name, version in versions.items() if version == "not installed" and name != "brain-garden"]
    env_checks.append(("brain-garden", "ok", versions.get("brain-garden", "development")))
    if missing:
        env_checks.append(("Dependencies", "error", f"missing: {', '.join(missing)}"))
    else:
        env_checks.append(("Dependencies", "ok", "all installed"))
    sections.append(("Environment", env_checks))

    # === Notes source ===
    source_checks: list[Check] = []
    toml_path = find_config_file()
    source_checks.append(("Config file", "info", str(toml_path) if toml_path else "defaults + environment"))

    try:
        config = cli_ctx.get_config()
    except ValueError as e:
        source_checks.append(("Config", "error", str(e)))
        config = None

    if config is not None:
        if config.notes_file is not None:
            if config.notes_file.exists():
                source_checks.append(("Notes file", "ok", str(config.notes_file)))
            else:
                source_checks.append(("Notes file", "error", f"{config.notes_file} (not found)"))
        elif config.has_supabase:
            source_checks.append(("Supabase", "ok", f"{config.supabase_url} / {config.notes_table}"))
        else:
            source_checks.append(("Notes source", "error", "neither --notes-file nor Supabase configured"))

        if verbose and not any(status == "error" for _, status, _ in source_checks):
            source_checks.append(_check_store(cli_ctx))
    sections.append(("Notes source", source_checks))

    # === Clipboard ===
    clipboard = SystemClipboard()
    if clipboard.available:
        clipboard_check: Check = ("Clipboard", "ok", " ".join(clipboard.command))
    else:
        clipboard_check = ("Clipboard", "warning", "no clipboard utility found (share will fail)")
    sections.append(("Clipboard", [clipboard_check]))

    # === Logging ===
    logging_checks: list[Check] = [("Level", "info", get_current_config().level)]
    logging_checks.extend(("Logging", "warning", warning) for warning in check_config())
    sections.append(("Logging", logging_checks))

    all_checks = [check for _, checks in sections for check in checks]

    if cli_ctx.json_output:
        _output_json(all_checks)
    else:
        _output_rich(sections, all_checks)
        if debug_info:
            console.print(dump_debug_info(), markup=False, highlight=False)

    if any(status == "error" for _, status, _ in all_checks):
        raise typer.Exit(1)


def _check_store(cli_ctx) -> Check:
    """Пробная загрузка заметок из настроенного источника."""
    try:
        records = cli_ctx.get_store().fetch_all_notes()
    except (NoteFetchError, ValueError) as e:
        return ("Fetch", "error", str(e))
    return ("Fetch", "ok", f"{len(records)} notes")


def _summary(checks: list[Check]) -> tuple[int, int, int]:
    passed = sum(1 for _, status, _ in checks if status == "ok")
    warnings = sum(1 for _, status, _ in checks if status == "warning")
    errors = sum(1 for _, status, _ in checks if status == "error")
    return passed, warnings, errors


def _output_json(checks: list[Check]) -> None:
    passed, warnings, errors = _summary(checks)
    data = {
        "status": "healthy" if errors == 0 else "unhealthy",
        "passed": passed,
        "warnings": warnings,
        "errors": errors,
        "checks": [{"name": name, "status": status, "value": value} for name, status, value in checks],
    }
    console.print_json(json.dumps(data))


def _output_rich(sections: list[tuple[str, list[Check]]], all_checks: list[Check]) -> None:
    console.print("\n[bold]🩺 Диагностика Brain Garden...[/bold]\n")

    for section_name, checks in sections:
        console.print(f"[bold]{section_name}:[/bold]")
        for name, status, value in checks:
            icon = STATUS_ICONS.get(status, "[blue]ℹ️[/blue]")
            console.print(f"  {icon} {name}: {value}", highlight=False)
        console.print()

    _, warnings, errors = _summary(all_checks)
    console.print("━" * 60)

    if errors == 0:
        status_text = "🩺 Diagnosis: [green]Healthy[/green]"
    else:
        status_text = "🚨 Diagnosis: [red]Unhealthy[/red]"
    if warnings > 0:
        status_text += f" ({warnings} warning{'s' if warnings > 1 else ''})"
    console.print(f"\n{status_text}")


__all__ = ["app"]
