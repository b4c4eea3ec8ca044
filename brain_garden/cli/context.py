"""CLI Context: контейнер зависимостей для команд.

Компоненты создаются лениво, чтобы --help работал мгновенно.

Classes:
    CLIContext: Конфиг, хранилище заметок и страница каталога по запросу.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from rich.console import Console

from brain_garden.cli.console import console as default_console
from brain_garden.config import GardenConfig, get_config
from brain_garden.core.archive import NotesArchive
from brain_garden.infrastructure import (
    JsonNoteStore,
    MemoryLocation,
    SupabaseNoteStore,
    SystemClipboard,
    ThreadingScheduler,
)
from brain_garden.interfaces import BaseClipboard, BaseLocationProvider, BaseNoteStore, BaseScheduler


@dataclass
class CLIContext:
    """Контейнер зависимостей для CLI команд.

    Attributes:
        log_level: Override уровня логирования из CLI.
        json_output: Режим JSON вывода (для скриптов).
        verbose: Подробный вывод.
        notes_file: Override локального JSON-экспорта.
        console: Rich Console для вывода.

    Example:
        >>> ctx = CLIContext(notes_file=Path("notes.json"))
        >>> archive = ctx.build_archive()
        >>> archive.mount()
    """

    log_level: Optional[str] = None
    json_output: bool = False
    verbose: bool = False
    notes_file: Optional[Path] = None
    console: Console = field(default_factory=lambda: default_console)

    _config: Optional[GardenConfig] = field(default=None, init=False, repr=False)
    _store: Optional[BaseNoteStore] = field(default=None, init=False, repr=False)
    _logging_configured: bool = field(default=False, init=False, repr=False)

    def get_config(self) -> GardenConfig:
        """Конфигурация с применёнными CLI override'ами."""
        if self._config is None:
            overrides = {}
            if self.log_level:
                overrides["log_level"] = self.log_level
            if self.notes_file:
                overrides["notes_file"] = self.notes_file

            self._config = get_config(**overrides)
            self._ensure_logging(self._config)
        return self._config

    def get_store(self) -> BaseNoteStore:
        """Источник заметок: локальный JSON или Supabase.

        Raises:
            ValueError: Если не задан ни файл, ни Supabase.
        """
        if self._store is None:
            config = self.get_config()
            if config.notes_file is not None:
                self._store = JsonNoteStore(config.notes_file)
            else:
                url, anon_key = config.require_supabase()
                self._store = SupabaseNoteStore(
                    url,
                    anon_key,
                    table=config.notes_table,
                    timeout=config.request_timeout,
                )
        return self._store

    def build_archive(
        self,
        location: Optional[BaseLocationProvider] = None,
        clipboard: Optional[BaseClipboard] = None,
        scheduler: Optional[BaseScheduler] = None,
    ) -> NotesArchive:
        """Собирает страницу каталога (без загрузки записей).

        Args:
            location: Провайдер адреса; по умолчанию MemoryLocation
                на пути списка заметок.
            clipboard: Буфер обмена; по умолчанию системный.
            scheduler: Планировщик уведомлений; по умолчанию threading.
        """
        config = self.get_config()
        return NotesArchive(
            self.get_store(),
            location or MemoryLocation(config.site_origin, config.notes_base_path),
            clipboard or SystemClipboard(),
            scheduler or ThreadingScheduler(),
            base_path=config.notes_base_path,
            history_mode=config.history_mode,
            notification_duration=config.notification_duration,
        )

    def _ensure_logging(self, config: GardenConfig) -> None:
        """Настройка логирования из конфига (один раз)."""
        if self._logging_configured:
            return

        from brain_garden.utils.logger import LoggingConfig, setup_logging

        # Verbose mode повышает уровень до INFO
        level = config.log_level
        if self.verbose and level in ("WARNING", "ERROR", "CRITICAL"):
            level = "INFO"

        setup_logging(LoggingConfig(level=level, log_file=config.log_file))
        self._logging_configured = True


__all__ = ["CLIContext"]
