"""Единая конфигурация Brain Garden.

Загружает настройки из (в порядке приоритета):
1. CLI аргументы (переданные как kwargs)
2. Environment variables (GARDEN_*, SUPABASE_URL, SUPABASE_ANON_KEY)
3. garden.toml в текущей или родительских директориях
4. Default values

Классы:
    GardenConfig
        Pydantic Settings с поддержкой TOML и env variables.

Функции:
    get_config
        Получить конфигурацию с возможными override'ами.
    find_config_file
        Найти garden.toml в текущей или родительских директориях.

Example:
    >>> from brain_garden.config import get_config
    >>> config = get_config(notes_file="notes.json", log_level="DEBUG")
    >>> config.uses_local_file
    True
"""

import sys
from pathlib import Path
from typing import Any, Literal, Optional

from pydantic import AliasChoices, Field, field_validator, model_validator
from pydantic.fields import FieldInfo
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource, SettingsConfigDict

from brain_garden.core.location_sync import HistoryMode, normalize_base_path
from brain_garden.utils.logger import get_logger

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib

logger = get_logger(__name__)

CONFIG_FILE_NAME = "garden.toml"

LogLevel = Literal["TRACE", "DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]

# (секция, ключ) TOML -> поле конфига
TOML_MAPPING: dict[tuple[str, str], str] = {
    ("supabase", "url"): "supabase_url",
    ("supabase", "anon_key"): "supabase_anon_key",
    ("supabase", "table"): "notes_table",
    ("supabase", "timeout"): "request_timeout",
    ("site", "origin"): "site_origin",
    ("notes", "base_path"): "notes_base_path",
    ("notes", "file"): "notes_file",
    ("notes", "history_mode"): "history_mode",
    ("notes", "notification_duration"): "notification_duration",
    ("logging", "level"): "log_level",
    ("logging", "file"): "log_file",
}


def find_config_file(start_dir: Optional[Path] = None) -> Optional[Path]:
    """Найти garden.toml в текущей или родительских директориях.

    Args:
        start_dir: Начальная директория поиска (по умолчанию cwd).

    Returns:
        Path к garden.toml или None если не найден.
    """
    current = start_dir or Path.cwd()

    for _ in range(10):
        config_path = current / CONFIG_FILE_NAME
        if config_path.exists():
            return config_path

        parent = current.parent
        if parent == current:
            break
        current = parent

    return None


def load_toml(path: Path) -> dict[str, Any]:
    """Загружает garden.toml и выравнивает секции в плоские поля.

    [supabase]
    url = "https://xyz.supabase.co"

    превращается в {"supabase_url": "https://xyz.supabase.co"}.
    Плоские ключи верхнего уровня тоже поддерживаются.
    """
    try:
        with open(path, "rb") as f:
            raw = tomllib.load(f)
    except (OSError, tomllib.TOMLDecodeError) as e:
        logger.warning("Failed to load TOML", path=str(path), error=str(e))
        return {}

    flat: dict[str, Any] = {}
    for (section, key), field_name in TOML_MAPPING.items():
        if isinstance(raw.get(section), dict) and key in raw[section]:
            flat[field_name] = raw[section][key]

    for field_name in TOML_MAPPING.values():
        if field_name in raw:
            flat[field_name] = raw[field_name]

    return flat


class GardenTomlSource(PydanticBaseSettingsSource):
    """Источник настроек из ближайшего garden.toml."""

    def __init__(self, settings_cls: type[BaseSettings]) -> None:
        super().__init__(settings_cls)
        self.path = find_config_file()
        self._data = load_toml(self.path) if self.path else {}
        if self.path:
            logger.debug("Loaded config from TOML", path=str(self.path), keys=len(self._data))

    def get_field_value(self, field: FieldInfo, field_name: str) -> tuple[Any, str, bool]:
        return self._data.get(field_name), field_name, False

    def __call__(self) -> dict[str, Any]:
        return dict(self._data)


class GardenConfig(BaseSettings):
    """Конфигурация каталога заметок.

    Attributes:
        supabase_url: URL проекта Supabase.
        supabase_anon_key: Публичный (anon) ключ Supabase.
        notes_table: Таблица с заметками.
        notes_file: Локальный JSON-экспорт (приоритетнее Supabase).
        request_timeout: Таймаут HTTP-запроса в секундах.
        site_origin: Origin сайта для ссылок "Поделиться".
        notes_base_path: Путь списка заметок.
        history_mode: Политика истории при открытии превью.
        notification_duration: Время показа уведомлений.
        log_level: Уровень логирования.
        log_file: Путь к файлу логов.

    Environment Variables:
        SUPABASE_URL, SUPABASE_ANON_KEY: Читаются и без префикса.
        GARDEN_NOTES_FILE, GARDEN_SITE_ORIGIN, GARDEN_LOG_LEVEL...
    """

    # === Supabase ===
    supabase_url: Optional[str] = Field(
        default=None,
        description="URL проекта Supabase",
        validation_alias=AliasChoices("supabase_url", "GARDEN_SUPABASE_URL"),
    )

    supabase_anon_key: Optional[str] = Field(
        default=None,
        description="Публичный ключ Supabase",
        validation_alias=AliasChoices("supabase_anon_key", "GARDEN_SUPABASE_ANON_KEY"),
        repr=False,
    )

    notes_table: str = Field(
        default="brain_garden",
        min_length=1,
        description="Таблица заметок",
    )

    request_timeout: float = Field(
        default=10.0,
        gt=0,
        le=120,
        description="Таймаут запроса к Supabase (сек)",
    )

    notes_file: Optional[Path] = Field(
        default=None,
        description="Локальный JSON-экспорт таблицы заметок",
    )

    # === Site ===
    site_origin: str = Field(
        default="http://localhost:5173",
        description="Origin сайта для ссылок",
    )

    notes_base_path: str = Field(
        default="/notes",
        description="Путь списка заметок",
    )

    history_mode: HistoryMode = Field(
        default=HistoryMode.PUSH,
        description="push: открытие добавляет запись истории; replace: заменяет",
    )

    notification_duration: float = Field(
        default=3.0,
        gt=0,
        le=60,
        description="Время показа уведомлений (сек)",
    )

    # === Logging ===
    log_level: LogLevel = Field(
        default="WARNING",
        description="Уровень логирования",
    )

    log_file: Optional[Path] = Field(
        default=None,
        description="Путь к файлу логов (None = только консоль)",
    )

    # === Validators ===
    @field_validator("notes_file", "log_file", mode="before")
    @classmethod
    def validate_path(cls, v: Any) -> Optional[Path]:
        if v is None or v == "":
            return None
        return Path(v).expanduser()

    @field_validator("supabase_url", "supabase_anon_key", mode="before")
    @classmethod
    def strip_whitespace(cls, v: Any) -> Optional[str]:
        """Убирает пробелы из ключей."""
        if v is None or str(v).strip() == "":
            return None
        return str(v).strip()

    @field_validator("supabase_url", "site_origin")
    @classmethod
    def strip_trailing_slash(cls, v: Optional[str]) -> Optional[str]:
        return v.rstrip("/") if v else v

    @field_validator("notes_base_path")
    @classmethod
    def validate_base_path(cls, v: str) -> str:
        return normalize_base_path(v)

    @field_validator("log_level", mode="before")
    @classmethod
    def upper_log_level(cls, v: Any) -> Any:
        return v.upper() if isinstance(v, str) else v

    @model_validator(mode="after")
    def log_config_source(self) -> "GardenConfig":
        logger.debug(
            "Config loaded",
            notes_file=str(self.notes_file) if self.notes_file else None,
            has_supabase=self.has_supabase,
            history_mode=self.history_mode.value,
        )
        return self

    model_config = SettingsConfigDict(
        env_prefix="GARDEN_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        populate_by_name=True,
    )

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """TOML имеет низший приоритет: env и аргументы переопределяют его."""
        return (
            init_settings,
            env_settings,
            dotenv_settings,
            GardenTomlSource(settings_cls),
            file_secret_settings,
        )

    # === Utility Methods ===

    @property
    def has_supabase(self) -> bool:
        return bool(self.supabase_url and self.supabase_anon_key)

    @property
    def uses_local_file(self) -> bool:
        return self.notes_file is not None

    def require_supabase(self) -> tuple[str, str]:
        """URL и ключ Supabase или исключение.

        Raises:
            ValueError: Если URL или ключ не настроены.
        """
        if not self.has_supabase:
            raise ValueError(
                "SUPABASE_URL and SUPABASE_ANON_KEY are not configured. "
                "Set them via environment variables or in garden.toml, "
                "or point --notes-file at a local JSON export"
            )
        return self.supabase_url, self.supabase_anon_key

    def to_toml_dict(self) -> dict:
        """Структура для garden.toml (ключ Supabase не включается)."""
        return {
            "supabase": {
                **({"url": self.supabase_url} if self.supabase_url else {}),
                "table": self.notes_table,
                "timeout": self.request_timeout,
            },
            "site": {"origin": self.site_origin},
            "notes": {
                "base_path": self.notes_base_path,
                **({"file": str(self.notes_file)} if self.notes_file else {}),
                "history_mode": self.history_mode.value,
                "notification_duration": self.notification_duration,
            },
            "logging": {
                "level": self.log_level,
                **({"file": str(self.log_file)} if self.log_file else {}),
            },
        }


_config: Optional[GardenConfig] = None


def get_config(**overrides: Any) -> GardenConfig:
    """Получить конфигурацию с возможными override'ами.

    При первом вызове создаёт конфигурацию; с overrides всегда
    создаёт новый экземпляр.
    """
    global _config

    if overrides or _config is None:
        _config = GardenConfig(**overrides)

    return _config


def reset_config() -> None:
    """Сбросить глобальный конфиг (для тестов)."""
    global _config
    _config = None


__all__ = [
    "GardenConfig",
    "get_config",
    "reset_config",
    "find_config_file",
    "load_toml",
    "LogLevel",
]
