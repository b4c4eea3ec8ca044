"""Конфигурация системы логирования.

Классы:
    LoggingConfig
        Pydantic-модель настроек логирования с поддержкой env variables.

Environment Variables:
    GARDEN_LOG_LEVEL: Уровень консольного вывода (DEBUG/INFO/WARNING/ERROR).
    GARDEN_LOG_FILE: Путь к файлу логов.
    GARDEN_LOG_JSON: JSON-формат для файла (true/false).
    GARDEN_LOG_REDACT: Маскировать ключи Supabase (true/false).
"""

from pathlib import Path
from typing import Literal

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


LogLevel = Literal["TRACE", "DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class LoggingConfig(BaseSettings):
    """Настройки логирования.

    Приоритет (от высшего к низшему): явный параметр, env variable,
    значение по умолчанию.

    Attributes:
        level: Минимальный уровень для консоли.
        file_level: Минимальный уровень для файла.
        log_file: Путь к файлу логов (None = только консоль).
        json_format: JSON-формат для файла.
        show_path: Показывать модуль и строку в консоли.
        redact_secrets: Маскировать anon-ключи и JWT в логах.

    Example:
        >>> config = LoggingConfig(level="DEBUG", log_file="/tmp/garden.log")
    """

    level: LogLevel = Field(
        default="WARNING",
        description="Минимальный уровень для консольного вывода",
    )

    file_level: LogLevel = Field(
        default="TRACE",
        description="Минимальный уровень для файлового вывода",
    )

    log_file: Path | None = Field(
        default=None,
        validation_alias=AliasChoices("log_file", "GARDEN_LOG_FILE"),
        description="Путь к файлу логов (None = только консоль)",
    )

    json_format: bool = Field(
        default=False,
        validation_alias=AliasChoices("json_format", "GARDEN_LOG_JSON"),
        description="Использовать JSON-формат для файла",
    )

    show_path: bool = Field(
        default=False,
        description="Показывать путь к модулю в выводе",
    )

    redact_secrets: bool = Field(
        default=True,
        validation_alias=AliasChoices("redact_secrets", "GARDEN_LOG_REDACT"),
        description="Маскировать ключи Supabase в логах",
    )

    model_config = SettingsConfigDict(
        env_prefix="GARDEN_LOG_",
        env_file=None,
        extra="forbid",
        frozen=True,
        populate_by_name=True,
    )
