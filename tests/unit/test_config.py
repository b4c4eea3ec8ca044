"""Unit-тесты для GardenConfig.

Проверяет:
- Дефолтные значения
- Загрузку garden.toml (секции и плоские ключи)
- Приоритет env variables над TOML
- Валидацию и нормализацию полей
"""

from pathlib import Path

import pytest
from pydantic import ValidationError

from brain_garden.config import GardenConfig, find_config_file, get_config, load_toml
from brain_garden.core.location_sync import HistoryMode

ENV_VARS = (
    "SUPABASE_URL",
    "SUPABASE_ANON_KEY",
    "GARDEN_SUPABASE_URL",
    "GARDEN_SUPABASE_ANON_KEY",
    "GARDEN_NOTES_FILE",
    "GARDEN_SITE_ORIGIN",
    "GARDEN_NOTES_BASE_PATH",
    "GARDEN_HISTORY_MODE",
    "GARDEN_LOG_LEVEL",
    "GARDEN_LOG_FILE",
)

TOML = """
[supabase]
url = "https://abc.supabase.co/"
anon_key = "anon"
table = "notes"

[site]
origin = "https://garden.example"

[notes]
base_path = "garden/"
history_mode = "replace"

[logging]
level = "debug"
"""


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch, tmp_path):
    """Пустое окружение и cwd без garden.toml и .env."""
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
    return tmp_path


class TestDefaults:
    def test_defaults(self):
        config = GardenConfig()

        assert config.supabase_url is None
        assert config.notes_table == "brain_garden"
        assert config.site_origin == "http://localhost:5173"
        assert config.notes_base_path == "/notes"
        assert config.history_mode is HistoryMode.PUSH
        assert config.notification_duration == 3.0
        assert config.log_level == "WARNING"
        assert not config.has_supabase
        assert not config.uses_local_file

    def test_require_supabase_without_credentials(self):
        with pytest.raises(ValueError, match="SUPABASE_URL"):
            GardenConfig().require_supabase()


class TestToml:
    """Загрузка garden.toml."""

    def test_find_config_file_in_parent(self, isolated_env):
        (isolated_env / "garden.toml").write_text(TOML, encoding="utf-8")
        nested = isolated_env / "a" / "b"
        nested.mkdir(parents=True)

        assert find_config_file(nested) == isolated_env / "garden.toml"

    def test_sections_flattened(self, isolated_env):
        path = isolated_env / "garden.toml"
        path.write_text(TOML, encoding="utf-8")

        flat = load_toml(path)

        assert flat["supabase_url"] == "https://abc.supabase.co/"
        assert flat["notes_table"] == "notes"
        assert flat["history_mode"] == "replace"

    def test_flat_keys(self, isolated_env):
        path = isolated_env / "garden.toml"
        path.write_text('site_origin = "https://flat.example"\n', encoding="utf-8")
        assert load_toml(path) == {"site_origin": "https://flat.example"}

    def test_broken_toml_ignored(self, isolated_env):
        path = isolated_env / "garden.toml"
        path.write_text("[supabase\nurl = ", encoding="utf-8")
        assert load_toml(path) == {}

    def test_config_from_toml(self, isolated_env):
        (isolated_env / "garden.toml").write_text(TOML, encoding="utf-8")

        config = GardenConfig()

        assert config.supabase_url == "https://abc.supabase.co"
        assert config.require_supabase() == ("https://abc.supabase.co", "anon")
        assert config.notes_base_path == "/garden"
        assert config.history_mode is HistoryMode.REPLACE
        assert config.log_level == "DEBUG"

    def test_env_overrides_toml(self, isolated_env, monkeypatch):
        (isolated_env / "garden.toml").write_text(TOML, encoding="utf-8")
        monkeypatch.setenv("GARDEN_SITE_ORIGIN", "https://env.example/")

        assert GardenConfig().site_origin == "https://env.example"

    def test_kwargs_override_toml(self, isolated_env):
        (isolated_env / "garden.toml").write_text(TOML, encoding="utf-8")
        assert GardenConfig(notes_table="other").notes_table == "other"


class TestEnvironment:
    def test_supabase_without_prefix(self, monkeypatch):
        monkeypatch.setenv("SUPABASE_URL", " https://xyz.supabase.co/ ")
        monkeypatch.setenv("SUPABASE_ANON_KEY", "anon-key")

        config = GardenConfig()

        assert config.has_supabase
        assert config.supabase_url == "https://xyz.supabase.co"

    def test_anon_key_hidden_from_repr(self, monkeypatch):
        monkeypatch.setenv("SUPABASE_ANON_KEY", "very-secret-key")
        assert "very-secret-key" not in repr(GardenConfig())

    def test_notes_file_env(self, monkeypatch):
        monkeypatch.setenv("GARDEN_NOTES_FILE", "~/notes.json")

        config = GardenConfig()

        assert config.uses_local_file
        assert config.notes_file == Path("~/notes.json").expanduser()


class TestValidation:
    @pytest.mark.parametrize(
        "value, expected",
        [("notes", "/notes"), ("/garden/", "/garden"), ("/", "/notes"), ("", "/notes")],
    )
    def test_base_path_normalized(self, value, expected):
        assert GardenConfig(notes_base_path=value).notes_base_path == expected

    def test_invalid_history_mode(self):
        with pytest.raises(ValidationError):
            GardenConfig(history_mode="sideways")

    def test_notification_duration_positive(self):
        with pytest.raises(ValidationError):
            GardenConfig(notification_duration=0)

    def test_empty_strings_become_none(self):
        config = GardenConfig(supabase_url="  ", notes_file="")
        assert config.supabase_url is None
        assert config.notes_file is None


class TestHelpers:
    def test_to_toml_dict_omits_key(self):
        data = GardenConfig(supabase_url="https://abc.supabase.co", supabase_anon_key="secret").to_toml_dict()

        assert data["supabase"]["url"] == "https://abc.supabase.co"
        assert "anon_key" not in data["supabase"]
        assert data["notes"]["history_mode"] == "push"

    def test_get_config_cached(self):
        assert get_config() is get_config()

    def test_get_config_overrides(self):
        first = get_config()
        second = get_config(log_level="info")
        assert second is not first
        assert second.log_level == "INFO"
