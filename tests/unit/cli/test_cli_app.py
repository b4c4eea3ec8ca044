"""
Tests for CLI commands: notes, browse, config, doctor.

Используем Typer CliRunner и локальный JSON-экспорт вместо Supabase.
"""

import json
from unittest.mock import patch

import pytest
from typer.testing import CliRunner

from brain_garden.cli.app import app
from brain_garden.infrastructure import MemoryClipboard

runner = CliRunner()

ROWS = [
    {"id": 1, "slug": "alpha", "title": "Alpha", "category": "AI",
     "published_date": "2024-01-01", "featured": True, "content": "<p>one two three</p>"},
    {"id": 2, "slug": "beta", "title": "Beta", "category": "AI",
     "published_date": "2023-01-01", "is_pinned": True},
    {"id": 3, "slug": "systems-thinking", "title": "Systems Thinking", "category": "Systems",
     "published_date": "2024-03-01", "summary": "Feedback loops"},
]


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch, tmp_path):
    """cwd без garden.toml и окружение без настроек Supabase."""
    for name in ("SUPABASE_URL", "SUPABASE_ANON_KEY", "GARDEN_SITE_ORIGIN",
                 "GARDEN_NOTES_FILE", "GARDEN_NOTES_BASE_PATH", "GARDEN_HISTORY_MODE"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def notes_file(tmp_path):
    path = tmp_path / "notes.json"
    path.write_text(json.dumps(ROWS), encoding="utf-8")
    return path


@pytest.fixture
def clipboard():
    clipboard = MemoryClipboard()
    with patch("brain_garden.cli.context.SystemClipboard", return_value=clipboard):
        yield clipboard


def invoke(*args, input=None):
    return runner.invoke(app, [str(a) for a in args], input=input)


class TestCliApp:
    """Тесты основного CLI приложения."""

    def test_version_option(self):
        result = invoke("--version")
        assert result.exit_code == 0
        assert "0.1.0" in result.stdout

    def test_help_option(self):
        result = invoke("--help")
        assert result.exit_code == 0
        assert "Brain Garden" in result.stdout

    def test_unknown_command(self):
        assert invoke("unknown-command").exit_code != 0


class TestNotesList:
    """Тесты команды notes list."""

    def test_json_view(self, notes_file):
        result = invoke("--notes-file", notes_file, "--json", "notes", "list")

        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert data["topic"] == "All"
        assert data["total"] == 3
        assert data["counts"] == {"All": 3, "AI": 2, "Systems": 1, "Collaboration": 0}
        # Закреплённая заметка первой, далее новые первыми
        assert [n["slug"] for n in data["notes"]] == ["beta", "systems-thinking", "alpha"]

    def test_topic_and_search(self, notes_file):
        result = invoke("-f", notes_file, "-j", "notes", "list", "--topic", "ai", "--search", " ALP ")

        data = json.loads(result.stdout)
        assert data["topic"] == "AI"
        assert [n["slug"] for n in data["notes"]] == ["alpha"]

    def test_unknown_topic_falls_back_to_all(self, notes_file):
        data = json.loads(invoke("-f", notes_file, "-j", "notes", "list", "-t", "Cooking").stdout)
        assert data["topic"] == "All"
        assert len(data["notes"]) == 3

    def test_featured(self, notes_file):
        result = invoke("-f", notes_file, "-j", "notes", "list", "--featured")
        assert [n["slug"] for n in json.loads(result.stdout)["notes"]] == ["alpha"]

    def test_rich_output(self, notes_file):
        result = invoke("-f", notes_file, "notes", "list")

        assert result.exit_code == 0
        assert "Beta" in result.stdout
        assert "3 of 3 notes" in result.stdout

    def test_empty_view(self, notes_file):
        result = invoke("-f", notes_file, "notes", "list", "--search", "nothing-matches")
        assert "No notes match" in result.stdout

    def test_missing_file(self, tmp_path):
        result = invoke("-f", tmp_path / "missing.json", "notes", "list")
        assert result.exit_code == 1
        assert "Failed to load notes" in result.stdout

    def test_no_source_configured(self):
        result = invoke("notes", "list")
        assert result.exit_code == 1
        assert "Configuration error" in result.stdout


class TestNotesShow:
    def test_show_json(self, notes_file):
        result = invoke("-f", notes_file, "-j", "notes", "show", "alpha")

        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert data["title"] == "Alpha"
        assert data["url"] == "http://localhost:5173/notes/alpha"

    def test_show_rich(self, notes_file):
        result = invoke("-f", notes_file, "notes", "show", "systems-thinking")
        assert result.exit_code == 0
        assert "Feedback loops" in result.stdout

    def test_show_unknown(self, notes_file):
        result = invoke("-f", notes_file, "notes", "show", "ghost")
        assert result.exit_code == 1
        assert "Note not found: ghost" in result.stdout


class TestNotesShare:
    def test_share_copies_url(self, notes_file, clipboard):
        result = invoke("-f", notes_file, "-j", "notes", "share", "beta")

        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert data == {
            "url": "http://localhost:5173/notes/beta",
            "copied": True,
            "message": "Link copied",
        }
        assert clipboard.text == "http://localhost:5173/notes/beta"

    def test_share_clipboard_denied(self, notes_file):
        with patch("brain_garden.cli.context.SystemClipboard", return_value=MemoryClipboard(denied=True)):
            result = invoke("-f", notes_file, "notes", "share", "beta")

        assert result.exit_code == 1
        assert "Copy failed" in result.stdout

    def test_share_unknown(self, notes_file, clipboard):
        result = invoke("-f", notes_file, "notes", "share", "ghost")
        assert result.exit_code == 1
        assert clipboard.writes == []


class TestBrowse:
    """REPL поверх CliRunner: ввод построчно, EOF завершает."""

    def test_open_share_back(self, notes_file, clipboard):
        result = invoke("-f", notes_file, "browse", input="/open alpha\n/share\n/back\n/where\n/quit\n")

        assert result.exit_code == 0
        assert "Link copied" in result.stdout
        assert clipboard.text == "http://localhost:5173/notes/alpha"
        assert "Bye!" in result.stdout

    def test_deep_link(self, notes_file):
        result = invoke("-f", notes_file, "browse", "--at", "/notes/beta", input="/quit\n")

        assert result.exit_code == 0
        assert "/notes/beta" in result.stdout

    def test_plain_text_searches(self, notes_file):
        result = invoke("-f", notes_file, "browse", input="systems\n")

        assert result.exit_code == 0
        assert "1 of 3 notes" in result.stdout

    def test_unknown_command(self, notes_file):
        result = invoke("-f", notes_file, "browse", input="/dance\n/q\n")
        assert "Unknown command: /dance" in result.stdout


class TestConfigCommand:
    def test_show_masks_key(self, monkeypatch):
        monkeypatch.setenv("SUPABASE_URL", "https://abc.supabase.co")
        monkeypatch.setenv("SUPABASE_ANON_KEY", "anon-key-1234567890")

        result = invoke("config", "show")

        assert result.exit_code == 0
        assert "anon***7890" in result.stdout
        assert "anon-key-1234567890" not in result.stdout

    def test_show_json(self, monkeypatch):
        monkeypatch.setenv("SUPABASE_ANON_KEY", "anon-key-1234567890")

        data = json.loads(invoke("--json", "config", "show").stdout)

        assert data["source"] is None
        assert data["config"]["supabase"]["anon_key"] == "***"
        assert data["config"]["notes"]["base_path"] == "/notes"

    def test_show_reveal(self, monkeypatch):
        monkeypatch.setenv("SUPABASE_ANON_KEY", "anon-key-1234567890")
        data = json.loads(invoke("--json", "config", "show", "--reveal").stdout)
        assert data["config"]["supabase"]["anon_key"] == "anon-key-1234567890"


class TestDoctorCommand:
    def test_notes_file_checked(self, notes_file):
        result = invoke("-f", notes_file, "--json", "doctor", "--verbose")

        checks = {c["name"]: c for c in json.loads(result.stdout)["checks"]}
        assert checks["Notes file"]["status"] == "ok"
        assert checks["Fetch"] == {"name": "Fetch", "status": "ok", "value": "3 notes"}

    def test_missing_source_is_error(self):
        result = invoke("--json", "doctor")

        assert result.exit_code == 1
        data = json.loads(result.stdout)
        assert data["status"] == "unhealthy"
        assert any(c["name"] == "Notes source" and c["status"] == "error" for c in data["checks"])
