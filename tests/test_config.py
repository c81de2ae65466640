"""Tests for configuration parsing."""

from exercise_tracker.config import Settings, parse_allowed_origins


def test_settings_read_environment(monkeypatch) -> None:
    monkeypatch.setenv("SUPABASE_URL", "https://project.supabase.co")
    monkeypatch.setenv("SUPABASE_SERVICE_KEY", "key")
    monkeypatch.setenv("PORT", "8080")

    settings = Settings()

    assert settings.port == 8080
    assert settings.users_table == "users"
    assert settings.default_timezone == "UTC"


def test_parse_allowed_origins() -> None:
    assert parse_allowed_origins(None) == ["*"]
    assert parse_allowed_origins(" ") == ["*"]
    assert parse_allowed_origins("https://a.dev/, https://b.dev,https://a.dev") == [
        "https://a.dev",
        "https://b.dev",
    ]
