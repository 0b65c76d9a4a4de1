import pytest

from caterer_finder.core import config


def setup_function(function):
    config.get_settings.cache_clear()


def teardown_function(function):
    config.get_settings.cache_clear()


def test_get_settings_reads_env(monkeypatch):
    monkeypatch.setenv("GOOGLE_API_KEY", "abc123")
    monkeypatch.setenv("CATERER_CITY", "Portland")
    monkeypatch.setenv("CATERER_STATE", "OR")
    monkeypatch.setenv("CATERER_MAX_RESULTS", "40")
    monkeypatch.setenv("GOOGLE_TOKEN_PATH", "/tmp/token.json")
    monkeypatch.setenv("SHEET_TITLE", "Wedding caterers")

    settings = config.get_settings()

    assert settings.google_api_key == "abc123"
    assert settings.city == "Portland"
    assert settings.state == "OR"
    assert settings.max_results == 40
    assert settings.token_path == "/tmp/token.json"
    assert settings.title == "Wedding caterers"


def test_get_settings_defaults_and_warnings(monkeypatch, caplog):
    for name in (
        "GOOGLE_API_KEY",
        "CATERER_CITY",
        "CATERER_STATE",
        "CATERER_MAX_RESULTS",
        "CATERER_SEARCH_TERM",
        "CATERER_PLACE_TYPE",
        "SHEET_TITLE",
    ):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("GOOGLE_CREDENTIALS_PATH", "/nonexistent/credentials.json")

    with caplog.at_level("WARNING"):
        settings = config.get_settings()

    messages = " ".join(caplog.messages)
    assert "GOOGLE_API_KEY is not configured" in messages
    assert "/nonexistent/credentials.json" in messages
    assert settings.google_api_key == ""
    assert settings.max_results == 100
    assert settings.search_term == "caterers"
    assert settings.place_type == "food"
    assert settings.title == "Caterers in Portland, ME"


def test_get_settings_rejects_non_positive_max_results(monkeypatch):
    monkeypatch.setenv("CATERER_MAX_RESULTS", "0")
    with pytest.raises(ValueError):
        config.get_settings()


def test_settings_are_immutable():
    settings = config.Settings(google_api_key="key")
    with pytest.raises(Exception):
        settings.city = "Elsewhere"


def test_immediate_pacing_has_no_delays():
    pacing = config.Pacing.immediate()
    assert pacing.page_token_delay == 0
    assert pacing.sort_order_delay == 0
    assert pacing.candidate_delay == 0
    assert config.DEFAULT_PACING.page_token_delay == 2.0
