from __future__ import annotations

import pytest

from vaultconnect.config import ConfigError, ConnectSettings, load_settings


def test_load_settings_from_yaml(tmp_path) -> None:
    sample = tmp_path / "connect.yaml"
    sample.write_text(
        "connect:\n"
        "  api_token: file-token\n"
        "  server_url: http://localhost:8080\n"
        "  retries: 3\n"
        "  backoff_min_s: 0.5\n"
    )

    settings = load_settings(sample)

    assert isinstance(settings, ConnectSettings)
    assert settings.api_token == "file-token"
    assert settings.server_url == "http://localhost:8080"
    assert settings.retries == 3
    assert settings.backoff().durations() == [0.5, 1.0, 2.0]


def test_env_overrides_file(tmp_path, monkeypatch) -> None:
    sample = tmp_path / "connect.yaml"
    sample.write_text("api_token: file-token\nserver_url: http://file\nretries: 2\n")
    monkeypatch.setenv("OP_API_TOKEN", "env-token")
    monkeypatch.setenv("VAULTCONNECT_HTTP_RETRIES", "5")
    monkeypatch.setenv("VAULTCONNECT_HTTP_TIMEOUT_S", "not-a-number")

    settings = load_settings(sample)

    assert settings.api_token == "env-token"
    assert settings.server_url == "http://file"
    assert settings.retries == 5
    assert settings.timeout_s == 15.0


def test_load_settings_from_env_only(monkeypatch) -> None:
    monkeypatch.setenv("OP_API_TOKEN", "env-token")
    monkeypatch.setenv("OP_SERVER_URL", "http://localhost:8080")

    settings = load_settings()

    assert settings.retries == 1
    assert settings.backoff_min_s == 0.1
    assert settings.backoff_max_s == 20.0


def test_missing_token_is_config_error(monkeypatch) -> None:
    monkeypatch.setenv("OP_SERVER_URL", "http://localhost:8080")

    with pytest.raises(ConfigError, match="OP_API_TOKEN"):
        load_settings()


def test_inverted_backoff_bounds_rejected(monkeypatch) -> None:
    monkeypatch.setenv("OP_API_TOKEN", "t")
    monkeypatch.setenv("OP_SERVER_URL", "http://localhost:8080")
    monkeypatch.setenv("VAULTCONNECT_HTTP_BACKOFF_MIN_S", "5")
    monkeypatch.setenv("VAULTCONNECT_HTTP_BACKOFF_MAX_S", "1")

    with pytest.raises(ConfigError):
        load_settings()


def test_non_mapping_file_rejected(tmp_path) -> None:
    sample = tmp_path / "connect.yaml"
    sample.write_text("- just\n- a list\n")

    with pytest.raises(ConfigError):
        load_settings(sample)


def test_log_level_from_env(monkeypatch) -> None:
    monkeypatch.setenv("OP_API_TOKEN", "t")
    monkeypatch.setenv("OP_SERVER_URL", "http://localhost:8080")
    monkeypatch.setenv("VAULTCONNECT_LOG_LEVEL", "debug")

    assert load_settings().log_level == "debug"


def test_log_level_defaults_to_none(monkeypatch) -> None:
    monkeypatch.setenv("OP_API_TOKEN", "t")
    monkeypatch.setenv("OP_SERVER_URL", "http://localhost:8080")

    assert load_settings().log_level is None
