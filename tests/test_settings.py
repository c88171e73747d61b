"""Configuration loading tests."""

from __future__ import annotations

from pathlib import Path

import pytest

from config.settings import AppConfig, load_config

ENV_KEYS = (
    "ENDECODER_HISTORY_PATH",
    "ENDECODER_OUTPUT_DIR",
    "ENDECODER_LOG_DIR",
    "ENDECODER_LANGUAGE",
    "ENDECODER_THEME",
    "ENDECODER_MAX_UPLOAD_MB",
    "ENDECODER_HISTORY_QUOTA_KB",
    "ENDECODER_MAX_OUTPUT_FILES",
    "ENDECODER_SERVER_PORT",
    "ENDECODER_SERVER_NAME",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for key in ENV_KEYS:
        monkeypatch.delenv(key, raising=False)
    yield


def test_defaults_without_env(tmp_path):
    config = load_config(str(tmp_path / "missing.env"))
    defaults = AppConfig()

    assert config.history_path == defaults.history_path
    assert config.language == "en"
    assert config.theme == "light"
    assert config.max_history_items == 50
    assert config.max_field_length == 1000
    assert config.max_upload_bytes == defaults.max_upload_bytes
    assert config.server_port is None


def test_env_file_overrides(tmp_path, monkeypatch):
    env_file = tmp_path / ".env"
    env_file.write_text(
        "\n".join(
            [
                "# comment line",
                f"ENDECODER_HISTORY_PATH={tmp_path / 'h.json'}",
                "ENDECODER_LANGUAGE=ta",
                "ENDECODER_THEME=DARK",
                "ENDECODER_MAX_UPLOAD_MB=2",
                "ENDECODER_HISTORY_QUOTA_KB=0",
                "ENDECODER_SERVER_PORT=7861",
                "not a pair",
            ]
        ),
        encoding="utf-8",
    )
    for key in ENV_KEYS:
        monkeypatch.setenv(key, "")

    config = load_config(str(env_file))

    assert config.history_path == Path(tmp_path / "h.json")
    assert config.language == "ta"
    assert config.theme == "dark"
    assert config.max_upload_bytes == 2 * 1024 * 1024
    assert config.history_quota_bytes is None
    assert config.server_port == 7861


def test_invalid_values_fall_back(tmp_path, monkeypatch):
    monkeypatch.setenv("ENDECODER_LANGUAGE", "klingon")
    monkeypatch.setenv("ENDECODER_MAX_UPLOAD_MB", "lots")
    monkeypatch.setenv("ENDECODER_HISTORY_QUOTA_KB", "16")

    config = load_config(str(tmp_path / "missing.env"))

    assert config.language == "en"
    assert config.max_upload_bytes == AppConfig().max_upload_bytes
    assert config.history_quota_bytes == 16 * 1024
