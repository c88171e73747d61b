"""Configuration helpers for the Endecoder project."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Optional

SUPPORTED_LANGUAGES = ("en", "hi", "ta")
SUPPORTED_THEMES = ("light", "dark")


@dataclass(slots=True)
class AppConfig:
    """Centralized application configuration."""

    history_path: Path = Path("data/history.json")
    output_dir: Path = Path("data/downloads")
    log_dir: Path = Path("logs")
    language: str = "en"
    theme: str = "light"
    max_history_items: int = 50
    max_field_length: int = 1000
    history_quota_bytes: Optional[int] = 5 * 1024 * 1024
    max_upload_bytes: int = 10 * 1024 * 1024
    history_file_limit: int = 1024 * 1024
    history_inline_limit: int = 100 * 1024
    max_output_files: int = 20
    server_port: Optional[int] = None
    metadata: dict[str, Any] = field(default_factory=dict)


def _load_env_file(path: Path) -> None:
    """Populate environment variables from a simple KEY=VALUE .env file."""
    if not path.exists():
        return

    for line in path.read_text(encoding="utf-8").splitlines():
        stripped = line.strip()
        if not stripped or stripped.startswith("#") or "=" not in stripped:
            continue
        key, value = stripped.split("=", 1)
        os.environ[key.strip()] = value.strip()


def _env_int(name: str, default: Optional[int]) -> Optional[int]:
    raw = os.getenv(name)
    if raw in (None, ""):
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _env_choice(name: str, choices: tuple[str, ...], default: str) -> str:
    value = (os.getenv(name) or "").strip().lower()
    return value if value in choices else default


def load_config(config_path: Optional[str] = None) -> AppConfig:
    """Return an AppConfig instance with environment-aware settings."""
    env_path = Path(config_path) if config_path else Path(".env")
    _load_env_file(env_path)

    defaults = AppConfig()
    history_path = Path(os.getenv("ENDECODER_HISTORY_PATH") or defaults.history_path).expanduser()
    output_dir = Path(os.getenv("ENDECODER_OUTPUT_DIR") or defaults.output_dir).expanduser()
    log_dir = Path(os.getenv("ENDECODER_LOG_DIR") or defaults.log_dir).expanduser()

    max_upload_mb = _env_int("ENDECODER_MAX_UPLOAD_MB", None)
    max_upload_bytes = (
        max_upload_mb * 1024 * 1024 if max_upload_mb and max_upload_mb > 0 else defaults.max_upload_bytes
    )

    # 0 disables the quota check entirely
    quota_kb = _env_int("ENDECODER_HISTORY_QUOTA_KB", None)
    if quota_kb is None:
        history_quota_bytes = defaults.history_quota_bytes
    elif quota_kb <= 0:
        history_quota_bytes = None
    else:
        history_quota_bytes = quota_kb * 1024

    metadata: dict[str, Any] = {}
    server_name = os.getenv("ENDECODER_SERVER_NAME")
    if server_name:
        metadata["server_name"] = server_name

    return AppConfig(
        history_path=history_path,
        output_dir=output_dir,
        log_dir=log_dir,
        language=_env_choice("ENDECODER_LANGUAGE", SUPPORTED_LANGUAGES, defaults.language),
        theme=_env_choice("ENDECODER_THEME", SUPPORTED_THEMES, defaults.theme),
        history_quota_bytes=history_quota_bytes,
        max_upload_bytes=max_upload_bytes,
        max_output_files=_env_int("ENDECODER_MAX_OUTPUT_FILES", defaults.max_output_files)
        or defaults.max_output_files,
        server_port=_env_int("ENDECODER_SERVER_PORT", None),
        metadata=metadata,
    )
