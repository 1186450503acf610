# infrastructure/config/settings.py
from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional

from dotenv import load_dotenv

from domain.exceptions import ValidationError

_PROJECT_ROOT = Path(__file__).parent.parent.parent


def _int_setting(env: Mapping[str, str], key: str, default: int) -> int:
    raw = env.get(key)
    if raw is None or raw.strip() == "":
        return default
    try:
        value = int(raw)
    except ValueError as e:
        raise ValidationError(f"{key} must be an integer: {raw!r}") from e
    if value < 0:
        raise ValidationError(f"{key} must not be negative: {value}")
    return value


@dataclass(frozen=True)
class Settings:
    storage_dir: Path
    timeout_ms: int = 30000
    inter_test_delay_ms: int = 200
    log_level: str = "INFO"
    log_format: str = "loguru"  # "loguru" | "console" | "both"

    @classmethod
    def from_env(cls, env: Optional[Mapping[str, str]] = None, dotenv_path: Optional[Path] = None) -> "Settings":
        """
        Read APITESTER_* settings. When no mapping is given, the project .env
        is loaded first (existing environment variables win).
        """
        if env is None:
            path = dotenv_path or (_PROJECT_ROOT / ".env")
            if path.exists():
                load_dotenv(path)
            env = os.environ

        log_format = (env.get("APITESTER_LOG_FORMAT") or "loguru").lower()
        if log_format not in ("loguru", "console", "both"):
            raise ValidationError(f"APITESTER_LOG_FORMAT must be loguru, console or both: {log_format!r}")

        return cls(
            storage_dir=Path(env.get("APITESTER_STORAGE_DIR") or (_PROJECT_ROOT / "data")),
            timeout_ms=_int_setting(env, "APITESTER_TIMEOUT_MS", 30000),
            inter_test_delay_ms=_int_setting(env, "APITESTER_INTER_TEST_DELAY_MS", 200),
            log_level=(env.get("APITESTER_LOG_LEVEL") or "INFO").upper(),
            log_format=log_format,
        )
