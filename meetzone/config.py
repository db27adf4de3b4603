from __future__ import annotations

import os
from dataclasses import dataclass

from meetzone.core.constants import DEFAULT_TARGET_TIMEZONE


@dataclass(frozen=True)
class Settings:
    app_host: str = "0.0.0.0"
    app_port: int = 8000
    log_level: str = "INFO"

    default_target_timezone: str = DEFAULT_TARGET_TIMEZONE
    max_batch_lines: int = 500


def _as_int(raw: str | None, default: int) -> int:
    if raw is None:
        return default
    return int(raw)


def load_settings(*, log_level: str = "INFO") -> Settings:
    return Settings(
        app_host=os.getenv("APP_HOST", "0.0.0.0"),
        app_port=_as_int(os.getenv("APP_PORT"), 8000),
        log_level=os.getenv("LOG_LEVEL", log_level),
        default_target_timezone=os.getenv(
            "MEETZONE_DEFAULT_TARGET_TIMEZONE", DEFAULT_TARGET_TIMEZONE
        ),
        max_batch_lines=_as_int(os.getenv("MAX_BATCH_LINES"), 500),
    )
