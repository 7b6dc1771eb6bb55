# questionnaire/config.py
from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional, Tuple


def _env_str(key: str, default: Optional[str] = None) -> Optional[str]:
    v = os.getenv(key)
    if v is None:
        return default
    v = v.strip()
    return v if v else default


def _env_int(key: str, default: int) -> int:
    v = _env_str(key)
    if v is None:
        return default
    try:
        return int(v)
    except ValueError:
        return default


def _env_bool(key: str, default: bool) -> bool:
    v = _env_str(key)
    if v is None:
        return default
    return v.lower() in {"1", "true", "yes", "y", "on"}


def _env_list(key: str, default: Tuple[str, ...]) -> Tuple[str, ...]:
    v = _env_str(key)
    if v is None:
        return default
    items = tuple(item.strip() for item in v.split(",") if item.strip())
    return items or default


@dataclass(frozen=True)
class Settings:
    # Server
    host: str = "0.0.0.0"
    port: int = 8080
    cors_origins: Tuple[str, ...] = ("*",)

    # Questionnaire; None means the built-in catalog
    questions_file: Optional[str] = None

    # Presentation assets, skipped when the directories are missing
    templates_dir: str = "templates"
    static_dir: str = "static"

    # Logging
    log_level: str = "INFO"
    log_json: bool = False

    @property
    def allow_any_origin(self) -> bool:
        return "*" in self.cors_origins

    @staticmethod
    def from_env() -> "Settings":
        # Read configuration from environment variables.
        return Settings(
            host=_env_str("QUESTIONNAIRE_HOST", "0.0.0.0") or "0.0.0.0",
            port=_env_int("QUESTIONNAIRE_PORT", 8080),
            cors_origins=_env_list("QUESTIONNAIRE_CORS_ORIGINS", ("*",)),

            questions_file=_env_str("QUESTIONNAIRE_QUESTIONS_FILE"),

            templates_dir=_env_str("QUESTIONNAIRE_TEMPLATES_DIR", "templates") or "templates",
            static_dir=_env_str("QUESTIONNAIRE_STATIC_DIR", "static") or "static",

            log_level=_env_str("QUESTIONNAIRE_LOG_LEVEL", "INFO") or "INFO",
            log_json=_env_bool("QUESTIONNAIRE_LOG_JSON", False),
        )
