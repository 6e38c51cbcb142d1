# src/pm_dashboard/config.py

"""Centralized settings loaded from environment variables (+ optional .env).

Design goals:
- One Settings object for the whole app (normal "settings layer").
- Nothing here is persisted state: data_dir only holds log files.
- Bad values fall back to defaults instead of failing at import time.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

ENV_PREFIX = "PMD"


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


def _env(name: str, default: str = "") -> str:
    v = os.getenv(name)
    return default if v is None else v


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "y", "on"}


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _env_path(name: str, default: Path) -> Path:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return Path(raw).expanduser()


@dataclass(frozen=True, slots=True)
class Settings:
    # ---- App / logging ----
    app_name: str
    log_level: str
    data_dir: Path

    # ---- Reports ----
    report_latency_ms: int
    report_supersede: bool
    default_project_name: str

    # ---- Startup ----
    seed_demo_data: bool

    @staticmethod
    def from_env() -> "Settings":
        app_name = _env(_k("APP_NAME"), "pm-dashboard").strip() or "pm-dashboard"
        log_level = _env(_k("LOG_LEVEL"), "INFO")
        data_dir = _env_path(_k("DATA_DIR"), Path(".local/pm_dashboard"))

        # Negative latency makes no sense for a simulated backend; clamp to 0.
        report_latency_ms = max(0, _env_int(_k("REPORT_LATENCY_MS"), 2000))
        report_supersede = _env_bool(_k("REPORT_SUPERSEDE"), True)
        default_project_name = _env(_k("DEFAULT_PROJECT_NAME"), "New Project").strip() or "New Project"

        seed_demo_data = _env_bool(_k("SEED_DEMO_DATA"), True)

        return Settings(
            app_name=app_name,
            log_level=log_level,
            data_dir=data_dir,
            report_latency_ms=report_latency_ms,
            report_supersede=report_supersede,
            default_project_name=default_project_name,
            seed_demo_data=seed_demo_data,
        )


_SETTINGS: Settings | None = None


def get_settings() -> Settings:
    """Return process-wide settings, reading .env and the environment on first use."""
    global _SETTINGS
    if _SETTINGS is None:
        load_dotenv(override=False)
        _SETTINGS = Settings.from_env()
    return _SETTINGS


def reset_settings_cache() -> None:
    """Forget cached settings (tests tweak env vars between cases)."""
    global _SETTINGS
    _SETTINGS = None
