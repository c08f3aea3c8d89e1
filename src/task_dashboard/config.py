# src/task_dashboard/config.py

"""Centralized settings loaded from environment variables (+ optional .env).

Design goals:
- One Settings object for the whole app (normal "settings layer").
- Nothing is read at import time; .env (from the working directory) is loaded on first get_settings().
- Malformed values fall back to defaults instead of crashing the demo.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import find_dotenv, load_dotenv

ENV_PREFIX = "TASKDASH"

# Demo defaults: Stockholm, top 3 stories.
DEFAULT_LATITUDE = 59.3294
DEFAULT_LONGITUDE = 18.0687
DEFAULT_LOCATION_NAME = "Stockholm"
DEFAULT_STORY_COUNT = 3


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


def _env_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return float(raw)
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

    # ---- Location / news ----
    latitude: float
    longitude: float
    location_name: str
    story_count: int

    # ---- Suggestion thresholds ----
    warm_threshold_c: float
    rain_threshold_mm: float

    # ---- HTTP providers ----
    weather_base_url: str
    news_base_url: str
    http_timeout_seconds: float

    # ---- Presentation ----
    pacing: bool

    @staticmethod
    def from_env() -> "Settings":
        app_name = _env(_k("APP_NAME"), "task-dashboard").strip() or "task-dashboard"
        log_level = _env(_k("LOG_LEVEL"), "INFO")
        data_dir = _env_path(_k("DATA_DIR"), Path(".local/task_dashboard"))

        latitude = _env_float(_k("LATITUDE"), DEFAULT_LATITUDE)
        longitude = _env_float(_k("LONGITUDE"), DEFAULT_LONGITUDE)
        location_name = _env(_k("LOCATION_NAME"), DEFAULT_LOCATION_NAME).strip() or DEFAULT_LOCATION_NAME
        story_count = max(0, _env_int(_k("STORY_COUNT"), DEFAULT_STORY_COUNT))

        warm_threshold_c = _env_float(_k("WARM_THRESHOLD_C"), 15.0)
        rain_threshold_mm = _env_float(_k("RAIN_THRESHOLD_MM"), 1.0)

        weather_base_url = _env(_k("WEATHER_BASE_URL"), "https://api.open-meteo.com").rstrip("/")
        news_base_url = _env(_k("NEWS_BASE_URL"), "https://hacker-news.firebaseio.com").rstrip("/")
        # keep a sane floor so a typo does not turn every request into a timeout
        http_timeout_seconds = max(0.5, _env_float(_k("HTTP_TIMEOUT_SECONDS"), 10.0))

        pacing = _env_bool(_k("PACING"), True)

        return Settings(
            app_name=app_name,
            log_level=log_level,
            data_dir=data_dir,
            latitude=latitude,
            longitude=longitude,
            location_name=location_name,
            story_count=story_count,
            warm_threshold_c=warm_threshold_c,
            rain_threshold_mm=rain_threshold_mm,
            weather_base_url=weather_base_url,
            news_base_url=news_base_url,
            http_timeout_seconds=http_timeout_seconds,
            pacing=pacing,
        )


_SETTINGS: Settings | None = None


def get_settings() -> Settings:
    """Build settings on first use (after .env is loaded) and reuse them."""
    global _SETTINGS
    if _SETTINGS is None:
        # real environment wins over a local .env
        load_dotenv(find_dotenv(usecwd=True), override=False)
        _SETTINGS = Settings.from_env()
    return _SETTINGS
