# tests/conftest.py

from __future__ import annotations

from pathlib import Path
from types import SimpleNamespace

import pytest

from task_dashboard.core.state import AppState
from task_dashboard.enrichment.news import NewsItem
from task_dashboard.enrichment.suggestions import SuggestionThresholds
from task_dashboard.enrichment.weather import WeatherReading
from task_dashboard.tasks.task_models import Task
from task_dashboard.tasks.task_store import TaskStore

from .fakes import FakeNewsProvider, FakeWeatherProvider


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with AppState and the dashboard.

    We intentionally use a SimpleNamespace rather than importing real config,
    to keep unit tests isolated from the environment.
    """
    return SimpleNamespace(
        app_name="task-dashboard-test",
        data_dir=tmp_path / "data",
        latitude=59.3294,
        longitude=18.0687,
        location_name="Stockholm",
        story_count=3,
        warm_threshold_c=15.0,
        rain_threshold_mm=1.0,
        weather_base_url="https://weather.test",
        news_base_url="https://news.test",
        http_timeout_seconds=5.0,
        pacing=False,
    )


@pytest.fixture()
def store() -> TaskStore:
    return TaskStore(
        [
            Task(id=1, task="A", completed=False),
            Task(id=2, task="B", completed=False),
            Task(id=3, task="C", completed=True),
        ]
    )


@pytest.fixture()
def weather() -> FakeWeatherProvider:
    return FakeWeatherProvider(reading=WeatherReading(temperature=21.5, precipitation=0.0))


@pytest.fixture()
def news() -> FakeNewsProvider:
    return FakeNewsProvider(
        stories=[
            NewsItem(id=101, title="First", url="https://a.example"),
            NewsItem(id=102, title="Second", url="https://b.example"),
            NewsItem(id=103, title="Third", url=None),
            NewsItem(id=104, title="Fourth", url="https://d.example"),
        ]
    )


@pytest.fixture()
def state(
    settings: SimpleNamespace,
    store: TaskStore,
    weather: FakeWeatherProvider,
    news: FakeNewsProvider,
) -> AppState:
    """AppState wired with deterministic fakes and a real in-memory TaskStore."""
    return AppState(
        settings=settings,
        task_store=store,
        weather=weather,
        news=news,
        thresholds=SuggestionThresholds(
            warm_celsius=settings.warm_threshold_c,
            rain_mm=settings.rain_threshold_mm,
        ),
    )
