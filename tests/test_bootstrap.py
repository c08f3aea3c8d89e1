# tests/test_bootstrap.py

from __future__ import annotations

import httpx
import pytest

from task_dashboard.cli.bootstrap import DEMO_TASKS, create_initial_state, make_http_client, seed_demo_tasks
from task_dashboard.config import Settings
from task_dashboard.enrichment.news import HackerNewsClient
from task_dashboard.enrichment.weather import OpenMeteoClient
from task_dashboard.tasks.task_models import TaskUpdate
from task_dashboard.tasks.task_store import TaskStore


def test_seed_demo_tasks_uses_fresh_copies() -> None:
    store = TaskStore()
    assert seed_demo_tasks(store) == 3
    store.update_task(2, TaskUpdate(completed=True))

    assert DEMO_TASKS[1].completed is False
    assert [t.id for t in store.list_tasks()] == [1, 2, 3]

    # second seed is rejected id by id
    assert seed_demo_tasks(store) == 0
    assert len(store) == 3


@pytest.mark.asyncio
async def test_create_initial_state_wires_providers(settings) -> None:
    async with httpx.AsyncClient() as http:
        state = create_initial_state(http, settings=settings)

    assert isinstance(state.weather, OpenMeteoClient)
    assert isinstance(state.news, HackerNewsClient)
    assert [t.task for t in state.task_store.list_tasks()] == [
        "Learn more about GitHub",
        "Build the project",
        "Presentation of project",
    ]
    assert state.thresholds.warm_celsius == 15.0
    assert settings.data_dir.is_dir()


@pytest.mark.asyncio
async def test_make_http_client_uses_configured_timeout(settings) -> None:
    async with make_http_client(settings) as http:
        assert http.timeout.read == 5.0
        assert http.headers["User-Agent"] == "task-dashboard-test"


def test_settings_from_env(monkeypatch) -> None:
    monkeypatch.setenv("TASKDASH_LATITUDE", "48.85")
    monkeypatch.setenv("TASKDASH_STORY_COUNT", "5")
    monkeypatch.setenv("TASKDASH_WARM_THRESHOLD_C", "20")
    monkeypatch.setenv("TASKDASH_PACING", "off")
    monkeypatch.setenv("TASKDASH_HTTP_TIMEOUT_SECONDS", "not-a-number")
    monkeypatch.setenv("TASKDASH_NEWS_BASE_URL", "https://hn.example/")

    s = Settings.from_env()

    assert s.latitude == 48.85
    assert s.longitude == 18.0687
    assert s.story_count == 5
    assert s.warm_threshold_c == 20.0
    assert s.pacing is False
    assert s.http_timeout_seconds == 10.0
    assert s.news_base_url == "https://hn.example"


def test_get_settings_loads_dotenv_from_working_dir(monkeypatch, tmp_path) -> None:
    from task_dashboard import config

    (tmp_path / ".env").write_text("TASKDASH_LOCATION_NAME=Oslo\nTASKDASH_STORY_COUNT=7\n", "utf-8")
    monkeypatch.chdir(tmp_path)
    # registered so the value load_dotenv writes is undone after the test
    monkeypatch.setenv("TASKDASH_LOCATION_NAME", "")
    monkeypatch.delenv("TASKDASH_LOCATION_NAME")
    monkeypatch.setenv("TASKDASH_STORY_COUNT", "2")
    monkeypatch.setattr(config, "_SETTINGS", None)

    s = config.get_settings()

    assert s.location_name == "Oslo"
    # real environment wins over .env
    assert s.story_count == 2
    assert config.get_settings() is s
