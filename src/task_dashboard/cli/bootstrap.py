# src/task_dashboard/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- loads settings once,
- ensures the local (gitignored) data directory exists,
- wires concrete implementations into AppState (task store, HTTP providers),
- seeds the demo tasks.
"""

from __future__ import annotations

import logging

import httpx

from ..config import get_settings
from ..core.state import AppState
from ..enrichment.news import HackerNewsClient
from ..enrichment.suggestions import SuggestionThresholds
from ..enrichment.weather import OpenMeteoClient
from ..tasks.task_models import Task
from ..tasks.task_store import TaskStore

logger = logging.getLogger(__name__)

DEMO_TASKS: tuple[Task, ...] = (
    Task(id=1, task="Learn more about GitHub", completed=True),
    Task(id=2, task="Build the project", completed=False),
    Task(id=3, task="Presentation of project", completed=False),
)


def make_http_client(settings) -> httpx.AsyncClient:
    """Shared async HTTP client; the caller owns it and must close it."""
    timeout = float(getattr(settings, "http_timeout_seconds", 10.0))
    return httpx.AsyncClient(
        timeout=httpx.Timeout(timeout, connect=min(timeout, 5.0)),
        headers={"User-Agent": str(getattr(settings, "app_name", "task-dashboard"))},
        follow_redirects=True,
    )


def seed_demo_tasks(store: TaskStore) -> int:
    """Add the demo tasks (fresh copies). Returns how many were added."""
    added = 0
    for t in DEMO_TASKS:
        if store.add_task(Task(id=t.id, task=t.task, completed=t.completed)):
            added += 1
    logger.info("Seeded %d demo task(s)", added)
    return added


def create_initial_state(http: httpx.AsyncClient, *, settings=None, seed: bool = True) -> AppState:
    """
    Create AppState from the provided settings.

    Keeping settings injectable makes the app easier to test and avoids hidden global config reads.
    If settings is None, falls back to get_settings().
    """
    if settings is None:
        settings = get_settings()

    data_dir = getattr(settings, "data_dir", None)
    if data_dir is not None:
        data_dir.mkdir(parents=True, exist_ok=True)

    store = TaskStore()
    if seed:
        seed_demo_tasks(store)

    return AppState(
        settings=settings,
        task_store=store,
        weather=OpenMeteoClient(http, base_url=settings.weather_base_url),
        news=HackerNewsClient(http, base_url=settings.news_base_url),
        thresholds=SuggestionThresholds(
            warm_celsius=settings.warm_threshold_c,
            rain_mm=settings.rain_threshold_mm,
        ),
    )
