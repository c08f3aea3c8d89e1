# src/task_dashboard/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the dashboard driver.

The driver depends on Protocols instead of concrete implementations.
This keeps HTTP providers swappable and makes testing easier.
"""

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from ..enrichment.news import NewsItem
    from ..enrichment.weather import WeatherReading
    from ..tasks.task_models import Task, TaskUpdate


class TaskRepo(Protocol):
    def add_task(self, task: Task) -> bool: ...
    def list_tasks(self) -> list[Task]: ...
    def get_task(self, task_id: int) -> Task | None: ...
    def update_task(self, task_id: int, update: TaskUpdate) -> Task | None: ...
    def delete_task(self, task_id: int) -> bool: ...


class WeatherProvider(Protocol):
    """
    Current weather for a location.

    Must never raise: on failure return WeatherReading(None, None).
    """

    async def fetch_weather(self, latitude: float, longitude: float) -> WeatherReading: ...


class NewsProvider(Protocol):
    """
    Top news stories, in ranking order.

    Must never raise: on failure return [].
    """

    async def fetch_top_stories(self, n: int) -> list[NewsItem]: ...
