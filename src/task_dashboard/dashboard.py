# src/task_dashboard/dashboard.py

"""
Console dashboard.

Runs the demo sequence against AppState:
list -> update #2 -> delete #1 -> list -> weather -> suggestions -> news.

Pauses between sections are presentation only; a disabled Pacer skips them.
"""

from __future__ import annotations

import asyncio
import logging
import sys
from dataclasses import dataclass, field
from typing import TextIO

from .core.state import AppState
from .enrichment.news import NewsItem
from .enrichment.suggestions import suggest_tasks
from .enrichment.weather import WeatherReading
from .tasks.task_models import Task, TaskUpdate, format_task

logger = logging.getLogger(__name__)

RULE = "=" * 50
TITLE = "============= Task Manager Dashboard ============="

UPDATE_TASK_ID = 2
DELETE_TASK_ID = 1


class Pacer:
    """Sleeps between dashboard sections so a human can follow along."""

    def __init__(self, *, enabled: bool = True) -> None:
        self.enabled = enabled

    async def pause(self, seconds: float) -> None:
        if not self.enabled or seconds <= 0:
            return
        await asyncio.sleep(seconds)


@dataclass(slots=True)
class DashboardReport:
    """What the dashboard computed, for callers that don't want to parse output."""

    updated: Task | None = None
    deleted: bool = False
    tasks: list[Task] = field(default_factory=list)
    weather: WeatherReading = field(default_factory=WeatherReading)
    suggestions: list[str] = field(default_factory=list)
    stories: list[NewsItem] = field(default_factory=list)


def print_tasks(tasks: list[Task], out: TextIO) -> None:
    if not tasks:
        print("No tasks available.", file=out)
        return
    for task in tasks:
        print(format_task(task), file=out)


def print_weather(reading: WeatherReading, location: str, out: TextIO) -> None:
    print(f"\nCurrent Weather in {location}:", file=out)
    if reading.has_data:
        print(
            f"Temperature: {reading.temperature}°C, Precipitation: {reading.precipitation} mm",
            file=out,
        )
    else:
        print("Weather data not available.", file=out)
        print(RULE, file=out)


def print_stories(stories: list[NewsItem], out: TextIO) -> None:
    print("\nTop Hacker News stories for you to read:", file=out)
    if not stories:
        print("News stories data not available.", file=out)
        return
    for story in stories:
        print(f"- {story.title} (URL: {story.url})", file=out)


async def run_dashboard(
        state: AppState,
        *,
        out: TextIO | None = None,
        pacer: Pacer | None = None,
) -> DashboardReport:
    out = out if out is not None else sys.stdout
    pacer = pacer or Pacer(enabled=False)
    settings = state.settings
    store = state.task_store
    report = DashboardReport()

    print(RULE, file=out)
    print(TITLE, file=out)
    print(RULE, file=out)
    print("Tasks:", file=out)
    print_tasks(store.list_tasks(), out)

    await pacer.pause(2)
    print(f"\nUpdating Task with ID {UPDATE_TASK_ID}:", file=out)
    report.updated = store.update_task(UPDATE_TASK_ID, TaskUpdate(completed=True))
    await pacer.pause(1)
    if report.updated is not None:
        print(f"Updated Task: {format_task(report.updated)}", file=out)
    else:
        print("Task not found.", file=out)

    await pacer.pause(2)
    print(f"\nDeleting Task with ID {DELETE_TASK_ID}:", file=out)
    report.deleted = store.delete_task(DELETE_TASK_ID)
    await pacer.pause(1)
    print("Task deleted." if report.deleted else "Task not found.", file=out)

    await pacer.pause(1)
    print("\nAll Tasks after update and delete:", file=out)
    report.tasks = store.list_tasks()
    print_tasks(report.tasks, out)
    print(RULE, file=out)

    await pacer.pause(2)
    report.weather = await state.weather.fetch_weather(settings.latitude, settings.longitude)
    print_weather(report.weather, settings.location_name, out)

    report.suggestions = suggest_tasks(report.weather, state.thresholds)
    print("\nTask Suggestions based on the current weather:", file=out)
    for suggestion in report.suggestions:
        print(f"- {suggestion}", file=out)
    print(RULE, file=out)

    await pacer.pause(2)
    report.stories = await state.news.fetch_top_stories(settings.story_count)
    print_stories(report.stories, out)
    print(RULE, file=out)

    logger.info(
        "Dashboard done tasks=%d weather=%s stories=%d",
        len(report.tasks),
        "ok" if report.weather.has_data else "unknown",
        len(report.stories),
    )
    return report
