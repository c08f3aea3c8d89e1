# src/task_dashboard/core/state.py

from __future__ import annotations

from dataclasses import dataclass

from ..enrichment.suggestions import SuggestionThresholds
from .ports import NewsProvider, TaskRepo, WeatherProvider


@dataclass
class AppState:
    # Store Settings on the state for easy access in other modules later.
    settings: object

    task_store: TaskRepo
    weather: WeatherProvider
    news: NewsProvider

    thresholds: SuggestionThresholds
