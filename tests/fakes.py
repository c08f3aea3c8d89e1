# tests/fakes.py

from __future__ import annotations

from dataclasses import dataclass, field

from task_dashboard.enrichment.news import NewsItem
from task_dashboard.enrichment.weather import WeatherReading


@dataclass(slots=True)
class FakeWeatherProvider:
    """
    Deterministic WeatherProvider for unit tests.

    - Returns a fixed reading
    - Captures requested coordinates for assertions
    """

    reading: WeatherReading = field(default_factory=WeatherReading)
    calls: list[tuple[float, float]] = field(default_factory=list)

    async def fetch_weather(self, latitude: float, longitude: float) -> WeatherReading:
        self.calls.append((latitude, longitude))
        return self.reading


@dataclass(slots=True)
class FakeNewsProvider:
    """
    Deterministic NewsProvider for unit tests.
    """

    stories: list[NewsItem] = field(default_factory=list)
    calls: list[int] = field(default_factory=list)

    async def fetch_top_stories(self, n: int) -> list[NewsItem]:
        self.calls.append(n)
        return self.stories[:n]
