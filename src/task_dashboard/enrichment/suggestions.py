# src/task_dashboard/enrichment/suggestions.py

from __future__ import annotations

from dataclasses import dataclass

from .weather import WeatherReading

NO_WEATHER_DATA = "No weather data available"

HOT_AND_DRY = ("Go for a walk", "Have a picnic")
COOL_AND_DRY = ("Visit a museum", "Go to a cafe")
WET = ("Stay indoors and read a book", "Watch a movie")
FALLBACK = ("Check your other tasks and pick one!",)


@dataclass(frozen=True, slots=True)
class SuggestionThresholds:
    warm_celsius: float = 15.0
    rain_mm: float = 1.0


def suggest_tasks(
        reading: WeatherReading,
        thresholds: SuggestionThresholds | None = None,
) -> list[str]:
    """
    Pick activity suggestions for the given weather.

    - unknown temperature or precipitation -> ["No weather data available"]
    - warm and dry  -> HOT_AND_DRY
    - cool and dry  -> COOL_AND_DRY
    - rainy         -> WET
    - anything else (NaN readings) -> FALLBACK
    """
    if reading.temperature is None or reading.precipitation is None:
        return [NO_WEATHER_DATA]

    th = thresholds or SuggestionThresholds()
    celsius = reading.temperature
    mm = reading.precipitation

    if celsius > th.warm_celsius and mm < th.rain_mm:
        return list(HOT_AND_DRY)
    if celsius <= th.warm_celsius and mm < th.rain_mm:
        return list(COOL_AND_DRY)
    if mm >= th.rain_mm:
        return list(WET)
    return list(FALLBACK)
