# src/task_dashboard/enrichment/weather.py

"""
Open-Meteo weather client.

Policy: degrade to unknown. Any transport error, bad status, invalid JSON
or unexpected payload shape yields WeatherReading(None, None); nothing is raised.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Any

import httpx

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://api.open-meteo.com"


@dataclass(frozen=True, slots=True)
class WeatherReading:
    temperature: float | None = None  # Celsius
    precipitation: float | None = None  # millimeters

    @property
    def has_data(self) -> bool:
        return self.temperature is not None and self.precipitation is not None


UNKNOWN_WEATHER = WeatherReading()


def _as_number(value: Any) -> float | None:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    try:
        number = float(value)
    except OverflowError:
        return None
    return number if math.isfinite(number) else None


def parse_weather(payload: Any) -> WeatherReading:
    """
    Shape a forecast response into a WeatherReading.

    Precipitation is taken from the hourly series at the current-weather
    timestamp; if that timestamp is not in the series, the last entry is used.
    """
    if not isinstance(payload, dict):
        return UNKNOWN_WEATHER

    current = payload.get("current_weather")
    if not isinstance(current, dict):
        current = {}
    hourly = payload.get("hourly")
    if not isinstance(hourly, dict):
        hourly = {}

    temperature = _as_number(current.get("temperature"))

    precipitation: float | None = None
    series = hourly.get("precipitation")
    times = hourly.get("time")
    current_time = current.get("time")
    if series and times and current_time and isinstance(series, list) and isinstance(times, list):
        try:
            idx = times.index(current_time)
        except ValueError:
            idx = -1

        if idx != -1:
            precipitation = _as_number(series[idx]) if idx < len(series) else None
        else:
            precipitation = _as_number(series[-1])

    return WeatherReading(temperature=temperature, precipitation=precipitation)


class OpenMeteoClient:
    """WeatherProvider backed by the public Open-Meteo forecast API."""

    def __init__(self, http: httpx.AsyncClient, *, base_url: str = DEFAULT_BASE_URL) -> None:
        self._http = http
        self._base_url = base_url.rstrip("/")

    async def fetch_weather(self, latitude: float, longitude: float) -> WeatherReading:
        url = f"{self._base_url}/v1/forecast"
        params = {
            "latitude": latitude,
            "longitude": longitude,
            "current_weather": "true",
            "hourly": "precipitation",
        }

        try:
            resp = await self._http.get(url, params=params)
            resp.raise_for_status()
            reading = parse_weather(resp.json())
        except (httpx.HTTPError, ValueError, TypeError, OverflowError):
            logger.warning(
                "Weather fetch failed lat=%s lon=%s; weather unknown", latitude, longitude, exc_info=True
            )
            return UNKNOWN_WEATHER

        if not reading.has_data:
            logger.info("Weather response incomplete: %s", reading)
        else:
            logger.debug("Weather lat=%s lon=%s -> %s", latitude, longitude, reading)
        return reading
