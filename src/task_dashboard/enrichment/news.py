# src/task_dashboard/enrichment/news.py

"""
Hacker News client.

Fetches the top story ids, then the first `n` items concurrently.
Results keep the order of the id list regardless of completion order.
Any failure degrades to an empty list.
"""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from typing import Any

import httpx

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://hacker-news.firebaseio.com"


@dataclass(frozen=True, slots=True)
class NewsItem:
    id: int
    title: str | None = None
    url: str | None = None


def parse_story_ids(payload: Any) -> list[int]:
    if not isinstance(payload, list):
        raise ValueError(f"story id list expected, got {type(payload).__name__}")
    for x in payload:
        if isinstance(x, bool) or not isinstance(x, int):
            raise ValueError(f"story id must be an integer, got {x!r}")
    return list(payload)


def parse_news_item(story_id: int, payload: Any) -> NewsItem | None:
    """Shape an item payload. JSON null (deleted/missing item) -> None."""
    if payload is None:
        return None
    if not isinstance(payload, dict):
        raise ValueError(f"item {story_id}: object expected, got {type(payload).__name__}")

    title = payload.get("title")
    url = payload.get("url")
    return NewsItem(
        id=int(payload.get("id", story_id)),
        title=str(title) if title is not None else None,
        url=str(url) if url is not None else None,
    )


class HackerNewsClient:
    """NewsProvider backed by the Hacker News Firebase API."""

    def __init__(self, http: httpx.AsyncClient, *, base_url: str = DEFAULT_BASE_URL) -> None:
        self._http = http
        self._base_url = base_url.rstrip("/")

    async def _get_json(self, path: str) -> Any:
        resp = await self._http.get(f"{self._base_url}{path}")
        resp.raise_for_status()
        return resp.json()

    async def _fetch_item(self, story_id: int) -> NewsItem | None:
        payload = await self._get_json(f"/v0/item/{story_id}.json")
        return parse_news_item(story_id, payload)

    async def fetch_top_stories(self, n: int) -> list[NewsItem]:
        if n <= 0:
            return []

        try:
            story_ids = parse_story_ids(await self._get_json("/v0/topstories.json"))
        except (httpx.HTTPError, ValueError, TypeError):
            logger.warning("Top stories fetch failed; no stories", exc_info=True)
            return []

        # Fire all detail requests, join them all, then collect in id order.
        results = await asyncio.gather(
            *(self._fetch_item(sid) for sid in story_ids[:n]),
            return_exceptions=True,
        )
        for sid, res in zip(story_ids, results):
            if isinstance(res, (httpx.HTTPError, ValueError, TypeError)):
                logger.warning("News item %s fetch failed; no stories", sid, exc_info=res)
                return []
            if isinstance(res, BaseException):
                raise res

        items: list[NewsItem | None] = list(results)  # type: ignore[arg-type]
        stories = [item for item in items if item is not None]
        if len(stories) != len(items):
            logger.info("Skipped %d missing news item(s)", len(items) - len(stories))
        logger.debug("Fetched %d news stories", len(stories))
        return stories
