"""Fetch channel statistics from the YouTube Data API."""

from __future__ import annotations

import logging

import httpx

from app.services.youtube_api import YOUTUBE_API_BASE, error_message, fetch_json, first_item

logger = logging.getLogger(__name__)


class UpstreamStatsError(RuntimeError):
    """Raised when the statistics request itself fails upstream."""


class SubscriberCountUnavailable(LookupError):
    """Raised when a channel exposes no (or a hidden) subscriber count."""


def _parse_count(value: object) -> int | None:
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        try:
            return int(value.strip())
        except ValueError:
            return None
    return None


async def fetch_subscriber_count(
    client: httpx.AsyncClient,
    api_key: str,
    channel_id: str,
    *,
    base_url: str = YOUTUBE_API_BASE,
) -> int:
    """Return the subscriber count for ``channel_id``."""

    result = await fetch_json(
        client,
        "channels",
        {"part": "statistics", "id": channel_id},
        api_key=api_key,
        base_url=base_url,
    )

    if not result.ok:
        message = error_message(result.data) or result.status_text or "YouTube API error"
        logger.warning(
            "Statistics request failed",
            extra={"channel_id": channel_id, "status": result.status},
        )
        raise UpstreamStatsError(message)

    statistics = first_item(result.data).get("statistics")
    raw_count = statistics.get("subscriberCount") if isinstance(statistics, dict) else None
    count = _parse_count(raw_count)
    if count is None:
        raise SubscriberCountUnavailable(channel_id)
    return count
