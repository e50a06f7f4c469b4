"""Thin wrapper around YouTube Data API calls that never fails on bad bodies."""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from typing import Any

import httpx

logger = logging.getLogger(__name__)

YOUTUBE_API_BASE = "https://www.googleapis.com/youtube/v3"


class JsonParseError(ValueError):
    """Raised when an upstream body is not valid JSON."""


@dataclass(slots=True)
class UpstreamResponse:
    """Uniform view of an upstream call: success flag, status and parsed body."""

    ok: bool
    status: int
    status_text: str
    data: dict[str, Any] = field(default_factory=dict)


def parse_json(text: str) -> Any:
    try:
        return json.loads(text)
    except ValueError as exc:
        raise JsonParseError(str(exc)) from exc


def decode_body(text: str) -> dict[str, Any]:
    """Parse ``text`` as a JSON object, substituting ``{}`` for anything else."""

    try:
        data = parse_json(text)
    except JsonParseError:
        logger.debug("Upstream body is not JSON", extra={"length": len(text)})
        return {}
    if not isinstance(data, dict):
        return {}
    return data


def first_item(data: dict[str, Any]) -> dict[str, Any]:
    """Return ``data["items"][0]`` when present and well-formed, else ``{}``."""

    items = data.get("items")
    if isinstance(items, list) and items and isinstance(items[0], dict):
        return items[0]
    return {}


def error_message(data: dict[str, Any]) -> str | None:
    """Extract the ``error.message`` field from a Data API error body."""

    error = data.get("error")
    if isinstance(error, dict):
        message = error.get("message")
        if isinstance(message, str) and message:
            return message
    return None


async def fetch_json(
    client: httpx.AsyncClient,
    path: str,
    params: dict[str, str],
    *,
    api_key: str,
    base_url: str = YOUTUBE_API_BASE,
) -> UpstreamResponse:
    """GET ``<base_url>/<path>`` and wrap the outcome in an :class:`UpstreamResponse`.

    Transport failures (``httpx.HTTPError``) are not caught here.
    """

    url = f"{base_url.rstrip('/')}/{path}"
    response = await client.get(
        url,
        params={**params, "key": api_key},
        headers={"Accept": "application/json"},
    )
    text = response.text
    result = UpstreamResponse(
        ok=response.is_success,
        status=response.status_code,
        status_text=response.reason_phrase,
        data=decode_body(text),
    )
    logger.debug("YouTube API %s -> %s", path, result.status)
    return result
