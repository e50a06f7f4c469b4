"""Resolve user-supplied YouTube channel identifiers into canonical channel IDs."""

from __future__ import annotations

import logging
from dataclasses import dataclass

import httpx

from app.services.youtube_api import YOUTUBE_API_BASE, error_message, fetch_json, first_item

logger = logging.getLogger(__name__)

CHANNEL_ID_PREFIX = "UC"
CHANNEL_ID_MIN_LENGTH = 11


class ChannelResolutionError(ValueError):
    """Raised when the Data API rejects a lookup with an explicit error message."""


@dataclass(frozen=True, slots=True)
class CanonicalChannelId:
    value: str


@dataclass(frozen=True, slots=True)
class ChannelHandle:
    """A handle or legacy username, kept both without and with the ``@`` prefix."""

    bare: str
    prefixed: str

    @property
    def lookup_variants(self) -> list[str]:
        return [variant for variant in (self.bare, self.prefixed) if variant.lstrip("@")]

    @property
    def search_variants(self) -> list[str]:
        return [variant for variant in (self.prefixed, self.bare) if variant.lstrip("@")]


ChannelRef = CanonicalChannelId | ChannelHandle


def is_channel_id(value: str) -> bool:
    return value.startswith(CHANNEL_ID_PREFIX) and len(value) >= CHANNEL_ID_MIN_LENGTH


def classify_channel(raw: str) -> ChannelRef:
    """Classify ``raw`` as a canonical channel ID or a handle."""

    identifier = raw.strip()
    if is_channel_id(identifier):
        return CanonicalChannelId(identifier)

    bare = identifier[1:] if identifier.startswith("@") else identifier
    return ChannelHandle(bare=bare, prefixed=f"@{bare}")


async def _lookup_by_handle(
    client: httpx.AsyncClient, handle: str, *, api_key: str, base_url: str
) -> str:
    result = await fetch_json(
        client,
        "channels",
        {"part": "id", "forHandle": handle},
        api_key=api_key,
        base_url=base_url,
    )
    channel_id = first_item(result.data).get("id")
    if result.ok and isinstance(channel_id, str) and channel_id:
        return channel_id
    logger.debug("Handle lookup missed", extra={"handle": handle, "status": result.status})
    return ""


async def _lookup_by_search(
    client: httpx.AsyncClient, query: str, *, api_key: str, base_url: str
) -> str:
    result = await fetch_json(
        client,
        "search",
        {"part": "snippet", "type": "channel", "maxResults": "1", "q": query},
        api_key=api_key,
        base_url=base_url,
    )
    if not result.ok:
        message = error_message(result.data)
        if message:
            logger.warning("Channel search rejected", extra={"query": query, "status": result.status})
            raise ChannelResolutionError(message)
        logger.debug("Channel search failed", extra={"query": query, "status": result.status})
        return ""

    item = first_item(result.data)
    snippet = item.get("snippet")
    channel_id = snippet.get("channelId") if isinstance(snippet, dict) else None
    if not channel_id:
        item_id = item.get("id")
        channel_id = item_id.get("channelId") if isinstance(item_id, dict) else None
    if isinstance(channel_id, str) and channel_id:
        return channel_id
    logger.debug("Channel search returned no match", extra={"query": query})
    return ""


async def resolve_channel_id(
    client: httpx.AsyncClient,
    api_key: str,
    channel: str,
    *,
    base_url: str = YOUTUBE_API_BASE,
) -> str:
    """Resolve ``channel`` (``@handle``, ``handle`` or ``UC...`` id) to a channel ID.

    Tries, in order and stopping at the first hit:
      * the input itself when it already looks like a channel ID (no request)
      * ``channels?forHandle=`` without, then with, the ``@`` prefix
      * ``search?type=channel`` with, then without, the ``@`` prefix

    Returns an empty string when nothing matched. Raises
    :class:`ChannelResolutionError` when a search call fails with an explicit
    upstream message (quota, key restrictions, ...).
    """

    ref = classify_channel(channel)
    if isinstance(ref, CanonicalChannelId):
        return ref.value

    for handle in ref.lookup_variants:
        channel_id = await _lookup_by_handle(client, handle, api_key=api_key, base_url=base_url)
        if channel_id:
            return channel_id

    for query in ref.search_variants:
        channel_id = await _lookup_by_search(client, query, api_key=api_key, base_url=base_url)
        if channel_id:
            return channel_id

    logger.info("Channel could not be resolved", extra={"channel": channel.strip()})
    return ""
