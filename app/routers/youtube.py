"""Public endpoint returning a YouTube channel's subscriber count."""

from __future__ import annotations

import logging
from collections.abc import AsyncIterator
from datetime import datetime, timezone

import httpx
from fastapi import APIRouter, Depends, Query, Request, status
from fastapi.responses import JSONResponse

from app.core.config import Settings
from app.core.messages import get_message
from app.schema.channel_stats import ChannelStatsResponse, ErrorResponse
from app.services.cache_policy import cache_control_header, compute_cache_seconds
from app.services.channel_resolver import resolve_channel_id
from app.services.channel_stats import (
    SubscriberCountUnavailable,
    UpstreamStatsError,
    fetch_subscriber_count,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["youtube"])

JSON_MEDIA_TYPE = "application/json; charset=utf-8"


def get_app_settings(request: Request) -> Settings:
    """FastAPI dependency returning the settings the app was built with."""

    return request.app.state.settings


async def get_youtube_client(
    request: Request,
    settings: Settings = Depends(get_app_settings),
) -> AsyncIterator[httpx.AsyncClient]:
    """FastAPI dependency that yields a per-request Data API client."""

    transport = getattr(request.app.state, "youtube_transport", None)
    async with httpx.AsyncClient(transport=transport, timeout=settings.youtube_timeout_seconds) as client:
        yield client


def _json(status_code: int, body: ChannelStatsResponse | ErrorResponse, cache_seconds: int) -> JSONResponse:
    return JSONResponse(
        content=body.model_dump(by_alias=True),
        status_code=status_code,
        media_type=JSON_MEDIA_TYPE,
        headers={"Cache-Control": cache_control_header(cache_seconds)},
    )


def _error(status_code: int, message: str, cache_seconds: int) -> JSONResponse:
    return _json(status_code, ErrorResponse(error=message), cache_seconds)


def _utc_timestamp() -> str:
    return datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


@router.get("/youtube", response_model=ChannelStatsResponse)
async def channel_subscribers(
    channel: str | None = Query(None, description="@handle, handle or UC... channel id"),
    refresh: str | None = Query(None, description="Cache duration in seconds (60-86400)"),
    settings: Settings = Depends(get_app_settings),
    client: httpx.AsyncClient = Depends(get_youtube_client),
) -> JSONResponse:
    """Resolve ``channel`` and return its current subscriber count."""

    api_key = settings.youtube_api_key
    if not api_key:
        logger.error("YouTube API key is not configured")
        return _error(
            status.HTTP_500_INTERNAL_SERVER_ERROR,
            get_message("missing_api_key", settings.locale),
            settings.default_cache_seconds,
        )

    cache_seconds = compute_cache_seconds(
        refresh,
        default=settings.default_cache_seconds,
        minimum=settings.min_cache_seconds,
        maximum=settings.max_cache_seconds,
    )

    channel = (channel or "").strip()
    if not channel:
        return _error(
            status.HTTP_400_BAD_REQUEST,
            get_message("missing_channel", settings.locale),
            cache_seconds,
        )

    try:
        channel_id = await resolve_channel_id(
            client, api_key, channel, base_url=settings.youtube_api_base
        )
        if not channel_id:
            return _error(
                status.HTTP_404_NOT_FOUND,
                get_message("channel_not_found", settings.locale),
                cache_seconds,
            )

        try:
            subscriber_count = await fetch_subscriber_count(
                client, api_key, channel_id, base_url=settings.youtube_api_base
            )
        except UpstreamStatsError as exc:
            message = str(exc) or get_message("upstream_error", settings.locale)
            return _error(status.HTTP_502_BAD_GATEWAY, message, cache_seconds)
        except SubscriberCountUnavailable:
            return _error(
                status.HTTP_404_NOT_FOUND,
                get_message("subscriber_count_unavailable", settings.locale),
                cache_seconds,
            )

        logger.info(
            "Fetched subscriber count",
            extra={"channel": channel, "channel_id": channel_id, "subscriber_count": subscriber_count},
        )
        return _json(
            status.HTTP_200_OK,
            ChannelStatsResponse(
                channel=channel,
                channel_id=channel_id,
                subscriber_count=subscriber_count,
                fetched_at=_utc_timestamp(),
            ),
            cache_seconds,
        )
    except Exception as exc:  # noqa: BLE001 - every failure becomes a JSON 500
        logger.exception("Channel stats request failed", extra={"channel": channel})
        message = str(exc) or get_message("server_error", settings.locale)
        return _error(status.HTTP_500_INTERNAL_SERVER_ERROR, message, cache_seconds)
