"""Pydantic models for the channel stats endpoint."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class ChannelStatsResponse(BaseModel):
    """Successful subscriber count lookup."""

    model_config = ConfigDict(populate_by_name=True)

    ok: bool = True
    channel: str
    channel_id: str = Field(..., alias="channelId")
    subscriber_count: int = Field(..., alias="subscriberCount")
    fetched_at: str = Field(..., alias="fetchedAt", description="UTC ISO-8601 timestamp")


class ErrorResponse(BaseModel):
    ok: bool = False
    error: str
