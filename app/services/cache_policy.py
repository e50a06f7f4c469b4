"""Cache duration handling for the stats endpoint."""

from __future__ import annotations

import math

DEFAULT_CACHE_SECONDS = 21600
MIN_CACHE_SECONDS = 60
MAX_CACHE_SECONDS = 86400
STALE_WHILE_REVALIDATE_SECONDS = 60


def compute_cache_seconds(
    refresh: str | None,
    *,
    default: int = DEFAULT_CACHE_SECONDS,
    minimum: int = MIN_CACHE_SECONDS,
    maximum: int = MAX_CACHE_SECONDS,
) -> int:
    """Turn the raw ``refresh`` query value into a cache duration in seconds.

    Missing, non-numeric, non-finite and below-minimum values fall back to
    ``default``; larger values are capped at ``maximum``.
    """

    if refresh is None or not refresh.strip():
        return default
    try:
        value = float(refresh.strip())
    except ValueError:
        return default
    if not math.isfinite(value) or value < minimum:
        return default
    return int(min(value, maximum))


def cache_control_header(cache_seconds: int) -> str:
    return (
        f"public, s-maxage={cache_seconds}, "
        f"stale-while-revalidate={STALE_WHILE_REVALIDATE_SECONDS}"
    )
