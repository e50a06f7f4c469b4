"""FastAPI app entry point."""

from __future__ import annotations

import httpx
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.core.config import Settings, get_settings
from app.routers import youtube


def create_app(
    settings: Settings | None = None,
    *,
    transport: httpx.AsyncBaseTransport | None = None,
) -> FastAPI:
    """Build FastAPI application.

    ``settings`` are read once here and handed to request handlers through
    ``app.state``; ``transport`` replaces the network transport used for
    YouTube Data API calls (tests pass an ``httpx.MockTransport``).
    """

    settings = settings or get_settings()

    app = FastAPI(title="Channel Stats API", version="0.1.0")
    app.state.settings = settings
    app.state.youtube_transport = transport
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["GET"],
        allow_headers=["*"],
    )
    app.include_router(youtube.router)

    @app.get("/healthz", tags=["health"])
    async def healthcheck() -> dict[str, str]:
        return {"status": "ok"}

    return app


app = create_app()
