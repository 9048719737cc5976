"""FastAPI server exposing the NDJSON generation stream."""

import json
import logging

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, StreamingResponse

from reelforge import __version__
from reelforge.config import Settings, get_settings
from reelforge.exceptions import BriefValidationError
from reelforge.models import Brief
from reelforge.producer import build_event_sequence, stream_events

logger = logging.getLogger(__name__)

NDJSON_MEDIA_TYPE = "application/x-ndjson"
STREAM_HEADERS = {
    "Cache-Control": "no-cache",
    "Connection": "keep-alive",
}


def invalid_payload(details: str) -> JSONResponse:
    return JSONResponse(
        status_code=400,
        content={"error": "Invalid request payload", "details": details},
    )


def create_app(settings: Settings | None = None) -> FastAPI:
    """Build the FastAPI application for the given settings."""
    settings = settings or get_settings()

    app = FastAPI(
        title="ReelForge API",
        description="Simulated live reel production pipeline",
        version=__version__,
        debug=settings.server.debug,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.server.allowed_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.get("/", tags=["Root"])
    async def root() -> dict[str, str]:
        """API information."""
        return {
            "name": "ReelForge API",
            "version": __version__,
            "generate": settings.server.generate_path,
            "docs": "/docs",
            "health": "/health",
        }

    @app.get("/health", tags=["Health"])
    async def health_check() -> dict[str, str]:
        return {
            "status": "healthy",
            "service": "reelforge-api",
            "version": __version__,
        }

    @app.post(settings.server.generate_path, tags=["Generate"])
    async def generate(request: Request):
        """
        Stream the production pipeline for a creative brief.

        Request body: a Brief (only ``topic`` is required).

        Response: ``application/x-ndjson``, one event per line:
        - {"type": "status", "id": ..., "stage": ..., "agent": ..., "detail": ..., "progress": 0.08, "eta": 90}
        - {"type": "asset", "id": ..., "artifact": "script", "title": ..., "content": ..., ...}
        - {"type": "timeline", "id": "timeline", "segments": [...], ...}
        - {"type": "result", "id": "delivery", "progress": 1.0, "deliverables": {...}}
        """
        try:
            payload = await request.json()
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            logger.info(f"Rejected generate request: body is not JSON ({e})")
            return invalid_payload(f"Body must be valid JSON: {e}")

        try:
            brief = Brief.from_payload(payload)
        except BriefValidationError as e:
            logger.info(f"Rejected generate request: {e.details}")
            return invalid_payload(e.details)

        events = build_event_sequence(brief, settings.producer)
        logger.info(
            f"Streaming {len(events)} events for '{brief.topic}' on {brief.platform}"
        )

        return StreamingResponse(
            stream_events(
                events,
                settings.producer.event_delay_seconds,
                request.is_disconnected,
            ),
            media_type=NDJSON_MEDIA_TYPE,
            headers=STREAM_HEADERS,
        )

    return app
