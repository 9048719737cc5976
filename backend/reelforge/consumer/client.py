"""Async client for the NDJSON generation endpoint."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import Any, AsyncIterator, Mapping

import httpx

from reelforge.config import StudioConfig
from reelforge.exceptions import RequestRejectedError, TransportError
from reelforge.models import Brief, Event, parse_event

from .lines import NdjsonLineBuffer

logger = logging.getLogger(__name__)


class EventStream:
    """Readable body of one generation response, iterated as typed events."""

    def __init__(self, response: httpx.Response):
        self._response = response
        self.events_received = 0

    @property
    def status_code(self) -> int:
        return self._response.status_code

    @property
    def headers(self) -> httpx.Headers:
        return self._response.headers

    def __aiter__(self) -> AsyncIterator[Event]:
        return self._iterate()

    async def _iterate(self) -> AsyncIterator[Event]:
        buffer = NdjsonLineBuffer()
        try:
            async for chunk in self._response.aiter_bytes():
                for line in buffer.feed(chunk):
                    event = parse_event(line)
                    self.events_received += 1
                    yield event
        except httpx.HTTPError as e:
            raise TransportError(f"Stream interrupted: {e}") from e
        buffer.close()
        logger.debug(f"Stream ended after {self.events_received} events")


class StudioClient:
    """Submits briefs and opens event streams against a ReelForge server."""

    def __init__(
        self,
        config: StudioConfig | None = None,
        base_url: str | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.config = config or StudioConfig()
        if base_url:
            self.config = self.config.model_copy(update={"base_url": base_url})
        self._transport = transport
        self._client: httpx.AsyncClient | None = None

    async def __aenter__(self) -> StudioClient:
        timeout = httpx.Timeout(
            self.config.timeout_seconds,
            read=self.config.stream_read_timeout_seconds,
        )
        self._client = httpx.AsyncClient(
            base_url=self.config.base_url,
            timeout=timeout,
            transport=self._transport,
        )
        return self

    async def __aexit__(
        self,
        exc_type: type | None,
        exc_val: Exception | None,
        exc_tb: Any,
    ) -> None:
        if self._client:
            await self._client.aclose()
            self._client = None
            logger.debug("Closed StudioClient")

    @property
    def client(self) -> httpx.AsyncClient:
        if self._client is None:
            raise RuntimeError("StudioClient must be used as async context manager")
        return self._client

    @asynccontextmanager
    async def open_stream(
        self, brief: Brief | Mapping[str, Any]
    ) -> AsyncIterator[EventStream]:
        """POST a brief and yield its readable event stream.

        Mappings are sent unvalidated so the server's validation applies.

        Raises:
            RequestRejectedError: the server answered 400.
            TransportError: no readable stream could be obtained, or the
                connection failed while reading.
        """
        payload = brief.to_payload() if isinstance(brief, Brief) else dict(brief)

        try:
            async with self.client.stream(
                "POST", self.config.generate_path, json=payload
            ) as response:
                if response.status_code == 400:
                    await response.aread()
                    raise _rejection(response)
                if response.is_error:
                    raise TransportError(
                        f"Streaming channel unavailable (HTTP {response.status_code}).",
                        status_code=response.status_code,
                    )
                logger.debug(f"Stream opened: HTTP {response.status_code}")
                yield EventStream(response)
        except httpx.HTTPError as e:
            raise TransportError(f"Streaming channel unavailable: {e}") from e


def _rejection(response: httpx.Response) -> RequestRejectedError:
    try:
        body = response.json()
    except ValueError:
        body = {}
    if not isinstance(body, dict):
        body = {}
    return RequestRejectedError(
        str(body.get("error") or "Request rejected"),
        details=str(body.get("details") or ""),
        status_code=response.status_code,
    )
