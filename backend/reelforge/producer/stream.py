"""Timer-paced NDJSON emission."""

import asyncio
import logging
from typing import AsyncIterator, Awaitable, Callable, Sequence

from reelforge.models import Event, encode_event

logger = logging.getLogger(__name__)

DisconnectCheck = Callable[[], Awaitable[bool]]


async def stream_events(
    events: Sequence[Event],
    delay_seconds: float,
    is_disconnected: DisconnectCheck | None = None,
) -> AsyncIterator[bytes]:
    """Yield each event as one NDJSON line, sleeping between emissions.

    Stops without emitting further lines once ``is_disconnected`` reports
    that the peer went away.
    """
    for index, event in enumerate(events):
        if is_disconnected is not None and await is_disconnected():
            logger.info(f"Client disconnected after {index}/{len(events)} events")
            return

        yield encode_event(event)

        if index < len(events) - 1 and delay_seconds > 0:
            await asyncio.sleep(delay_seconds)

    logger.debug(f"Stream complete: {len(events)} events emitted")
