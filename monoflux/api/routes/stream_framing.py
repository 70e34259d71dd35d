"""Stream Framing - wire encodings for incrementally emitted multi-value responses.

Invariants:
    - NDJSON: exactly one JSON object per line, newline-terminated
    - Event stream: one `data:` event per item, blank-line terminated
    - Items are encoded as they are pulled; nothing is buffered ahead of the client
    - Client disconnect is logged and the cancellation propagates
"""

import asyncio
import logging
from collections.abc import AsyncIterable, AsyncIterator

from pydantic import BaseModel

logger = logging.getLogger(__name__)

NDJSON_MEDIA_TYPE = "application/x-ndjson"
EVENT_STREAM_MEDIA_TYPE = "text/event-stream"

# Prevent proxy/browser buffering of streamed items
STREAM_HEADERS = {
    "Cache-Control": "no-cache",
    "X-Accel-Buffering": "no",
}


def ndjson_line(item: BaseModel) -> str:
    return item.model_dump_json() + "\n"


def sse_event(text: str) -> str:
    """Format text as one SSE event; multi-line text becomes several data fields."""
    lines = text.split("\n")
    return "".join(f"data: {line}\n" for line in lines) + "\n"


async def ndjson_stream(
    source: AsyncIterable[BaseModel], route: str,
) -> AsyncIterator[str]:
    async for chunk in _framed(source, ndjson_line, route):
        yield chunk


async def sse_stream(source: AsyncIterable[str], route: str) -> AsyncIterator[str]:
    async for chunk in _framed(source, sse_event, route):
        yield chunk


async def _framed(source, encode, route: str) -> AsyncIterator[str]:
    count = 0
    try:
        async for item in source:
            yield encode(item)
            count += 1
    except asyncio.CancelledError:
        logger.info(
            "Client disconnected from stream",
            extra={"route": route, "item_count": count},
        )
        raise
    logger.debug(
        "Stream completed", extra={"route": route, "item_count": count},
    )
