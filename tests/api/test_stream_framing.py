"""Stream framing tests - NDJSON lines, SSE events, disconnect handling."""

import asyncio

import pytest

from monoflux.api.routes.stream_framing import (
    ndjson_line, ndjson_stream, sse_event, sse_stream,
)
from monoflux.core.publishers import collect, from_iterable
from monoflux.models.product import Product


def test_ndjson_line_is_one_json_object():
    line = ndjson_line(Product(id=1, name="Laptop", price=999.99, quantity=5))
    assert line == '{"id":1,"name":"Laptop","price":999.99,"quantity":5}\n'


def test_sse_event_single_line():
    assert sse_event("Laptop") == "data: Laptop\n\n"


def test_sse_event_multi_line():
    assert sse_event("a\nb") == "data: a\ndata: b\n\n"


async def test_sse_stream_frames_each_item():
    chunks = await collect(sse_stream(from_iterable(["x", "y"]), "test"))
    assert chunks == ["data: x\n\n", "data: y\n\n"]


async def test_ndjson_stream_propagates_cancellation(caplog):
    async def slow_source():
        yield Product(id=1, name="Laptop", price=999.99, quantity=5)
        await asyncio.sleep(10)
        yield Product(id=2, name="Mouse", price=29.99, quantity=50)

    stream = ndjson_stream(slow_source(), "products-stream")

    async def consume():
        return await collect(stream)

    task = asyncio.create_task(consume())
    await asyncio.sleep(0.01)
    task.cancel()
    with caplog.at_level("INFO"), pytest.raises(asyncio.CancelledError):
        await task
    assert any("Client disconnected" in r.getMessage() for r in caplog.records)
