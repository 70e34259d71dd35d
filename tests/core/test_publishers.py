"""Publisher combinator tests - laziness, ordering, dedup, single-value fallbacks.

Tests cover:
    - from_iterable emits in order and is restartable per call
    - concat drains sources in order and starts the next only when pulled
    - distinct keeps first occurrence
    - default_if_empty / on_error_return / map_single semantics
"""

import asyncio

import pytest

from monoflux.core.publishers import (
    collect, concat, default_if_empty, distinct, filter_items,
    from_iterable, map_items, map_single, on_error_return,
)


async def _value(v):
    return v


async def _fail():
    raise RuntimeError("boom")


async def test_from_iterable_preserves_order():
    assert await collect(from_iterable([3, 1, 2])) == [3, 1, 2]


async def test_filter_and_map_compose():
    source = map_items(filter_items(from_iterable(range(6)), lambda n: n % 2 == 0), str)
    assert await collect(source) == ["0", "2", "4"]


async def test_concat_emits_sources_in_sequence():
    result = await collect(concat(from_iterable([1, 2]), from_iterable([]), from_iterable([3])))
    assert result == [1, 2, 3]


async def test_concat_does_not_start_second_source_early():
    started = []

    async def tracked(name, items):
        started.append(name)
        for item in items:
            yield item

    stream = concat(tracked("a", [1, 2]), tracked("b", [3]))
    assert await stream.__anext__() == 1
    assert started == ["a"]
    await stream.aclose()


async def test_distinct_keeps_first_occurrence():
    assert await collect(distinct(from_iterable([1, 2, 1, 3, 2]))) == [1, 2, 3]


async def test_map_single_keeps_empty_empty():
    assert await map_single(_value(None), str.upper) is None
    assert await map_single(_value("x"), str.upper) == "X"


async def test_default_if_empty():
    assert await default_if_empty(_value(None), "fallback") == "fallback"
    assert await default_if_empty(_value("value"), "fallback") == "value"


async def test_on_error_return_substitutes_fallback():
    assert await on_error_return(_fail(), "fallback") == "fallback"
    assert await on_error_return(_value(7), 0) == 7


async def test_on_error_return_does_not_mask_cancellation():
    async def cancelled():
        raise asyncio.CancelledError

    with pytest.raises(asyncio.CancelledError):
        await on_error_return(cancelled(), "fallback")
