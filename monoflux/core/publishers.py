"""Publishers - async combinators for single-value and multi-value producers.

Invariants:
    - Multi-value producers are async iterators: items are produced only when pulled
    - Every multi-value combinator returns a fresh async generator (no shared iteration state)
    - Order is preserved by every combinator; distinct keeps the first occurrence
    - Single-value producers are awaitables resolving to a value, None (empty), or raising

Design Decisions:
    - Plain async generators over a Publisher class hierarchy: async iteration
      already provides pull-based demand and cancellation
"""

import logging
from collections.abc import AsyncIterable, AsyncIterator, Awaitable, Callable, Hashable, Iterable
from typing import TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")
R = TypeVar("R")
H = TypeVar("H", bound=Hashable)


# ─── Multi-value ─────────────────────────────────────────────────

async def from_iterable(items: Iterable[T]) -> AsyncIterator[T]:
    """Emit each item of a synchronous iterable, one per pull."""
    for item in items:
        yield item


async def filter_items(
    source: AsyncIterable[T], predicate: Callable[[T], bool],
) -> AsyncIterator[T]:
    async for item in source:
        if predicate(item):
            yield item


async def map_items(
    source: AsyncIterable[T], transform: Callable[[T], R],
) -> AsyncIterator[R]:
    async for item in source:
        yield transform(item)


async def concat(*sources: AsyncIterable[T]) -> AsyncIterator[T]:
    """Drain each source in turn. A source is not started until the previous one ends."""
    for source in sources:
        async for item in source:
            yield item


async def distinct(source: AsyncIterable[H]) -> AsyncIterator[H]:
    """Drop items equal to one already emitted."""
    seen: set[H] = set()
    async for item in source:
        if item in seen:
            continue
        seen.add(item)
        yield item


async def collect(source: AsyncIterable[T]) -> list[T]:
    """Buffer a multi-value producer into a list."""
    return [item async for item in source]


# ─── Single-value ────────────────────────────────────────────────

async def map_single(
    single: Awaitable[T | None], transform: Callable[[T], R],
) -> R | None:
    """Transform the resolved value; an empty result stays empty."""
    value = await single
    return None if value is None else transform(value)


async def default_if_empty(single: Awaitable[T | None], default: T) -> T:
    value = await single
    return default if value is None else value


async def on_error_return(single: Awaitable[T], fallback: T) -> T:
    """Resolve to fallback if the single-value producer fails."""
    try:
        return await single
    except Exception as exc:
        logger.warning("Single-value producer failed, using fallback: %s", exc)
        return fallback
