"""Three-tier retrieval contract shared by all data sources.

Tiers, from least to most capable:

- sync: ``retrieve()`` returns every line at once. Mandatory.
- async: ``retrieve_async()`` resolves with every line at once.
- stream: ``retrieve_stream()`` is an async iterator producing lines one by one.

Each source declares the optional tiers it supports through its
``capabilities`` descriptor. A source gets the shared default for a declared
tier by assigning ``default_retrieve_async`` / ``default_retrieve_stream`` as
the method, or overrides it by defining the method itself. Callers go through
``retrieve_async(source)`` / ``retrieve_stream(source)``, which fall back to
the defaults for tiers the source does not declare.
"""
from __future__ import annotations

import asyncio
import enum
from dataclasses import dataclass
from typing import AsyncIterator, Awaitable, Protocol, Sequence, cast

from loguru import logger


@dataclass(frozen=True)
class Capabilities:
    """Optional tiers a data source implements on top of ``retrieve()``."""

    async_batch: bool = False
    async_stream: bool = False


class Tier(enum.IntEnum):
    SYNC = 1
    ASYNC = 2
    STREAM = 3


class DataSource(Protocol):
    """Protocol for sources returning an ordered sequence of text lines."""

    capabilities: Capabilities

    def retrieve(self) -> Sequence[str]: ...


class AsyncDataSource(DataSource, Protocol):
    async def retrieve_async(self) -> Sequence[str]: ...


class AsyncStreamingDataSource(AsyncDataSource, Protocol):
    def retrieve_stream(self) -> AsyncIterator[str]: ...


async def default_retrieve_async(source: DataSource) -> Sequence[str]:
    """Run the synchronous retrieval on a worker thread."""
    return await asyncio.to_thread(source.retrieve)


async def default_retrieve_stream(source: DataSource) -> AsyncIterator[str]:
    """Yield every line of the batch retrieval, preferring the async tier."""
    if source.capabilities.async_batch:
        items = await cast(AsyncDataSource, source).retrieve_async()
    else:
        items = source.retrieve()
    for item in items:
        yield item


def retrieve_async(source: DataSource) -> Awaitable[Sequence[str]]:
    """Await-able async-batch retrieval for any source."""
    if source.capabilities.async_batch:
        return cast(AsyncDataSource, source).retrieve_async()
    return default_retrieve_async(source)


def retrieve_stream(source: DataSource) -> AsyncIterator[str]:
    """Async line stream for any source."""
    if source.capabilities.async_stream:
        return cast(AsyncStreamingDataSource, source).retrieve_stream()
    return default_retrieve_stream(source)


def richest_tier(source: DataSource) -> Tier:
    """Most capable tier the source declares: stream > async > sync."""
    caps = source.capabilities
    if caps.async_stream:
        tier = Tier.STREAM
    elif caps.async_batch:
        tier = Tier.ASYNC
    else:
        tier = Tier.SYNC
    logger.debug("{} -> {} tier", type(source).__name__, tier.name)
    return tier
