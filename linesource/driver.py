import asyncio
import sys
from typing import List, Optional, Sequence, TextIO

import requests
from loguru import logger

from .config import Settings, get_settings
from .datasources import (
    DataSource,
    FileDataSource,
    HttpDataSource,
    InMemoryDataSource,
    NullDataSource,
    Tier,
    retrieve_async,
    retrieve_stream,
    richest_tier,
)
from .logging import setup_logger


def build_sources(settings: Settings, session: requests.Session) -> List[Optional[DataSource]]:
    """Reference scenario; slot 1 is deliberately left unconfigured."""
    return [
        InMemoryDataSource(["In", "Memory", "Data", "Source"]),
        None,
        HttpDataSource(session, settings.http_url, timeout=settings.http_timeout_seconds),
        FileDataSource(settings.file_path, encoding=settings.file_encoding),
    ]


def ensure_source(source: Optional[DataSource]) -> DataSource:
    return source if source is not None else NullDataSource()


async def print_items(index: int, source: DataSource, out: TextIO) -> None:
    """Print a header for the slot, then every line the source produces."""
    print(f"DataSource {index}: {type(source).__name__}", file=out)

    tier = richest_tier(source)
    if tier is Tier.STREAM:
        async for item in retrieve_stream(source):
            print(item, file=out)
    elif tier is Tier.ASYNC:
        for item in await retrieve_async(source):
            print(item, file=out)
    else:
        for item in source.retrieve():
            print(item, file=out)


async def run(sources: Sequence[Optional[DataSource]], out: TextIO = sys.stdout) -> None:
    """Drain each slot in order, one blank line after each."""
    for index, configured in enumerate(sources):
        source = ensure_source(configured)
        try:
            await print_items(index, source, out)
        except Exception:
            logger.error("DataSource {} ({}) failed", index, type(source).__name__)
            raise
        print(file=out)


def main() -> None:
    settings = get_settings()
    setup_logger(settings.log_level, settings.log_to_file, settings.log_dir)
    with requests.Session() as session:
        asyncio.run(run(build_sources(settings, session)))
