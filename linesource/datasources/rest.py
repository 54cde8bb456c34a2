import asyncio
from concurrent.futures import ThreadPoolExecutor
from typing import List, Optional

import requests
from loguru import logger
from pydantic import TypeAdapter, ValidationError

from .base import Capabilities, default_retrieve_stream
from .errors import DataSourceArgumentError, DataSourceDecodeError

_LINES = TypeAdapter(List[str])


class HttpDataSource:
    """Fetches a JSON array of strings from a URL.

    The session and any timeout belong to the caller and are used as given.
    Streaming uses the shared default, so the whole body is buffered before
    the first line is yielded.
    """

    capabilities = Capabilities(async_batch=True, async_stream=True)

    def __init__(self, session: requests.Session, url: str, timeout: Optional[float] = None) -> None:
        if session is None:
            raise DataSourceArgumentError("session is required")
        if not url:
            raise DataSourceArgumentError("url is required")
        self.session = session
        self.url = url
        self.timeout = timeout

    def retrieve(self) -> List[str]:
        """Block on ``retrieve_async``.

        Inside a running event loop the fetch runs on its own loop in a worker
        thread and the caller's loop stays blocked until it resolves.
        """
        try:
            asyncio.get_running_loop()
        except RuntimeError:
            return asyncio.run(self.retrieve_async())
        with ThreadPoolExecutor(max_workers=1) as pool:
            return pool.submit(asyncio.run, self.retrieve_async()).result()

    async def retrieve_async(self) -> List[str]:
        logger.debug("GET {}", self.url)
        resp = await asyncio.to_thread(self.session.get, self.url, timeout=self.timeout)
        resp.raise_for_status()
        return decode_lines(resp.text)

    retrieve_stream = default_retrieve_stream


def decode_lines(body: str) -> List[str]:
    """Decode a JSON array of strings, rejecting any other shape."""
    try:
        return _LINES.validate_json(body, strict=True)
    except ValidationError as exc:
        raise DataSourceDecodeError(f"expected a JSON array of strings: {exc.error_count()} error(s)") from exc
