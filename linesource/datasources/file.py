import asyncio
import os
from pathlib import Path
from typing import AsyncIterator, List, Optional, Union

from loguru import logger

from .base import Capabilities
from .errors import DataSourceArgumentError


def split_lines(text: str) -> List[str]:
    """Split newline-normalized text; a trailing newline adds no empty line."""
    if not text:
        return []
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    return lines


class FileDataSource:
    """Reads text lines from a file; the only source that streams incrementally."""

    capabilities = Capabilities(async_batch=True, async_stream=True)

    def __init__(self, path: Union[str, os.PathLike], encoding: Optional[str] = None) -> None:
        if path is None or str(path) == "":
            raise DataSourceArgumentError("path is required")
        self.path = Path(path)
        self.encoding = encoding

    def retrieve(self) -> List[str]:
        with open(self.path, encoding=self.encoding) as fh:
            return split_lines(fh.read())

    async def retrieve_async(self) -> List[str]:
        text = await asyncio.to_thread(self.path.read_text, encoding=self.encoding)
        return split_lines(text)

    async def retrieve_stream(self) -> AsyncIterator[str]:
        with open(self.path, encoding=self.encoding) as fh:
            logger.debug("Streaming {}", self.path)
            while True:
                line = await asyncio.to_thread(fh.readline)
                if not line:
                    break
                yield line[:-1] if line.endswith("\n") else line
