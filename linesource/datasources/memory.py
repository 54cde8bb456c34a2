from typing import Sequence

from .base import Capabilities, default_retrieve_async, default_retrieve_stream
from .errors import DataSourceArgumentError


class InMemoryDataSource:
    """Serves a fixed sequence of lines supplied at construction.

    The sequence is returned as given, not copied; callers must not mutate it.
    """

    capabilities = Capabilities(async_batch=True, async_stream=True)

    def __init__(self, data: Sequence[str]) -> None:
        if data is None:
            raise DataSourceArgumentError("data is required; pass an empty sequence for no data")
        self.data = data

    def retrieve(self) -> Sequence[str]:
        return self.data

    retrieve_async = default_retrieve_async
    retrieve_stream = default_retrieve_stream
