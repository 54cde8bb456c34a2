"""Data layer package: the tiered retrieval contract and its providers.

Public exports:
- DataSource protocols, Capabilities descriptor, Tier
- tier dispatch helpers and shared defaults
- InMemoryDataSource, HttpDataSource, FileDataSource, NullDataSource
- error types
"""
from .base import (
    AsyncDataSource,
    AsyncStreamingDataSource,
    Capabilities,
    DataSource,
    Tier,
    default_retrieve_async,
    default_retrieve_stream,
    retrieve_async,
    retrieve_stream,
    richest_tier,
)
from .errors import DataSourceArgumentError, DataSourceDecodeError, DataSourceError
from .file import FileDataSource
from .memory import InMemoryDataSource
from .null import NullDataSource
from .rest import HttpDataSource

__all__ = [
    "AsyncDataSource",
    "AsyncStreamingDataSource",
    "Capabilities",
    "DataSource",
    "Tier",
    "default_retrieve_async",
    "default_retrieve_stream",
    "retrieve_async",
    "retrieve_stream",
    "richest_tier",
    "DataSourceError",
    "DataSourceArgumentError",
    "DataSourceDecodeError",
    "FileDataSource",
    "InMemoryDataSource",
    "NullDataSource",
    "HttpDataSource",
]
