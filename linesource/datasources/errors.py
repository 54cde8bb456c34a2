class DataSourceError(Exception):
    """Base class for data source failures."""


class DataSourceArgumentError(DataSourceError, ValueError):
    """A required constructor argument was missing."""


class DataSourceDecodeError(DataSourceError, ValueError):
    """A payload could not be decoded into a list of lines."""
