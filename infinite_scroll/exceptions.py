"""Exception types raised by the infinite scroll controller."""


class InfiniteScrollError(Exception):
    """Base class for all controller errors."""


class DataSourceFailure(InfiniteScrollError):
    """The data source rejected or returned an unusable response."""

    def __init__(self, message: str, offset: int = 0):
        super().__init__(message)
        self.offset = offset


class ConfigurationError(InfiniteScrollError):
    """The controller was constructed with invalid options."""
