from typing import Optional


class SyncError(Exception):
    """Base class for every failure that ends a sync run."""


class MissingInputError(SyncError):
    """A required input is absent, empty or unusable."""

    def __init__(self, message: str, missing=()):
        super().__init__(message)
        self.missing = tuple(missing)


class UpstreamFetchError(SyncError):
    """Listing issues or querying project metadata on GitHub failed."""

    def __init__(self, message: str, status: Optional[int] = None, url: str = ""):
        super().__init__(message)
        self.status = status
        self.url = url


class SheetWriteError(SyncError):
    """Authenticating against, clearing or appending to the sheet failed."""
