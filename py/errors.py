"""Error kinds raised while building or reading a line index."""


class IndexBuildError(Exception):
    """Base class for all index builder errors."""

    def __init__(self, message: str, path: str | None = None):
        super().__init__(message)
        self.path = path


class UsageError(IndexBuildError):
    """Raised when the command line is called with the wrong arguments."""


class SourceIOError(IndexBuildError):
    """Raised when the data file cannot be opened or read."""


class DestinationIOError(IndexBuildError):
    """Raised when the index file cannot be created, written or published."""


class IndexFormatError(IndexBuildError):
    """Raised when an index file does not consist of whole entries."""
