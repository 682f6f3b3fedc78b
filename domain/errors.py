# domain/errors.py
class DirectoryError(Exception):
    """Base class for everything the directory core raises."""


class FetchError(DirectoryError):
    """Transport failure, timeout or non-2xx response while fetching the directory."""

    def __init__(self, message: str, url: str | None = None, status: int | None = None) -> None:
        super().__init__(message)
        self.url = url
        self.status = status


class ParseError(DirectoryError):
    """Response body is not a JSON array of objects."""


class InvalidTransition(DirectoryError):
    """A load-state transition that the state machine does not allow."""
