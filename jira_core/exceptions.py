"""Custom exceptions for Jira CLI."""

__all__ = [
    "JiraError",
    "NotFoundError",
    "InconsistentStateError",
    "PersistenceError",
    "DataFormatError",
]


class JiraError(Exception):
    """Base class for errors shown to the operator."""

    pass


class NotFoundError(JiraError):
    """Raised when an epic or story ID does not exist."""

    pass


class InconsistentStateError(JiraError):
    """Raised when a story is missing from its epic's story list."""

    pass


class PersistenceError(JiraError):
    """Raised when the database file cannot be read or written."""

    pass


class DataFormatError(JiraError):
    """Raised when the database file holds malformed content."""

    pass
