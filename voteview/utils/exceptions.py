"""
Exceptions raised by the Voteview client.
"""

from typing import Optional


class VoteviewError(Exception):
    """Base class for all Voteview client errors."""


class ValidationError(VoteviewError, ValueError):
    """Search parameters are malformed or out of range. Raised before any request is sent."""


class TransportError(VoteviewError):
    """The server answered with something that is not a JSON object."""

    def __init__(self, body: str, url: Optional[str] = None):
        self.body = body
        self.url = url
        super().__init__(body)

    def __str__(self) -> str:
        return self.body


class EmptyResultError(VoteviewError):
    """The query ran but matched no roll calls."""

    def __init__(self, query_string: str, message: str = "No rollcalls found"):
        self.query_string = query_string
        super().__init__(message)


class EmptyInputError(VoteviewError, ValueError):
    """A table cannot be built from zero records."""


class VoteviewWarning(UserWarning):
    """Message returned by the server alongside usable results."""
