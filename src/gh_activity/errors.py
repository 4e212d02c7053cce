"""Error taxonomy for activity lookups.

Every failure the CLI reports is an ``ActivityError``; ``str(error)`` is the
message shown to the user after the ``ERROR:`` prefix.
"""

from __future__ import annotations


class ActivityError(Exception):
    """Base class for failures that abort a single activity lookup."""


class UsernameRequired(ActivityError):
    """Raised when no (or an empty) username was supplied."""

    def __init__(self) -> None:
        super().__init__("please provide username")


class TransportError(ActivityError):
    """Raised when the HTTP request itself failed (DNS, connection, timeout)."""


class HTTPStatusError(ActivityError):
    """Raised when GitHub answered with an error status."""

    message = "unexpected response status"

    def __init__(self, status_code: int) -> None:
        super().__init__(self.message)
        self.status_code = status_code


class UserNotFound(HTTPStatusError):
    message = "username not found"


class ClientError(HTTPStatusError):
    message = "client error"


class ServerError(HTTPStatusError):
    message = "server error"


class DecodeError(ActivityError):
    """Raised when the response body is not a JSON array of events."""

    def __init__(self, detail: str) -> None:
        super().__init__(f"invalid events response: {detail}")
        self.detail = detail
