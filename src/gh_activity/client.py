"""HTTP client for a user's public events feed.

Makes exactly one unauthenticated GET per call and classifies the outcome into
the errors defined in :mod:`gh_activity.errors`. There is no retry, pagination
or rate-limit handling.
"""

from __future__ import annotations

import logging
import math
from types import TracebackType
from urllib.parse import quote

import requests

from gh_activity.errors import (
    ClientError,
    DecodeError,
    ServerError,
    TransportError,
    UsernameRequired,
    UserNotFound,
)
from gh_activity.events import Event, parse_events

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://api.github.com"


def build_events_url(base_url: str, username: str) -> str:
    """Return the per-user events endpoint for ``username``."""

    base = base_url.strip().rstrip("/")
    return f"{base}/users/{quote(username.strip(), safe='')}/events"


class EventsClient:
    """Fetch recent public events for a user."""

    def __init__(
        self,
        *,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = 30.0,
        session: requests.Session | None = None,
    ) -> None:
        if not base_url.strip():
            raise ValueError("GitHub base URL is required")
        if not math.isfinite(timeout) or timeout <= 0:
            raise ValueError("timeout must be a positive, finite number of seconds")

        self._base_url = base_url
        self._timeout = timeout
        self._session = session or requests.Session()

    def events_url(self, username: str) -> str:
        return build_events_url(self._base_url, username)

    def fetch_events(self, username: str) -> list[Event]:
        """Fetch and decode the events for ``username``.

        Args:
            username: GitHub login to look up.

        Returns:
            Events in the order returned by the API (newest first).

        Raises:
            UsernameRequired: If ``username`` is empty.
            TransportError: If the request could not be completed.
            UserNotFound: On HTTP 404.
            ClientError: On any other 4xx status.
            ServerError: On a 5xx status.
            DecodeError: If the body is not a JSON array of events.
        """
        if not username or not username.strip():
            raise UsernameRequired()

        url = self.events_url(username)
        logger.debug("Fetching events", extra={"url": url})

        try:
            resp = self._session.get(url, timeout=self._timeout)
        except requests.RequestException as e:
            logger.warning("Events request failed", extra={"url": url, "error": str(e)})
            raise TransportError(str(e)) from e

        with resp:
            status = resp.status_code
            logger.debug("Events response received", extra={"url": url, "status": status})

            if status == 404:
                logger.warning("User not found", extra={"username": username})
                raise UserNotFound(status)
            if 400 <= status <= 499:
                logger.warning("Client error from events API", extra={"status": status})
                raise ClientError(status)
            if 500 <= status <= 599:
                logger.warning("Server error from events API", extra={"status": status})
                raise ServerError(status)

            try:
                data = resp.json()
            except ValueError as e:
                logger.warning("Events response is not valid JSON", extra={"url": url})
                raise DecodeError(f"malformed JSON ({e})") from e

            events = parse_events(data)

        logger.debug("Decoded events", extra={"count": len(events)})
        return events

    def close(self) -> None:
        """Release the underlying HTTP session."""

        self._session.close()

    def __enter__(self) -> EventsClient:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()
