"""CLI entrypoint: print a user's recent GitHub activity."""

from __future__ import annotations

import argparse
import logging
import sys

from pydantic import ValidationError

from gh_activity import __version__
from gh_activity.client import EventsClient
from gh_activity.config import ActivitySettings
from gh_activity.errors import ActivityError, UsernameRequired
from gh_activity.formatter import format_event
from gh_activity.logging import configure_logging

logger = logging.getLogger(__name__)

NO_ACTIVITY = "no recent activity"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="gh-activity",
        description="Show a GitHub user's recent public activity",
    )
    parser.add_argument("--version", action="version", version=f"gh-activity {__version__}")
    # Optional here so a missing username is reported as an ERROR line, not a usage error.
    parser.add_argument("username", nargs="?", default=None, help="GitHub username")
    parser.add_argument(
        "--base-url",
        default=None,
        help="GitHub API base URL (overrides GITHUB_BASE_URL)",
    )
    parser.add_argument(
        "--timeout",
        type=float,
        default=None,
        help="Request timeout in seconds (overrides GH_ACTIVITY_TIMEOUT)",
    )
    return parser


def run(client: EventsClient, username: str | None) -> list[str]:
    """Fetch and format the activity lines for ``username``.

    Raises:
        ActivityError: On any lookup failure; nothing is returned in that case.
    """
    if username is None or not username.strip():
        raise UsernameRequired()

    events = client.fetch_events(username)
    if not events:
        return [NO_ACTIVITY]
    return [format_event(event) for event in events]


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    # Flags are validated the same way as their environment variables.
    overrides: dict[str, object] = {}
    if args.base_url is not None:
        overrides["GITHUB_BASE_URL"] = args.base_url
    if args.timeout is not None:
        overrides["GH_ACTIVITY_TIMEOUT"] = args.timeout

    try:
        settings = ActivitySettings(**overrides)
    except ValidationError as e:
        # Logging isn't configured yet.
        print("ERROR: invalid configuration", file=sys.stderr)
        print(e, file=sys.stderr)
        return 2

    configure_logging(settings.log_level)

    client = EventsClient(base_url=settings.github_base_url, timeout=settings.request_timeout)
    try:
        lines = run(client, args.username)
    except ActivityError as e:
        logger.debug("Activity lookup failed", exc_info=True)
        print(f"ERROR: {e}", file=sys.stderr)
        return 1
    finally:
        client.close()

    for line in lines:
        print(line)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
