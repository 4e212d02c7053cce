"""gh-activity.

Prints a one-line summary for each event in a GitHub user's public activity
feed.
"""

__version__ = "0.1.0"

from gh_activity.client import EventsClient
from gh_activity.events import Event, EventType
from gh_activity.formatter import format_event

__all__ = ["__version__", "Event", "EventType", "EventsClient", "format_event"]
