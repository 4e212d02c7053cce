"""Event records decoded from the GitHub events API.

Only the fields needed for display are modelled. The payload stays an open
JSON mapping because its shape depends on the event type; use :func:`lookup`
and :func:`lookup_str` to read from it without raising.
"""

from __future__ import annotations

from enum import Enum, StrEnum, auto
from typing import Any, Final

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    JsonValue,
    TypeAdapter,
    ValidationError,
    model_validator,
)

from gh_activity.errors import DecodeError


class EventType(StrEnum):
    """Event types with a dedicated display template."""

    CREATE = "CreateEvent"
    DELETE = "DeleteEvent"
    PUSH = "PushEvent"
    PULL_REQUEST = "PullRequestEvent"
    WATCH = "WatchEvent"
    FORK = "ForkEvent"
    RELEASE = "ReleaseEvent"
    ISSUE = "IssueEvent"


class Missing(Enum):
    """Marker for a payload value that is absent or of the wrong shape."""

    MISSING = auto()

    def __repr__(self) -> str:
        return "MISSING"


MISSING: Final = Missing.MISSING


def _drop_nulls(data: Any) -> Any:
    # JSON null leaves the field at its default.
    if isinstance(data, dict):
        return {key: value for key, value in data.items() if value is not None}
    return data


class EventRepo(BaseModel):
    model_config = ConfigDict(extra="ignore")

    name: str = ""

    @model_validator(mode="before")
    @classmethod
    def _ignore_nulls(cls, data: Any) -> Any:
        return _drop_nulls(data)


class Event(BaseModel):
    """One activity record from a user's public events feed."""

    model_config = ConfigDict(extra="ignore")

    type: str = ""
    payload: dict[str, JsonValue] = Field(default_factory=dict)
    repo: EventRepo = Field(default_factory=EventRepo)

    @model_validator(mode="before")
    @classmethod
    def _ignore_nulls(cls, data: Any) -> Any:
        return _drop_nulls(data)

    @property
    def kind(self) -> EventType | None:
        """Return the known event type, or None for unrecognized tags."""

        try:
            return EventType(self.type)
        except ValueError:
            return None


_EVENT_LIST = TypeAdapter(list[Event])


def parse_events(data: object) -> list[Event]:
    """Validate a decoded JSON body into events.

    A JSON ``null`` body is treated as an empty feed.

    Raises:
        DecodeError: If the body is not an array of event objects.
    """
    if data is None:
        return []
    try:
        return _EVENT_LIST.validate_python(data)
    except ValidationError as e:
        first = e.errors()[0]
        location = ".".join(str(part) for part in first["loc"])
        detail = f"{location}: {first['msg']}" if location else first["msg"]
        raise DecodeError(detail) from e


def lookup(value: JsonValue, *path: str) -> JsonValue | Missing:
    """Follow ``path`` through nested JSON objects.

    Returns ``MISSING`` if a key is absent or an intermediate value is not an
    object. A present JSON ``null`` is returned as ``None``.
    """
    current: JsonValue = value
    for key in path:
        if not isinstance(current, dict) or key not in current:
            return MISSING
        current = current[key]
    return current


def lookup_str(value: JsonValue, *path: str) -> str | Missing:
    found = lookup(value, *path)
    if isinstance(found, str):
        return found
    return MISSING
