"""One-line summaries for activity events."""

from __future__ import annotations

import json
import re

from pydantic import JsonValue

from gh_activity.events import MISSING, Event, EventType, Missing, lookup, lookup_str

PLACEHOLDER = "<unknown>"

_WORD_START = re.compile(r"(^|\s)(\S)")


def titlecase(text: str) -> str:
    """Upper-case the first letter of each whitespace-separated word.

    The rest of each word is left untouched, so ``"re-opened"`` becomes
    ``"Re-opened"`` and ``"openedBy"`` stays camel-cased.
    """

    return _WORD_START.sub(lambda m: m.group(1) + m.group(2).upper(), text)


def render_value(value: JsonValue | Missing) -> str:
    """Render a payload value for display, substituting the placeholder when absent."""

    if value is MISSING or value is None:
        return PLACEHOLDER
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    if isinstance(value, (dict, list)):
        return json.dumps(value, separators=(",", ":"), ensure_ascii=False)
    return str(value)


def _action(event: Event) -> str:
    action = lookup_str(event.payload, "action")
    if action is MISSING:
        return PLACEHOLDER
    return titlecase(action)


def _ref_change(verb: str, event: Event) -> str:
    ref_type = lookup(event.payload, "ref_type")
    repo = event.repo.name
    if ref_type == "repository":
        return f"{verb} {ref_type} {repo}"
    ref = lookup(event.payload, "ref")
    return f"{verb} {render_value(ref_type)} {render_value(ref)} in {repo}"


def format_event(event: Event) -> str:
    """Describe ``event`` in a single human-readable line.

    Never raises: missing or mistyped payload fields are rendered as
    ``<unknown>``.
    """
    repo = event.repo.name
    payload = event.payload
    kind = event.kind

    if kind is EventType.PUSH:
        size = render_value(lookup(payload, "distinct_size"))
        return f"Pushed {size} commit(s) to {repo}"
    if kind is EventType.WATCH:
        return f"Starred {repo}"
    if kind is EventType.FORK:
        return f"Forked {repo}"
    if kind is EventType.CREATE:
        return _ref_change("Created", event)
    if kind is EventType.DELETE:
        return _ref_change("Deleted", event)
    if kind is EventType.PULL_REQUEST:
        number = render_value(lookup(payload, "pull_request", "number"))
        return f"{_action(event)} pull request #{number} in {repo}"
    if kind is EventType.RELEASE:
        tag = render_value(lookup(payload, "release", "tag_name"))
        return f"{_action(event)} release {tag} in {repo}"
    if kind is EventType.ISSUE:
        return f"{_action(event)} issue in {repo}"
    return f"{event.type} in {repo}"
