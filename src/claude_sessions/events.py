"""Decoding JSONL lines into typed log events.

Each line is a JSON object with a ``type`` field:
  - "user": a user turn with metadata (cwd, git branch, CLI version)
  - "assistant": an assistant turn with structured content blocks
  - anything else ("queue-operation", "summary", ...): lifecycle noise

A line that does not decode to an object is skipped; the rest of the file
is still read.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Iterable, Iterator

from claude_sessions.models import (
    SKIPPED,
    AssistantEvent,
    LogEvent,
    OtherEvent,
    Skipped,
    Usage,
    UserEvent,
)

log = logging.getLogger("claude-sessions.events")


def _str(value: object, default: str = "") -> str:
    return value if isinstance(value, str) else default


def _int(value: object) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        return 0
    return value


def _message(entry: dict) -> dict:
    message = entry.get("message")
    return message if isinstance(message, dict) else {}


def _user_content(message: dict) -> str | list[dict] | None:
    content = message.get("content")
    if isinstance(content, str):
        return content
    if isinstance(content, list):
        return [b for b in content if isinstance(b, dict)]
    return None


def _usage(message: dict) -> Usage:
    usage = message.get("usage")
    if not isinstance(usage, dict):
        return Usage()
    return Usage(
        input_tokens=_int(usage.get("input_tokens")),
        output_tokens=_int(usage.get("output_tokens")),
        cache_read_input_tokens=_int(usage.get("cache_read_input_tokens")),
        cache_creation_input_tokens=_int(usage.get("cache_creation_input_tokens")),
    )


def _parent(entry: dict) -> str | None:
    parent = entry.get("parentUuid")
    return parent if isinstance(parent, str) else None


def decode_entry(entry: dict) -> LogEvent:
    """Classify an already-parsed JSON object by its ``type`` tag."""
    entry_type = entry.get("type")
    timestamp = _str(entry.get("timestamp"))
    session_id = _str(entry.get("sessionId"))

    if entry_type == "user":
        message = _message(entry)
        return UserEvent(
            uuid=_str(entry.get("uuid")),
            parent_uuid=_parent(entry),
            timestamp=timestamp,
            session_id=session_id,
            cwd=_str(entry.get("cwd")),
            git_branch=_str(entry.get("gitBranch")),
            version=_str(entry.get("version")),
            content=_user_content(message),
        )

    if entry_type == "assistant":
        message = _message(entry)
        content = message.get("content")
        blocks = [b for b in content if isinstance(b, dict)] if isinstance(content, list) else []
        return AssistantEvent(
            uuid=_str(entry.get("uuid")),
            parent_uuid=_parent(entry),
            timestamp=timestamp,
            session_id=session_id,
            blocks=blocks,
            model=_str(message.get("model")),
            stop_reason=_str(message.get("stop_reason")),
            usage=_usage(message),
        )

    return OtherEvent(type=_str(entry_type), timestamp=timestamp, session_id=session_id)


def decode_line(line: str) -> LogEvent | Skipped:
    """Decode one JSONL line, or return SKIPPED if it is not a JSON object."""
    try:
        entry = json.loads(line)
    except (json.JSONDecodeError, ValueError, RecursionError):
        return SKIPPED
    if not isinstance(entry, dict):
        return SKIPPED
    return decode_entry(entry)


def decode_lines(lines: Iterable[str]) -> Iterator[LogEvent]:
    """Yield the decodable events of ``lines`` in order."""
    for lineno, line in enumerate(lines, start=1):
        event = decode_line(line)
        if event is SKIPPED:
            log.debug("skipping malformed line %d", lineno)
            continue
        yield event
