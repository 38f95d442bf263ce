"""Typed views of Claude Code session logs.

Three layers of types live here:

* decoded log events (one per JSONL line): ``UserEvent``, ``AssistantEvent``,
  ``OtherEvent``;
* normalized output handed to callers: ``ParsedMessage``,
  ``ClaudeSessionInfo``, ``ParsedSession``;
* outcomes of reading a file or a line, so that "no data" is a value rather
  than a swallowed exception.

Output types serialize with ``to_dict()`` into the camelCase shape the host
application consumes.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Union


class EventKind(str, Enum):
    """Discriminator of a decoded log line."""

    USER = "user"
    ASSISTANT = "assistant"
    OTHER = "other"


class Role(str, Enum):
    USER = "user"
    ASSISTANT = "assistant"


# --- content blocks ---


@dataclass(frozen=True)
class TextBlock:
    text: str

    def to_dict(self) -> dict:
        return {"type": "text", "text": self.text}


@dataclass(frozen=True)
class ToolUseBlock:
    id: str
    name: str
    input: Any = None

    def to_dict(self) -> dict:
        data = {"type": "tool_use", "id": self.id, "name": self.name}
        if self.input is not None:
            data["input"] = self.input
        return data


@dataclass(frozen=True)
class ToolResultBlock:
    tool_use_id: str
    content: str
    is_error: bool = False

    def to_dict(self) -> dict:
        return {
            "type": "tool_result",
            "tool_use_id": self.tool_use_id,
            "content": self.content,
            "is_error": self.is_error,
        }


ContentBlock = Union[TextBlock, ToolUseBlock, ToolResultBlock]


# --- decoded log events ---


@dataclass(frozen=True)
class Usage:
    """Token counters reported on an assistant turn."""

    input_tokens: int = 0
    output_tokens: int = 0
    cache_read_input_tokens: int = 0
    cache_creation_input_tokens: int = 0


@dataclass(frozen=True)
class UserEvent:
    uuid: str = ""
    parent_uuid: str | None = None
    timestamp: str = ""
    session_id: str = ""
    cwd: str = ""
    git_branch: str = ""
    version: str = ""
    # str, list of raw fragment dicts, or None when missing/malformed
    content: str | list[dict] | None = None

    kind = EventKind.USER


@dataclass(frozen=True)
class AssistantEvent:
    uuid: str = ""
    parent_uuid: str | None = None
    timestamp: str = ""
    session_id: str = ""
    blocks: list[dict] = field(default_factory=list)
    model: str = ""
    stop_reason: str = ""
    usage: Usage = field(default_factory=Usage)

    kind = EventKind.ASSISTANT


@dataclass(frozen=True)
class OtherEvent:
    """Any line whose ``type`` is neither user nor assistant (queue markers, summaries, ...)."""

    type: str = ""
    timestamp: str = ""
    session_id: str = ""

    kind = EventKind.OTHER


LogEvent = Union[UserEvent, AssistantEvent, OtherEvent]


class Skipped:
    """Outcome of a line that could not be decoded."""

    _instance: Skipped | None = None

    def __new__(cls) -> Skipped:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "SKIPPED"


SKIPPED = Skipped()


# --- file read outcomes ---


@dataclass(frozen=True)
class FileLines:
    """A session log read fully into memory, blank lines dropped."""

    lines: list[str]
    size: int
    created_at: float
    modified_at: float


@dataclass(frozen=True)
class TooLarge:
    path: str
    size: int
    limit: int


@dataclass(frozen=True)
class Unreadable:
    path: str
    reason: str = ""


ReadResult = Union[FileLines, TooLarge, Unreadable]


# --- normalized output ---


@dataclass(frozen=True)
class ParsedMessage:
    role: Role
    plain_text: str
    content_blocks: list[ContentBlock]
    has_tool_blocks: bool
    timestamp: str

    def to_dict(self) -> dict:
        return {
            "role": self.role.value,
            "content": self.plain_text,
            "contentBlocks": [b.to_dict() for b in self.content_blocks],
            "hasToolBlocks": self.has_tool_blocks,
            "timestamp": self.timestamp,
        }


@dataclass(frozen=True)
class ClaudeSessionInfo:
    """Listing metadata for one session log."""

    session_id: str
    project_path: str
    project_name: str
    cwd: str
    git_branch: str
    version: str
    preview: str
    user_message_count: int
    assistant_message_count: int
    created_at: str
    updated_at: str
    file_size_bytes: int

    def to_dict(self) -> dict:
        return {
            "sessionId": self.session_id,
            "projectPath": self.project_path,
            "projectName": self.project_name,
            "cwd": self.cwd,
            "gitBranch": self.git_branch,
            "version": self.version,
            "preview": self.preview,
            "userMessageCount": self.user_message_count,
            "assistantMessageCount": self.assistant_message_count,
            "createdAt": self.created_at,
            "updatedAt": self.updated_at,
            "fileSize": self.file_size_bytes,
        }


@dataclass(frozen=True)
class ParsedSession:
    info: ClaudeSessionInfo
    messages: list[ParsedMessage]

    def to_dict(self) -> dict:
        return {
            "info": self.info.to_dict(),
            "messages": [m.to_dict() for m in self.messages],
        }
