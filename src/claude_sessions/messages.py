"""Turning user/assistant events into normalized messages.

User turns become a single text block. Assistant turns keep their text,
tool_use and tool_result blocks in order; other block kinds (thinking,
images, ...) are dropped. A turn left with nothing to show yields no
message at all.
"""

from __future__ import annotations

from claude_sessions.models import (
    AssistantEvent,
    ContentBlock,
    LogEvent,
    ParsedMessage,
    Role,
    TextBlock,
    ToolResultBlock,
    ToolUseBlock,
    UserEvent,
)


def extract_text(content: object) -> str:
    """Plain text of a message or tool result: a string as-is, or its text fragments joined by newlines."""
    if isinstance(content, str):
        return content
    if isinstance(content, list):
        return "\n".join(
            b.get("text") if isinstance(b.get("text"), str) else ""
            for b in content
            if isinstance(b, dict) and b.get("type") == "text"
        )
    return ""


def user_message(event: UserEvent, fallback_timestamp: str = "") -> ParsedMessage | None:
    text = extract_text(event.content)
    if not text.strip():
        return None
    return ParsedMessage(
        role=Role.USER,
        plain_text=text,
        content_blocks=[TextBlock(text=text)],
        has_tool_blocks=False,
        timestamp=event.timestamp or fallback_timestamp,
    )


def _tool_use(block: dict) -> ToolUseBlock:
    block_id = block.get("id")
    name = block.get("name")
    return ToolUseBlock(
        id=block_id if isinstance(block_id, str) else "",
        name=name if isinstance(name, str) else "",
        input=block.get("input"),
    )


def _tool_result(block: dict) -> ToolResultBlock:
    tool_use_id = block.get("tool_use_id")
    return ToolResultBlock(
        tool_use_id=tool_use_id if isinstance(tool_use_id, str) else "",
        content=extract_text(block.get("content")),
        is_error=block.get("is_error") is True,
    )


def assistant_message(event: AssistantEvent, fallback_timestamp: str = "") -> ParsedMessage | None:
    blocks: list[ContentBlock] = []
    text_parts: list[str] = []
    has_tool_blocks = False

    for block in event.blocks:
        block_type = block.get("type")
        if block_type == "text":
            text = block.get("text")
            if isinstance(text, str) and text:
                blocks.append(TextBlock(text=text))
                text_parts.append(text)
        elif block_type == "tool_use":
            blocks.append(_tool_use(block))
            has_tool_blocks = True
        elif block_type == "tool_result":
            blocks.append(_tool_result(block))
            has_tool_blocks = True

    if not blocks:
        return None

    return ParsedMessage(
        role=Role.ASSISTANT,
        plain_text="\n".join(text_parts),
        content_blocks=blocks,
        has_tool_blocks=has_tool_blocks,
        timestamp=event.timestamp or fallback_timestamp,
    )


def to_message(event: LogEvent, fallback_timestamp: str = "") -> ParsedMessage | None:
    """Normalize one event; lifecycle events never produce a message."""
    if isinstance(event, UserEvent):
        return user_message(event, fallback_timestamp)
    if isinstance(event, AssistantEvent):
        return assistant_message(event, fallback_timestamp)
    return None
