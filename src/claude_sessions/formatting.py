"""Terminal rendering of session listings and transcripts."""

from __future__ import annotations

import json

from claude_sessions.models import (
    ClaudeSessionInfo,
    ContentBlock,
    ParsedMessage,
    ParsedSession,
    TextBlock,
    ToolResultBlock,
    ToolUseBlock,
)

MAX_TOOL_TEXT = 300

_ROLE_LABELS = {"user": "User", "assistant": "Claude"}


def truncate(text: str, limit: int = MAX_TOOL_TEXT) -> str:
    if len(text) <= limit:
        return text
    return text[: limit - 3] + "..."


def _one_line(text: str) -> str:
    return " ".join(text.split())


def format_session_row(info: ClaudeSessionInfo, preview_width: int = 60) -> str:
    """One listing line: id, project, last update, turn counts, preview."""
    updated = info.updated_at[:19].replace("T", " ")
    counts = f"{info.user_message_count}u/{info.assistant_message_count}a"
    preview = truncate(_one_line(info.preview), preview_width)
    return f"{info.session_id}  {updated}  {counts:>9}  {info.project_name}  {preview}"


def format_block(block: ContentBlock) -> str:
    if isinstance(block, TextBlock):
        return block.text
    if isinstance(block, ToolUseBlock):
        input_str = json.dumps(block.input, ensure_ascii=False) if block.input is not None else ""
        return f"[tool_use {block.name} #{block.id}] {truncate(input_str)}".rstrip()
    if isinstance(block, ToolResultBlock):
        label = "tool_error" if block.is_error else "tool_result"
        return f"[{label} #{block.tool_use_id}] {truncate(block.content)}".rstrip()
    return ""


def format_message(message: ParsedMessage) -> str:
    label = _ROLE_LABELS.get(message.role.value, message.role.value)
    header = f"── {label} · {message.timestamp}"
    body = "\n".join(format_block(b) for b in message.content_blocks)
    return f"{header}\n{body}"


def format_session(session: ParsedSession) -> str:
    """Header with the session's metadata followed by every message."""
    info = session.info
    lines = [
        f"Session:   {info.session_id}",
        f"Project:   {info.project_path}",
    ]
    if info.git_branch:
        lines.append(f"Branch:    {info.git_branch}")
    if info.version:
        lines.append(f"Version:   {info.version}")
    lines.append(f"Started:   {info.created_at}")
    lines.append(f"Updated:   {info.updated_at}")
    lines.append(
        f"Messages:  {info.user_message_count} user, {info.assistant_message_count} assistant"
    )
    parts = ["\n".join(lines)]
    parts.extend(format_message(m) for m in session.messages)
    return "\n\n".join(parts)
