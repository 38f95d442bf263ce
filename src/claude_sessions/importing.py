"""Preparing a parsed session for import into a host application's own store.

Text-only messages are stored as their plain text; messages that carry tool
blocks are stored as the JSON of their content blocks so the tool calls
survive the round trip.
"""

from __future__ import annotations

import json

from claude_sessions.models import ParsedMessage, ParsedSession, Role

TITLE_LENGTH = 50


class EmptySessionError(ValueError):
    """The session parsed fine but has no messages worth importing."""


def import_title(session: ParsedSession) -> str:
    first_user = next((m for m in session.messages if m.role is Role.USER), None)
    if first_user is None:
        return f"Imported: {session.info.project_name}"
    text = first_user.plain_text
    if len(text) > TITLE_LENGTH:
        return text[:TITLE_LENGTH] + "..."
    return text


def stored_content(message: ParsedMessage) -> str:
    if message.has_tool_blocks:
        return json.dumps([b.to_dict() for b in message.content_blocks])
    return message.plain_text


def build_import_payload(session: ParsedSession) -> dict:
    """Everything a host needs to recreate ``session`` as one of its own chats.

    Raises:
        EmptySessionError: if the session produced no messages.
    """
    if not session.messages:
        raise EmptySessionError(f"Session {session.info.session_id} has no messages to import")

    messages = []
    for message in session.messages:
        content = stored_content(message)
        if content.strip():
            messages.append({"role": message.role.value, "content": content})

    return {
        "title": import_title(session),
        "workingDirectory": session.info.cwd or session.info.project_path,
        "sdkSessionId": session.info.session_id,
        "messageCount": len(session.messages),
        "messages": messages,
    }
