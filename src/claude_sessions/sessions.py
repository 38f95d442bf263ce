"""Listing and reading Claude Code sessions.

Both entry points take the projects directory explicitly (normally
``~/.claude/projects``) and re-read the filesystem on every call. Nothing
raises: a missing, oversize, unreadable or empty log simply contributes
nothing.
"""

from __future__ import annotations

import logging
import os
import posixpath
from datetime import datetime
from pathlib import Path

from claude_sessions.config import MAX_FILE_SIZE, NO_PREVIEW, PREVIEW_LENGTH
from claude_sessions.dates import epoch_to_iso, parse_timestamp, sort_key
from claude_sessions.events import decode_lines
from claude_sessions.messages import extract_text, to_message
from claude_sessions.models import (
    AssistantEvent,
    ClaudeSessionInfo,
    FileLines,
    LogEvent,
    ParsedMessage,
    ParsedSession,
    TooLarge,
    UserEvent,
)
from claude_sessions.paths import (
    decode_project_path,
    find_session_file,
    iter_project_dirs,
    iter_session_files,
    session_id_from_path,
)
from claude_sessions.reader import read_jsonl_lines

log = logging.getLogger("claude-sessions.sessions")


class SessionAccumulator:
    """Metadata gathered in one forward pass over a session's events.

    cwd, git branch, CLI version and preview come from the first user event
    that has them. The time span covers every timestamped event, whatever
    its kind.
    """

    def __init__(self) -> None:
        self.user_count = 0
        self.assistant_count = 0
        self.cwd = ""
        self.git_branch = ""
        self.version = ""
        self.preview = ""
        self.first_seen: datetime | None = None
        self.last_seen: datetime | None = None
        self._first_raw = ""
        self._last_raw = ""

    @property
    def is_empty(self) -> bool:
        return self.user_count == 0 and self.assistant_count == 0

    def _track_time(self, timestamp: str) -> None:
        parsed = parse_timestamp(timestamp)
        if parsed is None:
            return
        if self.first_seen is None or parsed < self.first_seen:
            self.first_seen, self._first_raw = parsed, timestamp
        if self.last_seen is None or parsed >= self.last_seen:
            self.last_seen, self._last_raw = parsed, timestamp

    def feed(self, event: LogEvent) -> None:
        self._track_time(event.timestamp)

        if isinstance(event, UserEvent):
            self.user_count += 1
            if not self.cwd and event.cwd:
                self.cwd = event.cwd
            if not self.git_branch and event.git_branch:
                self.git_branch = event.git_branch
            if not self.version and event.version:
                self.version = event.version
            if not self.preview:
                text = extract_text(event.content)
                if text.strip():
                    self.preview = text[:PREVIEW_LENGTH]
        elif isinstance(event, AssistantEvent):
            self.assistant_count += 1

    def build_info(self, session_id: str, decoded_path: str, file: FileLines) -> ClaudeSessionInfo:
        # The cwd recorded in the log is authoritative; the folder name is a lossy fallback
        effective_path = self.cwd or decoded_path
        created_at = self._first_raw or epoch_to_iso(file.created_at)
        updated_at = self._last_raw or epoch_to_iso(file.modified_at)
        return ClaudeSessionInfo(
            session_id=session_id,
            project_path=effective_path,
            project_name=posixpath.basename(effective_path.rstrip("/")) or effective_path,
            cwd=effective_path,
            git_branch=self.git_branch,
            version=self.version,
            preview=self.preview or NO_PREVIEW,
            user_message_count=self.user_count,
            assistant_message_count=self.assistant_count,
            created_at=created_at,
            updated_at=updated_at,
            file_size_bytes=file.size,
        )


def _read(path: Path, max_file_size: int) -> FileLines | None:
    result = read_jsonl_lines(path, max_file_size)
    if isinstance(result, TooLarge):
        log.warning(
            "skipping %s: file too large (%.1f MB)", result.path, result.size / 1024 / 1024
        )
        return None
    if not isinstance(result, FileLines):
        return None
    return result


def extract_session_info(
    path: Path, decoded_path: str, max_file_size: int = MAX_FILE_SIZE
) -> ClaudeSessionInfo | None:
    """Listing metadata for one log, or None if it is unusable or has no user/assistant turns."""
    file = _read(path, max_file_size)
    if file is None:
        return None

    acc = SessionAccumulator()
    for event in decode_lines(file.lines):
        acc.feed(event)

    if acc.is_empty:
        return None
    return acc.build_info(session_id_from_path(path), decoded_path, file)


def list_sessions(
    projects_dir: str | os.PathLike, max_file_size: int = MAX_FILE_SIZE
) -> list[ClaudeSessionInfo]:
    """List every session under ``projects_dir``, most recently updated first."""
    sessions: list[ClaudeSessionInfo] = []

    for project_dir in iter_project_dirs(projects_dir):
        decoded_path = decode_project_path(project_dir.name)
        for path in iter_session_files(project_dir):
            info = extract_session_info(path, decoded_path, max_file_size)
            if info is not None:
                sessions.append(info)

    # sort is stable, so equal timestamps keep scan order
    sessions.sort(key=lambda s: sort_key(s.updated_at), reverse=True)
    return sessions


def parse_session(
    session_id: str, projects_dir: str | os.PathLike, max_file_size: int = MAX_FILE_SIZE
) -> ParsedSession | None:
    """Read one session fully, metadata and messages in a single pass.

    Returns None when the log is missing, too large, unreadable or holds no
    user/assistant turns.
    """
    found = find_session_file(projects_dir, session_id)
    if found is None:
        return None
    path, project_dir = found

    file = _read(path, max_file_size)
    if file is None:
        return None

    fallback_timestamp = epoch_to_iso(file.modified_at)
    acc = SessionAccumulator()
    messages: list[ParsedMessage] = []
    for event in decode_lines(file.lines):
        acc.feed(event)
        message = to_message(event, fallback_timestamp)
        if message is not None:
            messages.append(message)

    if acc.is_empty:
        return None

    info = acc.build_info(session_id, decode_project_path(project_dir.name), file)
    return ParsedSession(info=info, messages=messages)


def session_exists(session_id: str, projects_dir: str | os.PathLike) -> bool:
    """Check whether a log for ``session_id`` exists, without reading it."""
    return find_session_file(projects_dir, session_id) is not None
