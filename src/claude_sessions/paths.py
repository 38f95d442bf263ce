"""Locating session logs under Claude Code's projects directory.

Claude Code groups sessions by working directory, naming each group folder
by replacing every '/' of the absolute path with '-':

    /root/clawd  ->  -root-clawd

The encoding is lossy: "-root-my-project" may have been "/root/my-project"
or "/root/my/project". The ``cwd`` recorded inside the log is authoritative;
a decoded folder name is only a display fallback.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Iterator
from pathlib import Path

from claude_sessions.config import SESSION_EXT

log = logging.getLogger("claude-sessions.paths")

_SEP = "/"
_ESCAPE = "-"


def decode_project_path(encoded_name: str) -> str:
    """Best-effort reversal of a project folder name, e.g. '-root-myproject' -> '/root/myproject'."""
    if not encoded_name.startswith(_ESCAPE):
        return encoded_name
    return _SEP + encoded_name[1:].replace(_ESCAPE, _SEP)


def encode_project_path(project_path: str) -> str:
    """Convert '/Users/foo/bar' to '-Users-foo-bar'."""
    return project_path.replace(_SEP, _ESCAPE)


def iter_project_dirs(projects_dir: str | os.PathLike) -> Iterator[Path]:
    """Yield the project folders directly under ``projects_dir`` in name order.

    Non-directory entries are ignored. A missing or unreadable root yields nothing.
    """
    root = Path(projects_dir)
    try:
        entries = sorted(os.scandir(root), key=lambda e: e.name)
    except OSError as e:
        log.debug("cannot scan %s: %s", root, e)
        return
    for entry in entries:
        try:
            if entry.is_dir():
                yield Path(entry.path)
        except OSError:
            continue


def iter_session_files(project_dir: Path) -> Iterator[Path]:
    """Yield the session logs of one project folder in name order."""
    try:
        entries = sorted(os.scandir(project_dir), key=lambda e: e.name)
    except OSError as e:
        log.debug("cannot scan %s: %s", project_dir, e)
        return
    for entry in entries:
        if not entry.name.endswith(SESSION_EXT) or len(entry.name) == len(SESSION_EXT):
            continue
        try:
            if entry.is_file():
                yield Path(entry.path)
        except OSError:
            continue


def session_id_from_path(path: Path) -> str:
    """The session id is the log's file name minus its extension."""
    return path.name[: -len(SESSION_EXT)]


def _is_plain_name(session_id: str) -> bool:
    return bool(session_id) and session_id not in (".", "..") and _SEP not in session_id and os.sep not in session_id


def find_session_file(
    projects_dir: str | os.PathLike, session_id: str
) -> tuple[Path, Path] | None:
    """Return ``(log path, project folder)`` of the first folder holding ``<session_id>.jsonl``."""
    if not _is_plain_name(session_id):
        return None
    filename = f"{session_id}{SESSION_EXT}"
    for project_dir in iter_project_dirs(projects_dir):
        candidate = project_dir / filename
        try:
            if candidate.is_file():
                return candidate, project_dir
        except OSError as e:
            # ENAMETOOLONG, EACCES on the folder, ...: not found here
            log.debug("cannot check %s: %s", candidate, e)
            continue
    return None
