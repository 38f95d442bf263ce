"""claude-sessions: list and read Claude Code CLI session logs."""

from __future__ import annotations

__version__ = "0.1.0"

from claude_sessions.paths import decode_project_path
from claude_sessions.sessions import list_sessions, parse_session

__all__ = ["__version__", "decode_project_path", "list_sessions", "parse_session"]
