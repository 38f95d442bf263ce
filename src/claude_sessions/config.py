"""Configuration for claude-sessions.

The session logs themselves belong to Claude Code and are only ever read:
  <claude home>/projects/<encoded project dir>/<session id>.jsonl

This tool keeps its own small state under ~/.claude-sessions/:
  config.json        — Claude home override and file size ceiling
  logs/              — debug log (claude-sessions.log)
"""

from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass, field
from pathlib import Path

MAX_FILE_SIZE = 50 * 1024 * 1024
PREVIEW_LENGTH = 120
NO_PREVIEW = "(no preview)"
SESSION_EXT = ".jsonl"
PROJECTS_DIRNAME = "projects"

LOG_FILENAME = "claude-sessions.log"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"

SESSIONS_HOME = Path(os.environ.get("CLAUDE_SESSIONS_HOME", "~/.claude-sessions")).expanduser()

log = logging.getLogger("claude-sessions")


def log_path() -> Path:
    return SESSIONS_HOME / "logs" / LOG_FILENAME


def setup_logging() -> None:
    """Send everything under the "claude-sessions" logger to the current log file.

    A file handler left over from an earlier SESSIONS_HOME is closed and
    replaced, so calling this again after the home moves is safe.
    """
    path = log_path()
    path.parent.mkdir(parents=True, exist_ok=True)
    root = logging.getLogger("claude-sessions")
    root.setLevel(logging.DEBUG)

    for handler in list(root.handlers):
        if isinstance(handler, logging.FileHandler):
            if handler.baseFilename == os.path.abspath(path):
                return
            root.removeHandler(handler)
            handler.close()

    # delay: the file only appears once something is logged
    handler = logging.FileHandler(path, delay=True)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root.addHandler(handler)


def ensure_home() -> None:
    """Create ~/.claude-sessions if it doesn't exist."""
    SESSIONS_HOME.mkdir(parents=True, exist_ok=True)


def default_claude_home() -> str:
    """Claude Code's config directory: CLAUDE_CONFIG_DIR, else ~/.claude."""
    return os.environ.get("CLAUDE_CONFIG_DIR", os.path.expanduser("~/.claude"))


@dataclass(frozen=True)
class ReaderConfig:
    """Where to find session logs and how large a log may be, from ~/.claude-sessions/config.json."""

    claude_home: str = field(default_factory=default_claude_home)
    max_file_size: int = MAX_FILE_SIZE

    @property
    def projects_dir(self) -> Path:
        return Path(self.claude_home).expanduser() / PROJECTS_DIRNAME

    @classmethod
    def from_file(cls) -> ReaderConfig:
        path = SESSIONS_HOME / "config.json"
        if not path.exists():
            return cls()
        try:
            with open(path) as f:
                data = json.load(f)
            max_size = data.get("max_file_size", MAX_FILE_SIZE)
            if not isinstance(max_size, int) or max_size <= 0:
                max_size = MAX_FILE_SIZE
            return cls(
                claude_home=data.get("claude_home") or default_claude_home(),
                max_file_size=max_size,
            )
        except (json.JSONDecodeError, OSError, AttributeError):
            return cls()

    def save(self) -> None:
        """Persist config to ~/.claude-sessions/config.json."""
        ensure_home()
        path = SESSIONS_HOME / "config.json"
        data = {
            "claude_home": self.claude_home,
            "max_file_size": self.max_file_size,
        }
        with open(path, "w") as f:
            json.dump(data, f, indent=2)
            f.write("\n")
