"""Shared fixtures for claude-sessions tests."""

from __future__ import annotations

import json

import pytest

from claude_sessions import config


@pytest.fixture()
def sessions_home(tmp_path, monkeypatch):
    """Point SESSIONS_HOME to a temp directory and create the directory structure."""
    home = tmp_path / "sessions-home"
    monkeypatch.setattr(config, "SESSIONS_HOME", home)
    config.ensure_home()
    return home


@pytest.fixture()
def projects_dir(tmp_path):
    """An empty Claude Code projects directory."""
    path = tmp_path / "claude" / "projects"
    path.mkdir(parents=True)
    return path


@pytest.fixture()
def write_session(projects_dir):
    """Write a JSONL session log under ``projects_dir`` and return its path.

    ``lines`` may mix dicts (serialized as JSON) and raw strings (written verbatim).
    """

    def _write(project_dir_name: str, session_id: str, lines: list) -> object:
        project = projects_dir / project_dir_name
        project.mkdir(parents=True, exist_ok=True)
        path = project / f"{session_id}.jsonl"
        text = "\n".join(line if isinstance(line, str) else json.dumps(line) for line in lines)
        path.write_text(text + "\n")
        return path

    return _write
