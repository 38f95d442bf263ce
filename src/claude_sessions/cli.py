"""CLI entry point for claude-sessions."""

from __future__ import annotations

import json
import logging

import click

from claude_sessions import __version__
from claude_sessions.config import ReaderConfig, setup_logging
from claude_sessions.formatting import format_session, format_session_row
from claude_sessions.importing import EmptySessionError, build_import_payload
from claude_sessions.models import ParsedSession
from claude_sessions.paths import decode_project_path
from claude_sessions.sessions import list_sessions, parse_session

log = logging.getLogger("claude-sessions.cli")


@click.group()
@click.version_option(version=__version__)
@click.option(
    "--claude-home",
    default=None,
    help="Path to Claude Code config directory (default: $CLAUDE_CONFIG_DIR or ~/.claude).",
)
@click.pass_context
def main(ctx: click.Context, claude_home: str | None) -> None:
    """claude-sessions: Browse Claude Code CLI session logs (read-only)."""
    setup_logging()
    config = ReaderConfig.from_file()
    if claude_home is not None:
        config = ReaderConfig(claude_home=claude_home, max_file_size=config.max_file_size)
    log.debug("using projects dir %s", config.projects_dir)
    ctx.obj = config


def _load(config: ReaderConfig, session_id: str) -> ParsedSession:
    parsed = parse_session(session_id, config.projects_dir, config.max_file_size)
    if parsed is None:
        click.echo(
            f"Error: Session {session_id} not found or could not be parsed "
            f"(looked in {config.projects_dir}).",
            err=True,
        )
        raise SystemExit(1)
    return parsed


@main.command("list")
@click.option("--json", "as_json", is_flag=True, help="Print sessions as a JSON array.")
@click.option("--limit", type=click.IntRange(min=1), default=None, help="Show at most N sessions.")
@click.pass_obj
def list_cmd(config: ReaderConfig, as_json: bool, limit: int | None) -> None:
    """List sessions, most recently updated first."""
    sessions = list_sessions(config.projects_dir, config.max_file_size)
    if limit is not None:
        sessions = sessions[:limit]

    if as_json:
        click.echo(json.dumps([s.to_dict() for s in sessions], indent=2, ensure_ascii=False))
        return

    if not sessions:
        click.echo(f"No sessions found in {config.projects_dir}")
        return

    for info in sessions:
        click.echo(format_session_row(info))


@main.command()
@click.argument("session_id")
@click.option("--json", "as_json", is_flag=True, help="Print the parsed session as JSON.")
@click.pass_obj
def show(config: ReaderConfig, session_id: str, as_json: bool) -> None:
    """Print the full transcript of a session."""
    parsed = _load(config, session_id)
    if as_json:
        click.echo(json.dumps(parsed.to_dict(), indent=2, ensure_ascii=False))
        return
    click.echo(format_session(parsed))


@main.command()
@click.argument("session_id")
@click.pass_obj
def export(config: ReaderConfig, session_id: str) -> None:
    """Print a session as an import payload (title, working directory, messages)."""
    parsed = _load(config, session_id)
    try:
        payload = build_import_payload(parsed)
    except EmptySessionError as e:
        click.echo(f"Error: {e}", err=True)
        raise SystemExit(1) from e
    click.echo(json.dumps(payload, indent=2, ensure_ascii=False))


@main.command("decode-path", context_settings={"ignore_unknown_options": True})
@click.argument("name")
def decode_path(name: str) -> None:
    """Decode a project folder name, e.g. -root-myproject -> /root/myproject."""
    click.echo(decode_project_path(name))
