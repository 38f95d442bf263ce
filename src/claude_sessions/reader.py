"""Size-guarded reading of session logs.

A log is read whole and split into lines, so the size ceiling is the only
bound on memory. Files over the ceiling are rejected before any content is
read.
"""

from __future__ import annotations

import logging
import os

from claude_sessions.config import MAX_FILE_SIZE
from claude_sessions.models import FileLines, ReadResult, TooLarge, Unreadable

log = logging.getLogger("claude-sessions.reader")


def _birth_time(st: os.stat_result) -> float:
    birth = getattr(st, "st_birthtime", None)
    if birth is None:
        birth = st.st_ctime
    return min(birth, st.st_mtime)


def read_jsonl_lines(path: str | os.PathLike, max_size: int = MAX_FILE_SIZE) -> ReadResult:
    """Read a JSONL file into its non-blank lines, or say why not."""
    try:
        st = os.stat(path)
        if st.st_size > max_size:
            return TooLarge(path=str(path), size=st.st_size, limit=max_size)
        with open(path, encoding="utf-8", errors="replace") as f:
            content = f.read()
    except OSError as e:
        log.debug("cannot read %s: %s", path, e)
        return Unreadable(path=str(path), reason=str(e))

    # split on "\n" only: U+2028 and friends may appear raw inside JSON strings
    lines = [line for line in content.split("\n") if line.strip()]
    return FileLines(
        lines=lines,
        size=st.st_size,
        created_at=_birth_time(st),
        modified_at=st.st_mtime,
    )
