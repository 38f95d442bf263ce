"""Tests for reader — size-guarded JSONL reading."""

from __future__ import annotations

from claude_sessions.models import FileLines, TooLarge, Unreadable
from claude_sessions.reader import read_jsonl_lines


def test_reads_non_blank_lines(tmp_path):
    f = tmp_path / "s.jsonl"
    f.write_text('{"a": 1}\n\n   \n{"b": 2}\n')
    result = read_jsonl_lines(f)
    assert isinstance(result, FileLines)
    assert result.lines == ['{"a": 1}', '{"b": 2}']
    assert result.size == f.stat().st_size
    assert result.created_at <= result.modified_at


def test_keeps_line_separator_inside_strings(tmp_path):
    f = tmp_path / "s.jsonl"
    f.write_text('{"text": "a\u2028b"}\n', encoding="utf-8")
    result = read_jsonl_lines(f)
    assert result.lines == ['{"text": "a\u2028b"}']


def test_too_large(tmp_path):
    f = tmp_path / "big.jsonl"
    f.write_text("x" * 101)
    result = read_jsonl_lines(f, max_size=100)
    assert isinstance(result, TooLarge)
    assert result.size == 101
    assert result.limit == 100


def test_exactly_at_limit_is_read(tmp_path):
    f = tmp_path / "s.jsonl"
    f.write_text("x" * 100)
    assert isinstance(read_jsonl_lines(f, max_size=100), FileLines)


def test_missing_file(tmp_path):
    assert isinstance(read_jsonl_lines(tmp_path / "nope.jsonl"), Unreadable)


def test_directory_is_unreadable(tmp_path):
    assert isinstance(read_jsonl_lines(tmp_path), Unreadable)


def test_invalid_utf8_is_replaced(tmp_path):
    f = tmp_path / "s.jsonl"
    f.write_bytes(b'{"a": "\xff"}\n')
    result = read_jsonl_lines(f)
    assert isinstance(result, FileLines)
    assert len(result.lines) == 1
