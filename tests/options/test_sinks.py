# topmark:header:start
#
#   project      : OptBind
#   file         : test_sinks.py
#   file_relpath : tests/options/test_sinks.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for the `OutputFile` sink."""

from __future__ import annotations

from typing import TYPE_CHECKING

from optbind.options.sinks import OutputFile

if TYPE_CHECKING:
    from pathlib import Path


def test_new_sink_is_closed_and_discards_writes() -> None:
    """Writing to a sink that was never opened is a no-op."""
    sink = OutputFile()
    assert not sink.is_open
    assert not sink.failed
    assert sink.write("ignored") == 0
    sink.flush()
    sink.close()


def test_open_write_close(tmp_path: Path) -> None:
    """An opened sink writes text to its path."""
    path: Path = tmp_path / "out.txt"
    sink = OutputFile()

    assert sink.open(path) is True
    assert sink.is_open
    assert sink.path == path
    assert sink.write("hello\n") == 6
    sink.close()

    assert not sink.is_open
    assert path.read_text(encoding="utf-8") == "hello\n"


def test_open_failure_does_not_raise(tmp_path: Path) -> None:
    """Opening an impossible path reports failure through the sink state."""
    sink = OutputFile()

    assert sink.open(tmp_path / "missing-dir" / "out.txt") is False
    assert sink.failed
    assert isinstance(sink.error, OSError)
    assert not sink.is_open
    assert "failed" in repr(sink)


def test_reopen_closes_previous_file(tmp_path: Path) -> None:
    """Opening again closes the previous handle and clears an earlier error."""
    first: Path = tmp_path / "first.txt"
    second: Path = tmp_path / "second.txt"
    sink = OutputFile()

    assert not sink.open(tmp_path / "nope" / "x.txt")
    sink.open(first)
    sink.write("one")
    assert not sink.failed

    sink.open(second)
    sink.write("two")
    sink.close()

    assert first.read_text(encoding="utf-8") == "one"
    assert second.read_text(encoding="utf-8") == "two"


def test_context_manager_closes(tmp_path: Path) -> None:
    """Leaving the `with` block closes the file."""
    path: Path = tmp_path / "ctx.txt"
    with OutputFile() as sink:
        sink.open(path)
        sink.write("x")
    assert not sink.is_open
    assert path.read_text(encoding="utf-8") == "x"


def test_open_unrepresentable_path_does_not_raise(tmp_path: Path) -> None:
    """A path with an embedded NUL fails like any other unopenable path."""
    sink = OutputFile()

    assert sink.open(str(tmp_path / "a\x00b")) is False
    assert sink.failed
    assert isinstance(sink.error, ValueError)
    assert not sink.is_open
