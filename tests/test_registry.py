# topmark:header:start
#
#   project      : OptBind
#   file         : test_registry.py
#   file_relpath : tests/test_registry.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for `OptionRegistry` registration and read-only views."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

import pytest

from optbind.errors import DuplicateOptionError
from optbind.options.refs import Ref
from optbind.options.sinks import OutputFile
from optbind.registry import OptionMeta, OptionRegistry
from optbind.report import OutputFormat

if TYPE_CHECKING:
    from pathlib import Path


@dataclass
class _Settings:
    name: str = "anon"
    debug: bool = False
    tags: list[str] = field(default_factory=list)


def test_make_returns_registered_option(registry: OptionRegistry) -> None:
    option = registry.make(Ref(1), "n")
    assert registry.get("n") is option
    assert "n" in registry
    assert len(registry) == 1


def test_empty_name_is_rejected(registry: OptionRegistry) -> None:
    with pytest.raises(ValueError):
        registry.make(Ref(1), "")


def test_empty_marker_is_rejected() -> None:
    with pytest.raises(ValueError):
        OptionRegistry(marker="")


def test_duplicate_replaces_and_logs(
    registry: OptionRegistry, caplog: pytest.LogCaptureFixture
) -> None:
    """Last registration wins; the previous binding is dropped."""
    old = registry.make(Ref(1), "n")
    with caplog.at_level(logging.DEBUG):
        new = registry.make(Ref("x"), "n")

    assert registry.get("n") is new
    assert new is not old
    assert len(registry) == 1
    assert "Replacing option 'n'" in caplog.text


def test_duplicate_does_not_close_caller_sink(registry: OptionRegistry, tmp_path: Path) -> None:
    sink = OutputFile()
    sink.open(tmp_path / "keep.txt")
    registry.make(sink, "l")
    registry.make(Ref(0), "l")

    assert sink.is_open
    sink.close()


def test_strict_duplicate_raises(strict_registry: OptionRegistry) -> None:
    first = strict_registry.make(Ref(1), "n")
    with pytest.raises(DuplicateOptionError):
        strict_registry.make(Ref(2), "n")
    assert strict_registry.get("n") is first


def test_bind_attribute_defaults_name(registry: OptionRegistry) -> None:
    settings = _Settings()
    registry.bind(settings, "name")
    registry.bind(settings, "debug", "d")

    registry.parse(["prog", "-d", "-name", "zoe"])

    assert settings.debug is True
    assert settings.name == "zoe"


def test_bind_list_attribute_with_converter(registry: OptionRegistry) -> None:
    settings = _Settings()
    tags = settings.tags
    registry.bind(settings, "tags", "tag")

    registry.parse(["prog", "-tag", "a b"])

    assert settings.tags is tags
    assert tags == ["a", "b"]


def test_unregister_and_clear(registry: OptionRegistry) -> None:
    registry.make(Ref(1), "a")
    registry.make(Ref(2), "b")

    assert registry.unregister("a") is True
    assert registry.unregister("a") is False
    assert registry.names() == ("b",)

    registry.clear()
    assert len(registry) == 0


def test_views_are_sorted_and_read_only(registry: OptionRegistry) -> None:
    registry.make(Ref(1), "zeta")
    registry.make(Ref(True), "alpha")

    assert registry.names() == ("alpha", "zeta")
    assert list(registry) == ["alpha", "zeta"]
    assert list(registry.iter_meta()) == [
        OptionMeta(name="alpha", value="true", type="bool"),
        OptionMeta(name="zeta", value="1", type="int"),
    ]

    mapping = registry.as_mapping()
    with pytest.raises(TypeError):
        mapping["x"] = mapping["alpha"]  # type: ignore[index]


def test_render_formats(registry: OptionRegistry) -> None:
    registry.make(Ref(2.5), "p")
    registry.make(OutputFile(), "l")

    assert registry.render() == "option\tdefault\ttype\nl\tfile\tOutputFile\np\t2.5\tfloat\n"
    assert '"option": "p"' in registry.render(OutputFormat.JSON)


def test_repr_lists_names(registry: OptionRegistry) -> None:
    registry.make(Ref(1), "b")
    registry.make(Ref(1), "a")
    assert repr(registry) == "OptionRegistry(a, b)"
