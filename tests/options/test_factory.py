# topmark:header:start
#
#   project      : OptBind
#   file         : test_factory.py
#   file_relpath : tests/options/test_factory.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for type dispatch (`option_for`)."""

from __future__ import annotations

from enum import Enum
from ipaddress import IPv4Address
from pathlib import Path

import pytest

from optbind.options.factory import option_for, option_for_value
from optbind.options.refs import Ref, Target
from optbind.options.sinks import OutputFile
from optbind.options.variants import (
    ArrayOption,
    BoolOption,
    FileOption,
    ScalarOption,
    SequenceOption,
    TextOption,
)
from tests.conftest import parametrize


class Mode(str, Enum):
    FAST = "fast"
    SAFE = "safe"


class Level(Enum):
    LOW = 1
    HIGH = 2


@parametrize(
    "initial, expected_cls, expected_type",
    [
        (False, BoolOption, "bool"),
        ("", TextOption, "str"),
        (3, ScalarOption, "int"),
        (2.5, ScalarOption, "float"),
        (Path("."), ScalarOption, type(Path(".")).__name__),
        ([1], SequenceOption, "list[int]"),
        ([], SequenceOption, "list[str]"),
        ((0, 0.0), ArrayOption, "tuple[int, float]"),
        (Level.LOW, ScalarOption, "Level"),
        (Mode.FAST, ScalarOption, "Mode"),
    ],
)
def test_dispatch_by_current_value(initial: object, expected_cls: type, expected_type: str) -> None:
    option = option_for(Ref(initial))
    assert isinstance(option, expected_cls)
    assert option.type() == expected_type


def test_bool_is_not_treated_as_int() -> None:
    """bool subclasses int but binds as a self-contained flag."""
    assert isinstance(option_for(Ref(True)), BoolOption)


def test_str_enum_parses_to_member() -> None:
    ref: Ref[Mode] = Ref(Mode.FAST)
    option_for(ref).parse("safe")
    assert ref.value is Mode.SAFE


def test_output_file_binds_directly() -> None:
    option = option_for(OutputFile())
    assert isinstance(option, FileOption)
    assert option.value() == "file"


def test_explicit_converter_overrides_inference() -> None:
    ref: Ref[object] = Ref(None)
    option = option_for(ref, convert=IPv4Address)
    option.parse("10.0.0.1")
    assert ref.value == IPv4Address("10.0.0.1")
    assert option.type() == "IPv4Address"


def test_explicit_converter_for_sequence_items() -> None:
    ref: Ref[list[int]] = Ref([])
    option = option_for(ref, convert=int)
    option.parse("1 2")
    assert ref.value == [1, 2]
    assert option.type() == "list[int]"


def test_none_without_converter_is_rejected() -> None:
    with pytest.raises(TypeError):
        option_for(Ref(None))


def test_unbindable_object_is_rejected() -> None:
    """Plain values must be wrapped in a target."""
    with pytest.raises(TypeError):
        option_for(42)  # type: ignore[arg-type]


def test_dispatch_is_extensible() -> None:
    """Callers can register their own types."""

    class Port(int):
        pass

    @option_for_value.register(Port)
    def _port_option(value: Port, target: Target, convert: object) -> ScalarOption:  # pyright: ignore[reportUnusedFunction]
        return ScalarOption(target, Port, label="port")

    option = option_for(Ref(Port(80)))
    assert option.type() == "port"
