# topmark:header:start
#
#   project      : OptBind
#   file         : factory.py
#   file_relpath : src/optbind/options/factory.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Type dispatch: build the option variant matching a bound variable.

Dispatch happens on the bound variable's *current* value through a
`functools.singledispatch` function, so callers may teach OptBind about further
types:

    ```python
    from optbind.options.factory import option_for_value
    from optbind.options.variants import ScalarOption

    @option_for_value.register(IPv4Address)
    def _(value, target, convert):
        return ScalarOption(target, convert or IPv4Address, label="IPv4Address")
    ```
"""

from __future__ import annotations

from enum import Enum
from functools import singledispatch
from typing import TYPE_CHECKING, Any

from optbind.options.refs import Target
from optbind.options.sinks import OutputFile
from optbind.options.variants import (
    ArrayOption,
    BoolOption,
    FileOption,
    ScalarOption,
    SequenceOption,
    TextOption,
    converter_for,
)

if TYPE_CHECKING:
    from optbind.options.base import Option
    from optbind.options.variants import Converter


def _name(convert: Converter | None, fallback: type) -> str:
    if convert is None:
        return fallback.__name__
    return getattr(convert, "__name__", fallback.__name__)


@singledispatch
def option_for_value(value: Any, target: Target, convert: Converter | None) -> Option:
    """Return the option for a target whose current value is ``value``.

    The fallback treats ``value`` as a generic scalar converted by its own type.

    Args:
        value (Any): The target's current value (used for dispatch only).
        target (Target): The bound variable.
        convert (Converter | None): Explicit converter overriding the inferred one.

    Returns:
        Option: The matching option variant.

    Raises:
        TypeError: If ``value`` is None and no converter is given.
    """
    if convert is not None:
        return ScalarOption(target, convert, label=_name(convert, type(value)))
    if value is None:
        raise TypeError("Cannot infer the option type of a None value; pass convert=...")
    tp: type = type(value)
    return ScalarOption(target, converter_for(tp), label=tp.__name__)


@option_for_value.register(bool)
def _bool_option(value: bool, target: Target, convert: Converter | None) -> Option:
    return BoolOption(target)


@option_for_value.register(str)
def _text_option(value: str, target: Target, convert: Converter | None) -> Option:
    # str-mixin enums resolve to str before Enum in their MRO
    if isinstance(value, Enum):
        return _enum_option(value, target, convert)
    if convert is not None:
        return ScalarOption(target, convert, label=_name(convert, str))
    return TextOption(target)


@option_for_value.register(Enum)
def _enum_option(value: Enum, target: Target, convert: Converter | None) -> Option:
    tp: type[Enum] = type(value)
    return ScalarOption(target, convert or converter_for(tp), label=tp.__name__)


@option_for_value.register(list)
def _sequence_option(value: list[Any], target: Target, convert: Converter | None) -> Option:
    if convert is not None:
        return SequenceOption(target, convert, item_label=_name(convert, str))
    item_type: type = type(value[0]) if value else str
    return SequenceOption(target, converter_for(item_type), item_label=item_type.__name__)


@option_for_value.register(tuple)
def _array_option(value: tuple[Any, ...], target: Target, convert: Converter | None) -> Option:
    if convert is not None:
        label: str = _name(convert, str)
        return ArrayOption(target, (convert,) * len(value), labels=(label,) * len(value))
    types: tuple[type, ...] = tuple(type(v) for v in value)
    return ArrayOption(
        target,
        tuple(converter_for(t) for t in types),
        labels=tuple(t.__name__ for t in types),
    )


@option_for_value.register(OutputFile)
def _file_option(value: OutputFile, target: Target, convert: Converter | None) -> Option:
    return FileOption(value)


def option_for(target: Target | OutputFile, *, convert: Converter | None = None) -> Option:
    """Build the option variant for a bindable target.

    Args:
        target (Target | OutputFile): A [`Ref`][optbind.options.refs.Ref],
            [`AttrRef`][optbind.options.refs.AttrRef],
            [`ItemRef`][optbind.options.refs.ItemRef] (or any object with ``get``/``set``),
            or an [`OutputFile`][optbind.options.sinks.OutputFile] sink.
        convert (Converter | None): Optional text converter overriding type inference.
            Ignored for booleans and file sinks.

    Returns:
        Option: The option bound to ``target``.

    Raises:
        TypeError: If ``target`` is not bindable or its type cannot be inferred.
    """
    if isinstance(target, OutputFile):
        return FileOption(target)
    if not isinstance(target, Target):
        raise TypeError(
            f"Cannot bind {type(target).__name__!r}: wrap the variable in Ref(...) or AttrRef(...)"
        )
    return option_for_value(target.get(), target, convert)
