# topmark:header:start
#
#   project      : OptBind
#   file         : __init__.py
#   file_relpath : src/optbind/options/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Option variants, bindable targets and type dispatch."""

from __future__ import annotations

from .base import Option
from .factory import option_for, option_for_value
from .refs import AttrRef, ItemRef, Ref, Target
from .sinks import OutputFile
from .variants import (
    ArrayOption,
    BoolOption,
    Converter,
    FileOption,
    ScalarOption,
    SequenceOption,
    TextOption,
    converter_for,
    format_value,
    text_to_bool,
)

__all__ = [
    "ArrayOption",
    "AttrRef",
    "BoolOption",
    "Converter",
    "FileOption",
    "ItemRef",
    "Option",
    "OutputFile",
    "Ref",
    "ScalarOption",
    "SequenceOption",
    "Target",
    "TextOption",
    "converter_for",
    "format_value",
    "option_for",
    "option_for_value",
    "text_to_bool",
]
