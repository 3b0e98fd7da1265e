# topmark:header:start
#
#   project      : OptBind
#   file         : __init__.py
#   file_relpath : src/optbind/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""OptBind package.

OptBind is a minimal command-line option parser. Callers bind their own variables
(strings, booleans, numbers, lists, output files) to flag names, then a single
left-to-right pass over ``argv`` fills those variables in place.
"""

from __future__ import annotations

from optbind.api import (
    bind,
    default_registry,
    make,
    parse,
    print_options,
    reset_default_registry,
)
from optbind.errors import (
    DuplicateOptionError,
    MissingValueError,
    OptbindError,
    OptionValueError,
    UnknownOptionError,
)
from optbind.options import AttrRef, ItemRef, Option, OutputFile, Ref, option_for
from optbind.registry import OptionMeta, OptionRegistry
from optbind.report import OutputFormat

__all__ = [
    "AttrRef",
    "DuplicateOptionError",
    "ItemRef",
    "MissingValueError",
    "OptbindError",
    "Option",
    "OptionMeta",
    "OptionRegistry",
    "OptionValueError",
    "OutputFile",
    "OutputFormat",
    "Ref",
    "UnknownOptionError",
    "bind",
    "default_registry",
    "make",
    "option_for",
    "parse",
    "print_options",
    "reset_default_registry",
]
