# topmark:header:start
#
#   project      : OptBind
#   file         : errors.py
#   file_relpath : src/optbind/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions raised by the OptBind core.

Usage:
    Options raise [`OptionValueError`][optbind.errors.OptionValueError] when a token
    cannot be applied to their bound variable. The parser swallows (and logs) these
    errors in the default lenient mode and re-raises them in strict mode, where the
    remaining exceptions below are raised as well.
"""

from __future__ import annotations


class OptbindError(Exception):
    """Base class for all OptBind errors."""


class OptionValueError(OptbindError):
    """A textual value could not be applied to a bound variable.

    The bound variable is left unchanged when this error is raised.

    Attributes:
        name (str | None): Flag name, when known (set by the parser).
        text (str): The offending token.
        reason (str): Human-readable cause.
    """

    def __init__(self, text: str, reason: str, *, name: str | None = None) -> None:
        self.name = name
        self.text = text
        self.reason = reason
        super().__init__(str(self))

    def __str__(self) -> str:
        if self.name is None:
            return f"Invalid value {self.text!r}: {self.reason}"
        return f"Invalid value for -{self.name} {self.text!r}: {self.reason}"


class UnknownOptionError(OptbindError):
    """A marker-prefixed token names no registered option (strict mode)."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Unknown option: {name!r}")


class MissingValueError(OptbindError):
    """An option requiring a value was the last token (strict mode)."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Option {name!r} requires a value")


class DuplicateOptionError(OptbindError):
    """An option name was registered twice (strict mode)."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Duplicate option name: {name!r}")
