# topmark:header:start
#
#   project      : OptBind
#   file         : base.py
#   file_relpath : src/optbind/options/base.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Abstract option contract.

Every bound option exposes the same four operations so the registry and the parser
can drive heterogeneous bindings without knowing their concrete types:

- [`probe()`][optbind.options.base.Option.probe]: called first when the flag is seen;
  returns whether the following token must be consumed. Self-contained flags mutate
  their variable here and return False.
- [`parse(text)`][optbind.options.base.Option.parse]: consumes one token.
- [`type()`][optbind.options.base.Option.type]: diagnostic label of the bound type.
- [`value()`][optbind.options.base.Option.value]: current value rendered as text.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any


class Option(ABC):
    """Base class for all option variants.

    Subclasses hold a live reference to exactly one caller-owned variable (see
    [`optbind.options.refs`][optbind.options.refs]) and never own it.
    """

    __slots__ = ()

    @abstractmethod
    def probe(self) -> bool:
        """Return True if the flag needs the following token as its value."""

    @abstractmethod
    def parse(self, text: str) -> None:
        """Apply one textual value to the bound variable.

        Args:
            text (str): The token following the flag.

        Raises:
            OptionValueError: If ``text`` cannot be applied. The bound variable is
                left unchanged.
        """

    @abstractmethod
    def type(self) -> str:
        """Return a diagnostic label for the bound variable's type."""

    @abstractmethod
    def value(self) -> str:
        """Return the current value of the bound variable as text."""

    @property
    @abstractmethod
    def target(self) -> Any:
        """Return the object this option is bound to."""

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.value()!r}: {self.type()})"
