# topmark:header:start
#
#   project      : OptBind
#   file         : registry.py
#   file_relpath : src/optbind/registry.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Option registry: flag name -> bound option.

The registry is an explicit object: a program builds one at startup, binds its
variables with [`make`][optbind.registry.OptionRegistry.make], parses the command
line once with [`parse`][optbind.registry.OptionRegistry.parse], and may dump the
current state with [`print`][optbind.registry.OptionRegistry.print] at any time.

Typical usage:
    ```python
    from optbind import OptionRegistry, OutputFile, Ref

    opts = OptionRegistry()
    name = Ref("")
    yes = Ref(False)
    param = Ref(100.0)
    log = OutputFile()

    opts.make(name, "t")
    opts.make(yes, "y")
    opts.make(param, "p")
    opts.make(log, "l")

    rest = opts.parse(sys.argv)  # index of the first positional argument
    ```

Notes:
    * Re-registering a name replaces the previous binding (last registration wins).
      The previous option is released; the variable or sink it referenced is left
      untouched. In strict mode a duplicate name raises instead.
    * Registries are not thread safe. Build and parse them during startup, before
      any concurrent work begins.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass
from types import MappingProxyType
from typing import TYPE_CHECKING, Any, TextIO

from optbind.config.logging import get_logger
from optbind.errors import DuplicateOptionError
from optbind.options.factory import option_for
from optbind.options.refs import AttrRef
from optbind.parser import DEFAULT_MARKER, parse_args
from optbind.report import OutputFormat, render

if TYPE_CHECKING:
    from collections.abc import Iterator, Mapping, Sequence
    from pathlib import Path

    from optbind.config.logging import OptbindLogger
    from optbind.options.base import Option
    from optbind.options.refs import Target
    from optbind.options.sinks import OutputFile
    from optbind.options.variants import Converter

logger: OptbindLogger = get_logger(__name__)


@dataclass(frozen=True)
class OptionMeta:
    """Snapshot of one registered option, as shown by the diagnostic table.

    Attributes:
        name: Flag name (without marker).
        value: Current value rendered as text.
        type: Diagnostic type label.
    """

    name: str
    value: str
    type: str


class OptionRegistry:
    """Mapping of flag names to bound options.

    Args:
        marker (str): Prefix identifying flag tokens (default ``-``).
        strict (bool): Raise on duplicate registration and on parse anomalies
            instead of logging them.
    """

    def __init__(self, *, marker: str = DEFAULT_MARKER, strict: bool = False) -> None:
        if not marker:
            raise ValueError("The flag marker must not be empty.")
        self.marker = marker
        self.strict = strict
        self._options: dict[str, Option] = {}

    # --- registration ---

    def make(
        self,
        target: Target | OutputFile,
        name: str,
        *,
        convert: Converter | None = None,
    ) -> Option:
        """Bind ``target`` to the flag ``name``.

        Args:
            target (Target | OutputFile): The caller-owned variable or file sink.
            name (str): Flag name without the marker.
            convert (Converter | None): Optional converter overriding type inference.

        Returns:
            Option: The newly registered option.

        Raises:
            ValueError: If ``name`` is empty.
            TypeError: If ``target`` cannot be bound.
            DuplicateOptionError: In strict mode, if ``name`` is already registered.
        """
        if not name:
            raise ValueError("Option name is required.")

        option: Option = option_for(target, convert=convert)
        previous: Option | None = self._options.get(name)
        if previous is not None:
            if self.strict:
                raise DuplicateOptionError(name)
            logger.debug("Replacing option %r (%s) with %s", name, previous.type(), option.type())
            del self._options[name]

        self._options[name] = option
        logger.trace("Registered option %r as %s", name, option.type())
        return option

    def bind(
        self,
        owner: object,
        attr: str,
        name: str | None = None,
        *,
        convert: Converter | None = None,
    ) -> Option:
        """Bind attribute ``attr`` of ``owner`` to a flag (named ``attr`` by default).

        Args:
            owner (object): Object holding the attribute.
            attr (str): Attribute name.
            name (str | None): Flag name; defaults to ``attr``.
            convert (Converter | None): Optional converter overriding type inference.

        Returns:
            Option: The newly registered option.
        """
        return self.make(AttrRef(owner, attr), name or attr, convert=convert)

    def unregister(self, name: str) -> bool:
        """Remove the option registered under ``name``.

        Returns:
            bool: True if the entry existed and was removed, else False.
        """
        return self._options.pop(name, None) is not None

    def clear(self) -> None:
        """Remove every registered option."""
        self._options.clear()

    # --- read-only views ---

    def get(self, name: str) -> Option | None:
        """Return the option registered under ``name``, if any."""
        return self._options.get(name)

    def names(self) -> tuple[str, ...]:
        """Return all registered flag names (sorted)."""
        return tuple(sorted(self._options))

    def as_mapping(self) -> Mapping[str, Option]:
        """Return a read-only mapping of flag names to options.

        Notes:
            The returned mapping is a live `MappingProxyType` and must not be mutated.
        """
        return MappingProxyType(self._options)

    def iter_meta(self) -> Iterator[OptionMeta]:
        """Iterate over snapshots of the registered options, sorted by name.

        Yields:
            OptionMeta: Name, current value and type label of each option.
        """
        for name in self.names():
            option: Option = self._options[name]
            yield OptionMeta(name=name, value=option.value(), type=option.type())

    def __len__(self) -> int:
        return len(self._options)

    def __contains__(self, name: object) -> bool:
        return name in self._options

    def __iter__(self) -> Iterator[str]:
        return iter(self.names())

    # --- parsing and reporting ---

    def parse(self, argv: Sequence[str], *, start: int = 1) -> int:
        """Parse flags from ``argv``, updating the bound variables in place.

        Args:
            argv (Sequence[str]): Argument vector; ``argv[0]`` is the program name.
            start (int): Index of the first token to examine.

        Returns:
            int: Index of the first unconsumed token (first positional argument).
        """
        return parse_args(
            self._options,
            argv,
            marker=self.marker,
            start=start,
            strict=self.strict,
        )

    def load_toml(self, path: Path, *, section: str = "") -> int:
        """Overlay option values from a TOML file.

        See [`apply_options_table`][optbind.config.loaders.apply_options_table].

        Args:
            path (Path): TOML document to read.
            section (str): Dotted table holding the values (e.g. ``tool.optbind``);
                empty for the top level.

        Returns:
            int: Number of options updated.
        """
        from optbind.config.loaders import apply_options_table, get_options_table, load_toml_dict

        table: dict[str, Any] = get_options_table(load_toml_dict(path), section)
        return apply_options_table(self, table)

    def render(self, fmt: OutputFormat = OutputFormat.DEFAULT) -> str:
        """Return the diagnostic table as text.

        Args:
            fmt (OutputFormat): Encoding of the table.

        Returns:
            str: The rendered table.
        """
        return render(list(self.iter_meta()), fmt)

    def print(self, out: TextIO | None = None, *, fmt: OutputFormat = OutputFormat.DEFAULT) -> None:
        """Write the diagnostic table to ``out`` (default: standard output).

        Args:
            out (TextIO | None): Destination stream.
            fmt (OutputFormat): Encoding of the table.
        """
        (out or sys.stdout).write(self.render(fmt))

    def __repr__(self) -> str:
        return f"OptionRegistry({', '.join(self.names())})"
