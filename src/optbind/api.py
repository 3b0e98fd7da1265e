# topmark:header:start
#
#   project      : OptBind
#   file         : api.py
#   file_relpath : src/optbind/api.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Process-wide convenience API.

Small programs often want a single, global options table configured at startup. This
module keeps one lazily-created [`OptionRegistry`][optbind.registry.OptionRegistry]
and exposes module-level `make` / `bind` / `parse` / `print_options` functions that
operate on it.

Typical usage:
    ```python
    import sys

    import optbind
    from optbind import Ref

    verbose = Ref(False)
    optbind.make(verbose, "v")
    first_positional = optbind.parse(sys.argv)
    ```

Warning:
    The default registry is global state shared across the process. Tests should
    either build their own `OptionRegistry` or call `reset_default_registry()`.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, TextIO

from optbind.registry import OptionRegistry
from optbind.report import OutputFormat

if TYPE_CHECKING:
    from collections.abc import Sequence

    from optbind.options.base import Option
    from optbind.options.refs import Target
    from optbind.options.sinks import OutputFile
    from optbind.options.variants import Converter

_default_registry: OptionRegistry | None = None


def default_registry() -> OptionRegistry:
    """Return the process-wide registry, creating it on first use."""
    global _default_registry
    if _default_registry is None:
        _default_registry = OptionRegistry()
    return _default_registry


def reset_default_registry() -> None:
    """Discard the process-wide registry; the next call creates a fresh one."""
    global _default_registry
    _default_registry = None


def make(target: Target | OutputFile, name: str, *, convert: Converter | None = None) -> Option:
    """Bind ``target`` to flag ``name`` in the default registry.

    See [`OptionRegistry.make`][optbind.registry.OptionRegistry.make].
    """
    return default_registry().make(target, name, convert=convert)


def bind(
    owner: object,
    attr: str,
    name: str | None = None,
    *,
    convert: Converter | None = None,
) -> Option:
    """Bind attribute ``attr`` of ``owner`` in the default registry.

    See [`OptionRegistry.bind`][optbind.registry.OptionRegistry.bind].
    """
    return default_registry().bind(owner, attr, name, convert=convert)


def parse(argv: Sequence[str], *, start: int = 1) -> int:
    """Parse ``argv`` against the default registry.

    Returns:
        int: Index of the first unconsumed token.
    """
    return default_registry().parse(argv, start=start)


def print_options(out: TextIO | None = None, *, fmt: OutputFormat = OutputFormat.DEFAULT) -> None:
    """Write the default registry's diagnostic table to ``out`` (default: stdout)."""
    default_registry().print(out, fmt=fmt)
