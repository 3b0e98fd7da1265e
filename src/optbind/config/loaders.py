# topmark:header:start
#
#   project      : OptBind
#   file         : loaders.py
#   file_relpath : src/optbind/config/loaders.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Load option values from TOML configuration sources.

A TOML table is an alternative source for the same values a command line provides:

```toml
[tool.optbind]
t = "hello"
p = 2.5
y = true
n = [1, 2, 3]
```

Each key is applied exactly as if ``-key value`` had been parsed, so a configuration
file and the command line go through the same option logic (and the command line,
parsed afterwards, wins).

Parsing is done with `tomlkit` and returned as plain `dict` structures.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, cast

import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError

from optbind.config.logging import get_logger
from optbind.errors import OptionValueError
from optbind.options.variants import BoolOption

if TYPE_CHECKING:
    from pathlib import Path

    from optbind.config.logging import OptbindLogger
    from optbind.options.base import Option
    from optbind.registry import OptionRegistry

logger: OptbindLogger = get_logger(__name__)

#: Section used when options live in ``pyproject.toml``.
PYPROJECT_SECTION: str = "tool.optbind"


def load_toml_dict(path: Path) -> dict[str, Any]:
    """Load and parse a TOML file from the filesystem.

    Args:
        path (Path): Path to a TOML document.

    Returns:
        dict[str, Any]: The parsed TOML content.

    Notes:
        - Errors are logged and an empty dict is returned on failure.
        - Encoding is assumed to be UTF-8.
    """
    try:
        text: str = path.read_text(encoding="utf-8")
        doc: tomlkit.TOMLDocument = tomlkit.parse(text)
        data_any: Any = doc.unwrap()
        return cast("dict[str, Any]", data_any) if isinstance(data_any, dict) else {}
    except OSError as e:
        logger.error("Error loading TOML from %s: %s", path, e)
        return {}
    except TomlkitParseError as e:
        logger.error("Error decoding TOML from %s: %s", path, e)
        return {}


def get_options_table(doc: dict[str, Any], section: str = "") -> dict[str, Any]:
    """Return the table at dotted path ``section`` (the document itself when empty).

    Args:
        doc (dict[str, Any]): Parsed TOML document.
        section (str): Dotted table path such as ``tool.optbind``.

    Returns:
        dict[str, Any]: The selected table, or an empty dict if it is missing or not a table.
    """
    table: Any = doc
    for part in (p for p in section.split(".") if p):
        if not isinstance(table, dict):
            return {}
        table = cast("dict[str, Any]", table).get(part)
    if not isinstance(table, dict):
        logger.debug("No TOML table at %r", section)
        return {}
    return cast("dict[str, Any]", table)


def value_to_token(value: Any) -> str | None:
    """Turn a TOML value into the command-line token it stands for.

    Args:
        value (Any): A TOML scalar or array.

    Returns:
        str | None: The token, or None for values that have no token form (tables).
    """
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (list, tuple)):
        items: list[str] = []
        for v in cast("list[object]", value):
            token = value_to_token(v)
            if token is None:
                return None
            items.append(token)
        return " ".join(items)
    if isinstance(value, dict):
        return None
    return str(value)


def apply_options_table(registry: OptionRegistry, table: dict[str, Any]) -> int:
    """Apply ``table`` values to the options registered in ``registry``.

    Behavior:
        - Unknown keys -> warning, skipped.
        - Boolean flags -> ``true`` sets the flag (probe); anything else is skipped with
          a warning (a flag cannot be unset).
        - Nested tables -> warning, skipped.
        - Other values -> passed to the option as one token.
        - Unparseable values -> warning, option unchanged (raised in strict mode).

    Args:
        registry (OptionRegistry): Registry holding the target options.
        table (dict[str, Any]): Key/value pairs (keys are flag names).

    Returns:
        int: Number of options updated.
    """
    applied: int = 0
    for key, value in table.items():
        option: Option | None = registry.get(key)
        if option is None:
            logger.warning("Ignoring unknown option %r in configuration", key)
            continue

        if isinstance(option, BoolOption):
            if value is True:
                option.probe()
                applied += 1
            else:
                logger.warning("Ignoring %r = %r: flags can only be set to true", key, value)
            continue

        token: str | None = value_to_token(value)
        if token is None:
            logger.warning("Ignoring %r: tables are not option values", key)
            continue

        try:
            option.parse(token)
        except OptionValueError as exc:
            exc.name = key
            if registry.strict:
                raise
            logger.warning("%s (from configuration)", exc)
            continue
        applied += 1

    logger.debug("Applied %d option value(s) from configuration", applied)
    return applied
