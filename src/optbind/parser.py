# topmark:header:start
#
#   project      : OptBind
#   file         : parser.py
#   file_relpath : src/optbind/parser.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Single-pass command-line parser.

The parser walks an ``argv``-like list from left to right and drives the options it
finds in a name -> option mapping:

1. Start at ``start`` (index 1 skips the program name).
2. While the current token starts with the marker, strip one marker and look the
   remainder up. Known options are probed; when the probe asks for a value and a
   following token exists, that token is passed to the option and both tokens are
   consumed. Unknown names are skipped.
3. Stop at the first token that does not start with the marker.

The index of the first unconsumed token is returned so the caller can continue with
positional arguments.

Design:
- Lenient mode (default): anomalies are logged and never raised.
- Strict mode: unknown names, missing values and unparseable values raise
  [`OptbindError`][optbind.errors.OptbindError] subclasses.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Final

from optbind.config.logging import get_logger
from optbind.errors import MissingValueError, OptionValueError, UnknownOptionError

if TYPE_CHECKING:
    from collections.abc import Mapping, Sequence

    from optbind.config.logging import OptbindLogger
    from optbind.options.base import Option

DEFAULT_MARKER: Final[str] = "-"

logger: OptbindLogger = get_logger(__name__)


def parse_args(
    options: Mapping[str, Option],
    argv: Sequence[str],
    *,
    marker: str = DEFAULT_MARKER,
    start: int = 1,
    strict: bool = False,
) -> int:
    """Parse flags from ``argv`` and update the bound variables.

    Args:
        options (Mapping[str, Option]): Registered options keyed by flag name.
        argv (Sequence[str]): Argument vector; ``argv[0]`` is normally the program name.
        marker (str): Prefix identifying a flag token.
        start (int): Index of the first token to examine.
        strict (bool): Raise on anomalies instead of logging them.

    Returns:
        int: Index of the first token not consumed as a flag or flag value.

    Raises:
        UnknownOptionError: In strict mode, for a flag naming no registered option.
        MissingValueError: In strict mode, when a flag needing a value is last.
        OptionValueError: In strict mode, when a value cannot be applied.
        ValueError: If ``marker`` is empty.
    """
    if not marker:
        raise ValueError("The flag marker must not be empty.")

    argc: int = len(argv)
    i: int = max(start, 0)
    while i < argc:
        token: str = argv[i]
        if not token.startswith(marker):
            logger.trace("Stopping at positional argument %r (index %d)", token, i)
            break

        name: str = token[len(marker) :]
        option: Option | None = options.get(name)
        if option is None:
            if strict:
                raise UnknownOptionError(name)
            logger.trace("Ignoring unknown option %r", token)
            i += 1
            continue

        if option.probe():
            if i + 1 < argc:
                i += 1
                _apply(name, option, argv[i], strict=strict)
            elif strict:
                raise MissingValueError(name)
            else:
                logger.debug("Option %r expects a value but none is left; unchanged", name)
        else:
            logger.trace("Set option %r", name)
        i += 1

    return i


def _apply(name: str, option: Option, text: str, *, strict: bool) -> None:
    """Pass one value token to ``option``, applying the error policy."""
    try:
        option.parse(text)
    except OptionValueError as exc:
        exc.name = name
        if strict:
            raise
        logger.warning("%s; keeping %s", exc, option.value())
        return
    logger.trace("Set option %r to %r", name, text)
