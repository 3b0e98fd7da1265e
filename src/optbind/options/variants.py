# topmark:header:start
#
#   project      : OptBind
#   file         : variants.py
#   file_relpath : src/optbind/options/variants.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Concrete option variants.

| variant           | bound to        | probe()            | parse(text)                          |
|-------------------|-----------------|--------------------|--------------------------------------|
| `ScalarOption`    | any scalar      | True               | ``convert(text)``                    |
| `BoolOption`      | `bool`          | sets True -> False | no-op                                |
| `TextOption`      | `str`           | True               | verbatim assignment                  |
| `FileOption`      | `OutputFile`    | True               | opens the sink at ``text``           |
| `SequenceOption`  | `list`          | True               | whitespace-split, converted items    |
| `ArrayOption`     | `tuple` (len N) | True               | exactly N whitespace-split items     |

A conversion failure always leaves the bound variable unchanged and raises
[`OptionValueError`][optbind.errors.OptionValueError]; whether that surfaces to the
caller is decided by the parser.
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, Any, Callable, Final

from optbind.config.logging import get_logger
from optbind.errors import OptionValueError
from optbind.options.base import Option

if TYPE_CHECKING:
    from optbind.config.logging import OptbindLogger
    from optbind.options.refs import Target
    from optbind.options.sinks import OutputFile

Converter = Callable[[str], Any]

logger: OptbindLogger = get_logger(__name__)

# Exceptions a converter may raise on malformed text.
CONVERSION_ERRORS: Final[tuple[type[Exception], ...]] = (
    ValueError,
    TypeError,
    KeyError,
    ArithmeticError,
)

_TRUE_WORDS: Final[frozenset[str]] = frozenset({"1", "true", "yes", "on"})
_FALSE_WORDS: Final[frozenset[str]] = frozenset({"0", "false", "no", "off"})


def text_to_bool(text: str) -> bool:
    """Convert a boolean word (``true``/``false``, ``1``/``0``, ``yes``/``no``, ``on``/``off``).

    Args:
        text (str): The word to convert (case-insensitive).

    Returns:
        bool: The converted value.

    Raises:
        ValueError: If ``text`` is not a recognized boolean word.
    """
    word = text.strip().lower()
    if word in _TRUE_WORDS:
        return True
    if word in _FALSE_WORDS:
        return False
    raise ValueError(f"not a boolean: {text!r}")


def converter_for(tp: type) -> Converter:
    """Return the text converter used for values of type ``tp``.

    Enum members are looked up by name first, then by value. Booleans accept the
    words understood by [`text_to_bool`][optbind.options.variants.text_to_bool].
    Every other type is called with the text.

    Args:
        tp (type): The value type.

    Returns:
        Converter: A callable turning one token into a value of ``tp``.
    """
    if tp is bool:
        return text_to_bool
    if issubclass(tp, Enum):
        enum_cls: type[Enum] = tp

        def _to_enum(text: str) -> Enum:
            try:
                return enum_cls[text]
            except KeyError:
                pass
            # Values of any type, compared by their text form
            for member in enum_cls:
                if str(member.value) == text:
                    return member
            raise ValueError(f"{text!r} is not a valid {enum_cls.__name__}")

        return _to_enum
    return tp


def format_value(value: Any) -> str:
    """Render one value as text (booleans as ``true``/``false``, enums by name)."""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, Enum):
        return value.name
    return str(value)


def _convert(convert: Converter, text: str) -> Any:
    try:
        return convert(text)
    except CONVERSION_ERRORS as exc:
        raise OptionValueError(text, str(exc) or type(exc).__name__) from exc


def _label(convert: Converter) -> str:
    return getattr(convert, "__name__", type(convert).__name__)


class ScalarOption(Option):
    """Option bound to a scalar converted from text (numbers, paths, enums, ...).

    Args:
        target (Target): The bound variable.
        convert (Converter): Turns one token into the new value.
        label (str | None): Type label; defaults to the converter's name.
    """

    __slots__ = ("_target", "_convert", "_label")

    def __init__(self, target: Target, convert: Converter, *, label: str | None = None) -> None:
        self._target = target
        self._convert = convert
        self._label = label or _label(convert)

    @property
    def target(self) -> Target:
        """Return the bound variable."""
        return self._target

    def probe(self) -> bool:
        """Scalars always need a value token."""
        return True

    def parse(self, text: str) -> None:
        """Convert ``text`` and assign it; leave the variable unchanged on failure."""
        self._target.set(_convert(self._convert, text))

    def type(self) -> str:
        """Return the scalar type label."""
        return self._label

    def value(self) -> str:
        """Return the current value as text."""
        return format_value(self._target.get())


class BoolOption(Option):
    """Self-contained flag: seeing it sets the bound boolean to True."""

    __slots__ = ("_target",)

    def __init__(self, target: Target) -> None:
        self._target = target

    @property
    def target(self) -> Target:
        """Return the bound variable."""
        return self._target

    def probe(self) -> bool:
        """Set the flag and report that no value token is needed."""
        self._target.set(True)
        return False

    def parse(self, text: str) -> None:
        """Do nothing: boolean flags never take a value token."""

    def type(self) -> str:
        """Return ``bool``."""
        return "bool"

    def value(self) -> str:
        """Return ``true`` or ``false``."""
        return "true" if self._target.get() else "false"


class TextOption(Option):
    """Option bound to a string, assigned verbatim."""

    __slots__ = ("_target",)

    def __init__(self, target: Target) -> None:
        self._target = target

    @property
    def target(self) -> Target:
        """Return the bound variable."""
        return self._target

    def probe(self) -> bool:
        """Text options always need a value token."""
        return True

    def parse(self, text: str) -> None:
        """Assign ``text`` unchanged."""
        self._target.set(text)

    def type(self) -> str:
        """Return ``str``."""
        return "str"

    def value(self) -> str:
        """Return the current string."""
        return str(self._target.get())


class FileOption(Option):
    """Option bound to an [`OutputFile`][optbind.options.sinks.OutputFile] sink.

    The value token is a path; parsing opens the sink there. The sink's path and
    contents are never exposed as the option value.
    """

    __slots__ = ("_sink",)

    #: Fixed value reported for file sinks.
    SENTINEL: Final[str] = "file"

    def __init__(self, sink: OutputFile) -> None:
        self._sink = sink

    @property
    def target(self) -> OutputFile:
        """Return the bound sink."""
        return self._sink

    def probe(self) -> bool:
        """File options always need a path token."""
        return True

    def parse(self, text: str) -> None:
        """Open the sink at path ``text``.

        Raises:
            OptionValueError: If the file cannot be opened. The sink is left closed
                with its ``failed`` flag set.
        """
        if not self._sink.open(text):
            raise OptionValueError(text, str(self._sink.error))

    def type(self) -> str:
        """Return the sink type name."""
        return type(self._sink).__name__

    def value(self) -> str:
        """Return the fixed ``file`` sentinel."""
        return self.SENTINEL


class SequenceOption(Option):
    """Option bound to a list, filled from one whitespace-separated token.

    Items are converted left to right until the first one that fails; the converted
    prefix replaces the list contents (in place when the bound value is a list). A
    non-blank token of which no item converts raises and leaves the list unchanged. A
    blank token empties the list.
    """

    __slots__ = ("_target", "_convert", "_item_label")

    def __init__(self, target: Target, convert: Converter, *, item_label: str | None = None) -> None:
        self._target = target
        self._convert = convert
        self._item_label = item_label or _label(convert)

    @property
    def target(self) -> Target:
        """Return the bound variable."""
        return self._target

    def probe(self) -> bool:
        """Sequences always need a value token."""
        return True

    def parse(self, text: str) -> None:
        """Replace the list with the items converted from ``text``."""
        tokens: list[str] = text.split()
        items: list[Any] = []
        for token in tokens:
            try:
                items.append(self._convert(token))
            except CONVERSION_ERRORS as exc:
                if not items:
                    raise OptionValueError(text, str(exc) or type(exc).__name__) from exc
                logger.warning(
                    "Stopped converting %r at item %r; ignoring %d trailing item(s)",
                    text,
                    token,
                    len(tokens) - len(items),
                )
                break

        current: Any = self._target.get()
        if isinstance(current, list):
            current[:] = items
        else:
            self._target.set(items)

    def type(self) -> str:
        """Return ``list[<item type>]``."""
        return f"list[{self._item_label}]"

    def value(self) -> str:
        """Return the items joined by single spaces."""
        return " ".join(format_value(v) for v in self._target.get())


class ArrayOption(Option):
    """Option bound to a fixed-length tuple.

    The token must contain at least as many whitespace-separated items as the tuple
    has elements; each is converted with the converter of the matching position and
    any extra items are ignored. On any failure the tuple is left unchanged.
    """

    __slots__ = ("_target", "_converters", "_labels")

    def __init__(
        self,
        target: Target,
        converters: tuple[Converter, ...],
        *,
        labels: tuple[str, ...] | None = None,
    ) -> None:
        self._target = target
        self._converters = converters
        self._labels = labels or tuple(_label(c) for c in converters)

    @property
    def target(self) -> Target:
        """Return the bound variable."""
        return self._target

    def probe(self) -> bool:
        """Arrays always need a value token."""
        return True

    def parse(self, text: str) -> None:
        """Replace the tuple with exactly N items converted from ``text``."""
        tokens: list[str] = text.split()
        size: int = len(self._converters)
        if len(tokens) < size:
            raise OptionValueError(text, f"expected {size} item(s), got {len(tokens)}")
        if len(tokens) > size:
            logger.trace("Ignoring %d extra item(s) in %r", len(tokens) - size, text)
        items = tuple(_convert(c, t) for c, t in zip(self._converters, tokens))
        self._target.set(items)

    def type(self) -> str:
        """Return ``tuple[<types>]``."""
        inner: str = ", ".join(self._labels)
        return f"tuple[{inner or '()'}]"

    def value(self) -> str:
        """Return the items joined by single spaces."""
        return " ".join(format_value(v) for v in self._target.get())
