# topmark:header:start
#
#   project      : OptBind
#   file         : refs.py
#   file_relpath : src/optbind/options/refs.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Bindable targets: caller-owned places an option can read and write.

An option never copies the variable it is bound to. It holds one of these targets and
reads/writes through it, so changes made by the caller after registration are visible
to the option (and vice versa).

Typical usage:
    ```python
    threads = Ref(4)
    registry.make(threads, "t")

    settings = SimpleNamespace(verbose=False)
    registry.make(AttrRef(settings, "verbose"), "v")
    ```

Note:
    Targets reference, they do not own. A target is invalid once the object it points
    into has been discarded by the caller.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Generic, Protocol, TypeVar, runtime_checkable

if TYPE_CHECKING:
    from collections.abc import Hashable, MutableMapping

T = TypeVar("T")


@runtime_checkable
class Target(Protocol):
    """Minimal read/write interface shared by all bindable targets."""

    def get(self) -> Any:
        """Return the current value."""
        ...

    def set(self, value: Any) -> None:
        """Replace the current value."""
        ...


class Ref(Generic[T]):
    """A mutable cell owned by the caller.

    Attributes:
        value (T): The current value.
    """

    __slots__ = ("value",)

    def __init__(self, value: T) -> None:
        self.value = value

    def get(self) -> T:
        """Return the current value."""
        return self.value

    def set(self, value: T) -> None:
        """Replace the current value."""
        self.value = value

    def __repr__(self) -> str:
        return f"Ref({self.value!r})"


class AttrRef:
    """An attribute of a caller-owned object (dataclass, namespace, module, ...)."""

    __slots__ = ("owner", "attr")

    def __init__(self, owner: object, attr: str) -> None:
        if not hasattr(owner, attr):
            raise AttributeError(f"{type(owner).__name__!r} object has no attribute {attr!r}")
        self.owner = owner
        self.attr = attr

    def get(self) -> Any:
        """Return the current attribute value."""
        return getattr(self.owner, self.attr)

    def set(self, value: Any) -> None:
        """Assign the attribute."""
        setattr(self.owner, self.attr, value)

    def __repr__(self) -> str:
        return f"AttrRef({type(self.owner).__name__}.{self.attr})"


class ItemRef:
    """A key of a caller-owned mutable mapping."""

    __slots__ = ("mapping", "key")

    def __init__(self, mapping: MutableMapping[Any, Any], key: Hashable) -> None:
        if key not in mapping:
            raise KeyError(key)
        self.mapping = mapping
        self.key = key

    def get(self) -> Any:
        """Return the current item value."""
        return self.mapping[self.key]

    def set(self, value: Any) -> None:
        """Assign the item."""
        self.mapping[self.key] = value

    def __repr__(self) -> str:
        return f"ItemRef[{self.key!r}]"
