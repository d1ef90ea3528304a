"""Per-target listener storage."""

from __future__ import annotations

from types import BuiltinMethodType, MethodType
from typing import Callable, Dict, Iterator, List, Protocol


class Listener(Protocol):
    """Callable signature for event listeners."""

    def __call__(self, event: object) -> object:  # pragma: no cover - Protocol
        ...


def same_listener(left: Callable[..., object], right: Callable[..., object]) -> bool:
    """Identity comparison for listeners.

    Bound methods are rebuilt on every attribute access, so two of them match
    when they wrap the same function on the same instance. Builtin bound
    methods such as ``list.append`` match on instance and name.
    """

    if left is right:
        return True
    if isinstance(left, MethodType) and isinstance(right, MethodType):
        return left.__self__ is right.__self__ and left.__func__ is right.__func__
    if isinstance(left, BuiltinMethodType) and isinstance(right, BuiltinMethodType):
        return left.__self__ is right.__self__ and left.__name__ == right.__name__
    return False


class ListenerTable:
    """Mapping of event type to the ordered listeners registered for it."""

    __slots__ = ("_listeners",)

    def __init__(self) -> None:
        self._listeners: Dict[str, List[Listener]] = {}

    def index(self, type: str, listener: Listener | None) -> int:
        """Position of ``listener`` under ``type`` or ``-1``."""

        for position, registered in enumerate(self._listeners.get(type, ())):
            if same_listener(registered, listener):
                return position
        return -1

    def add(self, type: str, listener: Listener) -> bool:
        """Register ``listener`` for ``type``; returns ``False`` if already present."""

        listeners = self._listeners.setdefault(type, [])
        if self.index(type, listener) != -1:
            return False
        listeners.append(listener)
        return True

    def contains(self, type: str, listener: Listener | None) -> bool:
        if listener is None:
            return False
        return self.index(type, listener) != -1

    def remove(self, type: str, listener: Listener) -> bool:
        """Drop ``listener`` from ``type``; the type key itself is kept."""

        position = self.index(type, listener)
        if position == -1:
            return False
        del self._listeners[type][position]
        return True

    def listeners(self, type: str) -> List[Listener] | None:
        """Return the live list for ``type`` or ``None`` if never registered."""

        return self._listeners.get(type)

    def types(self) -> tuple[str, ...]:
        return tuple(self._listeners)

    def __contains__(self, type: object) -> bool:
        return type in self._listeners

    def __iter__(self) -> Iterator[str]:
        return iter(self._listeners)

    def __len__(self) -> int:  # pragma: no cover - trivial
        return len(self._listeners)

    def __repr__(self) -> str:
        counts = ", ".join(f"{key!r}: {len(value)}" for key, value in self._listeners.items())
        return f"ListenerTable({{{counts}}})"


__all__ = ["Listener", "ListenerTable", "same_listener"]
