"""Listener registration and synchronous dispatch for arbitrary objects.

The four operations live on :class:`EventDispatcher`. Hosts either inherit
from it or receive the operations through
:meth:`EventDispatcherCapability.apply`, which copies them onto a class (so
every instance gains them) or binds them onto a single object::

    class Car:
        def start(self):
            self.dispatch_event(Event("start", message="Start engines"))

    event_dispatcher.apply(Car)
    car = Car()
    car.add_event_listener("start", print).add_event_listener("stop", print)
    car.start()

Each target lazily owns a :class:`~event_dispatcher.table.ListenerTable`
stored in its ``_listeners`` attribute.
"""

from __future__ import annotations

import logging
from types import MethodType
from typing import Any, ClassVar, Protocol, runtime_checkable

from .config import DEFAULT_SETTINGS, DispatcherSettings
from .events import bind_target, event_type_of
from .exceptions import ImmutableTargetError, ListenerAttributeConflictError
from .logging import get_logger, log_event
from .table import Listener, ListenerTable

LOGGER = get_logger("dispatcher")

LISTENERS_ATTRIBUTE = "_listeners"
SETTINGS_ATTRIBUTE = "dispatch_settings"
OPERATIONS = (
    "add_event_listener",
    "has_event_listener",
    "remove_event_listener",
    "dispatch_event",
)

_PROBE_ATTRIBUTE = "__event_dispatcher_probe__"
# Raised by setattr on objects refusing new attributes; pydantic models raise ValueError.
_REJECTED_SETATTR = (AttributeError, TypeError, ValueError)


def is_extensible(target: object) -> bool:
    """Return ``True`` if ``target`` accepts new attributes.

    ``int``, ``object()``, ``__slots__`` instances and frozen dataclasses are
    not extensible. The check sets and removes a private probe attribute.
    """

    try:
        setattr(target, _PROBE_ATTRIBUTE, None)
    except _REJECTED_SETATTR:
        return False
    delattr(target, _PROBE_ATTRIBUTE)
    return True


def _describe(target: object) -> str:
    if isinstance(target, type):
        return target.__qualname__
    return type(target).__qualname__


def _stored_value(target: object) -> object:
    try:
        return vars(target).get(LISTENERS_ATTRIBUTE)
    except TypeError:
        # No __dict__; a declared slot may still hold the table.
        return getattr(target, LISTENERS_ATTRIBUTE, None)


def _table_of(target: object) -> ListenerTable | None:
    table = _stored_value(target)
    return table if isinstance(table, ListenerTable) else None


def _settings_of(target: object) -> DispatcherSettings:
    settings = getattr(target, SETTINGS_ATTRIBUTE, None)
    return settings if isinstance(settings, DispatcherSettings) else DEFAULT_SETTINGS


@runtime_checkable
class SupportsEvents(Protocol):
    """Objects exposing the event target operations."""

    def add_event_listener(self, type: str, listener: Listener) -> Any: ...

    def has_event_listener(self, type: str, listener: Listener | None = None) -> bool: ...

    def remove_event_listener(self, type: str, listener: Listener) -> Any: ...

    def dispatch_event(self, event: Any) -> Any: ...


class EventDispatcher:
    """Mixin giving its subclasses listener registration and dispatch."""

    __slots__ = ()

    dispatch_settings: ClassVar[DispatcherSettings] = DEFAULT_SETTINGS

    def add_event_listener(self, type: str, listener: Listener):
        """Register ``listener`` for events of ``type``.

        Registering the same listener twice for one type is a no-op. The
        listener table is created on the first call, which raises
        :class:`ImmutableTargetError` if the receiver cannot store it and
        :class:`ListenerAttributeConflictError` if ``_listeners`` already
        holds something else. Returns the receiver for chaining.
        """

        stored = _stored_value(self)
        if isinstance(stored, ListenerTable):
            table = stored
        elif stored is not None:
            raise ListenerAttributeConflictError(self, LISTENERS_ATTRIBUTE)
        else:
            table = ListenerTable()
            try:
                setattr(self, LISTENERS_ATTRIBUTE, table)
            except _REJECTED_SETATTR as exc:
                raise ImmutableTargetError(self) from exc
            LOGGER.debug("listener table created", extra={"target": _describe(self)})
        table.add(type, listener)
        return self

    def has_event_listener(self, type: str, listener: Listener | None = None) -> bool:
        """Return ``True`` if ``listener`` is registered for ``type``."""

        table = _table_of(self)
        if table is None:
            return False
        return table.contains(type, listener)

    def remove_event_listener(self, type: str, listener: Listener):
        """Remove ``listener`` from ``type``.

        Returns ``None`` when the receiver never registered a listener,
        otherwise the receiver, whether or not anything was removed.
        """

        table = _table_of(self)
        if table is None:
            return None
        table.remove(type, listener)
        return self

    def dispatch_event(self, event: Any):
        """Invoke the listeners registered for ``event``'s type.

        ``event`` is an :class:`~event_dispatcher.events.Event` or a mutable
        mapping with a ``"type"`` key. Its ``target`` is set to the receiver
        and every listener is called with the event, in registration order.
        Listener exceptions propagate and stop the dispatch. Returns the
        receiver, or ``None`` when nothing is registered for the type.
        """

        table = _table_of(self)
        if table is None:
            return None
        event_type = event_type_of(event)
        listeners = table.listeners(event_type) if event_type is not None else None
        if listeners is None:
            return None

        bind_target(event, self)
        settings = _settings_of(self)
        if LOGGER.isEnabledFor(logging.DEBUG):
            LOGGER.debug(
                "dispatching event",
                extra={"event_type": event_type, "listeners": len(listeners), "target": _describe(self)},
            )
        if settings.log_dispatch:
            log_event(
                LOGGER,
                "dispatch",
                {"type": event_type, "listeners": len(listeners), "target": _describe(self)},
            )

        if settings.dispatch_mode == "live":
            length = len(listeners)
            for position in range(length):
                if position >= len(listeners):
                    break
                listeners[position](event)
        else:
            for listener in tuple(listeners):
                listener(event)
        return self


class EventDispatcherCapability(EventDispatcher):
    """Installs the :class:`EventDispatcher` operations on other objects.

    The capability is itself an event target.
    """

    def __init__(self, settings: DispatcherSettings | None = None) -> None:
        self.dispatch_settings = settings or DEFAULT_SETTINGS

    @property
    def settings(self) -> DispatcherSettings:
        return self.dispatch_settings

    def apply(self, target: object) -> "EventDispatcherCapability":
        """Grant the event target operations to ``target``.

        Classes receive the plain functions, so all of their instances gain
        the methods; any other object receives methods bound to itself.
        Raises :class:`ImmutableTargetError` if ``target`` does not accept
        new attributes. Returns the capability for chaining.
        """

        if not is_extensible(target):
            raise ImmutableTargetError(target)

        for name in OPERATIONS:
            function = vars(EventDispatcher)[name]
            if isinstance(target, type):
                setattr(target, name, function)
            else:
                setattr(target, name, MethodType(function, target))
        setattr(target, SETTINGS_ATTRIBUTE, self.dispatch_settings)

        LOGGER.debug("event dispatcher applied", extra={"target": _describe(target)})
        return self


__all__ = [
    "EventDispatcher",
    "EventDispatcherCapability",
    "LISTENERS_ATTRIBUTE",
    "OPERATIONS",
    "SupportsEvents",
    "is_extensible",
]
