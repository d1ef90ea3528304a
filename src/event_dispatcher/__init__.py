"""Observable objects: listener registration and synchronous event dispatch."""

from .config import DispatcherSettings, build_settings_from_dict, load_settings, settings_from_env
from .dispatcher import EventDispatcher, EventDispatcherCapability, SupportsEvents, is_extensible
from .events import Event
from .exceptions import (
    ConfigurationError,
    DispatcherError,
    ImmutableTargetError,
    ListenerAttributeConflictError,
)
from .table import Listener, ListenerTable

event_dispatcher = EventDispatcherCapability()

__all__ = [
    "ConfigurationError",
    "DispatcherError",
    "DispatcherSettings",
    "Event",
    "EventDispatcher",
    "EventDispatcherCapability",
    "ImmutableTargetError",
    "Listener",
    "ListenerAttributeConflictError",
    "ListenerTable",
    "SupportsEvents",
    "build_settings_from_dict",
    "event_dispatcher",
    "is_extensible",
    "load_settings",
    "settings_from_env",
]
