"""Event values passed to listeners."""

from __future__ import annotations

from collections.abc import Mapping, MutableMapping
from typing import Any, Dict


class Event:
    """A transient event carrying a ``type`` and arbitrary extra fields.

    >>> event = Event("start", message="Start engines")
    >>> event.type, event.message
    ('start', 'Start engines')

    ``target`` is filled in by the dispatching object.
    """

    def __init__(self, type: str, **fields: Any) -> None:
        self.type = type
        for key, value in fields.items():
            setattr(self, key, value)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize the event fields to a plain mapping."""

        return dict(vars(self))

    def __repr__(self) -> str:
        fields = ", ".join(f"{key}={value!r}" for key, value in vars(self).items() if key != "target")
        return f"Event({fields})"


def event_type_of(event: object) -> str | None:
    """Return the event type of ``event`` or ``None`` when it has none.

    Mappings are read through their ``"type"`` key, anything else through a
    ``type`` attribute. Non-string types are treated as missing.
    """

    if isinstance(event, Mapping):
        value = event.get("type")
    else:
        value = getattr(event, "type", None)
    return value if isinstance(value, str) else None


def bind_target(event: object, target: object) -> None:
    """Point ``event.target`` (or ``event["target"]``) at ``target``."""

    if isinstance(event, MutableMapping):
        event["target"] = target
    else:
        setattr(event, "target", target)


__all__ = ["Event", "bind_target", "event_type_of"]
