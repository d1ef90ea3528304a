from __future__ import annotations

from types import SimpleNamespace

from event_dispatcher.events import Event, bind_target, event_type_of


def test_event_keeps_extra_fields() -> None:
    event = Event("start", message="Start engines", speed=3)
    assert event.type == "start"
    assert event.message == "Start engines"
    assert event.to_dict() == {"type": "start", "message": "Start engines", "speed": 3}


def test_event_repr_omits_target() -> None:
    event = Event("start", message="hi")
    bind_target(event, object())
    assert repr(event) == "Event(type='start', message='hi')"


def test_event_type_of_supports_mappings_and_objects() -> None:
    assert event_type_of({"type": "start"}) == "start"
    assert event_type_of(SimpleNamespace(type="stop")) == "stop"
    assert event_type_of(Event("afterStart")) == "afterStart"


def test_event_type_of_missing_or_invalid() -> None:
    assert event_type_of({}) is None
    assert event_type_of({"type": 1}) is None
    assert event_type_of(object()) is None


def test_bind_target_for_mapping_and_object() -> None:
    target = object()
    mapping: dict = {"type": "start"}
    namespace = SimpleNamespace(type="start")

    bind_target(mapping, target)
    bind_target(namespace, target)

    assert mapping["target"] is target
    assert namespace.target is target
