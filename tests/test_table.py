from __future__ import annotations

from event_dispatcher.table import ListenerTable, same_listener


def handler(event) -> None:
    pass


def other(event) -> None:
    pass


def test_add_creates_type_lazily() -> None:
    table = ListenerTable()
    assert table.listeners("start") is None
    assert table.add("start", handler) is True
    assert table.listeners("start") == [handler]
    assert table.types() == ("start",)


def test_add_reports_duplicates() -> None:
    table = ListenerTable()
    table.add("start", handler)
    assert table.add("start", handler) is False
    assert table.listeners("start") == [handler]


def test_remove_keeps_type_key() -> None:
    table = ListenerTable()
    table.add("start", handler)
    assert table.remove("start", other) is False
    assert table.remove("start", handler) is True
    assert table.listeners("start") == []
    assert "start" in table


def test_contains_requires_listener() -> None:
    table = ListenerTable()
    table.add("start", handler)
    assert table.contains("start", handler)
    assert not table.contains("start", None)
    assert not table.contains("missing", handler)


def test_same_listener_rules() -> None:
    class Driver:
        def go(self, event):
            pass

        def halt(self, event):
            pass

    driver = Driver()
    assert same_listener(handler, handler)
    assert not same_listener(handler, other)
    assert same_listener(driver.go, driver.go)
    assert not same_listener(driver.go, driver.halt)
    assert not same_listener(driver.go, Driver().go)


def test_repr_lists_counts() -> None:
    table = ListenerTable()
    table.add("start", handler)
    table.add("start", other)
    assert repr(table) == "ListenerTable({'start': 2})"


def test_same_listener_matches_builtin_bound_methods() -> None:
    seen: list = []
    other: list = []

    assert seen.append is not seen.append
    assert same_listener(seen.append, seen.append)
    assert not same_listener(seen.append, seen.extend)
    assert not same_listener(seen.append, other.append)
    assert not same_listener(print, len)


def test_builtin_bound_method_stored_once() -> None:
    seen: list = []
    table = ListenerTable()

    assert table.add("start", seen.append) is True
    assert table.add("start", seen.append) is False
    assert table.contains("start", seen.append)
    assert table.remove("start", seen.append) is True
    assert table.listeners("start") == []
