from __future__ import annotations

import sys
from pathlib import Path

import pytest


# Ensure src/ is importable for all tests (CI and local)
ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
for p in (ROOT, SRC):
    if str(p) not in sys.path:
        sys.path.insert(0, str(p))


def pytest_collection_modifyitems(config, items):
    """Default all tests to 'unit' unless explicitly marked otherwise."""
    for item in items:
        marks = {m.name for m in item.iter_markers()}
        if not ("scenario" in marks or "unit" in marks):
            item.add_marker(pytest.mark.unit)


class Car:
    """Plain host object used across the suite."""

    def __init__(self, name: str = "car") -> None:
        self.name = name


@pytest.fixture()
def car_class():
    # A fresh class per test so applied operations never leak between tests.
    return type("Car", (Car,), {})


@pytest.fixture()
def recorder():
    calls: list = []

    def record(event):
        calls.append(event)

    record.calls = calls
    return record
