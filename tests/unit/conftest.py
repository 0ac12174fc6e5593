"""Collection hooks for `tests/unit/`: every test here is marked `unit`."""

from pathlib import Path

import pytest

UNIT_DIR = Path(__file__).parent.resolve()


@pytest.hookimpl(tryfirst=True)
def pytest_collection_modifyitems(items: list[pytest.Item]) -> None:
    """Mark unit tests so `-m unit` / `-m "not unit"` select them."""
    for item in items:
        if item.get_closest_marker("unit") is not None:
            continue
        if item.path.resolve().is_relative_to(UNIT_DIR):
            item.add_marker("unit")
