"""Global pytest fixtures and hooks for VOXELS."""

from pathlib import Path

import pytest

pytest_plugins = [
    "tests.fixtures.registry",
    "tests.fixtures.dbus_daemon",
]

TESTS_ROOT = Path(__file__).parent.resolve()

# tests/<dir>/ -> mark applied to every test collected below it
DIRECTORY_MARKS = {
    "unit": "unit",
    "contract": "contract",
    "integration": "integration",
    "e2e": "e2e",
}


@pytest.hookimpl(tryfirst=True)
def pytest_collection_modifyitems(items: list[pytest.Item]) -> None:
    """Mark tests by the top-level directory they live in."""
    for item in items:
        try:
            top = item.path.resolve().relative_to(TESTS_ROOT).parts[0]
        except ValueError:
            continue
        if (name := DIRECTORY_MARKS.get(top)) is None:
            continue
        if not any(marker.name == name for marker in item.iter_markers()):
            item.add_marker(getattr(pytest.mark, name))
