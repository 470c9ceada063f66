"""Pytest fixtures shared across the ingestion and API tests."""

from __future__ import annotations

from collections.abc import Sequence

import pytest


@pytest.fixture(autouse=True)
def fresh_session():
    """Start and finish every test with an empty published session."""

    from services.session_store import reset_session

    reset_session()
    yield
    reset_session()


@pytest.fixture
def client():
    """Return a FastAPI test client bound to the app."""

    from fastapi.testclient import TestClient

    from main import app

    with TestClient(app) as test_client:
        yield test_client


def pytest_collection_modifyitems(items: Sequence[pytest.Item]) -> None:
    """Enforce that every test has exactly one speed marker.

    - `unit`: pure functions, no app and no IO.
    - `integration`: tests going through the FastAPI app.
    """

    invalid: list[str] = []
    for item in items:
        has_unit = item.get_closest_marker("unit") is not None
        has_integration = item.get_closest_marker("integration") is not None
        if has_unit == has_integration:
            invalid.append(item.nodeid)

    if invalid:
        joined = "\n".join(f"- {nodeid}" for nodeid in invalid)
        raise pytest.UsageError(
            "Each test must have exactly one speed marker: `@pytest.mark.unit` or "
            "`@pytest.mark.integration`.\n"
            f"Offending tests:\n{joined}"
        )
