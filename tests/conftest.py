# tests/conftest.py

from __future__ import annotations

import uuid
from collections.abc import Iterator

import pytest
from fastapi.testclient import TestClient

from todo.dependencies import get_task_service
from todo.main import app
from todo.models.task import Task, TaskId, TaskStatus

from .fakes import FakeTaskService


@pytest.fixture()
def existing_task() -> Task:
    return Task(
        id=TaskId(uuid.UUID("3f2b9c1e-8d4a-4e5f-9a7b-1c2d3e4f5a6b")),
        details="water the plants",
        status=TaskStatus.ACTIVE,
    )


@pytest.fixture()
def service(existing_task: Task) -> FakeTaskService:
    """Fake collaborator seeded with a single active task."""
    return FakeTaskService([existing_task])


@pytest.fixture()
def client(service: FakeTaskService) -> Iterator[TestClient]:
    """
    TestClient over the real app with the task service swapped for the fake.

    NOTE: raise_server_exceptions stays on so unexpected errors fail the test
    instead of turning into a 500 response.
    """
    app.dependency_overrides[get_task_service] = lambda: service
    try:
        with TestClient(app) as test_client:
            yield test_client
    finally:
        app.dependency_overrides.clear()
