"""Pytest configuration and fixtures for gantt-mcp tests."""

import pytest

from gantt_mcp import config
from gantt_mcp.core.store import TaskStore
from gantt_mcp.models.reference import Holiday, ReferenceData, User
from gantt_mcp.models.task import Task
from gantt_mcp.server import set_store


@pytest.fixture
def task_factory():
    """Build Task models from short positional arguments."""

    def make(task_id, start, due, parent=None, est=1, **fields):
        return Task(
            id=task_id,
            subject=fields.pop("subject", f"Task {task_id}"),
            start_date=start,
            due_date=due,
            parent_id=parent,
            estimated_hours=est,
            **fields,
        )

    return make


@pytest.fixture
def holidays():
    """New Year 2025 falls on a Wednesday."""
    return [Holiday(id="h1", date="2025-01-01", name="New Year")]


@pytest.fixture
def users():
    return [
        User(id="u1", name="Alice"),
        User(id="u2", name="Bob"),
    ]


@pytest.fixture
def tree_store(task_factory, users):
    """
    A container A with two leaves.

    B: Sat 2025-02-01 .. Wed 2025-02-05
    C: Mon 2025-02-03 .. Mon 2025-02-10
    A starts out with a stale range that loading rolls up.
    """
    tasks = [
        task_factory("A", "2025-01-01", "2025-01-01", assignee_id="u1"),
        task_factory("B", "2025-02-01", "2025-02-05", parent="A", est=3, assignee_id="u1"),
        task_factory("C", "2025-02-03", "2025-02-10", parent="A", est=6, assignee_id="u2"),
    ]
    return TaskStore(tasks, ReferenceData(users=users))


@pytest.fixture
def session(tree_store, monkeypatch):
    """Point the MCP tools at an in-memory store with nothing persisted."""
    monkeypatch.setattr(config, "DATA_FILE", "")
    set_store(tree_store)
    yield tree_store
    set_store(None)
