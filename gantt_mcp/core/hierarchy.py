"""Parent/child traversal and the reparent cycle guard."""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from typing import TYPE_CHECKING

from gantt_mcp.errors import InvalidOperation, MalformedTree, NotFound

if TYPE_CHECKING:
    from gantt_mcp.models.task import Task


def build_children_index(tasks: Mapping[str, Task]) -> dict[str, list[str]]:
    """Map each parent id to its direct children's ids, in collection order."""
    children: dict[str, list[str]] = {}
    for task in tasks.values():
        if task.parent_id is not None:
            children.setdefault(task.parent_id, []).append(task.id)
    return children


def iter_ancestors(tasks: Mapping[str, Task], task_id: str) -> Iterator[str]:
    """
    Yield the ids above ``task_id``, nearest parent first.

    The walk ends at a root or at a parent id missing from the collection.
    It never takes more than ``len(tasks)`` steps on a well-formed forest.

    Raises:
        MalformedTree: if the bound is exceeded (the parent chain loops)
    """
    task = tasks.get(task_id)
    steps = 0
    while task is not None and task.parent_id is not None:
        steps += 1
        if steps > len(tasks):
            raise MalformedTree(f"Parent chain of '{task_id}' does not reach a root")
        yield task.parent_id
        task = tasks.get(task.parent_id)


def is_ancestor(tasks: Mapping[str, Task], ancestor_id: str, task_id: str) -> bool:
    """True if ``ancestor_id`` is a strict ancestor of ``task_id``."""
    return any(pid == ancestor_id for pid in iter_ancestors(tasks, task_id))


def depth_of(tasks: Mapping[str, Task], task_id: str) -> int:
    """Number of ancestors above the task (0 for a root)."""
    return sum(1 for _ in iter_ancestors(tasks, task_id))


def descendant_ids(children: Mapping[str, list[str]], task_id: str) -> list[str]:
    """All ids below ``task_id``, depth-first."""
    result: list[str] = []
    seen = {task_id}
    stack = list(reversed(children.get(task_id, [])))
    while stack:
        current = stack.pop()
        if current in seen:
            raise MalformedTree(f"Task '{current}' appears twice below '{task_id}'")
        seen.add(current)
        result.append(current)
        stack.extend(reversed(children.get(current, [])))
    return result


def check_reparent(tasks: Mapping[str, Task], task_id: str, new_parent_id: str | None) -> None:
    """
    Validate moving ``task_id`` under ``new_parent_id``.

    ``None`` (make the task a root) is always allowed.

    Raises:
        NotFound: if either id is unknown
        InvalidOperation: if the new parent is the task or one of its descendants
    """
    if task_id not in tasks:
        raise NotFound(task_id)
    if new_parent_id is None:
        return
    if new_parent_id not in tasks:
        raise NotFound(new_parent_id, "Parent task")
    if new_parent_id == task_id:
        raise InvalidOperation(f"Task '{task_id}' cannot be its own parent")
    if is_ancestor(tasks, task_id, new_parent_id):
        raise InvalidOperation(
            f"Cannot move '{task_id}' under '{new_parent_id}': '{new_parent_id}' is one of its descendants"
        )


def parent_candidates(tasks: Mapping[str, Task], task_id: str) -> list[Task]:
    """Tasks that ``task_id`` may legally be moved under."""
    if task_id not in tasks:
        raise NotFound(task_id)
    return [t for t in tasks.values() if t.id != task_id and not is_ancestor(tasks, task_id, t.id)]


def find_cycle(tasks: Mapping[str, Task]) -> str | None:
    """Return the id of some task whose parent chain loops, or None."""
    for task_id in tasks:
        try:
            for _ in iter_ancestors(tasks, task_id):
                pass
        except MalformedTree:
            return task_id
    return None
