"""Exceptions raised by the scheduling core."""


class GanttError(Exception):
    """Base class for every error the scheduling core raises."""


class NotFound(GanttError):
    """An operation referenced a task id that is not in the collection."""

    def __init__(self, task_id: str, what: str = "Task"):
        self.task_id = task_id
        super().__init__(f"{what} '{task_id}' not found")


class InvalidOperation(GanttError):
    """The edit was rejected before anything was mutated.

    Raised for reparent cycles, date edits on container tasks and edits that
    would leave a task with less than one working day.
    """


class MalformedTree(GanttError):
    """The parent graph is corrupt (a cycle or a rollup that never settles).

    This is a programming error signal; the sanctioned store API never
    produces it.
    """
