"""The task store: the only sanctioned way to change the task collection.

Every mutation is validated up front, applied to a copy of the collection,
rolled up, and only then committed. An exception at any point leaves the
store exactly as it was.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from datetime import date
from typing import Any

from pydantic import ValidationError

from gantt_mcp import config
from gantt_mcp.core.calendar import (
    add_calendar_days,
    advance_working_days,
    count_working_days,
    effective_work_days,
    holiday_dates,
    is_working_day,
    next_working_day,
    to_date,
    today,
)
from gantt_mcp.core.hierarchy import (
    build_children_index,
    check_reparent,
    depth_of,
    descendant_ids,
    find_cycle,
    is_ancestor,
    parent_candidates,
)
from gantt_mcp.enums import DragKind, MasterKind
from gantt_mcp.errors import InvalidOperation, MalformedTree, NotFound
from gantt_mcp.models.document import ProjectDocument
from gantt_mcp.models.projection import TimelineWindow
from gantt_mcp.models.reference import Holiday, PriorityOption, ReferenceData, User, Version
from gantt_mcp.models.task import Task, TaskDraft, TaskPatch

logger = logging.getLogger(__name__)

NULLABLE_FIELDS = frozenset({"version_id", "assignee_id", "parent_id"})
SCHEDULE_FIELDS = ("start_date", "due_date", "estimated_hours")

MASTER_LISTS = {MasterKind.USER: "users", MasterKind.VERSION: "versions", MasterKind.PRIORITY: "priorities"}
MASTER_PREFIXES = {MasterKind.USER: "u", MasterKind.VERSION: "v", MasterKind.PRIORITY: "p"}
MASTER_TASK_FIELDS = {
    MasterKind.USER: "assignee_id",
    MasterKind.VERSION: "version_id",
    MasterKind.PRIORITY: "priority_id",
}


# ============================================================================
# Rollup
# ============================================================================


def rollup_tasks(
    tasks: dict[str, Task],
    children: Mapping[str, list[str]],
    max_passes: int = config.ROLLUP_MAX_PASSES,
) -> list[str]:
    """
    Make every container span exactly its direct children, in place.

    Containers are visited deepest first, so a well-formed forest settles in
    a single pass and the following pass finds nothing to change.

    Returns:
        Ids of containers whose range changed, in first-change order

    Raises:
        MalformedTree: if the ranges are still moving after ``max_passes``
    """
    order = [pid for pid in children if pid in tasks and children[pid]]
    depths = {pid: depth_of(tasks, pid) for pid in order}
    order.sort(key=lambda pid: depths[pid], reverse=True)

    changed_ids: dict[str, None] = {}
    for _ in range(max_passes):
        changed = False
        for pid in order:
            kids = [tasks[cid] for cid in children[pid] if cid in tasks]
            if not kids:
                continue
            start = min(k.start_date for k in kids)
            due = max(k.due_date for k in kids)
            parent = tasks[pid]
            if parent.start_date != start or parent.due_date != due:
                tasks[pid] = parent.model_copy(update={"start_date": start, "due_date": due})
                changed_ids.setdefault(pid, None)
                changed = True
        if not changed:
            return list(changed_ids)

    raise MalformedTree(f"Rollup did not settle within {max_passes} passes")


def _attach(children: dict[str, list[str]], task_id: str, parent_id: str | None) -> None:
    if parent_id is not None:
        children.setdefault(parent_id, []).append(task_id)


def _detach(children: dict[str, list[str]], task_id: str, parent_id: str | None) -> None:
    siblings = children.get(parent_id) if parent_id is not None else None
    if siblings and task_id in siblings:
        siblings.remove(task_id)
        if not siblings:
            del children[parent_id]


def _drop_unset(values: dict[str, Any]) -> dict[str, Any]:
    # None only means something for the nullable references
    return {k: v for k, v in values.items() if v is not None or k in NULLABLE_FIELDS}


def _settle_leaf(task: Task, hset: frozenset[date]) -> Task:
    """Re-derive a leaf's duration from its range, snapping the due date back to a working day."""
    work = effective_work_days(count_working_days(task.start_date, task.due_date, hset))
    due = advance_working_days(task.start_date, work, hset)
    if work == task.estimated_hours and due == task.due_date:
        return task
    return task.model_copy(update={"estimated_hours": work, "due_date": due})


# ============================================================================
# Store
# ============================================================================


class TaskStore:
    """
    In-memory task collection with rollup and working-day scheduling.

    One instance per open project; nothing here is global. Tasks are frozen
    models, so the objects handed out can never drift from the store.
    """

    def __init__(
        self,
        tasks: Iterable[Task | Mapping[str, Any]] = (),
        reference: ReferenceData | None = None,
        *,
        max_passes: int = config.ROLLUP_MAX_PASSES,
    ):
        self.reference = reference or ReferenceData()
        self.max_passes = max_passes
        self._tasks: dict[str, Task] = {}
        self._children: dict[str, list[str]] = {}
        if tasks:
            self.load(tasks)

    # ------------------------------------------------------------------ queries

    def __len__(self) -> int:
        return len(self._tasks)

    def __contains__(self, task_id: object) -> bool:
        return task_id in self._tasks

    @property
    def tasks(self) -> list[Task]:
        return list(self._tasks.values())

    def snapshot(self) -> dict[str, Task]:
        return dict(self._tasks)

    def get(self, task_id: str) -> Task:
        try:
            return self._tasks[task_id]
        except KeyError:
            raise NotFound(task_id) from None

    def children_of(self, task_id: str) -> list[Task]:
        return [self._tasks[cid] for cid in self._children.get(task_id, [])]

    def is_container(self, task_id: str) -> bool:
        return bool(self._children.get(task_id))

    def is_leaf(self, task_id: str) -> bool:
        self.get(task_id)
        return not self.is_container(task_id)

    def is_ancestor(self, ancestor_id: str, task_id: str) -> bool:
        return is_ancestor(self._tasks, ancestor_id, task_id)

    def parent_candidates(self, task_id: str) -> list[Task]:
        return parent_candidates(self._tasks, task_id)

    def descendants_of(self, task_id: str) -> list[Task]:
        self.get(task_id)
        return [self._tasks[i] for i in descendant_ids(self._children, task_id)]

    @property
    def holidays(self) -> list[Holiday]:
        return list(self.reference.holidays)

    def _holiday_set(self) -> frozenset[date]:
        return holiday_dates(self.reference.holidays)

    # ------------------------------------------------------------------ internals

    def _copy_children(self) -> dict[str, list[str]]:
        return {pid: list(kids) for pid, kids in self._children.items()}

    def _build(self, values: Mapping[str, Any]) -> Task:
        try:
            return Task.model_validate(values)
        except ValidationError as e:
            raise InvalidOperation(f"Invalid task fields: {e}") from e

    def _commit(self, tasks: dict[str, Task], children: dict[str, list[str]], rollup: bool = True) -> list[str]:
        changed = rollup_tasks(tasks, children, self.max_passes) if rollup else []
        self._tasks = tasks
        self._children = children
        if changed:
            logger.debug("Rollup adjusted %d container(s): %s", len(changed), ", ".join(changed))
        return changed

    def _settle_emptied(
        self,
        tasks: dict[str, Task],
        children: Mapping[str, list[str]],
        parent_id: str | None,
    ) -> None:
        # A container that lost its last child is a leaf again
        if parent_id is None or parent_id not in tasks or children.get(parent_id):
            return
        tasks[parent_id] = _settle_leaf(tasks[parent_id], self._holiday_set())

    def _derive_leaf_schedule(self, current: Task | None, values: dict[str, Any], hset: frozenset[date]) -> None:
        """Keep a leaf's due date and duration consistent with each other."""
        start = values.get("start_date") or (current.start_date if current else None)
        if "due_date" in values:
            # An explicit due date wins; the duration follows it
            work = count_working_days(start, values["due_date"], hset)
            if work < 1:
                raise InvalidOperation(f"{start} .. {values['due_date']} contains no working day")
            values["estimated_hours"] = work
            values["due_date"] = advance_working_days(start, work, hset)
        elif "start_date" in values or "estimated_hours" in values:
            hours = values.get("estimated_hours", current.estimated_hours if current else 1)
            work = effective_work_days(hours)
            values["estimated_hours"] = work
            values["due_date"] = advance_working_days(start, work, hset)

    # ------------------------------------------------------------------ loading

    def load(self, tasks: Iterable[Task | Mapping[str, Any]]) -> None:
        """
        Replace the whole collection, e.g. after reading a saved project.

        Parent references to unknown ids are cleared. A cyclic parent graph
        is rejected. Container ranges are rolled up once so hand-edited data
        heals itself.

        Raises:
            InvalidOperation: on duplicate ids
            MalformedTree: if the parent graph contains a cycle
        """
        loaded: dict[str, Task] = {}
        for item in tasks:
            task = item if isinstance(item, Task) else Task.model_validate(item)
            if task.id in loaded:
                raise InvalidOperation(f"Duplicate task id '{task.id}'")
            loaded[task.id] = task

        for task_id, task in loaded.items():
            if task.parent_id is not None and task.parent_id not in loaded:
                logger.warning("Task %s points at missing parent %s; making it a root", task_id, task.parent_id)
                loaded[task_id] = task.model_copy(update={"parent_id": None})

        bad = find_cycle(loaded)
        if bad is not None:
            raise MalformedTree(f"Parent chain of '{bad}' loops back on itself")

        changed = self._commit(loaded, build_children_index(loaded))
        logger.info("Loaded %d task(s); rollup healed %d container(s)", len(loaded), len(changed))

    def replace_all(self, tasks: Iterable[Task | Mapping[str, Any]]) -> None:
        """Import path: overwrite every task (reference lists are kept)."""
        before = len(self._tasks)
        self.load(tasks)
        logger.info("Replaced %d task(s) with %d imported task(s)", before, len(self._tasks))

    @classmethod
    def from_document(cls, doc: ProjectDocument, *, max_passes: int = config.ROLLUP_MAX_PASSES) -> TaskStore:
        return cls(doc.tasks, doc.reference(), max_passes=max_passes)

    def to_document(self) -> ProjectDocument:
        ref = self.reference
        return ProjectDocument(
            tasks=self.tasks,
            users=ref.users,
            versions=ref.versions,
            priorities=ref.priorities,
            statuses=ref.statuses,
            holidays=ref.holidays,
        )

    # ------------------------------------------------------------------ mutations

    def create_task(self, fields: TaskDraft | Mapping[str, Any]) -> Task:
        """
        Insert a new task with a caller-assigned id.

        Unspecified fields take the reference-list defaults. A missing due
        date is derived from the start date and the working-day duration;
        a missing duration is derived from the dates.

        Raises:
            InvalidOperation: if the id is taken or the fields are invalid
            NotFound: if ``parent_id`` names an unknown task
        """
        draft = fields if isinstance(fields, TaskDraft) else TaskDraft.model_validate(fields)
        if draft.id in self._tasks:
            raise InvalidOperation(f"Task '{draft.id}' already exists")

        values = _drop_unset(draft.changes())
        values["id"] = draft.id
        parent_id = values.get("parent_id")
        if parent_id is not None and parent_id not in self._tasks:
            raise NotFound(parent_id, "Parent task")

        values.setdefault("status_id", self.reference.default_status_id())
        values.setdefault("priority_id", self.reference.default_priority_id())
        if "version_id" not in values:
            values["version_id"] = self.reference.default_version_id()
        values.setdefault("start_date", today())

        hset = self._holiday_set()
        if "due_date" not in values:
            values.setdefault("estimated_hours", 1)
        self._derive_leaf_schedule(None, values, hset)
        task = self._build(values)

        tasks = dict(self._tasks)
        children = self._copy_children()
        tasks[task.id] = task
        _attach(children, task.id, task.parent_id)
        self._commit(tasks, children, rollup=task.parent_id is not None)
        logger.debug("Created task %s (parent=%s)", task.id, task.parent_id)
        return task

    def update_task(self, task_id: str, patch: TaskPatch | Mapping[str, Any]) -> Task:
        """
        Apply a partial patch, then roll up.

        A changed ``parent_id`` goes through the cycle guard first. On a leaf,
        setting the due date recomputes the duration; setting the start date
        or duration recomputes the due date. Date and duration fields sent for
        a container are ignored: its range always follows its children.

        Raises:
            NotFound: unknown task or parent
            InvalidOperation: cycle, empty working-day span or invalid fields
        """
        current = self.get(task_id)
        patch = patch if isinstance(patch, TaskPatch) else TaskPatch.model_validate(patch)
        values = _drop_unset(patch.changes())

        reparent = "parent_id" in values and values["parent_id"] != current.parent_id
        if reparent:
            check_reparent(self._tasks, task_id, values["parent_id"])

        if self.is_container(task_id):
            ignored = [f for f in SCHEDULE_FIELDS if values.pop(f, None) is not None]
            if ignored:
                logger.debug("Ignoring %s on container task %s", ", ".join(ignored), task_id)
        else:
            self._derive_leaf_schedule(current, values, self._holiday_set())

        updated = self._build({**current.model_dump(), **values})

        tasks = dict(self._tasks)
        children = self._copy_children()
        tasks[task_id] = updated
        if reparent:
            _detach(children, task_id, current.parent_id)
            _attach(children, task_id, updated.parent_id)
            self._settle_emptied(tasks, children, current.parent_id)
        self._commit(tasks, children)
        logger.debug("Updated task %s: %s", task_id, ", ".join(sorted(values)) or "no fields")
        return self._tasks[task_id]

    def delete_task(self, task_id: str) -> Task:
        """
        Remove a task. Its children are kept and become roots. A parent left
        without children is a leaf again, with its duration taken from the
        range it last spanned.

        Returns:
            The removed task
        """
        task = self.get(task_id)
        tasks = dict(self._tasks)
        children = self._copy_children()

        del tasks[task_id]
        _detach(children, task_id, task.parent_id)
        orphans = children.pop(task_id, [])
        for cid in orphans:
            tasks[cid] = tasks[cid].model_copy(update={"parent_id": None})
        self._settle_emptied(tasks, children, task.parent_id)

        self._commit(tasks, children)
        logger.debug("Deleted task %s; %d child(ren) promoted to root", task_id, len(orphans))
        return task

    def rollup(self) -> list[str]:
        """Recompute every container range; returns the ids that changed."""
        tasks = dict(self._tasks)
        return self._commit(tasks, self._children)

    # ------------------------------------------------------------------ holidays

    def set_holidays(self, holidays: Iterable[Holiday | Mapping[str, Any] | date | str]) -> list[Task]:
        """
        Replace the holiday list and reschedule every leaf under it.

        Each leaf keeps its start date and duration; its due date moves to
        wherever that many working days now end.

        Returns:
            Leaves whose due date moved
        """
        normalized: list[Holiday] = []
        for h in holidays:
            if isinstance(h, Holiday):
                normalized.append(h)
            elif isinstance(h, Mapping):
                normalized.append(Holiday.model_validate(h))
            else:
                normalized.append(Holiday(date=to_date(h)))
        hset = holiday_dates(normalized)

        tasks = dict(self._tasks)
        moved: list[str] = []
        for task_id, task in tasks.items():
            if self.is_container(task_id):
                continue
            work = effective_work_days(task.estimated_hours)
            due = advance_working_days(task.start_date, work, hset)
            if due != task.due_date or work != task.estimated_hours:
                tasks[task_id] = task.model_copy(update={"due_date": due, "estimated_hours": work})
                if due != task.due_date:
                    moved.append(task_id)

        self._commit(tasks, self._copy_children())
        self.reference = self.reference.model_copy(update={"holidays": normalized})
        logger.info("Holiday list now has %d day(s); %d task(s) rescheduled", len(normalized), len(moved))
        return [self._tasks[i] for i in moved]

    def add_holiday(self, holiday: Holiday) -> list[Task]:
        return self.set_holidays([*self.reference.holidays, holiday])

    def remove_holiday(self, day: date | str) -> list[Task]:
        day = to_date(day)
        remaining = [h for h in self.reference.holidays if h.date != day]
        if len(remaining) == len(self.reference.holidays):
            raise NotFound(str(day), "Holiday")
        return self.set_holidays(remaining)

    # ------------------------------------------------------------------ reference lists

    def reference_items(self, kind: MasterKind | str) -> list[User | Version | PriorityOption]:
        return list(getattr(self.reference, MASTER_LISTS[MasterKind(kind)]))

    def add_reference_item(
        self,
        kind: MasterKind | str,
        name: str,
        *,
        color: str | None = None,
        is_default: bool = False,
    ) -> User | Version | PriorityOption:
        """
        Append a user, version or priority with the next free id (``u3``, ``v3``, ...).

        A new default version or priority takes the flag from the previous one.

        Raises:
            InvalidOperation: if the name is blank
        """
        kind = MasterKind(kind)
        name = name.strip()
        if not name:
            raise InvalidOperation(f"A {kind.value} needs a name")

        items = self.reference_items(kind)
        prefix = MASTER_PREFIXES[kind]
        numbers = [int(i.id[1:]) for i in items if i.id[:1] == prefix and i.id[1:].isdigit()]
        item_id = f"{prefix}{max(numbers, default=0) + 1}"

        item: User | Version | PriorityOption
        if kind is MasterKind.USER:
            item = User(id=item_id, name=name, avatar=f"https://picsum.photos/seed/{item_id}/40/40")
        else:
            if is_default:
                items = [i.model_copy(update={"is_default": False}) for i in items]
            if kind is MasterKind.VERSION:
                item = Version(id=item_id, name=name, is_default=is_default)
            else:
                item = PriorityOption(id=item_id, name=name, color=color or "text-blue-500", is_default=is_default)

        self.reference = self.reference.model_copy(update={MASTER_LISTS[kind]: [*items, item]})
        logger.info("Added %s %s (%s)", kind.value, item_id, name)
        return item

    def remove_reference_item(
        self, kind: MasterKind | str, item_id: str
    ) -> tuple[User | Version | PriorityOption, int]:
        """
        Drop a user, version or priority from its list.

        Tasks that still reference it keep the id and display as unknown.

        Returns:
            The removed item and the number of tasks still referencing it

        Raises:
            NotFound: if no item has that id
        """
        kind = MasterKind(kind)
        items = self.reference_items(kind)
        removed = next((i for i in items if i.id == item_id), None)
        if removed is None:
            raise NotFound(item_id, kind.value.capitalize())

        field = MASTER_TASK_FIELDS[kind]
        in_use = sum(1 for t in self._tasks.values() if getattr(t, field) == item_id)
        remaining = [i for i in items if i.id != item_id]
        self.reference = self.reference.model_copy(update={MASTER_LISTS[kind]: remaining})
        if in_use:
            logger.warning("Removed %s %s still referenced by %d task(s)", kind.value, item_id, in_use)
        return removed, in_use

    def apply_group_drop(self, task_id: str, user_id: str | None, *, detach: bool = True) -> Task:
        """
        Reassign a task dropped into an assignee group.

        A drop on the list makes the task a root of its new group; a bar
        dropped on the timeline keeps its parent. ``None`` unassigns.

        Raises:
            NotFound: unknown task or user
        """
        self.get(task_id)
        if user_id is not None and self.reference.user_name(user_id) is None:
            raise NotFound(user_id, "User")
        patch: dict[str, Any] = {"assignee_id": user_id}
        if detach:
            patch["parent_id"] = None
        return self.update_task(task_id, patch)

    # ------------------------------------------------------------------ drag edits

    def _shifted_range(
        self,
        origin: Task,
        delta_days: int,
        bounds: TimelineWindow | None,
        hset: frozenset[date],
    ) -> tuple[date, date, int]:
        new_start = add_calendar_days(origin.start_date, delta_days)
        if bounds is not None and new_start < bounds.start:
            new_start = bounds.start
        new_start = next_working_day(new_start, hset)
        work = effective_work_days(origin.estimated_hours)
        new_due = advance_working_days(new_start, work, hset)
        if bounds is not None and new_due > bounds.end:
            raise InvalidOperation(f"Task '{origin.id}' would end after the timeline ({bounds.end})")
        return new_start, new_due, work

    def apply_date_shift(
        self,
        task_id: str,
        delta_days: int,
        *,
        origin: Task | None = None,
        bounds: TimelineWindow | None = None,
        allow_subtree: bool = False,
    ) -> Task:
        """
        Move a task along the timeline, keeping its working-day duration.

        ``origin`` is the task as it was when the drag began and
        ``delta_days`` the total offset from there, so each pointer event is
        an independent call. The new start snaps forward to a working day.

        A container can only move with ``allow_subtree``; then every leaf
        below it shifts by the same delta from its committed dates.

        Raises:
            InvalidOperation: container without ``allow_subtree``, or the
                moved task would end past ``bounds``
        """
        current = self.get(task_id)
        if delta_days == 0:
            return current

        hset = self._holiday_set()
        if self.is_container(task_id):
            if not allow_subtree:
                raise InvalidOperation(f"Task '{task_id}' has children; its dates follow them")
            return self._shift_subtree(task_id, delta_days, bounds, hset)

        start, due, work = self._shifted_range(origin or current, delta_days, bounds, hset)
        return self.update_task(task_id, TaskPatch(start_date=start, due_date=due, estimated_hours=work))

    def _shift_subtree(
        self,
        task_id: str,
        delta_days: int,
        bounds: TimelineWindow | None,
        hset: frozenset[date],
    ) -> Task:
        tasks = dict(self._tasks)
        for cid in descendant_ids(self._children, task_id):
            if self.is_container(cid):
                continue
            start, due, work = self._shifted_range(tasks[cid], delta_days, bounds, hset)
            tasks[cid] = tasks[cid].model_copy(
                update={"start_date": start, "due_date": due, "estimated_hours": work}
            )
        self._commit(tasks, self._copy_children())
        logger.debug("Shifted subtree of %s by %+d day(s)", task_id, delta_days)
        return self._tasks[task_id]

    def apply_range_resize(
        self,
        task_id: str,
        delta_days: int,
        *,
        edge: DragKind | str = DragKind.RESIZE_END,
        origin: Task | None = None,
        bounds: TimelineWindow | None = None,
    ) -> Task:
        """
        Drag one end of a leaf's bar and recompute its working-day duration.

        ``resize-end`` keeps the start and snaps the new due date back to the
        last working day it covers. ``resize-start`` keeps the due date and
        snaps the new start forward to a working day.

        Raises:
            InvalidOperation: the task is a container, or the new range holds
                no working day
        """
        edge = DragKind(edge)
        if edge is DragKind.MOVE:
            raise InvalidOperation("A move is not a resize; use apply_date_shift")

        current = self.get(task_id)
        if self.is_container(task_id):
            raise InvalidOperation(f"Task '{task_id}' has children and cannot be resized")
        if delta_days == 0:
            return current

        origin = origin or current
        hset = self._holiday_set()

        if edge is DragKind.RESIZE_END:
            new_end = add_calendar_days(origin.due_date, delta_days)
            if bounds is not None and new_end > bounds.end:
                new_end = bounds.end
            work = count_working_days(origin.start_date, new_end, hset)
            if work < 1:
                raise InvalidOperation(f"Task '{task_id}' needs at least one working day")
            due = advance_working_days(origin.start_date, work, hset)
            patch = TaskPatch(start_date=origin.start_date, due_date=due, estimated_hours=work)
        else:
            new_start = add_calendar_days(origin.start_date, delta_days)
            if bounds is not None and new_start < bounds.start:
                new_start = bounds.start
            while not is_working_day(new_start, hset) and new_start < origin.due_date:
                new_start = add_calendar_days(new_start, 1)
            work = count_working_days(new_start, origin.due_date, hset)
            if work < 1:
                raise InvalidOperation(f"Task '{task_id}' needs at least one working day")
            patch = TaskPatch(start_date=new_start, due_date=origin.due_date, estimated_hours=work)

        return self.update_task(task_id, patch)

    def apply_duration_change(self, task_id: str, work_days: float) -> Task:
        """Set a leaf's duration in working days; the due date follows."""
        self.get(task_id)
        if self.is_container(task_id):
            raise InvalidOperation(f"Task '{task_id}' has children; its duration follows them")
        if work_days < 1:
            raise InvalidOperation(f"Duration must be at least one working day, got {work_days}")
        return self.update_task(task_id, TaskPatch(estimated_hours=effective_work_days(work_days)))

    def apply_drag(
        self,
        task_id: str,
        kind: DragKind | str,
        delta_days: int,
        *,
        origin: Task | None = None,
        bounds: TimelineWindow | None = None,
        allow_subtree: bool = False,
    ) -> Task:
        """Dispatch a timeline gesture to the matching edit."""
        kind = DragKind(kind)
        if kind is DragKind.MOVE:
            return self.apply_date_shift(
                task_id, delta_days, origin=origin, bounds=bounds, allow_subtree=allow_subtree
            )
        return self.apply_range_resize(task_id, delta_days, edge=kind, origin=origin, bounds=bounds)
