"""Timeline projection: bar geometry and the visible, ordered task list."""

from __future__ import annotations

import math
from collections.abc import Callable, Collection, Iterable
from datetime import date
from typing import Any

from gantt_mcp import config
from gantt_mcp.core.calendar import (
    add_calendar_days,
    count_working_days,
    days_between,
    month_start,
    to_date,
)
from gantt_mcp.core.calendar import today as calendar_today
from gantt_mcp.enums import SortKey
from gantt_mcp.models.projection import MonthSpan, Placement, TimelineWindow, VisibleItem
from gantt_mcp.models.reference import User, Version
from gantt_mcp.models.task import Task

SortFn = Callable[[Task], Any]


def place_task(task: Task, anchor: date, day_width: int = config.DAY_WIDTH) -> Placement:
    """Pixel offset and width of a task's bar on a timeline starting at ``anchor``."""
    offset = days_between(anchor, task.start_date) * day_width
    span = days_between(task.start_date, task.due_date) + 1
    return Placement(offset=offset, width=max(1, span) * day_width)


def pixels_to_days(delta_px: float, day_width: int = config.DAY_WIDTH) -> int:
    """Signed day delta for a horizontal drag; halves round up like ``Math.round``."""
    if day_width <= 0:
        raise ValueError("day_width must be positive")
    return math.floor(delta_px / day_width + 0.5)


def implied_work_days(task: Task, holidays: Iterable | None = None) -> int:
    """Working days the task's bar currently covers."""
    return count_working_days(task.start_date, task.due_date, holidays)


def timeline_window(
    tasks: Iterable[Task],
    today: date | None = None,
    lead_days: int = config.TIMELINE_LEAD_DAYS,
) -> TimelineWindow:
    """
    Date range the chart should show.

    Starts on the first of the month holding the earliest start date and
    ends ``lead_days`` after the latest due date. With no tasks it covers
    the current month through a year from today.
    """
    tasks = list(tasks)
    today = to_date(today) if today is not None else calendar_today()
    if not tasks:
        return TimelineWindow(start=month_start(today), end=add_calendar_days(today, 365))
    earliest = min(t.start_date for t in tasks)
    latest = max(t.due_date for t in tasks)
    return TimelineWindow(start=month_start(earliest), end=add_calendar_days(latest, lead_days))


def month_spans(days: Iterable[date], day_width: int = config.DAY_WIDTH) -> list[MonthSpan]:
    """Group consecutive days into month header cells."""
    spans: list[MonthSpan] = []
    for d in days:
        if spans and spans[-1].year == d.year and spans[-1].month == d.month:
            spans[-1].width += day_width
        else:
            spans.append(MonthSpan(year=d.year, month=d.month, width=day_width))
    return spans


def sort_key(
    key: SortKey | str,
    users: Iterable[User] = (),
    versions: Iterable[Version] = (),
) -> SortFn:
    """
    Build a sort function for one sibling level of the task list.

    Ids sort numerically when they are numbers. Assignee and version sort by
    display name, with unknown or empty references last.
    """
    key = SortKey(key)
    if key is SortKey.ID:

        def by_id(task: Task) -> Any:
            try:
                return (0, int(task.id), task.id)
            except ValueError:
                return (1, 0, task.id)

        return by_id
    if key is SortKey.SUBJECT:
        return lambda task: task.subject.lower()
    if key is SortKey.START_DATE:
        return lambda task: task.start_date
    if key is SortKey.DUE_DATE:
        return lambda task: task.due_date
    if key is SortKey.ASSIGNEE:
        names = {u.id: u.name for u in users}
        return lambda task: _name_or_last(names, task.assignee_id)
    names = {v.id: v.name for v in versions}
    return lambda task: _name_or_last(names, task.version_id)


def _name_or_last(names: dict[str, str], ref: str | None) -> tuple[int, str]:
    if ref in names:
        return (0, names[ref])
    return (1, "")


def _roots(tasks: list[Task]) -> list[Task]:
    ids = {t.id for t in tasks}
    return [t for t in tasks if t.parent_id is None or t.parent_id not in ids]


def _walk(
    tasks: list[Task],
    expanded: Collection[str],
    key: SortFn | None,
    reverse: bool,
) -> list[VisibleItem]:
    children: dict[str, list[Task]] = {}
    for t in tasks:
        if t.parent_id is not None:
            children.setdefault(t.parent_id, []).append(t)

    def ordered(items: list[Task]) -> list[Task]:
        return sorted(items, key=key, reverse=reverse) if key is not None else items

    result: list[VisibleItem] = []
    seen: set[str] = set()

    def visit(items: list[Task], depth: int) -> None:
        for item in ordered(items):
            if item.id in seen:
                continue
            seen.add(item.id)
            kids = children.get(item.id, [])
            result.append(VisibleItem(task=item, depth=depth, has_children=bool(kids)))
            if item.id in expanded:
                visit(kids, depth + 1)

    visit(_roots(tasks), 0)
    return result


def visible_items(
    tasks: Iterable[Task],
    expanded: Collection[str] = frozenset(),
    key: SortFn | None = None,
    reverse: bool = False,
) -> list[VisibleItem]:
    """
    Rows of the task list, depth-first.

    A task whose parent is missing is shown as a root. Children appear only
    under expanded ids. ``key`` orders each sibling level on its own.
    """
    return _walk(list(tasks), expanded, key, reverse)


def visible_items_by_assignee(
    tasks: Iterable[Task],
    users: Iterable[User],
    expanded: Collection[str] = frozenset(),
    key: SortFn | None = None,
    reverse: bool = False,
) -> list[VisibleItem]:
    """
    Rows grouped under one header per user, then an "unassigned" header.

    Inside a group a task counts as a root when its parent is assigned to
    someone else. Tasks assigned to an unknown user land in "unassigned".
    """
    tasks = list(tasks)
    users = list(users)
    known = {u.id for u in users}
    result: list[VisibleItem] = []
    for user in [*users, None]:
        if user is not None:
            group = [t for t in tasks if t.assignee_id == user.id]
        else:
            group = [t for t in tasks if t.assignee_id not in known]
        user_id = user.id if user else None
        result.append(VisibleItem(kind="header", user=user, header_id=f"header-{user_id or 'unassigned'}"))
        result.extend(_walk(group, expanded, key, reverse))
    return result


def filter_tasks(
    tasks: Iterable[Task],
    *,
    assignee_id: str | None = None,
    status_id: str | None = None,
    priority_id: str | None = None,
    version_id: str | None = None,
    search: str | None = None,
) -> list[Task]:
    """
    Keep the tasks matching every given criterion.

    ``search`` matches a case-insensitive substring of the subject or id.
    A task whose parent is filtered out is listed as a root.
    """
    result = list(tasks)
    if search:
        needle = search.lower()
        result = [t for t in result if needle in t.subject.lower() or needle in t.id.lower()]
    if assignee_id:
        result = [t for t in result if t.assignee_id == assignee_id]
    if status_id:
        result = [t for t in result if t.status_id == status_id]
    if priority_id:
        result = [t for t in result if t.priority_id == priority_id]
    if version_id:
        result = [t for t in result if t.version_id == version_id]
    return result


def assignee_from_row(row_id: str | None) -> str | None:
    """User id a drop onto a group header row (or a bare user id) assigns to."""
    if not row_id:
        return None
    user_id = row_id.removeprefix("header-")
    if user_id == "unassigned":
        return None
    return user_id or None
