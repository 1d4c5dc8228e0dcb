"""Scheduling MCP tools: drag edits, durations, the working-day calendar and the timeline."""

import json

from mcp.types import ToolAnnotations

from gantt_mcp.core.calendar import (
    advance_working_days,
    count_working_days,
    enumerate_days,
    format_date,
    parse_date,
)
from gantt_mcp.core.projection import (
    implied_work_days,
    month_spans,
    pixels_to_days,
    place_task,
    sort_key,
    timeline_window,
    visible_items,
)
from gantt_mcp.enums import ResponseFormat, SortKey
from gantt_mcp.errors import InvalidOperation, NotFound
from gantt_mcp.models.inputs import (
    AddHolidayInput,
    DragInput,
    HolidaysInput,
    RemoveHolidayInput,
    SetDurationInput,
    TimelineInput,
    WorkDaysInput,
)
from gantt_mcp.models.reference import Holiday
from gantt_mcp.server import get_store, mcp, persist
from gantt_mcp.utils.formatters import _format_task_concise


def _rescheduled(tasks: list) -> str:
    if not tasks:
        return "No task dates changed."
    lines = [f"{len(tasks)} task(s) rescheduled:"]
    lines.extend(_format_task_concise(t) for t in tasks)
    return "\n".join(lines)


@mcp.tool(
    name="gantt_drag",
    annotations=ToolAnnotations(
        title="Drag Task Bar",
        readOnlyHint=False,
        destructiveHint=False,
        idempotentHint=False,
        openWorldHint=False,
    ),
)
async def gantt_drag(params: DragInput) -> str:
    """
    Move or resize a task's bar on the timeline.

    - move: shift start and due date, keeping the working-day duration;
      the start snaps to the next working day
    - resize-end: change the due date; the duration is recounted
    - resize-start: change the start date; the duration is recounted

    Parent tasks cannot be resized, and only move with allow_subtree=true.
    Gestures that would leave less than one working day are ignored.

    Args:
        params: DragInput with task_id, kind and delta_days or delta_px

    Returns:
        The task's new dates, or why the gesture was ignored
    """
    store = get_store()
    if params.delta_days is not None:
        delta = params.delta_days
    else:
        delta = pixels_to_days(params.delta_px, params.day_width)
    bounds = timeline_window(store.tasks) if params.clamp_to_timeline else None

    try:
        task = store.apply_drag(
            params.task_id,
            params.kind,
            delta,
            bounds=bounds,
            allow_subtree=params.allow_subtree,
        )
    except NotFound as e:
        return f"Error: {e}.\nTip: Use gantt_list to find valid task ids."
    except InvalidOperation as e:
        return f"Gesture ignored: {e}"

    persist()
    return f"Task {task.id} {params.kind.value} by {delta:+d} day(s).\n{_format_task_concise(task)}"


@mcp.tool(
    name="gantt_set_duration",
    annotations=ToolAnnotations(
        title="Set Task Duration",
        readOnlyHint=False,
        destructiveHint=False,
        idempotentHint=True,
        openWorldHint=False,
    ),
)
async def gantt_set_duration(params: SetDurationInput) -> str:
    """
    Set how many working days a task takes; its due date follows.

    Args:
        params: SetDurationInput containing task_id and work_days

    Returns:
        The task's new dates
    """
    store = get_store()
    try:
        task = store.apply_duration_change(params.task_id, params.work_days)
    except NotFound as e:
        return f"Error: {e}.\nTip: Use gantt_list to find valid task ids."
    except InvalidOperation as e:
        return f"Error: {e}"

    persist()
    return f"Task {task.id} now takes {task.estimated_hours} working day(s).\n{_format_task_concise(task)}"


@mcp.tool(
    name="gantt_work_days",
    annotations=ToolAnnotations(
        title="Working Day Calculator",
        readOnlyHint=True,
        destructiveHint=False,
        idempotentHint=True,
        openWorldHint=False,
    ),
)
async def gantt_work_days(params: WorkDaysInput) -> str:
    """
    Answer calendar questions using the project's weekends and holidays.

    - work_days: on which date does a span of N working days starting at
      start_date end? (start_date counts as day 1 if it is a working day)
    - end_date: how many working days lie in start_date..end_date?

    Args:
        params: WorkDaysInput with start_date and work_days and/or end_date

    Returns:
        JSON with the requested answers
    """
    holidays = get_store().holidays
    try:
        start = parse_date(params.start_date)
        result: dict = {"start_date": format_date(start)}
        if params.work_days is not None:
            result["work_days"] = params.work_days
            result["ends_on"] = format_date(advance_working_days(start, params.work_days, holidays))
        if params.end_date is not None:
            end = parse_date(params.end_date)
            result["end_date"] = format_date(end)
            result["working_days_in_range"] = count_working_days(start, end, holidays)
    except ValueError as e:
        return f"Error: {e}"
    return json.dumps(result, indent=2)


@mcp.tool(
    name="gantt_timeline",
    annotations=ToolAnnotations(
        title="Timeline Layout",
        readOnlyHint=True,
        destructiveHint=False,
        idempotentHint=True,
        openWorldHint=False,
    ),
)
async def gantt_timeline(params: TimelineInput) -> str:
    """
    Compute the chart layout: visible date window, month headers and each
    task's bar offset, width and row position in pixels.

    Args:
        params: TimelineInput with day_width, row_height and response_format

    Returns:
        Layout as markdown table or JSON
    """
    store = get_store()
    window = timeline_window(store.tasks)
    items = visible_items(store.tasks, {t.id for t in store.tasks}, sort_key(SortKey.START_DATE))
    bars = []
    for row, item in enumerate(items):
        task = item.task
        placement = place_task(task, window.start, params.day_width)
        bars.append(
            {
                "id": task.id,
                "depth": item.depth,
                "offset": placement.offset,
                "top": row * params.row_height,
                "width": placement.width,
                "work_days": implied_work_days(task, store.holidays),
                "container": item.has_children,
            }
        )

    if params.response_format == ResponseFormat.JSON:
        spans = month_spans(enumerate_days(window.start, window.end), params.day_width)
        return json.dumps(
            {
                "start": format_date(window.start),
                "end": format_date(window.end),
                "day_width": params.day_width,
                "months": [s.model_dump() for s in spans],
                "bars": bars,
            },
            indent=2,
        )

    lines = [
        "# Timeline",
        f"*{format_date(window.start)} → {format_date(window.end)}, {params.day_width}px per day*",
        "",
    ]
    if not bars:
        lines.append("No tasks found.")
        return "\n".join(lines)
    lines.append("| Task | Offset | Width | Work days |")
    lines.append("|------|-------:|------:|----------:|")
    for bar in bars:
        label = "  " * bar["depth"] + f"#{bar['id']}"
        lines.append(f"| {label} | {bar['offset']} | {bar['width']} | {bar['work_days']} |")
    return "\n".join(lines)


@mcp.tool(
    name="gantt_holidays",
    annotations=ToolAnnotations(
        title="List Holidays",
        readOnlyHint=True,
        destructiveHint=False,
        idempotentHint=True,
        openWorldHint=False,
    ),
)
async def gantt_holidays(params: HolidaysInput) -> str:
    """
    List the registered holidays (non-working days besides weekends).

    Args:
        params: HolidaysInput with response_format

    Returns:
        Holidays sorted by date
    """
    holidays = sorted(get_store().holidays, key=lambda h: h.date)
    if params.response_format == ResponseFormat.JSON:
        return json.dumps([h.model_dump(mode="json") for h in holidays], indent=2)
    if not holidays:
        return "# Holidays\n\nNo holidays registered."
    lines = ["# Holidays", f"*{len(holidays)} holiday(s)*", ""]
    lines.extend(f"- {format_date(h.date)} {h.name}" for h in holidays)
    return "\n".join(lines)


@mcp.tool(
    name="gantt_add_holiday",
    annotations=ToolAnnotations(
        title="Add Holiday",
        readOnlyHint=False,
        destructiveHint=False,
        idempotentHint=False,
        openWorldHint=False,
    ),
)
async def gantt_add_holiday(params: AddHolidayInput) -> str:
    """
    Register a holiday. Tasks spanning it are pushed out by a working day.

    Args:
        params: AddHolidayInput containing date and name

    Returns:
        The tasks whose due dates moved
    """
    store = get_store()
    try:
        day = parse_date(params.date)
    except ValueError as e:
        return f"Error: {e}"
    if any(h.date == day for h in store.holidays):
        return f"Error: {format_date(day)} is already a holiday."

    moved = store.add_holiday(Holiday(id=f"h-{format_date(day)}", date=day, name=params.name))
    persist()
    return f"Holiday {format_date(day)} ({params.name}) added.\n{_rescheduled(moved)}"


@mcp.tool(
    name="gantt_remove_holiday",
    annotations=ToolAnnotations(
        title="Remove Holiday",
        readOnlyHint=False,
        destructiveHint=True,
        idempotentHint=True,
        openWorldHint=False,
    ),
)
async def gantt_remove_holiday(params: RemoveHolidayInput) -> str:
    """
    Remove a holiday. Tasks spanning it finish a working day earlier.

    Args:
        params: RemoveHolidayInput containing the date

    Returns:
        The tasks whose due dates moved
    """
    store = get_store()
    try:
        moved = store.remove_holiday(parse_date(params.date))
    except NotFound as e:
        return f"Error: {e}.\nTip: Use gantt_holidays to list registered holidays."
    except ValueError as e:
        return f"Error: {e}"

    persist()
    return f"Holiday {params.date} removed.\n{_rescheduled(moved)}"
