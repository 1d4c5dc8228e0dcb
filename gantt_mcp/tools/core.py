"""Core MCP tool definitions for the task tree."""

import json
from typing import Any

from mcp.types import ToolAnnotations

from gantt_mcp.core.projection import (
    assignee_from_row,
    filter_tasks,
    sort_key,
    visible_items,
    visible_items_by_assignee,
)
from gantt_mcp.core.store import TaskStore
from gantt_mcp.enums import ResponseFormat, SortOrder
from gantt_mcp.errors import InvalidOperation, NotFound
from gantt_mcp.models.inputs import (
    AddTaskInput,
    AssignInput,
    DeleteTaskInput,
    GetTaskInput,
    ListTasksInput,
    ParentCandidatesInput,
    ReparentInput,
    UpdateTaskInput,
)
from gantt_mcp.models.task import TaskDraft, TaskPatch
from gantt_mcp.server import get_store, mcp, persist
from gantt_mcp.utils.formatters import (
    _format_task_concise,
    _format_task_markdown,
    _format_tasks_concise,
    _format_tasks_markdown,
    _format_visible_items,
)

# ============================================================================
# Helpers
# ============================================================================


def _next_task_id(store: TaskStore) -> str:
    """Next free numeric id (numbering starts at 1000)."""
    numbers = [int(t.id) for t in store.tasks if t.id.isdigit()]
    return str(max(numbers, default=999) + 1)


def _field_values(params: Any, exclude: set[str]) -> dict[str, Any]:
    """Supplied tool fields renamed to task fields (None means 'not given')."""
    values = params.model_dump(exclude_none=True, exclude=exclude)
    if "estimated_days" in values:
        values["estimated_hours"] = values.pop("estimated_days")
    if "status" in values:
        values["status_id"] = values.pop("status")
    return values


def _not_found(e: NotFound) -> str:
    return f"Error: {e}.\nTip: Use gantt_list to find valid task ids."


def _render_task(store: TaskStore, task_id: str, response_format: ResponseFormat) -> str:
    task = store.get(task_id)
    if response_format == ResponseFormat.JSON:
        return json.dumps(task.to_record(), indent=2)
    if response_format == ResponseFormat.CONCISE:
        return _format_task_concise(task)
    return _format_task_markdown(task, store.reference, container=store.is_container(task_id))


# ============================================================================
# Tool Definitions
# ============================================================================


@mcp.tool(
    name="gantt_list",
    annotations=ToolAnnotations(
        title="List Task Tree",
        readOnlyHint=True,
        destructiveHint=False,
        idempotentHint=True,
        openWorldHint=False,
    ),
)
async def gantt_list(params: ListTasksInput) -> str:
    """
    Show the task tree in display order.

    Rows are depth-first: each root, then its subtasks, with every sibling
    level sorted on its own. Parent tasks span their subtasks' dates.
    Filters keep only matching tasks; a subtask whose parent is filtered
    out is listed at the top level.

    USE THIS WHEN:
    - Getting an overview of the project schedule
    - Looking up task ids before editing

    DO NOT USE WHEN:
    - You need one task's full details → use gantt_get
    - You need bar positions → use gantt_timeline

    Args:
        params: ListTasksInput with sort, expansion, grouping, filters and response_format

    Returns:
        Indented outline (markdown), one line per row (concise) or JSON rows
    """
    store = get_store()
    ref = store.reference
    key = sort_key(params.sort_by, ref.users, ref.versions)
    reverse = params.sort_order == SortOrder.DESC
    expanded = {t.id for t in store.tasks} if params.expand_all else set(params.expanded)
    tasks = filter_tasks(
        store.tasks,
        assignee_id=params.assignee_id,
        status_id=params.status,
        priority_id=params.priority_id,
        version_id=params.version_id,
        search=params.search,
    )

    if params.group_by_assignee:
        items = visible_items_by_assignee(tasks, ref.users, expanded, key, reverse)
    else:
        items = visible_items(tasks, expanded, key, reverse)

    if params.response_format == ResponseFormat.JSON:
        rows = []
        for item in items:
            if item.kind == "header":
                rows.append({"header": item.row_id, "user": item.user.name if item.user else None})
            else:
                rows.append({"depth": item.depth, "hasChildren": item.has_children, "task": item.task.to_record()})
        return json.dumps({"total": len(store), "count": len(rows), "rows": rows}, indent=2)

    if params.response_format == ResponseFormat.CONCISE:
        return _format_tasks_concise([i.task for i in items if i.task is not None])

    return _format_visible_items(items, expanded, title="Schedule")


@mcp.tool(
    name="gantt_get",
    annotations=ToolAnnotations(
        title="Get Task Details",
        readOnlyHint=True,
        destructiveHint=False,
        idempotentHint=True,
        openWorldHint=False,
    ),
)
async def gantt_get(params: GetTaskInput) -> str:
    """
    Retrieve full details for a single task.

    Args:
        params: GetTaskInput containing task_id and response_format

    Returns:
        Task details (markdown, concise or JSON)
    """
    try:
        return _render_task(get_store(), params.task_id, params.response_format)
    except NotFound as e:
        return _not_found(e)


@mcp.tool(
    name="gantt_add",
    annotations=ToolAnnotations(
        title="Add Task",
        readOnlyHint=False,
        destructiveHint=False,
        idempotentHint=False,
        openWorldHint=False,
    ),
)
async def gantt_add(params: AddTaskInput) -> str:
    """
    Create a new task.

    The due date is derived from start_date and estimated_days (working days,
    skipping weekends and holidays) unless given. Adding a task under a
    parent widens the parent's dates if needed.

    Args:
        params: AddTaskInput containing the subject and optional attributes

    Returns:
        Confirmation message with the created task

    Examples:
        - Simple task: params with subject="Write release notes"
        - Subtask: params with subject="Review", parent_id="1001", estimated_days=2
    """
    store = get_store()
    values = _field_values(params, exclude={"task_id"})
    values["id"] = params.task_id or _next_task_id(store)

    try:
        task = store.create_task(TaskDraft.model_validate(values))
    except NotFound as e:
        return _not_found(e)
    except (InvalidOperation, ValueError) as e:
        return f"Error: {e}"

    persist()
    return f"Task {task.id} created.\n{_format_task_concise(task)}"


@mcp.tool(
    name="gantt_update",
    annotations=ToolAnnotations(
        title="Update Task",
        readOnlyHint=False,
        destructiveHint=False,
        idempotentHint=True,
        openWorldHint=False,
    ),
)
async def gantt_update(params: UpdateTaskInput) -> str:
    """
    Update an existing task's fields.

    Only supplied fields change. On a task without subtasks, a new due date
    recomputes the duration (and wins over estimated_days in the same call);
    a new start date or duration recomputes the due date. Dates and duration
    of parent tasks always follow their subtasks.

    CLEARING VALUES: Use empty string for assignee_id, version_id or parent_id.

    Args:
        params: UpdateTaskInput containing task_id and the fields to change

    Returns:
        Confirmation message with the updated task
    """
    store = get_store()
    try:
        patch = TaskPatch.model_validate(_field_values(params, exclude={"task_id"}))
        task = store.update_task(params.task_id, patch)
    except NotFound as e:
        return _not_found(e)
    except (InvalidOperation, ValueError) as e:
        return f"Error: {e}"

    persist()
    return f"Task {task.id} updated.\n{_format_task_concise(task)}"


@mcp.tool(
    name="gantt_delete",
    annotations=ToolAnnotations(
        title="Delete Task",
        readOnlyHint=False,
        destructiveHint=True,
        idempotentHint=False,
        openWorldHint=False,
    ),
)
async def gantt_delete(params: DeleteTaskInput) -> str:
    """
    Delete a task. Its subtasks are kept and become root tasks.

    To remove a whole branch, delete the subtasks first.

    Args:
        params: DeleteTaskInput containing the task_id

    Returns:
        Confirmation message
    """
    store = get_store()
    try:
        orphans = [t.id for t in store.children_of(params.task_id)]
        store.delete_task(params.task_id)
    except NotFound as e:
        return _not_found(e)

    persist()
    message = f"Task {params.task_id} deleted."
    if orphans:
        message += f"\nNow root tasks: {', '.join(orphans)}"
    return message


@mcp.tool(
    name="gantt_reparent",
    annotations=ToolAnnotations(
        title="Move Task Under Parent",
        readOnlyHint=False,
        destructiveHint=False,
        idempotentHint=True,
        openWorldHint=False,
    ),
)
async def gantt_reparent(params: ReparentInput) -> str:
    """
    Move a task (with its subtasks) under another parent, or to the top level.

    A task cannot go under itself or one of its own subtasks.

    Args:
        params: ReparentInput containing task_id and new_parent_id

    Returns:
        Confirmation, or the reason the move was refused
    """
    store = get_store()
    new_parent = params.new_parent_id or None
    try:
        store.update_task(params.task_id, TaskPatch(parent_id=new_parent))
    except NotFound as e:
        return _not_found(e)
    except InvalidOperation as e:
        return (
            f"Error: Move refused - {e}.\n"
            f"Tip: Use gantt_parent_candidates to see which parents are allowed."
        )

    persist()
    if new_parent is None:
        return f"Task {params.task_id} is now a root task."
    parent = store.get(new_parent)
    return f"Task {params.task_id} moved under {new_parent}.\nParent now spans {parent.start_date}..{parent.due_date}"


@mcp.tool(
    name="gantt_assign",
    annotations=ToolAnnotations(
        title="Drop Task Into Assignee Group",
        readOnlyHint=False,
        destructiveHint=False,
        idempotentHint=True,
        openWorldHint=False,
    ),
)
async def gantt_assign(params: AssignInput) -> str:
    """
    Reassign a task by dropping it onto an assignee group of the grouped list.

    A list drop makes the task a root of the new group; with detach=False
    (a bar dropped on the timeline) it keeps its parent.

    Examples:
        - Give task 1001 to Bob: task_id="1001", target="header-u2"
        - Unassign it: target="header-unassigned"

    Args:
        params: AssignInput containing task_id, target and detach

    Returns:
        Confirmation with the new assignee
    """
    store = get_store()
    user_id = assignee_from_row(params.target)
    if user_id is not None and store.reference.user_name(user_id) is None:
        return f"Error: User '{user_id}' not found.\nTip: Use gantt_master_list with kind='user' to see valid ids."
    try:
        task = store.apply_group_drop(params.task_id, user_id, detach=params.detach)
    except NotFound as e:
        return _not_found(e)
    except InvalidOperation as e:
        return f"Error: {e}"

    persist()
    who = store.reference.user_name(task.assignee_id) if task.assignee_id else "nobody"
    placement = " as a root task" if params.detach else ""
    return f"Task {task.id} assigned to {who}{placement}."


@mcp.tool(
    name="gantt_parent_candidates",
    annotations=ToolAnnotations(
        title="List Allowed Parents",
        readOnlyHint=True,
        destructiveHint=False,
        idempotentHint=True,
        openWorldHint=False,
    ),
)
async def gantt_parent_candidates(params: ParentCandidatesInput) -> str:
    """
    List the tasks a task may be moved under (everything except itself and
    its own subtasks).

    Args:
        params: ParentCandidatesInput containing task_id and response_format

    Returns:
        Candidate tasks
    """
    store = get_store()
    try:
        candidates = store.parent_candidates(params.task_id)
    except NotFound as e:
        return _not_found(e)

    if params.response_format == ResponseFormat.JSON:
        return json.dumps({"task_id": params.task_id, "candidates": [t.id for t in candidates]}, indent=2)
    if params.response_format == ResponseFormat.CONCISE:
        return _format_tasks_concise(candidates, f"parents for #{params.task_id}")
    return _format_tasks_markdown(candidates, f"Allowed parents for #{params.task_id}", store.reference)
