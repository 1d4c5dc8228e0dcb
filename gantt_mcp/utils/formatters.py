"""Formatting utilities for task output."""

from gantt_mcp.models.projection import VisibleItem
from gantt_mcp.models.reference import ReferenceData
from gantt_mcp.models.task import Task


def _lookup(items: list, item_id: str | None) -> str | None:
    for item in items:
        if item.id == item_id:
            return item.name
    return None


def _format_task_concise(task: Task) -> str:
    """
    Format a single task in one line.

    Output: "#1001: Design review (2025-02-03..2025-02-07, 5d, 40%)"
    """
    subject = task.subject[:50] if task.subject else "No subject"
    meta = [f"{task.start_date}..{task.due_date}", f"{task.estimated_hours}d"]
    if task.progress:
        meta.append(f"{task.progress}%")
    if task.parent_id:
        meta.append(f"parent:{task.parent_id}")
    return f"#{task.id}: {subject} ({', '.join(meta)})"


def _format_tasks_concise(tasks: list[Task], title: str | None = None) -> str:
    """
    Format a list of tasks one per line, under a count header.

    Output:
    2 task(s) | Sprint 3
    #1: Task one (2025-02-03..2025-02-04, 2d)
    #2: Task two (2025-02-05..2025-02-05, 1d)
    """
    if not tasks:
        return "0 tasks"

    header = f"{len(tasks)} task(s)"
    if title:
        header = f"{len(tasks)} task(s) | {title}"
    return "\n".join([header] + [_format_task_concise(t) for t in tasks])


def _format_task_markdown(task: Task, reference: ReferenceData | None = None, container: bool = False) -> str:
    """Format a single task as markdown."""
    lines = []

    icon = "▣" if container else "▭"
    lines.append(f"### {icon} [{task.id}] {task.subject or 'No subject'}")

    details = [f"**Status**: {task.status_id}"]
    if reference is not None:
        priority = _lookup(reference.priorities, task.priority_id)
        assignee = reference.user_name(task.assignee_id)
        version = _lookup(reference.versions, task.version_id)
    else:
        priority, assignee, version = task.priority_id or None, task.assignee_id, task.version_id
    if priority:
        details.append(f"**Priority**: {priority}")
    if assignee:
        details.append(f"**Assignee**: {assignee}")
    if version:
        details.append(f"**Version**: {version}")
    lines.append(" | ".join(details))

    schedule = [f"**Dates**: {task.start_date} → {task.due_date}"]
    if container:
        schedule.append("(rolled up from subtasks)")
    else:
        schedule.append(f"**Work days**: {task.estimated_hours}")
    schedule.append(f"**Progress**: {task.progress}%")
    if task.parent_id:
        schedule.append(f"**Parent**: #{task.parent_id}")
    lines.append(" | ".join(schedule))

    if task.description:
        lines.append("")
        lines.append(task.description)

    return "\n".join(lines)


def _format_tasks_markdown(tasks: list[Task], title: str = "Tasks", reference: ReferenceData | None = None) -> str:
    """Format a list of tasks as markdown."""
    if not tasks:
        return f"# {title}\n\nNo tasks found."

    lines = [f"# {title}", f"*{len(tasks)} task(s)*", ""]

    for task in tasks:
        lines.append(_format_task_markdown(task, reference))
        lines.append("")

    return "\n".join(lines)


def _format_visible_items(items: list[VisibleItem], expanded: set[str], title: str = "Tasks") -> str:
    """
    Format task-list rows as an indented markdown outline.

    Output:
    - [-] #1: Release (2025-02-03..2025-02-14)
      - #2: Build (2025-02-03..2025-02-07, 5d)
    """
    task_count = sum(1 for i in items if i.kind == "task")
    if not task_count:
        return f"# {title}\n\nNo tasks found."

    lines = [f"# {title}", f"*{task_count} visible task(s)*", ""]
    for item in items:
        if item.kind == "header":
            name = item.user.name if item.user else "Unassigned"
            lines.append(f"## {name}")
            continue
        task = item.task
        indent = "  " * item.depth
        if item.has_children:
            marker = "[-] " if task.id in expanded else "[+] "
            span = f"{task.start_date}..{task.due_date}"
        else:
            marker = ""
            span = f"{task.start_date}..{task.due_date}, {task.estimated_hours}d"
        lines.append(f"{indent}- {marker}#{task.id}: {task.subject or 'No subject'} ({span})")
    return "\n".join(lines)


def _format_reference_items(items: list, title: str) -> str:
    """
    Format a user, version or priority list as markdown bullets.

    Output:
    # Versions
    *2 item(s)*

    - **v1** v1.0.0 Release (default)
    - **v2** v1.1.0 Feature
    """
    if not items:
        return f"# {title}\n\nNone registered."

    lines = [f"# {title}", f"*{len(items)} item(s)*", ""]
    for item in items:
        line = f"- **{item.id}** {item.name}"
        color = getattr(item, "color", "")
        if color:
            line += f" [{color}]"
        if getattr(item, "is_default", False):
            line += " (default)"
        lines.append(line)
    return "\n".join(lines)
