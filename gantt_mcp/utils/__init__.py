"""Utility functions for Gantt MCP."""

from gantt_mcp.utils.csv_codec import (
    csv_to_holidays,
    csv_to_tasks,
    csv_to_users,
    holidays_to_csv,
    tasks_to_csv,
    users_to_csv,
)
from gantt_mcp.utils.formatters import (
    _format_task_concise,
    _format_task_markdown,
    _format_tasks_concise,
    _format_tasks_markdown,
    _format_visible_items,
)
from gantt_mcp.utils.storage import load_document, save_document

__all__ = [
    "_format_task_concise",
    "_format_task_markdown",
    "_format_tasks_concise",
    "_format_tasks_markdown",
    "_format_visible_items",
    "tasks_to_csv",
    "csv_to_tasks",
    "holidays_to_csv",
    "csv_to_holidays",
    "users_to_csv",
    "csv_to_users",
    "load_document",
    "save_document",
]
