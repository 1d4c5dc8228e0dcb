"""Enums for Gantt MCP."""

from enum import Enum


class ResponseFormat(str, Enum):
    """Output format for tool responses."""

    CONCISE = "concise"  # One line per task
    MARKDOWN = "markdown"  # Human-readable (default)
    JSON = "json"  # Machine-readable with all fields


class DragKind(str, Enum):
    """Kind of timeline gesture being translated into a calendar edit."""

    MOVE = "move"
    RESIZE_START = "resize-start"
    RESIZE_END = "resize-end"


class SortKey(str, Enum):
    """Fields the visible task list can be ordered by."""

    ID = "id"
    SUBJECT = "subject"
    START_DATE = "start_date"
    DUE_DATE = "due_date"
    ASSIGNEE = "assignee"
    VERSION = "version"


class SortOrder(str, Enum):
    """Sort direction applied at every sibling level."""

    ASC = "asc"
    DESC = "desc"


class MasterKind(str, Enum):
    """Editable reference lists."""

    USER = "user"
    VERSION = "version"
    PRIORITY = "priority"
