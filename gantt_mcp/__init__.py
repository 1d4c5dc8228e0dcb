"""
MCP Server for hierarchical Gantt scheduling.

This server keeps a tree of tasks whose parent tasks always span their
subtasks, schedules tasks in working days (skipping weekends and holidays),
and translates timeline drags into calendar edits while refusing edits that
would break the tree.
"""

# Re-export enums
from gantt_mcp.enums import DragKind, MasterKind, ResponseFormat, SortKey, SortOrder

# Re-export errors
from gantt_mcp.errors import GanttError, InvalidOperation, MalformedTree, NotFound

# Re-export models
from gantt_mcp.models import (
    AddHolidayInput,
    AddTaskInput,
    AssignInput,
    DeleteTaskInput,
    DragInput,
    ExportCsvInput,
    GetTaskInput,
    Holiday,
    HolidaysInput,
    ImportCsvInput,
    ListTasksInput,
    MasterAddInput,
    MasterListInput,
    MasterRemoveInput,
    MonthSpan,
    ParentCandidatesInput,
    Placement,
    PriorityOption,
    ProjectDocument,
    ReferenceData,
    RemoveHolidayInput,
    ReparentInput,
    SetDurationInput,
    StatusOption,
    Task,
    TaskDraft,
    TaskPatch,
    TimelineInput,
    TimelineWindow,
    UpdateTaskInput,
    User,
    Version,
    VisibleItem,
    WorkDaysInput,
)

# Re-export the scheduling core
from gantt_mcp.core.store import TaskStore

# Re-export MCP server instance
from gantt_mcp.server import get_store, mcp, set_store

# Re-export tools
from gantt_mcp.tools import (
    gantt_add,
    gantt_add_holiday,
    gantt_assign,
    gantt_delete,
    gantt_drag,
    gantt_export_csv,
    gantt_get,
    gantt_holidays,
    gantt_import_csv,
    gantt_list,
    gantt_master_add,
    gantt_master_list,
    gantt_master_remove,
    gantt_parent_candidates,
    gantt_remove_holiday,
    gantt_reparent,
    gantt_set_duration,
    gantt_timeline,
    gantt_update,
    gantt_work_days,
)

__all__ = [
    # Enums
    "ResponseFormat",
    "DragKind",
    "SortKey",
    "SortOrder",
    "MasterKind",
    # Errors
    "GanttError",
    "NotFound",
    "InvalidOperation",
    "MalformedTree",
    # Task and reference models
    "Task",
    "TaskPatch",
    "TaskDraft",
    "Holiday",
    "User",
    "Version",
    "PriorityOption",
    "StatusOption",
    "ReferenceData",
    "ProjectDocument",
    # Projection models
    "Placement",
    "TimelineWindow",
    "MonthSpan",
    "VisibleItem",
    # Input models
    "ListTasksInput",
    "GetTaskInput",
    "AddTaskInput",
    "UpdateTaskInput",
    "DeleteTaskInput",
    "ReparentInput",
    "AssignInput",
    "ParentCandidatesInput",
    "DragInput",
    "SetDurationInput",
    "WorkDaysInput",
    "TimelineInput",
    "HolidaysInput",
    "AddHolidayInput",
    "RemoveHolidayInput",
    "MasterListInput",
    "MasterAddInput",
    "MasterRemoveInput",
    "ExportCsvInput",
    "ImportCsvInput",
    # Core
    "TaskStore",
    # Core tools
    "gantt_list",
    "gantt_get",
    "gantt_add",
    "gantt_update",
    "gantt_delete",
    "gantt_reparent",
    "gantt_assign",
    "gantt_parent_candidates",
    # Scheduling tools
    "gantt_drag",
    "gantt_set_duration",
    "gantt_work_days",
    "gantt_timeline",
    "gantt_holidays",
    "gantt_add_holiday",
    "gantt_remove_holiday",
    # Reference list tools
    "gantt_master_list",
    "gantt_master_add",
    "gantt_master_remove",
    # Transfer tools
    "gantt_export_csv",
    "gantt_import_csv",
    # MCP server
    "mcp",
    "get_store",
    "set_store",
]
