"""Pydantic models for Gantt MCP."""

from gantt_mcp.models.document import ProjectDocument
from gantt_mcp.models.inputs import (
    AddHolidayInput,
    AddTaskInput,
    AssignInput,
    DeleteTaskInput,
    DragInput,
    ExportCsvInput,
    GetTaskInput,
    HolidaysInput,
    ImportCsvInput,
    ListTasksInput,
    MasterAddInput,
    MasterListInput,
    MasterRemoveInput,
    ParentCandidatesInput,
    RemoveHolidayInput,
    ReparentInput,
    SetDurationInput,
    TimelineInput,
    UpdateTaskInput,
    WorkDaysInput,
)
from gantt_mcp.models.projection import MonthSpan, Placement, TimelineWindow, VisibleItem
from gantt_mcp.models.reference import (
    Holiday,
    PriorityOption,
    ReferenceData,
    StatusOption,
    User,
    Version,
)
from gantt_mcp.models.task import Task, TaskDraft, TaskPatch

__all__ = [
    # Task models
    "Task",
    "TaskPatch",
    "TaskDraft",
    # Reference lists
    "Holiday",
    "User",
    "Version",
    "PriorityOption",
    "StatusOption",
    "ReferenceData",
    "ProjectDocument",
    # Projection output models
    "Placement",
    "TimelineWindow",
    "MonthSpan",
    "VisibleItem",
    # Core input models
    "ListTasksInput",
    "GetTaskInput",
    "AddTaskInput",
    "UpdateTaskInput",
    "DeleteTaskInput",
    "ReparentInput",
    "AssignInput",
    "ParentCandidatesInput",
    # Scheduling input models
    "DragInput",
    "SetDurationInput",
    "WorkDaysInput",
    "TimelineInput",
    "HolidaysInput",
    "AddHolidayInput",
    "RemoveHolidayInput",
    # Reference list input models
    "MasterListInput",
    "MasterAddInput",
    "MasterRemoveInput",
    # Transfer input models
    "ExportCsvInput",
    "ImportCsvInput",
]
