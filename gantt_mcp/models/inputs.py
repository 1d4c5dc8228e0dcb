"""Input models for Gantt MCP tools."""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from gantt_mcp import config
from gantt_mcp.enums import DragKind, MasterKind, ResponseFormat, SortKey, SortOrder

# ============================================================================
# Core Tool Input Models
# ============================================================================


class ListTasksInput(BaseModel):
    """Input model for listing the task tree."""

    model_config = ConfigDict(str_strip_whitespace=True)

    sort_by: SortKey = Field(default=SortKey.DUE_DATE, description="Sort each sibling level by this field")
    sort_order: SortOrder = Field(default=SortOrder.ASC, description="'asc' or 'desc'")
    expand_all: bool = Field(default=True, description="Show every subtask; when false only 'expanded' ids open")
    expanded: list[str] = Field(default_factory=list, description="Task ids whose subtasks are shown")
    group_by_assignee: bool = Field(default=False, description="Group rows under one header per assignee")
    assignee_id: str | None = Field(default=None, description="Only tasks assigned to this user id")
    status: str | None = Field(default=None, description="Only tasks with this status id")
    priority_id: str | None = Field(default=None, description="Only tasks with this priority id")
    version_id: str | None = Field(default=None, description="Only tasks in this version id")
    search: str | None = Field(default=None, description="Case-insensitive text to find in subject or id")
    response_format: ResponseFormat = Field(
        default=ResponseFormat.MARKDOWN,
        description="Output format: 'markdown', 'concise' or 'json'",
    )


class GetTaskInput(BaseModel):
    """Input model for getting a single task."""

    model_config = ConfigDict(str_strip_whitespace=True)

    task_id: str = Field(..., description="Task id to retrieve", min_length=1)
    response_format: ResponseFormat = Field(
        default=ResponseFormat.MARKDOWN,
        description="Output format: 'markdown', 'concise' or 'json'",
    )


class AddTaskInput(BaseModel):
    """Input model for adding a new task."""

    model_config = ConfigDict(str_strip_whitespace=True)

    subject: str = Field(..., description="Task subject (required)", min_length=1, max_length=500)
    task_id: str | None = Field(default=None, description="Id for the new task; generated when omitted")
    description: str | None = Field(default=None, description="Longer free-text description")
    status: str | None = Field(default=None, description="Status id, e.g. 'New' or 'In Progress'")
    priority_id: str | None = Field(default=None, description="Priority id (defaults to the default priority)")
    assignee_id: str | None = Field(default=None, description="User id of the assignee")
    version_id: str | None = Field(default=None, description="Version id (defaults to the default version)")
    parent_id: str | None = Field(default=None, description="Parent task id; omit for a root task")
    start_date: str | None = Field(default=None, description="Start date YYYY-MM-DD (defaults to today)")
    due_date: str | None = Field(
        default=None,
        description="Due date YYYY-MM-DD; omit to derive it from start_date and estimated_days",
    )
    estimated_days: float | None = Field(default=None, description="Duration in working days", gt=0)
    progress: int | None = Field(default=None, description="Percent complete", ge=0, le=100)

    @field_validator("subject")
    @classmethod
    def validate_subject(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("Subject cannot be empty")
        return v.strip()


class UpdateTaskInput(BaseModel):
    """Input model for patching a task."""

    model_config = ConfigDict(str_strip_whitespace=True)

    task_id: str = Field(..., description="Task id to update", min_length=1)
    subject: str | None = Field(default=None, description="New subject")
    description: str | None = Field(default=None, description="New description")
    status: str | None = Field(default=None, description="New status id")
    priority_id: str | None = Field(default=None, description="New priority id")
    assignee_id: str | None = Field(default=None, description="New assignee id (empty string to unassign)")
    version_id: str | None = Field(default=None, description="New version id (empty string to clear)")
    parent_id: str | None = Field(default=None, description="New parent id (empty string to make it a root)")
    start_date: str | None = Field(default=None, description="New start date YYYY-MM-DD")
    due_date: str | None = Field(default=None, description="New due date YYYY-MM-DD (recomputes the duration)")
    estimated_days: float | None = Field(default=None, description="New duration in working days", gt=0)
    progress: int | None = Field(default=None, description="Percent complete", ge=0, le=100)


class DeleteTaskInput(BaseModel):
    """Input model for deleting a task."""

    model_config = ConfigDict(str_strip_whitespace=True)

    task_id: str = Field(..., description="Task id to delete; its subtasks become root tasks", min_length=1)


class ReparentInput(BaseModel):
    """Input model for moving a task under another parent."""

    model_config = ConfigDict(str_strip_whitespace=True)

    task_id: str = Field(..., description="Task id to move", min_length=1)
    new_parent_id: str | None = Field(
        default=None,
        description="New parent task id; omit or empty string to make the task a root",
    )


class AssignInput(BaseModel):
    """Input model for dropping a task into an assignee group."""

    model_config = ConfigDict(str_strip_whitespace=True)

    task_id: str = Field(..., description="Task id being dropped", min_length=1)
    target: str | None = Field(
        default=None,
        description="Group row id ('header-u1', 'header-unassigned') or a user id; omit to unassign",
    )
    detach: bool = Field(
        default=True,
        description="Make the task a root of its new group (list drop); false keeps the parent (bar drop)",
    )


class ParentCandidatesInput(BaseModel):
    """Input model for listing legal parents of a task."""

    model_config = ConfigDict(str_strip_whitespace=True)

    task_id: str = Field(..., description="Task id about to be reparented", min_length=1)
    response_format: ResponseFormat = Field(
        default=ResponseFormat.CONCISE,
        description="Output format: 'markdown', 'concise' or 'json'",
    )


# ============================================================================
# Scheduling Tool Input Models
# ============================================================================


class DragInput(BaseModel):
    """Input model for a timeline drag gesture."""

    model_config = ConfigDict(str_strip_whitespace=True)

    task_id: str = Field(..., description="Task whose bar is dragged", min_length=1)
    kind: DragKind = Field(default=DragKind.MOVE, description="'move', 'resize-start' or 'resize-end'")
    delta_days: int | None = Field(default=None, description="Signed offset in calendar days")
    delta_px: float | None = Field(default=None, description="Signed offset in pixels (converted with day_width)")
    day_width: int = Field(default=config.DAY_WIDTH, description="Pixels per day on the timeline", ge=1)
    allow_subtree: bool = Field(default=False, description="Allow moving a parent task with all its subtasks")
    clamp_to_timeline: bool = Field(default=True, description="Keep the result inside the visible timeline")

    @model_validator(mode="after")
    def check_delta(self) -> "DragInput":
        if (self.delta_days is None) == (self.delta_px is None):
            raise ValueError("Give exactly one of delta_days or delta_px")
        return self


class SetDurationInput(BaseModel):
    """Input model for changing a task's duration."""

    model_config = ConfigDict(str_strip_whitespace=True)

    task_id: str = Field(..., description="Leaf task id", min_length=1)
    work_days: float = Field(..., description="New duration in working days", gt=0)


class WorkDaysInput(BaseModel):
    """Input model for the working-day calculator."""

    model_config = ConfigDict(str_strip_whitespace=True)

    start_date: str = Field(..., description="First day, YYYY-MM-DD")
    work_days: float | None = Field(default=None, description="Working days to advance (counting the start)", gt=0)
    end_date: str | None = Field(default=None, description="Last day, YYYY-MM-DD, to count working days up to")

    @model_validator(mode="after")
    def check_question(self) -> "WorkDaysInput":
        if self.work_days is None and self.end_date is None:
            raise ValueError("Give work_days, end_date, or both")
        return self


class TimelineInput(BaseModel):
    """Input model for bar placements."""

    model_config = ConfigDict(str_strip_whitespace=True)

    day_width: int = Field(default=config.DAY_WIDTH, description="Pixels per day", ge=1)
    row_height: int = Field(default=config.ROW_HEIGHT, description="Pixels per task row", ge=1)
    response_format: ResponseFormat = Field(
        default=ResponseFormat.MARKDOWN, description="Output format: 'markdown' or 'json'"
    )


class HolidaysInput(BaseModel):
    """Input model for listing holidays."""

    model_config = ConfigDict(str_strip_whitespace=True)

    response_format: ResponseFormat = Field(
        default=ResponseFormat.MARKDOWN, description="Output format: 'markdown' or 'json'"
    )


class AddHolidayInput(BaseModel):
    """Input model for registering a holiday."""

    model_config = ConfigDict(str_strip_whitespace=True)

    date: str = Field(..., description="Holiday date YYYY-MM-DD")
    name: str = Field(..., description="Label, e.g. 'New Year'", min_length=1, max_length=200)


class RemoveHolidayInput(BaseModel):
    """Input model for removing a holiday."""

    model_config = ConfigDict(str_strip_whitespace=True)

    date: str = Field(..., description="Holiday date YYYY-MM-DD")


# ============================================================================
# Reference List Input Models
# ============================================================================


class MasterListInput(BaseModel):
    """Input model for listing users, versions or priorities."""

    kind: MasterKind = Field(..., description="'user', 'version' or 'priority'")
    response_format: ResponseFormat = Field(
        default=ResponseFormat.MARKDOWN, description="Output format: 'markdown' or 'json'"
    )


class MasterAddInput(BaseModel):
    """Input model for adding a user, version or priority."""

    model_config = ConfigDict(str_strip_whitespace=True)

    kind: MasterKind = Field(..., description="'user', 'version' or 'priority'")
    name: str = Field(..., description="Display name", min_length=1, max_length=200)
    color: str | None = Field(default=None, description="Priority color class, e.g. 'text-red-500'")
    is_default: bool = Field(default=False, description="Make this the default version or priority")

    @model_validator(mode="after")
    def check_kind_fields(self) -> "MasterAddInput":
        if self.kind == MasterKind.USER and self.is_default:
            raise ValueError("Users have no default")
        if self.color is not None and self.kind != MasterKind.PRIORITY:
            raise ValueError("Only priorities have a color")
        return self


class MasterRemoveInput(BaseModel):
    """Input model for removing a user, version or priority."""

    model_config = ConfigDict(str_strip_whitespace=True)

    kind: MasterKind = Field(..., description="'user', 'version' or 'priority'")
    item_id: str = Field(..., description="Id of the entry to remove", min_length=1)


# ============================================================================
# Transfer Tool Input Models
# ============================================================================


CsvKind = Literal["tasks", "holidays", "users"]


class ExportCsvInput(BaseModel):
    """Input model for CSV export."""

    model_config = ConfigDict(str_strip_whitespace=True)

    what: CsvKind = Field(default="tasks", description="'tasks', 'holidays' or 'users'")
    bom: bool = Field(default=False, description="Prefix a UTF-8 byte order mark for spreadsheet apps")


class ImportCsvInput(BaseModel):
    """Input model for CSV import (replaces the current list)."""

    what: CsvKind = Field(default="tasks", description="'tasks', 'holidays' or 'users'")
    csv_text: str = Field(..., description="CSV content including the header row", min_length=1)
