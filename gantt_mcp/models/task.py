"""Core task models for Gantt MCP."""

from __future__ import annotations

import datetime as dt
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from gantt_mcp.core.calendar import effective_work_days, to_date

_TASK_CONFIG = ConfigDict(
    extra="forbid",
    populate_by_name=True,
    str_strip_whitespace=True,
)


def _coerce_date(v: Any) -> Any:
    if isinstance(v, (str, dt.datetime)):
        return to_date(v)
    return v


def _coerce_ref(v: Any) -> Any:
    # Spreadsheet exports write missing references as empty cells
    if v == "":
        return None
    return v


def _coerce_duration(v: Any) -> Any:
    # Durations are whole working days; blank, zero or negative means one
    if v is None or v == "":
        return 1
    if isinstance(v, str):
        v = float(v)
    if isinstance(v, (int, float)) and not isinstance(v, bool):
        return effective_work_days(v)
    return v


class Task(BaseModel):
    """
    A schedulable work item (a "ticket").

    ``estimated_hours`` counts working days, not wall-clock hours. Role
    (leaf or container) is not stored; the store derives it from the
    children that point at this task.
    """

    model_config = ConfigDict(**_TASK_CONFIG, frozen=True)

    id: str = Field(..., min_length=1)
    subject: str = ""
    description: str = ""
    status_id: str = Field(default="New", alias="status")
    priority_id: str = Field(default="", alias="priorityId")
    version_id: str | None = Field(default=None, alias="versionId")
    assignee_id: str | None = Field(default=None, alias="assigneeId")
    parent_id: str | None = Field(default=None, alias="parentId")
    start_date: dt.date = Field(..., alias="startDate")
    due_date: dt.date = Field(..., alias="dueDate")
    progress: int = Field(default=0, ge=0, le=100)
    estimated_hours: int = Field(default=1, ge=1, alias="estimatedHours")

    @field_validator("start_date", "due_date", mode="before")
    @classmethod
    def validate_dates(cls, v: Any) -> Any:
        return _coerce_date(v)

    @field_validator("version_id", "assignee_id", "parent_id", mode="before")
    @classmethod
    def validate_refs(cls, v: Any) -> Any:
        return _coerce_ref(v)

    @field_validator("estimated_hours", mode="before")
    @classmethod
    def validate_estimated_hours(cls, v: Any) -> Any:
        return _coerce_duration(v)

    @model_validator(mode="after")
    def check_consistency(self) -> Task:
        if self.start_date > self.due_date:
            raise ValueError(f"startDate {self.start_date} is after dueDate {self.due_date}")
        if self.parent_id == self.id:
            raise ValueError(f"Task '{self.id}' cannot be its own parent")
        return self

    def to_record(self) -> dict[str, Any]:
        """Plain camelCase dict with ISO dates, as stored in documents."""
        return self.model_dump(mode="json", by_alias=True)


class TaskPatch(BaseModel):
    """
    Partial update for a task: one optional value per known field.

    Only fields that were actually supplied are applied, so ``parent_id=None``
    (make root) differs from leaving ``parent_id`` out.
    """

    model_config = _TASK_CONFIG

    subject: str | None = None
    description: str | None = None
    status_id: str | None = Field(default=None, alias="status")
    priority_id: str | None = Field(default=None, alias="priorityId")
    version_id: str | None = Field(default=None, alias="versionId")
    assignee_id: str | None = Field(default=None, alias="assigneeId")
    parent_id: str | None = Field(default=None, alias="parentId")
    start_date: dt.date | None = Field(default=None, alias="startDate")
    due_date: dt.date | None = Field(default=None, alias="dueDate")
    progress: int | None = Field(default=None, ge=0, le=100)
    estimated_hours: int | None = Field(default=None, ge=1, alias="estimatedHours")

    @field_validator("start_date", "due_date", mode="before")
    @classmethod
    def validate_dates(cls, v: Any) -> Any:
        return _coerce_date(v)

    @field_validator("version_id", "assignee_id", "parent_id", mode="before")
    @classmethod
    def validate_refs(cls, v: Any) -> Any:
        return _coerce_ref(v)

    @field_validator("estimated_hours", mode="before")
    @classmethod
    def validate_estimated_hours(cls, v: Any) -> Any:
        if v is None:
            return None
        return _coerce_duration(v)

    def changes(self) -> dict[str, Any]:
        """Snake-case mapping of the fields that were explicitly set."""
        return {name: getattr(self, name) for name in self.model_fields_set}


class TaskDraft(TaskPatch):
    """Fields for a new task; the caller assigns the id."""

    id: str = Field(..., min_length=1)
