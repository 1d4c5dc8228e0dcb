"""Read-only models produced by the scheduling projection."""

from __future__ import annotations

import datetime as dt
from typing import Literal

from pydantic import BaseModel, Field, model_validator

from gantt_mcp.models.reference import User
from gantt_mcp.models.task import Task


class Placement(BaseModel):
    """Horizontal position of a task bar, in pixels from the timeline start."""

    offset: int
    width: int


class TimelineWindow(BaseModel):
    """Inclusive range of dates the timeline shows; drag edits are clamped to it."""

    start: dt.date
    end: dt.date

    @model_validator(mode="after")
    def check_order(self) -> TimelineWindow:
        if self.start > self.end:
            raise ValueError("Timeline start must not be after its end")
        return self


class MonthSpan(BaseModel):
    """Width of one month's header cell."""

    year: int
    month: int
    width: int


class VisibleItem(BaseModel):
    """One row of the task list: either a task or an assignee group header."""

    kind: Literal["task", "header"] = "task"
    task: Task | None = None
    user: User | None = None
    depth: int = 0
    has_children: bool = False
    header_id: str | None = Field(default=None, description="Set on header rows, e.g. 'header-u1'")

    @property
    def row_id(self) -> str:
        if self.kind == "header":
            return self.header_id or "header-unassigned"
        return self.task.id if self.task else ""
