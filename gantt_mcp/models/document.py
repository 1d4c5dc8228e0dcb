"""The persisted project document."""

from __future__ import annotations

from pydantic import BaseModel, Field

from gantt_mcp.models.reference import (
    DEFAULT_PRIORITIES,
    DEFAULT_STATUSES,
    DEFAULT_VERSIONS,
    Holiday,
    PriorityOption,
    ReferenceData,
    StatusOption,
    User,
    Version,
)
from gantt_mcp.models.task import Task


class ProjectDocument(BaseModel):
    """Everything a project saves: its tasks plus the reference lists."""

    tasks: list[Task] = Field(default_factory=list)
    users: list[User] = Field(default_factory=list)
    versions: list[Version] = Field(default_factory=lambda: list(DEFAULT_VERSIONS))
    priorities: list[PriorityOption] = Field(default_factory=lambda: list(DEFAULT_PRIORITIES))
    statuses: list[StatusOption] = Field(default_factory=lambda: list(DEFAULT_STATUSES))
    holidays: list[Holiday] = Field(default_factory=list)

    def reference(self) -> ReferenceData:
        return ReferenceData(
            statuses=self.statuses,
            priorities=self.priorities,
            versions=self.versions,
            users=self.users,
            holidays=self.holidays,
        )
