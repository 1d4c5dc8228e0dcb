"""Reference lists (statuses, priorities, versions, users, holidays)."""

from __future__ import annotations

import datetime as dt
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from gantt_mcp.core.calendar import to_date


class User(BaseModel):
    """A person tasks can be assigned to."""

    id: str
    name: str
    avatar: str = ""


class Version(BaseModel):
    """A release/milestone tasks can be grouped under."""

    model_config = ConfigDict(populate_by_name=True)

    id: str
    name: str
    is_default: bool = Field(default=False, alias="isDefault")


class PriorityOption(BaseModel):
    """A priority level with its display color."""

    model_config = ConfigDict(populate_by_name=True)

    id: str
    name: str
    color: str = ""
    is_default: bool = Field(default=False, alias="isDefault")


class StatusOption(BaseModel):
    id: str
    name: str


class Holiday(BaseModel):
    """A non-working calendar day."""

    id: str | None = None
    date: dt.date
    name: str = ""

    @field_validator("date", mode="before")
    @classmethod
    def validate_date(cls, v: Any) -> Any:
        if isinstance(v, (str, dt.datetime)):
            return to_date(v)
        return v


DEFAULT_STATUSES = [
    StatusOption(id="New", name="New"),
    StatusOption(id="In Progress", name="In Progress"),
    StatusOption(id="Resolved", name="Resolved"),
    StatusOption(id="Closed", name="Closed"),
]

DEFAULT_PRIORITIES = [
    PriorityOption(id="p1", name="Low", color="text-gray-500"),
    PriorityOption(id="p2", name="Normal", color="text-blue-500", is_default=True),
    PriorityOption(id="p3", name="High", color="text-orange-500"),
    PriorityOption(id="p4", name="Urgent", color="text-red-500"),
]

DEFAULT_VERSIONS = [
    Version(id="v1", name="v1.0.0 Release", is_default=True),
    Version(id="v2", name="v1.1.0 Feature"),
]


class ReferenceData(BaseModel):
    """The small lookup lists a project document carries next to its tasks.

    Tasks only hold their ids; nothing in the scheduling core dereferences
    them except the assignee/version sort keys.
    """

    model_config = ConfigDict(validate_assignment=True)

    statuses: list[StatusOption] = Field(default_factory=lambda: list(DEFAULT_STATUSES))
    priorities: list[PriorityOption] = Field(default_factory=lambda: list(DEFAULT_PRIORITIES))
    versions: list[Version] = Field(default_factory=lambda: list(DEFAULT_VERSIONS))
    users: list[User] = Field(default_factory=list)
    holidays: list[Holiday] = Field(default_factory=list)

    def default_status_id(self) -> str:
        return self.statuses[0].id if self.statuses else "New"

    def default_priority_id(self) -> str:
        for p in self.priorities:
            if p.is_default:
                return p.id
        return self.priorities[0].id if self.priorities else ""

    def default_version_id(self) -> str | None:
        for v in self.versions:
            if v.is_default:
                return v.id
        return self.versions[0].id if self.versions else None

    def user_name(self, user_id: str | None) -> str | None:
        for u in self.users:
            if u.id == user_id:
                return u.name
        return None
