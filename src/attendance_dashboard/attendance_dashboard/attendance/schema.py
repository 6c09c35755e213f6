from __future__ import annotations

import re
from datetime import date, datetime
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from ..core.enums import AttendanceStatus
from .model import AttendanceEvent

_ISO_DATE_ONLY = re.compile(r"^\d{4}-\d{2}-\d{2}$")


class _EntityRef(BaseModel):
    """Nested entity as the backend serializes relations (`subject`, `student`, `markedBy`)."""

    model_config = ConfigDict(extra="ignore")

    id: int
    name: Optional[str] = None
    username: Optional[str] = None


class AttendanceEventPayload(BaseModel):
    """One item of `GET /students/{id}/attendance` or `GET /attendance/today`.

    Both the flat shape (`subjectId`, `studentId`) and the entity shape with
    nested `subject` / `student` objects are accepted.
    """

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    id: Optional[int] = None
    subject_id: Optional[int] = Field(default=None, alias="subjectId")
    subject: Optional[_EntityRef] = None
    student_id: Optional[int] = Field(default=None, alias="studentId")
    student_name: Optional[str] = Field(default=None, alias="studentName")
    student: Optional[_EntityRef] = None
    status: AttendanceStatus
    marked_at: Optional[datetime] = Field(default=None, alias="markedAt")
    attendance_date: Optional[date] = Field(default=None, alias="date")
    updated_at: Optional[datetime] = Field(default=None, alias="updatedAt")
    created_at: Optional[datetime] = Field(default=None, alias="createdAt")
    marked_by: Optional[int] = Field(default=None, alias="markedBy")

    @field_validator("status", mode="before")
    @classmethod
    def _normalize_status(cls, value: Any) -> Any:
        if isinstance(value, str):
            return value.strip().upper()
        return value

    @field_validator("marked_at", "updated_at", "created_at", mode="before")
    @classmethod
    def _date_only_is_midnight(cls, value: Any) -> Any:
        # markedAt is sometimes exported as a bare calendar date
        if isinstance(value, str) and _ISO_DATE_ONLY.match(value.strip()):
            return f"{value.strip()}T00:00:00"
        return value

    @field_validator("marked_by", mode="before")
    @classmethod
    def _marked_by_id(cls, value: Any) -> Any:
        if isinstance(value, dict):
            return value.get("id")
        return value

    @model_validator(mode="after")
    def _resolve_refs(self) -> "AttendanceEventPayload":
        if self.subject_id is None and self.subject is not None:
            self.subject_id = self.subject.id
        if self.subject_id is None:
            raise ValueError("subjectId (or subject.id) is required")

        if self.student is not None:
            if self.student_id is None:
                self.student_id = self.student.id
            if self.student_name is None:
                self.student_name = self.student.name or self.student.username
        return self

    def to_domain(self) -> AttendanceEvent:
        return AttendanceEvent(
            subject_id=int(self.subject_id),
            status=self.status,
            marked_at=self.marked_at,
            attendance_date=self.attendance_date,
            updated_at=self.updated_at,
            created_at=self.created_at,
            student_id=self.student_id,
            student_name=self.student_name,
            marked_by=self.marked_by,
            event_id=self.id,
        )
