from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, model_validator

from .model import Student


class StudentPayload(BaseModel):
    """Student as listed by the backend (a user with the STUDENT role).

    Older exports only carry `username`; it doubles as the display name then.
    """

    model_config = ConfigDict(extra="ignore")

    id: int
    name: Optional[str] = None
    username: Optional[str] = None

    @model_validator(mode="after")
    def _require_some_name(self) -> "StudentPayload":
        if not (self.name or self.username):
            raise ValueError("student needs a name or a username")
        return self

    def to_domain(self) -> Student:
        return Student(id=self.id, name=self.name or self.username or "", username=self.username)
