from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict

from .model import Subject


class SubjectPayload(BaseModel):
    model_config = ConfigDict(extra="ignore")

    id: int
    name: str
    code: Optional[str] = None

    def to_domain(self) -> Subject:
        return Subject(id=self.id, name=self.name, code=self.code)
