from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Subject:
    """Domain entity: a course attendance is tracked against.

    Owned by the backend; read-only here.
    """

    id: int
    name: str
    code: Optional[str] = None
