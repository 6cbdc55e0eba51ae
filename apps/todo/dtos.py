"""DTOs for Todo app."""
from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from ninja import Schema


@dataclass(frozen=True)
class TaskDTO:
    """Snapshot of a task, detached from the ORM row."""
    id: int
    title: str
    created_at: datetime
    completed_at: Optional[datetime]
    done: bool


class HealthOut(Schema):
    status: str
