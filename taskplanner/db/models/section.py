from datetime import date, datetime, timezone
from typing import List, Literal, Optional

from pydantic import BaseModel, Field, field_validator

from taskplanner.core.dates import coerce_date

TaskPriority = Literal["High", "Medium", "Low"]

PRIORITY_ORDER = {"High": 0, "Medium": 1, "Low": 2}


class Task(BaseModel):
    id: str
    description: str
    priority: TaskPriority
    due_date: Optional[date] = None            # 🗓 Due Date
    comments: Optional[str] = None
    completed: bool = False
    created_at: datetime
    updated_at: datetime

    @field_validator("due_date", mode="before")
    @classmethod
    def _truncate_due_date(cls, value):
        return coerce_date(value)

    @field_validator("created_at", "updated_at")
    @classmethod
    def _assume_utc(cls, value: datetime) -> datetime:
        if value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value


class Section(BaseModel):
    name: str
    tasks: List[Task] = Field(default_factory=list)
