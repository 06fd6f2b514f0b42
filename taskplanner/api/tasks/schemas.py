from pydantic import BaseModel, field_validator
from typing import Optional
from datetime import date, datetime

from taskplanner.core.dates import coerce_date
from taskplanner.db.models.section import TaskPriority

class TaskCreate(BaseModel):
    section_name: str
    description: str
    priority: TaskPriority
    due_date: Optional[date] = None         # 🗓 Due Date
    comments: Optional[str] = None

    @field_validator("due_date", mode="before")
    @classmethod
    def _truncate_due_date(cls, value):
        return coerce_date(value)

class TaskUpdate(BaseModel):
    description: Optional[str] = None
    priority: Optional[TaskPriority] = None
    due_date: Optional[date] = None
    comments: Optional[str] = None
    completed: Optional[bool] = None

    @field_validator("due_date", mode="before")
    @classmethod
    def _truncate_due_date(cls, value):
        return coerce_date(value)

class TaskUpdateInput(TaskUpdate):
    section_name: str
    task_id: str

class TaskDelete(BaseModel):
    section_name: str
    task_id: str

class TaskOut(BaseModel):
    id: str
    description: str
    priority: TaskPriority
    due_date: Optional[date] = None
    comments: Optional[str] = None
    completed: bool
    created_at: datetime
    updated_at: datetime

    model_config = {
        "from_attributes": True
    }
