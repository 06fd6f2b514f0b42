from datetime import date
from typing import Optional

from pydantic import BaseModel, field_validator

from taskplanner.core.dates import coerce_date


class WeeklyPlan(BaseModel):
    week_start: date          # Monday of the week
    short_week_note: Optional[str] = None
    content: str = ""

    @field_validator("week_start", mode="before")
    @classmethod
    def _drop_time_of_day(cls, value):
        return coerce_date(value)
