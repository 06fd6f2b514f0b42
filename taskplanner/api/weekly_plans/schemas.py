from pydantic import BaseModel, field_validator
from typing import Optional
from datetime import date

from taskplanner.core.dates import coerce_date

class WeekStartMixin(BaseModel):
    @field_validator("week_start", "source_week_start", "target_week_start",
                     mode="before", check_fields=False)
    @classmethod
    def _drop_time_of_day(cls, value):
        return coerce_date(value)

class WeeklyPlanGet(WeekStartMixin):
    week_start: date

class WeeklyPlanCreate(WeekStartMixin):
    week_start: date
    short_week_note: Optional[str] = None
    content: Optional[str] = None   # None -> day-by-day template

class WeeklyPlanUpdate(BaseModel):
    # Unset fields keep their stored value; an explicit null note clears it
    short_week_note: Optional[str] = None
    content: Optional[str] = None

class WeeklyPlanUpdateInput(WeeklyPlanUpdate, WeekStartMixin):
    week_start: date

class WeeklyPlanDuplicate(WeekStartMixin):
    source_week_start: date
    target_week_start: date

class WeeklyPlanDuplicateBody(WeekStartMixin):
    target_week_start: date

class WeeklyPlanOut(BaseModel):
    week_start: date
    short_week_note: Optional[str] = None
    content: str

    model_config = {
        "from_attributes": True
    }

class WeeklyPlanTemplateOut(BaseModel):
    week_start: date
    content: str
