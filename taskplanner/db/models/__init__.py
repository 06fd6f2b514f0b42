# taskplanner/db/models/__init__.py
from .section import Section, Task, TaskPriority, PRIORITY_ORDER
from .weekly_plan import WeeklyPlan
