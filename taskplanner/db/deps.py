from taskplanner.config import settings
from taskplanner.db.section_store import SectionStore
from taskplanner.db.weekly_plan_store import WeeklyPlanStore


def get_section_store():
    yield SectionStore(settings.sections_dir)


def get_weekly_plan_store():
    yield WeeklyPlanStore(settings.weekly_plans_dir)
