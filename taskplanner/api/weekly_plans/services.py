import logging
from datetime import date
from typing import Optional

from taskplanner.core.dates import format_week_key, get_monday
from taskplanner.core.errors import AlreadyExistsError, NotFoundError, StorageError
from taskplanner.db.models.weekly_plan import WeeklyPlan
from taskplanner.db.weekly_plan_store import WeeklyPlanStore
from . import schemas
from .markdown import decode_plan, encode_plan, generate_template, retarget_week_headings

logger = logging.getLogger(__name__)


def _clean_note(note: Optional[str]) -> Optional[str]:
    # a blank note could never be read back
    if note and note.strip():
        return note
    return None


def _decode(week_start: date, text: str) -> WeeklyPlan:
    short_week_note, content = decode_plan(text)
    return WeeklyPlan(week_start=week_start, short_week_note=short_week_note, content=content)


def get_current_week_start(today: Optional[date] = None) -> date:
    return get_monday(today or date.today())

def get_weekly_plan_template(week_start: date) -> str:
    return generate_template(week_start)

def get_weekly_plan(store: WeeklyPlanStore, week_start: date) -> Optional[WeeklyPlan]:
    text = store.read(week_start)
    if text is None:
        return None
    return _decode(week_start, text)

def get_all_weekly_plans(store: WeeklyPlanStore) -> list[WeeklyPlan]:
    plans = []
    for week_start, path in store.entries():
        try:
            text = store.read(week_start)
        except StorageError as e:
            logger.error("Skipping weekly plan file %s: %s", path.name, e.message)
            continue
        if text is not None:
            plans.append(_decode(week_start, text))
    plans.sort(key=lambda p: p.week_start, reverse=True)
    return plans

def create_weekly_plan(store: WeeklyPlanStore, plan: schemas.WeeklyPlanCreate) -> WeeklyPlan:
    if store.exists(plan.week_start):
        raise AlreadyExistsError(f"Weekly plan for {format_week_key(plan.week_start)} already exists")
    content = plan.content if plan.content is not None else generate_template(plan.week_start)
    short_week_note = _clean_note(plan.short_week_note)
    store.write(plan.week_start, encode_plan(short_week_note, content))
    logger.info("Created weekly plan %s", format_week_key(plan.week_start))
    return WeeklyPlan(week_start=plan.week_start, short_week_note=short_week_note, content=content)

def update_weekly_plan(store: WeeklyPlanStore, week_start: date, plan: schemas.WeeklyPlanUpdate) -> WeeklyPlan:
    text = store.read(week_start)
    if text is None:
        raise NotFoundError(f"Weekly plan for {format_week_key(week_start)} not found")
    current = _decode(week_start, text)

    changes = plan.model_dump(exclude_unset=True)
    short_week_note = _clean_note(changes.get("short_week_note", current.short_week_note))
    content = changes.get("content")
    if content is None:
        content = current.content

    store.write(week_start, encode_plan(short_week_note, content))
    logger.info("Updated weekly plan %s", format_week_key(week_start))
    return WeeklyPlan(week_start=week_start, short_week_note=short_week_note, content=content)

def delete_weekly_plan(store: WeeklyPlanStore, week_start: date) -> bool:
    if not store.exists(week_start):
        raise NotFoundError(f"Weekly plan for {format_week_key(week_start)} not found")
    store.delete(week_start)
    logger.info("Deleted weekly plan %s", format_week_key(week_start))
    return True

def duplicate_weekly_plan(store: WeeklyPlanStore, source_week_start: date, target_week_start: date) -> WeeklyPlan:
    source_text = store.read(source_week_start)
    if source_text is None:
        raise NotFoundError(f"Source weekly plan not found: {format_week_key(source_week_start)}")
    if store.exists(target_week_start):
        raise AlreadyExistsError(f"Target weekly plan already exists: {format_week_key(target_week_start)}")

    text = retarget_week_headings(source_text, target_week_start)
    store.write(target_week_start, text)
    logger.info("Duplicated weekly plan %s to %s",
                format_week_key(source_week_start), format_week_key(target_week_start))
    return _decode(target_week_start, text)
