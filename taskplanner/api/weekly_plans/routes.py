from datetime import date
from typing import Optional

from fastapi import APIRouter, Depends
from taskplanner.db.deps import get_weekly_plan_store
from taskplanner.db.weekly_plan_store import WeeklyPlanStore
from . import schemas, services

router = APIRouter()

@router.get("/", response_model=list[schemas.WeeklyPlanOut])
def read_weekly_plans(store: WeeklyPlanStore = Depends(get_weekly_plan_store)):
    return services.get_all_weekly_plans(store)

@router.post("/", response_model=schemas.WeeklyPlanOut)
def create_weekly_plan(
    plan: schemas.WeeklyPlanCreate,
    store: WeeklyPlanStore = Depends(get_weekly_plan_store)
):
    return services.create_weekly_plan(store, plan)

@router.get("/template", response_model=schemas.WeeklyPlanTemplateOut)
def read_template(week_start: Optional[date] = None):
    """
    Day-by-day skeleton for a week, defaulting to the current week.
    """
    week_start = week_start or services.get_current_week_start()
    return {"week_start": week_start, "content": services.get_weekly_plan_template(week_start)}

@router.get("/{week_start}", response_model=Optional[schemas.WeeklyPlanOut])
def read_weekly_plan(week_start: date, store: WeeklyPlanStore = Depends(get_weekly_plan_store)):
    return services.get_weekly_plan(store, week_start)

@router.put("/{week_start}", response_model=schemas.WeeklyPlanOut)
def update_weekly_plan(
    week_start: date,
    plan: schemas.WeeklyPlanUpdate,
    store: WeeklyPlanStore = Depends(get_weekly_plan_store)
):
    return services.update_weekly_plan(store, week_start, plan)

@router.delete("/{week_start}")
def delete_weekly_plan(week_start: date, store: WeeklyPlanStore = Depends(get_weekly_plan_store)):
    services.delete_weekly_plan(store, week_start)
    return {"message": "Weekly plan deleted"}

@router.post("/{week_start}/duplicate", response_model=schemas.WeeklyPlanOut)
def duplicate_weekly_plan(
    week_start: date,
    body: schemas.WeeklyPlanDuplicateBody,
    store: WeeklyPlanStore = Depends(get_weekly_plan_store)
):
    return services.duplicate_weekly_plan(store, week_start, body.target_week_start)
