"""Named-operation endpoint used by the browser client.

``POST /rpc/<operation>`` with the operation input as the JSON body; the
answer comes back as ``{"result": ...}``.
"""
from datetime import datetime, timezone
from typing import Any, Callable, Dict, Optional, Type

import pydantic
from fastapi import APIRouter, Body, Depends
from fastapi.encoders import jsonable_encoder

from taskplanner.core.errors import NotFoundError, ValidationError
from taskplanner.db.deps import get_section_store, get_weekly_plan_store
from taskplanner.db.section_store import SectionStore
from taskplanner.db.weekly_plan_store import WeeklyPlanStore
from taskplanner.api.sections import schemas as section_schemas, services as section_services
from taskplanner.api.tasks import schemas as task_schemas, services as task_services
from taskplanner.api.weekly_plans import schemas as plan_schemas, services as plan_services

router = APIRouter()

OPERATIONS: Dict[str, Callable[..., Any]] = {}


def operation(name: str, input_model: Optional[Type[pydantic.BaseModel]] = None):
    def register(func):
        def run(payload: dict, sections: SectionStore, plans: WeeklyPlanStore):
            if input_model is None:
                return func(sections=sections, plans=plans)
            try:
                data = input_model.model_validate(payload)
            except pydantic.ValidationError as e:
                raise ValidationError(f"Invalid input for {name}: {e}") from e
            return func(data, sections=sections, plans=plans)
        OPERATIONS[name] = run
        return func
    return register


# ---------------------------
# Sections
# ---------------------------

@operation("getSections")
def get_sections(sections, plans):
    return section_services.get_sections(sections)

@operation("createSection", section_schemas.SectionCreate)
def create_section(data, sections, plans):
    return section_services.create_section(sections, data.name)

@operation("renameSection", section_schemas.SectionRename)
def rename_section(data, sections, plans):
    section_services.rename_section(sections, data.old_name, data.new_name)
    return True

@operation("updateSection", section_schemas.SectionRename)
def update_section(data, sections, plans):
    return section_services.rename_section(sections, data.old_name, data.new_name)

@operation("deleteSection", section_schemas.SectionRef)
def delete_section(data, sections, plans):
    return section_services.delete_section(sections, data.name)


# ---------------------------
# Tasks
# ---------------------------

@operation("getTasks")
def get_tasks(sections, plans):
    return task_services.get_tasks(sections)

@operation("getTasksBySection", section_schemas.SectionRef)
def get_tasks_by_section(data, sections, plans):
    return task_services.get_tasks_by_section(sections, data.name)

@operation("createTask", task_schemas.TaskCreate)
def create_task(data, sections, plans):
    return task_services.create_task(sections, data)

@operation("updateTask", task_schemas.TaskUpdateInput)
def update_task(data, sections, plans):
    changes = task_schemas.TaskUpdate.model_validate(
        data.model_dump(exclude_unset=True, exclude={"section_name", "task_id"})
    )
    return task_services.update_task(sections, data.section_name, data.task_id, changes)

@operation("deleteTask", task_schemas.TaskDelete)
def delete_task(data, sections, plans):
    return task_services.delete_task(sections, data.section_name, data.task_id)


# ---------------------------
# Weekly plans
# ---------------------------

@operation("getWeeklyPlan", plan_schemas.WeeklyPlanGet)
def get_weekly_plan(data, sections, plans):
    return plan_services.get_weekly_plan(plans, data.week_start)

@operation("getAllWeeklyPlans")
def get_all_weekly_plans(sections, plans):
    return plan_services.get_all_weekly_plans(plans)

@operation("getWeeklyPlanTemplate", plan_schemas.WeeklyPlanGet)
def get_weekly_plan_template(data, sections, plans):
    return plan_services.get_weekly_plan_template(data.week_start)

@operation("createWeeklyPlan", plan_schemas.WeeklyPlanCreate)
def create_weekly_plan(data, sections, plans):
    return plan_services.create_weekly_plan(plans, data)

@operation("updateWeeklyPlan", plan_schemas.WeeklyPlanUpdateInput)
def update_weekly_plan(data, sections, plans):
    changes = plan_schemas.WeeklyPlanUpdate.model_validate(
        data.model_dump(exclude_unset=True, exclude={"week_start"})
    )
    return plan_services.update_weekly_plan(plans, data.week_start, changes)

@operation("deleteWeeklyPlan", plan_schemas.WeeklyPlanGet)
def delete_weekly_plan(data, sections, plans):
    return plan_services.delete_weekly_plan(plans, data.week_start)

@operation("duplicateWeeklyPlan", plan_schemas.WeeklyPlanDuplicate)
def duplicate_weekly_plan(data, sections, plans):
    return plan_services.duplicate_weekly_plan(plans, data.source_week_start, data.target_week_start)


@operation("healthcheck")
def healthcheck(sections, plans):
    return {"status": "ok", "timestamp": datetime.now(timezone.utc).isoformat()}


@router.post("/{name}")
def call_operation(
    name: str,
    payload: Optional[dict] = Body(default=None),
    sections: SectionStore = Depends(get_section_store),
    plans: WeeklyPlanStore = Depends(get_weekly_plan_store)
):
    run = OPERATIONS.get(name)
    if run is None:
        raise NotFoundError(f"Unknown operation '{name}'")
    result = run(payload or {}, sections, plans)
    return {"result": jsonable_encoder(result)}
