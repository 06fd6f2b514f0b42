from fastapi import APIRouter, Depends
from taskplanner.db.deps import get_section_store
from taskplanner.db.section_store import SectionStore
from . import schemas, services

router = APIRouter()

@router.get("/", response_model=list[schemas.TaskOut])
def read_tasks(store: SectionStore = Depends(get_section_store)):
    return services.get_tasks(store)

@router.post("/", response_model=schemas.TaskOut)
def create_task(
    task: schemas.TaskCreate,
    store: SectionStore = Depends(get_section_store)
):
    return services.create_task(store, task)

@router.put("/{section_name}/{task_id}", response_model=schemas.TaskOut)
def update_task(
    section_name: str,
    task_id: str,
    task: schemas.TaskUpdate,
    store: SectionStore = Depends(get_section_store)
):
    return services.update_task(store, section_name, task_id, task)

@router.delete("/{section_name}/{task_id}")
def delete_task(
    section_name: str,
    task_id: str,
    store: SectionStore = Depends(get_section_store)
):
    services.delete_task(store, section_name, task_id)
    return {"message": "Task deleted"}
