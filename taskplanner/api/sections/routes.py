from fastapi import APIRouter, Depends
from taskplanner.db.deps import get_section_store
from taskplanner.db.section_store import SectionStore
from taskplanner.api.tasks import services as task_services
from taskplanner.api.tasks.schemas import TaskOut
from . import schemas, services

router = APIRouter()

@router.get("/", response_model=list[schemas.SectionOut])
def read_sections(store: SectionStore = Depends(get_section_store)):
    return services.get_sections(store)

@router.post("/", response_model=schemas.SectionOut)
def create_section(
    section: schemas.SectionCreate,
    store: SectionStore = Depends(get_section_store)
):
    return services.create_section(store, section.name)

@router.get("/{name}", response_model=schemas.SectionOut)
def read_section(name: str, store: SectionStore = Depends(get_section_store)):
    return services.get_section(store, name)

@router.put("/{name}", response_model=schemas.SectionOut)
def rename_section(
    name: str,
    section: schemas.SectionRenameBody,
    store: SectionStore = Depends(get_section_store)
):
    return services.rename_section(store, name, section.new_name)

@router.delete("/{name}")
def delete_section(name: str, store: SectionStore = Depends(get_section_store)):
    services.delete_section(store, name)
    return {"message": "Section deleted"}

@router.get("/{name}/tasks", response_model=list[TaskOut])
def read_section_tasks(name: str, store: SectionStore = Depends(get_section_store)):
    return task_services.get_tasks_by_section(store, name)
