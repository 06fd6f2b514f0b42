from pydantic import BaseModel
from typing import List

from taskplanner.api.tasks.schemas import TaskOut

class SectionCreate(BaseModel):
    name: str

class SectionRename(BaseModel):
    old_name: str
    new_name: str

class SectionRenameBody(BaseModel):
    new_name: str

class SectionRef(BaseModel):
    name: str

class SectionOut(BaseModel):
    name: str
    tasks: List[TaskOut] = []

    model_config = {
        "from_attributes": True
    }
