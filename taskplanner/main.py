from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from taskplanner.config import settings
from taskplanner.core.errors import PlannerError, planner_error_handler
from taskplanner.core.logging_config import setup_logging

from taskplanner.api.sections.routes import router as sections_router
from taskplanner.api.tasks.routes import router as tasks_router
from taskplanner.api.weekly_plans.routes import router as weekly_plans_router
from taskplanner.api.rpc.routes import router as rpc_router

setup_logging()

app = FastAPI(title="Task Planner")

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.add_exception_handler(PlannerError, planner_error_handler)

# Routers
app.include_router(sections_router, prefix="/sections", tags=["Sections"])
app.include_router(tasks_router, prefix="/tasks", tags=["Tasks"])
app.include_router(weekly_plans_router, prefix="/weekly-plans", tags=["Weekly Plans"])
app.include_router(rpc_router, prefix="/rpc", tags=["RPC"])

@app.get("/ping")
def ping():
    return {"message": "pong"}
