# taskplanner/core/errors.py

from fastapi import Request, status
from fastapi.responses import JSONResponse


class PlannerError(Exception):
    """Base class for every failure a service operation can report."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class NotFoundError(PlannerError):
    status_code = status.HTTP_404_NOT_FOUND


class AlreadyExistsError(PlannerError):
    status_code = status.HTTP_409_CONFLICT


class ValidationError(PlannerError):
    status_code = status.HTTP_422_UNPROCESSABLE_ENTITY


class StorageError(PlannerError):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR


async def planner_error_handler(request: Request, exc: PlannerError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.message})
