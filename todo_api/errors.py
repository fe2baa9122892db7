# todo_api/errors.py
"""
Domain errors and their HTTP problem responses.

Stores and filters raise these; create_app() registers the handlers below so
every error is resolved into a status code at the handler boundary.
"""

from collections import defaultdict
from typing import Dict, List

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from todo_api.models.problems import ProblemDetails, ValidationProblemDetails

PROBLEM_MEDIA_TYPE = "application/problem+json"

BAD_REQUEST_TYPE = "https://tools.ietf.org/html/rfc9110#section-15.5.1"
CONFLICT_TYPE = "https://tools.ietf.org/html/rfc9110#section-15.5.10"


class TodoError(Exception):
    """Base class for todo API errors."""


class TodoValidationError(TodoError):
    def __init__(self, errors: Dict[str, List[str]]):
        super().__init__(f"Invalid todo: {', '.join(errors)}")
        self.errors = errors


class DuplicateTodoError(TodoError):
    def __init__(self, todo_id: int):
        super().__init__(f"Todo with id {todo_id} already exists.")
        self.todo_id = todo_id


def validation_problem(errors: Dict[str, List[str]]) -> JSONResponse:
    body = ValidationProblemDetails(
        type=BAD_REQUEST_TYPE,
        title="One or more validation errors occurred.",
        status=400,
        errors=errors,
    )
    return JSONResponse(
        status_code=400,
        content=body.model_dump(exclude_none=True),
        media_type=PROBLEM_MEDIA_TYPE,
    )


def _field_key(loc) -> str:
    # ("body", "dueDate") -> "dueDate", ("path", "todo_id") -> "todo_id"
    parts = [str(p) for p in loc[1:]] or [str(p) for p in loc]
    return ".".join(parts)


async def _todo_validation_handler(request: Request, exc: TodoValidationError):
    return validation_problem(exc.errors)


async def _request_validation_handler(request: Request, exc: RequestValidationError):
    errors: Dict[str, List[str]] = defaultdict(list)
    for err in exc.errors():
        errors[_field_key(err["loc"])].append(err["msg"])
    return validation_problem(dict(errors))


async def _duplicate_todo_handler(request: Request, exc: DuplicateTodoError):
    body = ProblemDetails(
        type=CONFLICT_TYPE,
        title="Conflict",
        status=409,
        detail=str(exc),
    )
    return JSONResponse(
        status_code=409,
        content=body.model_dump(exclude_none=True),
        media_type=PROBLEM_MEDIA_TYPE,
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(TodoValidationError, _todo_validation_handler)
    app.add_exception_handler(RequestValidationError, _request_validation_handler)
    app.add_exception_handler(DuplicateTodoError, _duplicate_todo_handler)
