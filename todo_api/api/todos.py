# todo_api/api/todos.py

from typing import List

from fastapi import APIRouter, Depends, Request, Response

from todo_api.api.validation import validated_todo
from todo_api.models.problems import ProblemDetails, ValidationProblemDetails
from todo_api.models.todos import Todo
from todo_api.services.task_store import TaskStore

router = APIRouter(prefix="/todos", tags=["todos"])


def get_store(request: Request) -> TaskStore:
    return request.app.state.store


@router.get("", response_model=List[Todo])
def list_todos(store: TaskStore = Depends(get_store)) -> List[Todo]:
    """
    Return all todos in the order they were added.
    """
    return store.list_todos()


@router.get(
    "/{todo_id}",
    response_model=Todo,
    responses={404: {"description": "Todo not found"}},
)
def get_todo(todo_id: int, store: TaskStore = Depends(get_store)):
    """
    Return a single todo by ID.
    """
    todo = store.get_by_id(todo_id)
    if todo is None:
        return Response(status_code=404)

    return todo


@router.post(
    "",
    response_model=Todo,
    status_code=201,
    responses={
        400: {"model": ValidationProblemDetails, "description": "Invalid todo"},
        409: {"model": ProblemDetails, "description": "Todo id already exists"},
    },
)
def create_todo(
    response: Response,
    todo: Todo = Depends(validated_todo),
    store: TaskStore = Depends(get_store),
) -> Todo:
    """
    Add a todo. Rejected with 400 if its due date is past or it is already completed.
    """
    created = store.add(todo)
    response.headers["Location"] = f"{router.prefix}/{created.id}"
    return created


@router.delete("/{todo_id}", status_code=204, response_class=Response)
def delete_todo(todo_id: int, store: TaskStore = Depends(get_store)):
    """
    Delete a todo by ID. Always 204, whether or not it existed.
    """
    store.delete_by_id(todo_id)
    return Response(status_code=204)
