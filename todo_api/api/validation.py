# todo_api/api/validation.py

from datetime import datetime, timezone
from typing import Dict, List, Optional

from todo_api.errors import TodoValidationError
from todo_api.models.todos import Todo


def validate_new_todo(todo: Todo, now: Optional[datetime] = None) -> Dict[str, List[str]]:
    """
    Check a todo about to be created. Returns field -> messages, empty if valid.

    Every rule runs; violations are collected, not short-circuited.
    """
    if now is None:
        now = datetime.now(timezone.utc)

    errors: Dict[str, List[str]] = {}
    if todo.due_date < now:
        errors["DueDate"] = ["Cannot have due date in the past."]
    if todo.is_completed:
        errors["IsCompleted"] = ["Cannot add completed todo."]
    return errors


def validated_todo(todo: Todo) -> Todo:
    """Request dependency: parses the body and rejects it before the handler runs."""
    errors = validate_new_todo(todo)
    if errors:
        raise TodoValidationError(errors)
    return todo
