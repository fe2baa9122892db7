# todo_api/models/todos.py

from datetime import datetime, timezone

from pydantic import BaseModel, field_validator
from pydantic.alias_generators import to_camel


class Todo(BaseModel):
    id: int
    name: str
    due_date: datetime
    is_completed: bool = False

    class Config:
        alias_generator = to_camel
        populate_by_name = True
        frozen = True
        from_attributes = True

    @field_validator("due_date")
    @classmethod
    def due_date_in_utc(cls, v: datetime) -> datetime:
        """Naive timestamps are UTC; offset timestamps are converted to UTC."""
        if v.tzinfo is None:
            return v.replace(tzinfo=timezone.utc)
        return v.astimezone(timezone.utc)
