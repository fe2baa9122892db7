# todo_api/services/task_store.py
"""
Task stores: the list / get / add / delete contract over Todo records.

Two backends share the contract. InMemoryTaskStore keeps a dict keyed by id;
SqlTaskStore runs the same operations through SQLAlchemy against an
in-memory SQLite database. Neither survives a restart.
"""

import logging
import threading
from abc import ABC, abstractmethod
from typing import Dict, List, Optional

from sqlalchemy import select
from sqlalchemy.engine import Engine
from sqlalchemy.exc import IntegrityError

from todo_api.db.engine import get_engine
from todo_api.db.schema import metadata, todos
from todo_api.errors import DuplicateTodoError
from todo_api.models.todos import Todo

logger = logging.getLogger(__name__)


class TaskStore(ABC):
    @abstractmethod
    def list_todos(self) -> List[Todo]:
        """All todos, in insertion order."""

    @abstractmethod
    def get_by_id(self, todo_id: int) -> Optional[Todo]:
        """The todo with this id, or None."""

    @abstractmethod
    def add(self, todo: Todo) -> Todo:
        """
        Append a todo and return it.

        Raises DuplicateTodoError if a todo with the same id is already held.
        """

    @abstractmethod
    def delete_by_id(self, todo_id: int) -> None:
        """Remove the todo with this id. No-op if there is none."""


class InMemoryTaskStore(TaskStore):
    def __init__(self) -> None:
        self._todos: Dict[int, Todo] = {}
        self._lock = threading.Lock()

    def list_todos(self) -> List[Todo]:
        with self._lock:
            return list(self._todos.values())

    def get_by_id(self, todo_id: int) -> Optional[Todo]:
        return self._todos.get(todo_id)

    def add(self, todo: Todo) -> Todo:
        with self._lock:
            if todo.id in self._todos:
                raise DuplicateTodoError(todo.id)
            self._todos[todo.id] = todo
        logger.debug("Added todo %s", todo.id)
        return todo

    def delete_by_id(self, todo_id: int) -> None:
        with self._lock:
            removed = self._todos.pop(todo_id, None)
        if removed is not None:
            logger.debug("Deleted todo %s", todo_id)


def _row_to_todo(row) -> Todo:
    # stored as naive UTC; Todo reattaches the UTC offset
    return Todo(
        id=row["id"],
        name=row["name"],
        due_date=row["due_date"],
        is_completed=row["is_completed"],
    )


class SqlTaskStore(TaskStore):
    """
    Task store over SQLAlchemy Core.

    The engine shares one SQLite connection between threads, so every
    operation runs under the store's lock.
    """

    def __init__(self, engine: Optional[Engine] = None) -> None:
        self._engine = engine if engine is not None else get_engine()
        self._lock = threading.Lock()
        metadata.create_all(self._engine)

    def _select(self):
        return select(
            todos.c.id,
            todos.c.name,
            todos.c.due_date,
            todos.c.is_completed,
        )

    def list_todos(self) -> List[Todo]:
        with self._lock, self._engine.connect() as conn:
            rows = conn.execute(self._select().order_by(todos.c.seq)).mappings().all()

        return [_row_to_todo(row) for row in rows]

    def get_by_id(self, todo_id: int) -> Optional[Todo]:
        with self._lock, self._engine.connect() as conn:
            stmt = self._select().where(todos.c.id == todo_id)
            row = conn.execute(stmt).mappings().first()

        if row is None:
            return None
        return _row_to_todo(row)

    def add(self, todo: Todo) -> Todo:
        try:
            with self._lock, self._engine.begin() as conn:
                conn.execute(
                    todos.insert().values(
                        id=todo.id,
                        name=todo.name,
                        due_date=todo.due_date.replace(tzinfo=None),
                        is_completed=todo.is_completed,
                    )
                )
        except IntegrityError:
            raise DuplicateTodoError(todo.id) from None

        logger.debug("Added todo %s", todo.id)
        return todo

    def delete_by_id(self, todo_id: int) -> None:
        with self._lock, self._engine.begin() as conn:
            result = conn.execute(todos.delete().where(todos.c.id == todo_id))

        if result.rowcount:
            logger.debug("Deleted todo %s", todo_id)


def build_task_store(backend: str = "memory") -> TaskStore:
    if backend == "memory":
        return InMemoryTaskStore()
    if backend == "sql":
        return SqlTaskStore()
    raise ValueError(f"Unknown task store backend: {backend!r}")
