# todo_api/db/schema.py

from sqlalchemy import (
    MetaData, Table, Column, Integer, String, DateTime, Boolean
)

metadata = MetaData()

todos = Table(
    "todos",
    metadata,
    # surrogate key, keeps insertion order
    Column("seq", Integer, primary_key=True, autoincrement=True),
    Column("id", Integer, nullable=False, unique=True),
    Column("name", String, nullable=False),
    Column("due_date", DateTime, nullable=False),
    Column("is_completed", Boolean, nullable=False),
)
