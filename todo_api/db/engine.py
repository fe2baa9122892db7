# todo_api/db/engine.py

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.pool import StaticPool

DB_URL = "sqlite://"  # in-memory, gone when the process exits

def get_engine(url: str = DB_URL) -> Engine:
    # StaticPool keeps one connection so every request sees the same in-memory db
    return create_engine(
        url,
        future=True,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
