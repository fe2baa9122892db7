# todo_api/__init__.py
"""
In-memory todo service built on FastAPI.

Run with:
    uvicorn todo_api.main:app --reload
or:
    python -m todo_api
"""

__version__ = "0.1.0"
