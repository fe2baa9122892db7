# todo_api/models/problems.py

from typing import Dict, List, Optional

from pydantic import BaseModel


class ProblemDetails(BaseModel):
    type: str
    title: str
    status: int
    detail: Optional[str] = None


class ValidationProblemDetails(ProblemDetails):
    errors: Dict[str, List[str]]
