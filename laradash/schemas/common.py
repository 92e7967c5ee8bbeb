"""
Schemas shared by every API area.
"""

from typing import List, Optional

from pydantic import BaseModel


class FieldError(BaseModel):
    field: str
    message: str
    type: str


class ErrorResponse(BaseModel):
    """Error body returned by the exception handlers."""

    detail: str
    errors: Optional[List[FieldError]] = None
    request_id: Optional[str] = None


class HealthResponse(BaseModel):
    status: str = "ok"
    version: str
    modules: int = 0
