from typing import Optional

from pydantic import BaseModel


class ErrorResponse(BaseModel):
    """JSON error envelope returned by every route"""
    error: str
    message: Optional[str] = None
    details: Optional[str] = None


class HealthResponse(BaseModel):
    status: str
