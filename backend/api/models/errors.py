"""
Error response models.

Standardized error responses for the API.
"""

from pydantic import BaseModel
from typing import Optional


class ErrorResponse(BaseModel):
    """Standard error response format. stack is only sent in debug mode."""

    message: str
    stack: Optional[str] = None

    def to_content(self) -> dict:
        return self.model_dump(exclude_none=True)
