"""
Common response models.

Dependencies: pydantic
System role: Error response structure shared by all endpoints
"""

from pydantic import BaseModel, Field


class ErrorResponse(BaseModel):
    """Error body: 400s carry only a message, 500s add the underlying error."""

    message: str = Field(description="Error summary")
    error: str | None = Field(default=None, description="Underlying error message (500 only)")


class HealthResponse(BaseModel):
    """Health check response model."""

    status: str
    message: str
