"""
Chat request/response schemas.

Dependencies: pydantic
System role: Chat API contract
"""

from pydantic import BaseModel, Field


class ChatRequest(BaseModel):
    """
    Request schema for chat messages.

    Both fields are optional at the schema level so the router can answer
    a missing field with its own 400 message.
    """

    file_id: str | int | None = Field(
        default=None,
        validation_alias="fileId",
        description="Document Record id returned by /api/upload",
    )
    message: str | None = Field(default=None, description="User question")


class ChatResponse(BaseModel):
    """Response schema for chat messages."""

    answer: str
