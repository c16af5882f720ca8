"""
Document upload schemas.

Dependencies: pydantic
System role: Upload API contract
"""

import uuid

from pydantic import BaseModel, Field


class UploadResponse(BaseModel):
    """Response schema for a processed upload."""

    file_id: uuid.UUID = Field(serialization_alias="fileId", description="Document Record id")
    message: str = Field(default="File uploaded and processed successfully")
