"""
S3 Documents bucket configuration.

Settings for raw PDF storage.

Dependencies: pydantic_settings
System role: S3 documents bucket configuration
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class S3DocumentsSettings(BaseSettings):
    """Settings for S3 documents bucket operations."""

    model_config = SettingsConfigDict(
        env_prefix="S3_DOCUMENTS_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    bucket: str = Field(
        default="pdf-files",
        description="S3 bucket for raw document storage",
    )
    region: str = Field(
        default="us-east-1",
        description="AWS region for S3 bucket",
    )
    key_prefix: str = Field(
        default="uploads/",
        description="Prefix prepended to the original filename to build the object key",
    )
    endpoint_url: str | None = Field(
        default=None,
        description="Custom endpoint for S3-compatible storage (MinIO, Supabase, R2)",
    )
