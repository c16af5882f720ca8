"""
Embedding and chat model configuration.

Dependencies: pydantic, pydantic_settings
System role: Model provider selection for embeddings and chat completion
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class LLMSettings(BaseSettings):
    """Embedding and chat model settings."""

    model_config = SettingsConfigDict(
        env_prefix="LLM_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    provider: str = Field(
        default="openai",
        description="Model provider: 'openai' or 'google_genai'",
    )
    embedding_model: str = Field(
        default="text-embedding-ada-002",
        description="Embedding model ID",
    )
    chat_model: str = Field(
        default="gpt-4",
        description="Chat completion model ID",
    )
    temperature: float | None = Field(
        default=None,
        description="Sampling temperature (provider default when unset)",
    )
    api_key: str | None = Field(
        default=None,
        description="Provider API key; falls back to the provider SDK's own env var",
    )
