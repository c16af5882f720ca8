"""
Test suite for application settings.

System role: Verification of environment-driven configuration
"""

import pytest

from pdfchat.configs import Settings, get_settings
from pdfchat.configs.database import DatabaseSettings
from pdfchat.configs.llm import LLMSettings
from pdfchat.configs.pipeline import DocumentPipelineSettings
from pdfchat.configs.s3_documents import S3DocumentsSettings


class TestDefaults:
    """Test suite for default values."""

    def test_model_defaults(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("LLM_PROVIDER", raising=False)
        llm = LLMSettings()

        assert llm.provider == "openai"
        assert llm.embedding_model == "text-embedding-ada-002"
        assert llm.chat_model == "gpt-4"

    def test_storage_defaults(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("S3_DOCUMENTS_BUCKET", raising=False)
        s3 = S3DocumentsSettings()

        assert s3.bucket == "pdf-files"
        assert s3.key_prefix == "uploads/"

    def test_port_default(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("PORT", raising=False)
        assert Settings().port == 5000


class TestEnvironmentOverrides:
    """Test suite for env var overrides."""

    def test_prefixed_env_vars(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("S3_DOCUMENTS_BUCKET", "other-bucket")
        monkeypatch.setenv("LLM_PROVIDER", "google_genai")
        monkeypatch.setenv("DOC_PIPELINE_CHUNK_SIZE", "250")

        settings = Settings()

        assert settings.s3_documents.bucket == "other-bucket"
        assert settings.llm.provider == "google_genai"
        assert settings.pipeline.chunk_size == 250

    def test_chunk_size_must_be_positive(self) -> None:
        with pytest.raises(ValueError):
            DocumentPipelineSettings(chunk_size=0)

    def test_get_settings_is_cached(self) -> None:
        get_settings.cache_clear()
        try:
            assert get_settings() is get_settings()
        finally:
            get_settings.cache_clear()


class TestDatabaseUrls:
    """Test suite for DatabaseSettings URL construction."""

    def test_async_url_from_parts(self) -> None:
        db = DatabaseSettings(
            url=None, host="db", port=5433, user="u", password="p", db="docs", sslmode="disable"
        )
        assert db.async_database_url == "postgresql+asyncpg://u:p@db:5433/docs"

    def test_async_url_with_ssl(self) -> None:
        db = DatabaseSettings(
            url=None, host="db", port=5432, user="u", password="p", db="docs", sslmode="require"
        )
        assert db.async_database_url == "postgresql+asyncpg://u:p@db:5432/docs?ssl=require"

    def test_url_override(self) -> None:
        db = DatabaseSettings(url="postgresql+asyncpg://x:y@remote/z")
        assert db.async_database_url == "postgresql+asyncpg://x:y@remote/z"

    def test_sync_url_uses_psycopg(self) -> None:
        db = DatabaseSettings(url=None, host="h", port=5432, user="u", password="p", db="d", sslmode="prefer")
        assert db.database_url == "postgresql+psycopg://u:p@h:5432/d?sslmode=prefer"

    def test_sync_url_follows_url_override(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test create_tables targets the same database as the app."""
        monkeypatch.setenv("POSTGRES_URL", "postgresql+asyncpg://u:p@db.hosted.example:6543/prod")

        db = DatabaseSettings()

        assert db.database_url == "postgresql+psycopg://u:p@db.hosted.example:6543/prod"
        assert db.async_database_url == "postgresql+asyncpg://u:p@db.hosted.example:6543/prod"

    def test_sync_url_override_translates_ssl_option(self) -> None:
        db = DatabaseSettings(url="postgresql+asyncpg://u:p@db.hosted.example/prod?ssl=require")

        assert db.database_url == "postgresql+psycopg://u:p@db.hosted.example/prod?sslmode=require"
