"""
API test fixtures.

Provides: application with overridable service dependencies, TestClient
"""

from unittest.mock import AsyncMock, MagicMock

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from pdfchat.api.deps import get_chat_service, get_upload_service
from pdfchat.main import create_app


@pytest.fixture
def mock_upload_service() -> MagicMock:
    service = MagicMock()
    service.upload_pdf = AsyncMock()
    return service


@pytest.fixture
def mock_chat_service() -> MagicMock:
    service = MagicMock()
    service.answer = AsyncMock()
    return service


@pytest.fixture
def app(mock_upload_service: MagicMock, mock_chat_service: MagicMock) -> FastAPI:
    """Create the application with service dependencies replaced by mocks."""
    app = create_app()
    app.dependency_overrides[get_upload_service] = lambda: mock_upload_service
    app.dependency_overrides[get_chat_service] = lambda: mock_chat_service
    return app


@pytest.fixture
def client(app: FastAPI) -> TestClient:
    """Provide TestClient for the FastAPI app."""
    return TestClient(app)
