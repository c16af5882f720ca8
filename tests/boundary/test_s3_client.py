"""
Test suite for S3DocumentClient.

System role: Verification of raw PDF storage
"""

from unittest.mock import MagicMock

import pytest
from botocore.exceptions import ClientError, EndpointConnectionError

from pdfchat.boundary.aws.s3_client import S3DocumentClient
from pdfchat.core.exceptions import StorageError


@pytest.fixture
def boto_client() -> MagicMock:
    """boto3 S3 client double."""
    return MagicMock()


@pytest.fixture
def s3_client(boto_client: MagicMock) -> S3DocumentClient:
    return S3DocumentClient(bucket="pdf-files", s3_client=boto_client)


class TestS3DocumentClient:
    """Test suite for S3DocumentClient."""

    def test_build_key_uses_upload_prefix(self, s3_client: S3DocumentClient) -> None:
        assert s3_client.build_key("report.pdf") == "uploads/report.pdf"

    def test_custom_prefix(self, boto_client: MagicMock) -> None:
        client = S3DocumentClient(bucket="b", key_prefix="raw/", s3_client=boto_client)
        assert client.build_key("a.pdf") == "raw/a.pdf"

    def test_upload_bytes_puts_object(
        self, s3_client: S3DocumentClient, boto_client: MagicMock
    ) -> None:
        # Act
        key = s3_client.upload_bytes("report.pdf", b"%PDF-1.4 data")

        # Assert
        assert key == "uploads/report.pdf"
        boto_client.put_object.assert_called_once_with(
            Bucket="pdf-files",
            Key="uploads/report.pdf",
            Body=b"%PDF-1.4 data",
            ContentType="application/pdf",
        )

    def test_same_name_reuses_key(self, s3_client: S3DocumentClient, boto_client: MagicMock) -> None:
        """Test re-uploading a filename targets the same object key."""
        first = s3_client.upload_bytes("dup.pdf", b"one")
        second = s3_client.upload_bytes("dup.pdf", b"two")

        assert first == second
        assert boto_client.put_object.call_count == 2

    def test_client_error_raises_storage_error(
        self, s3_client: S3DocumentClient, boto_client: MagicMock
    ) -> None:
        boto_client.put_object.side_effect = ClientError(
            {"Error": {"Code": "AccessDenied", "Message": "Access Denied"}},
            "PutObject",
        )

        with pytest.raises(StorageError, match="Error uploading file to storage") as exc:
            s3_client.upload_bytes("report.pdf", b"data")

        assert exc.value.details["key"] == "uploads/report.pdf"
        assert exc.value.details["operation"] == "put_object"

    def test_connection_error_raises_storage_error(
        self, s3_client: S3DocumentClient, boto_client: MagicMock
    ) -> None:
        boto_client.put_object.side_effect = EndpointConnectionError(
            endpoint_url="https://s3.us-east-1.amazonaws.com"
        )

        with pytest.raises(StorageError):
            s3_client.upload_bytes("report.pdf", b"data")
