"""
S3 client for document bucket operations.

Stores uploaded PDF bytes under a key derived from the original filename.
Keys are not deduplicated: re-uploading a filename overwrites the object.

Dependencies: boto3
System role: Raw document storage
"""

import boto3
from botocore.exceptions import BotoCoreError, ClientError

from pdfchat.core.exceptions import StorageError


class S3DocumentClient:
    """S3 client for the raw PDF bucket."""

    def __init__(
        self,
        bucket: str,
        region: str = "us-east-1",
        key_prefix: str = "uploads/",
        endpoint_url: str | None = None,
        s3_client=None,
    ) -> None:
        """
        Initialize S3 client for document bucket.

        Args:
            bucket: S3 bucket name for document storage
            region: AWS region for S3 bucket
            key_prefix: Prefix for object keys
            endpoint_url: Optional endpoint for S3-compatible stores
            s3_client: Pre-built boto3 client (tests)
        """
        self._bucket = bucket
        self._region = region
        self._key_prefix = key_prefix
        self._s3_client = s3_client or boto3.client(
            "s3",
            region_name=region,
            endpoint_url=endpoint_url,
        )

    @property
    def bucket(self) -> str:
        return self._bucket

    def build_key(self, file_name: str) -> str:
        """
        Build the object key for an uploaded file.

        Args:
            file_name: Original filename

        Returns:
            str: e.g. "uploads/report.pdf"
        """
        return f"{self._key_prefix}{file_name}"

    def upload_bytes(
        self,
        file_name: str,
        data: bytes,
        content_type: str = "application/pdf",
    ) -> str:
        """
        Store raw bytes in the bucket.

        Args:
            file_name: Original filename (key suffix)
            data: File contents
            content_type: MIME type recorded on the object

        Returns:
            str: Object key the bytes were stored under

        Raises:
            StorageError: If the put fails
        """
        key = self.build_key(file_name)
        try:
            self._s3_client.put_object(
                Bucket=self._bucket,
                Key=key,
                Body=data,
                ContentType=content_type,
            )
        except (ClientError, BotoCoreError) as e:
            raise StorageError(
                f"Error uploading file to storage: {e}",
                operation="put_object",
                details={"bucket": self._bucket, "key": key},
            ) from e
        return key
