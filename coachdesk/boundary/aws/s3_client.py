"""
S3 client for context document storage.

Stores uploaded context documents and removes them when the user deletes
the document. Objects are addressed by key; the public URL is derived
from bucket and region.

Dependencies: boto3
System role: Object storage boundary for context documents
"""

import logging

import boto3
from botocore.exceptions import BotoCoreError, ClientError

from coachdesk.core.exceptions import StorageError

logger = logging.getLogger(__name__)


class S3ContextDocumentClient:
    """S3 client for the context documents bucket."""

    def __init__(self, bucket: str, region: str = "us-east-1") -> None:
        """
        Initialize S3 client for context document bucket.

        Args:
            bucket: S3 bucket name
            region: AWS region for S3 bucket
        """
        self._bucket = bucket
        self._region = region
        self._s3_client = boto3.client("s3", region_name=region)

    def public_url(self, key: str) -> str:
        """Return the virtual-hosted URL of an object."""
        return f"https://{self._bucket}.s3.{self._region}.amazonaws.com/{key}"

    def upload(self, key: str, body: bytes, content_type: str) -> str:
        """
        Store an object.

        Args:
            key: Object key
            body: File bytes
            content_type: MIME type stored with the object

        Returns:
            str: Public URL of the stored object

        Raises:
            StorageError: If the upload fails
        """
        try:
            self._s3_client.put_object(
                Bucket=self._bucket,
                Key=key,
                Body=body,
                ContentType=content_type,
            )
        except (ClientError, BotoCoreError) as e:
            logger.error("S3 upload failed", extra={"key": key, "error": str(e)})
            raise StorageError("Failed to upload file", key=key) from e
        return self.public_url(key)

    def delete(self, key: str) -> None:
        """
        Delete an object.

        Raises:
            StorageError: If the delete fails
        """
        try:
            self._s3_client.delete_object(Bucket=self._bucket, Key=key)
        except (ClientError, BotoCoreError) as e:
            raise StorageError("Failed to delete file", key=key) from e
