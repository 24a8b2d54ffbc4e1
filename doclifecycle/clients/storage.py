"""Object storage collaborator."""

from abc import ABC, abstractmethod

import boto3

from ..config.app import AppConfig
from ..middleware.error_classifier import InfrastructureClient
from ..middleware.logging import logger


class StorageClient(InfrastructureClient, ABC):
    """Interface for object storage operations.

    Failures of any implementation surface as StorageError (or the generic
    InfrastructureError for unrecognized failures).
    """

    @abstractmethod
    def put_object(self, key: str, content: bytes, content_type: str) -> None:
        """Store an object under ``key``."""

    @abstractmethod
    def get_object(self, key: str) -> bytes:
        """Read the object stored under ``key``."""

    @abstractmethod
    def delete_object(self, key: str) -> None:
        """Delete the object stored under ``key``."""


class S3StorageClient(StorageClient):
    """Client wrapper for S3 operations."""

    def __init__(self, config: AppConfig) -> None:
        """Initialize S3 client.

        Args:
            config: Application configuration
        """
        self.config = config
        self.s3 = boto3.client("s3")
        self.bucket = config.document_bucket_name

    def put_object(
        self, key: str, content: bytes, content_type: str = "application/pdf"
    ) -> None:
        """Upload an object to S3.

        Args:
            key: S3 object key
            content: Object content as bytes
            content_type: MIME type stored with the object
        """
        self.s3.put_object(
            Bucket=self.bucket,
            Key=key,
            Body=content,
            ContentType=content_type,
            ServerSideEncryption="AES256",
        )
        logger.debug(
            "Stored object", extra={"bucket": self.bucket, "key": key, "size": len(content)}
        )

    def get_object(self, key: str) -> bytes:
        """Download an object from S3.

        Args:
            key: S3 object key

        Returns:
            Object content
        """
        response = self.s3.get_object(Bucket=self.bucket, Key=key)
        return response["Body"].read()

    def delete_object(self, key: str) -> None:
        self.s3.delete_object(Bucket=self.bucket, Key=key)
