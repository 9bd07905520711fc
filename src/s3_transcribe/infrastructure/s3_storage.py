"""S3 implementation of the StorageClient interface."""

from s3_transcribe.logging import setup_logging

from .interfaces import StorageClient

logger = setup_logging()


class S3StorageClient(StorageClient):
    """Handles object metadata lookups using S3."""

    def __init__(self, client):
        self._client = client

    def get_object_size(self, bucket_name: str, object_key: str) -> int:
        try:
            response = self._client.head_object(Bucket=bucket_name, Key=object_key)
        except Exception:
            logger.exception(
                "S3 metadata lookup failed",
                extra={"bucket_name": bucket_name, "object_key": object_key},
            )
            raise

        size = response.get("ContentLength") or 0
        logger.info(
            "Object metadata retrieved from S3",
            extra={
                "bucket_name": bucket_name,
                "object_key": object_key,
                "size_bytes": size,
            },
        )
        return size
