"""Infrastructure layer exports."""

from .aws_transcriber import AWSTranscribeService
from .s3_storage import S3StorageClient

__all__ = ["AWSTranscribeService", "S3StorageClient"]
