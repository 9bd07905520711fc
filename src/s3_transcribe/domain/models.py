"""Domain models for the s3-transcribe function."""

import json
from enum import Enum
from typing import Any
from urllib.parse import unquote_plus

from pydantic import BaseModel


class StorageObjectEvent(BaseModel, frozen=True):
    """Represents a single object-created notification."""

    bucket_name: str
    object_key: str

    @classmethod
    def from_record(cls, record: dict[str, Any]) -> "StorageObjectEvent":
        """Builds an event from a raw S3 notification record, decoding the key."""
        s3 = record["s3"]
        return cls(
            bucket_name=s3["bucket"]["name"],
            object_key=unquote_plus(s3["object"]["key"]),
        )

    @property
    def extension(self) -> str:
        """Lowercased text after the final dot of the key."""
        return self.object_key.rsplit(".", 1)[-1].lower()

    @property
    def uri(self) -> str:
        return f"s3://{self.bucket_name}/{self.object_key}"


class TranscriptionJobRequest(BaseModel, frozen=True):
    """Everything needed to submit one transcription job."""

    job_name: str
    media_uri: str
    media_format: str
    language_code: str
    output_bucket_name: str
    output_key: str


class JobStatus(str, Enum):
    """Outcome of a single job status check."""

    COMPLETED = "COMPLETED"
    IN_PROGRESS = "IN_PROGRESS"


class HandlerResponse(BaseModel, frozen=True):
    """Result returned to the invoking platform."""

    status_code: int
    message: str

    def to_dict(self) -> dict[str, Any]:
        return {"statusCode": self.status_code, "body": json.dumps(self.message)}


class RemoteJobStatus(BaseModel, frozen=True):
    """Job status as reported by the transcription service."""

    status: str | None = None
    failure_reason: str | None = None
