"""Domain layer exports."""

from .job_builder import TranscriptionJobBuilder, sanitize_job_name
from .models import (
    HandlerResponse,
    JobStatus,
    RemoteJobStatus,
    StorageObjectEvent,
    TranscriptionJobRequest,
)

__all__ = [
    "HandlerResponse",
    "JobStatus",
    "RemoteJobStatus",
    "StorageObjectEvent",
    "TranscriptionJobBuilder",
    "TranscriptionJobRequest",
    "sanitize_job_name",
]
