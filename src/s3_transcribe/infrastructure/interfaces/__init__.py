"""Infrastructure interface exports."""

from .storage_client import StorageClient
from .transcription_service import TranscriptionService

__all__ = ["StorageClient", "TranscriptionService"]
