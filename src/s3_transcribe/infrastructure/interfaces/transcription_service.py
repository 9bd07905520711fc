"""Abstract interface for transcription service operations."""

from abc import ABC, abstractmethod

from s3_transcribe.domain.models import RemoteJobStatus, TranscriptionJobRequest


class TranscriptionService(ABC):
    """Abstract base class for asynchronous transcription backends."""

    @abstractmethod
    def start_job(self, request: TranscriptionJobRequest) -> None:
        """
        Submits an asynchronous transcription job.

        Args:
            request: The job descriptor.

        Raises:
            TranscriptionJobSubmitError: If the service rejects the job.
        """

    @abstractmethod
    def get_job_status(self, job_name: str) -> RemoteJobStatus:
        """
        Reads a job's current status, once.

        Args:
            job_name: Name the job was submitted under.

        Returns:
            The raw status reported by the service.
        """
