"""Handler for one-shot transcription job status checks."""

from s3_transcribe.domain import JobStatus
from s3_transcribe.exceptions import TranscriptionJobFailedError
from s3_transcribe.infrastructure.interfaces import TranscriptionService
from s3_transcribe.logging import setup_logging

logger = setup_logging()


class JobStatusHandler:
    """Maps the transcription service's job status to a local outcome."""

    def __init__(self, transcription_service: TranscriptionService):
        self._transcription_service = transcription_service

    def check(self, job_name: str) -> JobStatus:
        """
        Queries a job's status once.

        Raises:
            TranscriptionJobFailedError: If the service reports the job as failed.
        """
        remote = self._transcription_service.get_job_status(job_name)

        if remote.status == "COMPLETED":
            logger.info("Transcription job completed", extra={"job_name": job_name})
            return JobStatus.COMPLETED

        if remote.status == "FAILED":
            logger.error(
                "Transcription job failed",
                extra={"job_name": job_name, "failure_reason": remote.failure_reason},
            )
            raise TranscriptionJobFailedError(job_name, remote.failure_reason)

        logger.info(
            "Transcription job still in progress",
            extra={"job_name": job_name, "remote_status": remote.status},
        )
        return JobStatus.IN_PROGRESS
