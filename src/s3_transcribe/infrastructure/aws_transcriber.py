"""Amazon Transcribe implementation of the TranscriptionService interface."""

from s3_transcribe.domain.models import RemoteJobStatus, TranscriptionJobRequest
from s3_transcribe.exceptions import TranscriptionJobSubmitError
from s3_transcribe.logging import setup_logging

from .interfaces import TranscriptionService

logger = setup_logging()


class AWSTranscribeService(TranscriptionService):
    """Handles transcription jobs using Amazon Transcribe."""

    def __init__(self, client):
        self._client = client

    def start_job(self, request: TranscriptionJobRequest) -> None:
        """
        Submits a batch transcription job.

        Transcribe reads the media straight from S3 and writes the JSON
        transcript to ``request.output_bucket_name``/``request.output_key``.
        """
        try:
            self._client.start_transcription_job(
                TranscriptionJobName=request.job_name,
                Media={"MediaFileUri": request.media_uri},
                MediaFormat=request.media_format,
                LanguageCode=request.language_code,
                OutputBucketName=request.output_bucket_name,
                OutputKey=request.output_key,
            )
        except Exception as e:
            logger.exception(
                "Error starting transcription job",
                extra={"job_name": request.job_name, "media_uri": request.media_uri},
            )
            raise TranscriptionJobSubmitError(request.job_name, e) from e

        logger.info(
            "Transcription job submitted",
            extra={"job_name": request.job_name, "output_key": request.output_key},
        )

    def get_job_status(self, job_name: str) -> RemoteJobStatus:
        response = self._client.get_transcription_job(TranscriptionJobName=job_name)
        job = response.get("TranscriptionJob") or {}
        return RemoteJobStatus(
            status=job.get("TranscriptionJobStatus"),
            failure_reason=job.get("FailureReason"),
        )
