"""Handler for object-created storage events."""

from s3_transcribe.config import TranscribeConfig
from s3_transcribe.domain import (
    HandlerResponse,
    StorageObjectEvent,
    TranscriptionJobBuilder,
)
from s3_transcribe.infrastructure.interfaces import StorageClient, TranscriptionService
from s3_transcribe.logging import setup_logging

logger = setup_logging()

_BYTES_PER_MB = 1024 * 1024


class StorageEventHandler:
    """Orchestrates media-to-transcription-job operations."""

    def __init__(
        self,
        storage: StorageClient,
        transcription_service: TranscriptionService,
        job_builder: TranscriptionJobBuilder,
        config: TranscribeConfig,
    ):
        self._storage = storage
        self._transcription_service = transcription_service
        self._job_builder = job_builder
        self._config = config

    def process(self, events: list[StorageObjectEvent]) -> HandlerResponse:
        """
        Submits a transcription job for the first eligible object in a batch.

        Unsupported formats are skipped. Processing stops at the first
        oversized object (413) or the first successful submission (200);
        later events in the same batch are left untouched.

        Args:
            events: Object-created events in delivery order.

        Returns:
            HandlerResponse for the invoking platform.

        Raises:
            botocore.exceptions.ClientError: If an object size lookup fails.
            TranscriptionJobSubmitError: If job submission fails.
        """
        for event in events:
            extension = event.extension
            if extension not in self._config.supported_formats:
                logger.info(
                    "Unsupported format, skipping transcription",
                    extra={"object_key": event.object_key, "extension": extension},
                )
                continue

            logger.info(
                "Supported format",
                extra={"object_key": event.object_key, "extension": extension},
            )

            size_mb = (
                self._storage.get_object_size(event.bucket_name, event.object_key)
                / _BYTES_PER_MB
            )
            logger.info(
                "Object size checked",
                extra={"object_key": event.object_key, "size_mb": size_mb},
            )

            if size_mb > self._config.max_file_size_mb:
                logger.error(
                    "File exceeds the maximum allowed size",
                    extra={
                        "object_key": event.object_key,
                        "size_mb": size_mb,
                        "max_file_size_mb": self._config.max_file_size_mb,
                    },
                )
                return HandlerResponse(
                    status_code=413,
                    message=(
                        "File size exceeds the limit of "
                        f"{self._config.max_file_size_mb} MB."
                    ),
                )

            request = self._job_builder.build(event)
            self._transcription_service.start_job(request)

            logger.info(
                "Transcription job started",
                extra={"object_key": event.object_key, "job_name": request.job_name},
            )
            return HandlerResponse(
                status_code=200,
                message=f"Transcription job {request.job_name} started successfully.",
            )

        return HandlerResponse(
            status_code=200, message="Transcription function executed successfully."
        )
