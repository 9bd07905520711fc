"""Core business logic for building transcription job requests."""

import re
import uuid
from collections.abc import Callable

from .models import StorageObjectEvent, TranscriptionJobRequest

_DISALLOWED_JOB_NAME_CHARS = re.compile(r"[^0-9a-zA-Z._-]")


def sanitize_job_name(name: str) -> str:
    """Replaces every character Transcribe rejects in a job name with '_'."""
    return _DISALLOWED_JOB_NAME_CHARS.sub("_", name)


class TranscriptionJobBuilder:
    """Builds transcription job requests from storage events."""

    def __init__(
        self,
        language_code: str,
        output_prefix: str,
        suffix_factory: Callable[[], str] = lambda: str(uuid.uuid4()),
    ):
        self._language_code = language_code
        self._output_prefix = output_prefix
        self._suffix_factory = suffix_factory

    def build(self, event: StorageObjectEvent) -> TranscriptionJobRequest:
        """
        Builds the job request for a supported media object.

        The output is written to the source bucket, under the configured
        prefix, as ``<job_name>.json``.

        Args:
            event: The storage event for the media object.

        Returns:
            TranscriptionJobRequest ready to be submitted.
        """
        job_name = self._job_name(event.object_key)
        return TranscriptionJobRequest(
            job_name=job_name,
            media_uri=event.uri,
            media_format=event.extension,
            language_code=self._language_code,
            output_bucket_name=event.bucket_name,
            output_key=f"{self._output_prefix}{job_name}.json",
        )

    def _job_name(self, object_key: str) -> str:
        """Derives a unique job name from the text before the key's first dot."""
        base_name = object_key.split(".", 1)[0]
        return sanitize_job_name(f"{base_name}_{self._suffix_factory()}")
