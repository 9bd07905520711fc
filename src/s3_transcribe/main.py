"""
S3 Transcribe Function.

Lambda entry points for the transcription trigger and the status check.
"""

from typing import Any

from ddtrace import patch_all

from s3_transcribe.dependencies import get_event_handler, get_status_handler
from s3_transcribe.domain import StorageObjectEvent
from s3_transcribe.exceptions import InvalidEventError
from s3_transcribe.logging import setup_logging

patch_all()

logger = setup_logging()


def _parse_records(event: dict[str, Any]) -> list[StorageObjectEvent]:
    records = []
    for record in event.get("Records") or []:
        if "s3" not in record:
            logger.warning(
                "Skipping record without S3 payload",
                extra={"event_source": record.get("eventSource")},
            )
            continue
        records.append(StorageObjectEvent.from_record(record))
    return records


def lambda_handler(event: dict[str, Any], context: Any) -> dict[str, Any]:
    """Submits a transcription job for newly created media objects."""
    records = _parse_records(event)
    logger.info("Storage event received", extra={"record_count": len(records)})

    response = get_event_handler().process(records)
    return response.to_dict()


def status_handler(event: dict[str, Any], context: Any) -> dict[str, str]:
    """Checks a transcription job's status once."""
    job_name = event.get("job_name") or event.get("jobName")
    if not job_name:
        raise InvalidEventError("missing 'job_name'")

    status = get_status_handler().check(job_name)
    return {"job_name": job_name, "status": status.value}
