"""Tests for the boto3-backed storage and transcription clients."""

from __future__ import annotations

from unittest.mock import MagicMock

import pytest
from botocore.exceptions import ClientError

from s3_transcribe.domain import TranscriptionJobRequest
from s3_transcribe.exceptions import TranscriptionJobSubmitError
from s3_transcribe.infrastructure import AWSTranscribeService, S3StorageClient


@pytest.fixture
def job_request() -> TranscriptionJobRequest:
    return TranscriptionJobRequest(
        job_name="call_abc",
        media_uri="s3://media/call.mp3",
        media_format="mp3",
        language_code="en-US",
        output_bucket_name="media",
        output_key="transcriptions/call_abc.json",
    )


class TestS3StorageClient:
    def test_returns_content_length(self) -> None:
        s3 = MagicMock()
        s3.head_object.return_value = {"ContentLength": 2048}

        size = S3StorageClient(s3).get_object_size("media", "call.mp3")

        assert size == 2048
        s3.head_object.assert_called_once_with(Bucket="media", Key="call.mp3")

    def test_missing_content_length_is_zero(self) -> None:
        s3 = MagicMock()
        s3.head_object.return_value = {}

        assert S3StorageClient(s3).get_object_size("media", "call.mp3") == 0

    def test_client_error_is_not_wrapped(self) -> None:
        s3 = MagicMock()
        error = ClientError({"Error": {"Code": "403", "Message": "Forbidden"}}, "HeadObject")
        s3.head_object.side_effect = error

        with pytest.raises(ClientError) as exc_info:
            S3StorageClient(s3).get_object_size("media", "call.mp3")

        assert exc_info.value is error


class TestAWSTranscribeService:
    def test_start_job_sends_request(self, job_request: TranscriptionJobRequest) -> None:
        transcribe = MagicMock()

        AWSTranscribeService(transcribe).start_job(job_request)

        transcribe.start_transcription_job.assert_called_once_with(
            TranscriptionJobName="call_abc",
            Media={"MediaFileUri": "s3://media/call.mp3"},
            MediaFormat="mp3",
            LanguageCode="en-US",
            OutputBucketName="media",
            OutputKey="transcriptions/call_abc.json",
        )

    def test_start_job_wraps_errors(self, job_request: TranscriptionJobRequest) -> None:
        transcribe = MagicMock()
        cause = ClientError(
            {"Error": {"Code": "ConflictException", "Message": "exists"}},
            "StartTranscriptionJob",
        )
        transcribe.start_transcription_job.side_effect = cause

        with pytest.raises(TranscriptionJobSubmitError) as exc_info:
            AWSTranscribeService(transcribe).start_job(job_request)

        assert exc_info.value.job_name == "call_abc"
        assert exc_info.value.cause is cause
        assert exc_info.value.__cause__ is cause

    def test_get_job_status(self) -> None:
        transcribe = MagicMock()
        transcribe.get_transcription_job.return_value = {
            "TranscriptionJob": {
                "TranscriptionJobName": "call_abc",
                "TranscriptionJobStatus": "FAILED",
                "FailureReason": "Invalid sample rate",
            }
        }

        status = AWSTranscribeService(transcribe).get_job_status("call_abc")

        assert status.status == "FAILED"
        assert status.failure_reason == "Invalid sample rate"
        transcribe.get_transcription_job.assert_called_once_with(
            TranscriptionJobName="call_abc"
        )

    def test_get_job_status_without_job_payload(self) -> None:
        transcribe = MagicMock()
        transcribe.get_transcription_job.return_value = {}

        status = AWSTranscribeService(transcribe).get_job_status("call_abc")

        assert status.status is None
