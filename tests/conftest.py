"""Shared fixtures for the s3-transcribe tests."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any
from unittest.mock import MagicMock

import pytest

from s3_transcribe.config import TranscribeConfig
from s3_transcribe.domain import TranscriptionJobBuilder
from s3_transcribe.handlers import StorageEventHandler
from s3_transcribe.infrastructure.interfaces import StorageClient, TranscriptionService

MB = 1024 * 1024


@pytest.fixture
def make_s3_record() -> Callable[[str, str], dict[str, Any]]:
    """Builds minimal S3 ObjectCreated records as delivered to Lambda."""

    def _make(bucket: str, key: str) -> dict[str, Any]:
        return {
            "eventSource": "aws:s3",
            "eventName": "ObjectCreated:Put",
            "s3": {
                "bucket": {"name": bucket},
                "object": {"key": key, "size": 1024},
            },
        }

    return _make


@pytest.fixture(autouse=True)
def aws_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keeps boto3 away from real credentials and regions."""
    monkeypatch.setenv("AWS_ACCESS_KEY_ID", "testing")
    monkeypatch.setenv("AWS_SECRET_ACCESS_KEY", "testing")
    monkeypatch.setenv("AWS_DEFAULT_REGION", "us-east-1")


@pytest.fixture
def config() -> TranscribeConfig:
    return TranscribeConfig()


@pytest.fixture
def storage() -> MagicMock:
    mock = MagicMock(spec=StorageClient)
    mock.get_object_size.return_value = 10 * MB
    return mock


@pytest.fixture
def transcription_service() -> MagicMock:
    return MagicMock(spec=TranscriptionService)


@pytest.fixture
def job_builder(config: TranscribeConfig) -> TranscriptionJobBuilder:
    return TranscriptionJobBuilder(
        config.language_code,
        config.output_prefix,
        suffix_factory=lambda: "0b5c6f4e-1d2a-4c3b-9e8f-7a6b5c4d3e2f",
    )


@pytest.fixture
def handler(
    storage: MagicMock,
    transcription_service: MagicMock,
    job_builder: TranscriptionJobBuilder,
    config: TranscribeConfig,
) -> StorageEventHandler:
    return StorageEventHandler(storage, transcription_service, job_builder, config)
