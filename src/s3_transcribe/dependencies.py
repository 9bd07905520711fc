"""Dependency injection configuration for the s3-transcribe function.

Clients are built on first use and reused across warm invocations of the
same execution environment.
"""

from functools import lru_cache

import boto3

from s3_transcribe.config import AppConfig, load_config
from s3_transcribe.domain import TranscriptionJobBuilder
from s3_transcribe.handlers import JobStatusHandler, StorageEventHandler
from s3_transcribe.infrastructure import AWSTranscribeService, S3StorageClient
from s3_transcribe.infrastructure.interfaces import StorageClient, TranscriptionService


@lru_cache(maxsize=1)
def get_config() -> AppConfig:
    """Returns the application configuration."""
    return load_config()


@lru_cache(maxsize=1)
def get_storage() -> StorageClient:
    """Returns the configured storage client."""
    s3 = boto3.client("s3", region_name=get_config().aws.region)
    return S3StorageClient(s3)


@lru_cache(maxsize=1)
def get_transcription_service() -> TranscriptionService:
    """Returns the configured transcription service."""
    transcribe = boto3.client("transcribe", region_name=get_config().aws.region)
    return AWSTranscribeService(transcribe)


def get_event_handler() -> StorageEventHandler:
    """Returns the configured storage event handler."""
    config = get_config().transcribe
    return StorageEventHandler(
        get_storage(),
        get_transcription_service(),
        TranscriptionJobBuilder(config.language_code, config.output_prefix),
        config,
    )


def get_status_handler() -> JobStatusHandler:
    """Returns the configured job status handler."""
    return JobStatusHandler(get_transcription_service())
