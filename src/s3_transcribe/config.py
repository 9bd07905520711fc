"""Application configuration loaded from environment variables."""

import os

from pydantic import BaseModel, Field, field_validator

DEFAULT_SUPPORTED_FORMATS = frozenset(
    {"mp3", "mp4", "wav", "flac", "mov", "mpg", "mpeg", "m4a"}
)


class TranscribeConfig(BaseModel, frozen=True):
    """Transcription job configuration."""

    supported_formats: frozenset[str] = DEFAULT_SUPPORTED_FORMATS
    max_file_size_mb: int = Field(default=5000, gt=0)
    language_code: str = "en-US"
    output_prefix: str = "transcriptions/"

    @field_validator("supported_formats")
    @classmethod
    def _normalize_formats(cls, value: frozenset[str]) -> frozenset[str]:
        formats = frozenset(f.strip().lstrip(".").lower() for f in value if f.strip())
        if not formats:
            raise ValueError("at least one supported format is required")
        return formats

    @field_validator("output_prefix")
    @classmethod
    def _ensure_trailing_slash(cls, value: str) -> str:
        if value and not value.endswith("/"):
            return value + "/"
        return value


class AWSConfig(BaseModel, frozen=True):
    """AWS client configuration."""

    region: str | None = None


class AppConfig(BaseModel, frozen=True):
    """Root application configuration."""

    transcribe: TranscribeConfig = TranscribeConfig()
    aws: AWSConfig = AWSConfig()


def _split_formats(raw: str | None) -> frozenset[str]:
    if not raw:
        return DEFAULT_SUPPORTED_FORMATS
    return frozenset(part for part in raw.split(",") if part.strip())


def load_config() -> AppConfig:
    """Loads configuration from environment variables."""
    return AppConfig(
        transcribe=TranscribeConfig(
            supported_formats=_split_formats(os.getenv("SUPPORTED_FORMATS")),
            max_file_size_mb=int(os.getenv("MAX_FILE_SIZE_MB", "5000")),
            language_code=os.getenv("TRANSCRIBE_LANGUAGE_CODE", "en-US"),
            output_prefix=os.getenv("TRANSCRIPTION_OUTPUT_PREFIX", "transcriptions/"),
        ),
        aws=AWSConfig(
            region=os.getenv("AWS_REGION", "").strip() or None,
        ),
    )
