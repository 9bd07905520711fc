"""Custom exceptions for the s3-transcribe function."""


class TranscriptionJobSubmitError(Exception):
    """Raised when submitting a transcription job fails."""

    def __init__(self, job_name: str, cause: Exception | None = None):
        self.job_name = job_name
        self.cause = cause
        super().__init__(f"Error starting transcription job '{job_name}': {cause}")


class TranscriptionJobFailedError(Exception):
    """Raised when the transcription service reports a job as failed."""

    def __init__(self, job_name: str, reason: str | None = None):
        self.job_name = job_name
        self.reason = reason
        message = f"Transcription job {job_name} failed."
        if reason:
            message = f"{message} Reason: {reason}"
        super().__init__(message)


class InvalidEventError(Exception):
    """Raised when an invocation event is missing required fields."""

    def __init__(self, detail: str):
        self.detail = detail
        super().__init__(f"Invalid event: {detail}")
