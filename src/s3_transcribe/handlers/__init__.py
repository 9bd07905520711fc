"""Handler layer exports."""

from .job_status_handler import JobStatusHandler
from .storage_event_handler import StorageEventHandler

__all__ = ["JobStatusHandler", "StorageEventHandler"]
