"""Custom exception types for the job posting wizard."""

from __future__ import annotations


class WizardError(Exception):
    """Base exception for job posting wizard issues."""


class FieldUpdateError(WizardError, ValueError):
    """Raised when a field path or value cannot be applied to the form."""

    def __init__(self, path: str, message: str | None = None) -> None:
        self.path = path
        super().__init__(message or f"Cannot update field '{path}'.")


SUBMISSION_UNAVAILABLE_MESSAGE = "We couldn't reach the job service. Please check your connection and try again."


class JobsBackendError(WizardError):
    """Raised by backend adapters when a job record could not be stored."""

    def __init__(self, message: str | None = None, *, kind: str = "unknown") -> None:
        self.kind = kind
        super().__init__(message or SUBMISSION_UNAVAILABLE_MESSAGE)


class DraftStorageError(WizardError):
    """Raised by key-value stores when the durable storage is unusable."""
