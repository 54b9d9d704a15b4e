"""Core package for job posting errors and shared patterns."""

from .errors import DraftStorageError, FieldUpdateError, JobsBackendError, WizardError

__all__ = ["DraftStorageError", "FieldUpdateError", "JobsBackendError", "WizardError"]
