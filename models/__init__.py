"""Pydantic models for the job posting form and its submission record."""

from .job_posting import (
    ApplicationPreferences,
    Checkout,
    Compensation,
    JobBasics,
    JobPostingForm,
    JobRequirements,
    PresetChoice,
    PresetMultiChoice,
)
from .submission import JobLocation, JobSubmissionRecord

__all__ = [
    "ApplicationPreferences",
    "Checkout",
    "Compensation",
    "JobBasics",
    "JobLocation",
    "JobPostingForm",
    "JobRequirements",
    "JobSubmissionRecord",
    "PresetChoice",
    "PresetMultiChoice",
]
