"""Shared type aliases for the wizard package."""

from __future__ import annotations

from enum import StrEnum
from typing import Mapping


FieldErrors = dict[str, list[str]]
ReadOnlyFieldErrors = Mapping[str, list[str]]

FIRST_STEP = 1
REVIEW_STEP = 5
LAST_STEP = 6


class ExitReason(StrEnum):
    """Ways the wizard can be left."""

    SUBMITTED = "submitted"
    DRAFT_SAVED = "draft_saved"
    DISCARDED = "discarded"


__all__ = [
    "ExitReason",
    "FIRST_STEP",
    "FieldErrors",
    "LAST_STEP",
    "REVIEW_STEP",
    "ReadOnlyFieldErrors",
]
