"""Utility helpers for the job posting app."""

from __future__ import annotations

from .errors import display_error as display_error
from .logging_context import configure_logging as configure_logging

__all__ = ["configure_logging", "display_error"]
