"""Central configuration for the job posting wizard.

Values come from ``.env`` (via ``python-dotenv``), Streamlit secrets and the
process environment. Secrets win over the environment so deployments can keep
credentials out of the shell.
"""

import logging
import os
import warnings
from typing import Mapping

import streamlit as st
from dotenv import load_dotenv

load_dotenv()


logger = logging.getLogger(__name__)

_LOG_LEVELS: tuple[str, ...] = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


def _coerce_secret_value(value: object) -> str:
    """Return ``value`` as a trimmed string without raising on unexpected types."""

    if value is None:
        return ""
    if isinstance(value, str):
        return value.strip()
    if isinstance(value, (bytes, bytearray)):
        return value.decode("utf-8", errors="ignore").strip()
    return str(value).strip()


def get_secret(*names: str, section: str = "supabase") -> str:
    """Return the first configured value for ``names``.

    Lookup order: top-level Streamlit secrets, the ``[section]`` table of the
    secrets file, then environment variables.
    """

    section_values: object = None
    try:
        for name in names:
            if name in st.secrets:
                value = _coerce_secret_value(st.secrets[name])
                if value:
                    return value
        section_values = st.secrets.get(section)
    except Exception as error:  # missing or malformed secrets.toml
        logger.debug("Streamlit secrets unavailable: %s", error)
    if isinstance(section_values, Mapping):
        for name in names:
            value = _coerce_secret_value(section_values.get(name))
            if value:
                return value
    for name in names:
        value = _coerce_secret_value(os.getenv(name))
        if value:
            return value
    return ""


def _normalise_timeout(value: object | None, *, default: float) -> float:
    """Return a positive timeout value in seconds."""

    if value is None:
        return default
    candidate = value
    if isinstance(candidate, str):
        stripped = candidate.strip()
        if not stripped:
            return default
        try:
            candidate = float(stripped)
        except ValueError:
            warnings.warn(
                "Unsupported JOBS_API_TIMEOUT '%s'; falling back to %.1f seconds." % (candidate, default),
                RuntimeWarning,
            )
            return default
    if isinstance(candidate, (int, float)) and float(candidate) > 0:
        return float(candidate)
    warnings.warn(
        "JOBS_API_TIMEOUT must be a positive number; falling back to %.1f seconds." % default,
        RuntimeWarning,
    )
    return default


def _parse_positive_int(value: object | None, *, env_var: str, default: int) -> int:
    """Return a positive integer parsed from ``value`` or ``default``."""

    if value is None:
        return default
    try:
        parsed = int(float(str(value).strip()))
    except ValueError:
        warnings.warn("%s is not a number; using %s" % (env_var, default), RuntimeWarning)
        return default
    return parsed if parsed > 0 else default


def normalise_log_level(value: object | None, *, default: str = "INFO") -> str:
    """Return a valid :mod:`logging` level name."""

    if isinstance(value, str) and value.strip().upper() in _LOG_LEVELS:
        return value.strip().upper()
    return default


JOBS_API_URL = get_secret("JOBS_API_URL", "SUPABASE_URL").rstrip("/")
JOBS_API_KEY = get_secret("JOBS_API_KEY", "SUPABASE_ANON_KEY")
JOBS_TABLE = os.getenv("JOBS_TABLE", "jobs").strip() or "jobs"
JOBS_API_TIMEOUT = _normalise_timeout(os.getenv("JOBS_API_TIMEOUT"), default=10.0)
JOBS_API_MAX_TRIES = _parse_positive_int(os.getenv("JOBS_API_MAX_TRIES"), env_var="JOBS_API_MAX_TRIES", default=3)
DRAFT_STORAGE_DIR = os.getenv("DRAFT_STORAGE_DIR", ".drafts").strip() or ".drafts"
LOG_LEVEL = normalise_log_level(os.getenv("LOG_LEVEL"))


def is_backend_configured() -> bool:
    """Return ``True`` when a hosted jobs backend can be used."""

    return bool(JOBS_API_URL and JOBS_API_KEY)


__all__ = [
    "DRAFT_STORAGE_DIR",
    "JOBS_API_KEY",
    "JOBS_API_MAX_TRIES",
    "JOBS_API_TIMEOUT",
    "JOBS_API_URL",
    "JOBS_TABLE",
    "LOG_LEVEL",
    "get_secret",
    "is_backend_configured",
    "normalise_log_level",
]
