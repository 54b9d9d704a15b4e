"""Business logic helpers for the wizard flow.

Functions in this module never render UI components. They cover dotted-path
access into the form data, value coercion, and applying a single field update
to a :class:`~models.job_posting.JobPostingForm`.
"""

from __future__ import annotations

import logging
from typing import Any, Mapping, MutableSequence

from pydantic import ValidationError

from core.errors import FieldUpdateError
from models.job_posting import JobPostingForm


logger = logging.getLogger(__name__)


def _split(path: str) -> list[str]:
    parts = [part for part in path.split(".") if part]
    if not parts:
        raise FieldUpdateError(path, "Field path must not be empty.")
    return parts


def get_in(data: Mapping[str, Any] | None, path: str, default: Any = None) -> Any:
    """Return the nested value for ``path`` from ``data`` when available.

    Numeric segments index into lists, so ``preferences.notification_emails.0``
    addresses the first email slot.
    """

    cursor: Any = data
    for part in path.split("."):
        if isinstance(cursor, Mapping) and part in cursor:
            cursor = cursor[part]
        elif isinstance(cursor, list) and part.isdigit() and int(part) < len(cursor):
            cursor = cursor[int(part)]
        else:
            return default
    return cursor


def set_in(data: dict, path: str, value: Any) -> None:
    """Assign ``value`` in ``data`` following a dot-separated ``path``.

    Unlike a free-form profile, the form schema is fixed: missing
    intermediate keys or out-of-range list indexes raise ``FieldUpdateError``.
    """

    parts = _split(path)
    cursor: Any = data
    for part in parts[:-1]:
        cursor = _step_into(cursor, part, path)
    last = parts[-1]
    if isinstance(cursor, MutableSequence):
        if not last.isdigit() or int(last) >= len(cursor):
            raise FieldUpdateError(path, f"Index '{last}' is out of range for '{path}'.")
        cursor[int(last)] = value
        return
    if not isinstance(cursor, dict) or last not in cursor:
        raise FieldUpdateError(path, f"Unknown field '{path}'.")
    cursor[last] = value


def _step_into(cursor: Any, part: str, path: str) -> Any:
    if isinstance(cursor, dict) and part in cursor:
        return cursor[part]
    if isinstance(cursor, MutableSequence) and part.isdigit() and int(part) < len(cursor):
        return cursor[int(part)]
    raise FieldUpdateError(path, f"Unknown field '{path}'.")


def apply_field_update(form: JobPostingForm, path: str, value: Any) -> JobPostingForm:
    """Return a copy of ``form`` with ``value`` stored at ``path``.

    The updated payload is re-validated, so type mismatches and values outside
    an enumerated option set are rejected instead of silently stored.
    """

    payload = form.model_dump()
    set_in(payload, path, value)
    try:
        return JobPostingForm.model_validate(payload)
    except ValidationError as error:
        logger.debug("Rejected update for '%s': %s", path, error)
        raise FieldUpdateError(path, f"Invalid value for '{path}'.") from error


def paths_related(changed: str, error_key: str) -> bool:
    """Return ``True`` when editing ``changed`` should clear ``error_key``.

    Errors on the edited path itself, on any enclosing path, and on any nested
    path are considered stale once the value changes.
    """

    if changed == error_key:
        return True
    return error_key.startswith(f"{changed}.") or changed.startswith(f"{error_key}.")


def is_blank(value: object) -> bool:
    """Return ``True`` for ``None`` and whitespace-only strings."""

    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    return False


def coerce_float(value: object) -> float | None:
    """Parse ``value`` into a float, treating blanks and garbage as ``None``."""

    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        return float(value)
    if isinstance(value, str):
        cleaned = value.strip()
        if not cleaned:
            return None
        try:
            return float(cleaned)
        except ValueError:
            return None
    return None


def coerce_int(value: object) -> int | None:
    """Parse ``value`` into an int, treating blanks and garbage as ``None``."""

    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value)
    if isinstance(value, str):
        cleaned = value.strip()
        if not cleaned:
            return None
        try:
            return int(cleaned)
        except ValueError:
            return None
    return None


def optional_text(value: object) -> str | None:
    """Return the stripped string or ``None`` when empty."""

    if not isinstance(value, str):
        return None
    cleaned = value.strip()
    return cleaned or None


__all__ = [
    "apply_field_update",
    "coerce_float",
    "coerce_int",
    "get_in",
    "is_blank",
    "optional_text",
    "paths_related",
    "set_in",
]
