"""Contextual log fields for the job posting wizard.

Every record carries the Streamlit session, the signed-in employer and the
wizard step so a failed submission can be traced back to one browser tab.
"""

from __future__ import annotations

import contextvars
import logging
from contextlib import contextmanager
from typing import Iterator, Mapping

_DEFAULT_LOG_FORMAT = (
    "%(asctime)s %(levelname)s [session=%(session_id)s user=%(user_id)s step=%(wizard_step)s] "
    "%(name)s: %(message)s"
)

_UNSET = "-"

_CONTEXT_VARS: Mapping[str, contextvars.ContextVar[str]] = {
    "session_id": contextvars.ContextVar("session_id", default=_UNSET),
    "user_id": contextvars.ContextVar("user_id", default=_UNSET),
    "wizard_step": contextvars.ContextVar("wizard_step", default=_UNSET),
}
_BASE_RECORD_FACTORY = logging.getLogRecordFactory()
_factory_installed = False


def _stamp(record: logging.LogRecord) -> None:
    for field_name, var in _CONTEXT_VARS.items():
        setattr(record, field_name, var.get())


def _context_record_factory(*args: object, **kwargs: object) -> logging.LogRecord:
    record = _BASE_RECORD_FACTORY(*args, **kwargs)
    _stamp(record)
    return record


class _ContextFilter(logging.Filter):
    """Stamp records created before the record factory was installed."""

    def filter(self, record: logging.LogRecord) -> bool:  # noqa: D401 - logging protocol
        if not hasattr(record, "session_id"):
            _stamp(record)
        return True


def _normalise(value: object | None) -> str:
    if value is None:
        return _UNSET
    text = str(value).strip()
    return text or _UNSET


def configure_logging(*, level: int | str = logging.INFO) -> None:
    """Install the context-aware format on the root logger.

    Safe to call on every Streamlit rerun: handlers and filters are only
    added once, while ``level`` is always applied.
    """

    global _factory_installed
    root = logging.getLogger()
    if root.handlers:
        root.setLevel(level)
    else:
        logging.basicConfig(level=level, format=_DEFAULT_LOG_FORMAT)
    for handler in root.handlers:
        if handler.formatter is None:
            handler.setFormatter(logging.Formatter(_DEFAULT_LOG_FORMAT))
    if not any(isinstance(flt, _ContextFilter) for flt in root.filters):
        root.addFilter(_ContextFilter())
    if not _factory_installed:
        logging.setLogRecordFactory(_context_record_factory)
        _factory_installed = True


def set_session_id(session_id: str | None) -> None:
    """Bind a session identifier for subsequent log records."""

    _CONTEXT_VARS["session_id"].set(_normalise(session_id))


def set_user_id(user_id: str | None) -> None:
    _CONTEXT_VARS["user_id"].set(_normalise(user_id))


def set_wizard_step(step: int | str | None) -> None:
    _CONTEXT_VARS["wizard_step"].set(_normalise(step))


@contextmanager
def log_context(
    *,
    session_id: str | None = None,
    user_id: str | None = None,
    wizard_step: int | str | None = None,
) -> Iterator[None]:
    """Temporarily override logging context fields that are not ``None``."""

    overrides = {"session_id": session_id, "user_id": user_id, "wizard_step": wizard_step}
    tokens = [
        (_CONTEXT_VARS[name], _CONTEXT_VARS[name].set(_normalise(value)))
        for name, value in overrides.items()
        if value is not None
    ]
    try:
        yield
    finally:
        for var, token in reversed(tokens):
            var.reset(token)


__all__ = [
    "configure_logging",
    "log_context",
    "set_session_id",
    "set_user_id",
    "set_wizard_step",
]
