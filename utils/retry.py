"""Backoff policy for calls to the hosted jobs service."""

from __future__ import annotations

import logging
from typing import Any, Callable, Iterable, ParamSpec, TypeVar

import backoff
import requests

T = TypeVar("T")
P = ParamSpec("P")

_retry_logger = logging.getLogger("utils.retry")

# Transport failures worth another attempt; HTTP error statuses are not retried.
NETWORK_RETRY_EXCEPTIONS: tuple[type[Exception], ...] = (
    requests.ConnectionError,
    requests.Timeout,
)


def _log_backoff(details: dict[str, Any]) -> None:
    error = details.get("exception")
    _retry_logger.info(
        "Jobs service unreachable (%s); retry %s in %.1fs",
        type(error).__name__ if error else "unknown error",
        details.get("tries"),
        details.get("wait", 0.0),
    )


def _log_giveup(details: dict[str, Any]) -> None:
    _retry_logger.warning(
        "Giving up on jobs service after %s attempts (%.1fs)",
        details.get("tries"),
        details.get("elapsed", 0.0),
    )


def retry_with_backoff(
    *,
    exceptions: Iterable[type[Exception]] = NETWORK_RETRY_EXCEPTIONS,
    max_tries: int = 3,
    max_time: float | None = None,
    jitter: Any = backoff.full_jitter,
) -> Callable[[Callable[P, T]], Callable[P, T]]:
    """Return a decorator retrying ``exceptions`` with exponential backoff.

    ``max_tries`` counts the first attempt, so ``1`` disables retries. Each
    wait and the final give-up are logged on ``utils.retry``.
    """

    if max_tries < 1:
        raise ValueError("max_tries must be at least 1")

    return backoff.on_exception(
        backoff.expo,
        tuple(exceptions),
        max_tries=max_tries,
        max_time=max_time,
        jitter=jitter,
        on_backoff=_log_backoff,
        on_giveup=_log_giveup,
        logger=None,
    )


__all__ = ["NETWORK_RETRY_EXCEPTIONS", "retry_with_backoff"]
