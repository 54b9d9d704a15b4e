"""Persistence adapters that store finished job postings.

``SupabaseJobsBackend`` inserts rows through the PostgREST endpoint of a
hosted Supabase project. ``InMemoryJobsBackend`` keeps records in process and
is used for local development and tests.
"""

from __future__ import annotations

import logging
import uuid
from dataclasses import dataclass
from typing import Any, Literal, Protocol

import requests

import config
from core.errors import SUBMISSION_UNAVAILABLE_MESSAGE, JobsBackendError
from models.submission import JobSubmissionRecord
from utils.retry import NETWORK_RETRY_EXCEPTIONS, retry_with_backoff

logger = logging.getLogger(__name__)

FailureKind = Literal["constraint", "network", "auth", "unknown"]

_AUTH_STATUSES = frozenset({401, 403})
_CONSTRAINT_STATUSES = frozenset({409, 422})
# Postgres SQLSTATE class 23 covers integrity constraint violations.
_CONSTRAINT_SQLSTATE_PREFIX = "23"


@dataclass(frozen=True)
class SubmissionFailure:
    """Structured reason why a job record was not stored."""

    kind: FailureKind
    message: str


@dataclass(frozen=True)
class SubmissionResult:
    """Outcome of :meth:`JobsBackend.create_job`."""

    job_id: str | None = None
    failure: SubmissionFailure | None = None

    @property
    def ok(self) -> bool:
        return self.failure is None and self.job_id is not None

    @classmethod
    def success(cls, job_id: str) -> "SubmissionResult":
        return cls(job_id=job_id)

    @classmethod
    def failed(cls, kind: FailureKind, message: str) -> "SubmissionResult":
        return cls(failure=SubmissionFailure(kind=kind, message=message))


class JobsBackend(Protocol):
    """Collaborator that accepts a finished job record."""

    def create_job(self, record: JobSubmissionRecord) -> SubmissionResult: ...


class SupabaseJobsBackend:
    """Insert job records into a Supabase table via its REST interface."""

    def __init__(
        self,
        base_url: str,
        api_key: str,
        *,
        table: str = "jobs",
        timeout: float = 10.0,
        max_tries: int = 3,
        access_token: str | None = None,
        session: requests.Session | None = None,
    ) -> None:
        if not base_url or not api_key:
            raise ValueError("Supabase URL and API key are required")
        self.endpoint = f"{base_url.rstrip('/')}/rest/v1/{table}"
        self._api_key = api_key
        self._access_token = access_token
        self._timeout = timeout
        self._max_tries = max_tries
        self._session = session or requests.Session()

    def _headers(self) -> dict[str, str]:
        return {
            "apikey": self._api_key,
            "Authorization": f"Bearer {self._access_token or self._api_key}",
            "Content-Type": "application/json",
            "Prefer": "return=representation",
        }

    def _post(self, payload: dict[str, Any]) -> requests.Response:
        return self._session.post(
            self.endpoint,
            json=payload,
            headers=self._headers(),
            timeout=self._timeout,
        )

    def _insert(self, payload: dict[str, Any]) -> str:
        send = retry_with_backoff(
            exceptions=NETWORK_RETRY_EXCEPTIONS,
            max_tries=self._max_tries,
        )(self._post)
        try:
            response = send(payload)
        except NETWORK_RETRY_EXCEPTIONS as error:
            raise JobsBackendError(SUBMISSION_UNAVAILABLE_MESSAGE, kind="network") from error
        except requests.RequestException as error:
            raise JobsBackendError(f"Request failed: {error}", kind="unknown") from error
        _raise_for_status(response)
        return _extract_job_id(response)

    def create_job(self, record: JobSubmissionRecord) -> SubmissionResult:
        try:
            job_id = self._insert(record.to_payload())
        except JobsBackendError as error:
            logger.warning("Job insert failed (%s): %s", error.kind, error)
            return SubmissionResult.failed(error.kind, str(error))  # type: ignore[arg-type]
        logger.info("Created job %s", job_id)
        return SubmissionResult.success(job_id)


def _error_details(response: requests.Response) -> tuple[str, str]:
    try:
        body = response.json()
    except ValueError:
        return "", response.text or response.reason or ""
    if isinstance(body, dict):
        code = str(body.get("code") or "")
        message = str(body.get("message") or body.get("msg") or body.get("error") or "")
        return code, message
    return "", str(body)


def _raise_for_status(response: requests.Response) -> None:
    if response.status_code < 400:
        return
    code, message = _error_details(response)
    detail = message or f"HTTP {response.status_code}"
    if response.status_code in _AUTH_STATUSES:
        raise JobsBackendError(f"Not authorised to post jobs: {detail}", kind="auth")
    if response.status_code in _CONSTRAINT_STATUSES or code.startswith(_CONSTRAINT_SQLSTATE_PREFIX):
        raise JobsBackendError(f"Database error: {detail}", kind="constraint")
    raise JobsBackendError(f"Database error: {detail}", kind="unknown")


def _extract_job_id(response: requests.Response) -> str:
    try:
        body = response.json()
    except ValueError as error:
        raise JobsBackendError("Unexpected response from job service", kind="unknown") from error
    row = body[0] if isinstance(body, list) and body else body
    if isinstance(row, dict) and row.get("id") is not None:
        return str(row["id"])
    raise JobsBackendError("Job service did not return an id", kind="unknown")


class InMemoryJobsBackend:
    """Keep created jobs in a dictionary.

    Set ``failure`` to make every call fail with that reason.
    """

    def __init__(self, *, failure: SubmissionFailure | None = None) -> None:
        self.jobs: dict[str, dict[str, Any]] = {}
        self.failure = failure
        self.calls = 0

    def create_job(self, record: JobSubmissionRecord) -> SubmissionResult:
        self.calls += 1
        if self.failure is not None:
            return SubmissionResult(failure=self.failure)
        job_id = uuid.uuid4().hex
        self.jobs[job_id] = record.to_payload()
        return SubmissionResult.success(job_id)


def build_jobs_backend(access_token: str | None = None) -> JobsBackend:
    """Return the configured backend, falling back to the in-memory store."""

    if config.is_backend_configured():
        return SupabaseJobsBackend(
            config.JOBS_API_URL,
            config.JOBS_API_KEY,
            table=config.JOBS_TABLE,
            timeout=config.JOBS_API_TIMEOUT,
            max_tries=config.JOBS_API_MAX_TRIES,
            access_token=access_token,
        )
    logger.warning("JOBS_API_URL/JOBS_API_KEY not configured; jobs are kept in memory only.")
    return InMemoryJobsBackend()


__all__ = [
    "FailureKind",
    "InMemoryJobsBackend",
    "JobsBackend",
    "SubmissionFailure",
    "SubmissionResult",
    "SupabaseJobsBackend",
    "build_jobs_backend",
]
