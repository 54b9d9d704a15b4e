from __future__ import annotations

import logging

import pytest
import requests

from utils.retry import retry_with_backoff


@pytest.fixture(autouse=True)
def _no_sleep(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr("time.sleep", lambda _seconds: None)


def test_retries_network_errors_and_logs_give_up(caplog) -> None:
    attempts: list[int] = []

    @retry_with_backoff(max_tries=3, jitter=None)
    def _flaky() -> str:
        attempts.append(1)
        raise requests.ConnectionError("offline")

    caplog.set_level(logging.INFO, logger="utils.retry")
    with pytest.raises(requests.ConnectionError):
        _flaky()

    assert len(attempts) == 3
    messages = [record.getMessage() for record in caplog.records if record.name == "utils.retry"]
    assert sum("retry" in message for message in messages) == 2
    assert any("Giving up" in message for message in messages)


def test_other_errors_propagate_immediately() -> None:
    attempts: list[int] = []

    @retry_with_backoff(max_tries=3)
    def _broken() -> None:
        attempts.append(1)
        raise ValueError("bad payload")

    with pytest.raises(ValueError):
        _broken()
    assert len(attempts) == 1


def test_max_tries_must_be_positive() -> None:
    with pytest.raises(ValueError):
        retry_with_backoff(max_tries=0)
