from pathlib import Path
import sys
from dataclasses import dataclass
from typing import Any, Callable, Mapping

import streamlit as st

import pytest


ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from integrations.jobs_backend import InMemoryJobsBackend  # noqa: E402
from models.job_posting import JobPostingForm  # noqa: E402
from state.drafts import DraftStore, SessionKeyValueStore  # noqa: E402
from wizard._logic import apply_field_update  # noqa: E402


@dataclass
class _SessionDict(dict[str, object]):
    """Lightweight replacement for ``st.session_state`` during tests."""

    def clear(self) -> None:  # type: ignore[override]
        super().clear()


@pytest.fixture(autouse=True)
def _stub_streamlit_session_state(monkeypatch: pytest.MonkeyPatch) -> None:
    """Replace Streamlit's runtime-bound session state with a plain dictionary."""

    session_state = _SessionDict()
    monkeypatch.setattr(st, "session_state", session_state, raising=False)
    yield


VALID_FORM_DATA: dict[str, Any] = {
    "basics": {
        "job_title": "Sales Executive",
        "job_title_description": "Field sales for FMCG products",
        "job_type": "onsite",
        "city": "Pune",
        "area": "Kothrud",
        "pincode": "411038",
        "street_address": "12 Karve Road",
    },
    "requirements": {
        "employment_types": ["Full-time"],
        "schedules": {"selected": ["Day shift"], "custom_text": ""},
        "number_of_hires": "2",
        "recruitment_timeline": "1 to 2 weeks",
        "minimum_education": {"selected": "Graduate", "custom_text": ""},
        "language_requirement": {"selected": "Good English", "custom_text": ""},
        "experience_type": "experienced",
        "minimum_experience": {"selected": "1 year", "custom_text": ""},
    },
    "compensation": {
        "pay_type": "range",
        "min_amount": "20000",
        "max_amount": "30000",
        "pay_rate": "month",
    },
    "preferences": {
        "job_profile_description": "Visit retail partners daily and grow regional sales volume.",
        "notification_emails": ["hr@acme.io"],
    },
    "checkout": {"selected_plan": "standard"},
}


@pytest.fixture
def valid_form() -> JobPostingForm:
    """A form that passes validation on every step."""

    return JobPostingForm.model_validate(VALID_FORM_DATA)


@pytest.fixture
def with_updates() -> Callable[[JobPostingForm, Mapping[str, Any]], JobPostingForm]:
    """Return a helper applying ``{dotted.path: value}`` updates to a form."""

    def _apply(form: JobPostingForm, updates: Mapping[str, Any]) -> JobPostingForm:
        for path, value in updates.items():
            form = apply_field_update(form, path, value)
        return form

    return _apply


@pytest.fixture
def backend() -> InMemoryJobsBackend:
    return InMemoryJobsBackend()


@pytest.fixture
def draft_store() -> DraftStore:
    return DraftStore(SessionKeyValueStore({}))
