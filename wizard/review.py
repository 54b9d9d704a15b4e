"""Read-only summary of steps 1-4 shown on the review step."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from constants.options import (
    EXPERIENCE_TYPES,
    GENDERS,
    NUMBER_OF_HIRES_CUSTOM,
    PAY_RATES,
    EscapeSentinels,
    label_for,
)
from models.job_posting import JobPostingForm
from wizard.transformer import resolve_choice, resolve_multi_choice

_EMPTY = "Not specified"


@dataclass(frozen=True)
class ReviewRow:
    label: str
    value: str


@dataclass(frozen=True)
class ReviewSection:
    """Rows belonging to one step plus the step the "Edit" button opens."""

    title: str
    step: int
    rows: tuple[ReviewRow, ...]


def _text(value: object) -> str:
    if value is None:
        return _EMPTY
    if isinstance(value, (list, tuple)):
        joined = ", ".join(str(item) for item in value if str(item).strip())
        return joined or _EMPTY
    cleaned = str(value).strip()
    return cleaned or _EMPTY


def format_pay(form: JobPostingForm) -> str:
    """Return the salary line, e.g. ``₹20000 - ₹30000 per month``."""

    comp = form.compensation
    rate = label_for(PAY_RATES, comp.pay_rate).lower()
    if comp.pay_type == "range":
        if not comp.min_amount and not comp.max_amount:
            return _EMPTY
        return f"₹{comp.min_amount or '?'} - ₹{comp.max_amount or '?'} {rate}"
    if not comp.amount:
        return _EMPTY
    prefix = {"starting": "Starting at ", "maximum": "Up to "}.get(comp.pay_type, "")
    return f"{prefix}₹{comp.amount} {rate}"


def _basics(form: JobPostingForm) -> ReviewSection:
    basics = form.basics
    location = ", ".join(
        part for part in (basics.street_address, basics.area, basics.city, basics.pincode) if part.strip()
    )
    return ReviewSection(
        title="Job basics",
        step=1,
        rows=(
            ReviewRow("Job title", _text(basics.job_title)),
            ReviewRow("Short description", _text(basics.job_title_description)),
            ReviewRow("Job type", basics.job_type.capitalize()),
            ReviewRow("Location", _text(location)),
        ),
    )


def _requirements(form: JobPostingForm) -> ReviewSection:
    req = form.requirements
    hires = req.custom_number_of_hires if req.number_of_hires == NUMBER_OF_HIRES_CUSTOM else req.number_of_hires
    rows: list[ReviewRow] = [
        ReviewRow("Employment types", _text(req.employment_types)),
        ReviewRow("Schedules", _text(resolve_multi_choice(req.schedules, EscapeSentinels.SCHEDULE))),
        ReviewRow(
            "Planned start date",
            _text(req.planned_start_date.isoformat() if req.has_planned_start_date and req.planned_start_date else None),
        ),
        ReviewRow("Number of hires", _text(hires)),
        ReviewRow("Recruitment timeline", _text(req.recruitment_timeline)),
        ReviewRow("Minimum education", _text(resolve_choice(req.minimum_education, EscapeSentinels.EDUCATION))),
        ReviewRow("Language", _text(resolve_choice(req.language_requirement, EscapeSentinels.LANGUAGE))),
        ReviewRow("Experience", label_for(EXPERIENCE_TYPES, req.experience_type)),
    ]
    if req.experience_type != "fresher":
        rows.append(
            ReviewRow(
                "Minimum experience",
                _text(resolve_choice(req.minimum_experience, EscapeSentinels.EXPERIENCE)),
            )
        )
    if req.selected_industries:
        rows.append(ReviewRow("Industries", _text(req.selected_industries)))
    if req.min_age or req.max_age:
        rows.append(ReviewRow("Age", f"{req.min_age or '?'} - {req.max_age or '?'}"))
    gender = resolve_choice(req.gender, EscapeSentinels.GENDER)
    rows.append(ReviewRow("Gender", _text(label_for(GENDERS, gender))))
    if req.skills:
        rows.append(ReviewRow("Skills", _text(req.skills)))
    return ReviewSection(title="Requirements", step=2, rows=tuple(rows))


def _compensation(form: JobPostingForm) -> ReviewSection:
    comp = form.compensation
    return ReviewSection(
        title="Pay and benefits",
        step=3,
        rows=(
            ReviewRow("Pay", format_pay(form)),
            ReviewRow(
                "Supplemental pay",
                _text(resolve_multi_choice(comp.supplemental_pay, EscapeSentinels.SUPPLEMENTAL_PAY)),
            ),
            ReviewRow("Benefits", _text(resolve_multi_choice(comp.benefits, EscapeSentinels.BENEFIT))),
        ),
    )


def _preferences(form: JobPostingForm) -> ReviewSection:
    prefs = form.preferences
    deadline = prefs.application_deadline if prefs.has_application_deadline else None
    return ReviewSection(
        title="Description and applications",
        step=4,
        rows=(
            ReviewRow("Job description", _text(prefs.job_profile_description)),
            ReviewRow("Notification emails", _text(prefs.notification_emails)),
            ReviewRow("Email per application", "Yes" if prefs.send_individual_emails else "No"),
            ReviewRow("Resume required", "Yes" if prefs.require_resume else "No"),
            ReviewRow("Candidates may call", "Yes" if prefs.allow_candidate_contact else "No"),
            ReviewRow("Application deadline", _text(deadline.isoformat() if deadline else None)),
        ),
    )


def build_review(form: JobPostingForm) -> Sequence[ReviewSection]:
    """Return the review sections in step order."""

    return (_basics(form), _requirements(form), _compensation(form), _preferences(form))


__all__ = ["ReviewRow", "ReviewSection", "build_review", "format_pay"]
