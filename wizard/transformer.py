"""Turn a validated :class:`JobPostingForm` into the stored job record."""

from __future__ import annotations

import logging
from datetime import datetime, timedelta, timezone
from typing import Iterable

from constants.options import NUMBER_OF_HIRES_CUSTOM, PLANS, EscapeSentinels
from models.job_posting import JobPostingForm, PresetChoice, PresetMultiChoice
from models.submission import JobLocation, JobSubmissionRecord
from wizard._logic import coerce_float, coerce_int, optional_text

logger = logging.getLogger(__name__)


def resolve_choice(choice: PresetChoice, sentinel: str) -> str:
    """Return the final value of a preset-or-custom single choice.

    ``Other`` plus ``"PhD candidate"`` resolves to ``"PhD candidate"`` while a
    regular preset such as ``"Graduate"`` is returned as is.
    """

    if choice.selected == sentinel:
        return choice.custom_text.strip()
    return choice.selected


def resolve_multi_choice(choice: PresetMultiChoice, sentinel: str) -> list[str]:
    """Return the selected presets with the sentinel replaced by custom text.

    An empty custom text drops the sentinel entirely so the stored list never
    contains the placeholder value.
    """

    custom = choice.custom_text.strip()
    resolved: list[str] = []
    for value in choice.selected:
        if value == sentinel:
            if custom:
                resolved.append(custom)
            continue
        resolved.append(value)
    return list(dict.fromkeys(resolved))


def _clean_emails(emails: Iterable[str]) -> list[str]:
    return [email.strip() for email in emails if email and email.strip()]


def _resolve_hires(form: JobPostingForm) -> str:
    req = form.requirements
    if req.number_of_hires == NUMBER_OF_HIRES_CUSTOM:
        return req.custom_number_of_hires.strip()
    return req.number_of_hires


def to_submission_record(
    form: JobPostingForm,
    *,
    company_id: str | None = None,
    posted_at: datetime | None = None,
) -> JobSubmissionRecord:
    """Build the persistence record for ``form``.

    ``form`` is expected to pass :func:`wizard.validation.validate_all`.
    Optional numeric inputs that are blank become ``None``.
    """

    basics = form.basics
    req = form.requirements
    comp = form.compensation
    prefs = form.preferences
    checkout = form.checkout

    posted = posted_at or datetime.now(timezone.utc)
    plan = PLANS.get(checkout.selected_plan or "")
    expires_at = posted + timedelta(days=plan.listing_days) if plan else None
    payment_status = "paid" if plan is not None and plan.is_free else "pending"

    minimum_experience: str | None = None
    if req.experience_type != "fresher":
        minimum_experience = resolve_choice(req.minimum_experience, EscapeSentinels.EXPERIENCE)

    record = JobSubmissionRecord(
        company_id=company_id,
        title=basics.job_title.strip(),
        description=basics.job_title_description.strip(),
        job_type=basics.job_type,
        location=JobLocation(
            city=basics.city.strip(),
            area=optional_text(basics.area),
            pincode=optional_text(basics.pincode),
            street_address=optional_text(basics.street_address),
        ),
        employment_types=list(req.employment_types),
        schedules=resolve_multi_choice(req.schedules, EscapeSentinels.SCHEDULE),
        planned_start_date=req.planned_start_date if req.has_planned_start_date else None,
        number_of_hires=_resolve_hires(form),
        recruitment_timeline=req.recruitment_timeline,
        pay_type=comp.pay_type,
        min_amount=coerce_float(comp.min_amount) if comp.pay_type == "range" else None,
        max_amount=coerce_float(comp.max_amount) if comp.pay_type == "range" else None,
        amount=coerce_float(comp.amount) if comp.pay_type != "range" else None,
        pay_rate=comp.pay_rate,
        supplemental_pay=resolve_multi_choice(comp.supplemental_pay, EscapeSentinels.SUPPLEMENTAL_PAY),
        benefits=resolve_multi_choice(comp.benefits, EscapeSentinels.BENEFIT),
        minimum_education=resolve_choice(req.minimum_education, EscapeSentinels.EDUCATION),
        language_requirement=resolve_choice(req.language_requirement, EscapeSentinels.LANGUAGE),
        experience_type=req.experience_type,
        minimum_experience=minimum_experience,
        industries=list(req.selected_industries),
        min_age=coerce_int(req.min_age),
        max_age=coerce_int(req.max_age),
        gender=resolve_choice(req.gender, EscapeSentinels.GENDER),
        skills=list(req.skills),
        job_profile_description=prefs.job_profile_description.strip(),
        notification_emails=_clean_emails(prefs.notification_emails),
        send_individual_emails=prefs.send_individual_emails,
        require_resume=prefs.require_resume,
        allow_candidate_contact=prefs.allow_candidate_contact,
        application_deadline=prefs.application_deadline if prefs.has_application_deadline else None,
        selected_plan=checkout.selected_plan,
        coupon_code=optional_text(checkout.coupon_code),
        require_gst_invoice=checkout.require_gst_invoice,
        save_card_for_future=checkout.save_card_for_future,
        status="active",
        payment_status=payment_status,
        visibility="public",
        posted_date=posted,
        expires_at=expires_at,
    )
    logger.debug("Built submission record for plan %s", checkout.selected_plan)
    return record


__all__ = ["resolve_choice", "resolve_multi_choice", "to_submission_record"]
