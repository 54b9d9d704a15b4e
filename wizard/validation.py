"""Per-step validation rules for the job posting wizard.

Every validator is a pure function of :class:`~models.job_posting.JobPostingForm`
and returns a mapping of dotted field paths to error messages. A field with no
issues never appears in the result, so an empty mapping means the step is
complete.
"""

from __future__ import annotations

from typing import Callable, Final, Mapping

from pydantic import EmailStr, ValidationError
from pydantic.type_adapter import TypeAdapter

from constants.keys import FieldPaths
from constants.options import NUMBER_OF_HIRES_CUSTOM, EscapeSentinels
from core.regexes import (
    AMOUNT_PATTERN,
    COUPON_CODE_PATTERN,
    PINCODE_PATTERN,
    WHOLE_NUMBER_PATTERN,
)
from models.job_posting import JobPostingForm
from wizard._logic import is_blank
from wizard.types import FieldErrors

_EMAIL_ADAPTER: Final[TypeAdapter[EmailStr]] = TypeAdapter(EmailStr)

MIN_PROFILE_DESCRIPTION_LENGTH: Final[int] = 30

JOB_TITLE_REQUIRED: Final[str] = "Job title is required"
JOB_TITLE_DESCRIPTION_REQUIRED: Final[str] = "Job title description is required"
CITY_REQUIRED: Final[str] = "City is required"
PINCODE_INVALID: Final[str] = "Pincode must be 6 digits"
EMPLOYMENT_TYPES_REQUIRED: Final[str] = "Select at least one employment type"
SCHEDULES_REQUIRED: Final[str] = "Select at least one schedule"
CUSTOM_SCHEDULE_REQUIRED: Final[str] = "Please specify schedule"
START_DATE_REQUIRED: Final[str] = "Select a start date"
NUMBER_OF_HIRES_REQUIRED: Final[str] = "Select number of hires"
CUSTOM_HIRES_REQUIRED: Final[str] = "Enter number of hires"
CUSTOM_HIRES_INVALID: Final[str] = "Number of hires must be a positive whole number"
RECRUITMENT_TIMELINE_REQUIRED: Final[str] = "Select recruitment timeline"
EDUCATION_REQUIRED: Final[str] = "Minimum education is required"
CUSTOM_EDUCATION_REQUIRED: Final[str] = "Please specify education"
LANGUAGE_REQUIRED: Final[str] = "Language requirement is required"
CUSTOM_LANGUAGE_REQUIRED: Final[str] = "Please specify language"
EXPERIENCE_REQUIRED: Final[str] = "Minimum experience is required"
CUSTOM_EXPERIENCE_REQUIRED: Final[str] = "Please specify experience"
CUSTOM_GENDER_REQUIRED: Final[str] = "Please specify gender"
AGE_INVALID: Final[str] = "Age must be a whole number"
MIN_AMOUNT_REQUIRED: Final[str] = "Enter minimum amount"
MAX_AMOUNT_REQUIRED: Final[str] = "Enter maximum amount"
AMOUNT_REQUIRED: Final[str] = "Enter amount"
AMOUNT_INVALID: Final[str] = "Amount must be a number"
CUSTOM_SUPPLEMENTAL_PAY_REQUIRED: Final[str] = "Please specify supplemental pay"
CUSTOM_BENEFIT_REQUIRED: Final[str] = "Please specify benefit"
PROFILE_DESCRIPTION_REQUIRED: Final[str] = "Job profile description is required"
PROFILE_DESCRIPTION_TOO_SHORT: Final[str] = (
    f"Job profile description must be at least {MIN_PROFILE_DESCRIPTION_LENGTH} characters"
)
NOTIFICATION_EMAIL_REQUIRED: Final[str] = "At least one valid email is required"
APPLICATION_DEADLINE_REQUIRED: Final[str] = "Select application deadline"
PLAN_REQUIRED: Final[str] = "Please select a plan"
COUPON_CODE_INVALID: Final[str] = "Invalid coupon code format"


def _add(errors: FieldErrors, path: str, message: str) -> None:
    errors.setdefault(path, []).append(message)


def is_valid_email(value: str) -> bool:
    """Return ``True`` when ``value`` is a syntactically valid email address."""

    candidate = (value or "").strip()
    if not candidate:
        return False
    try:
        _EMAIL_ADAPTER.validate_python(candidate)
    except (ValidationError, TypeError):
        return False
    return True


def _check_amount(errors: FieldErrors, path: str, raw: str, required_message: str) -> None:
    if is_blank(raw):
        _add(errors, path, required_message)
    elif not AMOUNT_PATTERN.fullmatch(raw.strip()):
        _add(errors, path, AMOUNT_INVALID)


def validate_basics(form: JobPostingForm) -> FieldErrors:
    """Validate Step 1 (job title and location)."""

    errors: FieldErrors = {}
    basics = form.basics
    if is_blank(basics.job_title):
        _add(errors, FieldPaths.JOB_TITLE, JOB_TITLE_REQUIRED)
    if is_blank(basics.job_title_description):
        _add(errors, FieldPaths.JOB_TITLE_DESCRIPTION, JOB_TITLE_DESCRIPTION_REQUIRED)
    if is_blank(basics.city):
        _add(errors, FieldPaths.CITY, CITY_REQUIRED)
    if basics.pincode and not PINCODE_PATTERN.fullmatch(basics.pincode):
        _add(errors, FieldPaths.PINCODE, PINCODE_INVALID)
    return errors


def validate_requirements(form: JobPostingForm) -> FieldErrors:
    """Validate Step 2 (schedule, hiring volume and candidate requirements)."""

    errors: FieldErrors = {}
    req = form.requirements

    if not req.employment_types:
        _add(errors, FieldPaths.EMPLOYMENT_TYPES, EMPLOYMENT_TYPES_REQUIRED)
    if not req.schedules.selected:
        _add(errors, FieldPaths.SCHEDULES, SCHEDULES_REQUIRED)
    elif EscapeSentinels.SCHEDULE in req.schedules.selected and is_blank(req.schedules.custom_text):
        _add(errors, FieldPaths.CUSTOM_SCHEDULE, CUSTOM_SCHEDULE_REQUIRED)
    if req.has_planned_start_date and req.planned_start_date is None:
        _add(errors, FieldPaths.PLANNED_START_DATE, START_DATE_REQUIRED)

    if is_blank(req.number_of_hires):
        _add(errors, FieldPaths.NUMBER_OF_HIRES, NUMBER_OF_HIRES_REQUIRED)
    elif req.number_of_hires == NUMBER_OF_HIRES_CUSTOM:
        custom = req.custom_number_of_hires.strip()
        if not custom:
            _add(errors, FieldPaths.CUSTOM_NUMBER_OF_HIRES, CUSTOM_HIRES_REQUIRED)
        elif not WHOLE_NUMBER_PATTERN.fullmatch(custom) or int(custom) < 1:
            _add(errors, FieldPaths.CUSTOM_NUMBER_OF_HIRES, CUSTOM_HIRES_INVALID)
    if is_blank(req.recruitment_timeline):
        _add(errors, FieldPaths.RECRUITMENT_TIMELINE, RECRUITMENT_TIMELINE_REQUIRED)

    if is_blank(req.minimum_education.selected):
        _add(errors, FieldPaths.MINIMUM_EDUCATION, EDUCATION_REQUIRED)
    elif req.minimum_education.selected == EscapeSentinels.EDUCATION and is_blank(
        req.minimum_education.custom_text
    ):
        _add(errors, FieldPaths.CUSTOM_EDUCATION, CUSTOM_EDUCATION_REQUIRED)

    if is_blank(req.language_requirement.selected):
        _add(errors, FieldPaths.LANGUAGE_REQUIREMENT, LANGUAGE_REQUIRED)
    elif req.language_requirement.selected == EscapeSentinels.LANGUAGE and is_blank(
        req.language_requirement.custom_text
    ):
        _add(errors, FieldPaths.CUSTOM_LANGUAGE, CUSTOM_LANGUAGE_REQUIRED)

    if req.experience_type != "fresher":
        if is_blank(req.minimum_experience.selected):
            _add(errors, FieldPaths.MINIMUM_EXPERIENCE, EXPERIENCE_REQUIRED)
        elif req.minimum_experience.selected == EscapeSentinels.EXPERIENCE and is_blank(
            req.minimum_experience.custom_text
        ):
            _add(errors, FieldPaths.CUSTOM_EXPERIENCE, CUSTOM_EXPERIENCE_REQUIRED)

    for path, raw in ((FieldPaths.MIN_AGE, req.min_age), (FieldPaths.MAX_AGE, req.max_age)):
        if raw.strip() and not WHOLE_NUMBER_PATTERN.fullmatch(raw.strip()):
            _add(errors, path, AGE_INVALID)

    if req.gender.selected == EscapeSentinels.GENDER and is_blank(req.gender.custom_text):
        _add(errors, FieldPaths.CUSTOM_GENDER, CUSTOM_GENDER_REQUIRED)
    return errors


def validate_compensation(form: JobPostingForm) -> FieldErrors:
    """Validate Step 3 (pay display and extras)."""

    errors: FieldErrors = {}
    comp = form.compensation
    if comp.pay_type == "range":
        _check_amount(errors, FieldPaths.MIN_AMOUNT, comp.min_amount, MIN_AMOUNT_REQUIRED)
        _check_amount(errors, FieldPaths.MAX_AMOUNT, comp.max_amount, MAX_AMOUNT_REQUIRED)
    else:
        _check_amount(errors, FieldPaths.AMOUNT, comp.amount, AMOUNT_REQUIRED)

    if EscapeSentinels.SUPPLEMENTAL_PAY in comp.supplemental_pay.selected and is_blank(
        comp.supplemental_pay.custom_text
    ):
        _add(errors, FieldPaths.CUSTOM_SUPPLEMENTAL_PAY, CUSTOM_SUPPLEMENTAL_PAY_REQUIRED)
    if EscapeSentinels.BENEFIT in comp.benefits.selected and is_blank(comp.benefits.custom_text):
        _add(errors, FieldPaths.CUSTOM_BENEFIT, CUSTOM_BENEFIT_REQUIRED)
    return errors


def validate_preferences(form: JobPostingForm) -> FieldErrors:
    """Validate Step 4 (description and application handling)."""

    errors: FieldErrors = {}
    prefs = form.preferences
    description = prefs.job_profile_description
    if is_blank(description):
        _add(errors, FieldPaths.JOB_PROFILE_DESCRIPTION, PROFILE_DESCRIPTION_REQUIRED)
    elif len(description.strip()) < MIN_PROFILE_DESCRIPTION_LENGTH:
        _add(errors, FieldPaths.JOB_PROFILE_DESCRIPTION, PROFILE_DESCRIPTION_TOO_SHORT)

    if not any(is_valid_email(email) for email in prefs.notification_emails):
        _add(errors, FieldPaths.NOTIFICATION_EMAILS, NOTIFICATION_EMAIL_REQUIRED)
    if prefs.has_application_deadline and prefs.application_deadline is None:
        _add(errors, FieldPaths.APPLICATION_DEADLINE, APPLICATION_DEADLINE_REQUIRED)
    return errors


def validate_review(form: JobPostingForm) -> FieldErrors:
    """Step 5 shows no inputs; it re-checks everything entered in steps 1-4."""

    return _merge(validate_basics, validate_requirements, validate_compensation, validate_preferences)(form)


def validate_checkout(form: JobPostingForm) -> FieldErrors:
    """Validate Step 6 (plan and coupon format)."""

    errors: FieldErrors = {}
    checkout = form.checkout
    if not checkout.selected_plan:
        _add(errors, FieldPaths.SELECTED_PLAN, PLAN_REQUIRED)
    if checkout.coupon_code and not COUPON_CODE_PATTERN.fullmatch(checkout.coupon_code):
        _add(errors, FieldPaths.COUPON_CODE, COUPON_CODE_INVALID)
    return errors


def _merge(*validators: Callable[[JobPostingForm], FieldErrors]) -> Callable[[JobPostingForm], FieldErrors]:
    def _run(form: JobPostingForm) -> FieldErrors:
        merged: FieldErrors = {}
        for validator in validators:
            for path, messages in validator(form).items():
                merged.setdefault(path, []).extend(messages)
        return merged

    return _run


STEP_VALIDATORS: Final[Mapping[int, Callable[[JobPostingForm], FieldErrors]]] = {
    1: validate_basics,
    2: validate_requirements,
    3: validate_compensation,
    4: validate_preferences,
    5: validate_review,
    6: validate_checkout,
}


_SECTION_STEPS: Final[Mapping[str, int]] = {
    "basics": 1,
    "requirements": 2,
    "compensation": 3,
    "preferences": 4,
    "checkout": 6,
}


def step_for_field(path: str) -> int | None:
    """Return the step that owns the field at ``path``."""

    return _SECTION_STEPS.get(path.split(".", 1)[0])


def steps_with_errors(errors: FieldErrors) -> list[int]:
    return sorted({step for path in errors if (step := step_for_field(path)) is not None})


def validate_step(step: int, form: JobPostingForm) -> FieldErrors:
    """Return the field errors blocking ``step`` for ``form``."""

    try:
        validator = STEP_VALIDATORS[step]
    except KeyError as error:
        raise ValueError(f"Unknown wizard step: {step}") from error
    return validator(form)


def validate_all(form: JobPostingForm) -> FieldErrors:
    """Return the errors of every data-bearing step (used before submission)."""

    return _merge(validate_review, validate_checkout)(form)


__all__ = [
    "STEP_VALIDATORS",
    "is_valid_email",
    "step_for_field",
    "steps_with_errors",
    "validate_all",
    "validate_basics",
    "validate_checkout",
    "validate_compensation",
    "validate_preferences",
    "validate_requirements",
    "validate_review",
    "validate_step",
]
