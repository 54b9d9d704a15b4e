from __future__ import annotations

from datetime import date, datetime, timezone

import pytest

from constants.keys import FieldPaths
from models.job_posting import PresetChoice, PresetMultiChoice
from wizard.transformer import resolve_choice, resolve_multi_choice, to_submission_record

POSTED_AT = datetime(2026, 10, 1, 9, 30, tzinfo=timezone.utc)


@pytest.mark.parametrize(
    ("choice", "expected"),
    [
        (PresetChoice(selected="Other", custom_text="PhD candidate"), "PhD candidate"),
        (PresetChoice(selected="Other", custom_text="  PhD candidate "), "PhD candidate"),
        (PresetChoice(selected="Graduate", custom_text="ignored"), "Graduate"),
    ],
)
def test_resolve_choice(choice: PresetChoice, expected: str) -> None:
    assert resolve_choice(choice, "Other") == expected


def test_resolve_multi_choice_replaces_sentinel() -> None:
    choice = PresetMultiChoice(selected=["Day shift", "Others"], custom_text="Split shift")

    assert resolve_multi_choice(choice, "Others") == ["Day shift", "Split shift"]


def test_resolve_multi_choice_drops_sentinel_without_text() -> None:
    choice = PresetMultiChoice(selected=["Others", "Night shift"], custom_text=" ")

    assert resolve_multi_choice(choice, "Others") == ["Night shift"]


def test_record_from_complete_form(valid_form) -> None:
    record = to_submission_record(valid_form, company_id="company-1", posted_at=POSTED_AT)

    assert record.company_id == "company-1"
    assert record.title == "Sales Executive"
    assert record.location.city == "Pune"
    assert record.location.pincode == "411038"
    assert record.number_of_hires == "2"
    assert record.min_amount == 20000.0
    assert record.max_amount == 30000.0
    assert record.amount is None
    assert record.minimum_education == "Graduate"
    assert record.minimum_experience == "1 year"
    assert record.gender == "both"
    assert record.min_age is None and record.max_age is None
    assert record.planned_start_date is None
    assert record.application_deadline is None
    assert record.status == "active"
    assert record.visibility == "public"
    assert record.payment_status == "pending"
    assert record.coupon_code is None
    assert record.posted_date == POSTED_AT
    assert record.expires_at == datetime(2026, 10, 31, 9, 30, tzinfo=timezone.utc)


def test_record_resolves_custom_values(valid_form, with_updates) -> None:
    form = with_updates(
        valid_form,
        {
            FieldPaths.MINIMUM_EDUCATION: "Other",
            FieldPaths.CUSTOM_EDUCATION: "PhD candidate",
            FieldPaths.LANGUAGE_REQUIREMENT: "Other",
            FieldPaths.CUSTOM_LANGUAGE: "Marathi",
            FieldPaths.GENDER: "others",
            FieldPaths.CUSTOM_GENDER: "Non-binary",
            FieldPaths.SCHEDULES: ["Others"],
            FieldPaths.CUSTOM_SCHEDULE: "Split shift",
            FieldPaths.BENEFITS: ["Health insurance", "Other"],
            FieldPaths.CUSTOM_BENEFIT: "Gym membership",
            FieldPaths.NUMBER_OF_HIRES: "custom",
            FieldPaths.CUSTOM_NUMBER_OF_HIRES: "25",
        },
    )

    record = to_submission_record(form, posted_at=POSTED_AT)

    assert record.minimum_education == "PhD candidate"
    assert record.language_requirement == "Marathi"
    assert record.gender == "Non-binary"
    assert record.schedules == ["Split shift"]
    assert record.benefits == ["Health insurance", "Gym membership"]
    assert record.number_of_hires == "25"


def test_record_numeric_and_date_conversion(valid_form, with_updates) -> None:
    form = with_updates(
        valid_form,
        {
            FieldPaths.PAY_TYPE: "exact",
            FieldPaths.AMOUNT: "18000.5",
            FieldPaths.MIN_AGE: "21",
            FieldPaths.MAX_AGE: "",
            FieldPaths.HAS_PLANNED_START_DATE: True,
            FieldPaths.PLANNED_START_DATE: "2026-11-02",
            FieldPaths.APPLICATION_DEADLINE: "2026-10-25",
        },
    )

    record = to_submission_record(form, posted_at=POSTED_AT)

    assert record.amount == 18000.5
    assert record.min_amount is None and record.max_amount is None
    assert record.min_age == 21
    assert record.max_age is None
    assert record.planned_start_date == date(2026, 11, 2)
    # The deadline toggle is off, so the stale date is not submitted.
    assert record.application_deadline is None


def test_fresher_roles_have_no_minimum_experience(valid_form, with_updates) -> None:
    form = with_updates(valid_form, {FieldPaths.EXPERIENCE_TYPE: "fresher"})

    assert to_submission_record(form, posted_at=POSTED_AT).minimum_experience is None


def test_free_plan_is_paid_and_expires_after_listing_days(valid_form, with_updates) -> None:
    form = with_updates(valid_form, {FieldPaths.SELECTED_PLAN: "basic", FieldPaths.COUPON_CODE: "WELCOME"})

    record = to_submission_record(form, posted_at=POSTED_AT)

    assert record.payment_status == "paid"
    assert record.coupon_code == "WELCOME"
    assert record.expires_at == datetime(2026, 10, 8, 9, 30, tzinfo=timezone.utc)


def test_notification_emails_are_trimmed(valid_form, with_updates) -> None:
    form = with_updates(valid_form, {FieldPaths.NOTIFICATION_EMAILS: [" hr@acme.io ", "", "  "]})

    assert to_submission_record(form, posted_at=POSTED_AT).notification_emails == ["hr@acme.io"]


def test_payload_is_json_ready(valid_form) -> None:
    payload = to_submission_record(valid_form, posted_at=POSTED_AT).to_payload()

    assert payload["location"] == {
        "city": "Pune",
        "area": "Kothrud",
        "pincode": "411038",
        "street_address": "12 Karve Road",
    }
    assert payload["posted_date"].startswith("2026-10-01T09:30:00")
    assert payload["selected_plan"] == "standard"
