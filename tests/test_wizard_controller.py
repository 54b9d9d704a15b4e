from __future__ import annotations

import logging

import pytest

from constants.keys import FieldPaths
from core.errors import DraftStorageError, FieldUpdateError
from integrations.jobs_backend import InMemoryJobsBackend, SubmissionFailure, SubmissionResult
from models.job_posting import JobPostingForm
from state.drafts import DraftStore
from wizard.controller import WizardController, WizardState
from wizard.types import ExitReason
from wizard.validation import CITY_REQUIRED, COUPON_CODE_INVALID, MAX_AMOUNT_REQUIRED, NOTIFICATION_EMAIL_REQUIRED


def _at_step(form: JobPostingForm, step: int, backend, draft_store=None) -> WizardController:
    return WizardController(
        backend,
        form=form,
        state=WizardState(current_step=step),
        draft_store=draft_store,
        company_id="company-1",
    )


def test_fresh_controller_starts_on_first_step(backend) -> None:
    controller = WizardController(backend)

    assert controller.current_step == 1
    assert controller.form == JobPostingForm()
    assert controller.form.preferences.notification_emails == [""]


def test_next_blocks_on_missing_city(valid_form, with_updates, backend) -> None:
    controller = _at_step(with_updates(valid_form, {FieldPaths.CITY: ""}), 1, backend)

    assert controller.next() is False
    assert controller.current_step == 1
    assert controller.errors_for(FieldPaths.CITY) == [CITY_REQUIRED]


def test_next_advances_when_step_is_complete(valid_form, backend) -> None:
    controller = _at_step(valid_form, 1, backend)

    for expected in (2, 3, 4, 5, 6):
        assert controller.next() is True
        assert controller.current_step == expected
    assert controller.state.field_errors == {}


def test_next_on_last_step_stays(valid_form, backend) -> None:
    controller = _at_step(valid_form, 6, backend)

    assert controller.next() is True
    assert controller.current_step == 6
    assert backend.calls == 0


def test_range_pay_without_maximum_blocks_step_three(valid_form, with_updates, backend) -> None:
    controller = _at_step(with_updates(valid_form, {FieldPaths.MAX_AMOUNT: ""}), 3, backend)

    assert controller.next() is False
    assert controller.current_step == 3
    assert controller.state.field_errors == {FieldPaths.MAX_AMOUNT: [MAX_AMOUNT_REQUIRED]}


def test_invalid_only_email_blocks_step_four(valid_form, with_updates, backend) -> None:
    controller = _at_step(with_updates(valid_form, {FieldPaths.NOTIFICATION_EMAILS: ["hr@"]}), 4, backend)

    assert controller.next() is False
    assert controller.errors_for(FieldPaths.NOTIFICATION_EMAILS) == [NOTIFICATION_EMAIL_REQUIRED]


def test_editing_a_field_clears_its_error_even_if_still_invalid(valid_form, with_updates, backend) -> None:
    controller = _at_step(with_updates(valid_form, {FieldPaths.CITY: "", FieldPaths.PINCODE: "12"}), 1, backend)
    controller.next()
    assert set(controller.state.field_errors) == {FieldPaths.CITY, FieldPaths.PINCODE}

    controller.update_field(FieldPaths.CITY, " ")

    assert FieldPaths.CITY not in controller.state.field_errors
    assert FieldPaths.PINCODE in controller.state.field_errors


def test_editing_a_parent_path_clears_nested_errors(backend) -> None:
    controller = WizardController(backend, state=WizardState(current_step=2))
    controller.update_field(FieldPaths.MINIMUM_EDUCATION, "Other")
    controller.next()
    assert FieldPaths.CUSTOM_EDUCATION in controller.state.field_errors

    controller.update_field("requirements.minimum_education", {"selected": "Graduate", "custom_text": ""})

    assert FieldPaths.CUSTOM_EDUCATION not in controller.state.field_errors
    assert FieldPaths.MINIMUM_EDUCATION not in controller.state.field_errors


def test_update_field_rejects_unknown_paths_and_bad_values(backend) -> None:
    controller = WizardController(backend)

    with pytest.raises(FieldUpdateError):
        controller.update_field("basics.salary", "100")
    with pytest.raises(FieldUpdateError):
        controller.update_field(FieldPaths.JOB_TYPE, "on the moon")
    with pytest.raises(FieldUpdateError):
        controller.update_field(FieldPaths.SELECTED_PLAN, "platinum")
    assert controller.form == JobPostingForm()


@pytest.mark.parametrize(
    ("path", "value"),
    [
        (FieldPaths.MINIMUM_EDUCATION, "Astronaut"),
        (FieldPaths.LANGUAGE_REQUIREMENT, "Klingon"),
        (FieldPaths.MINIMUM_EXPERIENCE, "40 years"),
        (FieldPaths.GENDER, "unknown"),
        (FieldPaths.NUMBER_OF_HIRES, "11"),
        (FieldPaths.RECRUITMENT_TIMELINE, "Yesterday"),
        (FieldPaths.EMPLOYMENT_TYPES, ["Full-time", "Gig"]),
        (FieldPaths.SCHEDULES, ["Split shift"]),
        (FieldPaths.SELECTED_INDUSTRIES, ["Space piracy"]),
        (FieldPaths.SUPPLEMENTAL_PAY, ["Stock options"]),
        (FieldPaths.BENEFITS, ["Gym membership"]),
    ],
)
def test_update_field_rejects_values_outside_option_sets(backend, path: str, value) -> None:
    controller = WizardController(backend)

    with pytest.raises(FieldUpdateError):
        controller.update_field(path, value)
    assert controller.form == JobPostingForm()


def test_back_never_goes_below_first_step(backend) -> None:
    controller = WizardController(backend, state=WizardState(current_step=3))

    controller.back()
    assert controller.current_step == 2
    controller.back()
    controller.back()
    assert controller.current_step == 1


def test_jump_to_only_from_review(valid_form, backend) -> None:
    controller = _at_step(valid_form, 3, backend)
    assert controller.jump_to(1) is False
    assert controller.current_step == 3

    controller = _at_step(valid_form, 5, backend)
    assert controller.jump_to(5) is False
    assert controller.jump_to(6) is False
    assert controller.jump_to(2) is True
    assert controller.current_step == 2


def test_jump_to_does_not_validate(valid_form, with_updates, backend) -> None:
    controller = _at_step(with_updates(valid_form, {FieldPaths.CITY: ""}), 5, backend)

    assert controller.jump_to(4) is True
    assert controller.current_step == 4


def test_toggle_option_adds_and_removes(backend) -> None:
    controller = WizardController(backend)

    controller.toggle_option(FieldPaths.EMPLOYMENT_TYPES, "Part-time")
    controller.toggle_option(FieldPaths.EMPLOYMENT_TYPES, "Internship")
    controller.toggle_option(FieldPaths.EMPLOYMENT_TYPES, "Part-time")

    assert controller.form.requirements.employment_types == ["Internship"]


def test_toggle_option_requires_list_field(backend) -> None:
    controller = WizardController(backend)

    with pytest.raises(FieldUpdateError):
        controller.toggle_option(FieldPaths.CITY, "Pune")


def test_industry_picker_and_panels(backend) -> None:
    controller = WizardController(backend)

    controller.open_industry_picker()
    controller.toggle_industry("Education")
    controller.toggle_industry("Design")
    controller.toggle_industry("Education")
    controller.close_industry_picker()
    controller.toggle_additional_panel("age")
    controller.toggle_additional_panel("skills")
    controller.toggle_additional_panel("age")

    assert controller.form.requirements.selected_industries == ["Design"]
    assert controller.state.industry_picker_open is False
    assert controller.state.additional_panels_open == {"skills"}
    with pytest.raises(FieldUpdateError):
        controller.toggle_industry("Space piracy")
    with pytest.raises(ValueError):
        controller.toggle_additional_panel("salary")


def test_skills_are_trimmed_and_unique(backend) -> None:
    controller = WizardController(backend)

    assert controller.add_skill("  Negotiation ") is True
    assert controller.add_skill("Negotiation") is False
    assert controller.add_skill("   ") is False
    controller.add_skill("Excel")
    controller.remove_skill("Negotiation")

    assert controller.form.requirements.skills == ["Excel"]


def test_only_notification_email_cannot_be_removed(backend) -> None:
    controller = WizardController(backend)

    assert controller.remove_notification_email(0) is False
    assert controller.form.preferences.notification_emails == [""]


def test_notification_email_list_editing(backend) -> None:
    controller = WizardController(backend)

    controller.update_notification_email(0, "hr@acme.io")
    controller.add_notification_email()
    controller.update_notification_email(1, "ops@acme.io")
    controller.add_notification_email()

    assert controller.remove_notification_email(0) is False
    assert controller.remove_notification_email(2) is True
    assert controller.form.preferences.notification_emails == ["hr@acme.io", "ops@acme.io"]
    with pytest.raises(FieldUpdateError):
        controller.update_notification_email(5, "x@acme.io")


def test_apply_coupon_checks_format(backend) -> None:
    controller = WizardController(backend, state=WizardState(current_step=6))

    assert controller.apply_coupon() is False
    controller.update_field(FieldPaths.COUPON_CODE, "save-10")
    assert controller.apply_coupon() is False
    assert controller.errors_for(FieldPaths.COUPON_CODE) == [COUPON_CODE_INVALID]

    controller.update_field(FieldPaths.COUPON_CODE, "SAVE10")
    assert controller.errors_for(FieldPaths.COUPON_CODE) == []
    assert controller.apply_coupon() is True


def test_cancel_dialog_can_be_dismissed(backend) -> None:
    controller = WizardController(backend)

    controller.request_cancel()
    assert controller.state.cancel_dialog_open is True
    controller.dismiss_cancel()
    assert controller.state.cancel_dialog_open is False
    assert controller.finished is False


def test_save_draft_and_exit_stores_form_and_step(valid_form, backend, draft_store) -> None:
    controller = _at_step(valid_form, 3, backend, draft_store)
    controller.request_cancel()

    assert controller.save_draft_and_exit() is True

    assert controller.state.exit_reason is ExitReason.DRAFT_SAVED
    assert controller.state.cancel_dialog_open is False
    restored = draft_store.load_snapshot()
    assert restored is not None
    assert restored.form == valid_form
    assert restored.step == 3


class _BrokenStore:
    def get(self, key: str) -> str | None:
        raise DraftStorageError("disk gone")

    def set(self, key: str, value: str) -> None:
        raise DraftStorageError("disk full")

    def delete(self, key: str) -> None:
        raise DraftStorageError("disk full")


def test_draft_failure_does_not_block_exit(valid_form, backend) -> None:
    controller = _at_step(valid_form, 2, backend, DraftStore(_BrokenStore()))

    assert controller.save_draft_and_exit() is False
    assert controller.state.exit_reason is ExitReason.DRAFT_SAVED


def test_discard_and_exit_removes_draft(valid_form, backend, draft_store) -> None:
    draft_store.save(valid_form, step=2)
    controller = _at_step(valid_form, 2, backend, draft_store)

    controller.discard_and_exit()

    assert controller.state.exit_reason is ExitReason.DISCARDED
    assert draft_store.load() is None


def test_resume_restores_draft_and_step(valid_form, backend, draft_store) -> None:
    draft_store.save(valid_form, step=4)

    controller = WizardController.resume(draft_store, backend, company_id="company-1")

    assert controller.form == valid_form
    assert controller.current_step == 4


def test_resume_without_draft_starts_fresh(backend, draft_store) -> None:
    controller = WizardController.resume(draft_store, backend)

    assert controller.form == JobPostingForm()
    assert controller.current_step == 1


def test_submit_success_records_job_and_clears_draft(valid_form, backend, draft_store) -> None:
    draft_store.save(valid_form, step=6)
    controller = _at_step(valid_form, 6, backend, draft_store)

    assert controller.submit() is True

    assert controller.state.exit_reason is ExitReason.SUBMITTED
    assert controller.state.job_id in backend.jobs
    assert backend.jobs[controller.state.job_id]["company_id"] == "company-1"
    assert draft_store.load() is None
    assert controller.state.submitting is False


def test_submit_failure_keeps_step_form_and_message(valid_form, caplog) -> None:
    failing = InMemoryJobsBackend(failure=SubmissionFailure(kind="constraint", message="Database error: duplicate"))
    controller = _at_step(valid_form, 6, failing)
    caplog.set_level(logging.WARNING, logger="wizard.controller")

    assert controller.submit() is False

    assert controller.current_step == 6
    assert controller.form == valid_form
    assert controller.state.submission_error == "Database error: duplicate"
    assert controller.state.exit_reason is None
    assert controller.state.submitting is False
    assert any("constraint" in record.getMessage() for record in caplog.records)


def test_submit_can_be_retried_after_failure(valid_form) -> None:
    flaky = InMemoryJobsBackend(failure=SubmissionFailure(kind="network", message="offline"))
    controller = _at_step(valid_form, 6, flaky)
    assert controller.submit() is False

    flaky.failure = None

    assert controller.submit() is True
    assert controller.state.submission_error is None
    assert flaky.calls == 2


def test_submit_refused_while_in_flight(valid_form, backend) -> None:
    controller = _at_step(valid_form, 6, backend)
    controller.state.submitting = True

    assert controller.submit() is False
    assert backend.calls == 0


def test_submit_reentry_during_backend_call_is_refused(valid_form) -> None:
    class _ReentrantBackend:
        def __init__(self) -> None:
            self.calls = 0
            self.controller: WizardController | None = None
            self.nested_result: bool | None = None

        def create_job(self, record):
            self.calls += 1
            assert self.controller is not None
            self.nested_result = self.controller.submit()
            return SubmissionResult.success("job-1")

    reentrant = _ReentrantBackend()
    controller = _at_step(valid_form, 6, reentrant)
    reentrant.controller = controller

    assert controller.submit() is True
    assert reentrant.nested_result is False
    assert reentrant.calls == 1


def test_submit_revalidates_all_steps(valid_form, with_updates, backend) -> None:
    controller = _at_step(with_updates(valid_form, {FieldPaths.CITY: ""}), 6, backend)

    assert controller.submit() is False

    assert controller.current_step == 6
    assert controller.errors_for(FieldPaths.CITY) == [CITY_REQUIRED]
    assert controller.state.incomplete_steps == [1]
    assert controller.state.submission_error is None
    assert backend.calls == 0


def test_incomplete_form_reports_field_hints_not_backend_error(valid_form, with_updates) -> None:
    failing = InMemoryJobsBackend(failure=SubmissionFailure(kind="network", message="offline"))
    controller = _at_step(valid_form, 6, failing)
    assert controller.submit() is False
    assert controller.state.submission_error == "offline"

    controller.update_field(FieldPaths.CITY, "")

    assert controller.submit() is False
    assert controller.state.submission_error is None
    assert controller.errors_for(FieldPaths.CITY) == [CITY_REQUIRED]
    assert controller.state.incomplete_steps == [1]
    assert failing.calls == 1

    controller.update_field(FieldPaths.CITY, "Pune")

    assert controller.state.incomplete_steps == []


def test_second_submit_after_success_is_ignored(valid_form, backend, caplog) -> None:
    controller = _at_step(valid_form, 6, backend)
    caplog.set_level(logging.WARNING, logger="wizard.controller")

    assert controller.submit() is True
    job_id = controller.state.job_id

    assert controller.submit() is False
    assert backend.calls == 1
    assert list(backend.jobs) == [job_id]
    assert controller.state.job_id == job_id
    assert any("after the wizard exited" in record.getMessage() for record in caplog.records)


def test_edits_after_submission_are_ignored(valid_form, backend) -> None:
    controller = _at_step(valid_form, 6, backend)
    assert controller.submit() is True

    controller.update_field(FieldPaths.CITY, "Mumbai")

    assert controller.form.basics.city == "Pune"


def test_submit_only_from_last_step(valid_form, backend) -> None:
    controller = _at_step(valid_form, 5, backend)

    assert controller.submit() is False
    assert backend.calls == 0
