"""State machine behind the six-step job posting wizard.

The controller owns the :class:`~models.job_posting.JobPostingForm` and a
:class:`WizardState`. Renderers never mutate either directly; they call the
operations below, which keep field errors, overlays and the current step
consistent.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any

from constants.keys import FieldPaths
from constants.options import ADDITIONAL_PANELS, INDUSTRIES
from core.errors import FieldUpdateError, JobsBackendError
from core.regexes import COUPON_CODE_PATTERN
from integrations.jobs_backend import JobsBackend, SubmissionResult
from models.job_posting import JobPostingForm
from state.drafts import DraftStore
from utils.logging_context import set_wizard_step
from wizard._logic import apply_field_update, get_in, paths_related
from wizard.list_editors import (
    add_tag,
    append_email_slot,
    can_remove_email,
    remove_email,
    remove_tag,
    replace_email,
    toggle_value,
)
from wizard.transformer import to_submission_record
from wizard.types import FIRST_STEP, LAST_STEP, REVIEW_STEP, ExitReason, FieldErrors
from wizard.validation import (
    COUPON_CODE_INVALID,
    STEP_VALIDATORS,
    steps_with_errors,
    validate_all,
    validate_step,
)

logger = logging.getLogger(__name__)

_PANEL_KEYS = frozenset(key for key, _label in ADDITIONAL_PANELS)
_JUMP_TARGETS = range(FIRST_STEP, REVIEW_STEP)


@dataclass
class WizardState:
    """Navigation and overlay state that is not part of the job data."""

    current_step: int = FIRST_STEP
    field_errors: FieldErrors = field(default_factory=dict)
    additional_panels_open: set[str] = field(default_factory=set)
    industry_picker_open: bool = False
    cancel_dialog_open: bool = False
    submitting: bool = False
    submission_error: str | None = None
    incomplete_steps: list[int] = field(default_factory=list)
    exit_reason: ExitReason | None = None
    job_id: str | None = None


class WizardController:
    """Apply user intents to the form and drive step transitions."""

    def __init__(
        self,
        backend: JobsBackend,
        *,
        form: JobPostingForm | None = None,
        state: WizardState | None = None,
        draft_store: DraftStore | None = None,
        company_id: str | None = None,
    ) -> None:
        self._backend = backend
        self._form = form or JobPostingForm()
        self._state = state or WizardState()
        self._draft_store = draft_store
        self.company_id = company_id
        set_wizard_step(self._state.current_step)

    @classmethod
    def resume(
        cls,
        draft_store: DraftStore,
        backend: JobsBackend,
        *,
        company_id: str | None = None,
    ) -> "WizardController":
        """Return a controller hydrated from the stored draft, if any."""

        restored = draft_store.load_snapshot()
        if restored is None:
            return cls(backend, draft_store=draft_store, company_id=company_id)
        step = restored.step if restored.step in STEP_VALIDATORS else FIRST_STEP
        logger.info("Resuming job posting draft at step %s", step)
        return cls(
            backend,
            form=restored.form,
            state=WizardState(current_step=step),
            draft_store=draft_store,
            company_id=company_id,
        )

    @property
    def form(self) -> JobPostingForm:
        return self._form

    @property
    def state(self) -> WizardState:
        return self._state

    @property
    def current_step(self) -> int:
        return self._state.current_step

    @property
    def finished(self) -> bool:
        return self._state.exit_reason is not None

    def errors_for(self, path: str) -> list[str]:
        return list(self._state.field_errors.get(path, ()))

    # ------------------------------------------------------------------
    # Field updates
    # ------------------------------------------------------------------
    def update_field(self, path: str, value: Any) -> None:
        """Store ``value`` at ``path`` and drop errors attached to it.

        Edits after the wizard exited are ignored.

        Raises:
            FieldUpdateError: If the path is unknown or the value does not fit
                the field type.
        """

        if self.finished:
            logger.warning("Ignored update of %s after the wizard exited", path)
            return
        self._form = apply_field_update(self._form, path, value)
        self._clear_errors(path)

    def _clear_errors(self, path: str) -> None:
        errors = self._state.field_errors
        stale = [key for key in errors if paths_related(path, key)]
        for key in stale:
            errors.pop(key, None)
        if stale:
            self._state.incomplete_steps = steps_with_errors(errors)

    def _list_at(self, path: str) -> list[str]:
        current = get_in(self._form.model_dump(), path)
        if not isinstance(current, list):
            raise FieldUpdateError(path, f"'{path}' is not a list field.")
        return current

    def toggle_option(self, path: str, value: str) -> None:
        """Add ``value`` to the multi-select at ``path`` or remove it."""

        self.update_field(path, toggle_value(self._list_at(path), value))

    def toggle_additional_panel(self, key: str) -> None:
        if key not in _PANEL_KEYS:
            raise ValueError(f"Unknown additional requirement panel: {key}")
        panels = self._state.additional_panels_open
        if key in panels:
            panels.discard(key)
        else:
            panels.add(key)

    def open_industry_picker(self) -> None:
        self._state.industry_picker_open = True

    def close_industry_picker(self) -> None:
        self._state.industry_picker_open = False

    def toggle_industry(self, name: str) -> None:
        if name not in INDUSTRIES:
            raise FieldUpdateError(FieldPaths.SELECTED_INDUSTRIES, f"Unknown industry '{name}'.")
        self.toggle_option(FieldPaths.SELECTED_INDUSTRIES, name)

    # Skills and notification emails -------------------------------------
    def add_skill(self, text: str) -> bool:
        """Append a trimmed skill tag; blanks and duplicates are ignored."""

        skills = self._form.requirements.skills
        updated = add_tag(skills, text)
        if updated == skills:
            return False
        self.update_field(FieldPaths.SKILLS, updated)
        return True

    def remove_skill(self, skill: str) -> None:
        self.update_field(FieldPaths.SKILLS, remove_tag(self._form.requirements.skills, skill))

    def add_notification_email(self) -> None:
        self.update_field(
            FieldPaths.NOTIFICATION_EMAILS,
            append_email_slot(self._form.preferences.notification_emails),
        )

    def update_notification_email(self, index: int, value: str) -> None:
        emails = self._form.preferences.notification_emails
        try:
            updated = replace_email(emails, index, value)
        except IndexError as error:
            raise FieldUpdateError(FieldPaths.NOTIFICATION_EMAILS, str(error)) from error
        self.update_field(FieldPaths.NOTIFICATION_EMAILS, updated)

    def remove_notification_email(self, index: int) -> bool:
        """Remove the email slot at ``index``.

        The first slot is permanent, so the list never becomes empty.
        """

        emails = self._form.preferences.notification_emails
        if not can_remove_email(emails, index):
            logger.debug("Refused to remove notification email slot %s", index)
            return False
        self.update_field(FieldPaths.NOTIFICATION_EMAILS, remove_email(emails, index))
        return True

    def apply_coupon(self) -> bool:
        """Check the coupon format; discounts are not calculated here."""

        code = self._form.checkout.coupon_code
        if not code:
            return False
        if not COUPON_CODE_PATTERN.fullmatch(code):
            self._state.field_errors[FieldPaths.COUPON_CODE] = [COUPON_CODE_INVALID]
            return False
        logger.info("Coupon %s accepted; no discount rules are configured", code)
        return True

    # ------------------------------------------------------------------
    # Navigation
    # ------------------------------------------------------------------
    def _move_to(self, step: int) -> None:
        previous = self._state.current_step
        self._state.current_step = step
        set_wizard_step(step)
        logger.debug("Wizard step %s -> %s", previous, step)

    def next(self) -> bool:
        """Validate the current step and advance when it is complete.

        On the last step a successful validation keeps the wizard in place;
        :meth:`submit` is the forward action there.
        """

        step = self._state.current_step
        errors = validate_step(step, self._form)
        self._state.field_errors = errors
        self._state.incomplete_steps = steps_with_errors(errors)
        if errors:
            logger.info("Step %s blocked by %d field error(s)", step, len(errors))
            return False
        if step < LAST_STEP:
            self._move_to(step + 1)
        return True

    def back(self) -> None:
        self._state.field_errors = {}
        self._state.incomplete_steps = []
        self._move_to(max(FIRST_STEP, self._state.current_step - 1))

    def jump_to(self, step: int) -> bool:
        """Jump from the review step straight to one of the data steps."""

        if self._state.current_step != REVIEW_STEP or step not in _JUMP_TARGETS:
            logger.warning("Ignored jump to step %s from step %s", step, self._state.current_step)
            return False
        self._state.field_errors = {}
        self._state.incomplete_steps = []
        self._move_to(step)
        return True

    # ------------------------------------------------------------------
    # Cancel and drafts
    # ------------------------------------------------------------------
    def request_cancel(self) -> None:
        self._state.cancel_dialog_open = True

    def dismiss_cancel(self) -> None:
        self._state.cancel_dialog_open = False

    def save_draft_and_exit(self) -> bool:
        """Save a draft and leave the wizard; storage failures do not block exit."""

        saved = False
        if self._draft_store is not None:
            saved = self._draft_store.save(self._form, step=self._state.current_step)
        self._state.cancel_dialog_open = False
        self._state.exit_reason = ExitReason.DRAFT_SAVED
        return saved

    def discard_and_exit(self) -> None:
        if self._draft_store is not None:
            self._draft_store.discard()
        self._state.cancel_dialog_open = False
        self._state.exit_reason = ExitReason.DISCARDED

    # ------------------------------------------------------------------
    # Submission
    # ------------------------------------------------------------------
    def submit(self) -> bool:
        """Validate everything, build the record and hand it to the backend.

        Returns ``True`` once the backend accepted the job. Incomplete fields
        are reported through ``field_errors`` and ``incomplete_steps``; a
        rejected request sets ``submission_error``. Either way the wizard
        stays on the last step with the form untouched.
        """

        state = self._state
        if self.finished:
            logger.warning("Submit ignored after the wizard exited (%s)", state.exit_reason)
            return False
        if state.current_step != LAST_STEP:
            logger.warning("Submit ignored on step %s", state.current_step)
            return False
        if state.submitting:
            logger.warning("Submit ignored while a submission is in flight")
            return False

        errors = validate_all(self._form)
        state.field_errors = errors
        state.incomplete_steps = steps_with_errors(errors)
        if errors:
            state.submission_error = None
            logger.info("Submission blocked by %d field error(s)", len(errors))
            return False

        state.submitting = True
        state.submission_error = None
        try:
            record = to_submission_record(self._form, company_id=self.company_id)
            try:
                result = self._backend.create_job(record)
            except JobsBackendError as error:
                result = SubmissionResult.failed(error.kind, str(error))  # type: ignore[arg-type]
        finally:
            state.submitting = False

        if result.failure is not None or result.job_id is None:
            failure = result.failure
            kind = failure.kind if failure else "unknown"
            message = failure.message if failure else "An unexpected error occurred. Please try again."
            state.submission_error = message
            logger.warning("Job submission failed (%s): %s", kind, message)
            return False

        state.job_id = result.job_id
        if self._draft_store is not None:
            self._draft_store.discard()
        state.exit_reason = ExitReason.SUBMITTED
        logger.info("Job %s submitted", result.job_id)
        return True


__all__ = ["WizardController", "WizardState"]
