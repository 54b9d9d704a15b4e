"""Streamlit entry point for the job posting wizard."""

from __future__ import annotations

import logging
from typing import Any, MutableMapping

import streamlit as st

from auth import UserIdentity
from constants.keys import StateKeys
from integrations.jobs_backend import build_jobs_backend
from state.ensure_state import get_draft_store
from utils.errors import display_error
from utils.logging_context import set_user_id
from wizard.controller import WizardController
from wizard.layout import clear_widget_state, render_step_heading
from wizard.step_registry import WIZARD_STEPS, step_definition
from wizard.types import FIRST_STEP, LAST_STEP, ExitReason

logger = logging.getLogger(__name__)

_EXIT_MESSAGES: dict[ExitReason, str] = {
    ExitReason.SUBMITTED: "Job posted successfully!",
    ExitReason.DRAFT_SAVED: "Your job post was saved as a draft. You can continue later.",
    ExitReason.DISCARDED: "Your job post was discarded.",
}


def get_controller(
    identity: UserIdentity,
    session_state: MutableMapping[str, Any] | None = None,
) -> WizardController:
    """Return the session's controller, resuming a stored draft on first use."""

    state = st.session_state if session_state is None else session_state
    controller = state.get(StateKeys.WIZARD_CONTROLLER)
    if isinstance(controller, WizardController):
        return controller
    controller = WizardController.resume(
        get_draft_store(identity.user_id, state),
        build_jobs_backend(),
        company_id=identity.company_id,
    )
    state[StateKeys.WIZARD_CONTROLLER] = controller
    return controller


def _start_over() -> None:
    st.session_state.pop(StateKeys.WIZARD_CONTROLLER, None)
    clear_widget_state()


def _render_exit(controller: WizardController) -> None:
    reason = controller.state.exit_reason
    assert reason is not None
    st.session_state[StateKeys.LAST_EXIT] = reason.value
    if reason is ExitReason.SUBMITTED:
        st.success(_EXIT_MESSAGES[reason])
        if controller.state.job_id:
            st.caption(f"Job reference: {controller.state.job_id}")
    else:
        st.info(_EXIT_MESSAGES[reason])
    st.button("Post another job", on_click=_start_over)


def _render_cancel_dialog(controller: WizardController) -> None:
    with st.container(border=True):
        st.subheader("Save as Draft?")
        st.write("Would you like to save your progress as a draft? You can continue filling this form later.")
        save_col, discard_col, stay_col = st.columns(3)
        save_col.button("Save draft", key="cancel.save", type="primary", on_click=controller.save_draft_and_exit)
        discard_col.button("Discard", key="cancel.discard", on_click=controller.discard_and_exit)
        stay_col.button("Keep editing", key="cancel.dismiss", on_click=controller.dismiss_cancel)


def _render_navigation(controller: WizardController) -> None:
    step = controller.current_step
    definition = step_definition(step)
    back_col, cancel_col, next_col = st.columns((1, 1, 2))
    back_col.button("Back", key="nav.back", disabled=step == FIRST_STEP, on_click=controller.back)
    cancel_col.button("Cancel", key="nav.cancel", on_click=controller.request_cancel)
    forward = controller.submit if step == LAST_STEP else controller.next
    next_col.button(
        definition.next_label,
        key="nav.next",
        type="primary",
        disabled=controller.state.submitting,
        on_click=forward,
        use_container_width=True,
    )
    if controller.state.field_errors and step != LAST_STEP:
        st.warning("Please fix the highlighted fields to continue.")


def run_wizard(identity: UserIdentity) -> None:
    """Render the job posting wizard for ``identity``."""

    set_user_id(identity.user_id)
    controller = get_controller(identity)
    if controller.finished:
        _render_exit(controller)
        return

    step = controller.current_step
    definition = step_definition(step)
    render_step_heading(definition.title, definition.subtitle, step=step, total=len(WIZARD_STEPS))
    if controller.state.cancel_dialog_open:
        _render_cancel_dialog(controller)

    try:
        definition.renderer(controller)
    except Exception as error:  # keep the navigation usable when a step fails to render
        logger.exception("Rendering step %s failed", definition.key)
        display_error(
            f"We couldn't render the “{definition.title}” step. Please try again.",
            detail=repr(error),
        )
    _render_navigation(controller)


__all__ = ["get_controller", "run_wizard"]
