from __future__ import annotations

import streamlit as st

from constants.keys import FieldPaths
from wizard.controller import WizardController
from wizard.layout import date_field, render_field_errors, text_field, toggle_field, widget_key
from wizard.list_editors import can_remove_email
from wizard.validation import MIN_PROFILE_DESCRIPTION_LENGTH

__all__ = ["step_preferences"]


def _email_key(index: int) -> str:
    return widget_key(f"{FieldPaths.NOTIFICATION_EMAILS}.{index}")


def _commit_email(controller: WizardController, index: int) -> None:
    controller.update_notification_email(index, st.session_state.get(_email_key(index), ""))


def _remove_email(controller: WizardController, index: int) -> None:
    if controller.remove_notification_email(index):
        # Slots shift left; reseed the inputs from the model on the next run.
        for position in range(index, len(controller.form.preferences.notification_emails) + 1):
            st.session_state.pop(_email_key(position), None)


def _render_notification_emails(controller: WizardController) -> None:
    st.markdown("**Send application updates to** *")
    emails = controller.form.preferences.notification_emails
    for index, email in enumerate(emails):
        key = _email_key(index)
        st.session_state.setdefault(key, email)
        input_col, remove_col = st.columns((0.85, 0.15))
        with input_col:
            st.text_input(
                f"Email {index + 1}",
                key=key,
                label_visibility="collapsed",
                placeholder="Enter email address",
                on_change=_commit_email,
                args=(controller, index),
            )
        if can_remove_email(emails, index):
            remove_col.button("✕", key=f"email.remove.{index}", on_click=_remove_email, args=(controller, index))
    render_field_errors(controller, FieldPaths.NOTIFICATION_EMAILS)
    st.button("+ Add email", key="email.add", on_click=controller.add_notification_email)


def step_preferences(controller: WizardController) -> None:
    """Render the job description and application handling options."""

    text_field(
        controller,
        FieldPaths.JOB_PROFILE_DESCRIPTION,
        "Job description",
        required=True,
        multiline=True,
        help=f"At least {MIN_PROFILE_DESCRIPTION_LENGTH} characters.",
    )
    _render_notification_emails(controller)
    toggle_field(controller, FieldPaths.SEND_INDIVIDUAL_EMAILS, "Send an email for every new application")
    toggle_field(controller, FieldPaths.REQUIRE_RESUME, "Ask candidates for a resume")
    toggle_field(controller, FieldPaths.ALLOW_CANDIDATE_CONTACT, "Let candidates call you")
    toggle_field(controller, FieldPaths.HAS_APPLICATION_DEADLINE, "Is there an application deadline?")
    if controller.form.preferences.has_application_deadline:
        date_field(controller, FieldPaths.APPLICATION_DEADLINE, "Application deadline", required=True)
