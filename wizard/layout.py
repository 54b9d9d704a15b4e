"""Streamlit widgets bound to :class:`wizard.controller.WizardController`.

Each helper stores its widget value under ``field.<path>`` in
``st.session_state`` and forwards changes to ``controller.update_field`` from
an ``on_change`` callback, so the form model stays the single source of truth.
"""

from __future__ import annotations

from datetime import date
from typing import Any, Callable, Sequence

import streamlit as st

from core.errors import FieldUpdateError
from wizard._logic import get_in
from wizard.controller import WizardController

WIDGET_KEY_PREFIX = "field."
REQUIRED_SUFFIX = " *"

OptionLabels = Sequence[tuple[str, str]]


def widget_key(path: str) -> str:
    return f"{WIDGET_KEY_PREFIX}{path}"


def clear_widget_state() -> None:
    """Forget widget values so a new form starts from its own defaults."""

    for key in [key for key in st.session_state.keys() if str(key).startswith(WIDGET_KEY_PREFIX)]:
        del st.session_state[key]


def _current(controller: WizardController, path: str) -> Any:
    return get_in(controller.form.model_dump(), path)


def _seed(controller: WizardController, path: str) -> str:
    key = widget_key(path)
    if key not in st.session_state:
        st.session_state[key] = _current(controller, path)
    return key


def _commit(controller: WizardController, path: str, key: str, transform: Callable[[Any], Any] | None = None) -> None:
    value = st.session_state.get(key)
    if transform is not None:
        value = transform(value)
    try:
        controller.update_field(path, value)
    except FieldUpdateError as error:
        st.session_state[key] = _current(controller, path)
        st.toast(str(error), icon="⚠️")


def _label(text: str, required: bool) -> str:
    return f"{text}{REQUIRED_SUFFIX}" if required else text


def render_field_errors(controller: WizardController, path: str) -> None:
    for message in controller.errors_for(path):
        st.caption(f":red[{message}]")


def text_field(
    controller: WizardController,
    path: str,
    label: str,
    *,
    required: bool = False,
    placeholder: str | None = None,
    multiline: bool = False,
    help: str | None = None,
) -> None:
    key = _seed(controller, path)
    widget = st.text_area if multiline else st.text_input
    widget(
        _label(label, required),
        key=key,
        placeholder=placeholder,
        help=help,
        on_change=_commit,
        args=(controller, path, key),
    )
    render_field_errors(controller, path)


def select_field(
    controller: WizardController,
    path: str,
    label: str,
    options: Sequence[str],
    *,
    labels: OptionLabels | None = None,
    required: bool = False,
    horizontal: bool = False,
    placeholder: str = "Select",
) -> None:
    """Render a single choice. Radios are used for short option sets."""

    key = _seed(controller, path)
    label_map = dict(labels or ())
    choices = list(options)
    if st.session_state.get(key) not in choices:
        st.session_state[key] = None
    if horizontal:
        st.radio(
            _label(label, required),
            choices,
            key=key,
            horizontal=True,
            format_func=lambda value: label_map.get(value, value),
            on_change=_commit,
            args=(controller, path, key, lambda value: value or ""),
        )
    else:
        st.selectbox(
            _label(label, required),
            choices,
            key=key,
            placeholder=placeholder,
            format_func=lambda value: label_map.get(value, value),
            on_change=_commit,
            args=(controller, path, key, lambda value: value or ""),
        )
    render_field_errors(controller, path)


def option_chips(
    controller: WizardController,
    path: str,
    label: str,
    options: Sequence[str],
    *,
    required: bool = False,
) -> None:
    """Render a multi-select as toggle chips backed by ``toggle_option``."""

    st.markdown(f"**{_label(label, required)}**")
    selected = set(_current(controller, path) or ())
    columns = st.columns(3)
    for index, option in enumerate(options):
        with columns[index % 3]:
            st.checkbox(
                option,
                value=option in selected,
                key=f"{widget_key(path)}.{option}",
                on_change=controller.toggle_option,
                args=(path, option),
            )
    render_field_errors(controller, path)


def toggle_field(controller: WizardController, path: str, label: str, *, help: str | None = None) -> None:
    key = _seed(controller, path)
    st.toggle(label, key=key, help=help, on_change=_commit, args=(controller, path, key, bool))
    render_field_errors(controller, path)


def date_field(controller: WizardController, path: str, label: str, *, required: bool = False) -> None:
    key = _seed(controller, path)
    current = st.session_state.get(key)
    # Restored drafts may hold a date that has since passed.
    earliest = min(date.today(), current) if isinstance(current, date) else date.today()
    st.date_input(
        _label(label, required),
        key=key,
        min_value=earliest,
        format="YYYY-MM-DD",
        on_change=_commit,
        args=(controller, path, key),
    )
    render_field_errors(controller, path)


def custom_text_if(
    controller: WizardController,
    show: bool,
    path: str,
    label: str,
) -> None:
    """Show the free-text companion of a preset field when ``show`` is set."""

    if show:
        text_field(controller, path, label, required=True)


def render_step_heading(title: str, subtitle: str, *, step: int, total: int) -> None:
    st.progress(step / total, text=f"Step {step} of {total}")
    st.header(title)
    if subtitle:
        st.caption(subtitle)


def render_step_warning_banner(message: str | None) -> None:
    if message:
        st.error(message)


__all__ = [
    "clear_widget_state",
    "custom_text_if",
    "date_field",
    "option_chips",
    "render_field_errors",
    "render_step_heading",
    "render_step_warning_banner",
    "select_field",
    "text_field",
    "toggle_field",
    "widget_key",
]
