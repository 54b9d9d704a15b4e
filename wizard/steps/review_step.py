from __future__ import annotations

import streamlit as st

from wizard.controller import WizardController
from wizard.review import build_review

__all__ = ["step_review"]


def step_review(controller: WizardController) -> None:
    """Show everything entered so far with an edit shortcut per section."""

    for section in build_review(controller.form):
        with st.container(border=True):
            title_col, edit_col = st.columns((0.8, 0.2))
            title_col.markdown(f"#### {section.title}")
            edit_col.button(
                "Edit",
                key=f"review.edit.{section.step}",
                on_click=controller.jump_to,
                args=(section.step,),
            )
            for row in section.rows:
                label_col, value_col = st.columns((0.35, 0.65))
                label_col.caption(row.label)
                value_col.write(row.value)
