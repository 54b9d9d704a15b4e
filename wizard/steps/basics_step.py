from __future__ import annotations

import streamlit as st

from constants.keys import FieldPaths
from constants.options import JOB_TYPES
from wizard.controller import WizardController
from wizard.layout import select_field, text_field

__all__ = ["step_basics"]

_JOB_TYPE_LABELS = (("onsite", "On-site"), ("remote", "Remote"), ("hybrid", "Hybrid"))


def step_basics(controller: WizardController) -> None:
    """Render job title, job type and location inputs."""

    text_field(controller, FieldPaths.JOB_TITLE, "Job title", required=True, placeholder="e.g. Sales Executive")
    text_field(
        controller,
        FieldPaths.JOB_TITLE_DESCRIPTION,
        "Short description",
        required=True,
        placeholder="One line candidates see next to the title",
    )
    select_field(
        controller,
        FieldPaths.JOB_TYPE,
        "Job type",
        JOB_TYPES,
        labels=_JOB_TYPE_LABELS,
        required=True,
        horizontal=True,
    )

    st.subheader("Job location")
    city_col, area_col = st.columns(2)
    with city_col:
        text_field(controller, FieldPaths.CITY, "City", required=True)
    with area_col:
        text_field(controller, FieldPaths.AREA, "Area")
    pin_col, street_col = st.columns((1, 2))
    with pin_col:
        text_field(controller, FieldPaths.PINCODE, "Pincode", placeholder="6 digits")
    with street_col:
        text_field(controller, FieldPaths.STREET_ADDRESS, "Street address")
