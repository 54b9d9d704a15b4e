from __future__ import annotations

import streamlit as st

from constants.keys import FieldPaths, UIKeys
from constants.options import (
    ADDITIONAL_PANELS,
    EDUCATION_LEVELS,
    EMPLOYMENT_TYPES,
    EXPERIENCE_TYPES,
    GENDERS,
    INDUSTRIES,
    LANGUAGE_LEVELS,
    MINIMUM_EXPERIENCE,
    NUMBER_OF_HIRES,
    NUMBER_OF_HIRES_CUSTOM,
    RECRUITMENT_TIMELINES,
    SCHEDULES,
    EscapeSentinels,
)
from wizard.controller import WizardController
from wizard.layout import (
    custom_text_if,
    date_field,
    option_chips,
    select_field,
    text_field,
    toggle_field,
)

__all__ = ["step_requirements"]


def _render_hiring(controller: WizardController) -> None:
    req = controller.form.requirements
    option_chips(controller, FieldPaths.EMPLOYMENT_TYPES, "Employment type", EMPLOYMENT_TYPES, required=True)
    option_chips(controller, FieldPaths.SCHEDULES, "Schedule", SCHEDULES, required=True)
    custom_text_if(
        controller,
        EscapeSentinels.SCHEDULE in req.schedules.selected,
        FieldPaths.CUSTOM_SCHEDULE,
        "Describe the schedule",
    )

    toggle_field(controller, FieldPaths.HAS_PLANNED_START_DATE, "Is there a planned start date?")
    if controller.form.requirements.has_planned_start_date:
        date_field(controller, FieldPaths.PLANNED_START_DATE, "Planned start date", required=True)

    hires_col, timeline_col = st.columns(2)
    with hires_col:
        select_field(
            controller,
            FieldPaths.NUMBER_OF_HIRES,
            "Number of people to hire",
            NUMBER_OF_HIRES,
            labels=((NUMBER_OF_HIRES_CUSTOM, "Custom"),),
            required=True,
        )
        custom_text_if(
            controller,
            controller.form.requirements.number_of_hires == NUMBER_OF_HIRES_CUSTOM,
            FieldPaths.CUSTOM_NUMBER_OF_HIRES,
            "Enter number of hires",
        )
    with timeline_col:
        select_field(
            controller,
            FieldPaths.RECRUITMENT_TIMELINE,
            "Recruitment timeline",
            RECRUITMENT_TIMELINES,
            required=True,
        )


def _render_candidate(controller: WizardController) -> None:
    st.subheader("Candidate requirements")
    select_field(controller, FieldPaths.MINIMUM_EDUCATION, "Minimum education", EDUCATION_LEVELS, required=True)
    custom_text_if(
        controller,
        controller.form.requirements.minimum_education.selected == EscapeSentinels.EDUCATION,
        FieldPaths.CUSTOM_EDUCATION,
        "Specify education",
    )
    select_field(controller, FieldPaths.LANGUAGE_REQUIREMENT, "English level", LANGUAGE_LEVELS, required=True)
    custom_text_if(
        controller,
        controller.form.requirements.language_requirement.selected == EscapeSentinels.LANGUAGE,
        FieldPaths.CUSTOM_LANGUAGE,
        "Specify language",
    )
    select_field(
        controller,
        FieldPaths.EXPERIENCE_TYPE,
        "Experience",
        [value for value, _label in EXPERIENCE_TYPES],
        labels=EXPERIENCE_TYPES,
        horizontal=True,
    )
    if controller.form.requirements.experience_type != "fresher":
        select_field(
            controller,
            FieldPaths.MINIMUM_EXPERIENCE,
            "Minimum experience",
            MINIMUM_EXPERIENCE,
            required=True,
        )
        custom_text_if(
            controller,
            controller.form.requirements.minimum_experience.selected == EscapeSentinels.EXPERIENCE,
            FieldPaths.CUSTOM_EXPERIENCE,
            "Specify experience",
        )


def _render_industry_picker(controller: WizardController) -> None:
    selected = controller.form.requirements.selected_industries
    if selected:
        st.caption("Selected: " + ", ".join(selected))
    if not controller.state.industry_picker_open:
        st.button("Choose industries", key="industry.open", on_click=controller.open_industry_picker)
        return
    with st.container(border=True):
        query = st.text_input("Search industries", key=UIKeys.INDUSTRY_FILTER).strip().lower()
        for name in INDUSTRIES:
            if query and query not in name.lower():
                continue
            st.checkbox(
                name,
                value=name in selected,
                key=f"industry.option.{name}",
                on_change=controller.toggle_industry,
                args=(name,),
            )
        st.button("Done", key="industry.close", on_click=controller.close_industry_picker)


def _add_skill_from_input(controller: WizardController) -> None:
    if controller.add_skill(st.session_state.get(UIKeys.SKILL_INPUT, "")):
        st.session_state[UIKeys.SKILL_INPUT] = ""


def _render_skills(controller: WizardController) -> None:
    st.text_input(
        "Add a skill and press Enter",
        key=UIKeys.SKILL_INPUT,
        on_change=_add_skill_from_input,
        args=(controller,),
    )
    skills = controller.form.requirements.skills
    if skills:
        columns = st.columns(min(len(skills), 4))
        for index, skill in enumerate(skills):
            columns[index % len(columns)].button(
                f"{skill} ✕",
                key=f"skill.remove.{skill}",
                on_click=controller.remove_skill,
                args=(skill,),
            )


def _render_additional(controller: WizardController) -> None:
    st.subheader("Additional requirements")
    st.caption("Optional. Open only what matters for this role.")
    panels = controller.state.additional_panels_open
    columns = st.columns(len(ADDITIONAL_PANELS))
    for column, (key, label) in zip(columns, ADDITIONAL_PANELS):
        column.button(
            f"{'−' if key in panels else '+'} {label}",
            key=f"panel.{key}",
            on_click=controller.toggle_additional_panel,
            args=(key,),
        )

    if "industry" in panels:
        _render_industry_picker(controller)
    if "age" in panels:
        min_col, max_col = st.columns(2)
        with min_col:
            text_field(controller, FieldPaths.MIN_AGE, "Minimum age")
        with max_col:
            text_field(controller, FieldPaths.MAX_AGE, "Maximum age")
    if "gender" in panels:
        select_field(
            controller,
            FieldPaths.GENDER,
            "Gender",
            [value for value, _label in GENDERS],
            labels=GENDERS,
            horizontal=True,
        )
        custom_text_if(
            controller,
            controller.form.requirements.gender.selected == EscapeSentinels.GENDER,
            FieldPaths.CUSTOM_GENDER,
            "Specify gender",
        )
    if "skills" in panels:
        _render_skills(controller)


def step_requirements(controller: WizardController) -> None:
    """Render scheduling, hiring volume and candidate requirement inputs."""

    _render_hiring(controller)
    _render_candidate(controller)
    _render_additional(controller)
