from __future__ import annotations

import streamlit as st

from constants.keys import FieldPaths
from constants.options import PLANS
from wizard.controller import WizardController
from wizard.layout import render_field_errors, render_step_warning_banner, text_field, toggle_field

__all__ = ["step_checkout"]


def _select_plan(controller: WizardController, plan_key: str) -> None:
    controller.update_field(FieldPaths.SELECTED_PLAN, plan_key)


def _apply_coupon(controller: WizardController) -> None:
    if controller.apply_coupon():
        st.toast("Coupon code noted.", icon="🏷️")


def _render_plans(controller: WizardController) -> None:
    selected = controller.form.checkout.selected_plan
    columns = st.columns(len(PLANS))
    for column, plan in zip(columns, PLANS.values()):
        with column.container(border=True):
            badge = " · Recommended" if plan.recommended else ""
            st.markdown(f"**{plan.label}**{badge}")
            st.markdown("Free" if plan.is_free else f"₹{plan.price_inr}")
            for perk in plan.perks:
                st.caption(f"• {perk}")
            st.button(
                "Selected" if selected == plan.key else "Choose",
                key=f"plan.{plan.key}",
                type="primary" if selected == plan.key else "secondary",
                on_click=_select_plan,
                args=(controller, plan.key),
            )
    render_field_errors(controller, FieldPaths.SELECTED_PLAN)


def _render_incomplete_steps(controller: WizardController) -> None:
    pending = controller.state.incomplete_steps
    if pending:
        steps = ", ".join(str(step) for step in pending)
        st.warning(f"Please complete the highlighted fields (step {steps}).")


def step_checkout(controller: WizardController) -> None:
    """Render plan selection, coupon entry and payment preferences."""

    render_step_warning_banner(controller.state.submission_error)
    _render_incomplete_steps(controller)
    _render_plans(controller)

    coupon_col, apply_col = st.columns((0.75, 0.25))
    with coupon_col:
        text_field(controller, FieldPaths.COUPON_CODE, "Coupon code", placeholder="Optional")
    with apply_col:
        st.button("Apply", key="coupon.apply", on_click=_apply_coupon, args=(controller,))
    toggle_field(controller, FieldPaths.REQUIRE_GST_INVOICE, "I need a GST invoice")
    toggle_field(controller, FieldPaths.SAVE_CARD_FOR_FUTURE, "Save card for future payments")
