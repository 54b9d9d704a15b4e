from __future__ import annotations

import streamlit as st

from constants.keys import FieldPaths
from constants.options import BENEFITS, PAY_RATES, PAY_TYPES, SUPPLEMENTAL_PAY, EscapeSentinels
from wizard.controller import WizardController
from wizard.layout import custom_text_if, option_chips, select_field, text_field

__all__ = ["step_compensation"]

_PAY_TYPE_LABELS = (
    ("range", "Range"),
    ("starting", "Starting amount"),
    ("maximum", "Maximum amount"),
    ("exact", "Exact amount"),
)


def step_compensation(controller: WizardController) -> None:
    """Render pay display, pay rate and benefit inputs."""

    select_field(controller, FieldPaths.PAY_TYPE, "Show pay by", PAY_TYPES, labels=_PAY_TYPE_LABELS, horizontal=True)
    comp = controller.form.compensation
    if comp.pay_type == "range":
        min_col, max_col, rate_col = st.columns(3)
        with min_col:
            text_field(controller, FieldPaths.MIN_AMOUNT, "Minimum (₹)", required=True)
        with max_col:
            text_field(controller, FieldPaths.MAX_AMOUNT, "Maximum (₹)", required=True)
    else:
        amount_col, rate_col = st.columns(2)
        with amount_col:
            text_field(controller, FieldPaths.AMOUNT, "Amount (₹)", required=True)
    with rate_col:
        select_field(
            controller,
            FieldPaths.PAY_RATE,
            "Rate",
            [value for value, _label in PAY_RATES],
            labels=PAY_RATES,
        )

    option_chips(controller, FieldPaths.SUPPLEMENTAL_PAY, "Supplemental pay", SUPPLEMENTAL_PAY)
    custom_text_if(
        controller,
        EscapeSentinels.SUPPLEMENTAL_PAY in controller.form.compensation.supplemental_pay.selected,
        FieldPaths.CUSTOM_SUPPLEMENTAL_PAY,
        "Describe supplemental pay",
    )
    option_chips(controller, FieldPaths.BENEFITS, "Benefits", BENEFITS)
    custom_text_if(
        controller,
        EscapeSentinels.BENEFIT in controller.form.compensation.benefits.selected,
        FieldPaths.CUSTOM_BENEFIT,
        "Describe benefit",
    )
