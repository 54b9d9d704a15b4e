"""Utility helpers for rendering error messages in Streamlit."""

from __future__ import annotations

import logging

import streamlit as st

logger = logging.getLogger(__name__)

_DETAILS_LABEL = "Details"


def display_error(msg: str, detail: str | None = None, *, show_detail: bool = False) -> None:
    """Render a user-facing error with optional debug details.

    Args:
        msg: Short error message for the user.
        detail: Optional technical detail, always logged.
        show_detail: Reveal ``detail`` in an expander (debug sessions only).
    """

    st.error(msg)
    if detail:
        logger.debug("%s (%s)", msg, detail)
        if show_detail:
            with st.expander(_DETAILS_LABEL):
                st.code(detail)
