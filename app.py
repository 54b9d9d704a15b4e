# app.py - job posting wizard entrypoint
from __future__ import annotations

from pathlib import Path
import sys

import streamlit as st

APP_ROOT = Path(__file__).resolve().parent
for candidate in (APP_ROOT, APP_ROOT.parent):
    candidate_str = str(candidate)
    if candidate_str not in sys.path:
        sys.path.insert(0, candidate_str)

from auth import can_post_jobs, current_identity, login_form, logout_button  # noqa: E402
from config import LOG_LEVEL  # noqa: E402
from state import ensure_state  # noqa: E402
from utils.logging_context import configure_logging  # noqa: E402
from wizard import run_wizard  # noqa: E402

configure_logging(level=LOG_LEVEL)

st.set_page_config(page_title="Post a Job", page_icon="📝", layout="centered")

ensure_state()

identity = current_identity()
if identity is None:
    login_form()
    st.stop()

logout_button()

if not can_post_jobs(identity):
    st.warning("Only employers with a company profile can post jobs. Please create a company profile first.")
    st.stop()

st.title("Post a Job")
run_wizard(identity)
