from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass
from typing import Any, Dict, Mapping, MutableMapping

import bcrypt
import streamlit as st

from constants.keys import StateKeys

logger = logging.getLogger(__name__)

EMPLOYER_ROLE = "employer"


@dataclass(frozen=True)
class UserIdentity:
    """Signed-in user as far as job posting is concerned."""

    user_id: str
    role: str
    company_id: str | None = None

    def to_dict(self) -> dict[str, Any]:
        return {"user_id": self.user_id, "role": self.role, "company_id": self.company_id}


def _load_users() -> Dict[str, dict]:
    """Load users from Streamlit secrets or env as JSON string.

    Each entry maps a username to ``{"hash", "role", "company_id"}``.
    """
    users_json = None
    try:
        users_json = st.secrets.get("auth", {}).get("USERS_JSON")
    except Exception as error:  # missing or malformed secrets.toml
        logger.debug("Streamlit secrets unavailable: %s", error)
    if not users_json:
        users_json = os.getenv("USERS_JSON", "")
    try:
        users = json.loads(users_json) if users_json else {}
    except json.JSONDecodeError:
        logger.warning("USERS_JSON is not valid JSON; no users can sign in.")
        return {}
    return users if isinstance(users, dict) else {}


def _verify_password(stored_hash: str, password: str) -> bool:
    if not stored_hash or not password:
        return False
    try:
        return bcrypt.checkpw(password.encode(), stored_hash.encode())
    except ValueError:
        return False


def identity_from_mapping(data: Mapping[str, Any] | None) -> UserIdentity | None:
    if not isinstance(data, Mapping):
        return None
    user_id = str(data.get("user_id") or "").strip()
    if not user_id:
        return None
    company_id = data.get("company_id")
    return UserIdentity(
        user_id=user_id,
        role=str(data.get("role") or "").strip().lower(),
        company_id=str(company_id) if company_id else None,
    )


def current_identity(session_state: Mapping[str, Any] | None = None) -> UserIdentity | None:
    """Return the identity stored in the session, if anyone is signed in."""

    state = st.session_state if session_state is None else session_state
    stored = state.get(StateKeys.IDENTITY)
    if isinstance(stored, UserIdentity):
        return stored
    return identity_from_mapping(stored)


def can_post_jobs(identity: UserIdentity | None) -> bool:
    """Employers with a company profile may post jobs."""

    return identity is not None and identity.role == EMPLOYER_ROLE and bool(identity.company_id)


def sign_in(session_state: MutableMapping[str, Any], identity: UserIdentity) -> None:
    session_state[StateKeys.IDENTITY] = identity.to_dict()


def logout_button() -> None:
    if st.sidebar.button("Logout"):
        st.session_state.clear()
        st.rerun()


def login_form() -> None:
    st.title("🔐 Please Log In")
    username = st.text_input("Username")
    password = st.text_input("Password", type="password")
    if st.button("Login"):
        users = _load_users()
        entry = users.get(username)
        if isinstance(entry, dict) and _verify_password(entry.get("hash", ""), password):
            sign_in(
                st.session_state,
                UserIdentity(
                    user_id=username,
                    role=str(entry.get("role") or EMPLOYER_ROLE).lower(),
                    company_id=entry.get("company_id"),
                ),
            )
            st.success("Welcome!")
            st.rerun()
        else:
            st.error("Invalid credentials. Please try again.")


__all__ = [
    "EMPLOYER_ROLE",
    "UserIdentity",
    "can_post_jobs",
    "current_identity",
    "identity_from_mapping",
    "login_form",
    "logout_button",
    "sign_in",
]
