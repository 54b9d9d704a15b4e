"""Helpers for initializing Streamlit session state."""

from __future__ import annotations

import logging
import uuid
from collections.abc import Mapping
from types import MappingProxyType
from typing import Any, Callable, MutableMapping

import streamlit as st

import config as app_config
from constants.keys import StateKeys
from state.drafts import DraftStore, FileKeyValueStore, KeyValueStore, SessionKeyValueStore
from utils.logging_context import set_session_id


logger = logging.getLogger(__name__)


_DEFAULT_STATE_FACTORIES: Mapping[str, Callable[[], Any]] = MappingProxyType(
    {
        StateKeys.SESSION_ID: lambda: uuid.uuid4().hex[:12],
        StateKeys.LAST_EXIT: lambda: None,
    }
)


def ensure_state(session_state: MutableMapping[str, Any] | None = None) -> None:
    """Populate missing session keys with their defaults."""

    state = st.session_state if session_state is None else session_state
    for key, factory in _DEFAULT_STATE_FACTORIES.items():
        if key not in state:
            state[key] = factory()
    set_session_id(str(state[StateKeys.SESSION_ID]))


def _build_key_value_store(state: MutableMapping[str, Any]) -> KeyValueStore:
    directory = app_config.DRAFT_STORAGE_DIR
    if directory:
        return FileKeyValueStore(directory)
    return SessionKeyValueStore(state, namespace=StateKeys.DRAFTS)


def get_draft_store(
    user_id: str | None = None,
    session_state: MutableMapping[str, Any] | None = None,
) -> DraftStore:
    """Return the session's draft store, creating it on first use.

    Drafts are kept per user when ``user_id`` is known.
    """

    state = st.session_state if session_state is None else session_state
    store = state.get(StateKeys.DRAFT_STORE)
    if isinstance(store, DraftStore):
        return store
    draft_store = DraftStore(_build_key_value_store(state))
    if user_id:
        draft_store.key = f"{draft_store.key}.{user_id}"
    state[StateKeys.DRAFT_STORE] = draft_store
    return draft_store


__all__ = ["ensure_state", "get_draft_store"]
