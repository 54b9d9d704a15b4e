"""Session state helpers and draft persistence."""

from .drafts import DraftStore, FileKeyValueStore, KeyValueStore, SessionKeyValueStore
from .ensure_state import ensure_state, get_draft_store

__all__ = [
    "DraftStore",
    "FileKeyValueStore",
    "KeyValueStore",
    "SessionKeyValueStore",
    "ensure_state",
    "get_draft_store",
]
