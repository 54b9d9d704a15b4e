"""Durable draft storage for the job posting wizard.

Drafts are stored as a snapshot under a single fixed key::

    {"form": {...}, "meta": {"captured_at": "...", "step": 3}}

Payloads without the ``form`` wrapper are treated as a bare form dump so that
older drafts keep loading. Storage failures never propagate to the caller:
saving and discarding report ``False`` and loading falls back to ``None``.
"""

from __future__ import annotations

import hashlib
import json
import logging
from dataclasses import dataclass
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Mapping, MutableMapping, Protocol

from pydantic import ValidationError

from constants.keys import DraftKeys
from core.errors import DraftStorageError
from models.job_posting import JobPostingForm


logger = logging.getLogger(__name__)

DraftPayload = dict[str, Any]


def _coerce_int(value: object) -> int | None:
    if isinstance(value, bool) or value is None:
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, str) and value.strip().isdigit():
        return int(value.strip())
    return None


class KeyValueStore(Protocol):
    """Minimal durable string storage used for drafts."""

    def get(self, key: str) -> str | None: ...

    def set(self, key: str, value: str) -> None: ...

    def delete(self, key: str) -> None: ...


class FileKeyValueStore:
    """Store each key as a JSON text file inside ``directory``.

    File names are derived from a SHA-256 digest of the key, so keys that
    differ only in punctuation or letter case never share a file.
    """

    def __init__(self, directory: str | Path) -> None:
        self.directory = Path(directory)

    def _path_for(self, key: str) -> Path:
        digest = hashlib.sha256(key.encode("utf-8")).hexdigest()
        return self.directory / f"{digest}.json"

    def get(self, key: str) -> str | None:
        path = self._path_for(key)
        try:
            return path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return None
        except (OSError, UnicodeDecodeError) as error:
            raise DraftStorageError(f"Could not read {path}: {error}") from error

    def set(self, key: str, value: str) -> None:
        path = self._path_for(key)
        try:
            self.directory.mkdir(parents=True, exist_ok=True)
            tmp_path = path.with_suffix(".tmp")
            tmp_path.write_text(value, encoding="utf-8")
            tmp_path.replace(path)
        except OSError as error:
            raise DraftStorageError(f"Could not write {path}: {error}") from error

    def delete(self, key: str) -> None:
        path = self._path_for(key)
        try:
            path.unlink(missing_ok=True)
        except OSError as error:
            raise DraftStorageError(f"Could not delete {path}: {error}") from error


class SessionKeyValueStore:
    """Keep values in a mutable mapping such as ``st.session_state``."""

    def __init__(self, mapping: MutableMapping[str, Any], *, namespace: str = "drafts") -> None:
        self._mapping = mapping
        self._namespace = namespace

    def _bucket(self) -> MutableMapping[str, str]:
        bucket = self._mapping.get(self._namespace)
        if not isinstance(bucket, dict):
            bucket = {}
            self._mapping[self._namespace] = bucket
        return bucket

    def get(self, key: str) -> str | None:
        value = self._bucket().get(key)
        return value if isinstance(value, str) else None

    def set(self, key: str, value: str) -> None:
        self._bucket()[key] = value

    def delete(self, key: str) -> None:
        self._bucket().pop(key, None)


@dataclass(frozen=True)
class RestoredDraft:
    """A draft read back from storage."""

    form: JobPostingForm
    step: int | None = None
    captured_at: str | None = None


def build_snapshot(form: JobPostingForm, *, step: int | None = None) -> DraftPayload:
    """Return the portable snapshot stored for ``form``."""

    meta: dict[str, Any] = {"captured_at": datetime.now(timezone.utc).isoformat()}
    if step is not None:
        meta["step"] = step
    return {"form": form.model_dump(mode="json"), "meta": meta}


def _resolve_snapshot_components(payload: Mapping[str, Any]) -> tuple[Any, Mapping[str, Any]]:
    if "form" in payload:
        meta_raw = payload.get("meta")
        return payload.get("form"), meta_raw if isinstance(meta_raw, Mapping) else {}
    return payload, {}


def parse_snapshot(payload: Mapping[str, Any]) -> RestoredDraft:
    """Validate a stored payload.

    Raises:
        ValidationError: If the form data does not match the current schema.
    """

    form_data, meta = _resolve_snapshot_components(payload)
    form = JobPostingForm.model_validate(form_data)
    captured_at = meta.get("captured_at")
    return RestoredDraft(
        form=form,
        step=_coerce_int(meta.get("step")),
        captured_at=captured_at if isinstance(captured_at, str) else None,
    )


class DraftStore:
    """Save, load and discard the single job posting draft."""

    def __init__(self, store: KeyValueStore, *, key: str = DraftKeys.JOB_POST) -> None:
        self._store = store
        self.key = key

    def save(self, form: JobPostingForm, *, step: int | None = None) -> bool:
        """Persist ``form``; return ``False`` when the storage is unusable."""

        snapshot = build_snapshot(form, step=step)
        try:
            self._store.set(self.key, json.dumps(snapshot, ensure_ascii=False))
        except DraftStorageError as error:
            logger.warning("Could not save job posting draft: %s", error)
            return False
        logger.info("Saved job posting draft at step %s", step)
        return True

    def discard(self) -> bool:
        try:
            self._store.delete(self.key)
        except DraftStorageError as error:
            logger.warning("Could not discard job posting draft: %s", error)
            return False
        return True

    def load_snapshot(self) -> RestoredDraft | None:
        """Return the stored draft with its metadata, or ``None``.

        Unreadable or outdated payloads are deleted so they are not offered
        again on the next visit.
        """

        try:
            raw = self._store.get(self.key)
        except DraftStorageError as error:
            logger.warning("Could not read job posting draft: %s", error)
            self.discard()
            return None
        if raw is None:
            return None
        try:
            payload = json.loads(raw)
            if not isinstance(payload, Mapping):
                raise ValueError("draft payload is not an object")
            return parse_snapshot(payload)
        except (ValueError, ValidationError) as error:
            logger.info("Discarding stale job posting draft: %s", error)
            self.discard()
            return None

    def load(self) -> JobPostingForm | None:
        restored = self.load_snapshot()
        return restored.form if restored else None


__all__ = [
    "DraftStore",
    "FileKeyValueStore",
    "KeyValueStore",
    "RestoredDraft",
    "SessionKeyValueStore",
    "build_snapshot",
    "parse_snapshot",
]
