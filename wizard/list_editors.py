"""Pure list operations behind the skill tags and notification email editor."""

from __future__ import annotations

from typing import Sequence


def toggle_value(values: Sequence[str], value: str) -> list[str]:
    """Return ``values`` with ``value`` added when missing or removed when present."""

    if value in values:
        return [item for item in values if item != value]
    return [*values, value]


def add_tag(tags: Sequence[str], raw: str) -> list[str]:
    """Append the trimmed ``raw`` tag unless it is blank or already present."""

    tag = (raw or "").strip()
    if not tag or tag in tags:
        return list(tags)
    return [*tags, tag]


def remove_tag(tags: Sequence[str], tag: str) -> list[str]:
    return [item for item in tags if item != tag]


def append_email_slot(emails: Sequence[str]) -> list[str]:
    return [*emails, ""]


def replace_email(emails: Sequence[str], index: int, value: str) -> list[str]:
    """Return ``emails`` with slot ``index`` replaced.

    Raises:
        IndexError: If ``index`` does not address an existing slot.
    """

    if index < 0 or index >= len(emails):
        raise IndexError(f"Email slot {index} does not exist")
    updated = list(emails)
    updated[index] = value
    return updated


def can_remove_email(emails: Sequence[str], index: int) -> bool:
    """The first slot and the last remaining slot are never removable."""

    return 0 < index < len(emails) and len(emails) > 1


def remove_email(emails: Sequence[str], index: int) -> list[str]:
    """Return ``emails`` without slot ``index`` or unchanged when not removable."""

    if not can_remove_email(emails, index):
        return list(emails)
    return [email for position, email in enumerate(emails) if position != index]


__all__ = [
    "add_tag",
    "append_email_slot",
    "can_remove_email",
    "remove_email",
    "remove_tag",
    "replace_email",
    "toggle_value",
]
