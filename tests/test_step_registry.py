from __future__ import annotations

import pytest

from wizard.step_registry import WIZARD_STEPS, step_definition
from wizard.types import FIRST_STEP, LAST_STEP, REVIEW_STEP
from wizard.validation import STEP_VALIDATORS


def test_step_registry_order() -> None:
    assert tuple(step.key for step in WIZARD_STEPS) == (
        "basics",
        "requirements",
        "compensation",
        "preferences",
        "review",
        "checkout",
    )


def test_step_numbers_match_validators() -> None:
    numbers = [step.number for step in WIZARD_STEPS]

    assert numbers == list(range(FIRST_STEP, LAST_STEP + 1))
    assert set(numbers) == set(STEP_VALIDATORS)
    assert step_definition(REVIEW_STEP).key == "review"


def test_last_step_posts_the_job() -> None:
    assert step_definition(LAST_STEP).next_label == "Post job"


def test_unknown_step_number() -> None:
    with pytest.raises(KeyError):
        step_definition(7)
