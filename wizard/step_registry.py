"""Registry for wizard steps, metadata, and canonical order."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import TYPE_CHECKING, Final

if TYPE_CHECKING:
    from wizard.controller import WizardController

StepRenderer = Callable[["WizardController"], None]


@dataclass(frozen=True)
class StepDefinition:
    """Metadata + rendering contract for an individual wizard step."""

    number: int
    key: str
    title: str
    subtitle: str
    renderer: StepRenderer
    next_label: str = "Continue"


def _render_basics_step(controller: "WizardController") -> None:
    from wizard.steps import basics_step

    basics_step.step_basics(controller)


def _render_requirements_step(controller: "WizardController") -> None:
    from wizard.steps import requirements_step

    requirements_step.step_requirements(controller)


def _render_compensation_step(controller: "WizardController") -> None:
    from wizard.steps import compensation_step

    compensation_step.step_compensation(controller)


def _render_preferences_step(controller: "WizardController") -> None:
    from wizard.steps import preferences_step

    preferences_step.step_preferences(controller)


def _render_review_step(controller: "WizardController") -> None:
    from wizard.steps import review_step

    review_step.step_review(controller)


def _render_checkout_step(controller: "WizardController") -> None:
    from wizard.steps import checkout_step

    checkout_step.step_checkout(controller)


WIZARD_STEPS: Final[tuple[StepDefinition, ...]] = (
    StepDefinition(
        number=1,
        key="basics",
        title="Job details",
        subtitle="Tell candidates what the job is and where it is.",
        renderer=_render_basics_step,
    ),
    StepDefinition(
        number=2,
        key="requirements",
        title="Job requirements",
        subtitle="Schedule, hiring volume and who you are looking for.",
        renderer=_render_requirements_step,
    ),
    StepDefinition(
        number=3,
        key="compensation",
        title="Pay and benefits",
        subtitle="Show the pay range and what else the job offers.",
        renderer=_render_compensation_step,
    ),
    StepDefinition(
        number=4,
        key="preferences",
        title="Description and applications",
        subtitle="Describe the role and decide how applications reach you.",
        renderer=_render_preferences_step,
        next_label="Review",
    ),
    StepDefinition(
        number=5,
        key="review",
        title="Review your job post",
        subtitle="Check every detail before choosing a plan.",
        renderer=_render_review_step,
        next_label="Choose plan",
    ),
    StepDefinition(
        number=6,
        key="checkout",
        title="Choose a plan",
        subtitle="Pick how long and how widely the job is promoted.",
        renderer=_render_checkout_step,
        next_label="Post job",
    ),
)

STEPS_BY_NUMBER: Final[Mapping[int, StepDefinition]] = MappingProxyType({step.number: step for step in WIZARD_STEPS})


def step_definition(number: int) -> StepDefinition:
    """Return the step registered for ``number``.

    Raises:
        KeyError: If no step uses ``number``.
    """

    return STEPS_BY_NUMBER[number]


__all__ = ["STEPS_BY_NUMBER", "StepDefinition", "StepRenderer", "WIZARD_STEPS", "step_definition"]
