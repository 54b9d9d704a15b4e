"""Pydantic models for the job posting wizard form."""

from __future__ import annotations

from datetime import date
from typing import List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator

from constants.options import (
    BENEFITS,
    EDUCATION_LEVELS,
    EMPLOYMENT_TYPES,
    GENDERS,
    INDUSTRIES,
    LANGUAGE_LEVELS,
    MINIMUM_EXPERIENCE,
    NUMBER_OF_HIRES,
    RECRUITMENT_TIMELINES,
    SCHEDULES,
    SUPPLEMENTAL_PAY,
)


JobType = Literal["onsite", "remote", "hybrid"]
ExperienceType = Literal["any", "experienced", "fresher"]
PayType = Literal["range", "starting", "maximum", "exact"]
PayRate = Literal["hour", "day", "week", "month", "year"]
PlanKey = Literal["basic", "standard", "premium"]

_GENDER_KEYS = tuple(key for key, _label in GENDERS)


def _only_known(values: List[str], allowed: tuple[str, ...], label: str) -> List[str]:
    unknown = [value for value in values if value not in allowed]
    if unknown:
        raise ValueError(f"unknown {label}: {', '.join(unknown)}")
    return values


def _blank_or_known(value: str, allowed: tuple[str, ...], label: str) -> str:
    if value and value not in allowed:
        raise ValueError(f"unknown {label}: {value}")
    return value


class PresetChoice(BaseModel):
    """A single preset selection with a free-text escape hatch."""

    model_config = ConfigDict(extra="forbid")

    selected: str = ""
    custom_text: str = ""


class PresetMultiChoice(BaseModel):
    """A multi-select preset list with a free-text escape hatch."""

    model_config = ConfigDict(extra="forbid")

    selected: List[str] = Field(default_factory=list)
    custom_text: str = ""

    @field_validator("selected", mode="before")
    @classmethod
    def _dedupe(cls, value: object) -> object:
        if isinstance(value, (list, tuple)):
            return list(dict.fromkeys(value))
        return value


class JobBasics(BaseModel):
    """Step 1: job identity and location."""

    model_config = ConfigDict(extra="forbid")

    job_title: str = ""
    job_title_description: str = ""
    job_type: JobType = "onsite"
    city: str = ""
    area: str = ""
    pincode: str = ""
    street_address: str = ""


class JobRequirements(BaseModel):
    """Step 2: scheduling, hiring volume and candidate requirements."""

    model_config = ConfigDict(extra="forbid")

    employment_types: List[str] = Field(default_factory=list)
    schedules: PresetMultiChoice = Field(default_factory=PresetMultiChoice)
    has_planned_start_date: bool = False
    planned_start_date: Optional[date] = None
    number_of_hires: str = "1"
    custom_number_of_hires: str = ""
    recruitment_timeline: str = ""
    minimum_education: PresetChoice = Field(default_factory=PresetChoice)
    language_requirement: PresetChoice = Field(default_factory=PresetChoice)
    experience_type: ExperienceType = "any"
    minimum_experience: PresetChoice = Field(default_factory=PresetChoice)
    selected_industries: List[str] = Field(default_factory=list)
    min_age: str = ""
    max_age: str = ""
    gender: PresetChoice = Field(default_factory=lambda: PresetChoice(selected="both"))
    skills: List[str] = Field(default_factory=list)

    @field_validator("employment_types", "selected_industries", "skills", mode="before")
    @classmethod
    def _dedupe_lists(cls, value: object) -> object:
        if isinstance(value, (list, tuple)):
            return list(dict.fromkeys(value))
        return value

    @field_validator("employment_types")
    @classmethod
    def _known_employment_types(cls, value: List[str]) -> List[str]:
        return _only_known(value, EMPLOYMENT_TYPES, "employment type")

    @field_validator("selected_industries")
    @classmethod
    def _known_industries(cls, value: List[str]) -> List[str]:
        return _only_known(value, INDUSTRIES, "industry")

    @field_validator("schedules")
    @classmethod
    def _known_schedules(cls, value: PresetMultiChoice) -> PresetMultiChoice:
        _only_known(value.selected, SCHEDULES, "schedule")
        return value

    @field_validator("number_of_hires")
    @classmethod
    def _known_number_of_hires(cls, value: str) -> str:
        return _blank_or_known(value, NUMBER_OF_HIRES, "number of hires")

    @field_validator("recruitment_timeline")
    @classmethod
    def _known_timeline(cls, value: str) -> str:
        return _blank_or_known(value, RECRUITMENT_TIMELINES, "recruitment timeline")

    @field_validator("minimum_education", "language_requirement", "minimum_experience", "gender")
    @classmethod
    def _known_presets(cls, value: PresetChoice, info: ValidationInfo) -> PresetChoice:
        allowed = {
            "minimum_education": EDUCATION_LEVELS,
            "language_requirement": LANGUAGE_LEVELS,
            "minimum_experience": MINIMUM_EXPERIENCE,
            "gender": _GENDER_KEYS,
        }[info.field_name]
        _blank_or_known(value.selected, allowed, info.field_name.replace("_", " "))
        return value


class Compensation(BaseModel):
    """Step 3: pay display, rate unit and extras."""

    model_config = ConfigDict(extra="forbid")

    pay_type: PayType = "range"
    min_amount: str = ""
    max_amount: str = ""
    amount: str = ""
    pay_rate: PayRate = "month"
    supplemental_pay: PresetMultiChoice = Field(default_factory=PresetMultiChoice)
    benefits: PresetMultiChoice = Field(default_factory=PresetMultiChoice)

    @field_validator("supplemental_pay", "benefits")
    @classmethod
    def _known_extras(cls, value: PresetMultiChoice, info: ValidationInfo) -> PresetMultiChoice:
        allowed = SUPPLEMENTAL_PAY if info.field_name == "supplemental_pay" else BENEFITS
        _only_known(value.selected, allowed, info.field_name.replace("_", " "))
        return value


class ApplicationPreferences(BaseModel):
    """Step 4: long description and how applications are handled."""

    model_config = ConfigDict(extra="forbid")

    job_profile_description: str = ""
    notification_emails: List[str] = Field(default_factory=lambda: [""])
    send_individual_emails: bool = False
    require_resume: bool = False
    allow_candidate_contact: bool = False
    has_application_deadline: bool = False
    application_deadline: Optional[date] = None

    @field_validator("notification_emails", mode="before")
    @classmethod
    def _keep_one_slot(cls, value: object) -> object:
        """The email editor always shows at least one input slot."""

        if value is None:
            return [""]
        if isinstance(value, (list, tuple)) and not value:
            return [""]
        return value


class Checkout(BaseModel):
    """Step 6: plan selection and payment options."""

    model_config = ConfigDict(extra="forbid")

    selected_plan: Optional[PlanKey] = None
    coupon_code: str = ""
    require_gst_invoice: bool = False
    save_card_for_future: bool = False


class JobPostingForm(BaseModel):
    """Canonical mutable record accumulated across the wizard steps."""

    model_config = ConfigDict(extra="forbid")

    basics: JobBasics = Field(default_factory=JobBasics)
    requirements: JobRequirements = Field(default_factory=JobRequirements)
    compensation: Compensation = Field(default_factory=Compensation)
    preferences: ApplicationPreferences = Field(default_factory=ApplicationPreferences)
    checkout: Checkout = Field(default_factory=Checkout)


__all__ = [
    "ApplicationPreferences",
    "Checkout",
    "Compensation",
    "ExperienceType",
    "JobBasics",
    "JobPostingForm",
    "JobRequirements",
    "JobType",
    "PayRate",
    "PayType",
    "PlanKey",
    "PresetChoice",
    "PresetMultiChoice",
]
