"""Static option sets for the job posting wizard.

Every value here is immutable. Step renderers use the tuples to build their
widgets, the validation engine and the submission transformer use the escape
sentinels to decide when a free-text value replaces a preset.
"""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Final, Mapping


JOB_TYPES: Final[tuple[str, ...]] = ("onsite", "remote", "hybrid")

EMPLOYMENT_TYPES: Final[tuple[str, ...]] = (
    "Full-time",
    "Permanent",
    "Fresher",
    "Part-time",
    "Internship",
    "Contractual/Temporary",
    "Freelance",
    "Volunteer",
)

SCHEDULES: Final[tuple[str, ...]] = (
    "Day shift",
    "Morning shift",
    "Rotational shift",
    "Night shift",
    "Monday to Friday",
    "Evening shift",
    "Weekend availability",
    "Fixed shift",
    "US shift",
    "UK shift",
    "Weekend only",
    "Others",
)

NUMBER_OF_HIRES_CUSTOM: Final[str] = "custom"
NUMBER_OF_HIRES: Final[tuple[str, ...]] = tuple(str(count) for count in range(1, 11)) + (
    "10+",
    NUMBER_OF_HIRES_CUSTOM,
)

RECRUITMENT_TIMELINES: Final[tuple[str, ...]] = (
    "1 to 3 days",
    "3 to 7 days",
    "1 to 2 weeks",
    "2 to 4 weeks",
    "More than 4 weeks",
)

PAY_TYPES: Final[tuple[str, ...]] = ("range", "starting", "maximum", "exact")

PAY_RATES: Final[tuple[tuple[str, str], ...]] = (
    ("hour", "Per hour"),
    ("day", "Per day"),
    ("week", "Per week"),
    ("month", "Per month"),
    ("year", "Per year"),
)

SUPPLEMENTAL_PAY: Final[tuple[str, ...]] = (
    "Performance bonus",
    "Yearly bonus",
    "Commission pay",
    "Overtime pay",
    "Quarterly pay",
    "Shift allowance",
    "Joining bonus",
    "Other",
)

BENEFITS: Final[tuple[str, ...]] = (
    "Health insurance",
    "Provident fund",
    "Cell phone reimbursement",
    "Paid sick time",
    "Work from home",
    "Paid time off",
    "Food provided",
    "Life insurance",
    "Internet reimbursement",
    "Commuter assistance",
    "Leave encashment",
    "Flexible schedule",
    "Pick up and drop",
    "One side pick up or drop",
    "Other",
)

EDUCATION_LEVELS: Final[tuple[str, ...]] = (
    "10th or below",
    "12th Pass",
    "Diploma",
    "ITI",
    "Graduate",
    "Post Graduate",
    "PhD",
    "Other",
)

LANGUAGE_LEVELS: Final[tuple[str, ...]] = (
    "No English",
    "Basic English",
    "Good English",
    "Other",
)

EXPERIENCE_TYPES: Final[tuple[tuple[str, str], ...]] = (
    ("any", "Any"),
    ("experienced", "Experienced only"),
    ("fresher", "Fresher only"),
)

MINIMUM_EXPERIENCE: Final[tuple[str, ...]] = (
    "6 months",
    "1 year",
    "2 years",
    "3 years",
    "5 years",
    "10 years",
    "Other",
)

GENDERS: Final[tuple[tuple[str, str], ...]] = (
    ("both", "Both"),
    ("male", "Male"),
    ("female", "Female"),
    ("others", "Others"),
)

INDUSTRIES: Final[tuple[str, ...]] = (
    "Any industry",
    "Accounting / Auditing / Taxation",
    "Agriculture / Forestry / Livestock / Fertilizers",
    "Airlines / Aviation / Aerospace",
    "Automobile / Auto-Components",
    "Banking, Financial Services & Insurance",
    "Beverage / Brewery / Distillery",
    "Chemical Manufacturing",
    "Consumer Goods & Retail",
    "Design",
    "Education",
    "Emerging Technologies",
    "Energy & Power",
    "Gold, Gems, Watches, Jewellery & Accessories",
    "Government / Public Administration",
    "HR, Recruitment & Staffing",
    "Hospitality, Travel & Tourism",
    "Hospitals, Health Care & Lifescience",
    "IT Services, Software, Internet & Computers",
    "Infrastructure & Transport",
    "Legal & Regulatory",
    "Logistics, Trade & Commerce",
    "Manufacturing & Production",
    "Media, Advertising, PR & Marketing",
    "Media, Film & Entertainment",
    "Metals & Mining",
    "NGO / Social Services / Industry Associations",
    "Outsourcing - BPO/BPM",
    "Professional Services & Consulting",
    "Real Estate & Facility Management",
    "Textile, Handicraft & Fashion",
)

ADDITIONAL_PANELS: Final[tuple[tuple[str, str], ...]] = (
    ("industry", "Industry"),
    ("age", "Age"),
    ("gender", "Gender"),
    ("skills", "Skills"),
)


class EscapeSentinels:
    """Preset values that switch a field over to its free-text companion."""

    SCHEDULE = "Others"
    EDUCATION = "Other"
    LANGUAGE = "Other"
    EXPERIENCE = "Other"
    GENDER = "others"
    SUPPLEMENTAL_PAY = "Other"
    BENEFIT = "Other"


@dataclass(frozen=True)
class PlanSummary:
    """Display and listing metadata for a posting plan."""

    key: str
    label: str
    price_inr: int
    listing_days: int
    perks: tuple[str, ...]
    recommended: bool = False

    @property
    def is_free(self) -> bool:
        return self.price_inr == 0


PLANS: Final[Mapping[str, PlanSummary]] = MappingProxyType(
    {
        "basic": PlanSummary(
            key="basic",
            label="Basic Plan",
            price_inr=0,
            listing_days=7,
            perks=(
                "Job listed for 7 days",
                "Visible to nearby applicants",
                "No email alerts",
                "No support",
            ),
        ),
        "standard": PlanSummary(
            key="standard",
            label="Standard Plan",
            price_inr=999,
            listing_days=30,
            perks=(
                "Job listed for 30 days",
                "Reach wider audience",
                "Includes daily email alerts",
                "Basic customer support",
            ),
            recommended=True,
        ),
        "premium": PlanSummary(
            key="premium",
            label="Premium Plan",
            price_inr=2499,
            listing_days=60,
            perks=(
                "Job listed for 60 days",
                "Featured job (top of search)",
                "Daily + instant alerts",
                "Premium support",
                "Custom reach targeting",
            ),
        ),
    }
)

PLAN_KEYS: Final[tuple[str, ...]] = tuple(PLANS)


def label_for(options: tuple[tuple[str, str], ...], value: str) -> str:
    """Return the display label for ``value`` in a ``(value, label)`` option set."""

    for option_value, label in options:
        if option_value == value:
            return label
    return value


__all__ = [
    "ADDITIONAL_PANELS",
    "BENEFITS",
    "EDUCATION_LEVELS",
    "EMPLOYMENT_TYPES",
    "EXPERIENCE_TYPES",
    "EscapeSentinels",
    "GENDERS",
    "INDUSTRIES",
    "JOB_TYPES",
    "LANGUAGE_LEVELS",
    "MINIMUM_EXPERIENCE",
    "NUMBER_OF_HIRES",
    "NUMBER_OF_HIRES_CUSTOM",
    "PAY_RATES",
    "PAY_TYPES",
    "PLANS",
    "PLAN_KEYS",
    "PlanSummary",
    "RECRUITMENT_TIMELINES",
    "SCHEDULES",
    "SUPPLEMENTAL_PAY",
    "label_for",
]
