"""Canonical job record handed to the persistence backend."""

from __future__ import annotations

from datetime import date, datetime
from typing import List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field


class JobLocation(BaseModel):
    """Address block of a posted job."""

    model_config = ConfigDict(extra="forbid")

    city: str
    area: Optional[str] = None
    pincode: Optional[str] = None
    street_address: Optional[str] = None


class JobSubmissionRecord(BaseModel):
    """Flattened job row as stored in the ``jobs`` table."""

    model_config = ConfigDict(extra="forbid")

    company_id: Optional[str] = None
    title: str
    description: str
    job_type: str
    location: JobLocation
    employment_types: List[str] = Field(default_factory=list)
    schedules: List[str] = Field(default_factory=list)
    planned_start_date: Optional[date] = None
    number_of_hires: str
    recruitment_timeline: str
    pay_type: str
    min_amount: Optional[float] = None
    max_amount: Optional[float] = None
    amount: Optional[float] = None
    pay_rate: str
    supplemental_pay: List[str] = Field(default_factory=list)
    benefits: List[str] = Field(default_factory=list)
    minimum_education: str
    language_requirement: str
    experience_type: str
    minimum_experience: Optional[str] = None
    industries: List[str] = Field(default_factory=list)
    min_age: Optional[int] = None
    max_age: Optional[int] = None
    gender: str
    skills: List[str] = Field(default_factory=list)
    job_profile_description: str
    notification_emails: List[str] = Field(default_factory=list)
    send_individual_emails: bool = False
    require_resume: bool = False
    allow_candidate_contact: bool = False
    application_deadline: Optional[date] = None
    selected_plan: Optional[str] = None
    coupon_code: Optional[str] = None
    require_gst_invoice: bool = False
    save_card_for_future: bool = False
    status: Literal["active", "pending", "expired"] = "active"
    payment_status: Literal["paid", "pending", "failed"] = "pending"
    visibility: Literal["public", "private", "paused"] = "public"
    posted_date: Optional[datetime] = None
    expires_at: Optional[datetime] = None

    def to_payload(self) -> dict[str, object]:
        """Return a JSON-ready mapping for the backend insert call."""

        return self.model_dump(mode="json")


__all__ = ["JobLocation", "JobSubmissionRecord"]
