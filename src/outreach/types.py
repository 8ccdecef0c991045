from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Literal
from urllib.parse import urlparse

from pydantic import BaseModel, Field, field_validator

PlanType = Literal["free", "pro"]
Tone = Literal["professional", "confident", "friendly"]
EmailLength = Literal["short", "medium", "detailed"]
PaymentStatus = Literal["pending", "approved", "rejected"]


class GenerationRequest(BaseModel):
    resume_text: str = Field(min_length=50, max_length=10000)
    job_description: str = Field(min_length=20, max_length=5000)
    company_name: str = Field(min_length=1, max_length=200)
    company_website: str | None = Field(default=None, max_length=500)
    recruiter_name: str = Field(default="", max_length=100)
    tone: Tone = "professional"
    email_length: EmailLength = "medium"

    @field_validator("recruiter_name", mode="before")
    @classmethod
    def default_recruiter(cls, value: Any) -> Any:
        return "" if value is None else value

    @field_validator("company_website")
    @classmethod
    def validate_website(cls, value: str | None) -> str | None:
        if not value:
            return None
        parsed = urlparse(value)
        if not parsed.scheme or not parsed.netloc or " " in value:
            raise ValueError("Company website must be a valid URL")
        return value


class GenerationResult(BaseModel):
    cold_email: str
    cover_letter: str
    linkedin_dm: str
    follow_ups: list[str] = Field(min_length=2, max_length=2)
    interview_pitch: str
    reply_probability: int = Field(ge=0, le=100)
    improvement_suggestions: str


@dataclass(frozen=True, slots=True)
class Parsed:
    result: GenerationResult


@dataclass(frozen=True, slots=True)
class Fallback:
    result: GenerationResult
    reason: str = ""


GenerationOutcome = Parsed | Fallback


@dataclass(frozen=True, slots=True)
class Identity:
    user_id: str
    email: str = ""


@dataclass(frozen=True, slots=True)
class Entitlement:
    user_id: str
    plan_type: PlanType
    credits_remaining: int

    @property
    def metered(self) -> bool:
        return self.plan_type == "free"


class ModelResponse(BaseModel):
    content: str
    response_id: str = ""
