from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from outreach.types import GenerationResult


class ErrorResponse(BaseModel):
    error: str


class ProfileResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    user_id: str
    email: str
    plan_type: str
    credits_remaining: int


class GenerationSummaryResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    company_name: str
    tone: str
    email_length: str
    created_at: datetime


class GenerationDetailResponse(GenerationSummaryResponse):
    job_description: str
    resume_text: str
    result: GenerationResult


class PaymentCreateRequest(BaseModel):
    screenshot_url: str = Field(min_length=1, max_length=800)


class PaymentResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    user_id: str
    screenshot_url: str
    status: str
    created_at: datetime
