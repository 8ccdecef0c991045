from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from outreach.api.deps import (
    get_app_settings,
    get_current_identity,
    get_db,
    get_json_payload,
    get_llm_provider,
)
from outreach.api.schemas import (
    ErrorResponse,
    GenerationDetailResponse,
    GenerationSummaryResponse,
    PaymentCreateRequest,
    PaymentResponse,
    ProfileResponse,
)
from outreach.config import Settings
from outreach.core.entitlement import EntitlementGate
from outreach.core.orchestrator import GenerationOrchestrator
from outreach.core.validation import validate_generation_request
from outreach.db.repositories import Repository
from outreach.errors import NotFound, ProfileNotFound
from outreach.llm.providers import LLMProvider
from outreach.types import GenerationResult, Identity

router = APIRouter(
    prefix="/api",
    tags=["api"],
    responses={
        400: {"model": ErrorResponse},
        401: {"model": ErrorResponse},
        402: {"model": ErrorResponse},
        429: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
    },
)


@router.post("/generate-outreach", response_model=GenerationResult)
def generate_outreach(
    identity: Identity = Depends(get_current_identity),
    payload: Any = Depends(get_json_payload),
    db: Session = Depends(get_db),
    provider: LLMProvider = Depends(get_llm_provider),
) -> GenerationResult:
    entitlement = EntitlementGate(Repository(db)).admit(identity.user_id)
    request = validate_generation_request(payload)
    orchestrator = GenerationOrchestrator(db, provider=provider)
    return orchestrator.generate(entitlement=entitlement, request=request)


@router.get("/profile", response_model=ProfileResponse)
def get_profile(
    identity: Identity = Depends(get_current_identity),
    db: Session = Depends(get_db),
) -> ProfileResponse:
    profile = Repository(db).get_profile(identity.user_id)
    if profile is None:
        raise ProfileNotFound()
    return ProfileResponse.model_validate(profile)


@router.get("/generations", response_model=list[GenerationSummaryResponse])
def list_generations(
    limit: int | None = Query(default=None, ge=1),
    identity: Identity = Depends(get_current_identity),
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_app_settings),
) -> list[GenerationSummaryResponse]:
    cap = settings.history_limit
    rows = Repository(db).list_generations(identity.user_id, limit=min(limit or cap, cap))
    return [GenerationSummaryResponse.model_validate(row) for row in rows]


@router.get("/generations/{generation_id}", response_model=GenerationDetailResponse)
def get_generation(
    generation_id: int,
    identity: Identity = Depends(get_current_identity),
    db: Session = Depends(get_db),
) -> GenerationDetailResponse:
    row = Repository(db).get_generation(identity.user_id, generation_id)
    if row is None:
        raise NotFound("Generation not found")
    return GenerationDetailResponse(
        id=row.id,
        company_name=row.company_name,
        tone=row.tone,
        email_length=row.email_length,
        created_at=row.created_at,
        job_description=row.job_description,
        resume_text=row.resume_text,
        result=GenerationResult.model_validate(row.result_json),
    )


@router.post("/payments", response_model=PaymentResponse, status_code=201)
def create_payment(
    payload: PaymentCreateRequest,
    identity: Identity = Depends(get_current_identity),
    db: Session = Depends(get_db),
) -> PaymentResponse:
    repo = Repository(db)
    if repo.get_profile(identity.user_id) is None:
        raise ProfileNotFound()
    payment = repo.create_payment(user_id=identity.user_id, screenshot_url=payload.screenshot_url)
    return PaymentResponse.model_validate(payment)
