from __future__ import annotations

from typing import Any

from pydantic import ValidationError

from outreach.errors import InvalidInput
from outreach.types import GenerationRequest

FIELD_LABELS = {
    "resume_text": "Resume",
    "job_description": "Job description",
    "company_name": "Company name",
    "company_website": "Company website",
    "recruiter_name": "Recruiter name",
    "tone": "Tone",
    "email_length": "Email length",
}


def validate_generation_request(payload: Any) -> GenerationRequest:
    if not isinstance(payload, dict):
        raise InvalidInput(["Invalid request data"])

    try:
        return GenerationRequest.model_validate(payload)
    except ValidationError as exc:
        raise InvalidInput(format_validation_errors(exc)) from exc


def format_validation_errors(exc: ValidationError) -> list[str]:
    messages: list[str] = []
    for error in exc.errors():
        field = str(error["loc"][0]) if error["loc"] else ""
        message = _describe(field, error)
        if message not in messages:
            messages.append(message)
    return messages


def _describe(field: str, error: dict[str, Any]) -> str:
    label = FIELD_LABELS.get(field, field or "Request")
    kind = error["type"]
    ctx = error.get("ctx") or {}

    if kind == "missing":
        return f"{label} is required"
    if kind == "string_too_short":
        if ctx.get("min_length") == 1:
            return f"{label} is required"
        return f"{label} must be at least {ctx.get('min_length')} characters"
    if kind == "string_too_long":
        return f"{label} exceeds {ctx.get('max_length')} characters"
    if kind == "string_type":
        return f"{label} must be a string"
    if kind == "literal_error":
        return f"{label} must be one of: {ctx.get('expected', '')}"
    if kind == "value_error" and "error" in ctx:
        return str(ctx["error"])
    return f"{label}: {error['msg']}"
