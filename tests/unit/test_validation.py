from __future__ import annotations

import pytest

from outreach.core.validation import validate_generation_request
from outreach.errors import InvalidInput


def _payload(**overrides) -> dict:
    payload = {
        "resume_text": "r" * 60,
        "job_description": "j" * 30,
        "company_name": "Acme",
    }
    payload.update(overrides)
    return payload


def test_defaults_applied_when_tone_and_length_omitted() -> None:
    request = validate_generation_request(_payload())
    assert request.tone == "professional"
    assert request.email_length == "medium"
    assert request.company_website is None
    assert request.recruiter_name == ""


@pytest.mark.parametrize("length,accepted", [(49, False), (50, True), (10000, True), (10001, False)])
def test_resume_length_bounds_are_inclusive(length: int, accepted: bool) -> None:
    payload = _payload(resume_text="x" * length)
    if accepted:
        assert len(validate_generation_request(payload).resume_text) == length
    else:
        with pytest.raises(InvalidInput, match="Resume"):
            validate_generation_request(payload)


@pytest.mark.parametrize("length,accepted", [(19, False), (20, True), (5000, True), (5001, False)])
def test_job_description_length_bounds(length: int, accepted: bool) -> None:
    payload = _payload(job_description="x" * length)
    if accepted:
        validate_generation_request(payload)
    else:
        with pytest.raises(InvalidInput, match="Job description"):
            validate_generation_request(payload)


def test_missing_company_name_is_required() -> None:
    payload = _payload()
    del payload["company_name"]
    with pytest.raises(InvalidInput) as excinfo:
        validate_generation_request(payload)
    assert "required" in excinfo.value.message
    assert excinfo.value.status_code == 400


def test_empty_company_name_is_required() -> None:
    with pytest.raises(InvalidInput, match="Company name is required"):
        validate_generation_request(_payload(company_name=""))


def test_company_name_over_200_characters_rejected() -> None:
    with pytest.raises(InvalidInput, match="Company name exceeds 200 characters"):
        validate_generation_request(_payload(company_name="a" * 201))


def test_invalid_company_website_rejected() -> None:
    with pytest.raises(InvalidInput, match="Company website must be a valid URL"):
        validate_generation_request(_payload(company_website="not-a-url"))


def test_empty_company_website_is_not_provided() -> None:
    request = validate_generation_request(_payload(company_website=""))
    assert request.company_website is None


def test_valid_company_website_kept() -> None:
    request = validate_generation_request(_payload(company_website="https://acme.example.com/careers"))
    assert request.company_website == "https://acme.example.com/careers"


def test_overlong_company_website_rejected() -> None:
    website = "https://acme.example.com/" + "a" * 480
    with pytest.raises(InvalidInput, match="Company website exceeds 500 characters"):
        validate_generation_request(_payload(company_website=website))


def test_recruiter_name_limits() -> None:
    assert validate_generation_request(_payload(recruiter_name="")).recruiter_name == ""
    assert validate_generation_request(_payload(recruiter_name=None)).recruiter_name == ""
    with pytest.raises(InvalidInput, match="Recruiter name exceeds 100 characters"):
        validate_generation_request(_payload(recruiter_name="n" * 101))


def test_unknown_tone_rejected() -> None:
    with pytest.raises(InvalidInput, match="Tone must be one of"):
        validate_generation_request(_payload(tone="sarcastic"))


def test_all_violations_are_reported_together() -> None:
    with pytest.raises(InvalidInput) as excinfo:
        validate_generation_request(
            {"resume_text": "short", "job_description": "tiny", "email_length": "epic"}
        )
    messages = excinfo.value.messages
    assert "Resume must be at least 50 characters" in messages
    assert "Job description must be at least 20 characters" in messages
    assert "Company name is required" in messages
    assert any(message.startswith("Email length must be one of") for message in messages)
    assert excinfo.value.message == ", ".join(messages)


def test_non_object_payload_rejected() -> None:
    with pytest.raises(InvalidInput, match="Invalid request data"):
        validate_generation_request(["not", "an", "object"])
    with pytest.raises(InvalidInput, match="Invalid request data"):
        validate_generation_request(None)


def test_non_string_resume_rejected() -> None:
    with pytest.raises(InvalidInput, match="Resume must be a string"):
        validate_generation_request(_payload(resume_text=12345))
