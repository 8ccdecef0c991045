from __future__ import annotations

from outreach.llm.prompts import build_messages, build_system_prompt, build_user_prompt
from outreach.types import GenerationRequest


def _request(**overrides) -> GenerationRequest:
    values = {
        "resume_text": "Built a {templated} recommender in PyTorch during my internship at Zeta.",
        "job_description": "ML engineer, recommender systems, Python.",
        "company_name": "Acme",
    }
    values.update(overrides)
    return GenerationRequest(**values)


def test_system_prompt_names_every_output_key() -> None:
    prompt = build_system_prompt(_request())
    for key in (
        "cold_email",
        "cover_letter",
        "linkedin_dm",
        "follow_ups",
        "interview_pitch",
        "reply_probability",
        "improvement_suggestions",
    ):
        assert key in prompt
    assert "exactly 2" in prompt
    assert "between 0 and 100" in prompt


def test_system_prompt_carries_tone_and_length() -> None:
    prompt = build_system_prompt(_request(tone="confident", email_length="short"))
    assert "Tone: confident" in prompt
    assert "Email length: short" in prompt
    assert "placement strategist" in prompt
    assert "I am writing to express my interest" in prompt


def test_user_prompt_embeds_inputs_verbatim() -> None:
    request = _request()
    prompt = build_user_prompt(request)
    assert request.resume_text in prompt
    assert request.job_description in prompt
    assert "Company: Acme" in prompt
    assert "Website:" not in prompt
    assert "Recruiter:" not in prompt


def test_user_prompt_includes_optional_lines_when_present() -> None:
    prompt = build_user_prompt(
        _request(company_website="https://acme.example.com", recruiter_name="Priya")
    )
    assert "Website: https://acme.example.com" in prompt
    assert "Recruiter: Priya" in prompt


def test_messages_are_system_then_user() -> None:
    messages = build_messages(_request())
    assert [message["role"] for message in messages] == ["system", "user"]
