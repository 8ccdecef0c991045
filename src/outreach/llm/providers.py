from __future__ import annotations

import json
import logging
import re
from dataclasses import dataclass
from typing import Any

import openai
from openai import OpenAI
from pydantic import ValidationError

from outreach.config import Settings
from outreach.errors import GenerationFailed, RateLimited, UpstreamCreditsExhausted
from outreach.types import Fallback, GenerationOutcome, GenerationResult, ModelResponse, Parsed

logger = logging.getLogger(__name__)

FALLBACK_PLACEHOLDER = "Could not parse. Please regenerate."
FALLBACK_REPLY_PROBABILITY = 50

_FENCE_RE = re.compile(r"```(?:json)?[ \t]*\n?", re.IGNORECASE)


@dataclass(slots=True)
class ProviderConfig:
    name: str
    base_url: str
    api_key: str
    timeout_sec: int
    model: str
    temperature: float


class LLMProvider:
    def __init__(self, config: ProviderConfig):
        self.config = config
        # Retries belong to the caller; a 429 must surface on the first attempt.
        self.client = OpenAI(
            base_url=config.base_url,
            api_key=config.api_key,
            timeout=float(config.timeout_sec),
            max_retries=0,
        )

    @classmethod
    def from_settings(cls, settings: Settings) -> "LLMProvider":
        return cls(
            ProviderConfig(
                name="openai",
                base_url=settings.openai_base_url,
                api_key=settings.openai_api_key,
                timeout_sec=settings.openai_timeout_sec,
                model=settings.openai_model,
                temperature=settings.generation_temperature,
            )
        )

    def complete_chat(self, messages: list[dict[str, str]]) -> ModelResponse:
        try:
            response = self.client.chat.completions.create(
                model=self.config.model,
                messages=messages,
                temperature=self.config.temperature,
            )
        except openai.APIStatusError as exc:
            raise self._map_status_error(exc) from exc
        except openai.APIError as exc:
            logger.error("Provider request failed provider=%s error=%s", self.config.name, exc)
            raise GenerationFailed() from exc

        response_id = str(getattr(response, "id", "") or "")
        logger.debug("Provider responded provider=%s response_id=%s", self.config.name, response_id)
        return ModelResponse(content=self._extract_chat_text(response), response_id=response_id)

    def generate(self, messages: list[dict[str, str]]) -> GenerationOutcome:
        return parse_generation(self.complete_chat(messages).content)

    def _map_status_error(self, exc: openai.APIStatusError) -> Exception:
        if exc.status_code == 429:
            logger.warning("Provider rate limited provider=%s", self.config.name)
            return RateLimited()
        if exc.status_code == 402:
            logger.warning("Provider credits exhausted provider=%s", self.config.name)
            return UpstreamCreditsExhausted()

        body = exc.response.text if exc.response is not None else ""
        logger.error(
            "Provider error provider=%s status=%s body=%s",
            self.config.name,
            exc.status_code,
            body,
        )
        return GenerationFailed()

    @staticmethod
    def _extract_chat_text(response: Any) -> str:
        choices = getattr(response, "choices", None) or []
        if not choices:
            return ""

        message = getattr(choices[0], "message", None)
        if message is None:
            return ""

        content = getattr(message, "content", "")
        if isinstance(content, str):
            return content
        if content is None:
            return ""
        return str(content)


def strip_code_fences(content: str) -> str:
    return _FENCE_RE.sub("", content).strip()


def fallback_result(raw_text: str) -> GenerationResult:
    return GenerationResult(
        cold_email=raw_text,
        cover_letter=FALLBACK_PLACEHOLDER,
        linkedin_dm=FALLBACK_PLACEHOLDER,
        follow_ups=["", ""],
        interview_pitch=FALLBACK_PLACEHOLDER,
        reply_probability=FALLBACK_REPLY_PROBABILITY,
        improvement_suggestions=FALLBACK_PLACEHOLDER,
    )


def parse_generation(content: str) -> GenerationOutcome:
    candidate = strip_code_fences(content or "")

    try:
        value = json.loads(candidate)
    except json.JSONDecodeError:
        logger.warning("Failed to parse JSON model output; using fallback result")
        return Fallback(result=fallback_result(candidate), reason="invalid_json")

    if not isinstance(value, dict):
        logger.warning("Model output is not a JSON object; using fallback result")
        return Fallback(result=fallback_result(candidate), reason="not_an_object")

    try:
        return Parsed(result=GenerationResult.model_validate(value))
    except ValidationError as exc:
        logger.warning("Model output does not match result schema; using fallback result (%s)", exc)
        return Fallback(result=fallback_result(candidate), reason="schema_mismatch")
