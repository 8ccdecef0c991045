from __future__ import annotations

import logging

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from outreach.db.repositories import Repository
from outreach.llm.prompts import build_messages
from outreach.llm.providers import LLMProvider
from outreach.types import Entitlement, Fallback, GenerationRequest, GenerationResult

logger = logging.getLogger(__name__)


class GenerationOrchestrator:
    """Runs one admitted, validated request through the provider.

    After the provider answers (parsed or fallback), a free caller is charged
    one credit and the result is appended to the caller's history.
    """

    def __init__(self, session: Session, *, provider: LLMProvider):
        self.session = session
        self.repo = Repository(session)
        self.provider = provider

    def generate(self, *, entitlement: Entitlement, request: GenerationRequest) -> GenerationResult:
        logger.info(
            "Generating outreach user_id=%s company=%s tone=%s length=%s",
            entitlement.user_id,
            request.company_name,
            request.tone,
            request.email_length,
        )
        outcome = self.provider.generate(build_messages(request))
        if isinstance(outcome, Fallback):
            logger.warning(
                "Returning fallback result user_id=%s reason=%s", entitlement.user_id, outcome.reason
            )

        if entitlement.metered:
            self._charge(entitlement)
        self._record(entitlement.user_id, request, outcome.result)
        return outcome.result

    def _charge(self, entitlement: Entitlement) -> None:
        if not self.repo.consume_credit(entitlement.user_id):
            logger.warning(
                "No credit left to consume after generation user_id=%s", entitlement.user_id
            )

    def _record(self, user_id: str, request: GenerationRequest, result: GenerationResult) -> None:
        # The credit is already spent; a failed history write must not fail the response.
        try:
            self.repo.create_generation(user_id=user_id, request=request, result=result)
        except SQLAlchemyError:
            self.session.rollback()
            logger.exception("Failed to record generation user_id=%s", user_id)
