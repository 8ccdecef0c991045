from __future__ import annotations

import logging

from outreach.db.repositories import Repository
from outreach.errors import PaymentRequired, ProfileNotFound
from outreach.types import Entitlement

logger = logging.getLogger(__name__)


class EntitlementGate:
    def __init__(self, repo: Repository):
        self.repo = repo

    def admit(self, user_id: str) -> Entitlement:
        profile = self.repo.get_profile(user_id)
        if profile is None:
            raise ProfileNotFound()

        entitlement = Entitlement(
            user_id=user_id,
            plan_type=profile.plan_type,
            credits_remaining=profile.credits_remaining,
        )
        if entitlement.metered and entitlement.credits_remaining <= 0:
            logger.info("Rejected generation without credits user_id=%s", user_id)
            raise PaymentRequired()
        return entitlement
