from __future__ import annotations

import pytest

from outreach.core.entitlement import EntitlementGate
from outreach.db.repositories import Repository
from outreach.db.session import SessionLocal
from outreach.errors import PaymentRequired, ProfileNotFound


def test_free_profile_with_credits_is_admitted() -> None:
    with SessionLocal() as db:
        repo = Repository(db)
        repo.create_profile(user_id="user-1", credits_remaining=1)
        entitlement = EntitlementGate(repo).admit("user-1")
        assert entitlement.plan_type == "free"
        assert entitlement.credits_remaining == 1
        assert entitlement.metered


def test_free_profile_without_credits_is_rejected() -> None:
    with SessionLocal() as db:
        repo = Repository(db)
        repo.create_profile(user_id="user-1", credits_remaining=0)
        with pytest.raises(PaymentRequired) as excinfo:
            EntitlementGate(repo).admit("user-1")
        assert excinfo.value.status_code == 402
        assert "upgrade to Pro" in excinfo.value.message


def test_pro_profile_without_credits_is_admitted() -> None:
    with SessionLocal() as db:
        repo = Repository(db)
        repo.create_profile(user_id="user-1", credits_remaining=0, plan_type="pro")
        entitlement = EntitlementGate(repo).admit("user-1")
        assert not entitlement.metered


def test_missing_profile_raises_not_found() -> None:
    with SessionLocal() as db:
        with pytest.raises(ProfileNotFound, match="Profile not found"):
            EntitlementGate(Repository(db)).admit("ghost")
