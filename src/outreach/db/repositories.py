from __future__ import annotations

from sqlalchemy import select, update
from sqlalchemy.orm import Session

from outreach.db.models import Generation, Payment, Profile
from outreach.types import GenerationRequest, GenerationResult

PLAN_TYPES = {"free", "pro"}
PAYMENT_STATUSES = {"pending", "approved", "rejected"}


class Repository:
    def __init__(self, session: Session):
        self.session = session

    def create_profile(
        self,
        *,
        user_id: str,
        email: str = "",
        credits_remaining: int = 5,
        plan_type: str = "free",
    ) -> Profile:
        if plan_type not in PLAN_TYPES:
            raise ValueError(f"unsupported plan type '{plan_type}'")
        if credits_remaining < 0:
            raise ValueError("credits_remaining must be non-negative")

        profile = Profile(
            user_id=user_id,
            email=email,
            credits_remaining=credits_remaining,
            plan_type=plan_type,
        )
        self.session.add(profile)
        self.session.commit()
        self.session.refresh(profile)
        return profile

    def get_profile(self, user_id: str) -> Profile | None:
        return self.session.scalar(select(Profile).where(Profile.user_id == user_id))

    def list_profiles(self) -> list[Profile]:
        return list(self.session.scalars(select(Profile).order_by(Profile.id.desc())).all())

    def set_plan(self, user_id: str, plan_type: str, *, pro_credits: int = 999) -> Profile:
        if plan_type not in PLAN_TYPES:
            raise ValueError(f"unsupported plan type '{plan_type}'")
        profile = self.get_profile(user_id)
        if profile is None:
            raise ValueError(f"profile for user {user_id} not found")

        profile.plan_type = plan_type
        profile.credits_remaining = pro_credits if plan_type == "pro" else 0
        self.session.commit()
        self.session.refresh(profile)
        return profile

    def consume_credit(self, user_id: str) -> bool:
        """Take one credit from a free profile in a single conditional update.

        Returns False when the profile is not on the free plan or has no
        credits left, so concurrent callers can never push the count below zero.
        """
        statement = (
            update(Profile)
            .where(
                Profile.user_id == user_id,
                Profile.plan_type == "free",
                Profile.credits_remaining > 0,
            )
            .values(credits_remaining=Profile.credits_remaining - 1)
            .execution_options(synchronize_session="fetch")
        )
        result = self.session.execute(statement)
        self.session.commit()
        return result.rowcount == 1

    def create_generation(
        self,
        *,
        user_id: str,
        request: GenerationRequest,
        result: GenerationResult,
    ) -> Generation:
        item = Generation(
            user_id=user_id,
            company_name=request.company_name,
            job_description=request.job_description,
            resume_text=request.resume_text,
            tone=request.tone,
            email_length=request.email_length,
            result_json=result.model_dump(),
        )
        self.session.add(item)
        self.session.commit()
        self.session.refresh(item)
        return item

    def list_generations(self, user_id: str, limit: int = 50) -> list[Generation]:
        statement = (
            select(Generation)
            .where(Generation.user_id == user_id)
            .order_by(Generation.created_at.desc(), Generation.id.desc())
            .limit(limit)
        )
        return list(self.session.scalars(statement).all())

    def get_generation(self, user_id: str, generation_id: int) -> Generation | None:
        item = self.session.get(Generation, generation_id)
        if item is None or item.user_id != user_id:
            return None
        return item

    def create_payment(self, *, user_id: str, screenshot_url: str) -> Payment:
        payment = Payment(user_id=user_id, screenshot_url=screenshot_url, status="pending")
        self.session.add(payment)
        self.session.commit()
        self.session.refresh(payment)
        return payment

    def list_payments(self, status: str | None = None) -> list[Payment]:
        statement = select(Payment).order_by(Payment.created_at.desc(), Payment.id.desc())
        if status is not None:
            statement = statement.where(Payment.status == status)
        return list(self.session.scalars(statement).all())

    def set_payment_status(self, payment_id: int, status: str) -> Payment:
        if status not in PAYMENT_STATUSES - {"pending"}:
            raise ValueError(f"unsupported payment status '{status}'")
        payment = self.session.get(Payment, payment_id)
        if payment is None:
            raise ValueError(f"payment {payment_id} not found")
        if payment.status != "pending":
            raise ValueError(f"payment {payment_id} is already {payment.status}")

        payment.status = status
        self.session.commit()
        self.session.refresh(payment)
        return payment
