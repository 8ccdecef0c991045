from __future__ import annotations

import json
from pathlib import Path

import typer
import uvicorn

from outreach.api.app import create_app
from outreach.config import get_settings
from outreach.core.entitlement import EntitlementGate
from outreach.core.orchestrator import GenerationOrchestrator
from outreach.core.validation import validate_generation_request
from outreach.db.init import init_database
from outreach.db.repositories import Repository
from outreach.db.session import SessionLocal
from outreach.errors import OutreachError
from outreach.llm.providers import LLMProvider
from outreach.logging_config import configure_logging

app = typer.Typer(help="Outreach CLI")
profile_app = typer.Typer(help="Manage user profiles and plans")
payments_app = typer.Typer(help="Review payment screenshots")
generations_app = typer.Typer(help="Generation history")

app.add_typer(profile_app, name="profile")
app.add_typer(payments_app, name="payments")
app.add_typer(generations_app, name="generations")

_INITIALIZED = False


def ensure_initialized() -> None:
    global _INITIALIZED
    if _INITIALIZED:
        return
    init_database()
    _INITIALIZED = True


def _profile_json(profile) -> dict:
    return {
        "user_id": profile.user_id,
        "email": profile.email,
        "plan_type": profile.plan_type,
        "credits_remaining": profile.credits_remaining,
    }


def _payment_json(payment) -> dict:
    return {
        "id": payment.id,
        "user_id": payment.user_id,
        "screenshot_url": payment.screenshot_url,
        "status": payment.status,
        "created_at": payment.created_at.isoformat() if payment.created_at else None,
    }


@app.command("init")
def init_cmd() -> None:
    """Initialize the database and data directory."""
    configure_logging()
    result = init_database()
    typer.echo(json.dumps({"ok": True, **result}, indent=2))


@profile_app.command("create")
def profile_create(
    user_id: str = typer.Option(..., "--user-id"),
    email: str = typer.Option("", "--email"),
    credits: int | None = typer.Option(None, "--credits"),
    plan: str = typer.Option("free", "--plan"),
) -> None:
    configure_logging()
    ensure_initialized()
    settings = get_settings()
    if credits is None:
        credits = settings.pro_plan_credits if plan == "pro" else settings.free_signup_credits

    with SessionLocal() as db:
        repo = Repository(db)
        if repo.get_profile(user_id):
            raise typer.BadParameter(f"profile for user {user_id} already exists")
        try:
            profile = repo.create_profile(
                user_id=user_id, email=email, credits_remaining=credits, plan_type=plan
            )
        except ValueError as exc:
            raise typer.BadParameter(str(exc)) from exc
        typer.echo(json.dumps(_profile_json(profile), indent=2))


@profile_app.command("show")
def profile_show(user_id: str = typer.Option(..., "--user-id")) -> None:
    configure_logging()
    ensure_initialized()
    with SessionLocal() as db:
        profile = Repository(db).get_profile(user_id)
        if profile is None:
            raise typer.BadParameter(f"profile for user {user_id} not found")
        typer.echo(json.dumps(_profile_json(profile), indent=2))


@profile_app.command("list")
def profile_list() -> None:
    configure_logging()
    ensure_initialized()
    with SessionLocal() as db:
        profiles = Repository(db).list_profiles()
        typer.echo(json.dumps([_profile_json(profile) for profile in profiles], indent=2))


@profile_app.command("set-plan")
def profile_set_plan(
    user_id: str = typer.Option(..., "--user-id"),
    plan: str = typer.Option(..., "--plan"),
) -> None:
    """Switch a user between free and pro (pro grants the pro credit allowance, free resets to 0)."""
    configure_logging()
    ensure_initialized()
    settings = get_settings()
    with SessionLocal() as db:
        try:
            profile = Repository(db).set_plan(user_id, plan, pro_credits=settings.pro_plan_credits)
        except ValueError as exc:
            raise typer.BadParameter(str(exc)) from exc
        typer.echo(json.dumps(_profile_json(profile), indent=2))


@payments_app.command("list")
def payments_list(status: str | None = typer.Option(None, "--status")) -> None:
    configure_logging()
    ensure_initialized()
    with SessionLocal() as db:
        payments = Repository(db).list_payments(status=status)
        typer.echo(json.dumps([_payment_json(payment) for payment in payments], indent=2))


def _decide_payment(payment_id: int, status: str) -> None:
    configure_logging()
    ensure_initialized()
    with SessionLocal() as db:
        try:
            payment = Repository(db).set_payment_status(payment_id, status)
        except ValueError as exc:
            raise typer.BadParameter(str(exc)) from exc
        typer.echo(json.dumps(_payment_json(payment), indent=2))


@payments_app.command("approve")
def payments_approve(payment_id: int = typer.Option(..., "--payment-id")) -> None:
    _decide_payment(payment_id, "approved")


@payments_app.command("reject")
def payments_reject(payment_id: int = typer.Option(..., "--payment-id")) -> None:
    _decide_payment(payment_id, "rejected")


@generations_app.command("list")
def generations_list(
    user_id: str = typer.Option(..., "--user-id"),
    limit: int = typer.Option(20, "--limit"),
) -> None:
    configure_logging()
    ensure_initialized()
    with SessionLocal() as db:
        rows = Repository(db).list_generations(user_id, limit=limit)
        typer.echo(
            json.dumps(
                [
                    {
                        "id": row.id,
                        "company_name": row.company_name,
                        "tone": row.tone,
                        "email_length": row.email_length,
                        "created_at": row.created_at.isoformat() if row.created_at else None,
                    }
                    for row in rows
                ],
                indent=2,
            )
        )


@app.command("generate")
def generate_cmd(
    user_id: str = typer.Option(..., "--user-id"),
    resume: Path = typer.Option(..., "--resume", exists=True, readable=True),
    job_description: Path = typer.Option(..., "--job-description", exists=True, readable=True),
    company: str = typer.Option(..., "--company"),
    website: str = typer.Option("", "--website"),
    recruiter: str = typer.Option("", "--recruiter"),
    tone: str = typer.Option("professional", "--tone"),
    email_length: str = typer.Option("medium", "--email-length"),
) -> None:
    """Generate an outreach pack for a stored profile from local files."""
    configure_logging()
    ensure_initialized()
    settings = get_settings()
    if not settings.openai_api_key:
        raise typer.BadParameter("OPENAI_API_KEY is not configured")

    payload = {
        "resume_text": resume.read_text(encoding="utf-8"),
        "job_description": job_description.read_text(encoding="utf-8"),
        "company_name": company,
        "company_website": website,
        "recruiter_name": recruiter,
        "tone": tone,
        "email_length": email_length,
    }
    with SessionLocal() as db:
        try:
            entitlement = EntitlementGate(Repository(db)).admit(user_id)
            request = validate_generation_request(payload)
            orchestrator = GenerationOrchestrator(db, provider=LLMProvider.from_settings(settings))
            result = orchestrator.generate(entitlement=entitlement, request=request)
        except OutreachError as exc:
            typer.echo(json.dumps({"error": exc.message}, indent=2), err=True)
            raise typer.Exit(code=1) from exc
        typer.echo(result.model_dump_json(indent=2))


@app.command("serve")
def serve(
    host: str | None = typer.Option(None, "--host"),
    port: int | None = typer.Option(None, "--port"),
) -> None:
    configure_logging()
    ensure_initialized()
    settings = get_settings()
    app_instance = create_app(settings)
    uvicorn.run(app_instance, host=host or settings.app_host, port=port or settings.app_port)


if __name__ == "__main__":
    app()
