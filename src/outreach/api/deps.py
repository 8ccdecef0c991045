from __future__ import annotations

import json
from collections.abc import Generator
from typing import Any

from fastapi import Depends, Header, Request
from sqlalchemy.orm import Session

from outreach.config import Settings
from outreach.core.identity import IdentityClient, authenticate
from outreach.db.session import get_db_session
from outreach.llm.providers import LLMProvider
from outreach.types import Identity


def get_db() -> Generator[Session, None, None]:
    yield from get_db_session()


def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_identity_client(request: Request) -> IdentityClient:
    return request.app.state.identity_client


def get_llm_provider(request: Request) -> LLMProvider:
    return request.app.state.llm_provider


def get_current_identity(
    authorization: str | None = Header(default=None),
    client: IdentityClient = Depends(get_identity_client),
) -> Identity:
    return authenticate(authorization, client)


async def get_json_payload(
    request: Request,
    identity: Identity = Depends(get_current_identity),
) -> Any:
    """Decode the request body after the caller is authenticated.

    An empty or undecodable body becomes ``None``, which input validation
    rejects once the credit gate has run.
    """
    body = await request.body()
    if not body:
        return None
    try:
        return json.loads(body)
    except ValueError:
        return None
