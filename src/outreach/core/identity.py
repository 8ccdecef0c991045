from __future__ import annotations

import logging

import requests

from outreach.config import Settings
from outreach.errors import Unauthorized
from outreach.types import Identity

logger = logging.getLogger(__name__)


def parse_bearer_token(authorization: str | None) -> str:
    if not authorization:
        raise Unauthorized("No authorization header")

    scheme, _, token = authorization.strip().partition(" ")
    token = token.strip()
    if scheme.lower() != "bearer" or not token or " " in token:
        raise Unauthorized()
    return token


class IdentityClient:
    """Verifies bearer tokens against the hosted identity service."""

    def __init__(self, *, base_url: str, api_key: str, timeout_sec: int = 10):
        self.base_url = base_url.rstrip("/")
        self.api_key = api_key
        self.timeout_sec = timeout_sec

    @classmethod
    def from_settings(cls, settings: Settings) -> "IdentityClient":
        return cls(
            base_url=settings.identity_url,
            api_key=settings.identity_api_key,
            timeout_sec=settings.identity_timeout_sec,
        )

    def resolve(self, token: str) -> Identity:
        try:
            response = requests.get(
                f"{self.base_url}/auth/v1/user",
                headers={"Authorization": f"Bearer {token}", "apikey": self.api_key},
                timeout=self.timeout_sec,
            )
        except requests.RequestException as exc:
            logger.warning("Identity service unreachable: %s", exc)
            raise Unauthorized() from exc

        if response.status_code != 200:
            logger.warning("Identity service rejected token status=%s", response.status_code)
            raise Unauthorized()

        try:
            payload = response.json()
        except ValueError as exc:
            raise Unauthorized() from exc

        user_id = payload.get("id") if isinstance(payload, dict) else None
        if not user_id:
            raise Unauthorized()
        return Identity(user_id=str(user_id), email=str(payload.get("email") or ""))


def authenticate(authorization: str | None, client: IdentityClient) -> Identity:
    return client.resolve(parse_bearer_token(authorization))
