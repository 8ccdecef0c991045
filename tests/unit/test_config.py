from __future__ import annotations

import pytest
from pydantic import ValidationError

from outreach.config import Settings


def test_missing_secrets_refuse_to_start() -> None:
    settings = Settings(openai_api_key="", identity_url="", identity_api_key="")
    with pytest.raises(RuntimeError) as excinfo:
        settings.require_runtime_secrets()
    message = str(excinfo.value)
    assert "OPENAI_API_KEY" in message
    assert "IDENTITY_URL" in message
    assert "IDENTITY_API_KEY" in message


def test_complete_settings_pass() -> None:
    settings = Settings(
        openai_api_key="key", identity_url="http://identity.test", identity_api_key="anon"
    )
    settings.require_runtime_secrets()
    assert settings.generation_temperature == 0.7


def test_unknown_app_env_rejected() -> None:
    with pytest.raises(ValidationError):
        Settings(app_env="moon")


def test_cors_origins_default_to_everyone() -> None:
    assert Settings(cors_origins="*").cors_origin_list == ["*"]
    assert Settings(cors_origins="http://a.test, http://b.test").cors_origin_list == [
        "http://a.test",
        "http://b.test",
    ]
