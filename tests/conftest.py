from __future__ import annotations

import os
import tempfile
from pathlib import Path

_TEST_DIR = Path(tempfile.mkdtemp(prefix="outreach-tests-"))

# Settings are cached on first use, so the environment must be set before any package import.
os.environ["DATABASE_URL"] = f"sqlite:///{_TEST_DIR / 'outreach.db'}"
os.environ["DATA_DIR"] = str(_TEST_DIR)
os.environ["APP_ENV"] = "test"
os.environ["OPENAI_API_KEY"] = "test-openai-key"
os.environ["OPENAI_BASE_URL"] = "http://provider.test/v1"
os.environ["IDENTITY_URL"] = "http://identity.test"
os.environ["IDENTITY_API_KEY"] = "test-anon-key"

import pytest  # noqa: E402

from outreach.db.base import Base  # noqa: E402
from outreach.db import models  # noqa: E402,F401
from outreach.db.session import get_engine  # noqa: E402


@pytest.fixture(autouse=True)
def reset_db() -> None:
    Base.metadata.drop_all(bind=get_engine())
    Base.metadata.create_all(bind=get_engine())
    yield
