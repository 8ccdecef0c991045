from __future__ import annotations

from outreach.config import Settings, get_settings
from outreach.db.base import Base
from outreach.db.session import bind_engine
from outreach.db import models  # noqa: F401


def ensure_data_directories(settings: Settings) -> None:
    if settings.database_url.startswith("sqlite"):
        settings.data_dir.mkdir(parents=True, exist_ok=True)


def init_database(settings: Settings | None = None) -> dict[str, list[str]]:
    settings = settings or get_settings()
    ensure_data_directories(settings)
    Base.metadata.create_all(bind=bind_engine(settings.database_url))
    return {"tables": sorted(Base.metadata.tables)}
