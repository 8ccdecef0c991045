from __future__ import annotations

from collections.abc import Generator

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker

from outreach.config import get_settings


def build_engine(database_url: str) -> Engine:
    connect_args = {"check_same_thread": False} if database_url.startswith("sqlite") else {}
    return create_engine(database_url, connect_args=connect_args, future=True)


engine = build_engine(get_settings().database_url)
SessionLocal = sessionmaker(bind=engine, autoflush=False, autocommit=False, future=True)


def bind_engine(database_url: str) -> Engine:
    """Point ``SessionLocal`` at ``database_url``, rebuilding the engine only when it changes."""
    global engine
    if engine.url.render_as_string(hide_password=False) != database_url:
        engine.dispose()
        engine = build_engine(database_url)
        SessionLocal.configure(bind=engine)
    return engine


def get_engine() -> Engine:
    return engine


def get_db_session() -> Generator[Session, None, None]:
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
