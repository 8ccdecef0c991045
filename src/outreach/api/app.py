from __future__ import annotations

from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from outreach.api.errors import register_exception_handlers
from outreach.api.routes import router as api_router
from outreach.config import Settings, get_settings
from outreach.core.identity import IdentityClient
from outreach.db.init import init_database
from outreach.db.session import bind_engine
from outreach.llm.providers import LLMProvider


@asynccontextmanager
async def lifespan(app: FastAPI):
    init_database(app.state.settings)
    yield


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or get_settings()
    settings.require_runtime_secrets()
    bind_engine(settings.database_url)

    app = FastAPI(title=settings.app_name, lifespan=lifespan)
    app.state.settings = settings
    app.state.identity_client = IdentityClient.from_settings(settings)
    app.state.llm_provider = LLMProvider.from_settings(settings)

    # Must precede CORS, which wraps it.
    register_exception_handlers(app)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origin_list or ["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.get("/health")
    def health() -> JSONResponse:
        return JSONResponse({"status": "ok"})

    app.include_router(api_router)
    return app
