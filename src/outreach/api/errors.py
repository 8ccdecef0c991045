from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from outreach.errors import OutreachError, Unauthorized

logger = logging.getLogger(__name__)


def register_exception_handlers(app: FastAPI) -> None:
    """Render every failure as ``{"error": message}`` with its status code.

    Unexpected exceptions are caught by an HTTP middleware, which must sit
    inside CORS: call this before ``add_middleware(CORSMiddleware, ...)``.
    """

    @app.middleware("http")
    async def unhandled_error_middleware(request: Request, call_next):
        try:
            return await call_next(request)
        except Exception:
            logger.exception("Unhandled error on %s", request.url.path)
            return JSONResponse(status_code=500, content={"error": "Internal server error"})

    @app.exception_handler(OutreachError)
    async def outreach_error_handler(request: Request, exc: OutreachError) -> JSONResponse:
        if exc.status_code >= 500:
            logger.error("%s on %s: %s", type(exc).__name__, request.url.path, exc.message)
        headers = {"WWW-Authenticate": "Bearer"} if isinstance(exc, Unauthorized) else None
        return JSONResponse(
            status_code=exc.status_code,
            content={"error": exc.message},
            headers=headers,
        )

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        messages = []
        for error in exc.errors():
            if error.get("type") == "json_invalid":
                messages.append("Invalid request data")
                continue
            location = ".".join(str(part) for part in error.get("loc", ())[1:])
            messages.append(f"{location}: {error.get('msg')}" if location else str(error.get("msg")))
        return JSONResponse(
            status_code=400,
            content={"error": ", ".join(messages) or "Invalid request data"},
        )
