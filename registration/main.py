# registration/main.py

import asyncio
import logging
import sys

import uvicorn
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.staticfiles import StaticFiles

from registration.api.users import router as users_router
from registration.core.config import Settings, get_settings
from registration.core.db import UserStore, startup
from registration.core.errors import DuplicateEmailError, PersistenceError
from registration.core.log import setup_logging

logger = logging.getLogger(__name__)


async def duplicate_email_handler(request: Request, exc: DuplicateEmailError):
    logger.debug("Rejected duplicate registration")
    return JSONResponse(status_code=400, content={"error": "Email already exists"})


async def persistence_error_handler(request: Request, exc: PersistenceError):
    logger.error("Registration error: %s", exc, exc_info=exc)
    return JSONResponse(status_code=500, content={"error": "Registration failed"})


async def validation_error_handler(request: Request, exc: RequestValidationError):
    return JSONResponse(status_code=422, content={"error": "Invalid registration payload"})


def create_app(settings: Settings, store: UserStore) -> FastAPI:
    app = FastAPI(title=settings.APP_NAME)
    app.state.store = store

    if settings.CORS_ORIGINS:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=settings.CORS_ORIGINS,
            allow_credentials=True,
            allow_methods=["*"],
            allow_headers=["*"],
        )

    app.add_exception_handler(DuplicateEmailError, duplicate_email_handler)
    app.add_exception_handler(PersistenceError, persistence_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)

    app.include_router(users_router)

    # Mounted last so API routes match first
    app.mount("/", StaticFiles(directory=settings.STATIC_DIR, html=True), name="static")
    return app


async def serve(settings: Settings) -> int:
    result = await startup(settings)
    if not result.ok:
        logger.error("%s", result.error)
        return 1

    try:
        try:
            app = create_app(settings, result.store)
        except RuntimeError as exc:
            # StaticFiles rejects a missing directory
            logger.error("Cannot serve static files: %s", exc)
            return 1
        server = uvicorn.Server(uvicorn.Config(app, host=settings.HOST, port=settings.PORT))
        logger.info("Server running on http://localhost:%s", settings.PORT)
        await server.serve()
    finally:
        result.store.close()
    return 0


def run() -> None:
    settings = get_settings()
    setup_logging(settings.LOG_LEVEL)
    sys.exit(asyncio.run(serve(settings)))


if __name__ == "__main__":
    run()
