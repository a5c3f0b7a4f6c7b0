"""
Portfolio API - Application entry point

Run with: uvicorn app.main:app
"""

from contextlib import asynccontextmanager

import structlog
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.core.config import Settings, settings as app_settings
from app.core.exceptions import http_exception_handler
from app.core.logging import configure_logging
from app.routes import api_router

logger = structlog.get_logger()


def create_app(settings: Settings = app_settings) -> FastAPI:
    configure_logging(settings)

    @asynccontextmanager
    async def lifespan(_: FastAPI):
        logger.info("startup", app=settings.APP_NAME, environment=settings.ENVIRONMENT)
        yield
        logger.info("shutdown", app=settings.APP_NAME)

    application = FastAPI(
        title=settings.APP_NAME,
        version=settings.APP_VERSION,
        debug=settings.DEBUG,
        lifespan=lifespan,
    )

    application.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    application.add_exception_handler(StarletteHTTPException, http_exception_handler)
    application.include_router(api_router, prefix=settings.API_PREFIX)

    @application.get("/health")
    def health() -> dict:
        return {"status": "ok"}

    return application


app = create_app()
