"""
FastAPI service for the career coach.

Exposes onboarding, resume editing and improvement, industry insights and
interview quizzes over HTTP. Every workflow error maps to a status code and
a JSON body of the form {"error": <name>, "detail": <message>}.
"""

import logging
from datetime import datetime, timezone
from typing import Optional

import uvicorn
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from src.common.config import Config
from src.common.database import DatabaseClient
from src.common.error_handling import CareerCoachError, StoreUnavailable
from src.common.generation import LangChainTextGenerator
from src.common.logger import setup_logging
from src.common.repositories import build_gateway
from version import __version__

from .config import settings, validate_config_on_startup
from .dependencies import ServiceContainer, build_services
from .models import HealthResponse
from .routes import insights_router, quiz_router, resume_router, users_router

setup_logging(settings.log_level, settings.log_format)
logger = logging.getLogger(__name__)

# Validate configuration at startup
validate_config_on_startup()


async def career_coach_error_handler(request: Request, exc: CareerCoachError) -> JSONResponse:
    """Render a workflow error as its status code and JSON body."""
    level = logging.ERROR if exc.status_code >= 500 or exc.status_code == 429 else logging.WARNING
    logger.log(
        level,
        f"{request.method} {request.url.path} -> {exc.status_code} "
        f"{type(exc).__name__}: {exc.message}",
    )
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Render a rejected request body in the same {"error", "detail"} shape."""
    problems = "; ".join(
        f"{'.'.join(str(part) for part in error['loc'])}: {error['msg']}"
        for error in exc.errors()
    )
    logger.warning(f"{request.method} {request.url.path} -> 422 {problems}")
    return JSONResponse(
        status_code=422,
        content={"error": "ValidationError", "detail": problems or "Request validation failed"},
    )


def create_app(services: Optional[ServiceContainer] = None) -> FastAPI:
    """
    Build the FastAPI application.

    Args:
        services: Pre-built workflows (tests). When omitted, MongoDB and the
            LLM client are wired up on startup from settings.

    Returns:
        Configured FastAPI app
    """
    app = FastAPI(title="Career Coach", version=__version__)
    app.state.services = services

    # Configure CORS using validated settings
    if settings.cors_origins_list:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=settings.cors_origins_list,
            allow_credentials=True,
            allow_methods=["*"],
            allow_headers=["*"],
        )

    app.add_exception_handler(CareerCoachError, career_coach_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)

    app.include_router(users_router)
    app.include_router(resume_router)
    app.include_router(insights_router)
    app.include_router(quiz_router)

    if services is None:
        @app.on_event("startup")
        def startup_services():
            """Connect to MongoDB and build the workflows."""
            Config.validate()
            logger.info(Config.summary())

            # MONGODB_URI / MONGO_DB_NAME come from Config, checked just above
            db_client = DatabaseClient()
            try:
                db_client.ensure_indexes()
            except StoreUnavailable as e:
                # Requests fail with 503 until the server is reachable
                logger.warning(f"MongoDB unavailable at startup: {e.message}")
            gateway = build_gateway(db_client)
            app.state.services = build_services(gateway, LangChainTextGenerator(), db_client)
            logger.info("Career coach services ready")

        @app.on_event("shutdown")
        def shutdown_services():
            """Close the MongoDB connection."""
            container: Optional[ServiceContainer] = app.state.services
            if container is not None and container.db_client is not None:
                container.db_client.disconnect()

    @app.get("/health", response_model=HealthResponse)
    def health_check() -> HealthResponse:
        """
        Health check endpoint for container orchestration.

        Reports MongoDB reachability when a database client is wired in.
        """
        container: Optional[ServiceContainer] = app.state.services
        mongodb = None
        if container is not None and container.db_client is not None:
            mongodb = container.db_client.ping()
        return HealthResponse(
            status="healthy" if mongodb is not False else "degraded",
            version=__version__,
            mongodb=mongodb,
            timestamp=datetime.now(timezone.utc),
        )

    return app


app = create_app()


def main() -> None:
    """Run the API server entrypoint."""
    uvicorn.run(app, host=settings.host, port=settings.port)


if __name__ == "__main__":
    main()
