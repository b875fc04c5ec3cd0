"""
FastAPI application for the family participation tracker.

Run with::

    uvicorn famtrack.main:app --reload
"""
import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from . import __version__
from .api.routes import router
from .core.config import settings
from .core.errors import (
    ValidationError,
    OverlappingTierError,
    TierGapError,
    ReferenceInUseError,
)
from .core.logging_config import setup_logging
from .db.base import init_db

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    # ForeignKeyError is a ValidationError and shares its handler
    @app.exception_handler(ValidationError)
    async def validation_error(request: Request, exc: ValidationError):
        logger.info(f"Rejected {request.method} {request.url.path}: {exc}")
        return JSONResponse(status_code=422, content={"detail": exc.message, "field": exc.field})

    @app.exception_handler(OverlappingTierError)
    @app.exception_handler(TierGapError)
    @app.exception_handler(ReferenceInUseError)
    async def conflict_error(request: Request, exc: Exception):
        logger.info(f"Conflict on {request.method} {request.url.path}: {exc}")
        return JSONResponse(status_code=409, content={"detail": str(exc)})


def create_app() -> FastAPI:
    setup_logging(settings.LOG_LEVEL, settings.LOG_FILE)

    app = FastAPI(title="Family Participation Tracker", version=__version__)
    register_error_handlers(app)
    app.include_router(router)

    @app.on_event("startup")
    def on_startup():
        init_db()

    return app


app = create_app()
