"""FastAPI application entry point.

Configures CORS, structured logging, error handlers and router registration.
"""

import logging
from contextlib import asynccontextmanager
from collections.abc import AsyncIterator

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from starlette.responses import JSONResponse

from app.core.config import settings
from app.core.constants import INVALID_PAYLOAD_MESSAGE
from app.core.exceptions import EntityNotFoundError, InvalidPayloadException
from app.core.logging import setup_logging
from app.models.errors import ApiError, FieldError
from app.routers import codes, health, students

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(application: FastAPI) -> AsyncIterator[None]:
    """Application lifespan: startup and shutdown hooks."""
    setup_logging()
    logger.info("Application starting up")
    yield
    logger.info("Application shutting down")


app = FastAPI(
    title="Services Card Student API",
    description="Validates and stores student records for the services card",
    version="0.1.0",
    lifespan=lifespan,
)

# ---------------------------------------------------------------------------
# CORS Configuration
# ---------------------------------------------------------------------------
_raw_origins = settings.ALLOWED_ORIGINS.strip()
if _raw_origins == "*":
    _allowed_origins: list[str] = ["*"]
else:
    _allowed_origins = [o.strip() for o in _raw_origins.split(",") if o.strip()]

app.add_middleware(
    CORSMiddleware,
    allow_origins=_allowed_origins,
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
)

# ---------------------------------------------------------------------------
# Error Handlers
# ---------------------------------------------------------------------------


def _error_response(error: ApiError) -> JSONResponse:
    return JSONResponse(
        status_code=error.status,
        content=error.model_dump(mode="json", by_alias=True),
    )


@app.exception_handler(InvalidPayloadException)
async def invalid_payload_handler(
    request: Request, exc: InvalidPayloadException
) -> JSONResponse:
    return _error_response(exc.error)


@app.exception_handler(RequestValidationError)
async def request_validation_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Report malformed bodies in the same shape as failed business rules."""
    sub_errors = tuple(
        FieldError(
            field=str(err["loc"][-1]),
            # the whole body is echoed as input for missing fields
            rejected_value=None if err["type"] == "missing" else err.get("input"),
            message=err["msg"],
        )
        for err in exc.errors()
    )
    return _error_response(
        ApiError(status=400, message=INVALID_PAYLOAD_MESSAGE, sub_errors=sub_errors)
    )


@app.exception_handler(EntityNotFoundError)
async def entity_not_found_handler(
    request: Request, exc: EntityNotFoundError
) -> JSONResponse:
    logger.info(
        "entity_not_found",
        extra={"entity": exc.entity, "path": request.url.path},
    )
    return _error_response(ApiError(status=404, message=str(exc)))


# ---------------------------------------------------------------------------
# Router Registration
# ---------------------------------------------------------------------------
app.include_router(health.router, tags=["Health"])
# Code routes first so their fixed paths are not captured by /{student_id}
app.include_router(codes.router, prefix="/api/v1/student", tags=["Codes"])
app.include_router(students.router, prefix="/api/v1/student", tags=["Students"])
