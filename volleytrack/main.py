import logging
import os
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from volleytrack.errors import VolleyTrackError
from volleytrack.models import utcnow
from volleytrack.routers import categories, workout_plans, password, events
from volleytrack.schemas import ErrorDetail, ErrorResponse

BASE_PATH = os.getenv("BASE_PATH", "").rstrip("/")

logger = logging.getLogger(__name__)


def configure_logging() -> None:
    logging.basicConfig(
        level=os.getenv("LOG_LEVEL", "INFO").upper(),
        format="%(asctime)s - %(levelname)s - %(name)s - %(message)s",
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    from volleytrack.database import init_db
    configure_logging()
    await init_db()
    yield


app = FastAPI(title="VolleyTrack", version="0.1.0", lifespan=lifespan, root_path=BASE_PATH)


def error_response(status_code: int, code: str, message: str, details: list[ErrorDetail] = None) -> JSONResponse:
    body = ErrorResponse(
        error=code,
        message=message,
        status_code=status_code,
        timestamp=utcnow(),
        details=details or [],
    )
    return JSONResponse(status_code=status_code, content=body.model_dump(mode="json", by_alias=True))


@app.exception_handler(VolleyTrackError)
async def handle_domain_error(request: Request, exc: VolleyTrackError):
    if exc.status_code >= 500:
        logger.error(f"{request.method} {request.url.path} failed: {exc.message}")
    details = [ErrorDetail(field=error.field, message=error.message) for error in exc.details]
    return error_response(exc.status_code, exc.code, exc.message, details)


@app.exception_handler(RequestValidationError)
async def handle_malformed_request(request: Request, exc: RequestValidationError):
    """Bodies that are not JSON at all, or path params of the wrong type."""
    details = [
        ErrorDetail(field=".".join(str(part) for part in error["loc"][1:]) or None, message=error["msg"])
        for error in exc.errors()
    ]
    message = details[0].message if details else "Invalid request"
    return error_response(400, "VALIDATION_ERROR", message, details)


@app.get("/health")
async def health():
    return {"status": "healthy"}


app.include_router(categories.router)
app.include_router(workout_plans.router)
app.include_router(password.router)
app.include_router(events.router)
