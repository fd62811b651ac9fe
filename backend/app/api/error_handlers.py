import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from app.core.exceptions import AppError, RESULT_ENVELOPE, ValidationError

logger = logging.getLogger(__name__)

# Routes under this prefix answer with the {"success", "message"} envelope
AUTH_PATH_PREFIX = "/api/"


async def handle_app_error(request: Request, exc: AppError) -> JSONResponse:
    """Render an AppError with its status and envelope"""
    if exc.status_code >= status.HTTP_500_INTERNAL_SERVER_ERROR:
        # Diagnostic detail was logged where the error was raised
        logger.error(f"{request.method} {request.url.path} failed: {exc.message}")
    else:
        logger.info(f"{request.method} {request.url.path} -> {exc.status_code}: {exc.message}")

    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())


async def handle_request_validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:
    """
    Answer malformed JSON, wrong field types and non-integer ids with 400.

    FastAPI would answer 422 with the full pydantic error list; the
    details are logged instead of being returned.
    """
    logger.warning(f"Invalid request {request.method} {request.url.path}: {exc.errors()}")

    error = ValidationError("Invalid request.")
    if request.url.path.startswith(AUTH_PATH_PREFIX):
        error = error.with_message(envelope=RESULT_ENVELOPE)
    return await handle_app_error(request, error)


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(AppError, handle_app_error)
    app.add_exception_handler(RequestValidationError, handle_request_validation_error)
