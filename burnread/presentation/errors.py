import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from burnread.domain.errors import StorageFailure, ValidationFailure

logger = logging.getLogger(__name__)


def _invalid_message() -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": "invalid message"},
    )


async def storage_failure_handler(request: Request, exc: StorageFailure) -> JSONResponse:
    # Full cause goes to the log only; clients get a generic message.
    logger.error(
        "storage failure",
        exc_info=exc,
        extra={"path": request.url.path, "method": request.method},
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "internal server error"},
    )


async def validation_failure_handler(
    request: Request, exc: ValidationFailure
) -> JSONResponse:
    return _invalid_message()


async def request_validation_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    # Missing body, broken JSON, form posts: same 400 as a bad message.
    logger.info(
        "rejected malformed request",
        extra={"path": request.url.path, "errors": len(exc.errors())},
    )
    return _invalid_message()


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(StorageFailure, storage_failure_handler)
    app.add_exception_handler(ValidationFailure, validation_failure_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
