from datetime import datetime, timezone

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from bookingmx.core.use_cases.reservation_lifecycle import (
    InvalidRequestError,
    InvalidStateError,
    NotFoundError,
)
from bookingmx.logger_config import logger


def _error_body(message: str, status_code: int) -> dict:
    return {
        'timestamp': datetime.now(timezone.utc).isoformat(),
        'status': status_code,
        'message': message,
    }


async def not_found_handler(request: Request, exc: NotFoundError) -> JSONResponse:
    return JSONResponse(status_code=status.HTTP_404_NOT_FOUND, content=_error_body(exc.message, 404))


async def bad_request_handler(request: Request, exc: InvalidRequestError | InvalidStateError) -> JSONResponse:
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content=_error_body(exc.message, 400))


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    errors: dict[str, str] = {}
    for error in exc.errors():
        field = str(error['loc'][-1]) if error.get('loc') else 'body'
        message = error.get('msg', 'Invalid value')
        # pydantic prefixes messages of ValueErrors raised by validators
        errors.setdefault(field, message.removeprefix('Value error, '))

    logger.warning(f'Validation error: {errors}')
    body = _error_body('Validation failed', 400)
    body['errors'] = errors
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content=body)


async def general_500_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception(f'Unhandled exception: {exc!r}')
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=_error_body('Unexpected error', 500),
    )


# Exception handler mapping
EXCEPTION_HANDLERS = {
    NotFoundError: not_found_handler,
    InvalidRequestError: bad_request_handler,
    InvalidStateError: bad_request_handler,
    RequestValidationError: validation_error_handler,
    Exception: general_500_exception_handler,
}


def register_exception_handlers(app: FastAPI) -> None:
    for exception_class, handler in EXCEPTION_HANDLERS.items():
        app.add_exception_handler(exception_class, handler)
