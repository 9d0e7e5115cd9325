"""Map storefront and Protean exceptions to HTTP responses.

Every error body has the same shape, ``{"message": str}``. Starlette resolves
handlers along the exception's MRO, so the more specific domain errors win
over the Protean base classes they extend.
"""

import structlog
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from protean.exceptions import ExpectedVersionError, ObjectNotFoundError, ValidationError
from sqlalchemy.exc import SQLAlchemyError

from storefront.exceptions import EmptyCart, InvalidArgument, NotFound, ProductMissing, StoreError, error_message

logger = structlog.get_logger(__name__)

_STATUS_BY_ERROR = {
    NotFound: 404,
    ObjectNotFoundError: 404,
    ProductMissing: 409,
    EmptyCart: 400,
    InvalidArgument: 400,
    ValidationError: 400,
}


def _message_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"message": message})


def _domain_error_handler(status_code: int):
    async def handler(request: Request, exc: Exception) -> JSONResponse:
        message = error_message(exc)
        logger.info("request_rejected", path=request.url.path, status_code=status_code, error=message)
        return _message_response(status_code, message)

    return handler


async def _request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    problems = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error.get("loc", ()) if part != "body")
        problems.append(f"{location}: {error.get('msg')}" if location else str(error.get("msg")))
    message = "Invalid request: " + "; ".join(problems)
    logger.info("request_rejected", path=request.url.path, status_code=400, error=message)
    return _message_response(400, message)


async def _write_conflict_handler(request: Request, exc: ExpectedVersionError) -> JSONResponse:
    logger.warning("write_conflict", path=request.url.path, error=str(exc))
    return _message_response(409, "The resource was changed by another request; please retry")


async def _store_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("store_error", path=request.url.path, error=str(exc))
    return _message_response(500, "A storage error occurred")


async def _unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("unhandled_error", path=request.url.path, error=str(exc))
    return _message_response(500, "Internal server error")


def register_error_handlers(app: FastAPI) -> None:
    for exc_class, status_code in _STATUS_BY_ERROR.items():
        app.add_exception_handler(exc_class, _domain_error_handler(status_code))

    app.add_exception_handler(RequestValidationError, _request_validation_handler)
    app.add_exception_handler(ExpectedVersionError, _write_conflict_handler)
    app.add_exception_handler(StoreError, _store_error_handler)
    app.add_exception_handler(SQLAlchemyError, _store_error_handler)
    app.add_exception_handler(Exception, _unhandled_error_handler)
