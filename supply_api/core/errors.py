from __future__ import annotations

import logging
from typing import NoReturn

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

logger = logging.getLogger(__name__)


class AppError(Exception):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    code = "INTERNAL_ERROR"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(AppError):
    status_code = status.HTTP_400_BAD_REQUEST
    code = "VALIDATION_ERROR"

    def __init__(self, message: str):
        super().__init__("Validation error: {}".format(message))


class NotFoundError(AppError):
    status_code = status.HTTP_404_NOT_FOUND
    code = "NOT_FOUND"

    def __init__(self, entity: str, entity_id: object):
        super().__init__("{} with ID {} not found".format(entity, entity_id))
        self.entity = entity
        self.entity_id = entity_id


class DatabaseError(AppError):
    code = "DATABASE_ERROR"

    def __init__(self, message: str = "Database operation failed"):
        super().__init__(message)


class ProductNotFoundError(Exception):
    """Raised by the cart workflow when a referenced product does not exist."""

    def __init__(self, product_id: int):
        super().__init__("Product not found")
        self.product_id = product_id


def handle_database_error(exc: SQLAlchemyError) -> NoReturn:
    logger.error("Database operation failed: %s", exc)
    raise DatabaseError() from exc


def _error_body(code: str, message: str) -> dict:
    return {"error": {"code": code, "message": message}}


def _app_error_handler(_request: Request, exc: AppError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content=_error_body(exc.code, exc.message))


def _database_error_handler(_request: Request, exc: SQLAlchemyError) -> JSONResponse:
    logger.exception("Unhandled database error", exc_info=exc)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=_error_body(DatabaseError.code, "Database operation failed"),
    )


def _request_validation_handler(_request: Request, exc: RequestValidationError) -> JSONResponse:
    details = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error.get("loc", ()) if part != "body")
        message = error.get("msg", "Invalid value")
        details.append("{}: {}".format(location, message) if location else message)
    message = "Validation error: {}".format("; ".join(details) or "Invalid request")
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=_error_body(ValidationError.code, message),
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(AppError, _app_error_handler)
    app.add_exception_handler(SQLAlchemyError, _database_error_handler)
    app.add_exception_handler(RequestValidationError, _request_validation_handler)


__all__ = [
    "AppError",
    "DatabaseError",
    "NotFoundError",
    "ProductNotFoundError",
    "ValidationError",
    "handle_database_error",
    "register_exception_handlers",
]
