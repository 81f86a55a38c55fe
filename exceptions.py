"""Service errors and the FastAPI handlers that turn them into responses."""

import logging
from datetime import datetime

from fastapi import Request, Response, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import IntegrityError

from schemas import constraint_violations

logger = logging.getLogger(__name__)


class BookServiceError(Exception):
    pass


class BookValidationError(BookServiceError):
    def __init__(self, violations: list[str]):
        super().__init__("; ".join(violations))
        self.violations = violations


class BookNotFoundError(BookServiceError):
    def __init__(self, book_id: int):
        super().__init__(f"Book with id: {book_id} not found")
        self.book_id = book_id


class MalformedRequestError(BookServiceError):
    """Input that cannot be reported field by field, or a write refused by storage."""


async def book_validation_error_handler(request: Request, exc: BookValidationError) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={
            "timestamp": datetime.now().isoformat(),
            "httpStatus": status.HTTP_400_BAD_REQUEST,
            "errors": exc.violations,
        },
    )


async def book_not_found_handler(request: Request, exc: BookNotFoundError) -> Response:
    logger.warning(str(exc))
    return Response(status_code=status.HTTP_404_NOT_FOUND)


async def malformed_request_handler(request: Request, exc: MalformedRequestError) -> Response:
    logger.warning(f"Malformed request {request.method} {request.url.path}: {exc}")
    return Response(status_code=status.HTTP_400_BAD_REQUEST)


async def request_validation_handler(request: Request, exc: RequestValidationError) -> Response:
    violations = constraint_violations(exc.errors())
    if violations is None:
        return await malformed_request_handler(request, MalformedRequestError(str(exc.errors())))
    return await book_validation_error_handler(request, BookValidationError(violations))


async def integrity_error_handler(request: Request, exc: IntegrityError) -> Response:
    return await malformed_request_handler(request, MalformedRequestError(str(exc.orig)))


def register_exception_handlers(app) -> None:
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(BookValidationError, book_validation_error_handler)
    app.add_exception_handler(BookNotFoundError, book_not_found_handler)
    app.add_exception_handler(MalformedRequestError, malformed_request_handler)
    app.add_exception_handler(IntegrityError, integrity_error_handler)
