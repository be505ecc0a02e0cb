"""
Global exception handlers and custom exception classes.
"""
from typing import Any, Dict, Optional

from fastapi import Request, status
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError
from fastapi.encoders import jsonable_encoder
from starlette.exceptions import HTTPException as StarletteHTTPException
import logging

# Set up logging
logger = logging.getLogger(__name__)


class AppException(Exception):
    """
    Base exception class for application-specific exceptions.

    Subclasses set a default status code and message; to_content() renders
    the JSON body returned to the client.
    """
    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_detail: str = "Internal server error"

    def __init__(self, detail: Optional[str] = None, status_code: Optional[int] = None):
        self.detail = detail or self.default_detail
        if status_code is not None:
            self.status_code = status_code
        super().__init__(self.detail)

    def to_content(self) -> Dict[str, Any]:
        return {"message": self.detail}


class InternalServerException(AppException):
    """Unexpected storage or hashing failure."""


class RecordException(AppException):
    """Base class for doctor/specialty/medication/patient record errors."""


class MissingFieldsException(RecordException):
    status_code = status.HTTP_400_BAD_REQUEST
    default_detail = "Missing required fields"


class RecordNotFoundException(RecordException):
    status_code = status.HTTP_404_NOT_FOUND
    default_detail = "Record not found"


class DuplicateRecordException(RecordException):
    status_code = status.HTTP_409_CONFLICT
    default_detail = "Record already exists"


class DuplicateLicenseException(DuplicateRecordException):
    default_detail = "A doctor with this license number already exists"


class DuplicateSpecialtyException(DuplicateRecordException):
    default_detail = "Specialty already exists"


async def app_exception_handler(request: Request, exc: AppException):
    """
    Handler for application-specific exceptions.

    Args:
        request: The request that caused the exception
        exc: The exception instance

    Returns:
        JSONResponse: Standardized error response
    """
    if exc.status_code >= 500:
        logger.error(f"Application error on {request.method} {request.url.path}: {exc.detail}")
    else:
        logger.info(f"Request rejected ({exc.status_code}) on {request.method} {request.url.path}: {exc.detail}")
    headers = getattr(exc, "headers", None)
    return JSONResponse(
        status_code=exc.status_code,
        content=exc.to_content(),
        headers=headers,
    )


async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """
    Handler for request validation exceptions.

    Args:
        request: The request that caused the exception
        exc: The validation exception instance

    Returns:
        JSONResponse: Standardized error response with validation details
    """
    logger.warning(f"Validation error: {exc.errors()}")
    return JSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        content={
            "detail": "Validation error",
            "message": "Validation error",
            "errors": jsonable_encoder(exc.errors()),
        }
    )


async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    """Render routing errors (unknown path, wrong method) with the {"message"} body."""
    message = "Route not found" if exc.status_code == status.HTTP_404_NOT_FOUND else exc.detail
    return JSONResponse(
        status_code=exc.status_code,
        content={"message": message},
        headers=getattr(exc, "headers", None),
    )


async def unhandled_exception_handler(request: Request, exc: Exception):
    """Log the underlying cause and answer with a generic 500."""
    logger.exception(f"Unhandled error on {request.method} {request.url.path}: {exc}")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"message": "Internal server error"},
    )


# Register exception handlers with FastAPI app
def register_exception_handlers(app):
    """
    Register all exception handlers with the FastAPI application.

    Args:
        app: FastAPI application instance
    """
    app.add_exception_handler(AppException, app_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
