"""
Custom exception classes and error handling.

This module provides custom exceptions and utilities for consistent
error handling across the application.
"""
import logging
from typing import Any, Dict, Optional
from fastapi import Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


class TalentFlowException(Exception):
    """Base exception for all TalentFlow-specific errors."""

    def __init__(
        self,
        message: str,
        status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR,
        details: Optional[Dict[str, Any]] = None
    ):
        self.message = message
        self.status_code = status_code
        self.details = details or {}
        super().__init__(self.message)


class NotFoundError(TalentFlowException):
    """Raised when a requested or referenced resource is not found."""

    def __init__(self, resource: str, resource_id: Any, details: Optional[Dict[str, Any]] = None):
        message = f"{resource} not found"
        details = {"resource": resource, "id": resource_id, **(details or {})}
        super().__init__(message, status.HTTP_404_NOT_FOUND, details)
        self.resource = resource
        self.resource_id = resource_id


class PreconditionFailedError(TalentFlowException):
    """Raised when an entity is not in the state an operation requires."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message, status.HTTP_400_BAD_REQUEST, details)


class ConflictError(TalentFlowException):
    """Raised when a unique key is already taken."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message, status.HTTP_409_CONFLICT, details)


class UnauthorizedError(TalentFlowException):
    """Raised when login credentials do not match."""

    def __init__(self, message: str = "Invalid credentials"):
        super().__init__(message, status.HTTP_401_UNAUTHORIZED)


# =============================================================================
# Exception Handlers
# =============================================================================

async def talentflow_exception_handler(request: Request, exc: TalentFlowException) -> JSONResponse:
    """Handle TalentFlowException instances."""
    if exc.status_code == status.HTTP_404_NOT_FOUND:
        logger.warning(f"{request.method} {request.url.path}: {exc.message} {exc.details}")
    return JSONResponse(
        status_code=exc.status_code,
        content={
            "error": exc.message,
            "details": exc.details
        }
    )


async def request_validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Turn FastAPI's 422 schema errors into 400 with per-field detail."""
    errors = []
    for error in exc.errors():
        # Drop the leading "body"/"query"/"path" location segment
        location = [str(part) for part in error.get("loc", ())[1:]]
        errors.append({
            "field": ".".join(location) or None,
            "message": error.get("msg", "Invalid value"),
        })

    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={
            "error": "Invalid request data",
            "details": {"errors": errors}
        }
    )


async def generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handle uncaught exceptions without leaking internals to the client."""
    logger.error(f"Unhandled exception on {request.method} {request.url.path}: {exc}", exc_info=True)

    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={
            "error": "Internal server error",
            "details": {}
        }
    )


# =============================================================================
# Helper Functions
# =============================================================================

def register_exception_handlers(app):
    """
    Register all custom exception handlers with the FastAPI app.

    Call this during app initialization:
        from talentflow.exceptions import register_exception_handlers
        register_exception_handlers(app)
    """
    app.add_exception_handler(TalentFlowException, talentflow_exception_handler)
    app.add_exception_handler(RequestValidationError, request_validation_exception_handler)
    app.add_exception_handler(Exception, generic_exception_handler)
