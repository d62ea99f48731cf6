from typing import Dict, Any, List, Optional
from datetime import datetime, timezone
from fastapi import Request, status
from fastapi.responses import JSONResponse
from pydantic import BaseModel
import logging

logger = logging.getLogger(__name__)


class BaseCustomException(Exception):
    """Base class for custom exceptions"""

    def __init__(
        self,
        message: str,
        status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR,
        details: Optional[Dict[str, Any]] = None,
        error_code: Optional[str] = None
    ):
        self.message = message
        self.status_code = status_code
        self.details = details or {}
        self.error_code = error_code
        super().__init__(self.message)


class ValidationError(BaseCustomException):
    """Exception for validation errors"""

    def __init__(
        self,
        message: str = "Validation failed",
        details: Optional[Dict[str, Any]] = None,
        error_code: Optional[str] = None,
        field_errors: Optional[Dict[str, str]] = None
    ):
        super().__init__(
            message=message,
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            details=details,
            error_code=error_code or "VALIDATION_ERROR"
        )
        self.field_errors = field_errors or {}


class AuthenticationError(BaseCustomException):
    """Exception for authentication errors"""

    def __init__(
        self,
        message: str = "Authentication failed",
        details: Optional[Dict[str, Any]] = None,
        error_code: Optional[str] = None
    ):
        super().__init__(
            message=message,
            status_code=status.HTTP_401_UNAUTHORIZED,
            details=details,
            error_code=error_code or "AUTHENTICATION_ERROR"
        )


class AuthorizationError(BaseCustomException):
    """Exception for authorization errors"""

    def __init__(
        self,
        message: str = "Access denied",
        details: Optional[Dict[str, Any]] = None,
        error_code: Optional[str] = None,
        required_permissions: Optional[List[str]] = None
    ):
        super().__init__(
            message=message,
            status_code=status.HTTP_403_FORBIDDEN,
            details=details,
            error_code=error_code or "AUTHORIZATION_ERROR"
        )
        self.required_permissions = required_permissions or []


class NotFoundError(BaseCustomException):
    """Exception for resource not found errors"""

    def __init__(
        self,
        message: str = "Resource not found",
        details: Optional[Dict[str, Any]] = None,
        error_code: Optional[str] = None
    ):
        super().__init__(
            message=message,
            status_code=status.HTTP_404_NOT_FOUND,
            details=details,
            error_code=error_code or "NOT_FOUND_ERROR"
        )


class UserError(BaseCustomException):
    """Exception for user-related errors"""

    def __init__(
        self,
        message: str = "User operation failed",
        details: Optional[Dict[str, Any]] = None,
        error_code: Optional[str] = None
    ):
        super().__init__(
            message=message,
            status_code=status.HTTP_400_BAD_REQUEST,
            details=details,
            error_code=error_code or "USER_ERROR"
        )


# Response models for errors
class ErrorResponse(BaseModel):
    """Standard error response model"""
    error: str
    message: str
    error_code: Optional[str] = None
    details: Optional[Dict[str, Any]] = None
    timestamp: Optional[str] = None
    request_id: Optional[str] = None


class ValidationErrorResponse(BaseModel):
    """Validation error response model"""
    error: str = "Validation Error"
    message: str
    error_code: Optional[str] = None
    validation_errors: Optional[Dict[str, list]] = None
    timestamp: Optional[str] = None
    request_id: Optional[str] = None


def _timestamp() -> str:
    return datetime.now(timezone.utc).isoformat()


# Exception handler functions
def create_error_response(
    exception: BaseCustomException,
    request_id: Optional[str] = None
) -> Dict[str, Any]:
    """Create standardized error response"""
    response = {
        "error": exception.__class__.__name__.replace("Error", " Error"),
        "message": exception.message,
        "error_code": exception.error_code,
        "timestamp": _timestamp(),
        "request_id": request_id
    }

    if exception.details:
        response["details"] = exception.details

    return response


def create_validation_error_response(
    exception: ValidationError,
    validation_errors: Optional[Dict[str, list]] = None,
    request_id: Optional[str] = None
) -> Dict[str, Any]:
    """Create validation error response"""
    response = {
        "error": "Validation Error",
        "message": exception.message,
        "error_code": exception.error_code,
        "timestamp": _timestamp(),
        "request_id": request_id
    }

    if validation_errors:
        response["validation_errors"] = validation_errors

    if exception.details:
        response["details"] = exception.details

    return response


def create_authorization_error_response(
    exception: AuthorizationError,
    required_permissions: Optional[list] = None,
    request_id: Optional[str] = None
) -> Dict[str, Any]:
    """Create authorization error response"""
    response = create_error_response(exception, request_id=request_id)
    response["error"] = "Authorization Error"

    if required_permissions:
        response["required_permissions"] = required_permissions

    return response


def handle_validation_error(
    field_errors: Dict[str, str],
    entity: str = "record"
) -> ValidationError:
    """Convert a form error map into a ValidationError"""
    logger.info(f"Validation failed for {entity}: {sorted(field_errors)}")

    return ValidationError(
        message=f"Invalid {entity} data",
        details={"entity": entity},
        error_code="VALIDATION_ERROR",
        field_errors=field_errors
    )


async def custom_exception_handler(request: Request, exc: BaseCustomException) -> JSONResponse:
    """Render custom exceptions as JSON responses"""
    request_id = request.headers.get("X-Request-ID")

    if isinstance(exc, ValidationError):
        content = create_validation_error_response(
            exc,
            validation_errors={field: [msg] for field, msg in exc.field_errors.items()},
            request_id=request_id
        )
    elif isinstance(exc, AuthorizationError):
        content = create_authorization_error_response(
            exc,
            required_permissions=exc.required_permissions,
            request_id=request_id
        )
    else:
        if exc.status_code >= 500:
            logger.error(f"{request.method} {request.url.path} failed: {exc.message}")
        content = create_error_response(exc, request_id=request_id)

    headers = None
    if isinstance(exc, AuthenticationError):
        headers = {"WWW-Authenticate": "Bearer"}

    return JSONResponse(status_code=exc.status_code, content=content, headers=headers)
