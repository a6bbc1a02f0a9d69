# 📄 File: growtrack/shared/core/exceptions.py
# 🧭 Purpose (Layman Explanation):
# Defines the special error types GrowTrack uses to say clearly what went wrong
# (not logged in, no subscription, bad request) instead of generic errors.
# 🧪 Purpose (Technical Summary):
# Custom exception hierarchy providing specific error types with HTTP status codes,
# error details, and serialization for API responses.
# 🔗 Dependencies:
# FastAPI status constants, typing
# 🔄 Connected Modules / Calls From:
# growtrack.main (exception handler), security, presentation dependencies,
# environmental analytics queries and routes

from typing import Any, Dict, Optional

from fastapi import status


class GrowTrackException(Exception):
    """
    Base exception class for GrowTrack.
    All custom exceptions should inherit from this class.
    """

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
        self.error_code = error_code or self.__class__.__name__.upper()
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary format."""
        return {
            "error": {
                "code": self.error_code,
                "message": self.message,
                "details": self.details,
                "status_code": self.status_code
            }
        }


# =============================================================================
# AUTHENTICATION & AUTHORIZATION EXCEPTIONS
# =============================================================================

class AuthenticationError(GrowTrackException):
    """
    Exception raised for authentication failures.
    Used when the bearer token is invalid or missing.
    """

    def __init__(
        self,
        message: str = "Authentication failed",
        details: Optional[Dict[str, Any]] = None,
        user_id: Optional[str] = None
    ):
        if not details:
            details = {}
        if user_id:
            details["user_id"] = user_id

        super().__init__(
            message=message,
            status_code=status.HTTP_401_UNAUTHORIZED,
            details=details,
            error_code="AUTHENTICATION_ERROR"
        )


class AuthorizationError(GrowTrackException):
    """
    Exception raised for authorization failures.
    Used when user lacks permission to access resources.
    """

    def __init__(
        self,
        message: str = "Access denied",
        resource_type: Optional[str] = None,
        resource_id: Optional[str] = None,
        user_id: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        if not details:
            details = {}

        if resource_type:
            details["resource_type"] = resource_type
        if resource_id:
            details["resource_id"] = resource_id
        if user_id:
            details["user_id"] = user_id

        super().__init__(
            message=message,
            status_code=status.HTTP_403_FORBIDDEN,
            details=details,
            error_code="AUTHORIZATION_ERROR"
        )


# =============================================================================
# VALIDATION & DATA EXCEPTIONS
# =============================================================================

class ValidationError(GrowTrackException):
    """
    Exception raised for data validation failures.
    Used when input data doesn't meet validation requirements.
    """

    def __init__(
        self,
        message: str = "Validation failed",
        field: Optional[str] = None,
        value: Optional[Any] = None,
        constraint: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        if not details:
            details = {}

        if field:
            details["field"] = field
        if value is not None:
            details["value"] = str(value)
        if constraint:
            details["constraint"] = constraint

        super().__init__(
            message=message,
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            details=details,
            error_code="VALIDATION_ERROR"
        )


class NotFoundError(GrowTrackException):
    """
    Exception raised when requested resource is not found.
    """

    def __init__(
        self,
        message: str = "Resource not found",
        resource_type: Optional[str] = None,
        resource_id: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        if not details:
            details = {}

        if resource_type:
            details["resource_type"] = resource_type
        if resource_id:
            details["resource_id"] = resource_id

        super().__init__(
            message=message,
            status_code=status.HTTP_404_NOT_FOUND,
            details=details,
            error_code="NOT_FOUND"
        )


# =============================================================================
# BUSINESS LOGIC EXCEPTIONS
# =============================================================================

class SubscriptionError(GrowTrackException):
    """
    Exception raised for subscription-related failures.
    Used when analytics require a higher subscription tier.
    """

    def __init__(
        self,
        message: str = "Subscription required",
        feature: Optional[str] = None,
        subscription_status: Optional[str] = None,
        required_plan: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        if not details:
            details = {}

        if feature:
            details["feature"] = feature
        if subscription_status:
            details["subscription_status"] = subscription_status
        if required_plan:
            details["required_plan"] = required_plan

        super().__init__(
            message=message,
            status_code=status.HTTP_402_PAYMENT_REQUIRED,
            details=details,
            error_code="SUBSCRIPTION_ERROR"
        )


# =============================================================================
# EXTERNAL SERVICE EXCEPTIONS
# =============================================================================

class ExternalServiceError(GrowTrackException):
    """
    Exception raised when external service calls fail.
    Used for the managed row store and auth provider.
    """

    def __init__(
        self,
        message: str = "External service error",
        service_name: Optional[str] = None,
        service_error: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        if not details:
            details = {}

        if service_name:
            details["service_name"] = service_name
        if service_error:
            details["service_error"] = service_error

        super().__init__(
            message=message,
            status_code=status.HTTP_502_BAD_GATEWAY,
            details=details,
            error_code="EXTERNAL_SERVICE_ERROR"
        )
