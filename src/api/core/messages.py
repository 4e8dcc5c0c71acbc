"""Centralized message codes and default messages for API responses."""

from enum import Enum
from typing import Generic, TypeVar

from pydantic import BaseModel


class MessageCode(str, Enum):
    """Centralized message codes for API responses."""

    # Success codes
    SUCCESS = "SUCCESS"

    # GPS validation and analysis
    GPS_VALIDATED = "GPS_VALIDATED"
    GPS_NOT_PROVIDED = "GPS_NOT_PROVIDED"
    REGION_ANALYZED = "REGION_ANALYZED"
    GEOCODING_COMPLETED = "GEOCODING_COMPLETED"
    GEOCODING_FAILED = "GEOCODING_FAILED"
    GEOCODING_DISABLED = "GEOCODING_DISABLED"
    GEOCODING_CACHE_CLEARED = "GEOCODING_CACHE_CLEARED"

    # Validation errors
    VALIDATION_ERROR = "VALIDATION_ERROR"
    INVALID_INPUT = "INVALID_INPUT"

    # Service Errors
    EXTERNAL_SERVICE_ERROR = "EXTERNAL_SERVICE_ERROR"

    # Generic errors
    INTERNAL_ERROR = "INTERNAL_ERROR"
    INTERNAL_SERVER_ERROR = "INTERNAL_SERVER_ERROR"
    BAD_REQUEST = "BAD_REQUEST"
    NOT_FOUND = "NOT_FOUND"


# Default messages for each message code
DEFAULT_MESSAGES = {
    MessageCode.SUCCESS: "Operation completed successfully",
    # GPS validation and analysis
    MessageCode.GPS_VALIDATED: "GPS coordinates validated",
    MessageCode.GPS_NOT_PROVIDED: "Submission carries no GPS coordinates",
    MessageCode.REGION_ANALYZED: "Region GPS analysis completed",
    MessageCode.GEOCODING_COMPLETED: "Reverse geocoding completed",
    MessageCode.GEOCODING_FAILED: "Reverse geocoding failed",
    MessageCode.GEOCODING_DISABLED: "Geocoding is disabled",
    MessageCode.GEOCODING_CACHE_CLEARED: "Geocoding cache cleared",
    # Validation errors
    MessageCode.VALIDATION_ERROR: "Validation failed",
    MessageCode.INVALID_INPUT: "Invalid input provided",
    # Service Errors
    MessageCode.EXTERNAL_SERVICE_ERROR: "External service error",
    # Generic errors
    MessageCode.INTERNAL_ERROR: "Internal server error",
    MessageCode.INTERNAL_SERVER_ERROR: "Internal server error",
    MessageCode.BAD_REQUEST: "Bad request",
    MessageCode.NOT_FOUND: "Resource not found",
}

T = TypeVar("T")


class APIResponse(BaseModel, Generic[T]):
    """Base API response model with consistent structure and proper typing."""

    message_code: MessageCode
    message: str
    data: T | None = None

    @classmethod
    def success(
        cls,
        message_code: MessageCode = MessageCode.SUCCESS,
        message: str | None = None,
        data: T | None = None,
    ) -> "APIResponse[T]":
        """Create a success response."""
        return cls(
            message_code=message_code,
            message=message or DEFAULT_MESSAGES.get(message_code, "Success"),
            data=data,
        )


def get_default_message(message_code: MessageCode) -> str:
    """Get default message for a message code."""
    return DEFAULT_MESSAGES.get(message_code, "Operation completed")
