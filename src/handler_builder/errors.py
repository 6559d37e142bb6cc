"""
Error taxonomy for the handler pipeline.

Every failure raised while configuring or executing a handler is an instance of
HandlerPipelineError. Request-time failures keep the exception that caused them
in ``original_error`` (and as ``__cause__``) so that the hosting framework's
centralized error handler can decide how to render them.
"""

import uuid
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Dict, List, Optional


class ErrorCategory(str, Enum):
    """Pipeline phase an error originated from."""
    CONFIGURATION = "CONFIGURATION"
    INPUT_MAPPING = "INPUT_MAPPING"
    VALIDATION = "VALIDATION"
    HANDLER = "HANDLER"
    OUTPUT_MAPPING = "OUTPUT_MAPPING"


class HandlerPipelineError(Exception):
    """Base exception class for handler pipeline errors."""

    def __init__(
        self,
        message: str,
        error_code: str = "HANDLER_PIPELINE_ERROR",
        category: ErrorCategory = ErrorCategory.HANDLER,
        original_error: Optional[BaseException] = None,
        user_message: Optional[str] = None,
    ):
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.category = category
        self.original_error = original_error
        self.user_message = user_message or "An error occurred while processing your request."
        self.error_id = str(uuid.uuid4())
        if original_error is not None:
            self.__cause__ = original_error

    def to_dict(self) -> Dict[str, Any]:
        """Convert error to dictionary for logging and response."""
        return {
            "error_id": self.error_id,
            "error_code": self.error_code,
            "message": self.message,
            "user_message": self.user_message,
            "category": self.category.value,
            "original_error": repr(self.original_error) if self.original_error else None,
            "timestamp": datetime.now(timezone.utc).isoformat(),
        }


class ValidationError(HandlerPipelineError):
    """Raised when a value fails validation."""

    def __init__(
        self,
        message: str,
        field_errors: Optional[List[Dict[str, str]]] = None,
        original_error: Optional[BaseException] = None,
        error_code: str = "VALIDATION_ERROR",
        category: ErrorCategory = ErrorCategory.VALIDATION,
    ):
        super().__init__(
            message=message,
            error_code=error_code,
            category=category,
            original_error=original_error,
            user_message="Invalid input provided. Please check your request and try again.",
        )
        self.field_errors = field_errors or []

    def to_dict(self) -> Dict[str, Any]:
        data = super().to_dict()
        data["field_errors"] = self.field_errors
        return data


class ConfigurationError(ValidationError):
    """Raised at configuration time when builder arguments are invalid."""

    def __init__(self, message: str):
        super().__init__(
            message=message,
            error_code="CONFIGURATION_ERROR",
            category=ErrorCategory.CONFIGURATION,
        )


class InputMappingError(HandlerPipelineError):
    """Raised when the input mapper fails to read the request."""

    def __init__(self, message: str, original_error: Optional[BaseException] = None):
        super().__init__(
            message=message,
            error_code="INPUT_MAPPING_ERROR",
            category=ErrorCategory.INPUT_MAPPING,
            original_error=original_error,
            user_message="The request could not be read. Please check your request and try again.",
        )


class HandlerError(HandlerPipelineError):
    """Raised when the business logic function fails."""

    def __init__(self, message: str, original_error: Optional[BaseException] = None):
        super().__init__(
            message=message,
            error_code="HANDLER_ERROR",
            category=ErrorCategory.HANDLER,
            original_error=original_error,
        )


class OutputMappingError(HandlerPipelineError):
    """Raised when the output mapper fails to write the response."""

    def __init__(self, message: str, original_error: Optional[BaseException] = None):
        super().__init__(
            message=message,
            error_code="OUTPUT_MAPPING_ERROR",
            category=ErrorCategory.OUTPUT_MAPPING,
            original_error=original_error,
        )


def format_error_response(
    error: HandlerPipelineError,
    include_details: bool = False,
) -> Dict[str, Any]:
    """Format error for API response."""

    response = {
        "error": {
            "code": error.error_code,
            "message": error.user_message,
            "error_id": error.error_id,
            "timestamp": datetime.now(timezone.utc).isoformat(),
        }
    }

    if include_details:
        response["error"]["details"] = {
            "category": error.category.value,
            "message": error.message,
        }

    # Add field errors for validation errors
    if isinstance(error, ValidationError) and error.field_errors:
        response["error"]["field_errors"] = error.field_errors

    return response


def get_http_status_code(error: HandlerPipelineError) -> int:
    """Get appropriate HTTP status code for error."""

    status_mapping = {
        "VALIDATION_ERROR": 400,
        "INPUT_MAPPING_ERROR": 400,
    }

    return status_mapping.get(error.error_code, 500)
