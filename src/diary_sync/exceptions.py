"""Centralized exception hierarchy for diary-sync.

All custom exceptions inherit from DiarySyncError, so a caller can catch every
client failure with a single except clause. The public client operations never
raise these; they return them wrapped in a ``Failure`` result.

Exception Hierarchy:
    DiarySyncError (base)
     ConfigurationError - Configuration loading/validation errors
     AttachmentReadError - A local image could not be read
     TransportFailure - No response received (DNS, timeout, reset)
     ApplicationError - Response received but not usable
     DecodeError - Payload structurally invalid or unknown enum symbol
     UnexpectedError - Anything else caught at an operation boundary

Usage Examples:
    result = await client.delete(owner_id=1, diary_id=7)
    if isinstance(result, Failure) and isinstance(result.error, ApplicationError):
        logger.warning("diary_delete_rejected", status=result.error.status_code)
"""

from typing import Any

from .error_codes import ErrorCode


class DiarySyncError(Exception):
    """Base exception for all diary-sync errors.

    Attributes:
        message: Human-readable error message
        suggestion: Optional suggestion for resolving the error
        error_code: Structured error code for machine-readable handling
        context: Additional context for debugging (e.g., URLs, references)
    """

    default_error_code: ErrorCode | None = None

    def __init__(
        self,
        message: str,
        suggestion: str | None = None,
        error_code: str | None = None,
        context: dict[str, Any] | None = None,
    ):
        """Initialize the exception.

        Args:
            message: Human-readable error message
            suggestion: Optional suggestion for resolving the error
            error_code: Structured error code (e.g., "NET-FAIL-001")
            context: Additional context for debugging
        """
        self.message = message
        self.suggestion = suggestion
        if error_code is None and self.default_error_code is not None:
            error_code = self.default_error_code.value
        self.error_code = error_code
        self.context = context or {}
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format the error message with error code and suggestion if available."""
        parts = []
        if self.error_code:
            parts.append(f"[{self.error_code}] {self.message}")
        else:
            parts.append(self.message)
        if self.suggestion:
            parts.append(f"\nSuggestion: {self.suggestion}")
        return "".join(parts)

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to dictionary for structured logging."""
        return {
            "message": self.message,
            "error_code": self.error_code,
            "suggestion": self.suggestion,
            "context": self.context,
            "type": type(self).__name__,
        }


# Configuration Errors


class ConfigurationError(DiarySyncError):
    """Configuration loading or validation errors.

    Raised when:
    - Config file is malformed
    - Configuration values fail validation
    - Environment variables are invalid
    """

    default_error_code = ErrorCode.CFG_INVALID


# Attachment Errors


class AttachmentReadError(DiarySyncError):
    """A local image could not be read.

    Raised before any network call is made; the whole create operation is
    abandoned rather than submitting a partial attachment list.

    Attributes:
        reference: The opaque image reference that failed
    """

    default_error_code = ErrorCode.ATT_READ_FAILED

    def __init__(
        self,
        reference: Any,
        message: str | None = None,
        suggestion: str | None = None,
    ):
        self.reference = reference
        super().__init__(
            message or f"Unable to read image data for reference: {reference}",
            suggestion=suggestion,
            context={"reference": str(reference)},
        )


# Network Errors


class TransportFailure(DiarySyncError):
    """No response was received from the diary service.

    Raised when:
    - DNS resolution fails
    - The connection is refused or reset
    - The request times out

    The underlying httpx exception is kept as ``__cause__``.
    """

    default_error_code = ErrorCode.NET_NO_RESPONSE


class ApplicationError(DiarySyncError):
    """A response was received but it cannot be used.

    Raised when:
    - The status code is not 2xx
    - A 2xx response carries no body

    Attributes:
        status_code: HTTP status of the response
        error_text: Raw response text, when the server sent one
    """

    default_error_code = ErrorCode.APP_HTTP_STATUS

    def __init__(
        self,
        message: str,
        *,
        status_code: int | None = None,
        error_text: str | None = None,
        error_code: str | None = None,
        suggestion: str | None = None,
    ):
        self.status_code = status_code
        self.error_text = error_text
        super().__init__(
            message,
            suggestion=suggestion,
            error_code=error_code,
            context={"status_code": status_code},
        )


class DecodeError(DiarySyncError):
    """Payload is structurally invalid or holds an unknown enum symbol."""

    default_error_code = ErrorCode.DEC_INVALID_PAYLOAD


class UnexpectedError(DiarySyncError):
    """Any other failure caught at the boundary of a public operation."""

    default_error_code = ErrorCode.GEN_UNEXPECTED


def get_exception_hierarchy() -> dict[str, list[str]]:
    """Get the exception hierarchy as a dictionary."""
    return {
        "DiarySyncError": [
            "ConfigurationError",
            "AttachmentReadError",
            "TransportFailure",
            "ApplicationError",
            "DecodeError",
            "UnexpectedError",
        ],
    }
