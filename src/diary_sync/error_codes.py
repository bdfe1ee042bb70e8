"""Structured error codes for machine-readable error handling.

Error codes follow the format: {DOMAIN}-{CATEGORY}-{NUMBER}

Error Domains:
    ATT - Attachment errors (reading local images)
    NET - Network errors (no response at all)
    APP - Application errors (response received but unusable)
    DEC - Decoding errors (malformed payloads)
    CFG - Configuration errors
    GEN - Generic errors caught at operation boundaries

Usage:
    from diary_sync.error_codes import ErrorCode

    logger.error(
        "diary_create_failed",
        error_code=ErrorCode.ATT_READ_FAILED.value,
        reference=str(ref),
    )
"""

from enum import Enum


class ErrorCode(str, Enum):
    """Structured error codes for machine-readable handling.

    All error codes inherit from str for JSON serialization compatibility.
    """

    # =========================================================================
    # Attachment Errors (ATT-xxx-xxx)
    # =========================================================================
    ATT_READ_FAILED = "ATT-READ-001"
    """A local image stream could not be opened or read."""

    # =========================================================================
    # Network Errors (NET-xxx-xxx)
    # =========================================================================
    NET_NO_RESPONSE = "NET-FAIL-001"
    """No response received (DNS, connection reset, refused)."""

    NET_TIMEOUT = "NET-TIMEOUT-001"
    """Request timed out before a response arrived."""

    # =========================================================================
    # Application Errors (APP-xxx-xxx)
    # =========================================================================
    APP_HTTP_STATUS = "APP-STATUS-001"
    """Server answered with a non-2xx status."""

    APP_EMPTY_BODY = "APP-BODY-001"
    """Server answered 2xx without the mandatory body."""

    APP_UNPARSEABLE_BODY = "APP-BODY-002"
    """Server answered 2xx with a body that is not JSON."""

    # =========================================================================
    # Decoding Errors (DEC-xxx-xxx)
    # =========================================================================
    DEC_INVALID_PAYLOAD = "DEC-PAYLOAD-001"
    """Payload is JSON but does not match the schema."""

    DEC_INVALID_JSON = "DEC-JSON-001"
    """Payload is not JSON at all."""

    DEC_UNKNOWN_STATUS = "DEC-STATUS-001"
    """Visibility status symbol is not one of the known variants."""

    DEC_INVALID_DATE = "DEC-DATE-001"
    """Date value is not an ISO calendar date."""

    # =========================================================================
    # Configuration Errors (CFG-xxx-xxx)
    # =========================================================================
    CFG_INVALID = "CFG-INVALID-001"
    """Configuration is invalid or could not be parsed."""

    # =========================================================================
    # Generic Errors (GEN-xxx-xxx)
    # =========================================================================
    GEN_UNEXPECTED = "GEN-UNEXPECTED-001"
    """Unexpected error caught at an operation boundary."""


def is_network_error(code: ErrorCode) -> bool:
    """Check if an error code means no response was received."""
    return code in {ErrorCode.NET_NO_RESPONSE, ErrorCode.NET_TIMEOUT}


def get_error_severity(code: ErrorCode) -> str:
    """Get the severity level for an error code.

    Returns:
        Severity level: "critical", "error", "warning"
    """
    if code == ErrorCode.CFG_INVALID:
        return "critical"
    if is_network_error(code):
        return "warning"
    return "error"
