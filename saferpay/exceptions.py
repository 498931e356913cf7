# ============================================================================
# SCOPE: GLOBAL
# Description: Excepciones para el cliente Saferpay.
# ============================================================================
"""
Saferpay Client Exceptions.

Single Responsibility: Define exception types for Saferpay operations.

Every error carries a machine-readable ``error_code`` and a human-readable
``error_message`` so callers can branch without parsing strings.
"""

from __future__ import annotations


class SaferpayError(Exception):
    """
    Base exception for Saferpay errors.

    Attributes:
        error_code: Machine-readable error code
        error_message: Human-readable error description
    """

    def __init__(self, error_code: str, error_message: str):
        self.error_code = error_code
        self.error_message = error_message
        super().__init__(f"{error_code}: {error_message}")


class TransportConfigurationError(SaferpayError):
    """No usable transport was given to the client."""

    def __init__(self, message: str = "Please define a transport implementing the Transport protocol!"):
        super().__init__("TRANSPORT_NOT_CONFIGURED", message)


class PreconditionError(SaferpayError):
    """Complete was called before confirm produced a transaction ID."""

    def __init__(self, message: str = "Saferpay: call confirm before complete!"):
        super().__init__("CONFIRM_REQUIRED", message)


class NoPasswordGivenError(SaferpayError):
    """
    A non-settlement action needs the account password.

    Only raised for real accounts; test accounts get the sandbox password.
    """

    def __init__(self, message: str = "Saferpay: a password is required for this action!"):
        super().__init__("NO_PASSWORD_GIVEN", message)


class TransportError(SaferpayError):
    """
    The gateway answered with a non-200 status code.

    Attributes:
        status_code: HTTP status code, None when no response was received
    """

    def __init__(self, message: str, status_code: int | None = None, error_code: str = "HTTP_ERROR"):
        self.status_code = status_code
        super().__init__(error_code, message)


class SaferpayConnectionError(TransportError):
    """Network connectivity issues (connect failures, timeouts)."""

    def __init__(self, message: str):
        super().__init__(message, status_code=None, error_code="CONNECTION_ERROR")


class GatewayBusinessError(SaferpayError):
    """
    HTTP 200 but the body carries the gateway's ``ERROR`` marker.

    Attributes:
        content: Raw response body
    """

    def __init__(self, content: str):
        self.content = content
        super().__init__("GATEWAY_ERROR", f"Saferpay: request failed: {content}!")


class MalformedResponseError(SaferpayError):
    """The gateway returned XML that could not be parsed."""

    def __init__(self, message: str = "Saferpay: Invalid xml received from saferpay!"):
        super().__init__("INVALID_XML", message)


class SchemaViolationError(SaferpayError, ValueError):
    """
    A field name outside the collection's schema, or a non-scalar value.

    Attributes:
        field: Offending field name
    """

    def __init__(self, field: str, message: str):
        self.field = field
        super().__init__("SCHEMA_VIOLATION", message)


class ConditionSyntaxError(SaferpayError, ValueError):
    """
    A field condition string does not follow the ``<classes>[<length>]`` grammar.

    Attributes:
        condition: The rejected condition string
        position: Index where parsing stopped
    """

    def __init__(self, condition: str, position: int, message: str):
        self.condition = condition
        self.position = position
        super().__init__("INVALID_CONDITION", f"{message} in {condition!r} at position {position}")


class FieldValidationError(SaferpayError):
    """
    One or more field values do not satisfy their conditions.

    Attributes:
        errors: Mapping of field name to the condition it failed
    """

    def __init__(self, errors: dict[str, str]):
        self.errors = errors
        details = ", ".join(f"{name} ({condition})" for name, condition in errors.items())
        super().__init__("VALIDATION_ERROR", f"Invalid field values: {details}")
