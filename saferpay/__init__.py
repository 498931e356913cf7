"""
Saferpay Client

Client library for the Saferpay payment gateway: payment page
initialization, PayConfirm verification and PayComplete.

Usage:
    from saferpay import PayInitParameter, SaferpayClient

    with SaferpayClient.from_settings() as client:
        page = client.initialize_payment(PayInitParameter().update({...}))
"""

import logging

from .client import SaferpayClient
from .condition_converter import compile_condition, condition_to_regex, matches_condition
from .data import (
    BillpayPayCompleteParameter,
    BillpayPayInitParameter,
    CompleteAction,
    ParameterCollection,
    PayCompleteParameter,
    PayCompleteResponse,
    PayConfirmParameter,
    PayInitParameter,
)
from .exceptions import (
    ConditionSyntaxError,
    FieldValidationError,
    GatewayBusinessError,
    MalformedResponseError,
    NoPasswordGivenError,
    PreconditionError,
    SaferpayConnectionError,
    SaferpayError,
    SchemaViolationError,
    TransportConfigurationError,
    TransportError,
)
from .transport import HttpxTransport, Transport, TransportResponse

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "0.1.0"

__all__ = [
    # Client
    "SaferpayClient",
    # Transport
    "Transport",
    "TransportResponse",
    "HttpxTransport",
    # Collections
    "ParameterCollection",
    "PayInitParameter",
    "PayConfirmParameter",
    "PayCompleteParameter",
    "PayCompleteResponse",
    "CompleteAction",
    "BillpayPayInitParameter",
    "BillpayPayCompleteParameter",
    # Conditions
    "compile_condition",
    "condition_to_regex",
    "matches_condition",
    # Errors
    "SaferpayError",
    "TransportConfigurationError",
    "PreconditionError",
    "NoPasswordGivenError",
    "TransportError",
    "SaferpayConnectionError",
    "GatewayBusinessError",
    "MalformedResponseError",
    "SchemaViolationError",
    "ConditionSyntaxError",
    "FieldValidationError",
]
