# ============================================================================
# SCOPE: GLOBAL
# Description: Builder para construir payloads y headers de Saferpay.
# ============================================================================
"""
Saferpay Payload Builder.

Single Responsibility: Turn serialized collections into request bodies and
headers for the Saferpay endpoints.

- Payment page initialization goes to the JSON API as a nested document.
- Confirm and complete go to the hosting endpoints as form fields.
"""

import base64
import json
import uuid
from collections.abc import Mapping
from typing import Any
from urllib.parse import urlencode

from .config.settings import Settings

JSON_CONTENT_TYPE = "application/json; charset=utf-8"
FORM_CONTENT_TYPE = "application/x-www-form-urlencoded; charset=utf-8"


class SaferpayPayloadBuilder:
    """
    Builder for Saferpay request payloads.

    Credentials and terminal data come from Settings.
    """

    def __init__(self, settings: Settings) -> None:
        self._settings = settings

    @staticmethod
    def _generate_request_id() -> str:
        """Generate unique request ID."""
        return uuid.uuid4().hex

    def build_initialize_payload(self, data: Mapping[str, Any]) -> dict[str, Any]:
        """
        Build the payment page initialization document.

        Args:
            data: Serialized PayInitParameter (flat wire fields)

        Returns:
            Nested payload dict for the JSON API
        """
        return {
            "RequestHeader": {
                "SpecVersion": self._settings.SAFERPAY_SPEC_VERSION,
                "CustomerId": self._settings.SAFERPAY_CUSTOMER_ID,
                "RequestId": self._generate_request_id(),
                "RetryIndicator": 0,
            },
            "TerminalId": self._settings.SAFERPAY_TERMINAL_ID,
            "Payment": {
                "Amount": {
                    "Value": data.get("AMOUNT"),
                    "CurrencyCode": data.get("CURRENCY"),
                },
                "OrderId": data.get("ORDERID"),
                "Description": data.get("DESCRIPTION"),
            },
            "ReturnUrls": {
                "Success": data.get("SUCCESSLINK"),
                "Fail": data.get("FAILLINK"),
            },
        }

    def encode_json(self, payload: Mapping[str, Any]) -> str:
        return json.dumps(payload)

    def encode_form(self, data: Mapping[str, Any]) -> str:
        """Form-encode a flat payload; None values are dropped."""
        return urlencode({key: str(value) for key, value in data.items() if value is not None})

    def _authorization(self) -> str:
        credentials = f"{self._settings.SAFERPAY_API_USERNAME}:{self._settings.SAFERPAY_API_PASSWORD}"
        return "Basic " + base64.b64encode(credentials.encode("utf-8")).decode("ascii")

    def json_headers(self) -> dict[str, str]:
        """Headers for the JSON API."""
        return {
            "Content-Type": JSON_CONTENT_TYPE,
            "Accept": "application/json",
            "Authorization": self._authorization(),
        }

    def form_headers(self) -> dict[str, str]:
        """Headers for the hosting endpoints."""
        return {
            "Content-Type": FORM_CONTENT_TYPE,
            "Authorization": self._authorization(),
        }
