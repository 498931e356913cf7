"""Tests for SaferpayPayloadBuilder."""

import base64
import json
from urllib.parse import parse_qs

import pytest

from saferpay.config.settings import Settings
from saferpay.payload_builder import FORM_CONTENT_TYPE, JSON_CONTENT_TYPE, SaferpayPayloadBuilder


class TestInitializePayload:
    """Tests for the payment page initialization document."""

    @pytest.fixture
    def builder(self, settings: Settings) -> SaferpayPayloadBuilder:
        return SaferpayPayloadBuilder(settings)

    def test_nested_structure(self, builder: SaferpayPayloadBuilder) -> None:
        """Should map flat wire fields onto the JSON API document."""
        payload = builder.build_initialize_payload(
            {
                "AMOUNT": 1000,
                "CURRENCY": "CHF",
                "ORDERID": "order-1",
                "DESCRIPTION": "Order #1",
                "SUCCESSLINK": "https://shop.example/success",
                "FAILLINK": "https://shop.example/fail",
            }
        )

        assert payload["TerminalId"] == "17654321"
        assert payload["Payment"] == {
            "Amount": {"Value": 1000, "CurrencyCode": "CHF"},
            "OrderId": "order-1",
            "Description": "Order #1",
        }
        assert payload["ReturnUrls"] == {
            "Success": "https://shop.example/success",
            "Fail": "https://shop.example/fail",
        }

    def test_request_header(self, builder: SaferpayPayloadBuilder) -> None:
        """Should fill the request header from settings."""
        header = builder.build_initialize_payload({})["RequestHeader"]

        assert header["SpecVersion"] == "1.7"
        assert header["CustomerId"] == "123456"
        assert header["RetryIndicator"] == 0
        assert len(header["RequestId"]) == 32

    def test_request_ids_are_unique(self, builder: SaferpayPayloadBuilder) -> None:
        """Should generate a new request id per payload."""
        first = builder.build_initialize_payload({})["RequestHeader"]["RequestId"]
        second = builder.build_initialize_payload({})["RequestHeader"]["RequestId"]
        assert first != second

    def test_missing_fields_are_null(self, builder: SaferpayPayloadBuilder) -> None:
        """Should leave unset fields as null."""
        payload = builder.build_initialize_payload({"AMOUNT": 1000})
        assert payload["Payment"]["Amount"]["CurrencyCode"] is None
        assert json.loads(builder.encode_json(payload))["ReturnUrls"]["Fail"] is None


class TestEncodingAndHeaders:
    """Tests for body encoding and headers."""

    @pytest.fixture
    def builder(self, settings: Settings) -> SaferpayPayloadBuilder:
        return SaferpayPayloadBuilder(settings)

    def test_form_encoding(self, builder: SaferpayPayloadBuilder) -> None:
        """Should stringify values and drop None."""
        body = builder.encode_form({"ID": "abc", "AMOUNT": 500, "ACTION": None, "DATA": '<IDP A="1"/>'})
        assert parse_qs(body) == {"ID": ["abc"], "AMOUNT": ["500"], "DATA": ['<IDP A="1"/>']}

    def test_json_headers(self, builder: SaferpayPayloadBuilder) -> None:
        """Should send JSON with basic auth."""
        headers = builder.json_headers()
        expected = "Basic " + base64.b64encode(b"API_123456_1:secret").decode("ascii")

        assert headers == {
            "Content-Type": JSON_CONTENT_TYPE,
            "Accept": "application/json",
            "Authorization": expected,
        }
        assert JSON_CONTENT_TYPE == "application/json; charset=utf-8"

    def test_form_headers(self, builder: SaferpayPayloadBuilder) -> None:
        """Should send form fields with the same authorization."""
        headers = builder.form_headers()
        assert headers["Content-Type"] == FORM_CONTENT_TYPE
        assert headers["Authorization"] == builder.json_headers()["Authorization"]
