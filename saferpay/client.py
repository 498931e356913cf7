"""
Saferpay Client

Synchronous client for the Saferpay payment gateway.

Payment lifecycle:
    1. initialize_payment: create the payment page (JSON API)
    2. confirm_payment: verify the signed PayConfirm message the payment page
       redirected with; yields the transaction ID
    3. complete_payment: settle or cancel the confirmed transaction

Example:
    client = SaferpayClient.from_settings()

    init = PayInitParameter().update({
        "AMOUNT": 1000,
        "CURRENCY": "CHF",
        "DESCRIPTION": "Order #1",
        "SUCCESSLINK": "https://shop.example/success",
        "FAILLINK": "https://shop.example/fail",
    })
    page = client.initialize_payment(init)

    confirmed = client.confirm_payment(request_data, request_signature)
    result = client.complete_payment(confirmed)
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from .config.settings import Settings, get_settings
from .data.collection import ParameterCollection
from .data.pay_complete import CompleteAction, PayCompleteParameter, PayCompleteResponse
from .data.pay_confirm import PayConfirmParameter
from .data.pay_init import SAFERPAYTESTACCOUNT_SPPASSWORD, is_test_account_id
from .exceptions import (
    GatewayBusinessError,
    MalformedResponseError,
    NoPasswordGivenError,
    PreconditionError,
    SchemaViolationError,
    TransportConfigurationError,
    TransportError,
)
from .payload_builder import SaferpayPayloadBuilder
from .response_parser import XmlAttributeParser
from .shared.logger import LoggerProtocol, NullLogger, get_logger
from .transport import HttpxTransport, Transport

PASSWORD_FIELD = "spPassword"
ERROR_MARKER = "ERROR"


class SaferpayClient:
    """
    Client for the Saferpay initialize / confirm / complete workflow.

    Collaborators are injected at construction:
    - transport: required, anything implementing Transport
    - logger: optional, defaults to NullLogger (ContextLogger via from_settings)
    - settings: optional, defaults to get_settings()

    Every failure is logged once at critical level, then raised.
    """

    def __init__(
        self,
        transport: Transport,
        settings: Settings | None = None,
        logger: LoggerProtocol | None = None,
        payload_builder: SaferpayPayloadBuilder | None = None,
        response_parser: XmlAttributeParser | None = None,
    ):
        """
        Initialize Saferpay client.

        Args:
            transport: HTTP collaborator
            settings: Credentials and terminal configuration
            logger: Diagnostic sink
            payload_builder: Optional custom payload builder
            response_parser: Optional custom response parser

        Raises:
            TransportConfigurationError: If transport does not implement Transport
        """
        self._logger: LoggerProtocol = logger or NullLogger()

        if transport is None or not isinstance(transport, Transport):
            error = TransportConfigurationError()
            self._logger.log(logging.CRITICAL, error.error_message)
            raise error

        self._transport = transport
        self._settings = settings or get_settings()
        self._builder = payload_builder or SaferpayPayloadBuilder(self._settings)
        self._parser = response_parser or XmlAttributeParser()

        if not self._settings.has_api_credentials:
            self._logger.log(logging.WARNING, "SAFERPAY_API_USERNAME / SAFERPAY_API_PASSWORD not configured")

    @classmethod
    def from_settings(
        cls,
        settings: Settings | None = None,
        logger: LoggerProtocol | None = None,
    ) -> SaferpayClient:
        """Build a client on top of the default HttpxTransport, logging to ``saferpay.client``."""
        settings = settings or get_settings()
        return cls(
            HttpxTransport(timeout=settings.SAFERPAY_TIMEOUT),
            settings=settings,
            logger=logger or get_logger(__name__),
        )

    def close(self) -> None:
        """Close the transport if it holds resources."""
        close = getattr(self._transport, "close", None)
        if callable(close):
            close()

    def __enter__(self) -> SaferpayClient:
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()

    @staticmethod
    def is_test_account_id(account_id: str | None) -> bool:
        """Check if an account id belongs to the Saferpay sandbox."""
        return is_test_account_id(account_id)

    # =========================================================================
    # Workflow
    # =========================================================================

    def initialize_payment(self, pay_init_parameter: ParameterCollection) -> str:
        """
        Initialize a payment page.

        Args:
            pay_init_parameter: PayInitParameter, optionally with extensions

        Returns:
            Raw response body

        Raises:
            TransportError: Non-200 status or network failure
            GatewayBusinessError: Body contains the ERROR marker
        """
        payload = self._builder.build_initialize_payload(pay_init_parameter.serialize())

        return self._request(
            pay_init_parameter.get_request_url(),
            payload,
            self._builder.encode_json(payload),
            self._builder.json_headers(),
        )

    def confirm_payment(
        self,
        xml: str,
        signature: str,
        pay_confirm_parameter: ParameterCollection | None = None,
    ) -> ParameterCollection:
        """
        Read and verify the PayConfirm message.

        The message attributes are stored on the collection first, then
        message and signature are posted to Saferpay for verification. The
        verification answer is logged, not parsed.

        Args:
            xml: DATA value the payment page redirected with
            signature: SIGNATURE value the payment page redirected with
            pay_confirm_parameter: Collection to fill, PayConfirmParameter by default

        Returns:
            The filled collection

        Raises:
            MalformedResponseError: DATA is not well-formed XML
            SchemaViolationError: DATA carries a field outside the schema
            TransportError: Non-200 status or network failure
            GatewayBusinessError: Verification answer contains the ERROR marker
        """
        if pay_confirm_parameter is None:
            pay_confirm_parameter = PayConfirmParameter()

        self._fill_from_xml(pay_confirm_parameter, xml)

        data = {"DATA": xml, "SIGNATURE": signature}
        self._request(
            pay_confirm_parameter.get_request_url(),
            data,
            self._builder.encode_form(data),
            self._builder.form_headers(),
        )

        return pay_confirm_parameter

    def complete_payment(
        self,
        pay_confirm_parameter: ParameterCollection,
        action: CompleteAction | str = CompleteAction.SETTLEMENT,
        password: str | None = None,
        pay_complete_parameter: ParameterCollection | None = None,
        pay_complete_response: ParameterCollection | None = None,
    ) -> ParameterCollection:
        """
        Settle, cancel or close a confirmed transaction.

        Test accounts (prefix ``99867-``) always use the sandbox password.
        Any other account needs ``password`` for every action but Settlement.

        Args:
            pay_confirm_parameter: Result of confirm_payment
            action: CompleteAction or its string value
            password: Account password (spPassword)
            pay_complete_parameter: Request collection, PayCompleteParameter by default
            pay_complete_response: Collection to fill, PayCompleteResponse by default

        Returns:
            The filled response collection

        Raises:
            PreconditionError: pay_confirm_parameter has no ID
            NoPasswordGivenError: Password required but missing
            SchemaViolationError: pay_complete_parameter lacks ID, AMOUNT, ACCOUNTID or ACTION
            TransportError: Non-200 status or network failure
            GatewayBusinessError: Answer contains the ERROR marker
            MalformedResponseError: Answer is not well-formed XML
        """
        transaction_id = pay_confirm_parameter.get("ID")
        if transaction_id is None:
            error = PreconditionError()
            self._logger.log(logging.CRITICAL, error.error_message)
            raise error

        if pay_complete_parameter is None:
            pay_complete_parameter = PayCompleteParameter()

        action_value = action.value if isinstance(action, CompleteAction) else action

        try:
            pay_complete_parameter.update(
                {
                    "ID": transaction_id,
                    "AMOUNT": pay_confirm_parameter.get("AMOUNT"),
                    "ACCOUNTID": pay_confirm_parameter.get("ACCOUNTID"),
                    "ACTION": action_value,
                }
            )
        except SchemaViolationError as e:
            self._logger.log(
                logging.CRITICAL,
                f"Saferpay: {pay_complete_parameter.get_name()} cannot hold field {e.field}",
                {"error": e.error_message},
            )
            raise

        data: dict[str, Any] = pay_complete_parameter.serialize()

        if self.is_test_account_id(pay_complete_parameter.get("ACCOUNTID")):
            data[PASSWORD_FIELD] = SAFERPAYTESTACCOUNT_SPPASSWORD
        elif action_value != CompleteAction.SETTLEMENT.value and not password:
            error = NoPasswordGivenError()
            self._logger.log(
                logging.CRITICAL,
                error.error_message,
                {"action": action_value, "accountid": pay_complete_parameter.get("ACCOUNTID")},
            )
            raise error
        elif password:
            data[PASSWORD_FIELD] = password

        content = self._request(
            pay_complete_parameter.get_request_url(),
            data,
            self._builder.encode_form(data),
            self._builder.form_headers(),
        )

        if pay_complete_response is None:
            pay_complete_response = PayCompleteResponse()

        self._fill_from_xml(pay_complete_response, self._parser.strip_envelope(content))

        return pay_complete_response

    # =========================================================================
    # Internals
    # =========================================================================

    def _request(
        self,
        url: str,
        payload: Mapping[str, Any],
        body: str,
        headers: dict[str, str],
    ) -> str:
        """
        POST a prepared body and return the response content.

        Raises:
            TransportError: Non-200 status or network failure
            GatewayBusinessError: Body contains the ERROR marker
        """
        self._logger.log(logging.DEBUG, url)
        self._logger.log(logging.DEBUG, "Saferpay request payload", {"payload": self._mask(payload)})

        try:
            response = self._transport.send("POST", url, body, headers)
        except TransportError as e:
            self._logger.log(logging.CRITICAL, f"Saferpay: request failed: {e.error_message}!", {"url": url})
            raise
        except Exception as e:
            self._logger.log(
                logging.CRITICAL,
                f"Saferpay: transport raised {type(e).__name__}: {e}",
                {"url": url},
            )
            raise

        self._logger.log(logging.DEBUG, response.body)

        if response.status_code != 200:
            message = f"Saferpay: request failed with statuscode: {response.status_code}!"
            self._logger.log(logging.CRITICAL, message, {"statuscode": response.status_code})
            raise TransportError(message, status_code=response.status_code)

        # Saferpay reports business errors inside 200 responses
        if ERROR_MARKER in response.body:
            error = GatewayBusinessError(response.body)
            self._logger.log(logging.CRITICAL, error.error_message, {"content": response.body})
            raise error

        return response.body

    def _fill_from_xml(self, collection: ParameterCollection, xml: str) -> None:
        try:
            self._parser.fill(collection, xml)
        except MalformedResponseError as e:
            self._logger.log(logging.CRITICAL, "Saferpay: Invalid xml received from saferpay", {"error": str(e)})
            raise
        except SchemaViolationError as e:
            self._logger.log(
                logging.CRITICAL,
                f"Saferpay: unexpected field {e.field} in xml received from saferpay",
                {"collection": collection.get_name()},
            )
            raise

    @staticmethod
    def _mask(payload: Mapping[str, Any]) -> dict[str, Any]:
        if PASSWORD_FIELD not in payload:
            return dict(payload)
        return {**payload, PASSWORD_FIELD: "***"}
