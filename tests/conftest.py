"""
Shared pytest fixtures for all tests.

Provides settings, a spy transport recording every request and a spy logger
recording every log call.
"""

from unittest.mock import MagicMock

import pytest

from saferpay.config.settings import Settings
from saferpay.transport import TransportResponse

# ============================================================================
# SETTINGS FIXTURES
# ============================================================================


@pytest.fixture
def settings() -> Settings:
    """Settings with test credentials, ignoring any local .env file."""
    return Settings(
        SAFERPAY_CUSTOMER_ID="123456",
        SAFERPAY_TERMINAL_ID="17654321",
        SAFERPAY_API_USERNAME="API_123456_1",
        SAFERPAY_API_PASSWORD="secret",
        _env_file=None,
    )


# ============================================================================
# COLLABORATOR FIXTURES
# ============================================================================


@pytest.fixture
def transport() -> MagicMock:
    """Spy transport answering 200 with a JSON body by default."""
    transport = MagicMock()
    transport.send.return_value = TransportResponse(status_code=200, body='{"ok":true}')
    return transport


@pytest.fixture
def spy_logger() -> MagicMock:
    """Spy logger exposing the log(level, message, context) contract."""
    return MagicMock()


# ============================================================================
# XML FIXTURES
# ============================================================================


@pytest.fixture
def confirm_xml() -> str:
    """Minimal PayConfirm message."""
    return '<ConfirmData ID="abc123" AMOUNT="500"/>'


@pytest.fixture
def test_account_confirm_xml() -> str:
    """PayConfirm message of the Saferpay sandbox account."""
    return (
        '<IDP MSGTYPE="PayConfirm" ID="WxWrIlA48W06rAjKKOp5bzS04hCA" TOKEN="(unused)" '
        'ACCOUNTID="99867-94913159" AMOUNT="1000" CURRENCY="CHF" ORDERID="order-1"/>'
    )
