"""
Pay Init Parameters

Fields for initializing a payment page.
"""

from __future__ import annotations

from typing import ClassVar

from .collection import FieldValue, ParameterCollection, condition_field

# Saferpay public test account. Account ids starting with TESTACCOUNT_PREFIX
# are sandbox accounts and use SAFERPAYTESTACCOUNT_SPPASSWORD.
SAFERPAYTESTACCOUNT_ACCOUNTID = "99867-94913159"
SAFERPAYTESTACCOUNT_SPPASSWORD = "XAjc3Kna"
TESTACCOUNT_PREFIX = "99867-"


class PayInitParameter(ParameterCollection):
    """Payment page initialization request."""

    NAME: ClassVar[str] = "payinitparameter"
    REQUEST_URL: ClassVar[str] = "https://www.saferpay.com/api/Payment/v1/PaymentPage/Initialize"

    ACCOUNTID: FieldValue | None = condition_field("ns[..15]", "Saferpay account id")
    AMOUNT: FieldValue | None = condition_field("n[..8]", "Amount in minor currency units")
    CURRENCY: FieldValue | None = condition_field("a[3]", "ISO 4217 currency code")
    DESCRIPTION: FieldValue | None = condition_field("ans[..50]", "Shown on the payment page")
    ORDERID: FieldValue | None = condition_field("ans[..80]", "Merchant order reference")
    VTCONFIG: FieldValue | None = condition_field("an[..20]", "Payment page configuration name")
    SUCCESSLINK: FieldValue | None = condition_field("ans[..1024]", "Return URL after success")
    FAILLINK: FieldValue | None = condition_field("ans[..1024]", "Return URL after failure")
    BACKLINK: FieldValue | None = condition_field("ans[..1024]", "Return URL after cancel")
    NOTIFYURL: FieldValue | None = condition_field("ans[..1024]", "Server to server notification URL")
    AUTOCLOSE: FieldValue | None = condition_field("n[..2]", "Seconds before returning to the shop")
    CCNAME: FieldValue | None = condition_field("a[..3]", "Ask for the card holder name (yes/no)")
    NOTIFYADDRESS: FieldValue | None = condition_field("ans[..50]", "Merchant notification e-mail")
    USERNOTIFY: FieldValue | None = condition_field("ans[..50]", "Customer notification e-mail")
    LANGID: FieldValue | None = condition_field("a[2]", "Payment page language")
    SHOWLANGUAGES: FieldValue | None = condition_field("a[..3]", "Show the language menu (yes/no)")
    PAYMENTMETHODS: FieldValue | None = condition_field("ns[..40]", "Comma separated payment method ids")
    PROVIDERSET: FieldValue | None = condition_field("ns[..40]", "Comma separated provider ids")
    DURATION: FieldValue | None = condition_field("n[14]", "Link validity, YYYYMMDDhhmmss")
    CARDREFID: FieldValue | None = condition_field("ans[..40]", "Card reference for recurring payments")
    DELIVERY: FieldValue | None = condition_field("a[..3]", "Ask for the delivery address (yes/no)")
    APPEARANCE: FieldValue | None = condition_field("a[..6]", "Payment page appearance")
    ADDRESS: FieldValue | None = condition_field("a[..8]", "Customer address form mode")
    COMPANY: FieldValue | None = condition_field("ans[..50]")
    GENDER: FieldValue | None = condition_field("a[1]", "f, m or c (company)")
    FIRSTNAME: FieldValue | None = condition_field("ans[..50]")
    LASTNAME: FieldValue | None = condition_field("ans[..50]")
    STREET: FieldValue | None = condition_field("ans[..50]")
    ZIP: FieldValue | None = condition_field("an[..10]")
    CITY: FieldValue | None = condition_field("ans[..50]")
    COUNTRY: FieldValue | None = condition_field("a[2]", "ISO 3166 country code")
    EMAIL: FieldValue | None = condition_field("ans[..50]")
    PHONE: FieldValue | None = condition_field("ns[..20]")


def is_test_account_id(account_id: str | None) -> bool:
    """Check whether an account id belongs to the Saferpay sandbox (case-sensitive prefix match)."""
    if not isinstance(account_id, str):
        return False
    return account_id.startswith(TESTACCOUNT_PREFIX)
