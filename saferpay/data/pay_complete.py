"""
Pay Complete Parameters

Fields for settling or cancelling a confirmed transaction, and the fields of
the gateway's answer.
"""

from __future__ import annotations

from enum import Enum
from typing import ClassVar

from .collection import FieldValue, ParameterCollection, condition_field


class CompleteAction(str, Enum):
    """Action performed by pay complete."""

    SETTLEMENT = "Settlement"
    CANCEL = "Cancel"
    CLOSE_BATCH = "CloseBatch"


class PayCompleteParameter(ParameterCollection):
    """Pay complete request."""

    NAME: ClassVar[str] = "paycompleteparameter"
    REQUEST_URL: ClassVar[str] = "https://www.saferpay.com/hosting/PayCompleteV2.asp"

    ID: FieldValue | None = condition_field("an[..28]", "Transaction id from pay confirm")
    AMOUNT: FieldValue | None = condition_field("n[..8]", "Amount to settle in minor units")
    ACCOUNTID: FieldValue | None = condition_field("ns[..15]")
    ACTION: FieldValue | None = condition_field("a[..10]", "Settlement, Cancel or CloseBatch")


class PayCompleteResponse(ParameterCollection):
    """Attributes of the pay complete answer."""

    NAME: ClassVar[str] = "paycompleteresponse"
    REQUEST_URL: ClassVar[str] = PayCompleteParameter.REQUEST_URL

    MSGTYPE: FieldValue | None = condition_field()
    ID: FieldValue | None = condition_field()
    RESULT: FieldValue | None = condition_field(description="0 on success")
    MESSAGE: FieldValue | None = condition_field()
    AUTHMESSAGE: FieldValue | None = condition_field()
    ACTION: FieldValue | None = condition_field()
    AMOUNT: FieldValue | None = condition_field()
    CURRENCY: FieldValue | None = condition_field()
    ACCOUNTID: FieldValue | None = condition_field()

    @property
    def is_successful(self) -> bool:
        return str(self.get("RESULT", "")) == "0"
