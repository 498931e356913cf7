"""
Pay Confirm Parameters

Fields of the signed confirmation message the payment page redirects with.
"""

from __future__ import annotations

from typing import ClassVar

from .collection import FieldValue, ParameterCollection, condition_field


class PayConfirmParameter(ParameterCollection):
    """Attributes of the PayConfirm XML message, verified server-side."""

    NAME: ClassVar[str] = "payconfirmparameter"
    REQUEST_URL: ClassVar[str] = "https://www.saferpay.com/hosting/VerifyPayConfirm.asp"

    MSGTYPE: FieldValue | None = condition_field(description="Always PayConfirm")
    VTVERIFY: FieldValue | None = condition_field()
    KEYID: FieldValue | None = condition_field()
    ID: FieldValue | None = condition_field(description="Transaction id, required by pay complete")
    TOKEN: FieldValue | None = condition_field()
    ACCOUNTID: FieldValue | None = condition_field()
    AMOUNT: FieldValue | None = condition_field()
    CURRENCY: FieldValue | None = condition_field()
    CARDREFID: FieldValue | None = condition_field()
    SCDRESULT: FieldValue | None = condition_field()
    PROVIDERID: FieldValue | None = condition_field()
    PROVIDERNAME: FieldValue | None = condition_field()
    ORDERID: FieldValue | None = condition_field()
    IP: FieldValue | None = condition_field()
    IPCOUNTRY: FieldValue | None = condition_field()
    CCCOUNTRY: FieldValue | None = condition_field()
    MPI_LIABILITYSHIFT: FieldValue | None = condition_field()
    MPI_TX_CAVV: FieldValue | None = condition_field()
    MPI_XID: FieldValue | None = condition_field()
    ECI: FieldValue | None = condition_field()
    CAVV: FieldValue | None = condition_field()
    XID: FieldValue | None = condition_field()
