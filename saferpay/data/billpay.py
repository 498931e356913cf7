# ============================================================================
# SCOPE: GLOBAL
# Description: Campos adicionales para pagos con Billpay (LSV / factura).
# ============================================================================
"""
Billpay Extensions.

Billpay payments need customer details on top of the regular pay init and a
delay on pay complete. Both collections are extensions: attach them to the
base collection instead of sending them on their own.

Example:
    >>> params = PayInitParameter().add_extension(BillpayPayInitParameter())
    >>> params.set("PROVIDERSET", PROVIDERSET_BILLPAY_INVOICE)
    >>> params.set("DATEOFBIRTH", "19800101")
"""

from __future__ import annotations

from typing import ClassVar

from .collection import FieldValue, ParameterCollection, condition_field

PROVIDERSET_BILLPAY_LSV = 1218
PROVIDERSET_BILLPAY_INVOICE = 1219

LEGALFORM_GMBH = "gmbh"
LEGALFORM_AG = "ag"
LEGALFORM_MISC = "misc"


class BillpayPayInitParameter(ParameterCollection):
    """Billpay customer details for pay init."""

    NAME: ClassVar[str] = "payinitparameter_billpay"

    LEGALFORM: FieldValue | None = condition_field("a[..4]", 'Legal form if gender is "c": gmbh, ag, misc')
    ADDRESSADDITION: FieldValue | None = condition_field("an[..50]")
    DATEOFBIRTH: FieldValue | None = condition_field("n[8]", "YYYYMMDD")
    DELIVERY_GENDER: FieldValue | None = condition_field("a[1]", "f, m or c")
    DELIVERY_FIRSTNAME: FieldValue | None = condition_field("ans[..50]")
    DELIVERY_LASTNAME: FieldValue | None = condition_field("ans[..50]")
    DELIVERY_STREET: FieldValue | None = condition_field("ans[..50]")
    DELIVERY_ADDRESSADDITION: FieldValue | None = condition_field("an[..50]")
    DELIVERY_ZIP: FieldValue | None = condition_field("an[..10]")
    DELIVERY_CITY: FieldValue | None = condition_field("ans[..50]")
    DELIVERY_COUNTRY: FieldValue | None = condition_field("a[2]", "ISO 3166 country code")
    DELIVERY_PHONE: FieldValue | None = condition_field("ns[..50]")


class BillpayPayCompleteParameter(ParameterCollection):
    """Billpay settlement options for pay complete."""

    NAME: ClassVar[str] = "paycompleteparameter_billpay"

    POB_DELAY: FieldValue | None = condition_field("n[..3]", "Days until the invoice is due")
