"""
Saferpay request and response collections.
"""

from .billpay import (
    LEGALFORM_AG,
    LEGALFORM_GMBH,
    LEGALFORM_MISC,
    PROVIDERSET_BILLPAY_INVOICE,
    PROVIDERSET_BILLPAY_LSV,
    BillpayPayCompleteParameter,
    BillpayPayInitParameter,
)
from .collection import FieldValue, ParameterCollection, condition_field
from .pay_complete import CompleteAction, PayCompleteParameter, PayCompleteResponse
from .pay_confirm import PayConfirmParameter
from .pay_init import (
    SAFERPAYTESTACCOUNT_ACCOUNTID,
    SAFERPAYTESTACCOUNT_SPPASSWORD,
    TESTACCOUNT_PREFIX,
    PayInitParameter,
    is_test_account_id,
)

__all__ = [
    # Base
    "FieldValue",
    "ParameterCollection",
    "condition_field",
    # Pay init
    "PayInitParameter",
    "SAFERPAYTESTACCOUNT_ACCOUNTID",
    "SAFERPAYTESTACCOUNT_SPPASSWORD",
    "TESTACCOUNT_PREFIX",
    "is_test_account_id",
    # Pay confirm / complete
    "PayConfirmParameter",
    "PayCompleteParameter",
    "PayCompleteResponse",
    "CompleteAction",
    # Billpay
    "BillpayPayInitParameter",
    "BillpayPayCompleteParameter",
    "PROVIDERSET_BILLPAY_LSV",
    "PROVIDERSET_BILLPAY_INVOICE",
    "LEGALFORM_GMBH",
    "LEGALFORM_AG",
    "LEGALFORM_MISC",
]
