"""Confirmation handoff - flat string parameters across the screen boundary"""

import uuid
from datetime import datetime
from typing import Dict, Mapping

from ikigai_payments.domain.amounts import format_minor_units, to_minor_units
from ikigai_payments.domain.models import ConfirmationSummary, PaymentDraft, PaymentHistoryItem, PaymentStatus
from ikigai_payments.utils.date_utils import format_long_date, format_time_12h
from ikigai_payments.utils.params import (
    decode_bool,
    decode_datetime,
    decode_optional,
    encode_bool,
    encode_datetime,
    encode_optional,
)

PROCESSING_FEE_MINOR = 0


def to_confirmation_params(draft: PaymentDraft) -> Dict[str, str]:
    """Flatten a draft into string-only navigation parameters"""
    return {
        "schoolId": draft.school_id,
        "schoolName": draft.school_name,
        "isMerchant": encode_bool(draft.is_merchant),
        "paymentPurpose": draft.purpose_id,
        "purposeName": draft.purpose_name,
        "amount": _raw_amount(draft.amount_minor),
        "formattedAmount": draft.formatted_amount,
        "isRecurring": encode_bool(draft.is_recurring),
        "accountName": encode_optional(draft.external_account_name),
        "accountNumber": encode_optional(draft.external_account_number),
        "paymentDateTime": encode_datetime(draft.scheduled_at),
    }


def from_confirmation_params(params: Mapping[str, str], now: datetime | None = None) -> PaymentDraft:
    """
    Rebuild a draft on the receiving side of the boundary.

    Missing values fall back the way the confirmation screen does and the
    payment time defaults to now. The display amount is always re-derived
    from the raw amount; an unusable amount decodes to 0 minor units.
    """
    amount_minor = to_minor_units(params.get("amount") or "") or 0
    return PaymentDraft(
        school_id=params.get("schoolId") or "",
        school_name=params.get("schoolName") or "",
        is_merchant=decode_bool(params.get("isMerchant")),
        purpose_id=params.get("paymentPurpose") or "",
        purpose_name=params.get("purposeName") or "",
        amount_minor=amount_minor,
        formatted_amount=format_minor_units(amount_minor),
        is_recurring=decode_bool(params.get("isRecurring")),
        scheduled_at=decode_datetime(params.get("paymentDateTime"), default=now),
        external_account_name=decode_optional(params.get("accountName")),
        external_account_number=decode_optional(params.get("accountNumber")),
    )


def summarize_confirmation(draft: PaymentDraft) -> ConfirmationSummary:
    """Display values for the confirmation step"""
    return ConfirmationSummary(
        amount=draft.formatted_amount,
        processing_fee=f"{PROCESSING_FEE_MINOR // 100:,}.{PROCESSING_FEE_MINOR % 100:02d}",
        total=format_minor_units(draft.amount_minor + PROCESSING_FEE_MINOR),
        payment_type="Recurring Monthly" if draft.is_recurring else "One-time Payment",
        payment_date=format_long_date(draft.scheduled_at),
        payment_time=format_time_12h(draft.scheduled_at),
    )


def new_payment_id() -> str:
    """Time-based unique token"""
    return uuid.uuid1().hex


def history_item_from_draft(draft: PaymentDraft, item_id: str | None = None) -> PaymentHistoryItem:
    """Upcoming history entry for a confirmed draft"""
    return PaymentHistoryItem(
        id=item_id or new_payment_id(),
        school_name=draft.school_name,
        purpose_name=draft.purpose_name,
        amount_minor=draft.amount_minor,
        formatted_amount=draft.formatted_amount,
        scheduled_at=draft.scheduled_at,
        status=PaymentStatus.UPCOMING,
        is_recurring=draft.is_recurring,
    )


def _raw_amount(amount_minor: int) -> str:
    """Raw numeric string for minor units, no separators"""
    return format_minor_units(amount_minor).replace(",", "")
