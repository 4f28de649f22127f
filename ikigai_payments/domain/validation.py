"""Payment form validation - per-field checks run on submit"""

import re
from dataclasses import dataclass
from datetime import datetime
from typing import Dict, Optional, Sequence

from ikigai_payments.domain.amounts import to_minor_units
from ikigai_payments.domain.models import PaymentDraft, PaymentEdit, PaymentPurpose, School
from ikigai_payments.domain.reference_data import find_purpose, find_purpose_by_name, find_school
from ikigai_payments.utils.date_utils import is_before_today

ACCOUNT_NUMBER_PATTERN = re.compile(r"^\d{10}$")

SCHOOL_REQUIRED = "Please select a school"
SCHOOL_NOT_FOUND = "Selected school was not found"
SCHOOL_MISMATCH = "School details do not match the selected school"
PURPOSE_REQUIRED = "Please select a payment purpose"
PURPOSE_NOT_FOUND = "Selected payment purpose was not found"
PURPOSE_MISMATCH = "Payment purpose does not match the selected purpose"
AMOUNT_INVALID = "Please enter a valid amount"
ACCOUNT_NAME_REQUIRED = "Account name is required"
ACCOUNT_NUMBER_REQUIRED = "Account number is required"
ACCOUNT_NUMBER_INVALID = "Account number must be 10 digits"
DATE_IN_PAST = "Payment date cannot be in the past"


@dataclass
class PaymentForm:
    """Raw payment form state as entered by the user"""

    school_id: str = ""
    purpose_id: str = ""
    amount: str = ""  # display string, e.g. "150,000"
    is_recurring: bool = False
    account_name: str = ""
    account_number: str = ""
    scheduled_at: Optional[datetime] = None  # None means "now"


def validate_payment_form(
    form: PaymentForm,
    schools: Sequence[School],
    purposes: Sequence[PaymentPurpose],
    now: datetime | None = None,
) -> Dict[str, str]:
    """
    Check a payment form against the reference lists.

    Returns:
        Mapping of field name to error message; empty when the form is valid
    """
    errors: Dict[str, str] = {}

    school = None
    if not form.school_id:
        errors["school_id"] = SCHOOL_REQUIRED
    else:
        school = find_school(schools, form.school_id)
        if school is None:
            errors["school_id"] = SCHOOL_NOT_FOUND

    if not form.purpose_id:
        errors["purpose_id"] = PURPOSE_REQUIRED
    elif find_purpose(purposes, form.purpose_id) is None:
        errors["purpose_id"] = PURPOSE_NOT_FOUND

    if to_minor_units(form.amount) is None:
        errors["amount"] = AMOUNT_INVALID

    # Merchant schools collect through their own account
    if school is not None and not school.is_merchant:
        if not form.account_name.strip():
            errors["account_name"] = ACCOUNT_NAME_REQUIRED
        if not form.account_number.strip():
            errors["account_number"] = ACCOUNT_NUMBER_REQUIRED
        elif not ACCOUNT_NUMBER_PATTERN.match(form.account_number.strip()):
            errors["account_number"] = ACCOUNT_NUMBER_INVALID

    if form.scheduled_at is not None and is_before_today(form.scheduled_at, now):
        errors["scheduled_at"] = DATE_IN_PAST

    return errors


def validate_draft(
    draft: PaymentDraft,
    schools: Sequence[School],
    purposes: Sequence[PaymentPurpose],
    now: datetime | None = None,
) -> Dict[str, str]:
    """
    Re-check a draft after it crossed the confirmation boundary.

    The school and purpose must still resolve, and the carried names and
    merchant flag must agree with the reference lists.
    """
    errors: Dict[str, str] = {}

    school = None
    if not draft.school_id:
        errors["school_id"] = SCHOOL_REQUIRED
    else:
        school = find_school(schools, draft.school_id)
        if school is None:
            errors["school_id"] = SCHOOL_NOT_FOUND
        elif (school.name, school.is_merchant) != (draft.school_name, draft.is_merchant):
            errors["school_id"] = SCHOOL_MISMATCH

    if not draft.purpose_id:
        errors["purpose_id"] = PURPOSE_REQUIRED
    else:
        purpose = find_purpose(purposes, draft.purpose_id)
        if purpose is None:
            errors["purpose_id"] = PURPOSE_NOT_FOUND
        elif purpose.name != draft.purpose_name:
            errors["purpose_id"] = PURPOSE_MISMATCH

    if draft.amount_minor <= 0:
        errors["amount"] = AMOUNT_INVALID

    # Trust the reference list over the carried flag
    is_merchant = school.is_merchant if school is not None else draft.is_merchant
    if not is_merchant:
        if not draft.external_account_name:
            errors["account_name"] = ACCOUNT_NAME_REQUIRED
        if not draft.external_account_number:
            errors["account_number"] = ACCOUNT_NUMBER_REQUIRED
        elif not ACCOUNT_NUMBER_PATTERN.match(draft.external_account_number):
            errors["account_number"] = ACCOUNT_NUMBER_INVALID

    if is_before_today(draft.scheduled_at, now):
        errors["scheduled_at"] = DATE_IN_PAST

    return errors


def validate_payment_edit(
    patch: PaymentEdit,
    purposes: Sequence[PaymentPurpose],
    now: datetime | None = None,
) -> Dict[str, str]:
    """Apply the form's purpose, amount and date rules to a history edit"""
    errors: Dict[str, str] = {}

    if patch.purpose_name is not None and find_purpose_by_name(purposes, patch.purpose_name) is None:
        errors["purpose_name"] = PURPOSE_NOT_FOUND

    if patch.amount_minor is not None and patch.amount_minor <= 0:
        errors["amount"] = AMOUNT_INVALID

    if patch.scheduled_at is not None and is_before_today(patch.scheduled_at, now):
        errors["scheduled_at"] = DATE_IN_PAST

    return errors
