"""Payment draft builder - turns a validated form into a canonical payment request"""

from datetime import datetime
from typing import Sequence

from ikigai_payments.domain.amounts import format_minor_units, to_minor_units
from ikigai_payments.domain.exceptions import PaymentValidationError, ReferenceNotFoundError
from ikigai_payments.domain.models import PaymentDraft, PaymentPurpose, School
from ikigai_payments.domain.reference_data import find_purpose, find_school
from ikigai_payments.domain.validation import (
    AMOUNT_INVALID,
    PURPOSE_NOT_FOUND,
    SCHOOL_NOT_FOUND,
    PaymentForm,
    validate_payment_form,
)
from ikigai_payments.utils.date_utils import to_naive_local


def build_payment_draft(
    form: PaymentForm,
    schools: Sequence[School],
    purposes: Sequence[PaymentPurpose],
    now: datetime | None = None,
) -> PaymentDraft:
    """
    Validate a payment form and assemble the draft handed to confirmation.

    Flow:
    1. Run form validation
    2. Resolve school and purpose ids against the reference lists
    3. Convert the display amount to minor units

    Raises:
        PaymentValidationError: Form has field errors
        ReferenceNotFoundError: School or purpose id does not resolve
    """
    now = now or datetime.now()

    errors = validate_payment_form(form, schools, purposes, now=now)
    if errors:
        raise PaymentValidationError(errors)

    school = find_school(schools, form.school_id)
    if school is None:
        raise ReferenceNotFoundError({"school_id": SCHOOL_NOT_FOUND})
    purpose = find_purpose(purposes, form.purpose_id)
    if purpose is None:
        raise ReferenceNotFoundError({"purpose_id": PURPOSE_NOT_FOUND})

    amount_minor = to_minor_units(form.amount)
    if amount_minor is None:
        raise PaymentValidationError({"amount": AMOUNT_INVALID})

    return PaymentDraft(
        school_id=school.id,
        school_name=school.name,
        is_merchant=school.is_merchant,
        purpose_id=purpose.id,
        purpose_name=purpose.name,
        amount_minor=amount_minor,
        formatted_amount=format_minor_units(amount_minor),
        is_recurring=form.is_recurring,
        scheduled_at=to_naive_local(form.scheduled_at) if form.scheduled_at else now,
        external_account_name=form.account_name.strip() or None,
        external_account_number=form.account_number.strip() or None,
    )
