"""Unit tests for the payment draft builder"""

import pytest
from dataclasses import FrozenInstanceError, replace
from ikigai_payments.domain.drafts import build_payment_draft
from ikigai_payments.domain.exceptions import PaymentValidationError, ReferenceNotFoundError
from ikigai_payments.domain.models import PaymentPurpose, School


def test_build_merchant_draft(merchant_form, schools, purposes, now, tomorrow):
    """Test State University tuition resolves into a complete draft"""
    draft = build_payment_draft(merchant_form, schools, purposes, now=now)

    assert draft.school_id == "1"
    assert draft.school_name == "State University"
    assert draft.is_merchant is True
    assert draft.purpose_name == "Tuition Fees"
    assert draft.amount_minor == 15_000_000
    assert draft.formatted_amount == "150,000"
    assert draft.is_recurring is False
    assert draft.scheduled_at == tomorrow
    assert draft.external_account_name is None
    assert draft.external_account_number is None


def test_build_draft_from_display_amount(merchant_form, schools, purposes, now):
    draft = build_payment_draft(replace(merchant_form, amount="1,250.5"), schools, purposes, now=now)
    assert draft.amount_minor == 125_050
    assert draft.formatted_amount == "1,250.50"


def test_build_draft_drops_trailing_decimal_point(merchant_form, schools, purposes, now):
    """Test a half-typed amount becomes a finished display string"""
    draft = build_payment_draft(replace(merchant_form, amount="1500."), schools, purposes, now=now)
    assert draft.amount_minor == 150_000
    assert draft.formatted_amount == "1,500"


def test_build_non_merchant_draft_copies_account(merchant_form, schools, purposes, now):
    """Test account fields and recurrence flag pass straight through"""
    form = replace(
        merchant_form,
        school_id="3",
        is_recurring=True,
        account_name=" Technical Institute Fees ",
        account_number="0123456789",
    )
    draft = build_payment_draft(form, schools, purposes, now=now)

    assert draft.is_merchant is False
    assert draft.is_recurring is True
    assert draft.external_account_name == "Technical Institute Fees"
    assert draft.external_account_number == "0123456789"


def test_build_draft_defaults_scheduled_at_to_now(merchant_form, schools, purposes, now):
    draft = build_payment_draft(replace(merchant_form, scheduled_at=None), schools, purposes, now=now)
    assert draft.scheduled_at == now


def test_build_draft_raises_with_field_errors(merchant_form, schools, purposes, now):
    """Test invalid forms raise with the per-field mapping"""
    form = replace(merchant_form, school_id="3")
    with pytest.raises(PaymentValidationError) as exc_info:
        build_payment_draft(form, schools, purposes, now=now)
    assert set(exc_info.value.errors) == {"account_name", "account_number"}


def test_build_draft_unknown_reference_is_a_validation_error(merchant_form, schools, purposes, now):
    with pytest.raises(PaymentValidationError) as exc_info:
        build_payment_draft(replace(merchant_form, purpose_id="gym"), schools, purposes, now=now)
    assert "purpose_id" in exc_info.value.errors


def test_reference_not_found_is_a_validation_error():
    """Test callers catching validation errors also catch unresolved references"""
    assert issubclass(ReferenceNotFoundError, PaymentValidationError)


def test_build_draft_does_not_mutate_inputs(merchant_form, schools, purposes, now):
    """Test reference lists and the form are left untouched"""
    schools_before = list(schools)
    purposes_before = list(purposes)
    form_before = replace(merchant_form)

    draft = build_payment_draft(merchant_form, schools, purposes, now=now)

    assert list(schools) == schools_before
    assert list(purposes) == purposes_before
    assert merchant_form == form_before
    with pytest.raises(FrozenInstanceError):
        draft.amount_minor = 1


def test_build_draft_with_custom_reference_lists(merchant_form, now):
    schools = [School(id="1", name="Night School", is_merchant=True)]
    purposes = [PaymentPurpose(id="tuition", name="Evening Tuition")]
    draft = build_payment_draft(merchant_form, schools, purposes, now=now)
    assert (draft.school_name, draft.purpose_name) == ("Night School", "Evening Tuition")
