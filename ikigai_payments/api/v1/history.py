"""/v1/payments/history - filter, edit, cancel and settle scheduled payments"""

import logging
from dataclasses import asdict
from typing import List

from fastapi import APIRouter, Depends, HTTPException, Query, Request
from fastapi.responses import JSONResponse

from ikigai_payments.api.dependencies import get_history_store, get_purposes, get_request_id
from ikigai_payments.api.v1.schemas import (
    EditPaymentRequest,
    HistoryItemSchema,
    HistoryResponse,
    MutationResponse,
    ValidationErrorResponse,
)
from ikigai_payments.domain.amounts import to_minor_units
from ikigai_payments.domain.history import PaymentHistoryStore
from ikigai_payments.domain.models import HistoryFilter, PaymentEdit, PaymentHistoryItem, PaymentPurpose
from ikigai_payments.domain.validation import AMOUNT_INVALID, validate_payment_edit
from ikigai_payments.infrastructure.observability.metrics import record_history_mutation, record_validation_failures

router = APIRouter()


def history_item_schema(item: PaymentHistoryItem) -> HistoryItemSchema:
    return HistoryItemSchema(**asdict(item))


@router.get("/payments/history", response_model=HistoryResponse)
def get_payment_history(
    status: HistoryFilter = Query(HistoryFilter.ALL, description="all | completed | upcoming"),
    store: PaymentHistoryStore = Depends(get_history_store),
):
    """
    List scheduled payments in submission order.

    Returns:
        Payments matching the status filter
    """
    payments = [history_item_schema(item) for item in store.filter(status)]
    return HistoryResponse(status=status.value, payments=payments)


@router.patch(
    "/payments/history/{payment_id}",
    response_model=HistoryItemSchema,
    responses={422: {"model": ValidationErrorResponse}},
)
def edit_payment(
    payment_id: str,
    body: EditPaymentRequest,
    request: Request,
    store: PaymentHistoryStore = Depends(get_history_store),
    purposes: List[PaymentPurpose] = Depends(get_purposes),
):
    """
    Change purpose, amount or date of an upcoming payment.

    Completed payments come back unchanged.
    """
    if store.get(payment_id) is None:
        raise HTTPException(status_code=404, detail="Payment not found")

    amount_minor = None
    errors = {}
    if body.amount is not None:
        amount_minor = to_minor_units(body.amount)
        if amount_minor is None:
            errors["amount"] = AMOUNT_INVALID

    patch = PaymentEdit(purpose_name=body.purpose_name, amount_minor=amount_minor, scheduled_at=body.scheduled_at)
    errors.update(validate_payment_edit(patch, purposes))
    if errors:
        record_validation_failures(errors)
        logging.info("Payment edit rejected", extra={"request_id": get_request_id(request), "fields": sorted(errors)})
        return JSONResponse(status_code=422, content={"errors": errors})

    applied = store.edit(payment_id, patch)
    record_history_mutation("edit", applied)
    return history_item_schema(store.get(payment_id))


@router.delete("/payments/history/{payment_id}", response_model=MutationResponse)
def cancel_payment(payment_id: str, store: PaymentHistoryStore = Depends(get_history_store)):
    """Cancel an upcoming payment; completed or unknown payments are left alone"""
    applied = store.cancel(payment_id)
    record_history_mutation("cancel", applied)
    return MutationResponse(payment_id=payment_id, applied=applied)


@router.post("/payments/history/{payment_id}/settle", response_model=MutationResponse)
def settle_payment(payment_id: str, store: PaymentHistoryStore = Depends(get_history_store)):
    """Settlement hook: mark an upcoming payment as completed"""
    applied = store.mark_completed(payment_id)
    record_history_mutation("settle", applied)
    return MutationResponse(payment_id=payment_id, applied=applied)
