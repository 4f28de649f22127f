"""POST /v1/payments/draft and /v1/payments/confirm - schedule a fee payment"""

import time
import logging
from dataclasses import asdict
from typing import Dict, List

from fastapi import APIRouter, Body, Depends, HTTPException, Request
from fastapi.responses import JSONResponse

from ikigai_payments.api.dependencies import (
    get_history_store,
    get_payment_client,
    get_purposes,
    get_request_id,
    get_schools,
)
from ikigai_payments.api.v1.history import history_item_schema
from ikigai_payments.api.v1.schemas import (
    ConfirmationSummarySchema,
    ConfirmPaymentResponse,
    DraftResponse,
    PaymentFormRequest,
    ValidationErrorResponse,
)
from ikigai_payments.config import settings
from ikigai_payments.domain.confirmation import (
    from_confirmation_params,
    history_item_from_draft,
    summarize_confirmation,
    to_confirmation_params,
)
from ikigai_payments.domain.drafts import build_payment_draft
from ikigai_payments.domain.exceptions import DuplicatePaymentError, PaymentSubmissionError, PaymentValidationError
from ikigai_payments.domain.history import PaymentHistoryStore
from ikigai_payments.domain.models import PaymentPurpose, School
from ikigai_payments.domain.schedule import upcoming_processing_dates
from ikigai_payments.domain.validation import PaymentForm, validate_draft
from ikigai_payments.infrastructure.clients.payments import PaymentAPIClient
from ikigai_payments.infrastructure.observability.logging import log_payment_scheduled
from ikigai_payments.infrastructure.observability.metrics import record_payment_scheduled, record_validation_failures

router = APIRouter()


def _reject(request_id: str, errors: Dict[str, str]) -> JSONResponse:
    record_validation_failures(errors)
    logging.info("Payment form rejected", extra={"request_id": request_id, "fields": sorted(errors)})
    return JSONResponse(status_code=422, content={"errors": errors})


@router.post("/payments/draft", response_model=DraftResponse, responses={422: {"model": ValidationErrorResponse}})
def create_draft(
    body: PaymentFormRequest,
    request: Request,
    schools: List[School] = Depends(get_schools),
    purposes: List[PaymentPurpose] = Depends(get_purposes),
):
    """
    Validate the payment form and build the draft shown on confirmation.

    Returns:
        Draft details, the flat confirmation parameters and display summary
    """
    try:
        draft = build_payment_draft(PaymentForm(**body.model_dump()), schools, purposes)
    except PaymentValidationError as e:
        return _reject(get_request_id(request), e.errors)

    summary = summarize_confirmation(draft)
    return DraftResponse(
        school_name=draft.school_name,
        purpose_name=draft.purpose_name,
        amount_minor=draft.amount_minor,
        formatted_amount=draft.formatted_amount,
        is_recurring=draft.is_recurring,
        scheduled_at=draft.scheduled_at,
        processing_dates=upcoming_processing_dates(draft),
        confirmation_params=to_confirmation_params(draft),
        summary=ConfirmationSummarySchema(**asdict(summary)),
    )


@router.post(
    "/payments/confirm",
    response_model=ConfirmPaymentResponse,
    responses={422: {"model": ValidationErrorResponse}},
)
async def confirm_payment(
    request: Request,
    params: Dict[str, str] = Body(..., description="Confirmation parameters from /payments/draft"),
    schools: List[School] = Depends(get_schools),
    purposes: List[PaymentPurpose] = Depends(get_purposes),
    store: PaymentHistoryStore = Depends(get_history_store),
    payment_client: PaymentAPIClient = Depends(get_payment_client),
):
    """
    Submit a confirmed draft and add it to history as upcoming.

    Flow:
    1. Decode the confirmation parameters
    2. Re-check the draft against the reference lists and today's date
    3. Submit to the payment API
    4. Store the upcoming history item
    """
    start_time = time.time()
    request_id = get_request_id(request)

    draft = from_confirmation_params(params)
    errors = validate_draft(draft, schools, purposes)
    if errors:
        return _reject(request_id, errors)

    try:
        receipt = await payment_client.submit_payment(draft.amount_minor, settings.virtual_account_number)
    except PaymentSubmissionError as e:
        logging.error(f"Payment submission failed: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=503, detail="Payment service unavailable")

    item = history_item_from_draft(draft)
    try:
        store.add(item)
    except DuplicatePaymentError as e:
        logging.error(f"Duplicate payment id: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=409, detail=str(e))

    duration_ms = (time.time() - start_time) * 1000
    record_payment_scheduled(draft.is_recurring)
    log_payment_scheduled(request_id, item.id, draft.school_name, draft.amount_minor, draft.is_recurring, duration_ms)

    return ConfirmPaymentResponse(
        payment=history_item_schema(item),
        reference=receipt.reference,
        new_balance_minor=receipt.new_balance_minor,
    )
