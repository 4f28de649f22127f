"""Pydantic schemas for API request/response validation"""

from datetime import datetime
from typing import Dict, List, Optional

from pydantic import BaseModel, Field

from ikigai_payments.domain.models import PaymentStatus


class SchoolSchema(BaseModel):
    id: str
    name: str
    is_merchant: bool


class PaymentPurposeSchema(BaseModel):
    id: str
    name: str


class FormattedAmountSchema(BaseModel):
    """Live display value for the amount field"""

    formatted: str
    amount_minor: Optional[int] = None


class PaymentFormRequest(BaseModel):
    """Request body for POST /v1/payments/draft"""

    school_id: str = ""
    purpose_id: str = ""
    amount: str = Field("", description="Amount as typed or displayed, e.g. '150,000'")
    is_recurring: bool = False
    account_name: str = ""
    account_number: str = ""
    scheduled_at: Optional[datetime] = Field(None, description="Defaults to now")


class ConfirmationSummarySchema(BaseModel):
    amount: str
    processing_fee: str
    total: str
    payment_type: str
    payment_date: str
    payment_time: str


class DraftResponse(BaseModel):
    """Response for POST /v1/payments/draft"""

    school_name: str
    purpose_name: str
    amount_minor: int
    formatted_amount: str
    is_recurring: bool
    scheduled_at: datetime
    processing_dates: List[datetime]
    confirmation_params: Dict[str, str]
    summary: ConfirmationSummarySchema


class ValidationErrorResponse(BaseModel):
    errors: Dict[str, str]


class HistoryItemSchema(BaseModel):
    """Single payment in history"""

    id: str
    school_name: str
    purpose_name: str
    amount_minor: int
    formatted_amount: str
    scheduled_at: datetime
    status: PaymentStatus
    is_recurring: bool


class HistoryResponse(BaseModel):
    """Response for GET /v1/payments/history"""

    status: str
    payments: List[HistoryItemSchema]


class ConfirmPaymentResponse(BaseModel):
    """Response for POST /v1/payments/confirm"""

    payment: HistoryItemSchema
    reference: str
    new_balance_minor: Optional[int] = None


class EditPaymentRequest(BaseModel):
    """Request body for PATCH /v1/payments/history/{payment_id}"""

    purpose_name: Optional[str] = None
    amount: Optional[str] = Field(None, description="Display amount, e.g. '120,000'")
    scheduled_at: Optional[datetime] = None


class MutationResponse(BaseModel):
    """Outcome of cancel/settle; applied is False for completed or unknown payments"""

    payment_id: str
    applied: bool
