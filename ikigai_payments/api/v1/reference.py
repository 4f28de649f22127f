"""GET /v1/schools, /v1/payment-purposes and /v1/amounts/format - reference lists and field helpers"""

from typing import List

from fastapi import APIRouter, Depends, Query

from ikigai_payments.api.dependencies import get_purposes, get_schools
from ikigai_payments.api.v1.schemas import FormattedAmountSchema, PaymentPurposeSchema, SchoolSchema
from ikigai_payments.domain.amounts import format_amount, to_minor_units
from ikigai_payments.domain.models import PaymentPurpose, School

router = APIRouter()


@router.get("/schools", response_model=List[SchoolSchema])
def list_schools(schools: List[School] = Depends(get_schools)):
    return [SchoolSchema(id=s.id, name=s.name, is_merchant=s.is_merchant) for s in schools]


@router.get("/payment-purposes", response_model=List[PaymentPurposeSchema])
def list_payment_purposes(purposes: List[PaymentPurpose] = Depends(get_purposes)):
    return [PaymentPurposeSchema(id=p.id, name=p.name) for p in purposes]


@router.get("/amounts/format", response_model=FormattedAmountSchema)
def format_amount_field(raw: str = Query("", description="Amount field contents as typed")):
    """Reformat the amount field on every keystroke; a trailing '.' is kept"""
    return FormattedAmountSchema(formatted=format_amount(raw), amount_minor=to_minor_units(raw))
