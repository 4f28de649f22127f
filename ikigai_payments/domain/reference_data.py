"""Static reference lists for schools and payment purposes"""

from datetime import datetime, timedelta
from typing import List, Optional, Sequence

from ikigai_payments.domain.amounts import format_minor_units
from ikigai_payments.domain.models import PaymentHistoryItem, PaymentPurpose, PaymentStatus, School

SCHOOLS: List[School] = [
    School(id="1", name="State University", is_merchant=True),
    School(id="2", name="City College", is_merchant=True),
    School(id="3", name="Technical Institute", is_merchant=False),
    School(id="4", name="Community College", is_merchant=False),
    School(id="5", name="Private Academy", is_merchant=True),
]

PAYMENT_PURPOSES: List[PaymentPurpose] = [
    PaymentPurpose(id="tuition", name="Tuition Fees"),
    PaymentPurpose(id="accommodation", name="Accommodation"),
    PaymentPurpose(id="books", name="Books & Materials"),
    PaymentPurpose(id="exams", name="Examination Fees"),
    PaymentPurpose(id="registration", name="Registration Fees"),
    PaymentPurpose(id="other", name="Other"),
]


def find_school(schools: Sequence[School], school_id: str) -> Optional[School]:
    return next((s for s in schools if s.id == school_id), None)


def find_purpose(purposes: Sequence[PaymentPurpose], purpose_id: str) -> Optional[PaymentPurpose]:
    return next((p for p in purposes if p.id == purpose_id), None)


def find_purpose_by_name(purposes: Sequence[PaymentPurpose], name: str) -> Optional[PaymentPurpose]:
    return next((p for p in purposes if p.name == name), None)


def sample_history(now: datetime | None = None) -> List[PaymentHistoryItem]:
    """Demo history shown before the user has scheduled anything"""
    now = now or datetime.now()
    rows = [
        ("sample-1", "State University", "Tuition Fees", 25_000_000, now - timedelta(days=45), PaymentStatus.COMPLETED),
        ("sample-2", "City College", "Accommodation", 8_500_000, now - timedelta(days=12), PaymentStatus.COMPLETED),
        ("sample-3", "State University", "Tuition Fees", 25_000_000, now + timedelta(days=20), PaymentStatus.UPCOMING),
    ]
    return [
        PaymentHistoryItem(
            id=item_id,
            school_name=school,
            purpose_name=purpose,
            amount_minor=amount,
            formatted_amount=format_minor_units(amount),
            scheduled_at=when.replace(microsecond=0),
            status=status,
        )
        for item_id, school, purpose, amount, when, status in rows
    ]
