"""Domain models - pure Python dataclasses representing business entities"""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Optional


class PaymentStatus(str, Enum):
    """Lifecycle state of a scheduled payment"""

    UPCOMING = "upcoming"
    COMPLETED = "completed"


class HistoryFilter(str, Enum):
    """Status filter offered on the payment history"""

    ALL = "all"
    UPCOMING = "upcoming"
    COMPLETED = "completed"


@dataclass(frozen=True)
class School:
    """School that can receive fee payments"""

    id: str
    name: str
    is_merchant: bool  # has a registered collection account


@dataclass(frozen=True)
class PaymentPurpose:
    """What a fee payment is for"""

    id: str
    name: str


@dataclass(frozen=True)
class PaymentDraft:
    """Validated, not-yet-submitted payment request"""

    school_id: str
    school_name: str
    is_merchant: bool
    purpose_id: str
    purpose_name: str
    amount_minor: int
    formatted_amount: str
    is_recurring: bool
    scheduled_at: datetime
    external_account_name: Optional[str] = None
    external_account_number: Optional[str] = None


@dataclass(frozen=True)
class PaymentHistoryItem:
    """Scheduled payment held by the history store"""

    id: str
    school_name: str
    purpose_name: str
    amount_minor: int
    formatted_amount: str
    scheduled_at: datetime
    status: PaymentStatus = PaymentStatus.UPCOMING
    is_recurring: bool = False


@dataclass(frozen=True)
class PaymentEdit:
    """Fields a user may change on an upcoming payment; None keeps the current value"""

    purpose_name: Optional[str] = None
    amount_minor: Optional[int] = None
    scheduled_at: Optional[datetime] = None


@dataclass(frozen=True)
class ConfirmationSummary:
    """Display values for the confirmation step"""

    amount: str
    processing_fee: str
    total: str
    payment_type: str
    payment_date: str
    payment_time: str


@dataclass(frozen=True)
class PaymentReceipt:
    """Outcome of submitting a payment to the backend"""

    reference: str
    new_balance_minor: Optional[int] = None
