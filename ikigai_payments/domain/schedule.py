"""Occurrence dates for recurring monthly payments"""

import calendar
from datetime import datetime
from typing import List

from ikigai_payments.domain.models import PaymentDraft


def add_months(value: datetime, months: int) -> datetime:
    """Same day and time `months` later, clamped to the last day of shorter months"""
    month_index = value.month - 1 + months
    year = value.year + month_index // 12
    month = month_index % 12 + 1
    day = min(value.day, calendar.monthrange(year, month)[1])
    return value.replace(year=year, month=month, day=day)


def monthly_occurrences(start: datetime, count: int = 3) -> List[datetime]:
    """
    Generate the first `count` processing dates of a monthly payment.

    Every occurrence is computed from `start`, so a payment scheduled on the
    31st returns to the 31st after a short month.

    Example:
        Jan 31 → [Jan 31, Feb 28, Mar 31]
    """
    if count <= 0:
        return []
    return [add_months(start, i) for i in range(count)]


def upcoming_processing_dates(draft: PaymentDraft, count: int = 3) -> List[datetime]:
    """Processing dates for a draft: one date unless it recurs monthly"""
    if not draft.is_recurring:
        return [draft.scheduled_at]
    return monthly_occurrences(draft.scheduled_at, count)
