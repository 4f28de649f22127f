"""In-memory payment history with status filtering and edit/cancel of upcoming payments"""

from dataclasses import replace
from typing import Iterable, Iterator, List, Optional

from ikigai_payments.domain.amounts import format_minor_units
from ikigai_payments.domain.exceptions import DuplicatePaymentError
from ikigai_payments.domain.models import HistoryFilter, PaymentEdit, PaymentHistoryItem, PaymentStatus
from ikigai_payments.utils.date_utils import to_naive_local


class PaymentHistoryStore:
    """
    Ordered collection of scheduled payments for one app session.

    Items keep submission order. Only upcoming items can change; edit and
    cancel on a missing or completed item are silent no-ops that return False.
    """

    def __init__(self, items: Iterable[PaymentHistoryItem] = ()):
        self._items: List[PaymentHistoryItem] = []
        for item in items:
            self.add(item)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[PaymentHistoryItem]:
        return iter(list(self._items))

    def add(self, item: PaymentHistoryItem) -> None:
        """Append an item; ids must be unique"""
        if self._index_of(item.id) is not None:
            raise DuplicatePaymentError(f"Payment {item.id} already exists")
        self._items.append(item)

    def get(self, item_id: str) -> Optional[PaymentHistoryItem]:
        index = self._index_of(item_id)
        return self._items[index] if index is not None else None

    def filter(self, status: HistoryFilter | str = HistoryFilter.ALL) -> List[PaymentHistoryItem]:
        """Items matching a status filter, in submission order"""
        status = HistoryFilter(status)
        if status == HistoryFilter.ALL:
            return list(self._items)
        return [item for item in self._items if item.status.value == status.value]

    def edit(self, item_id: str, patch: PaymentEdit) -> bool:
        """Replace purpose, amount and/or date of an upcoming payment in place"""
        index = self._upcoming_index(item_id)
        if index is None:
            return False

        item = self._items[index]
        changes = {}
        if patch.purpose_name is not None:
            changes["purpose_name"] = patch.purpose_name
        if patch.amount_minor is not None:
            changes["amount_minor"] = patch.amount_minor
            changes["formatted_amount"] = format_minor_units(patch.amount_minor)
        if patch.scheduled_at is not None:
            changes["scheduled_at"] = to_naive_local(patch.scheduled_at)

        self._items[index] = replace(item, **changes)
        return True

    def cancel(self, item_id: str) -> bool:
        """Remove an upcoming payment"""
        index = self._upcoming_index(item_id)
        if index is None:
            return False
        del self._items[index]
        return True

    def mark_completed(self, item_id: str) -> bool:
        """Settlement hook: an upcoming payment has been paid"""
        index = self._upcoming_index(item_id)
        if index is None:
            return False
        self._items[index] = replace(self._items[index], status=PaymentStatus.COMPLETED)
        return True

    def _index_of(self, item_id: str) -> Optional[int]:
        return next((i for i, item in enumerate(self._items) if item.id == item_id), None)

    def _upcoming_index(self, item_id: str) -> Optional[int]:
        index = self._index_of(item_id)
        if index is None or self._items[index].status != PaymentStatus.UPCOMING:
            return None
        return index
