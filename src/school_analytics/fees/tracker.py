"""Fee payment ledger ordered by payment time."""

import threading
from bisect import bisect_left, bisect_right, insort
from dataclasses import dataclass
from datetime import datetime
from operator import itemgetter
from typing import Dict, List, Tuple

from loguru import logger


@dataclass(frozen=True)
class FeeRecord:
    """A single fee payment."""

    payment_id: str
    student_id: str
    amount: float
    timestamp: datetime

    def __str__(self) -> str:
        return f"{self.payment_id} | {self.student_id} | {self.amount:.2f} | {self.timestamp.isoformat()}"


_timestamp_of = itemgetter(0)


class FeeTracker:
    """Payments keyed by (timestamp, payment_id), kept in sorted order.

    Recording a payment with an existing key replaces the earlier record.
    """

    def __init__(self) -> None:
        self._records: Dict[Tuple[datetime, str], FeeRecord] = {}
        self._keys: List[Tuple[datetime, str]] = []
        self._lock = threading.Lock()

    def record_payment(
        self,
        payment_id: str,
        student_id: str,
        amount: float,
        timestamp: datetime,
    ) -> FeeRecord:
        """Record a payment.

        Raises:
            ValueError: If amount is negative.
        """
        if amount < 0:
            raise ValueError(f"Amount cannot be negative, got {amount}")

        record = FeeRecord(payment_id, student_id, amount, timestamp)
        key = (timestamp, payment_id)

        with self._lock:
            if key not in self._records:
                insort(self._keys, key)
            self._records[key] = record

        logger.debug(f"Recorded payment {payment_id} of {amount:.2f} for {student_id}")
        return record

    def payments_in_range(self, from_time: datetime, to_time: datetime) -> List[FeeRecord]:
        """Payments with from_time <= timestamp <= to_time, in time order."""
        with self._lock:
            lo = bisect_left(self._keys, from_time, key=_timestamp_of)
            hi = bisect_right(self._keys, to_time, key=_timestamp_of)
            return [self._records[k] for k in self._keys[lo:hi]]

    def count(self) -> int:
        with self._lock:
            return len(self._keys)

    def __len__(self) -> int:
        return self.count()
