"""
Reservation Repository Implementation

Process-wide in-memory store. Records are never updated or removed once
added, so the insertion-ordered list doubles as the history used by the
"recent reservations" view.
"""

import itertools
import threading
from collections import Counter
from typing import Dict, List, Optional

from reservation_api.models import Reservation
from reservation_api.utils.exceptions import DuplicateReservationError, ReservationNumberConflictError
from .base import ReservationRepositoryInterface


class ReservationRepository(ReservationRepositoryInterface):
    """In-memory implementation of reservation repository"""

    def __init__(self):
        self._lock = threading.Lock()
        self._ids = itertools.count(1)
        self._records: List[Reservation] = []
        self._by_phone: Dict[str, Reservation] = {}
        self._by_number: Dict[str, Reservation] = {}

    def next_id(self) -> int:
        with self._lock:
            return next(self._ids)

    def add(self, reservation: Reservation) -> Reservation:
        """Store a reservation, enforcing one reservation per phone and unique numbers"""
        with self._lock:
            if reservation.phone in self._by_phone:
                raise DuplicateReservationError(reservation.phone)
            if reservation.reservation_number in self._by_number:
                raise ReservationNumberConflictError(reservation.reservation_number)

            self._records.append(reservation)
            self._by_phone[reservation.phone] = reservation
            self._by_number[reservation.reservation_number] = reservation
            return reservation

    def get_by_phone(self, phone: str) -> Optional[Reservation]:
        with self._lock:
            return self._by_phone.get(phone)

    def get_by_number(self, reservation_number: str) -> Optional[Reservation]:
        with self._lock:
            return self._by_number.get(reservation_number)

    def recent(self, limit: int) -> List[Reservation]:
        """Latest reservations, newest first"""
        if limit <= 0:
            return []
        with self._lock:
            return list(reversed(self._records[-limit:]))

    def count(self) -> int:
        with self._lock:
            return len(self._records)

    def count_by(self, attribute: str) -> Dict[str, int]:
        """Number of reservations per distinct value of attribute"""
        with self._lock:
            return dict(Counter(getattr(record, attribute) for record in self._records))
