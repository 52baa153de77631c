"""
Base Repository Interface - Abstract base classes
"""

from abc import ABC, abstractmethod
from typing import Dict, List, Optional
from reservation_api.models import Reservation


class ReservationRepositoryInterface(ABC):
    """Abstract base class for reservation repository"""

    @abstractmethod
    def next_id(self) -> int:
        pass

    @abstractmethod
    def add(self, reservation: Reservation) -> Reservation:
        pass

    @abstractmethod
    def get_by_phone(self, phone: str) -> Optional[Reservation]:
        pass

    @abstractmethod
    def get_by_number(self, reservation_number: str) -> Optional[Reservation]:
        pass

    @abstractmethod
    def recent(self, limit: int) -> List[Reservation]:
        pass

    @abstractmethod
    def count(self) -> int:
        pass

    @abstractmethod
    def count_by(self, attribute: str) -> Dict[str, int]:
        pass
