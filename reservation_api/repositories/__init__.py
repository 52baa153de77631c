"""
Repositories package - Data access layer for the reservation service
"""

from .base import ReservationRepositoryInterface
from .reservation_repository import ReservationRepository

__all__ = [
    'ReservationRepositoryInterface',
    'ReservationRepository'
]
