"""
Services package - Business logic layer
"""

from .reservation_service import ReservationService
from .analytics_service import AnalyticsService

__all__ = ['ReservationService', 'AnalyticsService']
