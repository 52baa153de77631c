from .enums import Gender, AgeBand, Plan, ReservationStatus, enum_values
from .reservation import (
    Reservation, ReservationMetadata, build_reservation_number, to_iso, utc_now,
    RESERVATION_NUMBER_PREFIX
)

__all__ = [
    'Gender', 'AgeBand', 'Plan', 'ReservationStatus', 'enum_values',
    'Reservation', 'ReservationMetadata', 'build_reservation_number', 'to_iso', 'utc_now',
    'RESERVATION_NUMBER_PREFIX'
]
