"""
Reservation Model
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone

from .enums import ReservationStatus

RESERVATION_NUMBER_PREFIX = 'XD'
EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def to_iso(moment: datetime) -> str:
    """ISO 8601 in UTC with millisecond precision and a Z suffix"""
    return moment.astimezone(timezone.utc).isoformat(timespec='milliseconds').replace('+00:00', 'Z')


def build_reservation_number(moment: datetime) -> str:
    """'XD' followed by the last 8 digits of the epoch milliseconds of moment"""
    delta = moment - EPOCH
    epoch_millis = (delta.days * 86400 + delta.seconds) * 1000 + delta.microseconds // 1000
    return f"{RESERVATION_NUMBER_PREFIX}{str(epoch_millis)[-8:]}"


@dataclass
class ReservationMetadata:
    """Request context captured when a reservation is submitted"""
    user_agent: str = ''
    ip: str = ''
    referrer: str = ''
    utm_source: str = ''
    utm_medium: str = ''
    utm_campaign: str = ''


@dataclass
class Reservation:
    """Reservation record held by the in-memory repository"""
    id: int
    reservation_number: str
    phone: str
    nickname: str
    gender: str
    age: str
    plan: str
    created_at: datetime
    updated_at: datetime
    status: ReservationStatus = ReservationStatus.PENDING
    metadata: ReservationMetadata = field(default_factory=ReservationMetadata)

    def __repr__(self):
        return f'<Reservation {self.reservation_number}>'
