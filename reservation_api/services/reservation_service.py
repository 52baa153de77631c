"""
Reservation Service - Business logic for reservation management
"""

from typing import Any, Dict, List, Optional
import logging
import time

from marshmallow import ValidationError

from reservation_api.models import (
    AgeBand, Gender, Plan, Reservation, ReservationMetadata, ReservationStatus,
    build_reservation_number, enum_values, utc_now
)
from reservation_api.repositories import ReservationRepositoryInterface
from reservation_api.utils.exceptions import (
    DuplicateReservationError, ReservationNotFoundError, ReservationNumberConflictError,
    ReservationValidationError
)
from reservation_api.utils.schemas import ReservationRequestSchema, ReservationResponseSchema

logger = logging.getLogger(__name__)

RECENT_RESERVATIONS_LIMIT = 10
RESERVATION_NUMBER_ATTEMPTS = 5

# Order in which field errors are reported
VALIDATED_FIELDS = ('phone', 'nickname', 'gender', 'age', 'plan')


class ReservationService:
    """Business logic for reservation management"""

    def __init__(self, reservation_repo: ReservationRepositoryInterface, clock=utc_now):
        self.reservation_repo = reservation_repo
        self.clock = clock
        self.request_schema = ReservationRequestSchema()
        self.record_schema = ReservationResponseSchema()

    def validate(self, payload: Dict[str, Any]) -> Dict[str, Any]:
        """Load a reservation request, collecting every invalid field"""
        if not isinstance(payload, dict):
            payload = {}
        try:
            return self.request_schema.load(payload)
        except ValidationError as e:
            raise ReservationValidationError(self._format_errors(e.messages, payload))

    def create_reservation(self, payload: Dict[str, Any], user_agent: Optional[str] = '',
                           ip: Optional[str] = '') -> Reservation:
        """Validate and store a new reservation"""
        data = self.validate(payload)

        # The repository re-checks atomically on insert
        existing = self.reservation_repo.get_by_phone(data['phone'])
        if existing:
            raise DuplicateReservationError(data['phone'])

        metadata = ReservationMetadata(
            user_agent=user_agent or '',
            ip=ip or '',
            referrer=data['referrer'],
            utm_source=data['utm_source'],
            utm_medium=data['utm_medium'],
            utm_campaign=data['utm_campaign'],
        )

        reservation = self._store_with_unique_number(data, metadata)

        logger.info(
            f"Reservation created: {reservation.reservation_number} - "
            f"{reservation.phone} - {reservation.plan}"
        )
        return reservation

    def get_reservation(self, reservation_number: str) -> Reservation:
        """Get reservation by its reservation number"""
        reservation = self.reservation_repo.get_by_number(reservation_number)
        if not reservation:
            raise ReservationNotFoundError(reservation_number)
        return reservation

    def compute_stats(self) -> Dict[str, Any]:
        """Aggregate counts per plan, age band and gender plus the latest reservations"""
        by_plan = self.reservation_repo.count_by('plan')
        by_age = self.reservation_repo.count_by('age')
        by_gender = self.reservation_repo.count_by('gender')
        recent = self.reservation_repo.recent(RECENT_RESERVATIONS_LIMIT)

        return {
            'total': self.reservation_repo.count(),
            'byPlan': {value: by_plan.get(value, 0) for value in enum_values(Plan)},
            'byAge': {value: by_age.get(value, 0) for value in enum_values(AgeBand)},
            'byGender': {value: by_gender.get(value, 0) for value in enum_values(Gender)},
            'recentReservations': self.record_schema.dump(recent, many=True),
        }

    def _store_with_unique_number(self, data: Dict[str, Any], metadata: ReservationMetadata) -> Reservation:
        """Insert the reservation, moving to the next millisecond when its number is taken"""
        reservation_id = self.reservation_repo.next_id()

        for attempt in range(1, RESERVATION_NUMBER_ATTEMPTS + 1):
            now = self.clock()
            reservation = Reservation(
                id=reservation_id,
                reservation_number=build_reservation_number(now),
                phone=data['phone'],
                nickname=data['nickname'],
                gender=data['gender'],
                age=data['age'],
                plan=data['plan'],
                status=ReservationStatus.PENDING,
                created_at=now,
                updated_at=now,
                metadata=metadata,
            )
            try:
                return self.reservation_repo.add(reservation)
            except ReservationNumberConflictError:
                logger.warning(
                    f"Reservation number {reservation.reservation_number} already taken "
                    f"(attempt {attempt}/{RESERVATION_NUMBER_ATTEMPTS})"
                )
                time.sleep(0.001)

        raise ReservationNumberConflictError(reservation.reservation_number)

    @staticmethod
    def _format_errors(messages: Dict[str, List[str]], payload: Dict[str, Any]) -> List[Dict[str, Any]]:
        errors = []
        for field_name in VALIDATED_FIELDS:
            for message in messages.get(field_name, []):
                errors.append({
                    'type': 'field',
                    'path': field_name,
                    'msg': message,
                    'location': 'body',
                    'value': payload.get(field_name),
                })
        return errors
