import pytest
import logging
import re
from datetime import datetime, timezone

from reservation_api.models import ReservationStatus
from reservation_api.services import ReservationService
from reservation_api.utils.exceptions import (
    DuplicateReservationError, ReservationNotFoundError, ReservationNumberConflictError,
    ReservationValidationError
)
from reservation_api.utils.schemas import (
    AGE_MESSAGE, GENDER_MESSAGE, NICKNAME_MESSAGE, PHONE_MESSAGE, PLAN_MESSAGE
)


class TestReservationServiceCreate:
    """Test ReservationService.create_reservation."""

    def test_create_valid_reservation(self, service, repository, make_payload):
        reservation = service.create_reservation(make_payload(), user_agent='pytest', ip='10.0.0.1')

        assert re.fullmatch(r'XD\d{8}', reservation.reservation_number)
        assert reservation.status == ReservationStatus.PENDING
        assert reservation.id == 1
        assert reservation.created_at == reservation.updated_at
        assert reservation.metadata.user_agent == 'pytest'
        assert reservation.metadata.ip == '10.0.0.1'
        assert repository.count() == 1

    def test_created_reservation_can_be_looked_up(self, service, make_payload):
        created = service.create_reservation(make_payload(nickname='小红', plan='yearly'))

        found = service.get_reservation(created.reservation_number)

        assert found.nickname == '小红'
        assert found.plan == 'yearly'
        assert found.status == ReservationStatus.PENDING

    def test_attribution_fields_default_to_empty(self, service, make_payload):
        reservation = service.create_reservation(make_payload())

        metadata = reservation.metadata
        assert (metadata.referrer, metadata.utm_source, metadata.utm_medium, metadata.utm_campaign) == ('', '', '', '')

    def test_attribution_fields_are_captured(self, service, make_payload):
        reservation = service.create_reservation(make_payload(
            referrer='https://example.com/landing',
            utm_source='wechat',
            utm_medium='social',
            utm_campaign=None,
        ))

        assert reservation.metadata.referrer == 'https://example.com/landing'
        assert reservation.metadata.utm_source == 'wechat'
        assert reservation.metadata.utm_medium == 'social'
        assert reservation.metadata.utm_campaign == ''

    def test_unknown_fields_are_ignored(self, service, make_payload):
        reservation = service.create_reservation(make_payload(status='paid', id=99))

        assert reservation.status == ReservationStatus.PENDING
        assert reservation.id == 1

    def test_duplicate_phone_rejected(self, service, repository, make_payload):
        service.create_reservation(make_payload())

        with pytest.raises(DuplicateReservationError) as exc_info:
            service.create_reservation(make_payload(nickname='另一个人', plan='yearly'))

        assert exc_info.value.message == '该手机号已预约'
        assert exc_info.value.status_code == 400
        assert repository.count() == 1

    def test_every_invalid_field_reported(self, service, repository):
        payload = {'phone': '12345', 'nickname': 'a', 'gender': 'other', 'age': '40', 'plan': 'weekly'}

        with pytest.raises(ReservationValidationError) as exc_info:
            service.create_reservation(payload)

        errors = exc_info.value.errors
        assert [e['path'] for e in errors] == ['phone', 'nickname', 'gender', 'age', 'plan']
        assert [e['msg'] for e in errors] == [
            PHONE_MESSAGE, NICKNAME_MESSAGE, GENDER_MESSAGE, AGE_MESSAGE, PLAN_MESSAGE
        ]
        assert errors[1]['value'] == 'a'
        assert repository.count() == 0

    def test_missing_fields_reported(self, service):
        with pytest.raises(ReservationValidationError) as exc_info:
            service.create_reservation({})

        assert len(exc_info.value.errors) == 5
        assert all(e['location'] == 'body' for e in exc_info.value.errors)

    def test_non_object_payload_reports_all_fields(self, service):
        with pytest.raises(ReservationValidationError) as exc_info:
            service.create_reservation(['not', 'an', 'object'])

        assert len(exc_info.value.errors) == 5

    def test_single_invalid_field(self, service, make_payload):
        with pytest.raises(ReservationValidationError) as exc_info:
            service.create_reservation(make_payload(nickname='a'))

        assert exc_info.value.errors == [{
            'type': 'field',
            'path': 'nickname',
            'msg': NICKNAME_MESSAGE,
            'location': 'body',
            'value': 'a',
        }]

    def test_logs_created_reservation(self, service, make_payload, caplog):
        with caplog.at_level(logging.INFO, logger='reservation_api.services.reservation_service'):
            reservation = service.create_reservation(make_payload())

        assert reservation.reservation_number in caplog.text
        assert '13800138000' in caplog.text
        assert 'monthly' in caplog.text

    def test_number_conflict_moves_to_next_millisecond(self, repository, make_payload):
        times = iter([
            datetime(2026, 10, 19, 8, 0, 0, 1000, tzinfo=timezone.utc),
            datetime(2026, 10, 19, 8, 0, 0, 1000, tzinfo=timezone.utc),
            datetime(2026, 10, 19, 8, 0, 0, 2000, tzinfo=timezone.utc),
        ])
        service = ReservationService(repository, clock=lambda: next(times))

        first = service.create_reservation(make_payload(phone='13900000001'))
        second = service.create_reservation(make_payload(phone='13900000002'))

        assert first.reservation_number != second.reservation_number
        assert repository.count() == 2

    def test_number_conflict_gives_up_after_retries(self, repository, make_payload):
        frozen = datetime(2026, 10, 19, 8, 0, 0, tzinfo=timezone.utc)
        service = ReservationService(repository, clock=lambda: frozen)
        service.create_reservation(make_payload(phone='13900000001'))

        with pytest.raises(ReservationNumberConflictError):
            service.create_reservation(make_payload(phone='13900000002'))

        assert repository.count() == 1


class TestReservationServiceLookup:

    def test_get_missing_reservation(self, service):
        with pytest.raises(ReservationNotFoundError) as exc_info:
            service.get_reservation('XD00000000')

        assert exc_info.value.status_code == 404
        assert exc_info.value.message == '预约不存在'


class TestReservationServiceStats:
    """Test ReservationService.compute_stats."""

    def test_empty_store(self, service):
        stats = service.compute_stats()

        assert stats == {
            'total': 0,
            'byPlan': {'monthly': 0, 'quarterly': 0, 'yearly': 0},
            'byAge': {'18-22': 0, '23-28': 0, '29-35': 0, '35+': 0},
            'byGender': {'male': 0, 'female': 0},
            'recentReservations': [],
        }

    def test_breakdowns_sum_to_total(self, service, make_payload, phone_for):
        plans = ['monthly', 'quarterly', 'yearly']
        ages = ['18-22', '23-28', '29-35', '35+']
        genders = ['male', 'female']
        for i in range(7):
            service.create_reservation(make_payload(
                phone=phone_for(i),
                plan=plans[i % 3],
                age=ages[i % 4],
                gender=genders[i % 2],
            ))

        stats = service.compute_stats()

        assert stats['total'] == 7
        assert sum(stats['byPlan'].values()) == 7
        assert sum(stats['byAge'].values()) == 7
        assert sum(stats['byGender'].values()) == 7
        assert stats['byPlan'] == {'monthly': 3, 'quarterly': 2, 'yearly': 2}
        assert stats['byGender'] == {'male': 4, 'female': 3}

    def test_recent_reservations_newest_first(self, service, make_payload, phone_for):
        created = [
            service.create_reservation(make_payload(phone=phone_for(i)))
            for i in range(12)
        ]

        recent = service.compute_stats()['recentReservations']

        expected = [r.reservation_number for r in reversed(created[-10:])]
        assert [r['reservationNumber'] for r in recent] == expected

    def test_recent_reservations_are_full_records(self, service, make_payload):
        service.create_reservation(make_payload(utm_source='douyin'), user_agent='pytest', ip='10.0.0.2')

        record = service.compute_stats()['recentReservations'][0]

        assert record['phone'] == '13800138000'
        assert record['status'] == 'pending'
        assert record['createdAt'] == record['updatedAt']
        assert record['createdAt'].endswith('Z')
        assert record['metadata'] == {
            'userAgent': 'pytest',
            'ip': '10.0.0.2',
            'referrer': '',
            'utm_source': 'douyin',
            'utm_medium': '',
            'utm_campaign': '',
        }


class TestAnalyticsService:
    """Test AnalyticsService.track_event."""

    def test_uses_client_timestamp(self, analytics_service):
        event = analytics_service.track_event('page_view', {'page': '/'}, timestamp='2026-01-01T00:00:00.000Z', ip='1.2.3.4')

        assert event == {
            'event': 'page_view',
            'params': {'page': '/'},
            'timestamp': '2026-01-01T00:00:00.000Z',
            'ip': '1.2.3.4',
        }

    def test_defaults_timestamp_to_server_time(self, analytics_service):
        event = analytics_service.track_event('click_plan')

        assert event['timestamp'] == '2026-10-19T08:00:00.000Z'
        assert event['params'] is None

    def test_logs_event(self, analytics_service, caplog):
        with caplog.at_level(logging.INFO, logger='reservation_api.services.analytics_service'):
            analytics_service.track_event('submit_form', {'plan': 'yearly'}, ip='1.2.3.4')

        assert 'submit_form' in caplog.text
        assert '1.2.3.4' in caplog.text
