import pytest
from marshmallow import ValidationError

from reservation_api.utils.schemas import (
    AnalyticsEventSchema, ReservationRequestSchema,
    NICKNAME_MESSAGE, PHONE_MESSAGE, PLAN_MESSAGE
)


@pytest.fixture
def schema():
    return ReservationRequestSchema()


class TestReservationRequestSchema:
    """Test field rules of ReservationRequestSchema."""

    @pytest.mark.parametrize('phone', [
        '13800138000',
        '19912345678',
        '+8613800138000',
        '008615912345678',
    ])
    def test_accepts_mainland_mobile_numbers(self, schema, make_payload, phone):
        assert schema.load(make_payload(phone=phone))['phone'] == phone

    @pytest.mark.parametrize('phone', [
        '',
        '12800138000',
        '1380013800',
        '138001380001',
        '1380013800a',
        '+8513800138000',
        '010-12345678',
    ])
    def test_rejects_invalid_phone(self, schema, make_payload, phone):
        with pytest.raises(ValidationError) as exc_info:
            schema.load(make_payload(phone=phone))

        assert exc_info.value.messages == {'phone': [PHONE_MESSAGE]}

    def test_numeric_phone_read_as_text(self, schema, make_payload):
        assert schema.load(make_payload(phone=13800138000))['phone'] == '13800138000'

    def test_numeric_nickname_read_as_text(self, schema, make_payload):
        assert schema.load(make_payload(nickname=2024))['nickname'] == '2024'

    @pytest.mark.parametrize('phone', [True, ['13800138000'], {'number': '13800138000'}])
    def test_rejects_non_scalar_phone(self, schema, make_payload, phone):
        with pytest.raises(ValidationError) as exc_info:
            schema.load(make_payload(phone=phone))

        assert exc_info.value.messages == {'phone': [PHONE_MESSAGE]}

    @pytest.mark.parametrize('nickname', ['小明', 'ab', '一二三四五六七八九十一二', 'abcdefghijkl'])
    def test_nickname_length_bounds_accepted(self, schema, make_payload, nickname):
        assert schema.load(make_payload(nickname=nickname))['nickname'] == nickname

    @pytest.mark.parametrize('nickname', ['a', '', 'abcdefghijklm', None])
    def test_nickname_length_bounds_rejected(self, schema, make_payload, nickname):
        with pytest.raises(ValidationError) as exc_info:
            schema.load(make_payload(nickname=nickname))

        assert exc_info.value.messages == {'nickname': [NICKNAME_MESSAGE]}

    def test_missing_plan_uses_fixed_message(self, schema, make_payload):
        payload = make_payload()
        del payload['plan']

        with pytest.raises(ValidationError) as exc_info:
            schema.load(payload)

        assert exc_info.value.messages == {'plan': [PLAN_MESSAGE]}

    def test_metadata_values_are_stringified(self, schema, make_payload):
        data = schema.load(make_payload(utm_campaign=2026, referrer=0))

        assert data['utm_campaign'] == '2026'
        assert data['referrer'] == ''


class TestAnalyticsEventSchema:

    def test_loads_known_keys(self):
        data = AnalyticsEventSchema().load({
            'eventName': 'page_view',
            'eventParams': {'page': '/pricing'},
            'timestamp': 1700000000000,
            'extra': 'ignored',
        })

        assert data == {
            'event_name': 'page_view',
            'event_params': {'page': '/pricing'},
            'timestamp': 1700000000000,
        }

    def test_empty_body_never_fails(self):
        assert AnalyticsEventSchema().load({}) == {
            'event_name': None,
            'event_params': None,
            'timestamp': None,
        }
