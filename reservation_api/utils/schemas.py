from marshmallow import Schema, fields, validate, post_load, EXCLUDE

from reservation_api.models import Gender, AgeBand, Plan, ReservationStatus, enum_values, to_iso

# Mainland China mobile numbers, optionally prefixed with +86 / 0086
PHONE_PATTERN = r'^((\+|00)86)?(1[3-9]|9[28])\d{9}\Z'

PHONE_MESSAGE = '请输入有效的手机号'
NICKNAME_MESSAGE = '昵称长度应为2-12个字符'
GENDER_MESSAGE = '请选择性别'
AGE_MESSAGE = '请选择年龄段'
PLAN_MESSAGE = '请选择套餐'

NICKNAME_MIN_LENGTH = 2
NICKNAME_MAX_LENGTH = 12


class FormString(fields.Str):
    """String field that also takes JSON numbers, read as their decimal text"""

    def _deserialize(self, value, attr, data, **kwargs):
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            value = str(int(value)) if float(value).is_integer() else str(value)
        return super()._deserialize(value, attr, data, **kwargs)


def required_string(message, validator):
    """A required string field that reports every failure with the same message"""
    return FormString(
        required=True,
        validate=validator,
        error_messages={
            'required': message,
            'null': message,
            'invalid': message,
            'invalid_utf8': message,
        }
    )


class MetadataString(fields.Field):
    """Free-form attribution value: falsy input becomes '', anything else its str()"""

    def _deserialize(self, value, attr, data, **kwargs):
        return str(value) if value else ''


class ReservationRequestSchema(Schema):
    """Schema for creating reservations"""

    class Meta:
        unknown = EXCLUDE

    phone = required_string(PHONE_MESSAGE, validate.Regexp(PHONE_PATTERN, error=PHONE_MESSAGE))
    nickname = required_string(
        NICKNAME_MESSAGE,
        validate.Length(min=NICKNAME_MIN_LENGTH, max=NICKNAME_MAX_LENGTH, error=NICKNAME_MESSAGE)
    )
    gender = required_string(GENDER_MESSAGE, validate.OneOf(enum_values(Gender), error=GENDER_MESSAGE))
    age = required_string(AGE_MESSAGE, validate.OneOf(enum_values(AgeBand), error=AGE_MESSAGE))
    plan = required_string(PLAN_MESSAGE, validate.OneOf(enum_values(Plan), error=PLAN_MESSAGE))

    referrer = MetadataString(load_default='', allow_none=True)
    utm_source = MetadataString(load_default='', allow_none=True)
    utm_medium = MetadataString(load_default='', allow_none=True)
    utm_campaign = MetadataString(load_default='', allow_none=True)

    @post_load
    def blank_missing_metadata(self, data, **kwargs):
        for key in ('referrer', 'utm_source', 'utm_medium', 'utm_campaign'):
            data[key] = data.get(key) or ''
        return data


class AnalyticsEventSchema(Schema):
    """Analytics events are accepted as-is; nothing here can fail for an object body"""

    class Meta:
        unknown = EXCLUDE

    event_name = fields.Raw(data_key='eventName', load_default=None)
    event_params = fields.Raw(data_key='eventParams', load_default=None)
    timestamp = fields.Raw(load_default=None)


class ReservationCreatedSchema(Schema):
    """Schema for the body returned after a reservation is created"""
    reservation_number = fields.Str(data_key='reservationNumber')
    plan = fields.Str()
    created_at = fields.Function(lambda obj: to_iso(obj.created_at), data_key='createdAt')


class ReservationLookupSchema(ReservationCreatedSchema):
    """Schema for public reservation lookups"""
    nickname = fields.Str()
    status = fields.Enum(ReservationStatus, by_value=True)


class ReservationMetadataSchema(Schema):
    user_agent = fields.Str(data_key='userAgent')
    ip = fields.Str()
    referrer = fields.Str()
    utm_source = fields.Str()
    utm_medium = fields.Str()
    utm_campaign = fields.Str()


class ReservationResponseSchema(Schema):
    """Full reservation record, as listed in the statistics view"""
    id = fields.Int()
    reservation_number = fields.Str(data_key='reservationNumber')
    phone = fields.Str()
    nickname = fields.Str()
    gender = fields.Str()
    age = fields.Str()
    plan = fields.Str()
    status = fields.Enum(ReservationStatus, by_value=True)
    created_at = fields.Function(lambda obj: to_iso(obj.created_at), data_key='createdAt')
    updated_at = fields.Function(lambda obj: to_iso(obj.updated_at), data_key='updatedAt')
    metadata = fields.Nested(ReservationMetadataSchema)
