"""
Model Enums
"""

from enum import Enum


class Gender(Enum):
    MALE = "male"
    FEMALE = "female"


class AgeBand(Enum):
    AGE_18_22 = "18-22"
    AGE_23_28 = "23-28"
    AGE_29_35 = "29-35"
    AGE_35_PLUS = "35+"


class Plan(Enum):
    MONTHLY = "monthly"
    QUARTERLY = "quarterly"
    YEARLY = "yearly"


class ReservationStatus(Enum):
    PENDING = "pending"
    PAID = "paid"
    CANCELLED = "cancelled"


def enum_values(enum_cls):
    """Ordered list of the raw values of an enum"""
    return [member.value for member in enum_cls]
