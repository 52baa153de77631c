"""
Domain errors raised by the reservation service
"""

# User-facing messages
DUPLICATE_PHONE_MESSAGE = '该手机号已预约'
NOT_FOUND_MESSAGE = '预约不存在'
CREATE_FAILED_MESSAGE = '服务器错误，请稍后重试'


class ReservationError(Exception):
    """Base class for reservation errors"""
    status_code = 500
    message = CREATE_FAILED_MESSAGE

    def __init__(self, message=None):
        super().__init__(message or self.message)
        if message:
            self.message = message


class ReservationValidationError(ReservationError):
    """One or more request fields failed validation"""
    status_code = 400
    message = 'Validation failed'

    def __init__(self, errors):
        super().__init__()
        self.errors = errors


class DuplicateReservationError(ReservationError):
    """The phone number already holds a reservation"""
    status_code = 400
    message = DUPLICATE_PHONE_MESSAGE

    def __init__(self, phone=None):
        super().__init__()
        self.phone = phone


class ReservationNotFoundError(ReservationError):
    status_code = 404
    message = NOT_FOUND_MESSAGE

    def __init__(self, reservation_number=None):
        super().__init__()
        self.reservation_number = reservation_number


class ReservationNumberConflictError(ReservationError):
    """A generated reservation number is already taken"""
    status_code = 500

    def __init__(self, reservation_number=None):
        super().__init__()
        self.reservation_number = reservation_number
