"""
Reservations Controller - Handles reservation submission and lookup
"""

from flask import Blueprint, jsonify, request
from reservation_api.api.dependencies import get_json_body, get_reservation_service
from reservation_api.utils.exceptions import (
    CREATE_FAILED_MESSAGE, DuplicateReservationError, ReservationNotFoundError,
    ReservationValidationError
)
from reservation_api.utils.schemas import ReservationCreatedSchema, ReservationLookupSchema
import logging

logger = logging.getLogger(__name__)

# Create blueprint
reservations_bp = Blueprint('reservations', __name__)

# Initialize schemas
reservation_created_schema = ReservationCreatedSchema()
reservation_lookup_schema = ReservationLookupSchema()


@reservations_bp.route('/reservations', methods=['POST'])
def create_reservation():
    """Create new reservation"""
    try:
        reservation = get_reservation_service().create_reservation(
            get_json_body(),
            user_agent=request.headers.get('User-Agent', ''),
            ip=request.remote_addr or ''
        )

        return jsonify({
            'success': True,
            'data': reservation_created_schema.dump(reservation)
        }), 201

    except ReservationValidationError as e:
        return jsonify({'success': False, 'errors': e.errors}), e.status_code
    except DuplicateReservationError as e:
        return jsonify({'success': False, 'error': e.message}), e.status_code
    except Exception as e:
        logger.error(f"Error creating reservation: {e}", exc_info=True)
        return jsonify({'success': False, 'error': CREATE_FAILED_MESSAGE}), 500


@reservations_bp.route('/reservations/<reservation_number>', methods=['GET'])
def get_reservation(reservation_number):
    """Get reservation by reservation number"""
    try:
        reservation = get_reservation_service().get_reservation(reservation_number)
    except ReservationNotFoundError as e:
        return jsonify({'success': False, 'error': e.message}), e.status_code

    return jsonify({
        'success': True,
        'data': reservation_lookup_schema.dump(reservation)
    }), 200
