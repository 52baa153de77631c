"""
Health check endpoint for the reservation service
"""

from flask import Blueprint, jsonify
import time

from reservation_api.models import to_iso, utc_now

# Create blueprint for health endpoints
health_bp = Blueprint('health', __name__)

_started_at = time.monotonic()


def get_uptime() -> float:
    """Seconds since the service process loaded"""
    return time.monotonic() - _started_at


@health_bp.route('/health', methods=['GET'])
def health():
    """Main health check endpoint"""
    return jsonify({
        'status': 'ok',
        'timestamp': to_iso(utc_now()),
        'uptime': get_uptime(),
    }), 200
