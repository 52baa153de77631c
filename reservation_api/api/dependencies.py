"""
Access to the service objects owned by the running application
"""

from flask import current_app, request

RESERVATION_SERVICE_KEY = 'reservation_service'
ANALYTICS_SERVICE_KEY = 'analytics_service'


def get_reservation_service():
    return current_app.extensions[RESERVATION_SERVICE_KEY]


def get_analytics_service():
    return current_app.extensions[ANALYTICS_SERVICE_KEY]


def get_json_body():
    """Parsed JSON object body; anything else (missing, malformed, non-object) reads as {}"""
    body = request.get_json(silent=True)
    return body if isinstance(body, dict) else {}
