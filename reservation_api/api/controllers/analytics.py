"""
Analytics Controller - Accepts client-side tracking events
"""

from flask import Blueprint, jsonify, request
from reservation_api.api.dependencies import get_analytics_service, get_json_body
from reservation_api.utils.schemas import AnalyticsEventSchema

# Create blueprint
analytics_bp = Blueprint('analytics', __name__)

analytics_event_schema = AnalyticsEventSchema()

EVENT_RECORDED_MESSAGE = '事件已记录'


@analytics_bp.route('/analytics', methods=['POST'])
def track_event():
    """Log an analytics event; always reports success"""
    event = analytics_event_schema.load(get_json_body())

    get_analytics_service().track_event(
        event['event_name'],
        event['event_params'],
        timestamp=event['timestamp'],
        ip=request.remote_addr or ''
    )

    return jsonify({'success': True, 'message': EVENT_RECORDED_MESSAGE}), 200
