"""
Stats Controller - Provides reservation statistics for dashboards
"""

from flask import Blueprint, jsonify
from reservation_api.api.dependencies import get_reservation_service
import logging

logger = logging.getLogger(__name__)

# Create blueprint
stats_bp = Blueprint('stats', __name__)


@stats_bp.route('/stats', methods=['GET'])
def get_reservation_stats():
    """
    Get reservation statistics for admin dashboard

    Returns:
        JSON with reservation metrics:
        - total: Number of reservations
        - byPlan: Count per plan (monthly, quarterly, yearly)
        - byAge: Count per age band (18-22, 23-28, 29-35, 35+)
        - byGender: Count per gender (male, female)
        - recentReservations: Latest 10 reservations, newest first
    """
    stats = get_reservation_service().compute_stats()

    logger.debug(f"Stats retrieved: total={stats['total']}")
    return jsonify({'success': True, 'data': stats}), 200
