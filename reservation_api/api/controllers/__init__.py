"""
Controllers package initialization
"""

# Import all blueprints for registration
from reservation_api.api.controllers.health import health_bp
from reservation_api.api.controllers.reservations import reservations_bp
from reservation_api.api.controllers.stats import stats_bp
from reservation_api.api.controllers.analytics import analytics_bp
from reservation_api.api.controllers.fallback import fallback_bp

__all__ = ['health_bp', 'reservations_bp', 'stats_bp', 'analytics_bp', 'fallback_bp']
