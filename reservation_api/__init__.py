import logging
from flask import Flask
from flask_cors import CORS

from reservation_api.api.dependencies import ANALYTICS_SERVICE_KEY, RESERVATION_SERVICE_KEY
from reservation_api.repositories import ReservationRepository
from reservation_api.services import AnalyticsService, ReservationService

logger = logging.getLogger(__name__)


def create_app(config_name='default', test_config=None, reservation_repo=None):
    """Application factory pattern"""
    app = Flask(__name__)

    # Load configuration
    from config import config
    app.config.from_object(config[config_name])
    if test_config:
        app.config.update(test_config)

    # Keep Chinese messages readable in responses
    app.json.ensure_ascii = False

    # Initialize correlation ID and security header middleware
    from reservation_api.api.middlewares import CorrelationIdMiddleware, SecurityHeadersMiddleware
    CorrelationIdMiddleware(app)
    SecurityHeadersMiddleware(app)

    # CORS setup
    CORS(app, resources={r'/api/*': {'origins': app.config.get('CORS_ORIGINS', ['*'])}})

    # Rate limiting for every API route
    from reservation_api.api.middlewares import init_rate_limiter
    app.extensions['limiter'] = init_rate_limiter(app)

    # Services share one store for the lifetime of the app
    repository = reservation_repo if reservation_repo is not None else ReservationRepository()
    app.extensions[RESERVATION_SERVICE_KEY] = ReservationService(repository)
    app.extensions[ANALYTICS_SERVICE_KEY] = AnalyticsService()

    # Register API blueprints
    from reservation_api.api.controllers import health_bp, reservations_bp, stats_bp, analytics_bp, fallback_bp
    for blueprint in (health_bp, reservations_bp, stats_bp, analytics_bp, fallback_bp):
        app.register_blueprint(blueprint, url_prefix='/api')
    logger.debug("Reservation API blueprints registered")

    # Register error handlers
    from reservation_api.utils.error_handlers import register_error_handlers
    register_error_handlers(app)

    return app
