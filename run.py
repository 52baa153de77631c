#!/usr/bin/env python3
"""
Reservation Service
Flask-based service that records plan reservations and serves lookup and statistics endpoints.
"""

import os
import logging
from dotenv import load_dotenv

# Load environment variables
load_dotenv()

# Validate configuration before anything reads it
from reservation_api.validators.config_validator import validate_config
validate_config()

from reservation_api import create_app
from reservation_api.api.middlewares import init_correlation_id_logging

# Configure logging
logging.basicConfig(
    level=getattr(logging, os.environ.get('LOG_LEVEL', 'INFO').upper()),
    format='%(asctime)s - %(name)s - %(levelname)s - [%(correlation_id)s] %(message)s'
)
init_correlation_id_logging()

logger = logging.getLogger(__name__)


def main():
    """Main application entry point."""
    env = os.environ.get('FLASK_ENV', 'production')

    logger.info(f"Starting Reservation Service in {env} mode")

    app = create_app(env)

    host = app.config['HOST']
    port = app.config['PORT']
    debug = env == 'development'

    logger.info(f"Reservation Service running on http://localhost:{port}")
    logger.info(f"Stats endpoint: http://localhost:{port}/api/stats")
    logger.info(f"Health check: http://localhost:{port}/api/health")

    app.run(
        host=host,
        port=port,
        debug=debug,
        threaded=True
    )


if __name__ == '__main__':
    main()
