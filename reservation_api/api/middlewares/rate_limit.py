"""
Rate limiting middleware for the reservation service
Implements per-IP request rate limiting using Flask-Limiter
"""

import logging
import warnings
from flask import g, request
from flask_limiter import Limiter
from flask_limiter.util import get_remote_address

logger = logging.getLogger(__name__)

# Suppress Flask-Limiter in-memory storage warning (single instance deployment)
warnings.filterwarnings('ignore', message='.*in-memory storage.*', module='flask_limiter')

DEFAULT_API_RATE_LIMIT = '100 per 15 minutes'


def init_rate_limiter(app):
    """Initialize a limiter whose single budget is shared by every route, keyed by client IP"""
    rate_limit = app.config.get('API_RATE_LIMIT', DEFAULT_API_RATE_LIMIT)

    limiter = Limiter(
        get_rate_limit_key,
        app=app,
        application_limits=[rate_limit],
        headers_enabled=app.config.get('RATELIMIT_HEADERS_ENABLED', True),
        storage_uri=app.config.get('RATELIMIT_STORAGE_URI', 'memory://'),
        enabled=app.config.get('RATELIMIT_ENABLED', True),
        strategy='fixed-window',
        on_breach=rate_limit_breach_handler
    )

    logger.info(f"Rate limiter enabled={limiter.enabled} limit='{rate_limit}'")
    return limiter


def get_rate_limit_key():
    """Rate limit bucket for the current request"""
    return f"ip:{get_remote_address()}"


def rate_limit_breach_handler(request_limit):
    """Log rate limit breaches; the 429 body comes from the error handlers"""
    logger.warning(
        "Rate limit exceeded",
        extra={
            'ip': get_remote_address(),
            'client_correlation_id': getattr(g, 'correlation_id', 'unknown'),
            'path': request.path,
            'method': request.method,
            'user_agent': request.headers.get('User-Agent'),
            'limit': str(request_limit.limit),
        }
    )
