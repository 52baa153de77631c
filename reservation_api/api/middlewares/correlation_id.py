"""
Correlation ID middleware for Flask application
Tags every request, its log lines and its response with a correlation ID
"""
import uuid
import logging
from contextvars import ContextVar
from flask import Response, g, has_request_context, request

logger = logging.getLogger(__name__)

CORRELATION_ID_HEADER = 'X-Correlation-ID'

# Context variable to store correlation ID for the current request
correlation_id_context: ContextVar[str] = ContextVar('correlation_id', default='')


class CorrelationIdMiddleware:
    """
    Flask middleware for handling correlation IDs
    """

    def __init__(self, app=None):
        self.app = app
        if app is not None:
            self.init_app(app)

    def init_app(self, app):
        """Initialize the middleware with Flask app"""
        app.before_request(self.before_request)
        app.after_request(self.after_request)

    def before_request(self):
        """Extract or generate correlation ID before request processing"""
        correlation_id = request.headers.get(CORRELATION_ID_HEADER) or str(uuid.uuid4())

        g.correlation_id = correlation_id
        correlation_id_context.set(correlation_id)

        logger.debug(f"{request.method} {request.path} - Processing request")

    def after_request(self, response: Response) -> Response:
        """Add correlation ID to response headers"""
        response.headers[CORRELATION_ID_HEADER] = get_correlation_id()

        logger.info(f"{request.method} {request.path} - Response: {response.status_code}")
        return response


class CorrelationIdFilter(logging.Filter):
    """Logging filter that exposes the correlation ID as %(correlation_id)s"""

    def filter(self, record):
        record.correlation_id = get_correlation_id()
        return True


def get_correlation_id() -> str:
    """Get current correlation ID from Flask g object or context"""
    if has_request_context() and hasattr(g, 'correlation_id'):
        return g.correlation_id
    return correlation_id_context.get() or 'unknown'


def init_correlation_id_logging(handlers=None):
    """
    Attach the correlation ID filter to the given handlers (root handlers by default)
    """
    correlation_filter = CorrelationIdFilter()
    for handler in handlers if handlers is not None else logging.getLogger().handlers:
        handler.addFilter(correlation_filter)
    return correlation_filter
