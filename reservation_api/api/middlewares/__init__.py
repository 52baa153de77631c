from .correlation_id import CorrelationIdMiddleware, init_correlation_id_logging, get_correlation_id
from .security_headers import SecurityHeadersMiddleware
from .rate_limit import init_rate_limiter

__all__ = [
    'CorrelationIdMiddleware', 'init_correlation_id_logging', 'get_correlation_id',
    'SecurityHeadersMiddleware', 'init_rate_limiter'
]
