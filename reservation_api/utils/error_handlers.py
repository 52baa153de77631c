from flask import jsonify, request
from werkzeug.exceptions import HTTPException
import logging

logger = logging.getLogger(__name__)

ROUTE_NOT_FOUND_MESSAGE = '接口不存在'
RATE_LIMITED_MESSAGE = '请求过于频繁，请稍后再试'
INTERNAL_ERROR_MESSAGE = '服务器内部错误'


def error_response(message, status_code, **extra):
    """Build the uniform failure body {success: false, error: ...}"""
    body = {'success': False, 'error': message}
    body.update(extra)
    return jsonify(body), status_code


def register_error_handlers(app):
    """Register application error handlers"""

    @app.errorhandler(404)
    def not_found(error):
        return error_response(ROUTE_NOT_FOUND_MESSAGE, 404)

    @app.errorhandler(405)
    def method_not_allowed(error):
        # Unknown method on a known path is just another missing route
        return error_response(ROUTE_NOT_FOUND_MESSAGE, 404)

    @app.errorhandler(429)
    def rate_limited(error):
        return error_response(RATE_LIMITED_MESSAGE, 429)

    @app.errorhandler(HTTPException)
    def http_exception(error):
        return error_response(error.name, error.code)

    @app.errorhandler(Exception)
    def internal_error(error):
        logger.error(f"Unhandled error on {request.method} {request.path}: {error}", exc_info=True)
        return error_response(INTERNAL_ERROR_MESSAGE, 500)
