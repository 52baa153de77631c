"""
Catch-all for unmatched /api paths and methods

Gives such requests an endpoint so the API rate limit counts them too.
"""

from flask import Blueprint, abort

fallback_bp = Blueprint('fallback', __name__)

ALL_METHODS = ['GET', 'POST', 'PUT', 'PATCH', 'DELETE']


@fallback_bp.route('/', defaults={'path': ''}, methods=ALL_METHODS)
@fallback_bp.route('/<path:path>', methods=ALL_METHODS)
def route_not_found(path):
    abort(404)
