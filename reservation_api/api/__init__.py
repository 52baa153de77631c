"""
HTTP layer - Blueprints, middlewares and request helpers
"""
