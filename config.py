import os


def get_cors_origins():
    """Parse CORS_ORIGINS (comma separated) into a list, '*' by default"""
    value = os.environ.get('CORS_ORIGINS', '*')
    return [origin.strip() for origin in value.split(',') if origin.strip()] or ['*']


class Config:
    """Base configuration"""

    # Flask
    SECRET_KEY = os.environ.get('SECRET_KEY') or 'dev-secret-key-change-in-production'

    # Server
    HOST = os.environ.get('HOST', '0.0.0.0')
    PORT = int(os.environ.get('PORT', 3000))

    # CORS
    CORS_ORIGINS = get_cors_origins()

    # Rate limiting (Flask-Limiter), shared by every /api route per client IP
    API_RATE_LIMIT = os.environ.get('API_RATE_LIMIT', '100 per 15 minutes')
    RATELIMIT_ENABLED = True
    RATELIMIT_STORAGE_URI = os.environ.get('RATELIMIT_STORAGE_URI', 'memory://')
    RATELIMIT_HEADERS_ENABLED = True

    # Logging
    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO')


class DevelopmentConfig(Config):
    """Development configuration"""
    DEBUG = True
    LOG_LEVEL = 'DEBUG'


class TestingConfig(Config):
    """Testing configuration"""
    TESTING = True
    # Individual tests switch the limiter back on when they need it
    RATELIMIT_ENABLED = False


class ProductionConfig(Config):
    """Production configuration"""
    DEBUG = False


config = {
    'development': DevelopmentConfig,
    'testing': TestingConfig,
    'test': TestingConfig,
    'staging': ProductionConfig,
    'production': ProductionConfig,
    'default': DevelopmentConfig
}
