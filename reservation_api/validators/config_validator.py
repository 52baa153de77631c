"""
Configuration Validator
Validates the service's environment variables at startup and fails fast
on invalid values.

NOTE: runs before logging is configured, so results go straight to the console.
"""

import os
import re
import sys
from urllib.parse import urlparse

GREEN = "\033[92m"
YELLOW = "\033[93m"
RED = "\033[91m"
CYAN = "\033[96m"
BOLD = "\033[1m"
RESET = "\033[0m"

# e.g. "100 per 15 minutes", "10/minute", "5 per hour"
RATE_LIMIT_PATTERN = re.compile(
    r'^\s*\d+\s*(/|per)\s*(\d+\s*)?(second|minute|hour|day|month|year)s?\s*$',
    re.IGNORECASE
)


def _emit(message: str, color: str, bold: bool = False, stream=None):
    stream = stream or sys.stdout
    if stream.isatty():
        style = BOLD if bold else ""
        print(f"{style}{color}{message}{RESET}", file=stream)
    else:
        print(message, file=stream)


def is_valid_url(url: str) -> bool:
    """Validates a URL format"""
    try:
        result = urlparse(url)
        return all([result.scheme, result.netloc])
    except ValueError:
        return False


def is_valid_port(port: str) -> bool:
    """Validates a port number"""
    try:
        port_num = int(port)
        return 0 < port_num <= 65535
    except (ValueError, TypeError):
        return False


def is_valid_log_level(level: str) -> bool:
    return level.upper() in ['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']


def is_valid_environment(env: str) -> bool:
    return env.lower() in ['development', 'production', 'test', 'testing', 'staging']


def is_valid_rate_limit(value: str) -> bool:
    return bool(RATE_LIMIT_PATTERN.match(value))


def is_valid_cors_origins(value: str) -> bool:
    return all(
        origin.strip() == '*' or is_valid_url(origin.strip())
        for origin in value.split(',')
    )


# Configuration validation rules
VALIDATION_RULES = {
    'FLASK_ENV': {
        'required': False,
        'validator': is_valid_environment,
        'error_message': 'FLASK_ENV must be one of: development, production, test, testing, staging',
        'default': 'production',
    },
    'HOST': {
        'required': False,
        'validator': lambda v: len(v.strip()) > 0,
        'error_message': 'HOST must be a non-empty string',
        'default': '0.0.0.0',
    },
    'PORT': {
        'required': False,
        'validator': is_valid_port,
        'error_message': 'PORT must be a valid port number',
        'default': '3000',
    },
    'LOG_LEVEL': {
        'required': False,
        'validator': is_valid_log_level,
        'error_message': 'LOG_LEVEL must be one of: DEBUG, INFO, WARNING, ERROR, CRITICAL',
        'default': 'INFO',
    },
    'CORS_ORIGINS': {
        'required': False,
        'validator': is_valid_cors_origins,
        'error_message': 'CORS_ORIGINS must be a comma-separated list of valid URLs or *',
        'default': '*',
    },
    'API_RATE_LIMIT': {
        'required': False,
        'validator': is_valid_rate_limit,
        'error_message': 'API_RATE_LIMIT must look like "100 per 15 minutes"',
        'default': '100 per 15 minutes',
    },
    'SECRET_KEY': {
        'required': False,
        'validator': lambda v: len(v) >= 16,
        'error_message': 'SECRET_KEY must be at least 16 characters long',
    },
}


def collect_config_problems(environ=None):
    """
    Check environ against VALIDATION_RULES.

    Returns (errors, warnings). Missing optional values with a default are
    written back into environ.
    """
    environ = os.environ if environ is None else environ
    errors = []
    warnings = []

    for key, rule in VALIDATION_RULES.items():
        value = environ.get(key)

        if rule['required'] and not value:
            errors.append(f"{key} is required but not set")
            continue

        if not value:
            if 'default' in rule:
                warnings.append(f"{key} not set, using default: {rule['default']}")
                environ[key] = rule['default']
            continue

        if not rule['validator'](value):
            errors.append(f"{key}: {rule['error_message']}")
            if 'SECRET' in key:
                errors.append("   Current value: ***")
            elif len(value) > 100:
                errors.append(f"   Current value: {value[:100]}...")
            else:
                errors.append(f"   Current value: {value}")

    return errors, warnings


def validate_config(environ=None):
    """
    Validates environment variables according to the rules
    Raises SystemExit if any variable is invalid
    """
    _emit('[CONFIG] Validating environment configuration...', CYAN, bold=True)

    errors, warnings = collect_config_problems(environ)

    for warning in warnings:
        _emit(f"⚠️  {warning}", YELLOW)

    if errors:
        _emit('❌ [CONFIG] Configuration validation failed:', RED, bold=True)
        for error in errors:
            _emit(error, RED, stream=sys.stderr)
        _emit('Please check your .env file and ensure all variables are set correctly.', RED, stream=sys.stderr)
        sys.exit(1)

    _emit('✅ [CONFIG] Environment configuration is valid', GREEN, bold=True)
