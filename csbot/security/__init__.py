"""
Security module for the application.

This module provides:
- Security headers for API responses
- Security logging for rejected requests
"""

from .security_headers import SecurityHeaders
from .security_logger import SecurityLogger
from flask import Flask


def init_security(app: Flask):
    """
    Initialize all security features for the Flask app.

    Args:
        app: Flask application instance
    """
    SecurityHeaders.init_app(app)
    app.logger.debug("Security features initialized")


__all__ = [
    'SecurityHeaders',
    'SecurityLogger',
    'init_security',
]
