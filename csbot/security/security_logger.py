"""
Security logging module.

Logs rejected or suspicious inbound requests for monitoring.
"""

from flask import request, current_app
from datetime import datetime
import json


class SecurityLogger:
    """Security event logger."""

    @staticmethod
    def log_invalid_webhook(reason: str):
        """
        Log a webhook call whose envelope could not be parsed.

        Args:
            reason: Why the envelope was rejected
        """
        current_app.logger.warning(
            f"SECURITY: Invalid webhook payload - IP: {request.remote_addr}, "
            f"Reason: {reason}, Time: {datetime.utcnow().isoformat()}"
        )

    @staticmethod
    def log_invalid_request(endpoint: str, details: dict):
        """
        Log a request body that failed validation.

        Args:
            endpoint: Endpoint that received the request
            details: Additional details as dictionary
        """
        current_app.logger.warning(
            f"SECURITY: Invalid request - Endpoint: {endpoint}, "
            f"IP: {request.remote_addr}, Details: {json.dumps(details)}, "
            f"Time: {datetime.utcnow().isoformat()}"
        )
