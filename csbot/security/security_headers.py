"""
Security headers module.

Adds security headers to every response. The API only serves JSON and
plain text, so the policy denies everything a browser could load.
"""


class SecurityHeaders:
    """Security headers middleware."""

    @staticmethod
    def init_app(app):
        """
        Initialize security headers for the Flask app.

        Args:
            app: Flask application instance
        """
        @app.after_request
        def add_security_headers(response):
            """Add security headers to all responses."""
            response.headers['Content-Security-Policy'] = "default-src 'none'; frame-ancestors 'none'"
            response.headers['X-Content-Type-Options'] = 'nosniff'
            response.headers['X-Frame-Options'] = 'DENY'
            response.headers['Referrer-Policy'] = 'no-referrer'
            response.headers['Cache-Control'] = 'no-store'

            if 'Server' in response.headers:
                del response.headers['Server']

            return response
