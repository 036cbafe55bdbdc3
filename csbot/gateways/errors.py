class GatewayError(Exception):
    """Raised when an external service call fails."""


class LLMGatewayError(GatewayError):
    """The LLM provider could not produce a completion."""

    def __init__(self, message: str, model_unavailable: bool = False):
        super().__init__(message)
        self.model_unavailable = model_unavailable


class MessagingGatewayError(GatewayError):
    """The messaging provider did not accept the outbound message."""

    def __init__(self, message: str, status_code=None):
        super().__init__(message)
        self.status_code = status_code
