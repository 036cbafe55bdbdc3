"""
Clients for the external services the chatbot depends on.
"""
from csbot.gateways.errors import GatewayError, LLMGatewayError, MessagingGatewayError
from csbot.gateways.llm import LLMGateway
from csbot.gateways.messaging import WhatsAppGateway

__all__ = [
    'GatewayError',
    'LLMGatewayError',
    'MessagingGatewayError',
    'LLMGateway',
    'WhatsAppGateway',
]
