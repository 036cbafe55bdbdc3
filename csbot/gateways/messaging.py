"""
WhatsApp delivery through Brevo's transactional WhatsApp API.
"""
import logging

import requests

from csbot.gateways.errors import MessagingGatewayError

logger = logging.getLogger(__name__)


class WhatsAppGateway:
    """Sends plain-text WhatsApp messages on behalf of the business account."""

    def __init__(self, api_key: str, sender: str, url: str, timeout: float = 10, session=None):
        self.sender = sender
        self.url = url
        self.timeout = timeout
        self._api_key = api_key
        self._session = session or requests.Session()

    def send_text(self, to: str, body: str) -> dict:
        """
        Deliver ``body`` to the WhatsApp number ``to``.

        Returns:
            The provider's JSON acknowledgement (empty dict if none)

        Raises:
            MessagingGatewayError: transport failure or non-2xx response
        """
        payload = {
            "to": to,
            "from": self.sender,
            "type": "text",
            "text": {"body": body},
        }
        headers = {
            "accept": "application/json",
            "api-key": self._api_key,
            "content-type": "application/json",
        }
        try:
            response = self._session.post(self.url, json=payload, headers=headers, timeout=self.timeout)
        except requests.RequestException as e:
            logger.error(f"WhatsApp send to {to} failed: {e}")
            raise MessagingGatewayError(str(e)) from e

        if not response.ok:
            logger.error(f"WhatsApp send to {to} rejected: {response.status_code} {response.text[:200]}")
            raise MessagingGatewayError(
                f"Brevo responded with HTTP {response.status_code}",
                status_code=response.status_code,
            )

        logger.info(f"WhatsApp message delivered to {to}")
        try:
            return response.json()
        except ValueError:
            return {}
