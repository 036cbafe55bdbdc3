"""
Parsing of inbound WhatsApp webhook payloads.
"""
from typing import NamedTuple


class InvalidEnvelopeError(ValueError):
    """The webhook payload does not carry a text message."""


class InboundMessage(NamedTuple):
    sender: str
    text: str


def parse_whatsapp_envelope(payload) -> InboundMessage:
    """
    Pull the sender and text out of
    ``entry[0].changes[0].value.messages[0].{from, text.body}``.

    Raises:
        InvalidEnvelopeError: if any part of that path is missing or has the wrong type
    """
    try:
        message = payload['entry'][0]['changes'][0]['value']['messages'][0]
        sender = message['from']
        body = message['text']['body']
    except (KeyError, IndexError, TypeError) as e:
        raise InvalidEnvelopeError(f"missing field in webhook payload: {e!r}") from e

    if not isinstance(sender, str) or not sender.strip():
        raise InvalidEnvelopeError("sender is not a non-empty string")
    if not isinstance(body, str):
        raise InvalidEnvelopeError("message text is not a string")

    return InboundMessage(sender=sender.strip(), text=body.strip())
