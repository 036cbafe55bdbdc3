"""
Chat module: answers student queries from the mobile app and WhatsApp.

Queries are routed to feedback logging, past exam question lookup
or the LLM.
"""
from flask import Blueprint

chat_bp = Blueprint('chat', __name__, url_prefix='/api/chat')

from csbot.chat import routes  # noqa: E402,F401
