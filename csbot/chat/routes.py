"""
Routes for the chat endpoints.
"""
from flask import current_app, jsonify, request
from csbot import db
from csbot.chat import chat_bp
from csbot.chat.envelope import InvalidEnvelopeError, parse_whatsapp_envelope
from csbot.chat.service import MOBILE, WHATSAPP, ChatService
from csbot.gateways import MessagingGatewayError
from csbot.security import SecurityLogger


def _gateways():
    extension = current_app.extensions['csbot']
    return extension['llm'], extension['messaging']


def _validate_chat_body(data):
    """Return an error message for a bad mobile request body, or None."""
    if not isinstance(data, dict):
        return 'Request body must be a JSON object'
    query = data.get('query')
    if not isinstance(query, str) or not query.strip():
        return 'query is required'
    course_code = data.get('courseCode')
    if course_code is not None and not isinstance(course_code, str):
        return 'courseCode must be a string'
    year = data.get('year')
    if year is not None and (isinstance(year, bool) or not isinstance(year, int)):
        return 'year must be an integer'
    return None


@chat_bp.route('', methods=['POST'])
def chat():
    """Answer a query from the mobile app."""
    data = request.get_json(silent=True)
    error = _validate_chat_body(data)
    if error:
        SecurityLogger.log_invalid_request(request.path, {'error': error})
        return jsonify({'error': error}), 400

    llm, messaging = _gateways()
    service = ChatService(llm, messaging, user=current_app.config['MOBILE_USER_ID'], channel=MOBILE)
    try:
        body = service.handle_mobile(
            data['query'],
            course_code=data.get('courseCode') or None,
            year=data.get('year'),
        )
        return jsonify(body), 200
    except Exception:
        db.session.rollback()
        current_app.logger.exception("Error handling chat request")
        return jsonify({'error': 'Internal server error'}), 500


@chat_bp.route('/whatsapp-webhook', methods=['POST'])
def whatsapp_webhook():
    """Answer an inbound WhatsApp message and send the reply back."""
    try:
        message = parse_whatsapp_envelope(request.get_json(silent=True))
    except InvalidEnvelopeError as e:
        SecurityLogger.log_invalid_webhook(str(e))
        return 'Invalid payload', 400

    llm, messaging = _gateways()
    service = ChatService(llm, messaging, user=message.sender, channel=WHATSAPP)
    try:
        service.handle_whatsapp(message.sender, message.text)
        return 'OK', 200
    except MessagingGatewayError:
        current_app.logger.exception(f"Could not deliver WhatsApp reply to {message.sender}")
        return 'Error processing request', 500
    except Exception:
        db.session.rollback()
        current_app.logger.exception("Webhook error")
        return 'Error processing request', 500


@chat_bp.route('/whatsapp-webhook', methods=['GET'])
def verify_webhook():
    """Readiness probe used when registering the webhook with Brevo."""
    return 'Webhook ready', 200
