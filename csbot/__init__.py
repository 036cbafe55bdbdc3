from flask import Flask, jsonify, request
from flask_sqlalchemy import SQLAlchemy
from flask_migrate import Migrate
from flask_compress import Compress
from flask_cors import CORS
from dotenv import load_dotenv
import logging

# Load environment variables before any Config is built
load_dotenv()

db = SQLAlchemy()
migrate = Migrate()
compress = Compress()

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def _configure_logging(app: Flask, level_name: str) -> None:
    # app.logger is the "csbot" logger, so module loggers under the package propagate to it
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    app.logger.handlers = [handler]
    app.logger.setLevel(getattr(logging, level_name, logging.INFO))


def create_app(app_config=None, llm_gateway=None, messaging_gateway=None) -> Flask:
    """
    Application factory for the Flask app.
    Configures the database pool, builds the LLM and WhatsApp gateways
    once per app, and registers the chat blueprint.

    Gateways may be passed in to replace the ones built from config.
    """
    from csbot.config import Config

    if app_config is None:
        # Re-initialize config to ensure latest .env values are loaded
        app_config = Config()
    app_config.validate()

    app = Flask(__name__)
    _configure_logging(app, app_config.LOG_LEVEL)

    app.config["SECRET_KEY"] = app_config.SECRET_KEY
    app.config["TESTING"] = app_config.TESTING
    app.config["SQLALCHEMY_DATABASE_URI"] = app_config.SQLALCHEMY_DATABASE_URI
    app.config["SQLALCHEMY_TRACK_MODIFICATIONS"] = app_config.SQLALCHEMY_TRACK_MODIFICATIONS
    app.config["SQLALCHEMY_ECHO"] = app_config.SQLALCHEMY_ECHO
    app.config["SQLALCHEMY_ENGINE_OPTIONS"] = app_config.SQLALCHEMY_ENGINE_OPTIONS
    app.config["MOBILE_USER_ID"] = app_config.MOBILE_USER_ID
    app.json.sort_keys = False
    app.json.ensure_ascii = False

    # Response compression settings
    app.config["COMPRESS_MIMETYPES"] = ["application/json", "text/plain"]
    app.config["COMPRESS_LEVEL"] = 6
    app.config["COMPRESS_MIN_SIZE"] = 500

    # Initialize extensions
    db.init_app(app)
    migrate.init_app(app, db)
    compress.init_app(app)
    CORS(app, resources={r"/api/*": {"origins": app_config.CORS_ORIGINS}})

    from csbot.security import init_security
    init_security(app)

    # Gateways live for the lifetime of the app and are shared by all requests
    from csbot.gateways import LLMGateway, WhatsAppGateway
    if llm_gateway is None:
        llm_gateway = LLMGateway(
            api_key=app_config.GROQ_API_KEY,
            model=app_config.GROQ_MODEL,
            max_tokens=app_config.LLM_MAX_TOKENS,
            temperature=app_config.LLM_TEMPERATURE,
            timeout=app_config.LLM_TIMEOUT,
        )
    if messaging_gateway is None:
        messaging_gateway = WhatsAppGateway(
            api_key=app_config.BREVO_API_KEY,
            sender=app_config.WABA_ID,
            url=app_config.BREVO_WHATSAPP_URL,
            timeout=app_config.MESSAGING_TIMEOUT,
        )
    app.extensions["csbot"] = {
        "llm": llm_gateway,
        "messaging": messaging_gateway,
    }

    @app.route("/health")
    def health():
        return jsonify({"status": "ok"})

    # Register blueprints
    from csbot.chat import chat_bp
    app.register_blueprint(chat_bp)

    from csbot.exams.seed import seed_exams_command
    app.cli.add_command(seed_exams_command)

    # API routes return JSON instead of HTML error pages
    @app.errorhandler(404)
    def handle_404(e):
        app.logger.warning(f"404 error: {request.method} {request.path}")
        if request.path.startswith("/api/"):
            return jsonify({"error": f"Route not found: {request.method} {request.path}"}), 404
        return f"Page not found: {request.path}", 404

    @app.errorhandler(405)
    def handle_405(e):
        app.logger.warning(f"405 error: {request.method} {request.path}")
        if request.path.startswith("/api/"):
            return jsonify({"error": f"Method not allowed: {request.method} {request.path}"}), 405
        return e

    @app.errorhandler(500)
    def handle_500(e):
        if request.path.startswith("/api/"):
            return jsonify({"error": "Internal server error"}), 500
        return "Internal server error", 500

    # Create tables if they do not exist
    with app.app_context():
        from csbot.exams import models as exam_models  # noqa: F401
        from csbot.chat import models as chat_models  # noqa: F401
        db.create_all()

    return app
