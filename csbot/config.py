"""
Configuration module for the application.
All configuration values are read from environment variables.
"""
import os
import secrets
import warnings


DEFAULT_BREVO_WHATSAPP_URL = "https://api.brevo.com/v3/transactionalWhatsApp/messages"


class Config:
    """Application configuration loaded from environment variables."""

    def __init__(self):
        """Initialize configuration from environment variables."""
        # Flask Configuration
        self.SECRET_KEY: str = os.getenv("SECRET_KEY", "")
        self.FLASK_ENV: str = os.getenv("FLASK_ENV", "")
        self.FLASK_DEBUG: bool = os.getenv("FLASK_DEBUG", "").lower() == "true"
        self.TESTING: bool = False

        # Generate a development SECRET_KEY if not set and in development mode
        if not self.SECRET_KEY and self.FLASK_ENV != "production":
            self.SECRET_KEY = secrets.token_urlsafe(32)
            warnings.warn(
                "SECRET_KEY not set. Generated a temporary key for development. "
                "Set SECRET_KEY in your .env file for production!",
                UserWarning
            )

        # Database Configuration
        self.DATABASE_URL: str = os.getenv("DATABASE_URL", "")
        self.DB_USER: str = os.getenv("DB_USER", "")
        self.DB_PASSWORD: str = os.getenv("DB_PASSWORD", "")
        self.DB_HOST: str = os.getenv("DB_HOST", "")
        self.DB_PORT: str = os.getenv("DB_PORT", "3306")
        self.DB_NAME: str = os.getenv("DB_NAME", "cs_chatbot")
        self.DB_POOL_SIZE: int = int(os.getenv("DB_POOL_SIZE", "10"))
        self.DB_MAX_OVERFLOW: int = int(os.getenv("DB_MAX_OVERFLOW", "20"))
        self.DB_POOL_RECYCLE: int = int(os.getenv("DB_POOL_RECYCLE", "3600"))

        # SQLAlchemy Configuration
        self.SQLALCHEMY_TRACK_MODIFICATIONS: bool = False
        sqlalchemy_echo = os.getenv("SQLALCHEMY_ECHO", "")
        self.SQLALCHEMY_ECHO: bool = sqlalchemy_echo.lower() == "true" if sqlalchemy_echo else False

        # LLM (Groq) Configuration
        self.GROQ_API_KEY: str = os.getenv("GROQ_API_KEY", "")
        self.GROQ_MODEL: str = os.getenv("GROQ_MODEL", "llama-3.1-8b-instant")
        self.LLM_MAX_TOKENS: int = int(os.getenv("LLM_MAX_TOKENS", "4096"))
        self.LLM_TEMPERATURE: float = float(os.getenv("LLM_TEMPERATURE", "0.7"))
        self.LLM_TIMEOUT: float = float(os.getenv("LLM_TIMEOUT", "30"))

        # WhatsApp messaging (Brevo) Configuration
        self.BREVO_API_KEY: str = os.getenv("BREVO_API_KEY", "")
        self.WABA_ID: str = os.getenv("WABA_ID", "")
        self.BREVO_WHATSAPP_URL: str = os.getenv("BREVO_WHATSAPP_URL", DEFAULT_BREVO_WHATSAPP_URL)
        self.MESSAGING_TIMEOUT: float = float(os.getenv("MESSAGING_TIMEOUT", "10"))

        # CORS Configuration
        cors_origins = os.getenv("CORS_ORIGINS", "*")
        self.CORS_ORIGINS: list[str] = [o.strip() for o in cors_origins.split(",") if o.strip()] or ["*"]

        # Logging
        self.LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()

        # Analytics user recorded for mobile requests (the mobile client is anonymous)
        self.MOBILE_USER_ID: str = os.getenv("MOBILE_USER_ID", "flutter_user")

    @property
    def SQLALCHEMY_DATABASE_URI(self) -> str:
        """Construct database URI from environment variables."""
        if self.DATABASE_URL:
            return self.DATABASE_URL
        if not self.DB_HOST:
            return "sqlite:///csbot.db"
        return f"mysql+pymysql://{self.DB_USER}:{self.DB_PASSWORD}@{self.DB_HOST}:{self.DB_PORT}/{self.DB_NAME}?charset=utf8mb4"

    @property
    def SQLALCHEMY_ENGINE_OPTIONS(self) -> dict:
        """
        Pool settings for the shared engine.
        SQLite gets Flask-SQLAlchemy's own defaults, since its pools
        reject the sizing arguments.
        """
        if self.SQLALCHEMY_DATABASE_URI.startswith("sqlite"):
            return {}
        return {
            "pool_size": self.DB_POOL_SIZE,
            "max_overflow": self.DB_MAX_OVERFLOW,
            "pool_recycle": self.DB_POOL_RECYCLE,
            "pool_pre_ping": True,
        }

    def validate(self) -> None:
        """
        Validate required configuration values.
        Only enforces secrets in production environment.
        """
        if self.FLASK_ENV != "production":
            return
        missing = [
            name for name in ("SECRET_KEY", "GROQ_API_KEY", "BREVO_API_KEY", "WABA_ID")
            if not getattr(self, name)
        ]
        if missing:
            raise ValueError(
                f"Missing required configuration in production: {', '.join(missing)}. "
                "Set them in your .env file or environment variables."
            )

