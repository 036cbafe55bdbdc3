"""
Pytest configuration and fixtures for testing.
Runs the app against in-memory SQLite with mocked gateways.
"""
import os
import pytest
from unittest.mock import Mock

# Set test environment variables BEFORE the app package reads them
os.environ['FLASK_ENV'] = 'testing'
os.environ['SECRET_KEY'] = 'test-secret-key-not-for-production'

from csbot import create_app, db
from csbot.config import Config
from csbot.exams.seed import seed_exam_records


class TestConfig(Config):
    """Config pointing at an in-memory database."""

    __test__ = False

    def __init__(self):
        super().__init__()
        self.TESTING = True
        self.DATABASE_URL = 'sqlite:///:memory:'
        self.LOG_LEVEL = 'DEBUG'
        self.CORS_ORIGINS = ['*']
        self.MOBILE_USER_ID = 'flutter_user'


@pytest.fixture
def llm():
    """LLM gateway double; answers every question with a fixed string."""
    gateway = Mock()
    gateway.complete.return_value = 'The CS department is in Block C.'
    return gateway


@pytest.fixture
def messaging():
    """WhatsApp gateway double."""
    gateway = Mock()
    gateway.send_text.return_value = {'messageId': 'test-message'}
    return gateway


@pytest.fixture
def app(llm, messaging):
    """Create application for testing."""
    app = create_app(TestConfig(), llm_gateway=llm, messaging_gateway=messaging)
    yield app
    with app.app_context():
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    """Create test client."""
    return app.test_client()


@pytest.fixture
def seeded(app):
    """Load the bundled CSC 451 paper."""
    with app.app_context():
        seed_exam_records()
    return app


@pytest.fixture
def make_envelope():
    """Build a minimal Brevo/WhatsApp webhook payload."""
    def _make(sender='2348012345678', body='hello'):
        return {
            'entry': [{
                'changes': [{
                    'value': {
                        'messages': [{
                            'from': sender,
                            'text': {'body': body},
                        }],
                    },
                }],
            }],
        }
    return _make
