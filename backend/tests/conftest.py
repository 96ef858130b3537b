import os
import sys
import json
import pytest
import httpx

# Ensure the backend root (containing the `app` package) is on sys.path
CURRENT_DIR = os.path.dirname(__file__)
BACKEND_ROOT = os.path.abspath(os.path.join(CURRENT_DIR, '..'))
if BACKEND_ROOT not in sys.path:
    sys.path.insert(0, BACKEND_ROOT)

from app import create_app, db
from app.services.line import LineCredentials, LineMessagingClient


class TestConfig:
    TESTING = True
    SECRET_KEY = os.environ.get('SECRET_KEY', 'test-secret')
    SQLALCHEMY_DATABASE_URI = 'sqlite://'
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    CHANNEL_ACCESS_TOKEN = 'test-token'
    CHANNEL_SECRET = 'test-secret'
    LINE_API_BASE_URL = 'https://line.test'
    CORS_ORIGINS = ['http://localhost:5173']


class FakeLineApi:
    """Records pushes made through an httpx.MockTransport."""

    def __init__(self):
        self.requests = []
        self.status_code = 200
        self.error = None

    def handler(self, request):
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        return httpx.Response(self.status_code, json={})

    @property
    def pushes(self):
        return [json.loads(r.content) for r in self.requests]


@pytest.fixture()
def line_api():
    return FakeLineApi()


@pytest.fixture()
def flask_app(line_api):
    line_client = LineMessagingClient(
        LineCredentials(channel_access_token='test-token', channel_secret='test-secret'),
        base_url=TestConfig.LINE_API_BASE_URL,
        transport=httpx.MockTransport(line_api.handler),
    )
    application = create_app(TestConfig, line_client=line_client)
    with application.app_context():
        # Ensure models are imported so tables are created
        import app.models  # noqa: F401
        db.create_all()
        yield application
        db.session.remove()
        db.drop_all()
    line_client.close()


@pytest.fixture()
def client(flask_app):
    return flask_app.test_client()


@pytest.fixture()
def add_user(flask_app):
    from app.models import User

    def _add(user_id, line_user_id=None, display_name=None):
        user = User(id=user_id, line_user_id=line_user_id, display_name=display_name)
        db.session.add(user)
        db.session.commit()
        return user

    return _add
