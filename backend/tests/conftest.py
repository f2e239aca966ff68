"""
Pytest fixtures for stockroom backend tests.

Provides an application on an in-memory SQLite database with a temporary
upload folder, a Flask test client, and helpers for registering users and
building Authorization headers.
"""

import httpx
import pytest

from stockroom import create_app
from stockroom.extensions import db


TEST_JWT_SECRET = "test-jwt-secret"
TEST_PASSWORD = "Password123!"


@pytest.fixture(scope='function')
def upload_dir(tmp_path):
    return tmp_path / "uploads"


@pytest.fixture(scope='function')
def app(upload_dir):
    """Create application for testing with a fresh schema."""
    app = create_app({
        'TESTING': True,
        'SQLALCHEMY_DATABASE_URI': 'sqlite:///:memory:',
        'SQLALCHEMY_TRACK_MODIFICATIONS': False,
        'UPLOAD_FOLDER': str(upload_dir),
        'JWT_SECRET': TEST_JWT_SECRET,
        'BCRYPT_ROUNDS': 4,
    })

    with app.app_context():
        db.create_all()
        yield app
        db.session.remove()
        db.drop_all()


@pytest.fixture(scope='function')
def client(app):
    """Create test client."""
    return app.test_client()


@pytest.fixture(scope='function')
def http(app):
    """httpx client wired straight into the WSGI app, as the headless SPA uses it."""
    transport = httpx.WSGITransport(app=app)
    with httpx.Client(transport=transport, base_url="http://testserver") as c:
        yield c


def register_user(client, username: str = "alice", password: str = TEST_PASSWORD):
    return client.post('/api/register', json={'username': username, 'password': password})


def get_auth_token(client, username: str, password: str = TEST_PASSWORD) -> str:
    """Helper to get auth token for a user."""
    response = client.post('/api/login', json={
        'username': username,
        'password': password
    })
    if response.status_code == 200:
        return response.json.get('token')
    return None


def auth_headers(token: str) -> dict:
    """Helper to create Authorization headers."""
    return {'Authorization': f'Bearer {token}'}


@pytest.fixture(scope='function')
def user(client):
    """Registered user 'alice'."""
    response = register_user(client)
    assert response.status_code == 200
    return "alice"


@pytest.fixture(scope='function')
def token(client, user):
    return get_auth_token(client, user)


@pytest.fixture(scope='function')
def headers(token):
    return auth_headers(token)
