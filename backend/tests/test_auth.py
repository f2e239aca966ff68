import bcrypt
import jwt
import pytest

from stockroom.errors import ConflictError, InvalidCredentials, NotFoundError, ValidationError
from stockroom.extensions import db
from stockroom.models import User
from stockroom.services import auth_service

from conftest import TEST_JWT_SECRET, TEST_PASSWORD, register_user


@pytest.mark.auth
class TestRegister:
    def test_register_succeeds(self, client):
        response = register_user(client, "bob")

        assert response.status_code == 200
        assert response.json == {"message": "User registered successfully"}
        assert db.session.query(User).filter_by(username="bob").count() == 1

    def test_duplicate_username_rejected(self, client):
        assert register_user(client, "bob").status_code == 200

        response = register_user(client, "bob", "another-password")

        assert response.status_code == 400
        assert response.json["message"] == "Username already exists"
        assert db.session.query(User).filter_by(username="bob").count() == 1

    @pytest.mark.parametrize("body", [
        {},
        {"username": "bob"},
        {"password": "secret"},
        {"username": "", "password": "secret"},
        {"username": "   ", "password": "secret"},
        {"username": "bob", "password": ""},
        {"username": "bob", "password": 123},
        {"username": "bob", "password": ["pw"]},
    ])
    def test_missing_fields_rejected(self, client, body):
        response = client.post('/api/register', json=body)

        assert response.status_code == 400
        assert response.json["message"] == "Username and password are required"
        assert db.session.query(User).count() == 0

    def test_form_encoded_body_accepted(self, client):
        response = client.post('/api/register', data={"username": "carol", "password": "pw"})

        assert response.status_code == 200

    def test_password_is_stored_hashed(self, client):
        register_user(client, "bob", "plain-secret")

        stored = db.session.query(User).filter_by(username="bob").one()
        assert stored.password_hash != "plain-secret"
        assert bcrypt.checkpw(b"plain-secret", stored.password_hash.encode())


@pytest.mark.auth
class TestLogin:
    def test_login_returns_token_for_username(self, client, user):
        response = client.post('/api/login', json={"username": user, "password": TEST_PASSWORD})

        assert response.status_code == 200
        assert response.json["username"] == user
        claims = jwt.decode(response.json["token"], TEST_JWT_SECRET, algorithms=["HS256"])
        assert claims["username"] == user

    def test_token_expires_after_one_hour(self, client, user):
        response = client.post('/api/login', json={"username": user, "password": TEST_PASSWORD})

        claims = jwt.decode(response.json["token"], TEST_JWT_SECRET, algorithms=["HS256"])
        assert claims["exp"] - claims["iat"] == 3600

    def test_wrong_password_rejected(self, client, user):
        response = client.post('/api/login', json={"username": user, "password": "nope"})

        assert response.status_code == 400
        assert response.json == {"message": "Invalid password"}

    def test_unknown_user_rejected(self, client):
        response = client.post('/api/login', json={"username": "ghost", "password": "x"})

        assert response.status_code == 400
        assert response.json == {"message": "User not found"}

    @pytest.mark.parametrize("body", [
        {"username": "alice"},
        {"username": "alice", "password": ""},
        {"username": "alice", "password": 123},
        {"username": "alice", "password": None},
    ])
    def test_missing_fields_rejected(self, client, user, body):
        response = client.post('/api/login', json=body)

        assert response.status_code == 400
        assert response.json == {"message": "Username and password are required"}


@pytest.mark.auth
class TestAuthService:
    def test_register_twice_raises_conflict(self, app):
        auth_service.register("dave", "pw")

        with pytest.raises(ConflictError):
            auth_service.register("dave", "pw2")

    def test_register_empty_raises_validation(self, app):
        with pytest.raises(ValidationError):
            auth_service.register("", "pw")

    def test_login_errors(self, app):
        auth_service.register("erin", "right")

        with pytest.raises(NotFoundError):
            auth_service.login("frank", "right")
        with pytest.raises(InvalidCredentials):
            auth_service.login("erin", "wrong")

    def test_login_then_authenticate_round_trip(self, app):
        auth_service.register("gina", "pw")
        result = auth_service.login("gina", "pw")

        assert auth_service.authenticate(result["token"]) == "gina"

    def test_verify_password_rejects_malformed_hash(self, app):
        assert auth_service.verify_password("pw", "not-a-bcrypt-hash") is False
