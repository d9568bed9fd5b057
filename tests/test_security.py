"""
Tests for security helpers, auth dependencies and app-level behaviour.
"""

from datetime import timedelta

import pytest
from jose import JWTError, jwt

from app.core.config import settings
from app.core.security import create_access_token, decode_token, get_password_hash, verify_password


class TestPasswords:
    def test_hash_and_verify(self):
        hashed = get_password_hash("password1")

        assert hashed != "password1"
        assert hashed.startswith("$2")
        assert verify_password("password1", hashed)
        assert not verify_password("password2", hashed)


class TestTokens:
    def test_claims(self):
        payload = decode_token(create_access_token("u1", is_admin=True))

        assert payload["sub"] == "u1"
        assert payload["is_admin"] is True
        assert "exp" in payload

    def test_expired_token_rejected(self):
        token = create_access_token("u1", expires_delta=timedelta(seconds=-1))

        with pytest.raises(JWTError):
            decode_token(token)

    def test_wrong_key_rejected(self):
        token = jwt.encode({"sub": "u1", "is_admin": True}, "other-key", algorithm=settings.ALGORITHM)

        with pytest.raises(JWTError):
            decode_token(token)


class TestAuthDependencies:
    """Protected endpoints reject bad or missing credentials"""

    def test_invalid_token_is_unauthorized(self, client):
        response = client.get("/api/v1/users/", headers={"Authorization": "Bearer not-a-token"})

        assert response.status_code == 401
        assert response.headers["www-authenticate"] == "Bearer"

    def test_forged_admin_token_is_unauthorized(self, client):
        token = jwt.encode({"sub": "u1", "is_admin": True}, "other-key", algorithm=settings.ALGORITHM)
        response = client.get("/api/v1/users/", headers={"Authorization": f"Bearer {token}"})

        assert response.status_code == 401

    def test_token_without_subject_is_unauthorized(self, client):
        token = jwt.encode({"is_admin": True}, settings.SECRET_KEY, algorithm=settings.ALGORITHM)
        response = client.get("/api/v1/users/", headers={"Authorization": f"Bearer {token}"})

        assert response.status_code == 401

    def test_public_endpoint_ignores_bad_token(self, client):
        response = client.get("/api/v1/jobs/", headers={"Authorization": "Bearer not-a-token"})
        assert response.status_code == 200


class TestApp:
    def test_health_check(self, client):
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json()["status"] == "healthy"

    def test_unknown_path(self, client):
        assert client.get("/no-such-path").status_code == 404
