"""Unit tests for token decoding and identity checks."""

from datetime import timedelta

import pytest

from careerpilot.core.security import (
    create_access_token,
    decode_access_token,
    ensure_admin,
    require_user_id,
    user_from_claims,
)
from careerpilot.utils.exceptions import AuthenticationError, AuthorizationError


class TestTokens:

    def test_round_trip_claims(self):
        token = create_access_token({"sub": "user_123", "role": "admin", "email": "a@example.com"})

        user = user_from_claims(decode_access_token(token))

        assert user == {"id": "user_123", "email": "a@example.com", "name": None, "role": "admin"}

    def test_role_defaults_to_user(self):
        token = create_access_token({"sub": "user_123"})
        assert user_from_claims(decode_access_token(token))["role"] == "user"

    def test_expired_token(self):
        token = create_access_token({"sub": "user_123"}, expires_delta=timedelta(seconds=-1))

        with pytest.raises(AuthenticationError) as exc_info:
            decode_access_token(token)
        assert exc_info.value.message == "Token has expired"

    def test_garbage_token(self):
        with pytest.raises(AuthenticationError):
            decode_access_token("not.a.token")

    def test_missing_subject(self):
        with pytest.raises(AuthenticationError):
            user_from_claims({"role": "user"})


class TestIdentityChecks:

    def test_require_user_id(self, student_user):
        assert require_user_id(student_user) == "user_123"
        with pytest.raises(AuthenticationError):
            require_user_id(None)

    def test_ensure_admin(self, admin_user, student_user):
        assert ensure_admin(admin_user) == "admin_1"

        with pytest.raises(AuthorizationError) as exc_info:
            ensure_admin(student_user)
        assert exc_info.value.required_role == "admin"

        with pytest.raises(AuthenticationError):
            ensure_admin(None)
