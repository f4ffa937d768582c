from datetime import timedelta

import pytest
from jose import jwt

from store_service.app.utils.jwt_handler import JWTHandler


class TestJWTHandler:
    @pytest.fixture
    def handler(self):
        return JWTHandler(secret_key="unit-test-secret")

    def test_decode_returns_username_and_roles(self, handler):
        token = handler.encode_token({"sub": "alice", "roles": ["admin"]})

        token_data = handler.decode_token(token)

        assert token_data.username == "alice"
        assert token_data.roles == ["admin"]

    def test_username_claim_is_accepted_without_sub(self, handler):
        token = handler.encode_token({"username": "bob"})

        assert handler.decode_token(token).username == "bob"

    def test_missing_subject_is_rejected(self, handler):
        token = handler.encode_token({"roles": ["user"]})

        with pytest.raises(ValueError, match="missing sub"):
            handler.decode_token(token)

    def test_expired_token_is_rejected(self, handler):
        token = handler.encode_token({"sub": "alice"}, timedelta(seconds=-1))

        with pytest.raises(ValueError, match="expired"):
            handler.decode_token(token)

    def test_foreign_signature_is_rejected(self, handler):
        token = jwt.encode({"sub": "mallory", "exp": 9999999999}, "other-secret")

        with pytest.raises(ValueError, match="Token validation failed"):
            handler.decode_token(token)
