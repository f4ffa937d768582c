"""
JWT Handler for Store Service

Provides JWT token encoding/decoding for the authentication middleware.
Tokens are issued by an external identity provider sharing the secret; the
caller's username travels in the ``sub`` claim.
"""

from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Optional

from jose import jwt
from jose.exceptions import ExpiredSignatureError, JWTError
from pydantic import BaseModel


class TokenData(BaseModel):
    """Token data model for decoded JWT tokens"""

    username: str
    roles: list[str] = []
    expires_at: datetime


class JWTHandler:
    """
    JWT token handler for encoding and decoding tokens.

    Provides token creation and validation with configurable
    secret key and algorithm.
    """

    def __init__(self, secret_key: str, algorithm: str = "HS256"):
        self.secret_key = secret_key
        self.algorithm = algorithm

    def encode_token(
        self, payload: Dict[str, Any], expires_delta: Optional[timedelta] = None
    ) -> str:
        """
        Encode payload into JWT token.

        Args:
            payload: Token payload data, normally ``{"sub": username}``
            expires_delta: Token expiration time (default: 30 minutes)

        Returns:
            Encoded JWT token string
        """
        to_encode = payload.copy()

        if expires_delta:
            expire = datetime.now(timezone.utc) + expires_delta
        else:
            expire = datetime.now(timezone.utc) + timedelta(minutes=30)

        to_encode.update(
            {
                "exp": expire,
                "iat": datetime.now(timezone.utc),
                "type": "access",
            }
        )

        return jwt.encode(to_encode, self.secret_key, algorithm=self.algorithm)

    def decode_token(self, token: str) -> TokenData:
        """
        Decode and validate JWT token.

        Args:
            token: JWT token string

        Returns:
            TokenData object with decoded payload

        Raises:
            ValueError: If token is invalid, expired, or malformed
        """
        try:
            payload = jwt.decode(token, self.secret_key, algorithms=[self.algorithm])
        except ExpiredSignatureError:
            raise ValueError("Token has expired")
        except JWTError as e:
            raise ValueError(f"Token validation failed: {e}")

        username = payload.get("sub") or payload.get("username")
        exp = payload.get("exp")

        if not username or not exp:
            raise ValueError("Invalid token payload: missing sub or exp")

        return TokenData(
            username=str(username),
            roles=payload.get("roles", []),
            expires_at=datetime.fromtimestamp(exp, tz=timezone.utc),
        )
