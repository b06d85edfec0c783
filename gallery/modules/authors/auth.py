"""
Authentication utilities for JWT-based auth.
Provides token generation/verification and the current-user dependency.

Tokens carry the author's email as subject; the author row itself is
created lazily the first time an authenticated request touches it.
"""

from typing import Optional, Any, Dict
from dataclasses import dataclass
import jwt
from jwt.exceptions import PyJWTError, ExpiredSignatureError
from datetime import datetime, timedelta, timezone
from fastapi import Depends
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from sqlalchemy.ext.asyncio import AsyncSession

from gallery.core.config import config
from gallery.core.exceptions import UnauthorizedError
from .models import Author
from .service import AuthorService


# HTTP Bearer token security scheme
security = HTTPBearer(auto_error=False)


@dataclass
class TokenData:
    """Token payload data structure with type safety"""
    email: str
    nickname: Optional[str] = None


class AuthService:
    """
    Authentication service for token management and user resolution.
    """

    @staticmethod
    def create_access_token(
        email: str,
        nickname: Optional[str] = None,
        expires_delta: Optional[timedelta] = None,
    ) -> str:
        """
        Create a JWT access token for an author.

        Args:
            email: Author email, stored as the `sub` claim
            nickname: Optional display name
            expires_delta: Optional custom expiration time, defaults to config value

        Returns:
            Encoded JWT token as string
        """
        now = datetime.now(timezone.utc)
        expire = now + (
            expires_delta or timedelta(minutes=config.access_token_expire_minutes)
        )
        to_encode: Dict[str, Any] = {
            "sub": email,
            "exp": expire,
            "iat": now,
            "type": "access",
        }
        if nickname:
            to_encode["nickname"] = nickname
        return jwt.encode(to_encode, config.secret_key, algorithm=config.algorithm)

    @staticmethod
    def verify_token(token: str) -> Optional[TokenData]:
        """
        Verify and decode a JWT access token.

        Returns:
            TokenData if valid, None if the token is malformed or not an access token

        Raises:
            UnauthorizedError: If the token has expired
        """
        try:
            payload: Dict[str, Any] = jwt.decode(
                token, config.secret_key, algorithms=[config.algorithm]
            )
        except ExpiredSignatureError:
            raise UnauthorizedError("Token has expired")
        except PyJWTError:
            return None

        email: Optional[str] = payload.get("sub")
        if not email or payload.get("type") != "access":
            return None

        return TokenData(email=email, nickname=payload.get("nickname"))

    @staticmethod
    async def get_user_info(db: AsyncSession, user: TokenData) -> Author:
        """Resolve the Author behind an authenticated request."""
        return await AuthorService.get_or_create_author(db, user.email, user.nickname)


async def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
) -> TokenData:
    """
    Dependency to get the current authenticated user from JWT token.

    Raises:
        UnauthorizedError: If the header is missing or the token is invalid
    """
    if credentials is None:
        raise UnauthorizedError("Not authenticated")

    token_data: Optional[TokenData] = AuthService.verify_token(credentials.credentials)
    if token_data is None:
        raise UnauthorizedError("Invalid authentication credentials")

    return token_data
