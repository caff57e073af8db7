"""JWT bearer token issuer implementation."""

from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Optional

import jwt
from jwt.exceptions import ExpiredSignatureError, InvalidTokenError as JWTError

from domain.user.auth.ports.token_issuer import ITokenIssuer, InvalidTokenError
from infrastructure.config import (
    get_jwt_algorithm,
    get_jwt_expiration_seconds,
    get_jwt_issuer,
    get_jwt_secret,
)


class JwtTokenIssuer(ITokenIssuer):
    """Signed JWT issuer.

    Tokens carry:
    - sub: login identifier
    - iat: issued-at timestamp
    - exp: expiration timestamp
    - iss: issuer (only when configured)

    Environment Variables:
    - JWT_SECRET: signing secret (required unless passed explicitly)
    - JWT_ALGORITHM: HMAC algorithm (default HS256)
    - JWT_EXPIRATION_SECONDS: token lifetime (default 3600)
    - JWT_ISSUER: optional issuer claim

    Examples:
        >>> issuer = JwtTokenIssuer(secret="change-me")
        >>> token = issuer.issue("kim01")
        >>> issuer.verify(token)["sub"]
        'kim01'
    """

    def __init__(
        self,
        secret: Optional[str] = None,
        algorithm: Optional[str] = None,
        expires_in: Optional[int] = None,
        issuer: Optional[str] = None,
    ):
        """Initialize issuer.

        Args:
            secret: Signing secret (defaults to env JWT_SECRET)
            algorithm: Signing algorithm (defaults to env JWT_ALGORITHM)
            expires_in: Lifetime in seconds (defaults to env JWT_EXPIRATION_SECONDS)
            issuer: "iss" claim (defaults to env JWT_ISSUER)

        Raises:
            ValueError: If no secret is configured
        """
        self.secret = secret or get_jwt_secret()
        self.algorithm = algorithm or get_jwt_algorithm()
        self.expires_in = expires_in if expires_in is not None else get_jwt_expiration_seconds()
        self.issuer = issuer or get_jwt_issuer()

        if not self.secret:
            raise ValueError("JWT_SECRET is required")

    def issue(self, login_id: str) -> str:
        """Mint a signed token for a login identifier.

        Args:
            login_id: Login identifier of the authenticated user

        Returns:
            Encoded JWT
        """
        now = datetime.now(timezone.utc)
        payload: Dict[str, Any] = {
            "sub": login_id,
            "iat": now,
            "exp": now + timedelta(seconds=self.expires_in),
        }
        if self.issuer:
            payload["iss"] = self.issuer

        return jwt.encode(payload, self.secret, algorithm=self.algorithm)

    def verify(self, token: str) -> Dict[str, Any]:
        """Verify signature and expiry and return the claims.

        Args:
            token: Encoded JWT

        Returns:
            Decoded claims dictionary

        Raises:
            InvalidTokenError: If the token is expired, tampered or malformed
        """
        try:
            claims: Dict[str, Any] = jwt.decode(
                token,
                self.secret,
                algorithms=[self.algorithm],
                issuer=self.issuer,
                options={"require": ["sub", "exp", "iat"]},
            )
        except ExpiredSignatureError as e:
            raise InvalidTokenError("Token has expired") from e
        except JWTError as e:
            raise InvalidTokenError(str(e)) from e

        return claims
