"""Token issuer port (interface)."""

from abc import ABC, abstractmethod
from typing import Any, Dict


class ITokenIssuer(ABC):
    """Issues and validates signed bearer tokens.

    The account core only relies on issue(); verify() is used by whatever
    adapter guards authenticated endpoints.

    Examples:
        >>> token = issuer.issue("kim01")
        >>> issuer.verify(token)["sub"]
        'kim01'
    """

    @abstractmethod
    def issue(self, login_id: str) -> str:
        """Mint a bearer token for a login identifier.

        Args:
            login_id: Login identifier of an authenticated user

        Returns:
            Encoded token string
        """
        pass

    @abstractmethod
    def verify(self, token: str) -> Dict[str, Any]:
        """Validate a bearer token and return its claims.

        Args:
            token: Encoded token string

        Returns:
            Claims dictionary; "sub" holds the login identifier

        Raises:
            InvalidTokenError: Token is malformed, tampered or expired
        """
        pass


class InvalidTokenError(Exception):
    """Token verification failed."""

    def __init__(self, reason: str):
        """Initialize with failure reason.

        Args:
            reason: Human-readable reason for failure
        """
        self.reason = reason
        super().__init__(f"Invalid token: {reason}")
