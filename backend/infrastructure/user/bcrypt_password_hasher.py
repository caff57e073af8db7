"""bcrypt password hasher implementation."""

import asyncio
import logging
from typing import Optional

import bcrypt

from domain.user.auth.ports.password_hasher import IPasswordHasher
from infrastructure.config import get_bcrypt_rounds


logger = logging.getLogger(__name__)


class BcryptPasswordHasher(IPasswordHasher):
    """Password hasher backed by bcrypt.

    Each hash embeds its own random salt and cost factor. bcrypt.checkpw
    compares digests in constant time. Hashing runs in a worker thread so
    the event loop is not blocked for the duration of the key stretch.

    Note: bcrypt only uses the first 72 bytes of a password. Recent bcrypt
    releases reject longer inputs, so passwords are truncated to 72 UTF-8
    bytes before hashing and verification.

    Examples:
        >>> hasher = BcryptPasswordHasher(rounds=4)
        >>> hashed = await hasher.hash("p@ssword1")
        >>> await hasher.verify("p@ssword1", hashed)
        True
    """

    MAX_PASSWORD_BYTES = 72

    def __init__(self, rounds: Optional[int] = None):
        """Initialize hasher.

        Args:
            rounds: bcrypt cost factor (defaults to env BCRYPT_ROUNDS or 12)

        Raises:
            ValueError: If rounds is outside bcrypt's 4..31 range
        """
        self.rounds = rounds if rounds is not None else get_bcrypt_rounds()
        if not 4 <= self.rounds <= 31:
            raise ValueError(f"bcrypt rounds must be between 4 and 31, got {self.rounds}")

    async def hash(self, plaintext: str) -> str:
        """Hash a password with a fresh salt.

        Args:
            plaintext: Password as typed by the user

        Returns:
            bcrypt digest ("$2b$...") as text
        """
        return await asyncio.to_thread(self._hash_sync, plaintext)

    async def verify(self, plaintext: str, hashed: str) -> bool:
        """Verify a password against a bcrypt digest.

        Args:
            plaintext: Password as typed by the user
            hashed: Stored bcrypt digest

        Returns:
            True on match, False on mismatch or malformed digest
        """
        if plaintext is None or not hashed:
            return False
        return await asyncio.to_thread(self._verify_sync, plaintext, hashed)

    def _hash_sync(self, plaintext: str) -> str:
        salt = bcrypt.gensalt(rounds=self.rounds)
        return bcrypt.hashpw(self._encode(plaintext), salt).decode("ascii")

    def _verify_sync(self, plaintext: str, hashed: str) -> bool:
        try:
            return bcrypt.checkpw(self._encode(plaintext), hashed.encode("ascii"))
        except ValueError:
            # Invalid salt / not a bcrypt digest
            logger.warning("Stored password hash is not a valid bcrypt digest")
            return False

    @classmethod
    def _encode(cls, plaintext: str) -> bytes:
        return plaintext.encode("utf-8")[: cls.MAX_PASSWORD_BYTES]
