"""Password hasher port (interface)."""

from abc import ABC, abstractmethod


class IPasswordHasher(ABC):
    """One-way, salted password hashing.

    Implementations must produce a different digest for the same password on
    every call (random salt) and compare in constant time when verifying.
    Both methods are async so CPU-bound hashing can run off the event loop.

    Examples:
        >>> hashed = await hasher.hash("p@ssword1")
        >>> await hasher.verify("p@ssword1", hashed)
        True
    """

    @abstractmethod
    async def hash(self, plaintext: str) -> str:
        """Hash a plaintext password.

        Args:
            plaintext: Password as typed by the user

        Returns:
            Opaque digest suitable for storage
        """
        pass

    @abstractmethod
    async def verify(self, plaintext: str, hashed: str) -> bool:
        """Check a plaintext password against a stored digest.

        Args:
            plaintext: Password as typed by the user
            hashed: Digest previously returned by hash()

        Returns:
            True if the password matches, False otherwise (including
            malformed digests)
        """
        pass
