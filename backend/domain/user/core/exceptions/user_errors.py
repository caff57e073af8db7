"""User domain exceptions.

Every failure an account operation can produce is a subclass of
UserDomainError and carries an ErrorKind, so adapters can map failures
to responses without string matching.
"""

from enum import Enum


class ErrorKind(str, Enum):
    """Failure categories surfaced by account operations."""

    NOT_FOUND = "not_found"
    DUPLICATE_IDENTITY = "duplicate_identity"
    INVALID_CREDENTIAL = "invalid_credential"
    MISMATCH = "mismatch"
    POLICY_VIOLATION = "policy_violation"
    INVALID_INPUT = "invalid_input"
    CONFLICT = "conflict"
    STORAGE = "storage"


class UserDomainError(Exception):
    """Base exception for User domain errors."""

    kind: ErrorKind = ErrorKind.INVALID_INPUT


class UserNotFoundError(UserDomainError):
    """User was not found in the repository."""

    kind = ErrorKind.NOT_FOUND

    def __init__(self, identifier: str):
        """Initialize with user identifier.

        Args:
            identifier: User ID or login id that was not found
        """
        self.identifier = identifier
        super().__init__(f"User not found: {identifier}")


class DuplicateIdentityError(UserDomainError):
    """A unique identity attribute is already taken on account creation."""

    kind = ErrorKind.DUPLICATE_IDENTITY

    def __init__(self, field: str, value: str):
        """Initialize with the conflicting attribute.

        Args:
            field: Attribute name (email, login_id, display_name)
            value: Value that is already in use
        """
        self.field = field
        self.value = value
        super().__init__(f"User with {field} '{value}' already exists")


class InvalidCredentialError(UserDomainError):
    """Supplied password does not match the stored hash."""

    kind = ErrorKind.INVALID_CREDENTIAL

    def __init__(self) -> None:
        super().__init__("Password does not match")


class PasswordMismatchError(UserDomainError):
    """New password and its confirmation differ."""

    kind = ErrorKind.MISMATCH

    def __init__(self) -> None:
        super().__init__("New password and confirmation do not match")


class PasswordPolicyError(UserDomainError):
    """New password violates the password policy."""

    kind = ErrorKind.POLICY_VIOLATION

    def __init__(self, min_length: int):
        """Initialize with the policy minimum.

        Args:
            min_length: Minimum accepted password length
        """
        self.min_length = min_length
        super().__init__(f"Password must be at least {min_length} characters long")


class InvalidInputError(UserDomainError):
    """A required field is missing or blank."""

    kind = ErrorKind.INVALID_INPUT

    def __init__(self, field: str):
        """Initialize with field name.

        Args:
            field: Name of the missing/blank field
        """
        self.field = field
        super().__init__(f"{field} must not be blank")


class NicknameConflictError(UserDomainError):
    """Requested nickname is already used."""

    kind = ErrorKind.CONFLICT

    def __init__(self, nickname: str):
        """Initialize with nickname.

        Args:
            nickname: Nickname that is already taken
        """
        self.nickname = nickname
        super().__init__(f"Nickname already in use: {nickname}")


class UniqueConstraintError(UserDomainError):
    """Store rejected a write that would break a uniqueness constraint.

    Raised by repositories, translated by the application layer into
    DuplicateIdentityError or NicknameConflictError.
    """

    kind = ErrorKind.STORAGE

    def __init__(self, field: str, value: str):
        """Initialize with the violated attribute.

        Args:
            field: Unique attribute name
            value: Offending value
        """
        self.field = field
        self.value = value
        super().__init__(f"Unique constraint violated on {field}: {value}")
