"""Password policy applied when a password is rotated."""

from dataclasses import dataclass
from typing import Optional

from domain.user.core.exceptions.user_errors import PasswordPolicyError


MIN_PASSWORD_LENGTH = 10


@dataclass(frozen=True)
class PasswordPolicy:
    """Rules a new password must satisfy.

    Only the minimum length is checked. Signup does not apply this policy;
    it is enforced on password change only.

    Examples:
        >>> PasswordPolicy().validate("0123456789")
        >>> PasswordPolicy().min_length
        10
    """

    min_length: int = MIN_PASSWORD_LENGTH

    def validate(self, password: Optional[str]) -> None:
        """Raise PasswordPolicyError if password does not satisfy the policy.

        Args:
            password: Candidate plaintext password (None is rejected)

        Raises:
            PasswordPolicyError: If password is missing or too short
        """
        if password is None or len(password) < self.min_length:
            raise PasswordPolicyError(self.min_length)
