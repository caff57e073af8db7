"""Login command."""

from dataclasses import dataclass
import logging

from application.user.results import LoginResult
from domain.user.auth.ports.password_hasher import IPasswordHasher
from domain.user.auth.ports.token_issuer import ITokenIssuer
from domain.user.core.exceptions.user_errors import InvalidCredentialError, UserNotFoundError
from domain.user.core.ports.user_repository import IUserRepository


logger = logging.getLogger(__name__)


@dataclass
class LoginCommand:
    """Command to verify credentials and mint a bearer token.

    Read-only with respect to stored state.

    Examples:
        >>> command = LoginCommand(repository, hasher, issuer)
        >>> result = await command.execute("kim01", "p@ssword1")
        >>> bool(result.access_token)
        True
    """

    repository: IUserRepository
    password_hasher: IPasswordHasher
    token_issuer: ITokenIssuer

    async def execute(self, login_id: str, password: str) -> LoginResult:
        """Execute login.

        Args:
            login_id: Login identifier
            password: Plaintext password

        Returns:
            LoginResult carrying the access token

        Raises:
            UserNotFoundError: If no user has this login id
            InvalidCredentialError: If the password does not match
        """
        user = await self.repository.find_by_login_id(login_id)

        if user is None:
            logger.warning("Login for unknown user", extra={"login_id": login_id})
            raise UserNotFoundError(login_id)

        if not await self.password_hasher.verify(password, user.password_hash):
            logger.warning("Login with wrong password", extra={"login_id": login_id})
            raise InvalidCredentialError()

        access_token = self.token_issuer.issue(user.login_id)

        logger.info(
            "User logged in",
            extra={"user_id": str(user.user_id), "login_id": login_id},
        )

        return LoginResult(
            display_name=user.display_name,
            user_id=user.user_id,
            access_token=access_token,
        )
