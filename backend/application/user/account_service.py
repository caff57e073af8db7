"""Account service facade.

Groups the account commands and queries behind one object built from
explicit collaborators. The service keeps no state between calls; every
guarantee about uniqueness and consistency comes from the repository.
"""

from typing import Optional

from application.user.commands.login import LoginCommand
from application.user.commands.signup import SignupCommand
from application.user.commands.update_nickname import UpdateNicknameCommand
from application.user.commands.update_password import UpdatePasswordCommand
from application.user.commands.update_profile_image import UpdateProfileImageCommand
from application.user.queries.check_nickname import CheckNicknameQuery
from application.user.queries.get_profile import GetProfileQuery
from application.user.results import LoginResult, ProfileView, SignupResult
from domain.shared.ports.event_bus import IEventBus
from domain.user.auth.ports.password_hasher import IPasswordHasher
from domain.user.auth.ports.token_issuer import ITokenIssuer
from domain.user.core.ports.user_repository import IUserRepository
from domain.user.core.value_objects.user_id import UserId


class AccountService:
    """Registration, authentication and profile management.

    Examples:
        >>> service = AccountService(repository, BcryptPasswordHasher(), JwtTokenIssuer("secret"))
        >>> signup = await service.signup("kim01", "p@ssword1", "Kim", "kim@x.com")
        >>> login = await service.login("kim01", "p@ssword1")
        >>> login.user_id == signup.user_id
        True
    """

    def __init__(
        self,
        repository: IUserRepository,
        password_hasher: IPasswordHasher,
        token_issuer: ITokenIssuer,
        event_bus: Optional[IEventBus] = None,
    ) -> None:
        self._signup = SignupCommand(repository, password_hasher, event_bus)
        self._login = LoginCommand(repository, password_hasher, token_issuer)
        self._update_nickname = UpdateNicknameCommand(repository, event_bus)
        self._update_password = UpdatePasswordCommand(repository, password_hasher, event_bus)
        self._update_profile_image = UpdateProfileImageCommand(repository, event_bus)
        self._check_nickname = CheckNicknameQuery(repository)
        self._get_profile = GetProfileQuery(repository)

    async def signup(
        self,
        login_id: str,
        password: str,
        display_name: str,
        email: str,
        profile_image: Optional[str] = None,
    ) -> SignupResult:
        return await self._signup.execute(login_id, password, display_name, email, profile_image)

    async def login(self, login_id: str, password: str) -> LoginResult:
        return await self._login.execute(login_id, password)

    async def is_nickname_available(self, candidate: str) -> bool:
        return await self._check_nickname.execute(candidate)

    async def update_nickname(self, user_id: UserId, new_nickname: Optional[str]) -> None:
        await self._update_nickname.execute(user_id, new_nickname)

    async def update_password(
        self,
        user_id: UserId,
        current_password: str,
        new_password: str,
        confirm_password: str,
    ) -> None:
        await self._update_password.execute(
            user_id, current_password, new_password, confirm_password
        )

    async def update_profile_image(self, user_id: UserId, profile_image: Optional[str]) -> None:
        await self._update_profile_image.execute(user_id, profile_image)

    async def get_profile(self, user_id: UserId) -> ProfileView:
        return await self._get_profile.execute(user_id)
