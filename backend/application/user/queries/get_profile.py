"""Get profile query."""

from dataclasses import dataclass

from application.user.results import ProfileView
from domain.user.core.exceptions.user_errors import UserNotFoundError
from domain.user.core.ports.user_repository import IUserRepository
from domain.user.core.value_objects.user_id import UserId


@dataclass
class GetProfileQuery:
    """Query to read a user's profile.

    Read-only operation that retrieves user from repository.

    Examples:
        >>> query = GetProfileQuery(repository)
        >>> profile = await query.execute(user_id)
        >>> profile.display_name
        'Kim'
    """

    repository: IUserRepository

    async def execute(self, user_id: UserId) -> ProfileView:
        """Get profile by internal user ID.

        Args:
            user_id: Internal user UUID

        Returns:
            ProfileView of the user

        Raises:
            UserNotFoundError: If user doesn't exist
        """
        user = await self.repository.find_by_id(user_id)
        if user is None:
            raise UserNotFoundError(str(user_id))

        return ProfileView(
            user_id=user.user_id,
            login_id=user.login_id,
            display_name=user.display_name,
            profile_image=user.profile_image,
        )
