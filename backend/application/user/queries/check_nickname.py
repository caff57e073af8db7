"""Nickname availability query."""

from dataclasses import dataclass

from domain.user.core.ports.user_repository import IUserRepository


@dataclass
class CheckNicknameQuery:
    """Query whether a display name is still free."""

    repository: IUserRepository

    async def execute(self, candidate: str) -> bool:
        """Check nickname availability.

        Args:
            candidate: Display name to test (exact match)

        Returns:
            True if no user has this display name
        """
        return not await self.repository.exists_by_display_name(candidate)
