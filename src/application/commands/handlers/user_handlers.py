"""User profile command handlers.

Reference:
    - src/application/commands/user_commands.py
"""

from src.application.commands.user_commands import UpdateMyProfile
from src.application.dtos.user_dtos import UserResult, to_user_result
from src.core.enums import ErrorCode
from src.core.errors import DomainError, not_found
from src.core.result import Failure, Result, Success
from src.domain.protocols.user_repository import UserRepository


class UpdateMyProfileHandler:
    """Handler for UpdateMyProfile command.

    The caller is identified by the principal's ``auth_id``; the identity
    itself is never changed here.
    """

    def __init__(self, user_repo: UserRepository) -> None:
        self._user_repo = user_repo

    async def handle(self, cmd: UpdateMyProfile) -> Result[UserResult, DomainError]:
        """Handle UpdateMyProfile command.

        Returns:
            Success(UserResult): Updated profile.
            Failure(NotFoundError): No user for the principal.
        """
        user = await self._user_repo.find_by_auth_id(cmd.auth_id)
        if user is None:
            return Failure(
                error=not_found("User", cmd.auth_id, ErrorCode.USER_NOT_FOUND)
            )

        user.first_name = cmd.first_name
        user.last_name = cmd.last_name
        user.email = cmd.email
        user.photo = cmd.photo
        if cmd.preferences is not None:
            user.preferences = cmd.preferences

        await self._user_repo.save(user)

        saved = await self._user_repo.find_by_auth_id(cmd.auth_id) or user
        return Success(value=to_user_result(saved))
