"""Caller identity resolution.

Maps the authenticated principal (identity provider ``userId``) to the
caller's coach record: principal → User (by ``auth_id``) → Coach (by
``user_id``). Used by handlers that attribute or authorize changes by coach.

Architecture:
    - Application service (uses repositories, no business rules)
    - Returns None instead of failing; each handler decides what a missing
      coach means (fallback, Forbidden, or an unattributed record)

Usage:
    coach = await resolve_caller_coach(cmd.auth_id, self._user_repo, self._coach_repo)
"""

from src.domain.entities.coach import Coach
from src.domain.protocols.coach_repository import CoachRepository
from src.domain.protocols.user_repository import UserRepository


async def resolve_caller_coach(
    auth_id: str | None,
    user_repo: UserRepository,
    coach_repo: CoachRepository,
) -> Coach | None:
    """Return the caller's coach record, or None.

    Args:
        auth_id: Principal ``userId``; None for anonymous calls.
        user_repo: Repository for the principal's user record.
        coach_repo: Repository for the coach linked to that user.

    Returns:
        Coach linked to the caller's user, None when the caller is anonymous,
        unknown, or not a coach.
    """
    if not auth_id:
        return None
    user = await user_repo.find_by_auth_id(auth_id)
    if user is None:
        return None
    return await coach_repo.find_by_user_id(user.id)
