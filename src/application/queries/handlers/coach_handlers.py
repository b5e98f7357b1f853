"""Coach query handlers."""

from src.application.dtos.coach_dtos import CoachResult, to_coach_result
from src.application.queries.coach_queries import GetCoachById, GetCoachesByClubId
from src.core.enums import ErrorCode
from src.core.errors import DomainError, not_found
from src.core.result import Failure, Result, Success
from src.domain.protocols.club_repository import ClubRepository
from src.domain.protocols.coach_repository import CoachRepository


class GetCoachByIdHandler:
    def __init__(self, coach_repo: CoachRepository) -> None:
        self._coach_repo = coach_repo

    async def handle(self, query: GetCoachById) -> Result[CoachResult, DomainError]:
        coach = await self._coach_repo.find_by_id(query.coach_id)
        if coach is None:
            return Failure(
                error=not_found("Coach", query.coach_id, ErrorCode.COACH_NOT_FOUND)
            )
        return Success(value=to_coach_result(coach))


class GetCoachesByClubIdHandler:
    """Coaches of a club ordered by last then first name, with their teams."""

    def __init__(
        self, club_repo: ClubRepository, coach_repo: CoachRepository
    ) -> None:
        self._club_repo = club_repo
        self._coach_repo = coach_repo

    async def handle(
        self, query: GetCoachesByClubId
    ) -> Result[list[CoachResult], DomainError]:
        club = await self._club_repo.find_by_id(query.club_id)
        if club is None:
            return Failure(
                error=not_found("Club", query.club_id, ErrorCode.CLUB_NOT_FOUND)
            )
        coaches = await self._coach_repo.list_by_club(
            club.id, include_archived=query.include_archived
        )
        return Success(value=[to_coach_result(c) for c in coaches])
