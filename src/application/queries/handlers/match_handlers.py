"""Match query handlers."""

from src.application.dtos.match_dtos import MatchResult, to_match_result
from src.application.queries.match_queries import GetMatchById
from src.core.enums import ErrorCode
from src.core.errors import DomainError, not_found
from src.core.result import Failure, Result, Success
from src.domain.protocols.match_repository import MatchRepository
from src.domain.protocols.team_repository import TeamRepository


class GetMatchByIdHandler:
    """Match detail; age group and club come from the match's team."""

    def __init__(self, match_repo: MatchRepository, team_repo: TeamRepository) -> None:
        self._match_repo = match_repo
        self._team_repo = team_repo

    async def handle(self, query: GetMatchById) -> Result[MatchResult, DomainError]:
        match = await self._match_repo.find_by_id(query.match_id)
        if match is None:
            return Failure(
                error=not_found("Match", query.match_id, ErrorCode.MATCH_NOT_FOUND)
            )
        team = await self._team_repo.find_by_id(match.team_id)
        return Success(
            value=to_match_result(
                match,
                age_group_id=team.age_group_id if team else None,
                club_id=team.club_id if team else None,
            )
        )
