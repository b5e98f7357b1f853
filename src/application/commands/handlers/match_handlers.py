"""Match command handlers.

Reference:
    - src/application/commands/match_commands.py
"""

from uuid_extensions import uuid7

from src.application.commands.match_commands import (
    CreateMatch,
    PerformanceRatingInput,
    UpdateMatch,
)
from src.application.dtos.match_dtos import MatchResult, to_match_result
from src.core.enums import ErrorCode
from src.core.errors import DomainError, ValidationError, not_found
from src.core.result import Failure, Result, Success
from src.domain.entities.match import Match, PerformanceRating
from src.domain.enums import MatchStatus
from src.domain.protocols.logger_protocol import LoggerProtocol
from src.domain.protocols.match_repository import MatchRepository
from src.domain.protocols.team_repository import TeamRepository


class MatchError:
    """Match error messages."""

    INVALID_STATUS = (
        f"Invalid status. Must be one of: {', '.join(MatchStatus.labels())}."
    )
    MATCH_DATE_REQUIRED = "Match date is required"


def _parse_status(label: str) -> MatchStatus | ValidationError:
    status = MatchStatus.from_label(label or "")
    if status is None:
        return ValidationError(
            code=ErrorCode.INVALID_ENUM_VALUE,
            message=MatchError.INVALID_STATUS,
            field="status",
        )
    return status


def _ratings(inputs: list[PerformanceRatingInput]) -> list[PerformanceRating]:
    return [PerformanceRating(player_id=r.player_id, rating=r.rating) for r in inputs]


class CreateMatchHandler:
    """Handler for CreateMatch command.

    Dependencies (injected via constructor):
        - TeamRepository: Team existence (and its age group/club for the result)
        - MatchRepository: For persistence
        - LoggerProtocol: Structured logging
    """

    def __init__(
        self,
        team_repo: TeamRepository,
        match_repo: MatchRepository,
        logger: LoggerProtocol,
    ) -> None:
        self._team_repo = team_repo
        self._match_repo = match_repo
        self._logger = logger

    async def handle(self, cmd: CreateMatch) -> Result[MatchResult, DomainError]:
        """Handle CreateMatch command.

        Returns:
            Success(MatchResult): Match created.
            Failure(NotFoundError): Team does not exist.
            Failure(ValidationError): Unknown status.
        """
        team = await self._team_repo.find_by_id(cmd.team_id) if cmd.team_id else None
        if team is None:
            return Failure(error=not_found("Team", cmd.team_id, ErrorCode.TEAM_NOT_FOUND))

        status = _parse_status(cmd.status)
        if isinstance(status, ValidationError):
            return Failure(error=status)
        if cmd.match_date is None:
            return Failure(
                error=ValidationError(
                    code=ErrorCode.VALIDATION_FAILED,
                    message=MatchError.MATCH_DATE_REQUIRED,
                    field="matchDate",
                )
            )

        match = Match(
            id=uuid7(),
            team_id=team.id,
            season_id=cmd.season_id,
            squad_size=cmd.squad_size,
            opposition=cmd.opposition,
            match_date=cmd.match_date,
            status=status,
            is_home=cmd.is_home,
            meet_time=cmd.meet_time,
            kick_off_time=cmd.kick_off_time,
            location=cmd.location,
            competition=cmd.competition,
            primary_kit_id=cmd.primary_kit_id,
            secondary_kit_id=cmd.secondary_kit_id,
            goalkeeper_kit_id=cmd.goalkeeper_kit_id,
            home_score=cmd.home_score,
            away_score=cmd.away_score,
            notes=cmd.notes,
            weather_condition=cmd.weather_condition,
            weather_temperature=cmd.weather_temperature,
            is_locked=cmd.is_locked,
            performance_ratings=_ratings(cmd.performance_ratings),
        )
        await self._match_repo.save(match)

        self._logger.info(
            "match_created",
            match_id=str(match.id),
            team_id=str(team.id),
            status=status.label,
        )

        return Success(
            value=to_match_result(
                match, age_group_id=team.age_group_id, club_id=team.club_id
            )
        )


class UpdateMatchHandler:
    """Handler for UpdateMatch command (full replace, team unchanged)."""

    def __init__(self, team_repo: TeamRepository, match_repo: MatchRepository) -> None:
        self._team_repo = team_repo
        self._match_repo = match_repo

    async def handle(self, cmd: UpdateMatch) -> Result[MatchResult, DomainError]:
        match = await self._match_repo.find_by_id(cmd.match_id)
        if match is None:
            return Failure(
                error=not_found("Match", cmd.match_id, ErrorCode.MATCH_NOT_FOUND)
            )

        status = _parse_status(cmd.status)
        if isinstance(status, ValidationError):
            return Failure(error=status)

        match.season_id = cmd.season_id
        match.squad_size = cmd.squad_size
        match.opposition = cmd.opposition
        match.match_date = cmd.match_date or match.match_date
        match.status = status
        match.is_home = cmd.is_home
        match.meet_time = cmd.meet_time
        match.kick_off_time = cmd.kick_off_time
        match.location = cmd.location
        match.competition = cmd.competition
        match.primary_kit_id = cmd.primary_kit_id
        match.secondary_kit_id = cmd.secondary_kit_id
        match.goalkeeper_kit_id = cmd.goalkeeper_kit_id
        match.home_score = cmd.home_score
        match.away_score = cmd.away_score
        match.notes = cmd.notes
        match.weather_condition = cmd.weather_condition
        match.weather_temperature = cmd.weather_temperature
        match.is_locked = cmd.is_locked
        match.performance_ratings = _ratings(cmd.performance_ratings)

        await self._match_repo.save(match)

        team = await self._team_repo.find_by_id(match.team_id)
        return Success(
            value=to_match_result(
                match,
                age_group_id=team.age_group_id if team else None,
                club_id=team.club_id if team else None,
            )
        )
