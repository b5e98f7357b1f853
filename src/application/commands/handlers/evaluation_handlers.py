"""Player ability evaluation command handlers.

An evaluation is owned by the coach who created it; only that coach may
update or delete it. After every change the player's current attribute
ratings and overall rating are refreshed from their latest evaluation.

Architecture:
- Application layer handlers (orchestrate business logic)
- Evaluation row and attribute rows are written in one repository
  transaction; a failure rolls both back

Reference:
    - src/application/commands/evaluation_commands.py
    - src/application/services/caller_identity.py
"""

from collections.abc import Sequence
from datetime import UTC, datetime
from uuid import UUID

from uuid_extensions import uuid7

from src.application.commands.evaluation_commands import (
    CreatePlayerAbilityEvaluation,
    DeletePlayerAbilityEvaluation,
    EvaluationAttributeInput,
    UpdatePlayerAbilityEvaluation,
)
from src.application.dtos.player_dtos import EvaluationResult, to_evaluation_result
from src.application.services.caller_identity import resolve_caller_coach
from src.core.enums import ErrorCode
from src.core.errors import (
    AuthorizationError,
    DomainError,
    ValidationError,
    not_found,
)
from src.core.result import Failure, Result, Success
from src.domain.entities.evaluation import (
    MAX_ATTRIBUTE_RATING,
    MIN_ATTRIBUTE_RATING,
    AttributeEvaluation,
    EvaluationAttribute,
    overall_from_ratings,
)
from src.domain.protocols.coach_repository import CoachRepository
from src.domain.protocols.evaluation_repository import EvaluationRepository
from src.domain.protocols.logger_protocol import LoggerProtocol
from src.domain.protocols.player_repository import PlayerRepository
from src.domain.protocols.user_repository import UserRepository


class EvaluationError:
    """Evaluation error messages."""

    NO_COACH = "No coach is available to record the evaluation"
    INVALID_RATING = (
        f"Attribute ratings must be between {MIN_ATTRIBUTE_RATING} "
        f"and {MAX_ATTRIBUTE_RATING}"
    )
    NOT_A_COACH_UPDATE = (
        "User is not authorized to update evaluations. "
        "Only coaches can perform evaluations."
    )
    NOT_OWNER_UPDATE = "Only the coach who created this evaluation can update it."
    NOT_A_COACH_DELETE = (
        "User is not authorized to delete evaluations. "
        "Only coaches can perform evaluations."
    )
    NOT_OWNER_DELETE = "Only the coach who created this evaluation can delete it."


def _check_ratings(
    attributes: Sequence[EvaluationAttributeInput],
) -> ValidationError | None:
    for attribute in attributes:
        if not MIN_ATTRIBUTE_RATING <= attribute.rating <= MAX_ATTRIBUTE_RATING:
            return ValidationError(
                code=ErrorCode.INVALID_RATING,
                message=EvaluationError.INVALID_RATING,
                field="attributes",
            )
    return None


def _to_attributes(
    attributes: Sequence[EvaluationAttributeInput],
) -> list[EvaluationAttribute]:
    return [
        EvaluationAttribute(
            attribute_name=a.attribute_name, rating=a.rating, notes=a.notes
        )
        for a in attributes
    ]


async def _refresh_current_ratings(
    player_id: UUID,
    evaluation_repo: EvaluationRepository,
    player_repo: PlayerRepository,
) -> None:
    """Mirror the player's latest evaluation into their current ratings."""
    latest = await evaluation_repo.list_by_player(player_id, limit=1)
    if not latest:
        await player_repo.update_ratings(player_id, {}, None)
        return
    evaluation = latest[0]
    await player_repo.update_ratings(
        player_id,
        {a.attribute_name: a.rating for a in evaluation.attributes},
        evaluation.overall_rating,
    )


class CreatePlayerAbilityEvaluationHandler:
    """Handler for CreatePlayerAbilityEvaluation command.

    The evaluating coach is the caller's coach record; when the caller has
    none the first active coach is used.

    Dependencies (injected via constructor):
        - PlayerRepository: Existence check and current ratings
        - EvaluationRepository: For persistence
        - UserRepository, CoachRepository: Caller resolution
        - LoggerProtocol: Structured logging
    """

    def __init__(
        self,
        player_repo: PlayerRepository,
        evaluation_repo: EvaluationRepository,
        user_repo: UserRepository,
        coach_repo: CoachRepository,
        logger: LoggerProtocol,
    ) -> None:
        self._player_repo = player_repo
        self._evaluation_repo = evaluation_repo
        self._user_repo = user_repo
        self._coach_repo = coach_repo
        self._logger = logger

    async def handle(
        self, cmd: CreatePlayerAbilityEvaluation
    ) -> Result[EvaluationResult, DomainError]:
        """Handle CreatePlayerAbilityEvaluation command.

        Returns:
            Success(EvaluationResult): Evaluation recorded.
            Failure(NotFoundError): Player does not exist.
            Failure(ValidationError): No coach available, or a rating is
                outside 0-99.
        """
        player = await self._player_repo.find_by_id(cmd.player_id)
        if player is None:
            return Failure(
                error=not_found("Player", cmd.player_id, ErrorCode.PLAYER_NOT_FOUND)
            )

        coach = await resolve_caller_coach(
            cmd.auth_id, self._user_repo, self._coach_repo
        )
        if coach is None:
            coach = await self._coach_repo.find_first_active()
        if coach is None:
            return Failure(
                error=ValidationError(
                    code=ErrorCode.NO_COACH_AVAILABLE,
                    message=EvaluationError.NO_COACH,
                    field="system",
                )
            )

        rating_error = _check_ratings(cmd.attributes)
        if rating_error is not None:
            return Failure(error=rating_error)

        attributes = _to_attributes(cmd.attributes)
        evaluation = AttributeEvaluation(
            id=uuid7(),
            player_id=player.id,
            evaluated_by=coach.id,
            evaluated_at=cmd.evaluated_at or datetime.now(UTC),
            overall_rating=overall_from_ratings([a.rating for a in attributes]),
            coach_notes=cmd.coach_notes,
            period_start=cmd.period_start,
            period_end=cmd.period_end,
            attributes=attributes,
            coach_name=coach.full_name,
        )
        await self._evaluation_repo.add(evaluation)
        await _refresh_current_ratings(
            player.id, self._evaluation_repo, self._player_repo
        )

        self._logger.info(
            "evaluation_created",
            evaluation_id=str(evaluation.id),
            player_id=str(player.id),
            coach_id=str(coach.id),
            overall_rating=evaluation.overall_rating,
        )

        return Success(value=to_evaluation_result(evaluation))


class UpdatePlayerAbilityEvaluationHandler:
    """Handler for UpdatePlayerAbilityEvaluation command (creating coach only)."""

    def __init__(
        self,
        player_repo: PlayerRepository,
        evaluation_repo: EvaluationRepository,
        user_repo: UserRepository,
        coach_repo: CoachRepository,
    ) -> None:
        self._player_repo = player_repo
        self._evaluation_repo = evaluation_repo
        self._user_repo = user_repo
        self._coach_repo = coach_repo

    async def handle(
        self, cmd: UpdatePlayerAbilityEvaluation
    ) -> Result[EvaluationResult, DomainError]:
        evaluation = await self._evaluation_repo.find_by_id(cmd.evaluation_id)
        if evaluation is None or evaluation.player_id != cmd.player_id:
            return Failure(
                error=not_found(
                    "Evaluation", cmd.evaluation_id, ErrorCode.EVALUATION_NOT_FOUND
                )
            )

        coach = await resolve_caller_coach(
            cmd.auth_id, self._user_repo, self._coach_repo
        )
        if coach is None:
            return Failure(
                error=AuthorizationError(
                    code=ErrorCode.PERMISSION_DENIED,
                    message=EvaluationError.NOT_A_COACH_UPDATE,
                )
            )
        if not evaluation.is_owned_by(coach.id):
            return Failure(
                error=AuthorizationError(
                    code=ErrorCode.NOT_EVALUATION_OWNER,
                    message=EvaluationError.NOT_OWNER_UPDATE,
                )
            )

        rating_error = _check_ratings(cmd.attributes)
        if rating_error is not None:
            return Failure(error=rating_error)

        evaluation.attributes = _to_attributes(cmd.attributes)
        evaluation.overall_rating = overall_from_ratings(
            [a.rating for a in evaluation.attributes]
        )
        evaluation.evaluated_at = cmd.evaluated_at or evaluation.evaluated_at
        evaluation.coach_notes = cmd.coach_notes
        evaluation.period_start = cmd.period_start
        evaluation.period_end = cmd.period_end

        await self._evaluation_repo.replace(evaluation)
        await _refresh_current_ratings(
            evaluation.player_id, self._evaluation_repo, self._player_repo
        )

        return Success(value=to_evaluation_result(evaluation))


class DeletePlayerAbilityEvaluationHandler:
    """Handler for DeletePlayerAbilityEvaluation command.

    Attribute rows and the evaluation row are deleted in one transaction.
    """

    def __init__(
        self,
        player_repo: PlayerRepository,
        evaluation_repo: EvaluationRepository,
        user_repo: UserRepository,
        coach_repo: CoachRepository,
        logger: LoggerProtocol,
    ) -> None:
        self._player_repo = player_repo
        self._evaluation_repo = evaluation_repo
        self._user_repo = user_repo
        self._coach_repo = coach_repo
        self._logger = logger

    async def handle(
        self, cmd: DeletePlayerAbilityEvaluation
    ) -> Result[None, DomainError]:
        """Handle DeletePlayerAbilityEvaluation command.

        Returns:
            Success(None): Evaluation and its attributes deleted.
            Failure(NotFoundError): No such evaluation for the player.
            Failure(AuthorizationError): Caller is not a coach, or not the
                creating coach.
        """
        evaluation = await self._evaluation_repo.find_by_id(cmd.evaluation_id)
        if evaluation is None or evaluation.player_id != cmd.player_id:
            return Failure(
                error=not_found(
                    "Evaluation", cmd.evaluation_id, ErrorCode.EVALUATION_NOT_FOUND
                )
            )

        coach = await resolve_caller_coach(
            cmd.auth_id, self._user_repo, self._coach_repo
        )
        if coach is None:
            return Failure(
                error=AuthorizationError(
                    code=ErrorCode.PERMISSION_DENIED,
                    message=EvaluationError.NOT_A_COACH_DELETE,
                )
            )
        if not evaluation.is_owned_by(coach.id):
            return Failure(
                error=AuthorizationError(
                    code=ErrorCode.NOT_EVALUATION_OWNER,
                    message=EvaluationError.NOT_OWNER_DELETE,
                )
            )

        await self._evaluation_repo.delete(evaluation.id)
        await _refresh_current_ratings(
            evaluation.player_id, self._evaluation_repo, self._player_repo
        )

        self._logger.info(
            "evaluation_deleted",
            evaluation_id=str(evaluation.id),
            player_id=str(evaluation.player_id),
            coach_id=str(coach.id),
        )
        return Success(value=None)
