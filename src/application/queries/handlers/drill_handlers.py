"""Drill and drill template query handlers.

Scoped listings split results into resources granted exactly at the
requested scope and resources inherited from broader scopes on the same
branch (club → age group → team).

Architecture:
- Application layer handlers (orchestrate data retrieval)
- Filtering and partitioning happen in memory over the club's drills;
  both lists keep the repository's name ordering

Reference:
    - src/domain/services/drill_scope.py
"""

from collections.abc import Sequence
from uuid import UUID

from src.application.dtos.drill_dtos import (
    DrillResult,
    DrillsByScopeResult,
    DrillTemplateResult,
    DrillTemplatesByScopeResult,
    to_drill_result,
    to_template_result,
)
from src.application.queries.drill_queries import (
    GetDrillById,
    GetDrillsByScope,
    GetDrillTemplateById,
    GetDrillTemplatesByScope,
)
from src.core.enums import ErrorCode
from src.core.errors import DomainError, not_found
from src.core.result import Failure, Result, Success
from src.domain.entities.drill import Drill, DrillTemplate, ScopeLink
from src.domain.enums import DrillCategory
from src.domain.protocols.club_repository import ClubRepository
from src.domain.protocols.drill_repository import (
    DrillRepository,
    DrillTemplateRepository,
)
from src.domain.protocols.team_repository import TeamRepository
from src.domain.services.drill_scope import RequestedScope, partition_by_scope

ALL_CATEGORIES = "all"


def _links(resource: Drill | DrillTemplate) -> Sequence[ScopeLink]:
    return resource.scope_links or [resource.scope]


def _category_filter(label: str | None) -> DrillCategory | None:
    """Category to filter by; None for no filter ("all" or unknown label)."""
    if not label or label.strip().lower() == ALL_CATEGORIES:
        return None
    return DrillCategory.from_label(label)


def _matches_search(drill: Drill, term: str) -> bool:
    haystack = [drill.name, drill.description or "", *drill.attributes]
    return any(term in text.lower() for text in haystack)


async def _requested_scope(
    club_repo: ClubRepository,
    team_repo: TeamRepository,
    club_id: UUID,
    age_group_id: UUID | None,
    team_id: UUID | None,
) -> Result[RequestedScope, DomainError]:
    """Build the requested scope; a team's age group is looked up."""
    club = await club_repo.find_by_id(club_id)
    if club is None:
        return Failure(error=not_found("Club", club_id, ErrorCode.CLUB_NOT_FOUND))

    if team_id is not None:
        team = await team_repo.find_by_id(team_id)
        if team is None or team.club_id != club.id:
            return Failure(error=not_found("Team", team_id, ErrorCode.TEAM_NOT_FOUND))
        age_group_id = team.age_group_id

    return Success(
        value=RequestedScope(club_id=club.id, age_group_id=age_group_id, team_id=team_id)
    )


class GetDrillByIdHandler:
    def __init__(self, drill_repo: DrillRepository) -> None:
        self._drill_repo = drill_repo

    async def handle(self, query: GetDrillById) -> Result[DrillResult, DomainError]:
        drill = await self._drill_repo.find_by_id(query.drill_id)
        if drill is None:
            return Failure(
                error=not_found("Drill", query.drill_id, ErrorCode.DRILL_NOT_FOUND)
            )
        return Success(value=to_drill_result(drill))


class GetDrillsByScopeHandler:
    """Handler for GetDrillsByScope query.

    Dependencies (injected via constructor):
        - ClubRepository: Club existence
        - TeamRepository: Team existence and its age group
        - DrillRepository: The club's drills with scope links
    """

    def __init__(
        self,
        club_repo: ClubRepository,
        team_repo: TeamRepository,
        drill_repo: DrillRepository,
    ) -> None:
        self._club_repo = club_repo
        self._team_repo = team_repo
        self._drill_repo = drill_repo

    async def handle(
        self, query: GetDrillsByScope
    ) -> Result[DrillsByScopeResult, DomainError]:
        """Handle GetDrillsByScope query.

        Returns:
            Success(DrillsByScopeResult): Own and inherited drills.
            Failure(NotFoundError): Unknown club, or a team outside the club.
        """
        scope_result = await _requested_scope(
            self._club_repo,
            self._team_repo,
            query.club_id,
            query.age_group_id,
            query.team_id,
        )
        if isinstance(scope_result, Failure):
            return scope_result

        drills = await self._drill_repo.list_by_club(query.club_id)

        category = _category_filter(query.category)
        if category is not None:
            drills = [d for d in drills if d.category == category]
        term = (query.search or "").strip().lower()
        if term:
            drills = [d for d in drills if _matches_search(d, term)]

        partitioned = partition_by_scope(drills, scope_result.value, _links)

        return Success(
            value=DrillsByScopeResult(
                drills=[to_drill_result(d) for d in partitioned.own],
                inherited_drills=[to_drill_result(d) for d in partitioned.inherited],
                total_count=partitioned.total_count,
            )
        )


class GetDrillTemplateByIdHandler:
    def __init__(self, template_repo: DrillTemplateRepository) -> None:
        self._template_repo = template_repo

    async def handle(
        self, query: GetDrillTemplateById
    ) -> Result[DrillTemplateResult, DomainError]:
        template = await self._template_repo.find_by_id(query.template_id)
        if template is None:
            return Failure(
                error=not_found(
                    "DrillTemplate",
                    query.template_id,
                    ErrorCode.DRILL_TEMPLATE_NOT_FOUND,
                )
            )
        return Success(value=to_template_result(template))


class GetDrillTemplatesByScopeHandler:
    """Templates visible at a scope; same scope rules as drills."""

    def __init__(
        self,
        club_repo: ClubRepository,
        team_repo: TeamRepository,
        template_repo: DrillTemplateRepository,
    ) -> None:
        self._club_repo = club_repo
        self._team_repo = team_repo
        self._template_repo = template_repo

    async def handle(
        self, query: GetDrillTemplatesByScope
    ) -> Result[DrillTemplatesByScopeResult, DomainError]:
        scope_result = await _requested_scope(
            self._club_repo,
            self._team_repo,
            query.club_id,
            query.age_group_id,
            query.team_id,
        )
        if isinstance(scope_result, Failure):
            return scope_result

        templates = await self._template_repo.list_by_club(query.club_id)
        partitioned = partition_by_scope(templates, scope_result.value, _links)

        return Success(
            value=DrillTemplatesByScopeResult(
                templates=[to_template_result(t) for t in partitioned.own],
                inherited_templates=[
                    to_template_result(t) for t in partitioned.inherited
                ],
                total_count=partitioned.total_count,
            )
        )
