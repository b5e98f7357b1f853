"""HTTP client for the OurGame API.

Wraps an httpx.AsyncClient with:
- camelCase JSON bodies built from the request schemas
- Response parsing into the API response schemas
- Problem-details error handling (raises ApiError)
- Optional client principal header for authenticated routes
- Structured logging

There are no automatic retries: a failed call raises once and callers decide
what to do.
"""

import base64
import json
from typing import Any, TypeVar
from uuid import UUID

import httpx
import structlog
from pydantic import BaseModel

from src.client.errors import ApiError
from src.core.constants import API_V1_PREFIX, CLIENT_TIMEOUT_DEFAULT, PRINCIPAL_HEADER
from src.schemas.age_group_schemas import (
    AgeGroupResponse,
    AgeGroupStatisticsResponse,
    CreateAgeGroupRequest,
    UpdateAgeGroupRequest,
)
from src.schemas.club_schemas import (
    ClubDetailResponse,
    ClubStatisticsResponse,
    ClubSummaryResponse,
    MyClubResponse,
    UpdateClubRequest,
)
from src.schemas.coach_schemas import CoachResponse, UpdateCoachRequest
from src.schemas.development_schemas import (
    CreateDevelopmentPlanRequest,
    CreateReportRequest,
    DevelopmentPlanListItemResponse,
    DevelopmentPlanResponse,
    ReportResponse,
    UpdateDevelopmentPlanRequest,
    UpdateReportRequest,
)
from src.schemas.drill_schemas import (
    CreateDrillRequest,
    CreateDrillTemplateRequest,
    DrillResponse,
    DrillsByScopeResponse,
    DrillTemplateResponse,
    DrillTemplatesByScopeResponse,
    UpdateDrillRequest,
    UpdateDrillTemplateRequest,
)
from src.schemas.kit_schemas import KitRequest, KitResponse
from src.schemas.match_schemas import (
    ClubMatchesResponse,
    CreateMatchRequest,
    MatchResponse,
    MatchSummaryResponse,
    UpdateMatchRequest,
)
from src.schemas.player_schemas import (
    EvaluationRequest,
    EvaluationResponse,
    PlayerAbilitiesResponse,
    PlayerAttributesResponse,
    PlayerListItemResponse,
    PlayerPageResponse,
    PlayerResponse,
    RecentPerformanceResponse,
    UpcomingMatchResponse,
    UpdatePlayerRequest,
)
from src.schemas.team_schemas import (
    AddPlayerToTeamRequest,
    ArchiveTeamRequest,
    AssignCoachRequest,
    ClubTeamResponse,
    CreateTeamRequest,
    MyTeamResponse,
    SquadPlayerResponse,
    TeamCoachAssignmentResponse,
    TeamCoachResponse,
    TeamDetailResponse,
    TeamMembershipResponse,
    TeamOverviewResponse,
    TeamPlayerResponse,
    TeamResponse,
    UpdateCoachRoleRequest,
    UpdateSquadNumberRequest,
    UpdateTeamRequest,
)
from src.schemas.user_schemas import UpdateProfileRequest, UserResponse

ResponseT = TypeVar("ResponseT", bound=BaseModel)


def encode_principal(
    user_id: str,
    *,
    user_details: str = "",
    identity_provider: str = "aad",
    user_roles: list[str] | None = None,
) -> str:
    """Encode a client principal the way the identity provider injects it.

    Args:
        user_id: Identity provider user id (becomes the caller's auth id).
        user_details: Display name or email.
        identity_provider: Provider name.
        user_roles: Role names.

    Returns:
        str: Base64-encoded JSON principal.
    """
    payload = {
        "userId": user_id,
        "userDetails": user_details,
        "identityProvider": identity_provider,
        "userRoles": user_roles if user_roles is not None else ["anonymous", "authenticated"],
    }
    return base64.b64encode(json.dumps(payload).encode("utf-8")).decode("ascii")


class ApiClient:
    """Async client for the v1 API.

    Attributes:
        _http: Underlying httpx client (owned unless injected).
        _logger: Structured logger.

    Example:
        >>> async with ApiClient(base_url="http://localhost:8000") as client:
        ...     clubs = await client.get_clubs()
    """

    def __init__(
        self,
        *,
        base_url: str = "http://localhost:8000",
        principal: str | None = None,
        timeout: float = CLIENT_TIMEOUT_DEFAULT,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        """Initialize the client.

        Args:
            base_url: API origin (the ``/api/v1`` prefix is added per call).
            principal: Encoded client principal sent on every request.
            timeout: Request timeout in seconds.
            http_client: Pre-built httpx client (e.g. with an ASGI transport).
        """
        headers = {"Accept": "application/json"}
        if principal is not None:
            headers[PRINCIPAL_HEADER] = principal

        self._owns_http = http_client is None
        self._http = http_client or httpx.AsyncClient(base_url=base_url, timeout=timeout)
        self._headers = headers
        self._logger = structlog.get_logger(__name__)

    async def __aenter__(self) -> "ApiClient":
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        """Close the underlying HTTP client if this instance created it."""
        if self._owns_http:
            await self._http.aclose()

    # =========================================================================
    # Transport
    # =========================================================================

    async def _request(
        self,
        method: str,
        path: str,
        *,
        params: dict[str, Any] | None = None,
        body: BaseModel | None = None,
    ) -> httpx.Response:
        """Send a request and raise ApiError on any failure.

        Args:
            method: HTTP method.
            path: Path below ``/api/v1``.
            params: Query parameters (None values are dropped).
            body: Request schema serialized with camelCase aliases.

        Returns:
            httpx.Response: The successful (2xx) response.

        Raises:
            ApiError: On connection failure or non-2xx status.
        """
        query = {k: _query_value(v) for k, v in (params or {}).items() if v is not None}
        payload = body.model_dump(mode="json", by_alias=True) if body is not None else None

        try:
            response = await self._http.request(
                method,
                f"{API_V1_PREFIX}{path}",
                params=query or None,
                json=payload,
                headers=self._headers,
            )
        except httpx.RequestError as e:
            self._logger.warning(
                "api_connection_error",
                method=method,
                path=path,
                error=str(e),
            )
            raise ApiError(message=f"Failed to reach the API: {e}") from e

        if response.is_error:
            error = ApiError.from_response(response)
            self._logger.warning(
                "api_request_failed",
                method=method,
                path=path,
                status_code=response.status_code,
                trace_id=response.headers.get("X-Trace-Id"),
            )
            raise error

        self._logger.debug(
            "api_request_succeeded",
            method=method,
            path=path,
            status_code=response.status_code,
        )
        return response

    async def _get_one(
        self, path: str, model: type[ResponseT], params: dict[str, Any] | None = None
    ) -> ResponseT:
        response = await self._request("GET", path, params=params)
        return model.model_validate(response.json())

    async def _get_list(
        self, path: str, model: type[ResponseT], params: dict[str, Any] | None = None
    ) -> list[ResponseT]:
        response = await self._request("GET", path, params=params)
        return [model.model_validate(item) for item in response.json()]

    async def _send(
        self, method: str, path: str, body: BaseModel | None, model: type[ResponseT]
    ) -> ResponseT:
        response = await self._request(method, path, body=body)
        return model.model_validate(response.json())

    async def _delete(self, path: str) -> None:
        await self._request("DELETE", path)

    # =========================================================================
    # Clubs
    # =========================================================================

    async def get_clubs(self) -> list[ClubSummaryResponse]:
        return await self._get_list("/clubs", ClubSummaryResponse)

    async def get_club(self, club_id: UUID) -> ClubDetailResponse:
        return await self._get_one(f"/clubs/{club_id}", ClubDetailResponse)

    async def update_club(
        self, club_id: UUID, request: UpdateClubRequest
    ) -> ClubDetailResponse:
        return await self._send("PUT", f"/clubs/{club_id}", request, ClubDetailResponse)

    async def get_club_statistics(self, club_id: UUID) -> ClubStatisticsResponse:
        return await self._get_one(f"/clubs/{club_id}/statistics", ClubStatisticsResponse)

    async def get_club_age_groups(
        self, club_id: UUID, *, include_archived: bool = False
    ) -> list[AgeGroupResponse]:
        return await self._get_list(
            f"/clubs/{club_id}/age-groups",
            AgeGroupResponse,
            {"includeArchived": include_archived},
        )

    async def get_club_coaches(
        self, club_id: UUID, *, include_archived: bool = False
    ) -> list[CoachResponse]:
        return await self._get_list(
            f"/clubs/{club_id}/coaches",
            CoachResponse,
            {"includeArchived": include_archived},
        )

    async def get_club_kits(self, club_id: UUID) -> list[KitResponse]:
        return await self._get_list(f"/clubs/{club_id}/kits", KitResponse)

    async def get_club_drills(
        self,
        club_id: UUID,
        *,
        age_group_id: UUID | None = None,
        team_id: UUID | None = None,
        category: str | None = None,
        search: str | None = None,
    ) -> DrillsByScopeResponse:
        return await self._get_one(
            f"/clubs/{club_id}/drills",
            DrillsByScopeResponse,
            {
                "ageGroupId": age_group_id,
                "teamId": team_id,
                "category": category,
                "search": search,
            },
        )

    async def get_club_drill_templates(
        self,
        club_id: UUID,
        *,
        age_group_id: UUID | None = None,
        team_id: UUID | None = None,
    ) -> DrillTemplatesByScopeResponse:
        return await self._get_one(
            f"/clubs/{club_id}/drill-templates",
            DrillTemplatesByScopeResponse,
            {"ageGroupId": age_group_id, "teamId": team_id},
        )

    async def get_club_players(
        self,
        club_id: UUID,
        *,
        page: int = 1,
        page_size: int = 30,
        age_group_id: UUID | None = None,
        team_id: UUID | None = None,
        position: str | None = None,
        search: str | None = None,
        include_archived: bool = False,
    ) -> PlayerPageResponse:
        return await self._get_one(
            f"/clubs/{club_id}/players",
            PlayerPageResponse,
            {
                "page": page,
                "pageSize": page_size,
                "ageGroupId": age_group_id,
                "teamId": team_id,
                "position": position,
                "search": search,
                "includeArchived": include_archived,
            },
        )

    async def get_club_teams(
        self,
        club_id: UUID,
        *,
        age_group_id: UUID | None = None,
        include_archived: bool = False,
        season: str | None = None,
    ) -> list[ClubTeamResponse]:
        return await self._get_list(
            f"/clubs/{club_id}/teams",
            ClubTeamResponse,
            {
                "ageGroupId": age_group_id,
                "includeArchived": include_archived,
                "season": season,
            },
        )

    async def get_club_matches(
        self,
        club_id: UUID,
        *,
        age_group_id: UUID | None = None,
        team_id: UUID | None = None,
        status: str | None = None,
    ) -> ClubMatchesResponse:
        return await self._get_one(
            f"/clubs/{club_id}/matches",
            ClubMatchesResponse,
            {"ageGroupId": age_group_id, "teamId": team_id, "status": status},
        )

    async def get_club_development_plans(
        self, club_id: UUID
    ) -> list[DevelopmentPlanListItemResponse]:
        return await self._get_list(
            f"/clubs/{club_id}/development-plans", DevelopmentPlanListItemResponse
        )

    # =========================================================================
    # Age groups
    # =========================================================================

    async def create_age_group(self, request: CreateAgeGroupRequest) -> AgeGroupResponse:
        return await self._send("POST", "/age-groups", request, AgeGroupResponse)

    async def get_age_group(self, age_group_id: UUID) -> AgeGroupResponse:
        return await self._get_one(f"/age-groups/{age_group_id}", AgeGroupResponse)

    async def update_age_group(
        self, age_group_id: UUID, request: UpdateAgeGroupRequest
    ) -> AgeGroupResponse:
        return await self._send(
            "PUT", f"/age-groups/{age_group_id}", request, AgeGroupResponse
        )

    async def get_age_group_statistics(
        self, age_group_id: UUID
    ) -> AgeGroupStatisticsResponse:
        return await self._get_one(
            f"/age-groups/{age_group_id}/statistics", AgeGroupStatisticsResponse
        )

    async def get_age_group_teams(self, age_group_id: UUID) -> list[TeamResponse]:
        return await self._get_list(f"/age-groups/{age_group_id}/teams", TeamResponse)

    async def get_age_group_players(
        self, age_group_id: UUID, *, include_archived: bool = False
    ) -> list[PlayerListItemResponse]:
        return await self._get_list(
            f"/age-groups/{age_group_id}/players",
            PlayerListItemResponse,
            {"includeArchived": include_archived},
        )

    async def get_age_group_coaches(self, age_group_id: UUID) -> list[CoachResponse]:
        return await self._get_list(f"/age-groups/{age_group_id}/coaches", CoachResponse)

    async def get_age_group_development_plans(
        self, age_group_id: UUID
    ) -> list[DevelopmentPlanListItemResponse]:
        return await self._get_list(
            f"/age-groups/{age_group_id}/development-plans",
            DevelopmentPlanListItemResponse,
        )

    # =========================================================================
    # Teams
    # =========================================================================

    async def create_team(self, request: CreateTeamRequest) -> TeamResponse:
        return await self._send("POST", "/teams", request, TeamResponse)

    async def update_team(self, team_id: UUID, request: UpdateTeamRequest) -> TeamResponse:
        return await self._send("PUT", f"/teams/{team_id}", request, TeamResponse)

    async def archive_team(
        self, team_id: UUID, request: ArchiveTeamRequest | None = None
    ) -> TeamResponse:
        return await self._send(
            "PUT",
            f"/teams/{team_id}/archive",
            request or ArchiveTeamRequest(),
            TeamResponse,
        )

    async def get_team_overview(self, team_id: UUID) -> TeamOverviewResponse:
        return await self._get_one(f"/teams/{team_id}/overview", TeamOverviewResponse)

    async def get_team_players(self, team_id: UUID) -> list[TeamPlayerResponse]:
        return await self._get_list(f"/teams/{team_id}/players", TeamPlayerResponse)

    async def add_player_to_team(
        self, team_id: UUID, request: AddPlayerToTeamRequest
    ) -> TeamMembershipResponse:
        return await self._send(
            "POST", f"/teams/{team_id}/players", request, TeamMembershipResponse
        )

    async def remove_player_from_team(self, team_id: UUID, player_id: UUID) -> None:
        await self._delete(f"/teams/{team_id}/players/{player_id}")

    async def update_squad_number(
        self, team_id: UUID, player_id: UUID, request: UpdateSquadNumberRequest
    ) -> TeamMembershipResponse:
        return await self._send(
            "PUT",
            f"/teams/{team_id}/players/{player_id}/squad-number",
            request,
            TeamMembershipResponse,
        )

    async def get_team_coaches(self, team_id: UUID) -> list[TeamCoachResponse]:
        return await self._get_list(f"/teams/{team_id}/coaches", TeamCoachResponse)

    async def assign_coach(
        self, team_id: UUID, request: AssignCoachRequest
    ) -> TeamCoachAssignmentResponse:
        return await self._send(
            "POST", f"/teams/{team_id}/coaches", request, TeamCoachAssignmentResponse
        )

    async def remove_coach(self, team_id: UUID, coach_id: UUID) -> None:
        await self._delete(f"/teams/{team_id}/coaches/{coach_id}")

    async def update_coach_role(
        self, team_id: UUID, coach_id: UUID, request: UpdateCoachRoleRequest
    ) -> TeamCoachAssignmentResponse:
        return await self._send(
            "PUT",
            f"/teams/{team_id}/coaches/{coach_id}/role",
            request,
            TeamCoachAssignmentResponse,
        )

    async def get_team_matches(self, team_id: UUID) -> list[MatchSummaryResponse]:
        return await self._get_list(f"/teams/{team_id}/matches", MatchSummaryResponse)

    async def get_team_kits(self, team_id: UUID) -> list[KitResponse]:
        return await self._get_list(f"/teams/{team_id}/kits", KitResponse)

    async def create_team_kit(self, team_id: UUID, request: KitRequest) -> KitResponse:
        return await self._send("POST", f"/teams/{team_id}/kits", request, KitResponse)

    async def update_team_kit(
        self, team_id: UUID, kit_id: UUID, request: KitRequest
    ) -> KitResponse:
        return await self._send(
            "PUT", f"/teams/{team_id}/kits/{kit_id}", request, KitResponse
        )

    async def delete_team_kit(self, team_id: UUID, kit_id: UUID) -> None:
        await self._delete(f"/teams/{team_id}/kits/{kit_id}")

    async def get_team(self, team_id: UUID) -> TeamDetailResponse:
        return await self._get_one(f"/teams/{team_id}", TeamDetailResponse)

    async def get_team_squad(self, team_id: UUID) -> list[SquadPlayerResponse]:
        return await self._get_list(f"/teams/{team_id}/squad", SquadPlayerResponse)

    async def get_team_development_plans(
        self, team_id: UUID
    ) -> list[DevelopmentPlanListItemResponse]:
        return await self._get_list(
            f"/teams/{team_id}/development-plans", DevelopmentPlanListItemResponse
        )

    # =========================================================================
    # Players
    # =========================================================================

    async def get_player(self, player_id: UUID) -> PlayerResponse:
        return await self._get_one(f"/players/{player_id}", PlayerResponse)

    async def update_player(
        self, player_id: UUID, request: UpdatePlayerRequest
    ) -> PlayerResponse:
        return await self._send("PUT", f"/players/{player_id}", request, PlayerResponse)

    async def get_player_abilities(
        self, player_id: UUID, *, evaluation_limit: int | None = None
    ) -> PlayerAbilitiesResponse:
        return await self._get_one(
            f"/players/{player_id}/abilities",
            PlayerAbilitiesResponse,
            {"evaluationLimit": evaluation_limit},
        )

    async def create_evaluation(
        self, player_id: UUID, request: EvaluationRequest
    ) -> EvaluationResponse:
        return await self._send(
            "POST",
            f"/players/{player_id}/ability-evaluations",
            request,
            EvaluationResponse,
        )

    async def update_evaluation(
        self, player_id: UUID, evaluation_id: UUID, request: EvaluationRequest
    ) -> EvaluationResponse:
        return await self._send(
            "PUT",
            f"/players/{player_id}/ability-evaluations/{evaluation_id}",
            request,
            EvaluationResponse,
        )

    async def delete_evaluation(self, player_id: UUID, evaluation_id: UUID) -> None:
        await self._delete(f"/players/{player_id}/ability-evaluations/{evaluation_id}")

    async def get_player_reports(self, player_id: UUID) -> list[ReportResponse]:
        return await self._get_list(f"/players/{player_id}/reports", ReportResponse)

    async def get_player_recent_performances(
        self, player_id: UUID, *, limit: int = 10
    ) -> list[RecentPerformanceResponse]:
        return await self._get_list(
            f"/players/{player_id}/recent-performances",
            RecentPerformanceResponse,
            {"limit": limit},
        )

    async def get_player_upcoming_matches(
        self, player_id: UUID, *, limit: int = 5
    ) -> list[UpcomingMatchResponse]:
        return await self._get_list(
            f"/players/{player_id}/upcoming-matches",
            UpcomingMatchResponse,
            {"limit": limit},
        )

    async def get_player_attributes(self, player_id: UUID) -> PlayerAttributesResponse:
        return await self._get_one(
            f"/players/{player_id}/attributes", PlayerAttributesResponse
        )

    # =========================================================================
    # Coaches
    # =========================================================================

    async def get_coach(self, coach_id: UUID) -> CoachResponse:
        return await self._get_one(f"/coaches/{coach_id}", CoachResponse)

    async def update_coach(
        self, coach_id: UUID, request: UpdateCoachRequest
    ) -> CoachResponse:
        return await self._send("PUT", f"/coaches/{coach_id}", request, CoachResponse)

    # =========================================================================
    # Matches
    # =========================================================================

    async def create_match(self, request: CreateMatchRequest) -> MatchResponse:
        return await self._send("POST", "/matches", request, MatchResponse)

    async def get_match(self, match_id: UUID) -> MatchResponse:
        return await self._get_one(f"/matches/{match_id}", MatchResponse)

    async def update_match(
        self, match_id: UUID, request: UpdateMatchRequest
    ) -> MatchResponse:
        return await self._send("PUT", f"/matches/{match_id}", request, MatchResponse)

    # =========================================================================
    # Drills and templates
    # =========================================================================

    async def create_drill(self, request: CreateDrillRequest) -> DrillResponse:
        return await self._send("POST", "/drills", request, DrillResponse)

    async def get_drill(self, drill_id: UUID) -> DrillResponse:
        return await self._get_one(f"/drills/{drill_id}", DrillResponse)

    async def update_drill(
        self, drill_id: UUID, request: UpdateDrillRequest
    ) -> DrillResponse:
        return await self._send("PUT", f"/drills/{drill_id}", request, DrillResponse)

    async def create_drill_template(
        self, request: CreateDrillTemplateRequest
    ) -> DrillTemplateResponse:
        return await self._send(
            "POST", "/drill-templates", request, DrillTemplateResponse
        )

    async def get_drill_template(self, template_id: UUID) -> DrillTemplateResponse:
        return await self._get_one(
            f"/drill-templates/{template_id}", DrillTemplateResponse
        )

    async def update_drill_template(
        self, template_id: UUID, request: UpdateDrillTemplateRequest
    ) -> DrillTemplateResponse:
        return await self._send(
            "PUT", f"/drill-templates/{template_id}", request, DrillTemplateResponse
        )

    # =========================================================================
    # Development plans and reports
    # =========================================================================

    async def create_development_plan(
        self, request: CreateDevelopmentPlanRequest
    ) -> DevelopmentPlanResponse:
        return await self._send(
            "POST", "/development-plans", request, DevelopmentPlanResponse
        )

    async def get_development_plan(self, plan_id: UUID) -> DevelopmentPlanResponse:
        return await self._get_one(
            f"/development-plans/{plan_id}", DevelopmentPlanResponse
        )

    async def update_development_plan(
        self, plan_id: UUID, request: UpdateDevelopmentPlanRequest
    ) -> DevelopmentPlanResponse:
        return await self._send(
            "PUT", f"/development-plans/{plan_id}", request, DevelopmentPlanResponse
        )

    async def create_report(self, request: CreateReportRequest) -> ReportResponse:
        return await self._send("POST", "/reports", request, ReportResponse)

    async def get_report(self, report_id: UUID) -> ReportResponse:
        return await self._get_one(f"/reports/{report_id}", ReportResponse)

    async def update_report(
        self, report_id: UUID, request: UpdateReportRequest
    ) -> ReportResponse:
        return await self._send("PUT", f"/reports/{report_id}", request, ReportResponse)

    # =========================================================================
    # Users
    # =========================================================================

    async def get_current_user(self) -> UserResponse:
        return await self._get_one("/users/me", UserResponse)

    async def update_my_profile(self, request: UpdateProfileRequest) -> UserResponse:
        return await self._send("PUT", "/users/me", request, UserResponse)

    async def get_my_clubs(self) -> list[MyClubResponse]:
        return await self._get_list("/users/me/clubs", MyClubResponse)

    async def get_my_teams(self) -> list[MyTeamResponse]:
        return await self._get_list("/users/me/teams", MyTeamResponse)


def _query_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)
