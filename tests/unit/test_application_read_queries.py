"""Unit tests for club, team, player and "my" read queries.

Tests cover:
- GetClubPlayersHandler: filters combine, search matches nickname,
  page size is clamped, age group and team names are attached
- GetClubTeamsHandler: season filter, older age groups first
- GetMatchesByClubIdHandler: team filter, upcoming/past/status label
- GetDevelopmentPlansByTeamIdHandler: active plans first
- GetPlayerRecentPerformancesHandler: result labels from our side
- GetPlayerUpcomingMatchesHandler: player without teams
- GetPlayerAttributesHandler: no ratings is NotFound
- GetTeamByIdHandler: record, player count and coach IDs
- GetMyClubsHandler / GetMyTeamsAndClubsHandler: resolve through the
  caller's coach, archived teams dropped
- Unknown parent IDs return NotFound

Uses mocked repositories for isolation.
"""

from datetime import UTC, datetime, timedelta
from unittest.mock import AsyncMock

import pytest
from uuid_extensions import uuid7

from src.application.queries.club_queries import (
    GetClubPlayers,
    GetClubTeams,
    GetMatchesByClubId,
)
from src.application.queries.development_queries import GetDevelopmentPlansByTeamId
from src.application.queries.handlers.club_handlers import (
    GetClubPlayersHandler,
    GetClubTeamsHandler,
    GetMatchesByClubIdHandler,
)
from src.application.queries.handlers.development_handlers import (
    GetDevelopmentPlansByTeamIdHandler,
)
from src.application.queries.handlers.player_handlers import (
    GetPlayerAttributesHandler,
    GetPlayerRecentPerformancesHandler,
    GetPlayerUpcomingMatchesHandler,
)
from src.application.queries.handlers.team_handlers import GetTeamByIdHandler
from src.application.queries.handlers.user_handlers import (
    GetMyClubsHandler,
    GetMyTeamsAndClubsHandler,
)
from src.application.queries.player_queries import (
    GetPlayerAttributes,
    GetPlayerRecentPerformances,
    GetPlayerUpcomingMatches,
)
from src.application.queries.team_queries import GetTeamById
from src.application.queries.user_queries import GetMyClubs, GetMyTeamsAndClubs
from src.core.enums import ErrorCode
from src.core.errors import NotFoundError
from src.core.result import Failure, Success
from src.domain.entities.age_group import AgeGroup, AgeGroupSummary
from src.domain.entities.club import Club, ClubCounts
from src.domain.entities.coach import Coach, CoachTeam
from src.domain.entities.development_plan import DevelopmentPlan
from src.domain.entities.match import Match
from src.domain.entities.player import Player
from src.domain.entities.team import Team, TeamStaffMember
from src.domain.entities.user import User
from src.domain.enums import CoachRole, Level
from src.domain.enums.match_status import MatchStatus
from src.domain.enums.plan_status import PlanStatus
from src.domain.protocols import (
    AgeGroupRepository,
    ClubRepository,
    CoachRepository,
    DevelopmentPlanRepository,
    MatchRepository,
    PlayerRepository,
    TeamCoachRepository,
    TeamMembershipRepository,
    TeamRepository,
    UserRepository,
)


# =============================================================================
# Test Fixtures
# =============================================================================


def create_club(name: str = "Vale Juniors FC") -> Club:
    return Club(
        id=uuid7(),
        name=name,
        short_name="VJFC",
        city="Leeds",
        country="England",
        venue="Vale Park",
    )


def create_age_group(club_id, name: str, code: str) -> AgeGroup:
    return AgeGroup(
        id=uuid7(),
        club_id=club_id,
        name=name,
        code=code,
        level=Level.YOUTH,
        season="2024/25",
        default_squad_size=7,
    )


def create_team(club_id, age_group_id, name: str, **overrides) -> Team:
    return Team(
        id=uuid7(),
        club_id=club_id,
        age_group_id=age_group_id,
        name=name,
        level=Level.YOUTH,
        season=overrides.pop("season", "2024/25"),
        **overrides,
    )


def create_player(club_id, first_name: str, last_name: str, **overrides) -> Player:
    return Player(
        id=uuid7(), club_id=club_id, first_name=first_name, last_name=last_name, **overrides
    )


def create_match(team_id, match_date: datetime, **overrides) -> Match:
    return Match(
        id=uuid7(),
        team_id=team_id,
        season_id="2024/25",
        squad_size=7,
        opposition="Riverside Rovers",
        match_date=match_date,
        **overrides,
    )


def summaries(*age_groups: AgeGroup) -> list[AgeGroupSummary]:
    return [AgeGroupSummary(age_group=a, team_count=1) for a in age_groups]


@pytest.fixture
def club() -> Club:
    return create_club()


@pytest.fixture
def club_repo(club):
    repo = AsyncMock(spec=ClubRepository)
    repo.find_by_id.return_value = club
    return repo


# =============================================================================
# Club players
# =============================================================================


@pytest.mark.unit
class TestGetClubPlayers:
    @pytest.fixture
    def setup(self, club, club_repo):
        u10 = create_age_group(club.id, "Under 10s", "u10")
        blues = create_team(club.id, u10.id, "Blues")
        players = [
            create_player(
                club.id,
                "Ada",
                "Moss",
                preferred_positions=["CM", "LW"],
                age_group_ids=[u10.id],
                team_ids=[blues.id],
            ),
            create_player(
                club.id,
                "Ben",
                "Okafor",
                nickname="Adz",
                preferred_positions=["cm"],
                age_group_ids=[u10.id],
            ),
            create_player(club.id, "Cal", "Price", preferred_positions=["GK"]),
        ]
        player_repo = AsyncMock(spec=PlayerRepository)
        player_repo.list_by_club.return_value = players
        age_group_repo = AsyncMock(spec=AgeGroupRepository)
        age_group_repo.list_by_club.return_value = summaries(u10)
        team_repo = AsyncMock(spec=TeamRepository)
        team_repo.list_by_club.return_value = [blues]
        handler = GetClubPlayersHandler(
            club_repo=club_repo,
            player_repo=player_repo,
            age_group_repo=age_group_repo,
            team_repo=team_repo,
        )
        return handler, u10, blues, player_repo

    async def test_position_and_search_combine(self, setup, club):
        # Arrange
        handler, _, _, _ = setup

        # Act
        result = await handler.handle(
            GetClubPlayers(club_id=club.id, position="CM", search="ad")
        )

        # Assert
        assert isinstance(result, Success)
        page = result.value
        assert [p.first_name for p in page.items] == ["Ada", "Ben"]
        assert page.total_count == 2
        assert page.total_pages == 1

    async def test_team_filter_attaches_names(self, setup, club):
        handler, u10, blues, _ = setup

        result = await handler.handle(GetClubPlayers(club_id=club.id, team_id=blues.id))

        assert [p.first_name for p in result.value.items] == ["Ada"]
        assert result.value.items[0].age_group_names == ["Under 10s"]
        assert result.value.items[0].team_names == ["Blues"]

    async def test_pages_after_filtering_with_clamped_size(self, setup, club):
        # Arrange
        handler, _, _, player_repo = setup

        # Act
        result = await handler.handle(
            GetClubPlayers(club_id=club.id, page=2, page_size=0)
        )

        # Assert
        page = result.value
        assert page.page == 2
        assert page.page_size == 1
        assert page.total_pages == 3
        assert [p.first_name for p in page.items] == ["Ben"]
        player_repo.list_by_club.assert_awaited_once_with(club.id, include_archived=False)

    async def test_page_past_the_end_is_empty(self, setup, club):
        handler, _, _, _ = setup

        result = await handler.handle(
            GetClubPlayers(club_id=club.id, page=5, page_size=500)
        )

        assert result.value.page_size == 100
        assert result.value.items == []
        assert result.value.total_count == 3


# =============================================================================
# Club teams and matches
# =============================================================================


@pytest.mark.unit
class TestGetClubTeams:
    async def test_orders_older_age_groups_first_and_filters_season(self, club, club_repo):
        # Arrange
        u10 = create_age_group(club.id, "Under 10s", "u10")
        u12 = create_age_group(club.id, "Under 12s", "u12")
        teams = [
            create_team(club.id, u10.id, "Reds"),
            create_team(club.id, u12.id, "Whites"),
            create_team(club.id, u10.id, "Blues"),
            create_team(club.id, u12.id, "Greens", season="2023/24"),
        ]
        age_group_repo = AsyncMock(spec=AgeGroupRepository)
        age_group_repo.list_by_club.return_value = summaries(u10, u12)
        team_repo = AsyncMock(spec=TeamRepository)
        team_repo.list_by_club.return_value = teams
        team_coach_repo = AsyncMock(spec=TeamCoachRepository)
        team_coach_repo.list_staff.return_value = [
            TeamStaffMember(
                coach_id=uuid7(),
                first_name="Sam",
                last_name="Reid",
                photo_url=None,
                role=CoachRole.HEAD_COACH,
            )
        ]
        membership_repo = AsyncMock(spec=TeamMembershipRepository)
        membership_repo.count_players.return_value = 9
        handler = GetClubTeamsHandler(
            club_repo=club_repo,
            age_group_repo=age_group_repo,
            team_repo=team_repo,
            team_coach_repo=team_coach_repo,
            membership_repo=membership_repo,
        )

        # Act
        result = await handler.handle(GetClubTeams(club_id=club.id, season="2024/25"))

        # Assert
        assert isinstance(result, Success)
        assert [(t.age_group_name, t.name) for t in result.value] == [
            ("Under 12s", "Whites"),
            ("Under 10s", "Blues"),
            ("Under 10s", "Reds"),
        ]
        assert result.value[0].squad_size == 7
        assert result.value[0].player_count == 9
        assert len(result.value[0].coaches) == 1


@pytest.mark.unit
class TestGetMatchesByClubId:
    @pytest.fixture
    def setup(self, club, club_repo):
        u10 = create_age_group(club.id, "Under 10s", "u10")
        blues = create_team(club.id, u10.id, "Blues")
        reds = create_team(club.id, u10.id, "Reds")
        now = datetime.now(UTC)
        matches = {
            "played": create_match(
                blues.id,
                now - timedelta(days=14),
                status=MatchStatus.COMPLETED,
                home_score=2,
                away_score=1,
            ),
            "recent": create_match(
                reds.id, now - timedelta(days=7), status=MatchStatus.COMPLETED
            ),
            "next": create_match(blues.id, now + timedelta(days=7)),
        }
        age_group_repo = AsyncMock(spec=AgeGroupRepository)
        age_group_repo.list_by_club.return_value = summaries(u10)
        team_repo = AsyncMock(spec=TeamRepository)
        team_repo.list_by_club.return_value = [blues, reds]
        match_repo = AsyncMock(spec=MatchRepository)
        match_repo.list_by_teams.return_value = list(matches.values())
        handler = GetMatchesByClubIdHandler(
            club_repo=club_repo,
            age_group_repo=age_group_repo,
            team_repo=team_repo,
            match_repo=match_repo,
        )
        return handler, blues, matches, match_repo

    async def test_most_recent_first_with_team_names(self, setup, club):
        handler, _, matches, _ = setup

        result = await handler.handle(GetMatchesByClubId(club_id=club.id))

        assert isinstance(result, Success)
        assert [m.id for m in result.value.matches] == [
            matches["next"].id,
            matches["recent"].id,
            matches["played"].id,
        ]
        assert result.value.total_count == 3
        assert result.value.matches[1].team_name == "Reds"
        assert result.value.matches[1].age_group_name == "Under 10s"

    @pytest.mark.parametrize(
        ("status", "expected"),
        [
            ("upcoming", ["next"]),
            ("past", ["recent", "played"]),
            ("Completed", ["recent", "played"]),
            ("scheduled", ["next"]),
            ("whenever", ["next", "recent", "played"]),
        ],
    )
    async def test_status_filter(self, setup, club, status, expected):
        handler, _, matches, _ = setup

        result = await handler.handle(GetMatchesByClubId(club_id=club.id, status=status))

        assert [m.id for m in result.value.matches] == [matches[k].id for k in expected]

    async def test_team_filter_only_loads_that_team(self, setup, club):
        # Arrange
        handler, blues, _, match_repo = setup

        # Act
        await handler.handle(GetMatchesByClubId(club_id=club.id, team_id=blues.id))

        # Assert
        match_repo.list_by_teams.assert_awaited_once_with([blues.id])

    async def test_unknown_team_skips_match_lookup(self, setup, club):
        handler, _, _, match_repo = setup

        result = await handler.handle(GetMatchesByClubId(club_id=club.id, team_id=uuid7()))

        assert result.value.matches == []
        match_repo.list_by_teams.assert_not_awaited()


# =============================================================================
# Team plans and detail
# =============================================================================


@pytest.mark.unit
class TestGetDevelopmentPlansByTeamId:
    async def test_active_plans_first_keeping_order(self, club):
        # Arrange
        team = create_team(club.id, uuid7(), "Blues")
        player = create_player(club.id, "Ada", "Moss")
        plans = [
            DevelopmentPlan(
                id=uuid7(), player_id=player.id, title="Weak foot", status=PlanStatus.COMPLETED
            ),
            DevelopmentPlan(id=uuid7(), player_id=player.id, title="Scanning"),
            DevelopmentPlan(
                id=uuid7(), player_id=player.id, title="Heading", status=PlanStatus.ARCHIVED
            ),
            DevelopmentPlan(id=uuid7(), player_id=player.id, title="First touch"),
        ]
        team_repo = AsyncMock(spec=TeamRepository)
        team_repo.find_by_id.return_value = team
        player_repo = AsyncMock(spec=PlayerRepository)
        player_repo.list_by_team.return_value = [player]
        plan_repo = AsyncMock(spec=DevelopmentPlanRepository)
        plan_repo.list_by_players.return_value = plans
        handler = GetDevelopmentPlansByTeamIdHandler(
            team_repo=team_repo, player_repo=player_repo, plan_repo=plan_repo
        )

        # Act
        result = await handler.handle(GetDevelopmentPlansByTeamId(team_id=team.id))

        # Assert
        assert isinstance(result, Success)
        assert [p.title for p in result.value] == [
            "Scanning",
            "First touch",
            "Weak foot",
            "Heading",
        ]
        assert result.value[0].player.first_name == "Ada"
        player_repo.list_by_team.assert_awaited_once_with(team.id, include_archived=True)


@pytest.mark.unit
class TestGetTeamById:
    async def test_includes_record_and_coach_ids(self, club):
        # Arrange
        team = create_team(club.id, uuid7(), "Blues")
        coach_ids = [uuid7(), uuid7()]
        team_repo = AsyncMock(spec=TeamRepository)
        team_repo.find_by_id.return_value = team
        team_coach_repo = AsyncMock(spec=TeamCoachRepository)
        team_coach_repo.list_staff.return_value = [
            TeamStaffMember(
                coach_id=coach_id,
                first_name="Sam",
                last_name="Reid",
                photo_url=None,
                role=CoachRole.ASSISTANT_COACH,
            )
            for coach_id in coach_ids
        ]
        membership_repo = AsyncMock(spec=TeamMembershipRepository)
        membership_repo.count_players.return_value = 11
        match_repo = AsyncMock(spec=MatchRepository)
        match_repo.list_by_team.return_value = [
            create_match(
                team.id,
                datetime(2024, 9, 7, 10, 0),
                status=MatchStatus.COMPLETED,
                home_score=3,
                away_score=0,
            ),
            create_match(team.id, datetime(2024, 9, 14, 10, 0)),
        ]
        handler = GetTeamByIdHandler(
            team_repo=team_repo,
            team_coach_repo=team_coach_repo,
            membership_repo=membership_repo,
            match_repo=match_repo,
        )

        # Act
        result = await handler.handle(GetTeamById(team_id=team.id))

        # Assert
        assert isinstance(result, Success)
        assert result.value.coach_ids == coach_ids
        assert result.value.stats.player_count == 11
        assert result.value.stats.matches_played == 1
        assert result.value.stats.wins == 1


# =============================================================================
# Player performance views
# =============================================================================


@pytest.mark.unit
class TestPlayerViews:
    @pytest.fixture
    def player(self, club) -> Player:
        return create_player(club.id, "Ada", "Moss")

    @pytest.fixture
    def player_repo(self, player):
        repo = AsyncMock(spec=PlayerRepository)
        repo.find_by_id.return_value = player
        return repo

    async def test_recent_performances_label_results_from_our_side(
        self, player, player_repo
    ):
        # Arrange
        team_id = uuid7()
        away_win = create_match(
            team_id,
            datetime(2024, 9, 14, 10, 0),
            status=MatchStatus.COMPLETED,
            is_home=False,
            home_score=0,
            away_score=2,
        )
        unscored = create_match(
            team_id, datetime(2024, 9, 7, 10, 0), status=MatchStatus.COMPLETED
        )
        match_repo = AsyncMock(spec=MatchRepository)
        match_repo.list_rated_for_player.return_value = [(away_win, 8.0), (unscored, 6.5)]
        handler = GetPlayerRecentPerformancesHandler(
            player_repo=player_repo, match_repo=match_repo
        )

        # Act
        result = await handler.handle(
            GetPlayerRecentPerformances(player_id=player.id, limit=0)
        )

        # Assert
        assert isinstance(result, Success)
        assert [(p.result, p.rating) for p in result.value] == [
            ("W 2-0", 8.0),
            ("N/A", 6.5),
        ]
        match_repo.list_rated_for_player.assert_awaited_once_with(player.id, limit=1)

    async def test_upcoming_matches_empty_without_teams(self, player, player_repo):
        match_repo = AsyncMock(spec=MatchRepository)
        handler = GetPlayerUpcomingMatchesHandler(
            player_repo=player_repo,
            team_repo=AsyncMock(spec=TeamRepository),
            age_group_repo=AsyncMock(spec=AgeGroupRepository),
            match_repo=match_repo,
        )

        result = await handler.handle(GetPlayerUpcomingMatches(player_id=player.id))

        assert isinstance(result, Success)
        assert result.value == []
        match_repo.list_by_teams.assert_not_awaited()

    async def test_upcoming_matches_carry_team_and_age_group(self, club, player_repo):
        # Arrange
        u10 = create_age_group(club.id, "Under 10s", "u10")
        blues = create_team(club.id, u10.id, "Blues")
        player = create_player(club.id, "Ada", "Moss", team_ids=[blues.id])
        player_repo.find_by_id.return_value = player
        team_repo = AsyncMock(spec=TeamRepository)
        team_repo.find_by_ids.return_value = [blues]
        age_group_repo = AsyncMock(spec=AgeGroupRepository)
        age_group_repo.find_by_id.return_value = u10
        soon = create_match(blues.id, datetime.now(UTC) + timedelta(days=3))
        match_repo = AsyncMock(spec=MatchRepository)
        match_repo.list_by_teams.return_value = [soon]
        handler = GetPlayerUpcomingMatchesHandler(
            player_repo=player_repo,
            team_repo=team_repo,
            age_group_repo=age_group_repo,
            match_repo=match_repo,
        )

        # Act
        result = await handler.handle(GetPlayerUpcomingMatches(player_id=player.id))

        # Assert
        assert [m.match_id for m in result.value] == [soon.id]
        assert result.value[0].team_name == "Blues"
        assert result.value[0].age_group_name == "Under 10s"

    async def test_attributes_without_ratings_is_not_found(self, player, player_repo):
        # Arrange
        player_repo.get_attribute_ratings.return_value = {}
        handler = GetPlayerAttributesHandler(player_repo=player_repo)

        # Act
        result = await handler.handle(GetPlayerAttributes(player_id=player.id))

        # Assert
        assert isinstance(result, Failure)
        assert isinstance(result.error, NotFoundError)
        assert result.error.code == ErrorCode.PLAYER_ATTRIBUTES_NOT_FOUND

    async def test_attributes_are_returned(self, player, player_repo):
        player_repo.get_attribute_ratings.return_value = {"pace": 72, "vision": 65}
        handler = GetPlayerAttributesHandler(player_repo=player_repo)

        result = await handler.handle(GetPlayerAttributes(player_id=player.id))

        assert isinstance(result, Success)
        assert result.value.attributes == {"pace": 72, "vision": 65}


# =============================================================================
# Caller's clubs and teams
# =============================================================================


@pytest.mark.unit
class TestMyClubsAndTeams:
    @pytest.fixture
    def repos(self, club, club_repo):
        u10 = create_age_group(club.id, "Under 10s", "u10")
        u12 = create_age_group(club.id, "Under 12s", "u12")
        teams = [
            create_team(club.id, u10.id, "Blues"),
            create_team(club.id, u12.id, "Whites"),
            create_team(club.id, u12.id, "Greys", is_archived=True),
        ]
        user = User(
            id=uuid7(),
            auth_id="coach-auth-1",
            email="sam@club.org",
            first_name="Sam",
            last_name="Reid",
        )
        coach = Coach(
            id=uuid7(),
            club_id=club.id,
            first_name="Sam",
            last_name="Reid",
            user_id=user.id,
            teams=[
                CoachTeam(team_id=t.id, name=t.name, role=CoachRole.HEAD_COACH)
                for t in teams
            ],
        )
        user_repo = AsyncMock(spec=UserRepository)
        user_repo.find_by_auth_id.return_value = user
        coach_repo = AsyncMock(spec=CoachRepository)
        coach_repo.find_by_user_id.return_value = coach
        team_repo = AsyncMock(spec=TeamRepository)
        team_repo.find_by_ids.return_value = teams
        age_group_repo = AsyncMock(spec=AgeGroupRepository)
        age_group_repo.find_by_id.side_effect = lambda age_group_id: {
            u10.id: u10,
            u12.id: u12,
        }[age_group_id]
        club_repo.get_counts.return_value = ClubCounts(
            age_group_count=2, team_count=2, player_count=18, coach_count=3
        )
        return {
            "user": user_repo,
            "coach": coach_repo,
            "team": team_repo,
            "age_group": age_group_repo,
            "club": club_repo,
        }

    async def test_my_clubs_lists_each_club_once(self, repos, club):
        # Arrange
        handler = GetMyClubsHandler(
            user_repo=repos["user"],
            coach_repo=repos["coach"],
            team_repo=repos["team"],
            club_repo=repos["club"],
        )

        # Act
        result = await handler.handle(GetMyClubs(auth_id="coach-auth-1"))

        # Assert
        assert isinstance(result, Success)
        assert [c.id for c in result.value] == [club.id]
        assert result.value[0].team_count == 2
        assert result.value[0].player_count == 18
        repos["club"].find_by_id.assert_awaited_once_with(club.id)

    async def test_my_teams_skip_archived_and_order_by_age_group(self, repos, club):
        # Arrange
        handler = GetMyTeamsAndClubsHandler(
            user_repo=repos["user"],
            coach_repo=repos["coach"],
            team_repo=repos["team"],
            age_group_repo=repos["age_group"],
            club_repo=repos["club"],
        )

        # Act
        result = await handler.handle(GetMyTeamsAndClubs(auth_id="coach-auth-1"))

        # Assert
        assert [t.name for t in result.value] == ["Whites", "Blues"]
        assert result.value[0].club.name == "Vale Juniors FC"

    @pytest.mark.parametrize("missing", ["user", "coach"])
    async def test_without_linked_coach_lists_nothing(self, repos, missing):
        # Arrange
        if missing == "user":
            repos["user"].find_by_auth_id.return_value = None
        else:
            repos["coach"].find_by_user_id.return_value = None
        handler = GetMyClubsHandler(
            user_repo=repos["user"],
            coach_repo=repos["coach"],
            team_repo=repos["team"],
            club_repo=repos["club"],
        )

        # Act
        result = await handler.handle(GetMyClubs(auth_id="coach-auth-1"))

        # Assert
        assert isinstance(result, Success)
        assert result.value == []
        repos["team"].find_by_ids.assert_not_awaited()


# =============================================================================
# Unknown parents
# =============================================================================


def _missing(protocol) -> AsyncMock:
    repo = AsyncMock(spec=protocol)
    repo.find_by_id.return_value = None
    return repo


@pytest.mark.unit
class TestUnknownParent:
    @pytest.mark.parametrize(
        ("build", "code"),
        [
            (
                lambda: (
                    GetClubPlayersHandler(
                        club_repo=_missing(ClubRepository),
                        player_repo=AsyncMock(spec=PlayerRepository),
                        age_group_repo=AsyncMock(spec=AgeGroupRepository),
                        team_repo=AsyncMock(spec=TeamRepository),
                    ),
                    GetClubPlayers(club_id=uuid7()),
                ),
                ErrorCode.CLUB_NOT_FOUND,
            ),
            (
                lambda: (
                    GetTeamByIdHandler(
                        team_repo=_missing(TeamRepository),
                        team_coach_repo=AsyncMock(spec=TeamCoachRepository),
                        membership_repo=AsyncMock(spec=TeamMembershipRepository),
                        match_repo=AsyncMock(spec=MatchRepository),
                    ),
                    GetTeamById(team_id=uuid7()),
                ),
                ErrorCode.TEAM_NOT_FOUND,
            ),
            (
                lambda: (
                    GetPlayerUpcomingMatchesHandler(
                        player_repo=_missing(PlayerRepository),
                        team_repo=AsyncMock(spec=TeamRepository),
                        age_group_repo=AsyncMock(spec=AgeGroupRepository),
                        match_repo=AsyncMock(spec=MatchRepository),
                    ),
                    GetPlayerUpcomingMatches(player_id=uuid7()),
                ),
                ErrorCode.PLAYER_NOT_FOUND,
            ),
        ],
        ids=["club_players", "team", "player_upcoming"],
    )
    async def test_returns_not_found(self, build, code):
        handler, query = build()

        result = await handler.handle(query)

        assert isinstance(result, Failure)
        assert result.error.code == code
