"""Update commands against unknown ids.

Every full-replace update looks its target up first; an unknown id returns
NotFound and nothing is written.
"""

from datetime import UTC, date, datetime
from unittest.mock import AsyncMock
from uuid import uuid4

import pytest

from src.application.commands.age_group_commands import UpdateAgeGroup
from src.application.commands.club_commands import UpdateClub
from src.application.commands.coach_commands import UpdateCoach
from src.application.commands.development_commands import (
    UpdateDevelopmentPlan,
    UpdateReport,
)
from src.application.commands.drill_commands import UpdateDrill, UpdateDrillTemplate
from src.application.commands.evaluation_commands import (
    UpdatePlayerAbilityEvaluation,
)
from src.application.commands.handlers.age_group_handlers import UpdateAgeGroupHandler
from src.application.commands.handlers.club_handlers import UpdateClubHandler
from src.application.commands.handlers.coach_handlers import UpdateCoachHandler
from src.application.commands.handlers.development_handlers import (
    UpdateDevelopmentPlanHandler,
    UpdateReportHandler,
)
from src.application.commands.handlers.drill_handlers import (
    UpdateDrillHandler,
    UpdateDrillTemplateHandler,
)
from src.application.commands.handlers.evaluation_handlers import (
    UpdatePlayerAbilityEvaluationHandler,
)
from src.application.commands.handlers.kit_handlers import UpdateTeamKitHandler
from src.application.commands.handlers.match_handlers import UpdateMatchHandler
from src.application.commands.handlers.player_handlers import UpdatePlayerHandler
from src.application.commands.handlers.team_coach_handlers import (
    UpdateTeamCoachRoleHandler,
)
from src.application.commands.handlers.team_handlers import UpdateTeamHandler
from src.application.commands.handlers.user_handlers import UpdateMyProfileHandler
from src.application.commands.kit_commands import UpdateTeamKit
from src.application.commands.match_commands import UpdateMatch
from src.application.commands.player_commands import UpdatePlayer
from src.application.commands.team_commands import UpdateTeam, UpdateTeamCoachRole
from src.application.commands.user_commands import UpdateMyProfile
from src.core.enums import ErrorCode
from src.core.errors import NotFoundError
from src.core.result import Failure
from src.domain.protocols import (
    AgeGroupRepository,
    ClubRepository,
    CoachRepository,
    DevelopmentPlanRepository,
    DrillRepository,
    DrillTemplateRepository,
    EvaluationRepository,
    KitRepository,
    MatchRepository,
    PlayerRepository,
    ReportRepository,
    TeamCoachRepository,
    TeamRepository,
    UserRepository,
)


def _missing(protocol, finder: str = "find_by_id") -> AsyncMock:
    repo = AsyncMock(spec=protocol)
    getattr(repo, finder).return_value = None
    return repo


def _update_club():
    repo = _missing(ClubRepository)
    handler = UpdateClubHandler(club_repo=repo)
    command = UpdateClub(
        club_id=uuid4(),
        name="Vale Juniors FC",
        short_name="VJFC",
        city="Leeds",
        country="England",
        venue="Vale Park",
    )
    return handler, command, repo.save, ErrorCode.CLUB_NOT_FOUND


def _update_age_group():
    repo = _missing(AgeGroupRepository)
    handler = UpdateAgeGroupHandler(age_group_repo=repo)
    command = UpdateAgeGroup(
        age_group_id=uuid4(),
        name="Under 10s",
        code="u10",
        level="youth",
        season="2024/25",
    )
    return handler, command, repo.save, ErrorCode.AGE_GROUP_NOT_FOUND


def _update_team():
    repo = _missing(TeamRepository)
    handler = UpdateTeamHandler(team_repo=repo)
    command = UpdateTeam(team_id=uuid4(), name="Blues", level="youth", season="2024/25")
    return handler, command, repo.save, ErrorCode.TEAM_NOT_FOUND


def _update_team_kit():
    team_repo = _missing(TeamRepository)
    kit_repo = _missing(KitRepository)
    handler = UpdateTeamKitHandler(team_repo=team_repo, kit_repo=kit_repo)
    command = UpdateTeamKit(
        team_id=uuid4(),
        kit_id=uuid4(),
        name="Home",
        type="home",
        shirt_color="#0000FF",
        shorts_color="#FFFFFF",
        socks_color="#0000FF",
    )
    return handler, command, kit_repo.save, ErrorCode.TEAM_NOT_FOUND


def _update_player():
    repo = _missing(PlayerRepository)
    handler = UpdatePlayerHandler(
        player_repo=repo,
        team_repo=AsyncMock(spec=TeamRepository),
        club_repo=AsyncMock(spec=ClubRepository),
    )
    command = UpdatePlayer(
        player_id=uuid4(),
        first_name="Ada",
        last_name="Moss",
        date_of_birth=date(2015, 3, 14),
        preferred_positions=["CM"],
    )
    return handler, command, repo.save, ErrorCode.PLAYER_NOT_FOUND


def _update_coach():
    repo = _missing(CoachRepository)
    handler = UpdateCoachHandler(coach_repo=repo, team_repo=AsyncMock(spec=TeamRepository))
    command = UpdateCoach(
        coach_id=uuid4(), first_name="Sam", last_name="Reid", role="headcoach"
    )
    return handler, command, repo.save, ErrorCode.COACH_NOT_FOUND


def _update_match():
    repo = _missing(MatchRepository)
    handler = UpdateMatchHandler(team_repo=AsyncMock(spec=TeamRepository), match_repo=repo)
    command = UpdateMatch(
        match_id=uuid4(),
        season_id="2024/25",
        opposition="Riverside Rovers",
        match_date=datetime(2024, 9, 7, 10, 0, tzinfo=UTC),
    )
    return handler, command, repo.save, ErrorCode.MATCH_NOT_FOUND


def _update_drill():
    repo = _missing(DrillRepository)
    handler = UpdateDrillHandler(drill_repo=repo)
    command = UpdateDrill(drill_id=uuid4(), name="Rondo", category="technical")
    return handler, command, repo.save, ErrorCode.DRILL_NOT_FOUND


def _update_drill_template():
    repo = _missing(DrillTemplateRepository)
    handler = UpdateDrillTemplateHandler(
        template_repo=repo, drill_repo=AsyncMock(spec=DrillRepository)
    )
    command = UpdateDrillTemplate(
        template_id=uuid4(), name="Tuesday session", drill_ids=[uuid4()]
    )
    return handler, command, repo.save, ErrorCode.DRILL_TEMPLATE_NOT_FOUND


def _update_development_plan():
    repo = _missing(DevelopmentPlanRepository)
    handler = UpdateDevelopmentPlanHandler(plan_repo=repo)
    command = UpdateDevelopmentPlan(plan_id=uuid4(), title="Weak foot")
    return handler, command, repo.save, ErrorCode.DEVELOPMENT_PLAN_NOT_FOUND


def _update_report():
    repo = _missing(ReportRepository)
    handler = UpdateReportHandler(report_repo=repo)
    command = UpdateReport(report_id=uuid4())
    return handler, command, repo.save, ErrorCode.REPORT_NOT_FOUND


def _update_my_profile():
    repo = _missing(UserRepository, finder="find_by_auth_id")
    handler = UpdateMyProfileHandler(user_repo=repo)
    command = UpdateMyProfile(
        auth_id="unknown-auth-id",
        first_name="Sam",
        last_name="Reid",
        email="sam@club.org",
    )
    return handler, command, repo.save, ErrorCode.USER_NOT_FOUND


def _update_team_coach_role():
    repo = _missing(TeamCoachRepository, finder="find")
    handler = UpdateTeamCoachRoleHandler(team_coach_repo=repo)
    command = UpdateTeamCoachRole(team_id=uuid4(), coach_id=uuid4(), role="headcoach")
    return handler, command, repo.update_role, ErrorCode.MEMBERSHIP_NOT_FOUND


def _update_evaluation():
    repo = _missing(EvaluationRepository)
    handler = UpdatePlayerAbilityEvaluationHandler(
        player_repo=AsyncMock(spec=PlayerRepository),
        evaluation_repo=repo,
        user_repo=AsyncMock(spec=UserRepository),
        coach_repo=AsyncMock(spec=CoachRepository),
    )
    command = UpdatePlayerAbilityEvaluation(
        player_id=uuid4(), evaluation_id=uuid4(), auth_id="coach-auth-1"
    )
    return handler, command, repo.replace, ErrorCode.EVALUATION_NOT_FOUND


@pytest.mark.parametrize(
    "build",
    [
        _update_club,
        _update_age_group,
        _update_team,
        _update_team_kit,
        _update_player,
        _update_coach,
        _update_match,
        _update_drill,
        _update_drill_template,
        _update_development_plan,
        _update_report,
        _update_my_profile,
        _update_team_coach_role,
        _update_evaluation,
    ],
    ids=[
        "club",
        "age_group",
        "team",
        "team_kit",
        "player",
        "coach",
        "match",
        "drill",
        "drill_template",
        "development_plan",
        "report",
        "my_profile",
        "team_coach_role",
        "evaluation",
    ],
)
async def test_unknown_id_returns_not_found_without_writing(build):
    # Arrange
    handler, command, write, expected_code = build()

    # Act
    result = await handler.handle(command)

    # Assert
    assert isinstance(result, Failure)
    assert isinstance(result.error, NotFoundError)
    assert result.error.code == expected_code
    write.assert_not_awaited()
