"""Team DTOs (Data Transfer Objects).

Covers the team itself, its squad and staff listings, and the overview
page (record, fixtures, performer rankings).
"""

from dataclasses import dataclass, field
from datetime import date
from uuid import UUID

from src.application.dtos.club_dtos import ClubBriefResult
from src.application.dtos.match_dtos import MatchSummaryResult
from src.domain.entities.age_group import AgeGroup
from src.domain.entities.team import Team, TeamMember, TeamStaffMember
from src.domain.services.match_statistics import TeamRecord

# Club-wide team lists fall back to these when a team has no colours.
DEFAULT_PRIMARY_COLOR = "#000000"
DEFAULT_SECONDARY_COLOR = "#FFFFFF"


@dataclass
class TeamColors:
    primary: str | None
    secondary: str | None


@dataclass
class TeamStatsResult:
    """Team counts and record of completed matches.

    ``coach_count`` is only set in age group listings.
    """

    player_count: int
    matches_played: int
    wins: int
    draws: int
    losses: int
    win_rate: float
    goal_difference: int
    coach_count: int | None = None
    goals_for: int = 0
    goals_against: int = 0


@dataclass
class TeamResult:
    """Team detail.

    Attributes:
        id: Team identifier.
        club_id: Owning club.
        age_group_id: Age group the team plays in.
        name: Team name.
        short_name: Abbreviated name.
        level: Level label.
        season: Season label.
        colors: Primary and secondary colours.
        is_archived: Soft-delete flag.
        stats: Counts and record; only set in listings.
    """

    id: UUID
    club_id: UUID
    age_group_id: UUID
    name: str
    short_name: str | None
    level: str
    season: str
    colors: TeamColors
    is_archived: bool
    stats: TeamStatsResult | None = None


@dataclass
class TeamDetailResult(TeamResult):
    """Team with the IDs of its coaches; ``stats`` is always set."""

    coach_ids: list[UUID] = field(default_factory=list)


@dataclass
class ClubTeamResult(TeamResult):
    """Team in a club-wide list.

    Attributes:
        age_group_name: Name of the team's age group.
        squad_size: Players per side, from the age group.
        coaches: Coaching staff with their roles.
        player_count: Non-archived players on the team.
    """

    age_group_name: str | None = None
    squad_size: int | None = None
    coaches: list["TeamCoachResult"] = field(default_factory=list)
    player_count: int = 0


@dataclass
class MyTeamResult(TeamResult):
    age_group_name: str | None = None
    squad_size: int | None = None
    club: ClubBriefResult | None = None


@dataclass
class SquadPlayerResult:
    """Player on the squad sheet; ``preferred_position`` is the first choice."""

    id: UUID
    first_name: str
    last_name: str
    photo_url: str | None
    date_of_birth: date | None
    preferred_position: str | None
    preferred_positions: list[str]
    overall_rating: int | None
    squad_number: int | None


@dataclass
class PerformerResult:
    player_id: UUID
    first_name: str
    last_name: str
    photo_url: str | None
    average_rating: float
    matches_rated: int


@dataclass
class TeamOverviewResult:
    """Everything the team overview page shows."""

    team: TeamResult
    statistics: TeamStatsResult
    upcoming_matches: list[MatchSummaryResult] = field(default_factory=list)
    previous_results: list[MatchSummaryResult] = field(default_factory=list)
    top_performers: list[PerformerResult] = field(default_factory=list)
    underperforming: list[PerformerResult] = field(default_factory=list)


@dataclass
class TeamPlayerResult:
    id: UUID
    first_name: str
    last_name: str
    photo_url: str | None
    preferred_positions: list[str]
    overall_rating: int | None
    squad_number: int | None


@dataclass
class TeamMembershipResult:
    player_id: UUID
    team_id: UUID
    squad_number: int | None


@dataclass
class TeamCoachResult:
    id: UUID
    first_name: str
    last_name: str
    photo_url: str | None
    role: str
    is_archived: bool


@dataclass
class TeamCoachAssignmentResult:
    team_id: UUID
    coach_id: UUID
    role: str


def to_team_result(team: Team, stats: TeamStatsResult | None = None) -> TeamResult:
    return TeamResult(
        id=team.id,
        club_id=team.club_id,
        age_group_id=team.age_group_id,
        name=team.name,
        short_name=team.short_name,
        level=team.level.label,
        season=team.season,
        colors=TeamColors(primary=team.primary_color, secondary=team.secondary_color),
        is_archived=team.is_archived,
        stats=stats,
    )


def to_team_stats(
    record: TeamRecord, player_count: int, coach_count: int | None = None
) -> TeamStatsResult:
    return TeamStatsResult(
        player_count=player_count,
        coach_count=coach_count,
        matches_played=record.matches_played,
        wins=record.wins,
        draws=record.draws,
        losses=record.losses,
        win_rate=record.win_rate,
        goal_difference=record.goal_difference,
        goals_for=record.goals_for,
        goals_against=record.goals_against,
    )


def to_team_player(member: TeamMember) -> TeamPlayerResult:
    return TeamPlayerResult(
        id=member.player_id,
        first_name=member.first_name,
        last_name=member.last_name,
        photo_url=member.photo_url,
        preferred_positions=list(member.preferred_positions),
        overall_rating=member.overall_rating,
        squad_number=member.squad_number,
    )


def to_team_coach(staff: TeamStaffMember) -> TeamCoachResult:
    return TeamCoachResult(
        id=staff.coach_id,
        first_name=staff.first_name,
        last_name=staff.last_name,
        photo_url=staff.photo_url,
        role=staff.role.label,
        is_archived=staff.is_archived,
    )


def to_squad_player(member: TeamMember) -> SquadPlayerResult:
    positions = list(member.preferred_positions)
    return SquadPlayerResult(
        id=member.player_id,
        first_name=member.first_name,
        last_name=member.last_name,
        photo_url=member.photo_url,
        date_of_birth=member.date_of_birth,
        preferred_position=positions[0] if positions else None,
        preferred_positions=positions,
        overall_rating=member.overall_rating,
        squad_number=member.squad_number,
    )


def to_club_team(
    team: Team,
    age_group: AgeGroup | None,
    coaches: list[TeamCoachResult],
    player_count: int,
) -> ClubTeamResult:
    return ClubTeamResult(
        id=team.id,
        club_id=team.club_id,
        age_group_id=team.age_group_id,
        name=team.name,
        short_name=team.short_name,
        level=team.level.label,
        season=team.season,
        colors=TeamColors(
            primary=team.primary_color or DEFAULT_PRIMARY_COLOR,
            secondary=team.secondary_color or DEFAULT_SECONDARY_COLOR,
        ),
        is_archived=team.is_archived,
        age_group_name=age_group.name if age_group else None,
        squad_size=age_group.default_squad_size if age_group else None,
        coaches=coaches,
        player_count=player_count,
    )


def to_my_team(
    team: Team, age_group: AgeGroup | None, club: ClubBriefResult | None
) -> MyTeamResult:
    return MyTeamResult(
        id=team.id,
        club_id=team.club_id,
        age_group_id=team.age_group_id,
        name=team.name,
        short_name=team.short_name,
        level=team.level.label,
        season=team.season,
        colors=TeamColors(primary=team.primary_color, secondary=team.secondary_color),
        is_archived=team.is_archived,
        age_group_name=age_group.name if age_group else None,
        squad_size=age_group.default_squad_size if age_group else None,
        club=club,
    )
