"""Club DTOs (Data Transfer Objects).

Result dataclasses returned by club handlers. Colours and location are
grouped the way the client renders them.
"""

from dataclasses import dataclass, field
from uuid import UUID

from src.application.dtos.match_dtos import MatchSummaryResult
from src.domain.entities.club import Club, ClubCounts


@dataclass
class ClubColors:
    primary: str | None
    secondary: str | None
    accent: str | None


@dataclass
class ClubLocation:
    city: str
    country: str
    venue: str
    address: str | None = None


@dataclass
class ClubSummaryResult:
    """Club as shown in the club list.

    Attributes:
        id: Club identifier.
        name: Full name.
        short_name: Abbreviated name.
        logo: Logo URL.
        colors: Primary, secondary and accent colours.
        location: City, country and venue.
    """

    id: UUID
    name: str
    short_name: str
    logo: str | None
    colors: ClubColors
    location: ClubLocation


@dataclass
class ClubDetailResult(ClubSummaryResult):
    """Club with its address, history and principles."""

    founded: int | None = None
    history: str | None = None
    ethos: str | None = None
    principles: list[str] = field(default_factory=list)


@dataclass
class ClubStatisticsResult:
    """Counts of active entities and the record of completed matches.

    Attributes:
        age_group_count: Non-archived age groups.
        team_count: Non-archived teams.
        player_count: Non-archived players.
        coach_count: Non-archived coaches.
        matches_played: Completed matches.
        wins: Completed matches won.
        draws: Completed matches drawn.
        losses: Completed matches lost.
        win_rate: Percentage won, one decimal place.
        goal_difference: Goals for minus goals against.
        upcoming_matches: Next scheduled matches, soonest first.
        previous_results: Latest completed matches, newest first.
    """

    age_group_count: int
    team_count: int
    player_count: int
    coach_count: int
    matches_played: int
    wins: int
    draws: int
    losses: int
    win_rate: float
    goal_difference: int
    upcoming_matches: list[MatchSummaryResult] = field(default_factory=list)
    previous_results: list[MatchSummaryResult] = field(default_factory=list)


def to_club_summary(club: Club) -> ClubSummaryResult:
    return ClubSummaryResult(
        id=club.id,
        name=club.name,
        short_name=club.short_name,
        logo=club.logo,
        colors=ClubColors(
            primary=club.primary_color,
            secondary=club.secondary_color,
            accent=club.accent_color,
        ),
        location=ClubLocation(city=club.city, country=club.country, venue=club.venue),
    )


def to_club_detail(club: Club) -> ClubDetailResult:
    return ClubDetailResult(
        id=club.id,
        name=club.name,
        short_name=club.short_name,
        logo=club.logo,
        colors=ClubColors(
            primary=club.primary_color,
            secondary=club.secondary_color,
            accent=club.accent_color,
        ),
        location=ClubLocation(
            city=club.city,
            country=club.country,
            venue=club.venue,
            address=club.address,
        ),
        founded=club.founded,
        history=club.history,
        ethos=club.ethos,
        principles=list(club.principles),
    )


@dataclass
class MyClubResult(ClubSummaryResult):
    """Club the caller coaches in, with its active team and player counts."""

    founded: int | None = None
    team_count: int = 0
    player_count: int = 0


@dataclass
class ClubBriefResult:
    """Club shown alongside one of its teams."""

    id: UUID
    name: str
    short_name: str
    logo: str | None
    colors: ClubColors
    founded: int | None = None


def to_my_club(club: Club, counts: ClubCounts) -> MyClubResult:
    summary = to_club_summary(club)
    return MyClubResult(
        id=summary.id,
        name=summary.name,
        short_name=summary.short_name,
        logo=summary.logo,
        colors=summary.colors,
        location=summary.location,
        founded=club.founded,
        team_count=counts.team_count,
        player_count=counts.player_count,
    )


def to_club_brief(club: Club) -> ClubBriefResult:
    return ClubBriefResult(
        id=club.id,
        name=club.name,
        short_name=club.short_name,
        logo=club.logo,
        colors=ClubColors(
            primary=club.primary_color,
            secondary=club.secondary_color,
            accent=club.accent_color,
        ),
        founded=club.founded,
    )
