"""Club queries (CQRS read operations).

Queries are immutable dataclasses with question-like names. They never
change state.
"""

from dataclasses import dataclass
from uuid import UUID


@dataclass(frozen=True, kw_only=True)
class GetAllClubs:
    """List every club, ordered by name."""


@dataclass(frozen=True, kw_only=True)
class GetClubById:
    club_id: UUID


@dataclass(frozen=True, kw_only=True)
class GetClubStatistics:
    """Counts, match record and fixtures across a club's teams."""

    club_id: UUID


@dataclass(frozen=True, kw_only=True)
class GetKitsByClubId:
    """Club-level kits (kits with no team)."""

    club_id: UUID


@dataclass(frozen=True, kw_only=True)
class GetClubPlayers:
    """One page of a club's players, with optional filters.

    Attributes:
        club_id: Owning club.
        page: 1-based page number (values below 1 read as 1).
        page_size: Items per page, clamped to 1-100.
        age_group_id: Keep players in this age group.
        team_id: Keep players on this team.
        position: Keep players with this preferred position.
        search: Case-insensitive match on first name, last name or nickname.
        include_archived: Include archived players.
    """

    club_id: UUID
    page: int = 1
    page_size: int = 30
    age_group_id: UUID | None = None
    team_id: UUID | None = None
    position: str | None = None
    search: str | None = None
    include_archived: bool = False


@dataclass(frozen=True, kw_only=True)
class GetClubTeams:
    """A club's teams with coaches and player counts."""

    club_id: UUID
    age_group_id: UUID | None = None
    include_archived: bool = False
    season: str | None = None


@dataclass(frozen=True, kw_only=True)
class GetMatchesByClubId:
    """Matches of a club's active teams.

    ``status`` is ``upcoming``, ``past`` or a match status label; any other
    value does not filter.
    """

    club_id: UUID
    age_group_id: UUID | None = None
    team_id: UUID | None = None
    status: str | None = None
