"""Player queries (CQRS read operations)."""

from dataclasses import dataclass
from uuid import UUID


@dataclass(frozen=True, kw_only=True)
class GetPlayerById:
    player_id: UUID


@dataclass(frozen=True, kw_only=True)
class GetPlayerAbilities:
    """Current attribute ratings plus recent evaluations of a player.

    Attributes:
        player_id: Player to read.
        evaluation_limit: Maximum number of evaluations returned.
    """

    player_id: UUID
    evaluation_limit: int = 12


@dataclass(frozen=True, kw_only=True)
class GetPlayerReports:
    player_id: UUID


@dataclass(frozen=True, kw_only=True)
class GetPlayerRecentPerformances:
    """Completed matches the player was rated in, most recent first."""

    player_id: UUID
    limit: int = 10


@dataclass(frozen=True, kw_only=True)
class GetPlayerUpcomingMatches:
    player_id: UUID
    limit: int = 5


@dataclass(frozen=True, kw_only=True)
class GetPlayerAttributes:
    """Recorded attribute ratings of a player."""

    player_id: UUID
