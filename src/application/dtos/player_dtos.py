"""Player DTOs (Data Transfer Objects).

Includes ability evaluations: current attribute ratings are returned as a
mapping keyed by the camelCase attribute name.
"""

from dataclasses import dataclass, field
from datetime import date, datetime
from uuid import UUID

from src.domain.entities.evaluation import AttributeEvaluation
from src.domain.entities.player import Player


@dataclass
class EmergencyContactResult:
    id: UUID
    name: str
    phone: str
    relationship: str
    is_primary: bool


@dataclass
class PlayerResult:
    """Player detail.

    Attributes:
        id: Player identifier.
        club_id: Owning club.
        club_name: Owning club's name.
        first_name: Given name.
        last_name: Family name.
        nickname: Optional nickname.
        photo_url: Photo URL.
        date_of_birth: Date of birth.
        association_id: Registration number.
        preferred_positions: Position codes.
        allergies: Free text.
        medical_conditions: Free text.
        emergency_contacts: Contacts, primary first.
        overall_rating: Mean of the latest evaluation.
        age_group_ids: Age groups derived from teams.
        team_ids: Teams the player belongs to.
        is_archived: Soft-delete flag.
    """

    id: UUID
    club_id: UUID
    club_name: str | None
    first_name: str
    last_name: str
    nickname: str | None
    photo_url: str | None
    date_of_birth: date | None
    association_id: str | None
    preferred_positions: list[str]
    allergies: str | None
    medical_conditions: str | None
    emergency_contacts: list[EmergencyContactResult]
    overall_rating: int | None
    age_group_ids: list[UUID]
    team_ids: list[UUID]
    is_archived: bool


@dataclass
class EvaluationAttributeResult:
    attribute_name: str
    rating: int
    notes: str | None


@dataclass
class EvaluationResult:
    """One ability evaluation with its attribute ratings."""

    id: UUID
    player_id: UUID
    evaluated_by: UUID
    coach_name: str | None
    evaluated_at: datetime
    overall_rating: int
    coach_notes: str | None
    period_start: date | None
    period_end: date | None
    attributes: list[EvaluationAttributeResult] = field(default_factory=list)


@dataclass
class PlayerAbilitiesResult:
    """Current attribute ratings plus recent evaluations.

    Attributes:
        id: Player identifier.
        first_name: Given name.
        last_name: Family name.
        photo_url: Photo URL.
        preferred_positions: Position codes.
        overall_rating: Mean of the latest evaluation.
        attributes: Current rating of every known attribute (0 if unrated).
        evaluations: Latest evaluations, newest first.
    """

    id: UUID
    first_name: str
    last_name: str
    photo_url: str | None
    preferred_positions: list[str]
    overall_rating: int | None
    attributes: dict[str, int] = field(default_factory=dict)
    evaluations: list[EvaluationResult] = field(default_factory=list)


@dataclass
class PlayerListItemResult:
    """Player row in club and age group lists.

    ``age_group_names`` and ``team_names`` are only filled in club lists.
    """

    id: UUID
    club_id: UUID
    first_name: str
    last_name: str
    nickname: str | None
    photo_url: str | None
    date_of_birth: date | None
    age: int | None
    association_id: str | None
    preferred_positions: list[str]
    overall_rating: int | None
    age_group_ids: list[UUID]
    team_ids: list[UUID]
    is_archived: bool
    age_group_names: list[str] = field(default_factory=list)
    team_names: list[str] = field(default_factory=list)


@dataclass
class PlayerPageResult:
    items: list[PlayerListItemResult]
    page: int
    page_size: int
    total_count: int
    total_pages: int


@dataclass
class RecentPerformanceResult:
    """A completed match the player was rated in.

    Attributes:
        match_id: Match identifier.
        team_id: Team the player played for.
        match_date: Kick-off date.
        opposition: Opponent name.
        is_home: True for home matches.
        competition: Competition name.
        result: Outcome and score from our side ("W 2-1"), "N/A" unscored.
        rating: The player's rating in the match.
    """

    match_id: UUID
    team_id: UUID
    match_date: datetime
    opposition: str
    is_home: bool
    competition: str | None
    result: str
    rating: float


@dataclass
class UpcomingMatchResult:
    match_id: UUID
    team_id: UUID
    team_name: str | None
    age_group_id: UUID | None
    age_group_name: str | None
    match_date: datetime
    kick_off_time: datetime | None
    opposition: str
    is_home: bool
    location: str | None
    competition: str | None


@dataclass
class PlayerAttributesResult:
    """Recorded attribute ratings keyed by camelCase attribute name."""

    player_id: UUID
    attributes: dict[str, int] = field(default_factory=dict)


def to_player_result(player: Player, club_name: str | None = None) -> PlayerResult:
    contacts = sorted(player.emergency_contacts, key=lambda c: not c.is_primary)
    return PlayerResult(
        id=player.id,
        club_id=player.club_id,
        club_name=club_name,
        first_name=player.first_name,
        last_name=player.last_name,
        nickname=player.nickname,
        photo_url=player.photo,
        date_of_birth=player.date_of_birth,
        association_id=player.association_id,
        preferred_positions=list(player.preferred_positions),
        allergies=player.allergies,
        medical_conditions=player.medical_conditions,
        emergency_contacts=[
            EmergencyContactResult(
                id=c.id,
                name=c.name,
                phone=c.phone,
                relationship=c.relationship,
                is_primary=c.is_primary,
            )
            for c in contacts
        ],
        overall_rating=player.overall_rating,
        age_group_ids=list(player.age_group_ids),
        team_ids=list(player.team_ids),
        is_archived=player.is_archived,
    )


def to_evaluation_result(evaluation: AttributeEvaluation) -> EvaluationResult:
    return EvaluationResult(
        id=evaluation.id,
        player_id=evaluation.player_id,
        evaluated_by=evaluation.evaluated_by,
        coach_name=evaluation.coach_name,
        evaluated_at=evaluation.evaluated_at,
        overall_rating=evaluation.overall_rating,
        coach_notes=evaluation.coach_notes,
        period_start=evaluation.period_start,
        period_end=evaluation.period_end,
        attributes=[
            EvaluationAttributeResult(
                attribute_name=a.attribute_name, rating=a.rating, notes=a.notes
            )
            for a in evaluation.attributes
        ],
    )


def to_player_list_item(
    player: Player,
    today: date,
    age_group_names: list[str] | None = None,
    team_names: list[str] | None = None,
) -> PlayerListItemResult:
    return PlayerListItemResult(
        id=player.id,
        club_id=player.club_id,
        first_name=player.first_name,
        last_name=player.last_name,
        nickname=player.nickname,
        photo_url=player.photo,
        date_of_birth=player.date_of_birth,
        age=player.age_on(today),
        association_id=player.association_id,
        preferred_positions=list(player.preferred_positions),
        overall_rating=player.overall_rating,
        age_group_ids=list(player.age_group_ids),
        team_ids=list(player.team_ids),
        is_archived=player.is_archived,
        age_group_names=age_group_names or [],
        team_names=team_names or [],
    )
