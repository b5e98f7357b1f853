"""Python client for the OurGame API.

Provides the HTTP client used by front-end code and tooling, plus data hooks
that expose loading/submitting state around a single API operation.

Usage:
    from src.client import ApiClient, use_team_players

    async with ApiClient(base_url="http://localhost:8000") as client:
        players = use_team_players(client, team_id)
        await players.refetch()
        print(players.data)
"""

from src.client.api_client import ApiClient, encode_principal
from src.client.errors import ApiError
from src.client.hooks import (
    MutationHook,
    QueryHook,
    use_add_player_to_team,
    use_age_group,
    use_age_group_coaches,
    use_age_group_development_plans,
    use_age_group_players,
    use_age_group_statistics,
    use_age_group_teams,
    use_assign_coach,
    use_club,
    use_club_age_groups,
    use_club_coaches,
    use_club_development_plans,
    use_club_drill_templates,
    use_club_drills,
    use_club_kits,
    use_club_matches,
    use_club_players,
    use_club_statistics,
    use_club_teams,
    use_clubs,
    use_coach,
    use_create_evaluation,
    use_create_match,
    use_current_user,
    use_development_plan,
    use_drill,
    use_drill_template,
    use_match,
    use_my_clubs,
    use_my_teams,
    use_player,
    use_player_abilities,
    use_player_attributes,
    use_player_recent_performances,
    use_player_reports,
    use_player_upcoming_matches,
    use_remove_player_from_team,
    use_report,
    use_team,
    use_team_coaches,
    use_team_development_plans,
    use_team_kits,
    use_team_matches,
    use_team_overview,
    use_team_players,
    use_team_squad,
    use_update_age_group,
    use_update_club,
    use_update_match,
    use_update_player,
    use_update_squad_number,
)

__all__ = [
    "ApiClient",
    "ApiError",
    "MutationHook",
    "QueryHook",
    "encode_principal",
    # Read hooks
    "use_age_group",
    "use_age_group_coaches",
    "use_age_group_development_plans",
    "use_age_group_players",
    "use_age_group_statistics",
    "use_age_group_teams",
    "use_club",
    "use_club_age_groups",
    "use_club_coaches",
    "use_club_development_plans",
    "use_club_drill_templates",
    "use_club_drills",
    "use_club_kits",
    "use_club_matches",
    "use_club_players",
    "use_club_statistics",
    "use_club_teams",
    "use_clubs",
    "use_coach",
    "use_current_user",
    "use_development_plan",
    "use_drill",
    "use_drill_template",
    "use_match",
    "use_my_clubs",
    "use_my_teams",
    "use_player",
    "use_player_abilities",
    "use_player_attributes",
    "use_player_recent_performances",
    "use_player_reports",
    "use_player_upcoming_matches",
    "use_report",
    "use_team",
    "use_team_coaches",
    "use_team_development_plans",
    "use_team_kits",
    "use_team_matches",
    "use_team_overview",
    "use_team_players",
    "use_team_squad",
    # Write hooks
    "use_add_player_to_team",
    "use_assign_coach",
    "use_create_evaluation",
    "use_create_match",
    "use_remove_player_from_team",
    "use_update_age_group",
    "use_update_club",
    "use_update_match",
    "use_update_player",
    "use_update_squad_number",
]
