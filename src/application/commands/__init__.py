"""Commands - Write operations that change state.

Commands represent user intent to perform an action. They are immutable
dataclasses with imperative names (CreateTeam, AddPlayerToTeam).

Each command has a corresponding handler that contains the business logic
to execute the command. Commands that carry declarative rules are checked
by the dispatcher before their handler runs.
"""

from src.application.commands.age_group_commands import CreateAgeGroup, UpdateAgeGroup
from src.application.commands.club_commands import UpdateClub
from src.application.commands.coach_commands import UpdateCoach
from src.application.commands.development_commands import (
    CreateDevelopmentPlan,
    CreateReport,
    UpdateDevelopmentPlan,
    UpdateReport,
)
from src.application.commands.drill_commands import (
    CreateDrill,
    CreateDrillTemplate,
    UpdateDrill,
    UpdateDrillTemplate,
)
from src.application.commands.evaluation_commands import (
    CreatePlayerAbilityEvaluation,
    DeletePlayerAbilityEvaluation,
    UpdatePlayerAbilityEvaluation,
)
from src.application.commands.kit_commands import (
    CreateTeamKit,
    DeleteTeamKit,
    UpdateTeamKit,
)
from src.application.commands.match_commands import CreateMatch, UpdateMatch
from src.application.commands.player_commands import UpdatePlayer
from src.application.commands.team_commands import (
    AddPlayerToTeam,
    ArchiveTeam,
    AssignCoachToTeam,
    CreateTeam,
    RemoveCoachFromTeam,
    RemovePlayerFromTeam,
    UpdateTeam,
    UpdateTeamCoachRole,
    UpdateTeamPlayerSquadNumber,
)
from src.application.commands.user_commands import UpdateMyProfile

__all__ = [
    # Club structure
    "UpdateClub",
    "CreateAgeGroup",
    "UpdateAgeGroup",
    "CreateTeam",
    "UpdateTeam",
    "ArchiveTeam",
    # Squad and staff
    "AddPlayerToTeam",
    "UpdateTeamPlayerSquadNumber",
    "RemovePlayerFromTeam",
    "AssignCoachToTeam",
    "RemoveCoachFromTeam",
    "UpdateTeamCoachRole",
    "CreateTeamKit",
    "UpdateTeamKit",
    "DeleteTeamKit",
    # People
    "UpdatePlayer",
    "UpdateCoach",
    "UpdateMyProfile",
    "CreatePlayerAbilityEvaluation",
    "UpdatePlayerAbilityEvaluation",
    "DeletePlayerAbilityEvaluation",
    # Matches and training
    "CreateMatch",
    "UpdateMatch",
    "CreateDrill",
    "UpdateDrill",
    "CreateDrillTemplate",
    "UpdateDrillTemplate",
    # Development
    "CreateDevelopmentPlan",
    "UpdateDevelopmentPlan",
    "CreateReport",
    "UpdateReport",
]
