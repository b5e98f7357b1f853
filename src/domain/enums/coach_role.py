"""Coach role within a team (and a coach's default role).

Unknown codes fall back to ASSISTANT_COACH, the least privileged role.
"""

from enum import IntEnum


class CoachRole(IntEnum):
    HEAD_COACH = 0
    ASSISTANT_COACH = 1
    GOALKEEPER_COACH = 2
    FITNESS_COACH = 3
    TECHNICAL_COACH = 4

    @classmethod
    def from_code(cls, code: int | None) -> "CoachRole":
        match code:
            case 0:
                return cls.HEAD_COACH
            case 1:
                return cls.ASSISTANT_COACH
            case 2:
                return cls.GOALKEEPER_COACH
            case 3:
                return cls.FITNESS_COACH
            case 4:
                return cls.TECHNICAL_COACH
            case _:
                return cls.ASSISTANT_COACH

    @classmethod
    def from_label(cls, label: str) -> "CoachRole | None":
        """Parse "headcoach", "HeadCoach" or "head_coach"."""
        return _BY_LABEL.get(label.strip().lower().replace("_", ""))

    @classmethod
    def labels(cls) -> tuple[str, ...]:
        return tuple(member.label for member in cls)

    @property
    def label(self) -> str:
        return self.name.lower().replace("_", "")


_BY_LABEL = {member.label: member for member in CoachRole}
