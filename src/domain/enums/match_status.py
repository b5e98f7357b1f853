"""Match lifecycle status."""

from enum import IntEnum


class MatchStatus(IntEnum):
    SCHEDULED = 0
    IN_PROGRESS = 1
    COMPLETED = 2
    POSTPONED = 3
    CANCELLED = 4

    @classmethod
    def from_code(cls, code: int | None) -> "MatchStatus":
        match code:
            case 0:
                return cls.SCHEDULED
            case 1:
                return cls.IN_PROGRESS
            case 2:
                return cls.COMPLETED
            case 3:
                return cls.POSTPONED
            case 4:
                return cls.CANCELLED
            case _:
                return cls.SCHEDULED

    @classmethod
    def from_label(cls, label: str) -> "MatchStatus | None":
        return _BY_LABEL.get(label.strip().lower().replace("_", "").replace("-", ""))

    @classmethod
    def labels(cls) -> tuple[str, ...]:
        return tuple(member.label for member in cls)

    @property
    def label(self) -> str:
        return self.name.lower().replace("_", "")


_BY_LABEL = {member.label: member for member in MatchStatus}
