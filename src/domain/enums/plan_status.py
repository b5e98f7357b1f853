"""Development plan status."""

from enum import IntEnum


class PlanStatus(IntEnum):
    ACTIVE = 0
    COMPLETED = 1
    ARCHIVED = 2

    @classmethod
    def from_code(cls, code: int | None) -> "PlanStatus":
        match code:
            case 1:
                return cls.COMPLETED
            case 2:
                return cls.ARCHIVED
            case _:
                return cls.ACTIVE

    @classmethod
    def from_label(cls, label: str) -> "PlanStatus | None":
        return _BY_LABEL.get(label.strip().lower())

    @classmethod
    def labels(cls) -> tuple[str, ...]:
        return tuple(member.label for member in cls)

    @property
    def label(self) -> str:
        return self.name.lower()


_BY_LABEL = {member.label: member for member in PlanStatus}
