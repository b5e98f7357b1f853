"""Drill category (technical, tactical, physical, mental, mixed)."""

from enum import IntEnum


class DrillCategory(IntEnum):
    TECHNICAL = 0
    TACTICAL = 1
    PHYSICAL = 2
    MENTAL = 3
    MIXED = 4

    @classmethod
    def from_code(cls, code: int | None) -> "DrillCategory":
        match code:
            case 0:
                return cls.TECHNICAL
            case 1:
                return cls.TACTICAL
            case 2:
                return cls.PHYSICAL
            case 3:
                return cls.MENTAL
            case 4:
                return cls.MIXED
            case _:
                return cls.TECHNICAL

    @classmethod
    def from_label(cls, label: str) -> "DrillCategory | None":
        return _BY_LABEL.get(label.strip().lower())

    @classmethod
    def labels(cls) -> tuple[str, ...]:
        return tuple(member.label for member in cls)

    @property
    def label(self) -> str:
        return self.name.lower()


_BY_LABEL = {member.label: member for member in DrillCategory}
