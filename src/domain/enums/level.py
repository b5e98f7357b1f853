"""Playing level of an age group or team.

Stored as an integer code; exposed on the wire as a lower-case label.

Usage:
    from src.domain.enums import Level

    Level.from_code(2).label  # "reserve"
    Level.from_label("Senior")  # Level.SENIOR
"""

from enum import IntEnum


class Level(IntEnum):
    """Playing level (youth, amateur, reserve, senior)."""

    YOUTH = 0
    AMATEUR = 1
    RESERVE = 2
    SENIOR = 3

    @classmethod
    def from_code(cls, code: int | None) -> "Level":
        """Map a stored code to a level; unknown codes fall back to YOUTH."""
        match code:
            case 0:
                return cls.YOUTH
            case 1:
                return cls.AMATEUR
            case 2:
                return cls.RESERVE
            case 3:
                return cls.SENIOR
            case _:
                return cls.YOUTH

    @classmethod
    def from_label(cls, label: str) -> "Level | None":
        """Parse a case-insensitive label, None when it is not a level."""
        return _BY_LABEL.get(label.strip().lower())

    @classmethod
    def labels(cls) -> tuple[str, ...]:
        return tuple(member.label for member in cls)

    @property
    def label(self) -> str:
        return self.name.lower()


_BY_LABEL = {member.name.lower(): member for member in Level}
