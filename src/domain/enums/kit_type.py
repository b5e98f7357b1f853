"""Kit type classification.

Kit types are stored as integer codes. Unknown codes are not an error: they
are shown as a home kit.

    0 → home, 1 → away, 2 → third, 3 → goalkeeper, 4 → training, other → home
"""

from enum import IntEnum


class KitType(IntEnum):
    """Kit type (home, away, third, goalkeeper, training)."""

    HOME = 0
    AWAY = 1
    THIRD = 2
    GOALKEEPER = 3
    TRAINING = 4

    @classmethod
    def from_code(cls, code: int | None) -> "KitType":
        match code:
            case 0:
                return cls.HOME
            case 1:
                return cls.AWAY
            case 2:
                return cls.THIRD
            case 3:
                return cls.GOALKEEPER
            case 4:
                return cls.TRAINING
            case _:
                return cls.HOME

    @classmethod
    def from_label(cls, label: str) -> "KitType | None":
        match label.strip().lower():
            case "home":
                return cls.HOME
            case "away":
                return cls.AWAY
            case "third":
                return cls.THIRD
            case "goalkeeper":
                return cls.GOALKEEPER
            case "training":
                return cls.TRAINING
            case _:
                return None

    @classmethod
    def labels(cls) -> tuple[str, ...]:
        return tuple(member.label for member in cls)

    @property
    def label(self) -> str:
        return self.name.lower()


def kit_type_label(code: int | None) -> str:
    """Lower-case label for a stored kit type code."""
    return KitType.from_code(code).label
