from typing import List, Tuple

from insurance.pension import default_pension_levels
from insurance.schemas import PENSION_LEVEL_COUNT, validate_pension_levels

from .tools import parse_amount


class PensionLevelState:
    """Editable pension levels for one person.

    Seeded once from income; after that each level is edited on its own and
    later income changes leave it untouched. The calculator only ever sees
    ``snapshot()``.
    """

    def __init__(self, levels):
        self._levels: List[float] = list(validate_pension_levels(levels))

    @classmethod
    def from_income(cls, income: float) -> "PensionLevelState":
        return cls(default_pension_levels(income))

    def set_level(self, index: int, text: str) -> float:
        if not 0 <= index < PENSION_LEVEL_COUNT:
            raise IndexError(f"pension level index out of range: {index}")
        value = parse_amount(text)
        self._levels[index] = value
        return value

    def reset(self, income: float) -> None:
        self._levels = list(default_pension_levels(income))

    def snapshot(self) -> Tuple[float, float, float]:
        return tuple(self._levels)
