from dataclasses import dataclass, asdict
from typing import Any, Dict, Sequence, Tuple

PENSION_LEVEL_COUNT = 3


def validate_pension_levels(levels: Sequence[float]) -> Tuple[float, float, float]:
    levels = tuple(levels)
    if len(levels) != PENSION_LEVEL_COUNT:
        raise ValueError(f"expected {PENSION_LEVEL_COUNT} pension levels, got {len(levels)}")
    return levels


@dataclass(frozen=True)
class CalculationInput:
    income: float
    other_income: float
    is_osvc: bool
    expenses: float
    passive_income: float
    # index 0 = lightest severity, index 2 = heaviest
    pension_levels: Tuple[float, float, float]

    def __post_init__(self):
        object.__setattr__(self, "pension_levels", validate_pension_levels(self.pension_levels))


@dataclass(frozen=True)
class InvalidityResult:
    total: float
    constant: float
    variable: float
    expected_income: float


@dataclass(frozen=True)
class CalculationResults:
    death: float
    invalidity: Tuple[InvalidityResult, ...]
    permanent_injury: float
    work_disability: float
    hospitalization: float
    injury: float

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)
