import math
from typing import Sequence, Tuple

from .schemas import CalculationInput, CalculationResults, InvalidityResult, validate_pension_levels
from .utils import ceil_to_multiple, round_half_up

DEATH_BASE_AMOUNT = 100000
DEATH_EXPENSE_RATIO = 0.8
DEATH_COVERED_MONTHS = 36

# Per severity level, lightest first: expected residual work income and cap in years.
INVALIDITY_FACTORS = (0.6, 0.3, 0)
INVALIDITY_MULTIPLIERS = (3, 4, 5)
INVALIDITY_AMORTIZATION_MONTHS = 200

PERMANENT_INJURY_MONTHS = 100
PERMANENT_INJURY_CAP_MONTHS = 12 * 5

STATE_SICK_PAY_RATIO = 0.4
DAYS_PER_MONTH = 30
DAILY_RATE_STEP = 50

INJURY_INCOME_RETAINED = 0.6
INJURY_RECOVERY_MONTHS = 2
INJURY_NEED_STEP = 15000
INJURY_PAYOUT_UNIT = 100000


def calculate_death(other_income: float, expenses: float, passive_income: float) -> int:
    monthly_deficit = (other_income + passive_income) - expenses * DEATH_EXPENSE_RATIO
    extra = abs(monthly_deficit) * DEATH_COVERED_MONTHS if monthly_deficit < 0 else 0
    return round_half_up(DEATH_BASE_AMOUNT + extra)


def _invalidity_level(income: float, passive_income: float, pension: float, factor: float, multiplier: int) -> InvalidityResult:
    expected_income = income * factor + pension + passive_income
    deficit = max(0, income - expected_income)
    amount = deficit * INVALIDITY_AMORTIZATION_MONTHS
    constant = min(income * multiplier * 12, amount)

    total = round_half_up(amount)
    constant = round_half_up(constant)
    # variable comes from the rounded parts so total == constant + variable holds exactly
    return InvalidityResult(
        total=total,
        constant=constant,
        variable=total - constant,
        expected_income=round_half_up(expected_income),
    )


def calculate_invalidity(income: float, passive_income: float, pension_levels: Sequence[float]) -> Tuple[InvalidityResult, ...]:
    levels = validate_pension_levels(pension_levels)
    return tuple(
        _invalidity_level(income, passive_income, pension, factor, multiplier)
        for pension, factor, multiplier in zip(levels, INVALIDITY_FACTORS, INVALIDITY_MULTIPLIERS)
    )


def calculate_permanent_injury(income: float) -> float:
    return min(round_half_up(income * PERMANENT_INJURY_MONTHS), income * PERMANENT_INJURY_CAP_MONTHS)


def calculate_work_disability(income: float, is_osvc: bool) -> int:
    # Employees already get sick pay from the state; the self-employed get nothing.
    if is_osvc:
        daily = income / DAYS_PER_MONTH
    else:
        daily = (income * STATE_SICK_PAY_RATIO) / DAYS_PER_MONTH
    return ceil_to_multiple(daily, DAILY_RATE_STEP)


def calculate_hospitalization(income: float) -> int:
    daily = (income * STATE_SICK_PAY_RATIO) / DAYS_PER_MONTH
    return ceil_to_multiple(daily, DAILY_RATE_STEP)


def calculate_injury(income: float) -> int:
    monthly_need = income - income * INJURY_INCOME_RETAINED
    needed_amount = monthly_need * INJURY_RECOVERY_MONTHS
    return math.ceil(needed_amount / INJURY_NEED_STEP) * INJURY_PAYOUT_UNIT


def calculate_results(calc: CalculationInput) -> CalculationResults:
    return CalculationResults(
        death=calculate_death(calc.other_income, calc.expenses, calc.passive_income),
        invalidity=calculate_invalidity(calc.income, calc.passive_income, calc.pension_levels),
        permanent_injury=calculate_permanent_injury(calc.income),
        work_disability=calculate_work_disability(calc.income, calc.is_osvc),
        hospitalization=calculate_hospitalization(calc.income),
        injury=calculate_injury(calc.income),
    )
