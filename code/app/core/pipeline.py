import logging
from typing import List, Sequence

from insurance.calculator import calculate_results
from insurance.pension import default_pension_levels, pension_shares
from insurance.schemas import CalculationInput, CalculationResults

from .models import (
    CoverageResults,
    HouseholdRequest,
    HouseholdResponse,
    PensionDefaultsResponse,
    PensionLevel,
    PersonRequest,
    PersonResponse,
    SummaryRow,
)
from .tools import OSVC_BADGE, format_currency, invalidity_label, pension_label

logger = logging.getLogger(__name__)


def build_calculation_input(payload: PersonRequest) -> CalculationInput:
    levels = payload.pension_levels
    if levels is None:
        levels = default_pension_levels(payload.income)
    return CalculationInput(
        income=payload.income,
        other_income=payload.other_income,
        is_osvc=payload.is_osvc,
        expenses=payload.expenses,
        passive_income=payload.passive_income,
        pension_levels=levels,
    )


def describe_pension_levels(levels: Sequence[float], income: float) -> List[PensionLevel]:
    shares = pension_shares(levels, income)
    return [
        PensionLevel(label=pension_label(i), amount=level, share_pct=share)
        for i, (level, share) in enumerate(zip(levels, shares))
    ]


def summary_rows(results: CalculationResults) -> List[SummaryRow]:
    rows = [SummaryRow(title="Smrt", value=format_currency(results.death))]
    for i, inv in enumerate(results.invalidity):
        rows.append(
            SummaryRow(
                title=invalidity_label(i),
                value=format_currency(inv.total),
                details=[
                    f"Očekávaný příjem: {format_currency(inv.expected_income)}",
                    f"Konstantní: {format_currency(inv.constant)}",
                    f"Klesající: {format_currency(inv.variable)}",
                ],
            )
        )
    rows.extend(
        [
            SummaryRow(title="Trvalé následky úrazu", value=format_currency(results.permanent_injury)),
            SummaryRow(title="Pracovní neschopnost", value=format_currency(results.work_disability, per_day=True)),
            SummaryRow(title="Hospitalizace", value=format_currency(results.hospitalization, per_day=True)),
            SummaryRow(title="Úraz", value=format_currency(results.injury)),
        ]
    )
    return rows


def run_person(payload: PersonRequest) -> PersonResponse:
    calc = build_calculation_input(payload)
    results = calculate_results(calc)
    logger.debug(
        "calculated coverage for %s",
        payload.title,
        extra={"person": payload.title, "income": payload.income, "is_osvc": payload.is_osvc},
    )
    return PersonResponse(
        title=payload.title,
        badge=OSVC_BADGE if payload.is_osvc else None,
        pension_levels=describe_pension_levels(calc.pension_levels, calc.income),
        results=CoverageResults(**results.to_dict()),
        rows=summary_rows(results),
    )


def run_household(payload: HouseholdRequest) -> HouseholdResponse:
    logger.info("calculating coverage for %d people", len(payload.people))
    return HouseholdResponse(people=[run_person(person) for person in payload.people])


def pension_defaults(income: float) -> PensionDefaultsResponse:
    levels = default_pension_levels(income)
    return PensionDefaultsResponse(income=income, pension_levels=describe_pension_levels(levels, income))
