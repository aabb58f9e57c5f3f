from typing import Annotated, List, Optional

from pydantic import BaseModel, Field


class PersonRequest(BaseModel):
    title: str = "Osoba"
    income: float = Field(gt=0, allow_inf_nan=False)
    other_income: float = Field(default=0.0, allow_inf_nan=False)
    is_osvc: bool = False
    expenses: float = Field(ge=0, default=0.0, allow_inf_nan=False)
    passive_income: float = Field(ge=0, default=0.0, allow_inf_nan=False)
    # omitted -> derived from income
    pension_levels: Optional[Annotated[List[float], Field(min_length=3, max_length=3)]] = None


class HouseholdRequest(BaseModel):
    people: List[PersonRequest] = Field(min_length=1)


class PensionLevel(BaseModel):
    label: str
    amount: float
    share_pct: Optional[int] = None


class Invalidity(BaseModel):
    total: float
    constant: float
    variable: float
    expected_income: float


class CoverageResults(BaseModel):
    death: float
    invalidity: List[Invalidity]
    permanent_injury: float
    work_disability: float
    hospitalization: float
    injury: float


class SummaryRow(BaseModel):
    title: str
    value: str
    details: List[str] = []


class PersonResponse(BaseModel):
    title: str
    badge: Optional[str] = None
    pension_levels: List[PensionLevel]
    results: CoverageResults
    rows: List[SummaryRow]


class HouseholdResponse(BaseModel):
    people: List[PersonResponse]


class PensionDefaultsResponse(BaseModel):
    income: float
    pension_levels: List[PensionLevel]
