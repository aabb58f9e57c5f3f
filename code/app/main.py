from fastapi import FastAPI, Query

from app.core.config import COVERAGE_LOG_FORMAT, COVERAGE_LOG_LEVEL
from app.core.models import HouseholdRequest, HouseholdResponse, PensionDefaultsResponse, PersonRequest, PersonResponse
from app.core.observability import setup_logging
from app.core.pipeline import pension_defaults, run_household, run_person

setup_logging(COVERAGE_LOG_LEVEL, COVERAGE_LOG_FORMAT)

app = FastAPI(title="Coverage Advisor API")


@app.get("/health")
def health():
    return {"status": "ok"}


@app.get("/pension-defaults", response_model=PensionDefaultsResponse)
def get_pension_defaults(income: float = Query(gt=0, allow_inf_nan=False)):
    return pension_defaults(income)


@app.post("/calculate", response_model=PersonResponse)
def calculate(payload: PersonRequest):
    return run_person(payload)


@app.post("/household", response_model=HouseholdResponse)
def household(payload: HouseholdRequest):
    return run_household(payload)
