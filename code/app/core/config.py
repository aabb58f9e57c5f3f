import os

COVERAGE_LOG_LEVEL = os.getenv("COVERAGE_LOG_LEVEL", "INFO")
COVERAGE_LOG_FORMAT = os.getenv("COVERAGE_LOG_FORMAT", "text")
COVERAGE_CURRENCY = os.getenv("COVERAGE_CURRENCY", "Kč")
COVERAGE_PEOPLE = max(1, int(os.getenv("COVERAGE_PEOPLE", "2")))
