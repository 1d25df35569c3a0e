import os
import sys

from loguru import logger

APP_NAME = "Milestone: Life-Event Retirement Planner"

# Default profile (the form's starting values)
DEFAULTS = {
    "current_age": 30,
    "retirement_age": 60,
    "country": "IN",

    # Finances (monthly, today's money)
    "monthly_income": 50_000,
    "monthly_expenses": 35_000,
    "current_savings": 500_000,

    # Growth assumptions (% per year)
    "salary_increment_rate": 8.0,
    "expense_increment_rate": 6.0,
    "expected_inflation": 6.0,
    "expected_returns": 12.0,
    "desired_retirement_income": 80.0,   # % of current income

    "life_events": [],
}

# Fixed safe-withdrawal rule used to size the corpus (not user-configurable)
SAFE_WITHDRAWAL_RATE = 0.04

# Years a new life event is placed ahead of the current age
NEW_EVENT_LEAD_YEARS = 5

# Corpus milestones shown on the projection tab (1 Cr = 10,000,000)
CRORE = 10_000_000
MILESTONES = {
    "1 Cr": 1 * CRORE,
    "5 Cr": 5 * CRORE,
    "10 Cr": 10 * CRORE,
    "20 Cr": 20 * CRORE,
    "50 Cr": 50 * CRORE,
}

LOG_LEVEL = os.environ.get("PLANNER_LOG_LEVEL", "WARNING").upper()


def configure_logging(level: str = LOG_LEVEL):
    logger.remove()
    logger.add(sys.stderr, level=level,
               format="{time:HH:mm:ss} | {level: <8} | {name}:{function} - {message}")
    return logger
