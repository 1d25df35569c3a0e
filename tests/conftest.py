import pytest

from finances import FinancialProfile, LifeEvent
from life_events import COMMON_LIFE_EVENTS, LifeEventTemplate


def make_profile(**overrides) -> FinancialProfile:
    base = dict(
        current_age=30,
        retirement_age=60,
        country="IN",
        monthly_income=50_000,
        monthly_expenses=35_000,
        current_savings=500_000,
        salary_increment_rate=8.0,
        expense_increment_rate=6.0,
        expected_inflation=6.0,
        expected_returns=12.0,
        desired_retirement_income=80.0,
        life_events=(),
    )
    base.update(overrides)
    return FinancialProfile(**base)


def make_event(**overrides) -> LifeEvent:
    base = dict(
        id="e1",
        name="House Purchase",
        target_age=35,
        estimated_cost=1_000_000,
        priority="High",
        category="Property",
        is_recurring=False,
        recurring_years=None,
    )
    base.update(overrides)
    return LifeEvent(**base)


@pytest.fixture
def profile():
    return make_profile()


@pytest.fixture
def flat_profile():
    # No growth anywhere: easy to check by hand
    return make_profile(salary_increment_rate=0.0, expense_increment_rate=0.0,
                        expected_returns=0.0, expected_inflation=0.0)


def template(name: str) -> LifeEventTemplate:
    return next(t for t in COMMON_LIFE_EVENTS if t.name == name)
