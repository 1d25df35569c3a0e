"""
The financial profile the planner works on.

A profile is an immutable snapshot: the UI keeps the editable copy and builds a
new snapshot for every change (add/update/remove a life event, switch country).
Engine functions only ever read a snapshot, so recomputing is always safe.
"""

from dataclasses import dataclass, field, fields, replace, asdict
from typing import List, Optional, Tuple
from uuid import uuid4

from loguru import logger

from config import DEFAULTS, NEW_EVENT_LEAD_YEARS
from countries import get_country
from life_events import LifeEventTemplate, estimated_cost

PRIORITIES = ("High", "Medium", "Low")
CATEGORIES = ("Property", "Education", "Family", "Health", "Other")


class ProfileError(ValueError):
    """Raised when a profile is outside the range the engine is defined for."""

    def __init__(self, problems: List[str]):
        self.problems = list(problems)
        super().__init__("; ".join(self.problems))


@dataclass(frozen=True)
class LifeEvent:
    id: str
    name: str
    target_age: int
    estimated_cost: float          # per occurrence, or per year if recurring
    priority: str = "Medium"
    category: str = "Other"
    is_recurring: bool = False
    recurring_years: Optional[int] = None


@dataclass(frozen=True)
class FinancialProfile:
    current_age: int
    retirement_age: int
    country: str
    monthly_income: float
    monthly_expenses: float
    current_savings: float
    salary_increment_rate: float     # % p.a.
    expense_increment_rate: float    # % p.a.
    expected_inflation: float        # % p.a.
    expected_returns: float          # % p.a.
    desired_retirement_income: float # % of current income
    life_events: Tuple[LifeEvent, ...] = field(default_factory=tuple)

    @property
    def years_to_retirement(self) -> int:
        return self.retirement_age - self.current_age

    @property
    def monthly_savings(self) -> float:
        return self.monthly_income - self.monthly_expenses


# camelCase keys as used by the browser form / older exports
_ALIASES = {
    "currentAge": "current_age",
    "retirementAge": "retirement_age",
    "monthlyIncome": "monthly_income",
    "monthlyExpenses": "monthly_expenses",
    "currentSavings": "current_savings",
    "salaryIncrementRate": "salary_increment_rate",
    "expenseIncrementRate": "expense_increment_rate",
    "expectedInflation": "expected_inflation",
    "expectedReturns": "expected_returns",
    "desiredRetirementIncome": "desired_retirement_income",
    "lifeEvents": "life_events",
    "targetAge": "target_age",
    "estimatedCost": "estimated_cost",
    "isRecurring": "is_recurring",
    "recurringYears": "recurring_years",
}


def _normalise(data: dict) -> dict:
    return {_ALIASES.get(k, k): v for k, v in data.items()}


def event_from_dict(data: dict) -> LifeEvent:
    d = _normalise(data)
    known = {f.name for f in fields(LifeEvent)}
    d = {k: v for k, v in d.items() if k in known}
    d.setdefault("id", uuid4().hex)
    return LifeEvent(**d)


def profile_from_dict(data: dict) -> FinancialProfile:
    d = {**DEFAULTS, **_normalise(data)}
    known = {f.name for f in fields(FinancialProfile)}
    d = {k: v for k, v in d.items() if k in known}
    d["life_events"] = tuple(
        e if isinstance(e, LifeEvent) else event_from_dict(e)
        for e in d.get("life_events") or ()
    )
    return FinancialProfile(**d)


def profile_to_dict(profile: FinancialProfile) -> dict:
    out = asdict(profile)
    out["life_events"] = [asdict(e) for e in profile.life_events]
    return out


def default_profile() -> FinancialProfile:
    return profile_from_dict({})


# ---------- Snapshot edits ----------
def add_life_event(profile: FinancialProfile, template: LifeEventTemplate,
                   event_id: str = None) -> FinancialProfile:
    event = LifeEvent(
        id=event_id or uuid4().hex,
        name=template.name,
        target_age=profile.current_age + NEW_EVENT_LEAD_YEARS,
        estimated_cost=estimated_cost(template.name, profile.country),
        priority=template.priority,
        category=template.category,
        is_recurring=template.is_recurring,
        recurring_years=template.recurring_years,
    )
    return replace(profile, life_events=profile.life_events + (event,))


def update_life_event(profile: FinancialProfile, event_id: str, **changes) -> FinancialProfile:
    events = tuple(replace(e, **changes) if e.id == event_id else e for e in profile.life_events)
    return replace(profile, life_events=events)


def remove_life_event(profile: FinancialProfile, event_id: str) -> FinancialProfile:
    events = tuple(e for e in profile.life_events if e.id != event_id)
    return replace(profile, life_events=events)


def with_country(profile: FinancialProfile, code: str) -> FinancialProfile:
    """Switch country and reset inflation/returns to that country's averages."""
    country = get_country(code)
    if country is None:
        return profile
    return replace(
        profile,
        country=country.code,
        expected_inflation=country.inflation_rate,
        expected_returns=country.average_returns.equity,
    )


# ---------- Validation boundary ----------
def profile_problems(profile: FinancialProfile) -> List[str]:
    problems = []
    if profile.retirement_age <= profile.current_age:
        problems.append("Retirement age must be after your current age.")
    for name in ("monthly_income", "monthly_expenses", "current_savings"):
        if getattr(profile, name) < 0:
            problems.append(f"{name.replace('_', ' ').capitalize()} cannot be negative.")
    if profile.expected_returns <= 0:
        problems.append("Expected returns must be above 0%.")

    seen = set()
    for e in profile.life_events:
        if e.id in seen:
            problems.append(f"Duplicate life event id {e.id!r}.")
        seen.add(e.id)
        if not profile.current_age <= e.target_age <= profile.retirement_age:
            problems.append(
                f"{e.name}: target age {e.target_age} must be between "
                f"{profile.current_age} and {profile.retirement_age}."
            )
        if e.estimated_cost < 0:
            problems.append(f"{e.name}: cost cannot be negative.")
        if e.is_recurring and not (e.recurring_years and e.recurring_years > 0):
            problems.append(f"{e.name}: recurring events need at least one year.")
        if e.priority not in PRIORITIES:
            problems.append(f"{e.name}: unknown priority {e.priority!r}.")
        if e.category not in CATEGORIES:
            problems.append(f"{e.name}: unknown category {e.category!r}.")
    return problems


def validate_profile(profile: FinancialProfile) -> FinancialProfile:
    problems = profile_problems(profile)
    if problems:
        logger.warning("Rejected profile: {}", problems)
        raise ProfileError(problems)
    return profile
