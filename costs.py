import numpy as np
import pandas as pd
from loguru import logger

from config import SAFE_WITHDRAWAL_RATE
from finances import FinancialProfile, LifeEvent


def corpus_breakdown(profile: FinancialProfile) -> dict:
    """
    Corpus needed at retirement, step by step.
    Retirement spend = desired % of today's income, inflated to the retirement
    year, then sized with the fixed safe-withdrawal rate.
    """
    years = profile.retirement_age - profile.current_age
    monthly_today = profile.monthly_income * (profile.desired_retirement_income / 100.0)
    monthly_at_retirement = monthly_today * (1 + profile.expected_inflation / 100.0) ** years
    annual_at_retirement = monthly_at_retirement * 12
    return {
        "monthly_expenses_today": monthly_today,
        "monthly_expenses_at_retirement": monthly_at_retirement,
        "annual_expenses_at_retirement": annual_at_retirement,
        "required_corpus": annual_at_retirement / SAFE_WITHDRAWAL_RATE,
    }


def required_corpus(profile: FinancialProfile) -> float:
    corpus = corpus_breakdown(profile)["required_corpus"]
    logger.debug("Required corpus {:.2f} over {} years", corpus, profile.years_to_retirement)
    return corpus


def event_cost(event: LifeEvent, profile: FinancialProfile) -> float:
    """
    Inflation-adjusted cost of one event. A recurring event pays R annual
    instalments, each inflated one more year on top of the already-inflated base.
    """
    growth = 1 + profile.expected_inflation / 100.0
    years_from_now = event.target_age - profile.current_age
    base = event.estimated_cost * growth ** years_from_now
    if event.is_recurring and event.recurring_years:
        steps = np.arange(event.recurring_years)
        return float(np.sum(base * growth ** steps))
    return base


def life_events_cost(profile: FinancialProfile) -> float:
    total = sum((event_cost(e, profile) for e in profile.life_events), 0.0)
    logger.debug("Life events cost {:.2f} across {} events", total, len(profile.life_events))
    return total


def naive_life_events_total(profile: FinancialProfile) -> float:
    # Form preview: today's prices, recurring cost times its years
    return sum(
        e.estimated_cost * ((e.recurring_years or 1) if e.is_recurring else 1)
        for e in profile.life_events
    )


def project_event_costs(profile: FinancialProfile) -> pd.DataFrame:
    """One row per life event with its today and inflation-adjusted cost."""
    columns = ["id", "name", "category", "priority", "target_age", "years_from_now",
               "is_recurring", "recurring_years", "estimated_cost", "inflation_adjusted_cost"]
    rows = [{
        "id": e.id,
        "name": e.name,
        "category": e.category,
        "priority": e.priority,
        "target_age": e.target_age,
        "years_from_now": e.target_age - profile.current_age,
        "is_recurring": e.is_recurring,
        "recurring_years": e.recurring_years if e.is_recurring else None,
        "estimated_cost": e.estimated_cost,
        "inflation_adjusted_cost": event_cost(e, profile),
    } for e in profile.life_events]
    return pd.DataFrame(rows, columns=columns)
