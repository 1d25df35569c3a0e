"""
Gap/surplus check: what you need at retirement vs. what you are on course to have.

The projected corpus here is a quick closed-form estimate (lump sum compounded
over the whole horizon, yearly savings compounded over half of it). It is not
the year-by-year figure from simulation.project and will not match it.
"""

from dataclasses import dataclass

import numpy as np
from loguru import logger

from costs import required_corpus, life_events_cost
from finances import FinancialProfile


@dataclass
class GapAnalysis:
    required_corpus: float
    life_events_cost: float
    total_required: float
    projected_corpus: float
    shortfall: float
    is_on_track: bool
    additional_monthly_needed: float

    @property
    def surplus(self) -> float:
        return max(0.0, -self.shortfall)


def approximate_projected_corpus(profile: FinancialProfile) -> float:
    years = profile.retirement_age - profile.current_age
    growth = 1 + profile.expected_returns / 100.0
    idx = np.arange(max(0, years))  # savings years 0..N-1
    income = profile.monthly_income * 12 * (1 + profile.salary_increment_rate / 100.0) ** idx
    expenses = profile.monthly_expenses * 12 * (1 + profile.expense_increment_rate / 100.0) ** idx
    total_savings = float(np.sum(income - expenses))

    fv_lump_sum = profile.current_savings * growth ** years
    fv_savings = total_savings * growth ** (years / 2.0)  # mid-point approximation
    return fv_lump_sum + fv_savings


def additional_monthly_needed(shortfall: float, annual_return_pct: float, years: int) -> float:
    """
    Monthly contribution X with X * ((1+r)^n - 1) / r == shortfall,
    r = monthly rate, n = months. Zero when there is no shortfall.
    """
    if shortfall <= 0:
        return 0.0
    months = years * 12
    if months <= 0:
        # Nothing left to spread over: the whole gap is due now
        return shortfall
    r = annual_return_pct / 100.0 / 12.0
    if r == 0:
        return shortfall / months
    return shortfall / (((1 + r) ** months - 1) / r)


def analyze(profile: FinancialProfile) -> GapAnalysis:
    corpus = required_corpus(profile)
    events = life_events_cost(profile)
    total = corpus + events
    projected = approximate_projected_corpus(profile)
    shortfall = total - projected
    extra = additional_monthly_needed(shortfall, profile.expected_returns,
                                      profile.retirement_age - profile.current_age)
    logger.debug("Gap analysis: required {:.2f}, projected {:.2f}, shortfall {:.2f}",
                 total, projected, shortfall)
    return GapAnalysis(
        required_corpus=corpus,
        life_events_cost=events,
        total_required=total,
        projected_corpus=projected,
        shortfall=shortfall,
        is_on_track=shortfall <= 0,
        additional_monthly_needed=extra,
    )
