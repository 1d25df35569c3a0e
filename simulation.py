import numpy as np
import pandas as pd
from dataclasses import dataclass, asdict
from typing import Dict, List

from loguru import logger

from config import MILESTONES
from finances import FinancialProfile


@dataclass
class YearProjection:
    year: int
    age: int
    corpus: float
    annual_income: float
    annual_expenses: float
    annual_savings: float
    life_events_cost: float
    total_invested: float
    net_worth: float


def _event_outflows(profile: FinancialProfile) -> Dict[int, float]:
    # Raw (today's price) cost keyed by years from now; events at the same year add up
    outflows: Dict[int, float] = {}
    for e in profile.life_events:
        year = e.target_age - profile.current_age
        outflows[year] = outflows.get(year, 0.0) + e.estimated_cost
    return outflows


def project(profile: FinancialProfile) -> List[YearProjection]:
    """
    Year-by-year corpus from today (year 0) to retirement (year N).

    Each year: corpus grows by a simple annual return on last year's balance,
    adds that year's savings (income and expenses growing at their own rates)
    and pays any life event due that year at its un-inflated cost. The corpus
    is floored at zero and a shortfall is not carried forward as debt.
    """
    years = profile.retirement_age - profile.current_age
    idx = np.arange(years + 1)  # 0..years
    income = profile.monthly_income * 12 * (1 + profile.salary_increment_rate / 100.0) ** idx
    expenses = profile.monthly_expenses * 12 * (1 + profile.expense_increment_rate / 100.0) ** idx
    savings = income - expenses
    outflows = _event_outflows(profile)
    rate = profile.expected_returns / 100.0

    rows: List[YearProjection] = []
    for k in idx:
        k = int(k)
        if k == 0:
            corpus = float(profile.current_savings)
            invested = corpus
            events_cost = 0.0
        else:
            prev = rows[-1]
            events_cost = outflows.get(k, 0.0)
            corpus = max(0.0, prev.corpus + prev.corpus * rate + float(savings[k]) - events_cost)
            invested = prev.total_invested + float(savings[k])
        rows.append(YearProjection(
            year=k,
            age=profile.current_age + k,
            corpus=corpus,
            annual_income=float(income[k]),
            annual_expenses=float(expenses[k]),
            annual_savings=float(savings[k]),
            life_events_cost=events_cost,
            total_invested=invested,
            net_worth=corpus,
        ))

    logger.debug("Projected {} years, final corpus {:.2f}",
                 years, rows[-1].corpus if rows else 0.0)
    return rows


def projection_frame(profile: FinancialProfile) -> pd.DataFrame:
    columns = [f for f in YearProjection.__dataclass_fields__]
    return pd.DataFrame([asdict(r) for r in project(profile)], columns=columns)


def milestones(projections: List[YearProjection], thresholds: Dict[str, float] = None) -> List[dict]:
    """First year/age each corpus threshold is reached (None if never)."""
    thresholds = MILESTONES if thresholds is None else thresholds
    out = []
    for label, amount in thresholds.items():
        hit = next((p for p in projections if p.corpus >= amount), None)
        out.append({
            "label": label,
            "amount": amount,
            "achieved": hit is not None,
            "year": hit.year if hit else None,
            "age": hit.age if hit else None,
        })
    return out


def summarize(projections: List[YearProjection]) -> dict:
    if not projections:
        return {"final_corpus": 0.0, "peak_corpus": 0.0,
                "total_invested": 0.0, "life_events_paid": 0.0}
    return {
        "final_corpus": projections[-1].corpus,
        "peak_corpus": max(p.corpus for p in projections),
        "total_invested": projections[-1].total_invested,
        "life_events_paid": sum(p.life_events_cost for p in projections),
    }
