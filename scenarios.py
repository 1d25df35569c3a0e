from dataclasses import replace
from typing import Dict, List, Tuple

from analysis import GapAnalysis, analyze
from finances import FinancialProfile


def clone_profile(profile: FinancialProfile, **overrides) -> FinancialProfile:
    return replace(profile, **overrides)


def standard_variants(profile: FinancialProfile, more_saving: float = 0.0,
                      retire_later_years: int = 0, cut_target_pct: float = 0.0) -> List[Tuple[str, dict]]:
    """The three quick what-ifs: save more now, retire later, need less income."""
    return [
        ("More saving", {"monthly_expenses": max(0.0, profile.monthly_expenses - more_saving)}),
        ("Retire later", {"retirement_age": profile.retirement_age + retire_later_years}),
        ("Spend less", {"desired_retirement_income":
                        profile.desired_retirement_income * (1 - cut_target_pct / 100.0)}),
    ]


def compare(profile: FinancialProfile, variants: List[Tuple[str, dict]]) -> Dict[str, GapAnalysis]:
    """
    variants: list of (name, overrides-dict)
    returns: dict name -> GapAnalysis, with the untouched profile under "Current plan"
    """
    res = {"Current plan": analyze(profile)}
    for name, edits in variants:
        res[name] = analyze(clone_profile(profile, **edits))
    return res
