from dataclasses import dataclass
from typing import Callable, Dict, List, Tuple

from loguru import logger

from countries import AssetReturns, CountryRecord, country_or_default
from finances import FinancialProfile
from taxes import capital_gains_tax


@dataclass
class InvestmentOption:
    name: str
    allocation_percent: float
    expected_return: float   # % p.a.
    risk: str                # "Low" | "Medium" | "High"
    description: str
    tax_implications: str


@dataclass
class StrategyResult:
    strategy: str
    title: str
    options: List[InvestmentOption]
    weighted_return: float
    projected_corpus: float
    suitability: str


# Bucket: (name, allocation %, return from country averages, risk, description, tax note)
Bucket = Tuple[str, float, Callable[[AssetReturns], float], str, str, str]

_LARGE_CAP_TAX = "Long-term capital gains tax applicable"
_SHORT_TERM_TAX = "Higher tax on short-term gains"
_SLAB_TAX = "Taxed as per income slab"

STRATEGIES: Dict[str, dict] = {
    "aggressive": {
        "title": "Aggressive Growth",
        "subtitle": "High risk, high reward for long-term growth",
        "buckets": [
            ("Large Cap Equity Funds", 40, lambda r: r.equity, "Medium",
             "Stable large companies with growth potential", _LARGE_CAP_TAX),
            ("Mid & Small Cap Funds", 30, lambda r: r.equity + 2, "High",
             "Higher growth potential with increased volatility", _SHORT_TERM_TAX),
            ("International Equity", 20, lambda r: r.equity - 2, "Medium",
             "Global diversification and currency hedge", "Foreign tax credit may apply"),
            ("Debt Funds", 10, lambda r: r.debt, "Low",
             "Stability and capital preservation", _SLAB_TAX),
        ],
    },
    "balanced": {
        "title": "Balanced Growth",
        "subtitle": "Optimal mix of growth and stability",
        "buckets": [
            ("Large Cap Equity Funds", 50, lambda r: r.equity, "Medium",
             "Core equity allocation for steady growth", _LARGE_CAP_TAX),
            ("Mid Cap Funds", 20, lambda r: r.equity + 1, "High",
             "Enhanced growth with moderate risk", _SHORT_TERM_TAX),
            ("Debt Funds", 20, lambda r: r.debt, "Low",
             "Stability and regular income", _SLAB_TAX),
            ("Gold/Commodity ETFs", 10, lambda r: r.gold, "Medium",
             "Inflation hedge and portfolio diversification", "Capital gains tax on profits"),
        ],
    },
    "conservative": {
        "title": "Conservative Wealth Preservation",
        "subtitle": "Capital protection with moderate growth",
        "buckets": [
            ("Large Cap Equity Funds", 30, lambda r: r.equity, "Medium",
             "Limited equity exposure for growth", _LARGE_CAP_TAX),
            ("Hybrid Funds", 30, lambda r: (r.equity + r.debt) / 2, "Medium",
             "Balanced equity-debt allocation", "Mixed taxation based on allocation"),
            ("Debt Funds", 30, lambda r: r.debt, "Low",
             "Capital preservation and steady returns", _SLAB_TAX),
            ("Fixed Deposits/Government Bonds", 10, lambda r: r.debt - 1, "Low",
             "Guaranteed returns and tax benefits", "TDS applicable on interest"),
        ],
    },
}

DEFAULT_STRATEGY = "balanced"


def _resolve(strategy: str) -> str:
    return strategy if strategy in STRATEGIES else DEFAULT_STRATEGY


def investment_options(strategy: str, country: CountryRecord) -> List[InvestmentOption]:
    returns = country.average_returns
    return [
        InvestmentOption(name, pct, ret(returns), risk, desc, tax)
        for name, pct, ret, risk, desc, tax in STRATEGIES[_resolve(strategy)]["buckets"]
    ]


def weighted_return(options: List[InvestmentOption]) -> float:
    return sum(o.allocation_percent / 100.0 * o.expected_return for o in options)


def suitability(strategy: str, years_to_retirement: int) -> str:
    strategy = _resolve(strategy)
    if strategy == "aggressive":
        if years_to_retirement >= 20:
            return "Highly Suitable"
        if years_to_retirement >= 10:
            return "Moderately Suitable"
        return "Not Recommended"
    if strategy == "conservative":
        return "Highly Suitable" if years_to_retirement <= 10 else "Conservative Approach"
    return "Suitable for Most Investors"


def strategy_future_value(monthly_savings: float, current_savings: float,
                          annual_return_pct: float, years: int) -> float:
    """Monthly-compounded annuity on savings plus yearly-compounded lump sum."""
    months = years * 12
    r = annual_return_pct / 100.0 / 12.0
    if r == 0:
        fv_savings = monthly_savings * months
    else:
        fv_savings = monthly_savings * ((1 + r) ** months - 1) / r
    fv_lump_sum = current_savings * (1 + annual_return_pct / 100.0) ** years
    return fv_savings + fv_lump_sum


def allocate(profile: FinancialProfile, strategy: str = DEFAULT_STRATEGY) -> StrategyResult:
    key = _resolve(strategy)
    country = country_or_default(profile.country)
    options = investment_options(key, country)
    blended = weighted_return(options)
    years = profile.retirement_age - profile.current_age
    projected = strategy_future_value(profile.monthly_savings, profile.current_savings, blended, years)
    logger.debug("Strategy {} ({}): blended {:.2f}%, projected {:.2f}",
                 key, country.code, blended, projected)
    return StrategyResult(
        strategy=key,
        title=STRATEGIES[key]["title"],
        options=options,
        weighted_return=blended,
        projected_corpus=projected,
        suitability=suitability(key, years),
    )


def post_tax_projected_corpus(result: StrategyResult, profile: FinancialProfile) -> float:
    # Flat capital-gains tax on growth above what was paid in
    years = profile.retirement_age - profile.current_age
    contributed = profile.current_savings + profile.monthly_savings * 12 * max(0, years)
    gains = result.projected_corpus - contributed
    return result.projected_corpus - capital_gains_tax(gains, country_or_default(profile.country))
