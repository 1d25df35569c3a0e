"""
Flat illustrative taxes. One income rate and one capital-gains rate per
country; no bands, allowances or indexation. Good for a ballpark only.
"""

from countries import CountryRecord


def flat_tax(amount: float, rate_pct: float) -> float:
    if amount <= 0:
        return 0.0
    return amount * rate_pct / 100.0


def income_tax(gross: float, country: CountryRecord) -> float:
    return flat_tax(gross, country.tax_rates.income)


def net_income(gross: float, country: CountryRecord) -> float:
    return gross - income_tax(gross, country)


def capital_gains_tax(gains: float, country: CountryRecord) -> float:
    return flat_tax(gains, country.tax_rates.capital_gains)
