"""
Static country reference data: currency, inflation, long-run asset-class
returns and flat illustrative tax rates. All rates are % per year.

Records are immutable and looked up by ISO code. Anything the lookup does not
know falls back to DEFAULT_COUNTRY, which is a named record like the others.
"""

from dataclasses import dataclass
from typing import Dict, Optional


@dataclass(frozen=True)
class AssetReturns:
    equity: float
    debt: float
    real_estate: float
    gold: float


@dataclass(frozen=True)
class TaxRates:
    income: float
    capital_gains: float


@dataclass(frozen=True)
class CountryRecord:
    code: str
    name: str
    currency: str
    symbol: str
    inflation_rate: float
    average_returns: AssetReturns
    tax_rates: TaxRates


def _record(code, name, currency, symbol, inflation, returns, taxes):
    return CountryRecord(
        code=code,
        name=name,
        currency=currency,
        symbol=symbol,
        inflation_rate=inflation,
        average_returns=AssetReturns(*returns),
        tax_rates=TaxRates(*taxes),
    )


#                 code  name              ccy    symbol  cpi   (eq,  debt, re,  gold)   (inc, cg)
COUNTRIES: Dict[str, CountryRecord] = {
    r.code: r for r in [
        _record("IN", "India",          "INR", "₹",   6.0, (14,   8,   10,   8),   (30, 20)),
        _record("US", "United States",  "USD", "$",   3.0, (10,   5,   8,    6),   (25, 15)),
        _record("GB", "United Kingdom", "GBP", "£",   2.5, (9,    4,   7,    5),   (20, 10)),
        _record("CA", "Canada",         "CAD", "C$",  2.8, (9.5,  4.5, 7.5,  5.5), (26, 13)),
        _record("AU", "Australia",      "AUD", "A$",  3.2, (10.5, 5.5, 8.5,  6.5), (30, 15)),
        _record("DE", "Germany",        "EUR", "€",   2.2, (8.5,  3.5, 6.5,  4.5), (42, 26)),
        _record("SG", "Singapore",      "SGD", "S$",  2.0, (9,    4,   7,    5),   (17, 0)),
        _record("AE", "UAE",            "AED", "د.إ", 2.5, (8,    5,   9,    6),   (0, 0)),
    ]
}

# Used whenever a profile carries a code we don't know
DEFAULT_COUNTRY = _record("XX", "Default", "INR", "₹", 6.0, (14, 8, 10, 8), (30, 20))


def get_country(code: str) -> Optional[CountryRecord]:
    return COUNTRIES.get((code or "").upper())


def country_or_default(code: str) -> CountryRecord:
    return get_country(code) or DEFAULT_COUNTRY
