from dataclasses import dataclass
from typing import List, Optional

# Fallback cost when an event/country pair has no estimate
DEFAULT_EVENT_COST = 100_000


@dataclass(frozen=True)
class LifeEventTemplate:
    name: str
    priority: str                 # "High" | "Medium" | "Low"
    category: str                 # "Property" | "Education" | "Family" | "Health" | "Other"
    is_recurring: bool = False
    recurring_years: Optional[int] = None


COMMON_LIFE_EVENTS: List[LifeEventTemplate] = [
    LifeEventTemplate("House Purchase", "High", "Property"),
    LifeEventTemplate("Child Education (School)", "High", "Education", True, 12),
    LifeEventTemplate("Child Higher Education", "High", "Education"),
    LifeEventTemplate("Child Marriage", "High", "Family"),
    LifeEventTemplate("Emergency Health Fund", "High", "Health"),
    LifeEventTemplate("Car Purchase", "Medium", "Other"),
    LifeEventTemplate("Vacation Fund", "Low", "Other", True, 1),
    LifeEventTemplate("Home Renovation", "Medium", "Property"),
    LifeEventTemplate("Parent Care Fund", "High", "Family", True, 10),
]

# Typical cost in local currency; recurring events are per year
ESTIMATED_COSTS = {
    "House Purchase": {
        "IN": 5_000_000, "US": 400_000, "GB": 300_000, "CA": 500_000,
        "AU": 600_000, "DE": 350_000, "SG": 800_000, "AE": 1_000_000,
    },
    "Child Education (School)": {
        "IN": 50_000, "US": 15_000, "GB": 12_000, "CA": 18_000,
        "AU": 20_000, "DE": 8_000, "SG": 25_000, "AE": 40_000,
    },
    "Child Higher Education": {
        "IN": 1_500_000, "US": 200_000, "GB": 150_000, "CA": 180_000,
        "AU": 200_000, "DE": 50_000, "SG": 150_000, "AE": 300_000,
    },
    "Child Marriage": {
        "IN": 2_000_000, "US": 50_000, "GB": 40_000, "CA": 60_000,
        "AU": 70_000, "DE": 35_000, "SG": 80_000, "AE": 150_000,
    },
    "Emergency Health Fund": {
        "IN": 1_000_000, "US": 100_000, "GB": 80_000, "CA": 120_000,
        "AU": 150_000, "DE": 70_000, "SG": 100_000, "AE": 200_000,
    },
}


def estimated_cost(event_name: str, country_code: str) -> float:
    return float(ESTIMATED_COSTS.get(event_name, {}).get(country_code, DEFAULT_EVENT_COST))
