"""
Input field configuration for the profile form.

Each field is described once (key, label, kind, bounds, unit) and the app
renders every group with the same generic loop.
"""

from dataclasses import dataclass
from typing import Optional, Tuple

from countries import COUNTRIES

NUMERIC = "numeric"
ENUMERATED = "enumerated"


@dataclass(frozen=True)
class FieldSpec:
    key: str
    label: str
    kind: str = NUMERIC
    minimum: Optional[float] = None
    maximum: Optional[float] = None
    step: float = 1.0
    unit: str = ""
    options: Tuple[Tuple[str, str], ...] = ()   # (value, label) for enumerated fields
    currency: bool = False                      # unit is the country's currency symbol
    help: str = ""


@dataclass(frozen=True)
class FieldGroup:
    title: str
    fields: Tuple[FieldSpec, ...]


FIELD_GROUPS: Tuple[FieldGroup, ...] = (
    FieldGroup("Personal Information", (
        FieldSpec("country", "Country", ENUMERATED,
                  options=tuple((c.code, c.name) for c in COUNTRIES.values()),
                  help="Sets currency, typical inflation and average returns."),
        FieldSpec("current_age", "Current Age", minimum=18, maximum=65, unit="years"),
        FieldSpec("retirement_age", "Planned Retirement Age", minimum=45, maximum=75, unit="years"),
    )),
    FieldGroup("Current Financial Status", (
        FieldSpec("monthly_income", "Monthly Income", minimum=0, step=1000, currency=True),
        FieldSpec("monthly_expenses", "Monthly Expenses", minimum=0, step=1000, currency=True),
        FieldSpec("current_savings", "Current Savings", minimum=0, step=10000, currency=True),
    )),
    FieldGroup("Growth Assumptions", (
        FieldSpec("salary_increment_rate", "Annual Salary Increment",
                  minimum=0, maximum=20, step=0.5, unit="% p.a."),
        FieldSpec("expense_increment_rate", "Annual Expense Increment",
                  minimum=0, maximum=15, step=0.5, unit="% p.a."),
        FieldSpec("expected_inflation", "Expected Inflation Rate",
                  minimum=3, maximum=15, step=0.5, unit="% p.a."),
        FieldSpec("expected_returns", "Expected Investment Returns",
                  minimum=5, maximum=20, step=0.5, unit="% p.a."),
        FieldSpec("desired_retirement_income", "Desired Retirement Income",
                  minimum=50, maximum=100, step=5, unit="% of current income"),
    )),
)

# Bounds for per-event inputs
RECURRING_YEARS = FieldSpec("recurring_years", "Recurring for", minimum=1, maximum=30, unit="years")


def all_fields():
    return [f for g in FIELD_GROUPS for f in g.fields]


def clamp(spec: FieldSpec, value):
    if spec.kind == ENUMERATED:
        allowed = [v for v, _ in spec.options]
        return value if value in allowed else allowed[0]
    if spec.minimum is not None and value < spec.minimum:
        return type(value)(spec.minimum)
    if spec.maximum is not None and value > spec.maximum:
        return type(value)(spec.maximum)
    return value


def widget_value(spec: FieldSpec, value):
    # number_input wants value and step of the same type
    value = clamp(spec, value)
    if spec.kind == ENUMERATED:
        return value
    return int(value) if float(spec.step).is_integer() else float(value)
