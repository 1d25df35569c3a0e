import pytest

from simulation import project, projection_frame, milestones, summarize
from tests.conftest import make_profile, make_event


@pytest.mark.parametrize("current_age,retirement_age", [(30, 60), (40, 41), (55, 55)])
def test_one_record_per_year_inclusive(current_age, retirement_age):
    rows = project(make_profile(current_age=current_age, retirement_age=retirement_age))
    n = retirement_age - current_age
    assert len(rows) == n + 1
    assert [r.year for r in rows] == list(range(n + 1))
    assert [r.age for r in rows] == list(range(current_age, retirement_age + 1))


def test_year_zero_is_todays_position(profile):
    first = project(profile)[0]
    assert first.corpus == profile.current_savings
    assert first.total_invested == profile.current_savings
    assert first.annual_income == 50_000 * 12
    assert first.annual_expenses == 35_000 * 12
    assert first.annual_savings == 15_000 * 12
    assert first.life_events_cost == 0


def test_scenario_year_one_corpus_without_returns():
    p = make_profile(salary_increment_rate=0, expense_increment_rate=0, expected_returns=0)
    assert project(p)[1].corpus == pytest.approx(680_000)


def test_flat_savings_are_constant(flat_profile):
    rows = project(flat_profile)
    assert {r.annual_savings for r in rows[1:]} == {50_000 * 12 - 35_000 * 12}
    assert all(r.life_events_cost == 0 for r in rows)


def test_return_is_simple_annual_on_prior_balance():
    p = make_profile(monthly_income=0, monthly_expenses=0, current_savings=1000,
                     expected_returns=10, retirement_age=32)
    rows = project(p)
    assert rows[1].corpus == pytest.approx(1100)
    assert rows[2].corpus == pytest.approx(1210)


def test_growth_rates_apply_per_year():
    p = make_profile(salary_increment_rate=10, expense_increment_rate=5)
    r = project(p)[2]
    assert r.annual_income == pytest.approx(600_000 * 1.1 ** 2)
    assert r.annual_expenses == pytest.approx(420_000 * 1.05 ** 2)
    assert r.annual_savings == pytest.approx(r.annual_income - r.annual_expenses)


def test_life_event_deducted_at_raw_cost():
    p = make_profile(salary_increment_rate=0, expense_increment_rate=0, expected_returns=0,
                     expected_inflation=10,
                     life_events=(make_event(target_age=32, estimated_cost=100_000),))
    rows = project(p)
    assert rows[2].life_events_cost == 100_000
    assert rows[2].corpus == pytest.approx(500_000 + 2 * 180_000 - 100_000)
    assert rows[1].life_events_cost == 0


def test_events_in_same_year_add_up():
    events = (make_event(id="a", target_age=33, estimated_cost=10),
              make_event(id="b", target_age=33, estimated_cost=15))
    rows = project(make_profile(life_events=events))
    assert rows[3].life_events_cost == 25


def test_events_outside_horizon_never_deduct():
    events = (make_event(id="late", target_age=70, estimated_cost=1e9),
              make_event(id="now", target_age=30, estimated_cost=1e9))
    rows = project(make_profile(life_events=events))
    assert sum(r.life_events_cost for r in rows) == 0


def test_corpus_floors_at_zero_without_debt():
    p = make_profile(salary_increment_rate=0, expense_increment_rate=0, expected_returns=0,
                     current_savings=0,
                     life_events=(make_event(target_age=31, estimated_cost=10_000_000),))
    rows = project(p)
    assert rows[1].corpus == 0
    assert rows[1].net_worth == 0
    # next year starts fresh from zero
    assert rows[2].corpus == pytest.approx(180_000)
    # invested keeps counting savings
    assert rows[2].total_invested == pytest.approx(2 * 180_000)
    assert all(r.corpus >= 0 for r in rows)


def test_negative_savings_never_push_corpus_below_zero():
    p = make_profile(monthly_income=10_000, monthly_expenses=50_000, current_savings=100_000)
    assert all(r.corpus >= 0 for r in project(p))


def test_projection_is_idempotent():
    p = make_profile(life_events=(make_event(),))
    assert project(p) == project(p)


def test_frame_matches_records(profile):
    df = projection_frame(profile)
    rows = project(profile)
    assert len(df) == len(rows)
    assert list(df.columns[:3]) == ["year", "age", "corpus"]
    assert df["corpus"].iloc[-1] == pytest.approx(rows[-1].corpus)


def test_milestones_first_hit(flat_profile):
    rows = project(flat_profile)  # 500k + 180k per year
    result = milestones(rows, {"1M": 1_000_000, "huge": 1e12})
    assert result[0]["achieved"] and result[0]["year"] == 3 and result[0]["age"] == 33
    assert result[1] == {"label": "huge", "amount": 1e12, "achieved": False, "year": None, "age": None}


def test_summary(flat_profile):
    s = summarize(project(flat_profile))
    assert s["final_corpus"] == pytest.approx(500_000 + 30 * 180_000)
    assert s["peak_corpus"] == s["final_corpus"]
    assert s["life_events_paid"] == 0
    assert summarize([])["final_corpus"] == 0.0
