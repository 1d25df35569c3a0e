import pytest

from analysis import analyze, approximate_projected_corpus, additional_monthly_needed
from costs import required_corpus, life_events_cost
from simulation import project
from tests.conftest import make_profile, make_event


def test_approximation_uses_midpoint_compounding():
    p = make_profile(salary_increment_rate=0, expense_increment_rate=0, expected_returns=10,
                     current_age=30, retirement_age=40)
    expected = 500_000 * 1.1 ** 10 + (10 * 180_000) * 1.1 ** 5
    assert approximate_projected_corpus(p) == pytest.approx(expected)


def test_approximation_differs_from_year_by_year_engine(profile):
    assert approximate_projected_corpus(profile) != pytest.approx(project(profile)[-1].corpus)


def test_totals_combine_corpus_and_events():
    p = make_profile(life_events=(make_event(target_age=40),))
    gap = analyze(p)
    assert gap.required_corpus == pytest.approx(required_corpus(p))
    assert gap.life_events_cost == pytest.approx(life_events_cost(p))
    assert gap.total_required == pytest.approx(gap.required_corpus + gap.life_events_cost)
    assert gap.shortfall == pytest.approx(gap.total_required - gap.projected_corpus)


def test_shortfall_solves_annuity():
    extra = additional_monthly_needed(1_000_000, 12, 20)
    r, n = 0.01, 240
    assert extra * ((1 + r) ** n - 1) / r == pytest.approx(1_000_000)


def test_shortfall_profile_needs_extra_saving():
    p = make_profile(monthly_income=50_000, monthly_expenses=49_000, current_savings=0,
                     salary_increment_rate=0, expense_increment_rate=0)
    gap = analyze(p)
    assert not gap.is_on_track
    assert gap.shortfall > 0
    assert gap.surplus == 0
    assert gap.additional_monthly_needed == pytest.approx(
        additional_monthly_needed(gap.shortfall, 12, 30))


def test_surplus_profile_is_on_track():
    p = make_profile(current_savings=500_000_000)
    gap = analyze(p)
    assert gap.is_on_track
    assert gap.additional_monthly_needed == 0
    assert gap.surplus == pytest.approx(-gap.shortfall)


def test_zero_return_spreads_gap_evenly():
    assert additional_monthly_needed(120_000, 0, 10) == pytest.approx(1_000)


def test_zero_horizon_needs_whole_gap_now():
    assert additional_monthly_needed(5_000, 12, 0) == 5_000


def test_no_shortfall_needs_nothing():
    assert additional_monthly_needed(0, 12, 10) == 0
    assert additional_monthly_needed(-1, 0, 0) == 0


def test_zero_return_profile_stays_finite():
    gap = analyze(make_profile(expected_returns=0))
    assert gap.additional_monthly_needed == pytest.approx(gap.shortfall / 360)
