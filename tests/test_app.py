from pathlib import Path

import pytest
from streamlit.testing.v1 import AppTest

from finances import profile_from_dict

APP = str(Path(__file__).resolve().parent.parent / "app.py")


@pytest.fixture
def app():
    at = AppTest.from_file(APP, default_timeout=30)
    at.run()
    assert not at.exception
    return at


def test_loaded_profile_fills_the_form(app):
    app.session_state["pending_profile"] = profile_from_dict(
        {"current_age": 40, "monthly_income": 90_000, "country": "US"})
    app.run()
    assert not app.exception
    p = app.session_state["profile"]
    assert (p.current_age, p.monthly_income, p.country) == (40, 90_000, "US")
    assert app.number_input(key="f_current_age").value == 40
    assert app.number_input(key="f_monthly_income").value == 90_000
    assert app.selectbox(key="f_country").value == "US"


def test_country_switch_resets_rates(app):
    app.selectbox(key="f_country").select("US").run()
    assert not app.exception
    p = app.session_state["profile"]
    assert (p.country, p.expected_inflation, p.expected_returns) == ("US", 3.0, 10.0)
    assert app.number_input(key="f_expected_returns").value == 10.0
