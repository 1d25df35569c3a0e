# app.py
import json
from dataclasses import replace

import streamlit as st
import plotly.graph_objects as go

from config import APP_NAME, configure_logging
from ui import inject_css, header, helptext, crore, kpi_card
from countries import country_or_default
from fields import FIELD_GROUPS, RECURRING_YEARS, ENUMERATED, all_fields, clamp, widget_value
from finances import (
    ProfileError, default_profile, validate_profile, with_country,
    add_life_event, update_life_event, remove_life_event, profile_from_dict,
)
from life_events import COMMON_LIFE_EVENTS
from costs import corpus_breakdown, naive_life_events_total, project_event_costs
from simulation import project, projection_frame, milestones, summarize
from analysis import analyze
from strategies import STRATEGIES, allocate, post_tax_projected_corpus
from scenarios import compare, standard_variants
from exporters import export_projection, export_profile
from taxes import net_income

configure_logging()

# ------------- Page setup -------------
st.set_page_config(page_title=APP_NAME, page_icon="📈", layout="wide")
inject_css()
header(APP_NAME, "Plan retirement around the big moments in life.")


def sync_form(p):
    """Write a profile into the sidebar widget keys (widgets read from session state)."""
    for spec in all_fields():
        st.session_state[f"f_{spec.key}"] = widget_value(spec, getattr(p, spec.key))
    for e in p.life_events:
        for prefix in ("age", "cost", "rec"):
            st.session_state.pop(f"{prefix}_{e.id}", None)


def on_country_change():
    p = with_country(st.session_state.profile, st.session_state.f_country)
    st.session_state.profile = p
    st.session_state.f_expected_inflation = widget_value(field_index["expected_inflation"], p.expected_inflation)
    st.session_state.f_expected_returns = widget_value(field_index["expected_returns"], p.expected_returns)


field_index = {spec.key: spec for spec in all_fields()}

# The UI owns the editable copy; the engine only sees snapshots of it
if "profile" not in st.session_state:
    st.session_state.profile = default_profile()

uploaded = st.sidebar.file_uploader("Load a saved profile (JSON)", type="json")
if uploaded is not None and st.session_state.get("loaded_name") != uploaded.name:
    st.session_state.pending_profile = profile_from_dict(json.load(uploaded))
    st.session_state.loaded_name = uploaded.name

if "pending_profile" in st.session_state:
    st.session_state.profile = st.session_state.pop("pending_profile")
    sync_form(st.session_state.profile)

profile = st.session_state.profile
country = country_or_default(profile.country)
symbol = country.symbol

# ------------- Sidebar (inputs, driven by fields.py) -------------
values = {}
for group in FIELD_GROUPS:
    st.sidebar.header(group.title)
    for spec in group.fields:
        key = f"f_{spec.key}"
        if key not in st.session_state:
            st.session_state[key] = widget_value(spec, getattr(profile, spec.key))
        if spec.kind == ENUMERATED:
            labels = dict(spec.options)
            values[spec.key] = st.sidebar.selectbox(
                spec.label, list(labels), format_func=labels.get,
                help=spec.help or None, key=key,
                on_change=on_country_change if spec.key == "country" else None,
            )
        else:
            unit = symbol if spec.currency else spec.unit
            cast = int if float(spec.step).is_integer() else float
            values[spec.key] = st.sidebar.number_input(
                f"{spec.label} ({unit})" if unit else spec.label,
                min_value=None if spec.minimum is None else cast(spec.minimum),
                max_value=None if spec.maximum is None else cast(spec.maximum),
                step=cast(spec.step), help=spec.help or None, key=key,
            )

profile = replace(profile, **values)

# ------------- Life events -------------
st.markdown("### 1) Life events")
helptext("Pick the big expenses you expect before retiring. Costs are in today's money.")

cols = st.columns(3)
for i, template in enumerate(COMMON_LIFE_EVENTS):
    if cols[i % 3].button(f"➕ {template.name}", key=f"add_{template.name}", use_container_width=True):
        profile = add_life_event(profile, template)

for event in profile.life_events:
    c1, c2, c3, c4 = st.columns([3, 2, 2, 1])
    c1.markdown(f"**{event.name}**  \n{event.category} • {event.priority} priority")
    age = c2.number_input("Target age", min_value=profile.current_age,
                          max_value=max(profile.current_age, profile.retirement_age),
                          value=min(max(event.target_age, profile.current_age),
                                    max(profile.current_age, profile.retirement_age)),
                          key=f"age_{event.id}")
    cost_label = f"Cost ({symbol})" + (" per year" if event.is_recurring else "")
    cost = c3.number_input(cost_label, min_value=0.0, value=float(event.estimated_cost),
                           step=1000.0, key=f"cost_{event.id}")
    changes = {"target_age": int(age), "estimated_cost": float(cost)}
    if event.is_recurring:
        changes["recurring_years"] = int(c2.number_input(
            f"{RECURRING_YEARS.label} ({RECURRING_YEARS.unit})",
            min_value=int(RECURRING_YEARS.minimum), max_value=int(RECURRING_YEARS.maximum),
            value=int(clamp(RECURRING_YEARS, event.recurring_years or 1)), key=f"rec_{event.id}"))
    profile = update_life_event(profile, event.id, **changes)
    if c4.button("🗑️", key=f"del_{event.id}"):
        profile = remove_life_event(profile, event.id)

if profile.life_events:
    st.caption(f"Total life events cost (today's prices): {symbol}{naive_life_events_total(profile):,.0f}")

st.session_state.profile = profile

try:
    validate_profile(profile)
except ProfileError as e:
    for problem in e.problems:
        st.error(problem)
    st.stop()

tab_plan, tab_proj, tab_strat = st.tabs(["Retirement plan", "Projections", "Investment strategies"])

# ------------- Retirement plan -------------
with tab_plan:
    gap = analyze(profile)
    k = st.columns(4)
    kpi_card(k[0], "Required retirement corpus", crore(gap.required_corpus, symbol), "Amount needed at retirement")
    kpi_card(k[1], "Life events cost", crore(gap.life_events_cost, symbol), "Major expenses planned")
    kpi_card(k[2], "Projected corpus", crore(gap.projected_corpus, symbol), "Based on current savings rate")
    kpi_card(k[3], "Current monthly savings", f"{symbol}{profile.monthly_savings:,.0f}", "Available for investments")
    st.caption(
        f"Take-home income at a flat {country.tax_rates.income:.0f}% income tax: "
        f"{symbol}{net_income(profile.monthly_income, country):,.0f}/month"
    )

    if gap.is_on_track:
        st.success(f"You're on track! Projected surplus of {crore(gap.surplus, symbol)}.")
    else:
        st.warning(
            f"Shortfall of {crore(gap.shortfall, symbol)}. Invest an extra "
            f"{symbol}{gap.additional_monthly_needed:,.0f} per month to close the gap."
        )

    with st.expander("Detailed breakdown"):
        b = corpus_breakdown(profile)
        st.write({
            "Monthly expenses in retirement (today)": f"{symbol}{b['monthly_expenses_today']:,.0f}",
            "Monthly expenses at retirement (inflated)": f"{symbol}{b['monthly_expenses_at_retirement']:,.0f}",
            "Annual expenses at retirement": f"{symbol}{b['annual_expenses_at_retirement']:,.0f}",
            "Years to retirement": profile.years_to_retirement,
        })
        if profile.life_events:
            st.dataframe(project_event_costs(profile).drop(columns=["id"]), use_container_width=True)

    st.markdown("#### Quick what-ifs")
    a, b2, c = st.columns(3)
    more_saving = a.slider(f"Save more each month ({symbol})", 0, 50_000, 5_000, 1_000)
    retire_later = b2.slider("Retire later (years)", 0, 10, 2, 1)
    cut_target = c.slider("Need less income in retirement (%)", 0, 50, 10, 5)
    results = compare(profile, standard_variants(profile, more_saving, retire_later, cut_target))
    st.dataframe(
        {name: {"Shortfall": f"{symbol}{r.shortfall:,.0f}",
                "On track": "Yes" if r.is_on_track else "No",
                "Extra per month": f"{symbol}{r.additional_monthly_needed:,.0f}"}
         for name, r in results.items()},
        use_container_width=True,
    )

# ------------- Projections -------------
with tab_proj:
    projections = project(profile)
    frame = projection_frame(profile)
    s = summarize(projections)
    k = st.columns(3)
    kpi_card(k[0], "Corpus at retirement", crore(s["final_corpus"], symbol))
    kpi_card(k[1], "Peak corpus", crore(s["peak_corpus"], symbol))
    kpi_card(k[2], "Life events paid", crore(s["life_events_paid"], symbol))

    figW = go.Figure()
    figW.add_trace(go.Scatter(x=frame["age"], y=frame["corpus"], mode="lines", name="Corpus"))
    figW.add_trace(go.Scatter(x=frame["age"], y=frame["total_invested"], mode="lines",
                              name="Total invested", line=dict(dash="dot")))
    figW.add_trace(go.Bar(x=frame["age"], y=frame["life_events_cost"], name="Life events", opacity=0.5))
    figW.update_layout(
        title="Wealth growth", xaxis_title="Age", yaxis_title=f"{country.currency}",
        hovermode="x unified", margin=dict(l=30, r=20, t=60, b=30)
    )
    st.plotly_chart(figW, use_container_width=True)

    st.markdown("#### Milestones")
    for m in milestones(projections):
        if m["achieved"]:
            st.write(f"✅ {symbol}{m['label']} at age {m['age']} (year {m['year']})")
        else:
            st.write(f"⏳ {symbol}{m['label']} not reached before retirement")

    st.markdown("#### Year by year")
    st.dataframe(frame, use_container_width=True)
    name_csv, data_csv = export_projection(frame)
    st.download_button("⬇️ Download projection (CSV)", data_csv, file_name=name_csv, mime="text/csv")

# ------------- Investment strategies -------------
with tab_strat:
    choice = st.radio(
        "Strategy", list(STRATEGIES.keys()), index=1, horizontal=True,
        format_func=lambda key: STRATEGIES[key]["title"],
    )
    result = allocate(profile, choice)
    st.caption(f"{STRATEGIES[result.strategy]['subtitle']} • {result.suitability}")

    figA = go.Figure(go.Pie(labels=[o.name for o in result.options],
                            values=[o.allocation_percent for o in result.options], hole=0.4))
    figA.update_layout(title="Asset allocation", margin=dict(l=30, r=20, t=60, b=30))
    st.plotly_chart(figA, use_container_width=True)

    for o in result.options:
        st.write(f"**{o.name}**: {o.allocation_percent:.0f}% • {o.expected_return:.1f}% p.a. • "
                 f"{o.risk} risk  \n{o.description}. _{o.tax_implications}._")

    k = st.columns(3)
    kpi_card(k[0], "Weighted return", f"{result.weighted_return:.2f}% p.a.")
    kpi_card(k[1], "Projected corpus", crore(result.projected_corpus, symbol))
    kpi_card(k[2], "After capital-gains tax", crore(post_tax_projected_corpus(result, profile), symbol),
             f"Income tax {country.tax_rates.income:.0f}% • Capital gains {country.tax_rates.capital_gains:.0f}%")

# ------------- Export -------------
st.markdown("---")
name_cfg, data_cfg = export_profile(profile)
st.download_button("⬇️ Download your profile (JSON)", data_cfg, file_name=name_cfg, mime="application/json")
st.caption("Deterministic projections with flat illustrative tax rates. It's a planning tool, not personal advice.")
