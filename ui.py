import streamlit as st

from config import CRORE


def inject_css():
    st.markdown(
        "<style>"
        ".card{padding:1rem;border-radius:0.75rem;background:#f8fafc;border:1px solid #e2e8f0}"
        ".kpi{font-size:1.6rem;font-weight:700}"
        ".caption{color:#64748b;font-size:0.85rem}"
        "</style>",
        unsafe_allow_html=True,
    )


def header(title: str, subtitle: str = ""):
    st.markdown(f"## {title}")
    if subtitle:
        st.caption(subtitle)


def helptext(text: str):
    st.caption(text)


def crore(amount: float, symbol: str) -> str:
    return f"{symbol}{amount / CRORE:,.2f} Cr"


def kpi_card(col, caption: str, value: str, note: str = ""):
    extra = f"<div class='caption'>{note}</div>" if note else ""
    col.markdown(
        f"<div class='card'><div class='caption'>{caption}</div>"
        f"<div class='kpi'>{value}</div>{extra}</div>",
        unsafe_allow_html=True,
    )
