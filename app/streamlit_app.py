"""
Dividend Runway — Reinvestment & Withdrawal Calculator
======================================================

Form → projection engine → results view, plus a scenario picker and the
"How it works" page (docs/CALCULATIONS.md).

Run: streamlit run app/streamlit_app.py
"""

from __future__ import annotations

import sys
from datetime import date
from pathlib import Path

import pandas as pd
import streamlit as st

try:
    import altair as alt
    _HAS_ALTAIR = True
except Exception:
    alt = None
    _HAS_ALTAIR = False

# ---------------------------------------------------------------------------
# Make project root importable
# ---------------------------------------------------------------------------
PROJECT_ROOT = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from core.config import CalculatorInputs
from core.errors import InvalidInput
from data_prep.validators import validate_inputs
from engine.runner import run_projection
from pm.decisions import generate_sustainability_report
from pm.metrics import breakdown_to_frame
from scenarios.presets import build_test_scenarios, default_inputs

DOCS_PATH = PROJECT_ROOT / "docs" / "CALCULATIONS.md"
FREQUENCIES = ["weekly", "monthly", "quarterly"]
NO_SCENARIO = "Select a test scenario..."


def _plot_balance(df: pd.DataFrame, height: int = 300):
    if _HAS_ALTAIR:
        chart = (
            alt.Chart(df)
            .mark_line()
            .encode(
                x=alt.X("date:T", title="Month"),
                y=alt.Y("balance:Q", title="Balance ($)"),
                tooltip=["date:T", alt.Tooltip("balance:Q", format=",.2f")],
            )
            .properties(height=height, title="Balance")
        )
        st.altair_chart(chart, use_container_width=True)
    else:
        st.line_chart(df.set_index("date")["balance"], height=height)


def _form(base: CalculatorInputs) -> CalculatorInputs | None:
    with st.form("calculator"):
        left, right = st.columns(2)
        with left:
            st.markdown("**Investment**")
            initial_amount = st.number_input("Initial investment ($)", min_value=0.0, value=float(base.initial_amount))
            stock_price = st.number_input("Share price ($)", min_value=0.0, value=float(base.stock_price))
            annual_div = st.number_input(
                "Annual dividend per share ($)", min_value=0.0, value=float(base.annual_dividend_per_share)
            )
            dividend_frequency = st.selectbox(
                "Dividend frequency", FREQUENCIES,
                index=FREQUENCIES.index(base.dividend_frequency) if base.dividend_frequency in FREQUENCIES else 1,
            )
            reinvest = st.checkbox("Reinvest dividends", value=base.reinvest_dividends)
            initial_date = st.date_input("Initial investment date", value=base.initial_investment_date)
        with right:
            st.markdown("**Withdrawals**")
            withdrawal = st.number_input("Monthly withdrawal ($)", min_value=0.0, value=float(base.withdrawal_amount))
            n_withdrawals = st.number_input(
                "Number of withdrawals", min_value=0, step=1, value=int(base.number_of_withdrawals)
            )
            first_date = st.date_input("First withdrawal date", value=base.first_withdrawal_date)
            st.markdown("**Market assumptions**")
            expense_ratio = st.number_input("Expense ratio (%)", min_value=0.0, value=float(base.expense_ratio))
            price_variance = st.number_input("Price variance (±%)", min_value=0.0, value=float(base.price_variance))
            dividend_variance = st.number_input(
                "Dividend variance (±%)", min_value=0.0, value=float(base.dividend_variance)
            )
        submitted = st.form_submit_button("Calculate Results", use_container_width=True)

    if not submitted:
        return None
    return CalculatorInputs(
        initial_amount=initial_amount,
        stock_price=stock_price,
        annual_dividend_per_share=annual_div,
        dividend_frequency=dividend_frequency,
        withdrawal_amount=withdrawal,
        number_of_withdrawals=int(n_withdrawals),
        reinvest_dividends=reinvest,
        initial_investment_date=initial_date,
        first_withdrawal_date=first_date,
        withdrawal_frequency="monthly",
        price_variance=price_variance,
        dividend_variance=dividend_variance,
        expense_ratio=expense_ratio,
    )


def _display_results(inputs: CalculatorInputs, scenario_name: str):
    try:
        result = run_projection(inputs, validate=True)
    except InvalidInput as exc:
        st.error(validate_inputs(inputs).summary())
        st.caption(str(exc))
        return

    report = generate_sustainability_report(inputs, result, scenario_name=scenario_name)

    st.markdown("### Results")
    c1, c2, c3, c4 = st.columns(4)
    c1.metric("Goal", "Achievable" if result.is_goal_achievable else "Not Achievable")
    c2.metric("Required Dividend Yield", f"{result.required_dividend_yield:.2f}%")
    c3.metric("Total Dividends Earned", f"${result.total_dividends_earned:,.2f}")
    c4.metric("Total Expenses", f"${result.total_expenses:,.2f}")
    if not result.is_goal_achievable:
        st.warning(f"Maximum sustainable monthly withdrawal: ${result.max_monthly_withdrawal:,.2f}")

    df = breakdown_to_frame(result)
    _plot_balance(df)

    with st.expander("Summary", expanded=False):
        st.dataframe(report.to_dataframe(), hide_index=True, use_container_width=True)

    st.markdown("#### Monthly Breakdown")
    st.dataframe(
        df[["date", "shares", "share_price", "dividend_amount", "expense_amount", "withdrawal_amount", "balance"]],
        hide_index=True,
        use_container_width=True,
        column_config={
            "date": st.column_config.DateColumn("Date"),
            "shares": st.column_config.NumberColumn("Shares", format="%.2f"),
            "share_price": st.column_config.NumberColumn("Share Price", format="$%.2f"),
            "dividend_amount": st.column_config.NumberColumn("Dividend", format="$%.2f"),
            "expense_amount": st.column_config.NumberColumn("Expenses", format="$%.2f"),
            "withdrawal_amount": st.column_config.NumberColumn("Withdrawal", format="$%.2f"),
            "balance": st.column_config.NumberColumn("Balance", format="$%.2f"),
        },
    )


def main():
    st.set_page_config(page_title="Dividend Runway", layout="wide")
    st.title("Dividend Reinvestment & Withdrawal Calculator")
    st.caption("Plan your dividend investment strategy and calculate sustainable withdrawal rates")

    tab_calc, tab_docs = st.tabs(["Calculator", "How It Works"])

    with tab_docs:
        if DOCS_PATH.exists():
            st.markdown(DOCS_PATH.read_text(encoding="utf-8"))
        else:
            st.info("Documentation not found.")

    with tab_calc:
        today = date.today()
        scenarios = {s.name: s for s in build_test_scenarios(today)}
        labels = [NO_SCENARIO] + [f"{s.name} - {s.description}" for s in scenarios.values()]
        choice = st.selectbox("Test Scenarios", labels)
        scenario_name = "Custom" if choice == NO_SCENARIO else choice.split(" - ", 1)[0]
        base = default_inputs(today) if scenario_name == "Custom" else scenarios[scenario_name].inputs

        inputs = _form(base)
        if inputs is not None:
            st.session_state["last_run"] = (inputs, scenario_name)

        last = st.session_state.get("last_run")
        if last is not None:
            st.divider()
            _display_results(*last)


if __name__ == "__main__":
    main()
