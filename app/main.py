"""
Streamlit Frontend for Income Calculatron

One page: sliders for jobs, vacation and expenses on the left,
totals on the right.

DESIGN PRINCIPLES:
1. Widgets only produce actions; the session owns the state
2. Every number shown comes from CalculatorSession.summary()
3. Rejected input shows an error and leaves the state untouched

Run with:  streamlit run app/main.py
"""

import streamlit as st

from calculatron.audit import configure_logging
from calculatron.calculator import expense_label, format_currency, format_number, job_label
from calculatron.config import get_settings, validate_all_settings
from calculatron.errors import CalculatorError
from calculatron.models import (
    AddJob,
    CloseJobForm,
    JobKind,
    OpenJobForm,
    SetWeeksOff,
    UpdateDraftField,
    UpdateExpenseCost,
    UpdateJobField,
)
from calculatron.session import CalculatorSession, create_session


# Page configuration
st.set_page_config(
    page_title="Income Calculator",
    page_icon="💰",
    layout="wide",
)

# Custom CSS for the icon column next to each slider
st.markdown("""
<style>
    .slider-icon {
        font-size: 1.6em;
        padding-top: 0.9em;
        text-align: center;
    }
</style>
""", unsafe_allow_html=True)


@st.cache_resource
def init_logging() -> None:
    """Configure structured logging once per server process."""
    app_settings = get_settings().app
    configure_logging(level=app_settings.log_level, json=app_settings.log_json)


def get_session() -> CalculatorSession:
    """Get or create the calculator session for this browser tab."""
    if "calculator" not in st.session_state:
        st.session_state.calculator = create_session()
    return st.session_state.calculator


def dispatch(action) -> None:
    """Widget callback: apply an action, remembering any rejection."""
    try:
        get_session().dispatch(action)
    except CalculatorError as e:
        st.session_state.calculator_error = str(e)


def on_job_change(job_id: int, field: str, key: str) -> None:
    dispatch(UpdateJobField(job_id=job_id, field=field, value=st.session_state[key]))


def on_expense_change(expense_key: str, key: str) -> None:
    dispatch(UpdateExpenseCost(key=expense_key, value=st.session_state[key]))


def on_draft_change(field: str, key: str) -> None:
    dispatch(UpdateDraftField(field=field, value=st.session_state[key]))


def slider_row(icon: str, **slider_kwargs) -> None:
    """An icon next to a label-less slider."""
    icon_col, slider_col = st.columns([1, 12])
    with icon_col:
        st.markdown(f'<div class="slider-icon">{icon}</div>', unsafe_allow_html=True)
    with slider_col:
        st.slider(label_visibility="collapsed", **slider_kwargs)


def main():
    """Main application entry point."""
    init_logging()
    session = get_session()
    settings = session.settings
    symbol = settings.currency_symbol

    st.title("Income Calculatron")

    error = st.session_state.pop("calculator_error", None)
    if error:
        st.error(f"That value was not applied: {error}")

    inputs_col, totals_col = st.columns([3, 2])

    with inputs_col:
        render_jobs(session, symbol)
        render_weeks_off(session)
        render_expenses(session, symbol)
        render_job_form(session)

    with totals_col:
        render_totals(session, symbol)

    render_sidebar(session)


def render_jobs(session: CalculatorSession, symbol: str) -> None:
    """Salary sliders first, then hourly, then passive (read-only)."""
    state = session.state
    settings = session.settings

    for job in state.jobs:
        if job.kind != JobKind.SALARY:
            continue
        bounds = settings.bounds_for("rate", job.kind.value)
        st.markdown(f"**{job_label(job, symbol)}**")
        slider_row(
            "💰",
            label=f"Salary job {job.id} rate",
            min_value=float(bounds.minimum),
            max_value=float(bounds.maximum),
            step=float(bounds.step),
            value=float(job.rate),
            key=f"job_{job.id}_rate",
            on_change=on_job_change,
            args=(job.id, "rate", f"job_{job.id}_rate"),
        )

    for job in state.jobs:
        if job.kind != JobKind.HOURLY:
            continue
        hours_bounds = settings.bounds_for("weekly_hours")
        rate_bounds = settings.bounds_for("rate", job.kind.value)
        st.markdown(f"**{job_label(job, symbol)}**")
        slider_row(
            "⏰",
            label=f"Hourly job {job.id} weekly hours",
            min_value=float(hours_bounds.minimum),
            max_value=float(hours_bounds.maximum),
            step=float(hours_bounds.step),
            value=float(job.hours),
            key=f"job_{job.id}_weekly_hours",
            on_change=on_job_change,
            args=(job.id, "weekly_hours", f"job_{job.id}_weekly_hours"),
        )
        slider_row(
            "💰",
            label=f"Hourly job {job.id} rate",
            min_value=float(rate_bounds.minimum),
            max_value=float(rate_bounds.maximum),
            step=float(rate_bounds.step),
            value=float(job.rate),
            key=f"job_{job.id}_rate",
            on_change=on_job_change,
            args=(job.id, "rate", f"job_{job.id}_rate"),
        )

    passive = [job for job in state.jobs if job.kind == JobKind.PASSIVE]
    if passive:
        st.caption(
            "Passive income (tracked, not included in totals): "
            + ", ".join(format_currency(job.rate, symbol) for job in passive)
        )


def render_weeks_off(session: CalculatorSession) -> None:
    bounds = session.settings.bounds_for("weeks_off")
    st.markdown(f"**Weeks Off ({session.state.weeks_off})**")
    slider_row(
        "🌴",
        label="Weeks off",
        min_value=bounds.minimum,
        max_value=bounds.maximum,
        value=session.state.weeks_off,
        key="weeks_off",
        on_change=lambda: dispatch(SetWeeksOff(value=st.session_state["weeks_off"])),
    )


def render_expenses(session: CalculatorSession, symbol: str) -> None:
    bounds = session.settings.bounds_for("cost")
    for key, expense in session.state.expenses.items():
        st.markdown(f"**{expense_label(key, expense, symbol)}**")
        slider_row(
            "💸",
            label=f"{key} cost",
            min_value=float(bounds.minimum),
            max_value=float(bounds.maximum),
            step=float(bounds.step),
            value=float(expense.cost),
            key=f"expense_{key}",
            on_change=on_expense_change,
            args=(key, f"expense_{key}"),
        )


def render_job_form(session: CalculatorSession) -> None:
    """The "Add job" button reveals a small form for the draft job."""
    state = session.state

    if not state.job_form_open:
        st.button("Add job", type="primary", on_click=dispatch, args=(OpenJobForm(),))
        return

    draft = state.draft
    kinds = [kind.value for kind in JobKind]

    st.markdown("---")
    st.selectbox(
        "Job Type",
        options=kinds,
        index=kinds.index(draft.kind.value),
        key="draft_kind",
        on_change=on_draft_change,
        args=("kind", "draft_kind"),
    )
    st.number_input(
        "Hourly Rate / Salary",
        min_value=0.0,
        value=float(draft.rate),
        key="draft_rate",
        on_change=on_draft_change,
        args=("rate", "draft_rate"),
    )
    st.number_input(
        "Weekly Hours",
        min_value=0.0,
        value=float(draft.weekly_hours or 0),
        key="draft_weekly_hours",
        on_change=on_draft_change,
        args=("weekly_hours", "draft_weekly_hours"),
    )

    add_col, cancel_col = st.columns(2)
    with add_col:
        st.button("Add", type="primary", on_click=dispatch, args=(AddJob(),))
    with cancel_col:
        st.button("Cancel", on_click=dispatch, args=(CloseJobForm(),))


def render_totals(session: CalculatorSession, symbol: str) -> None:
    summary = session.summary()

    hours_col, vacation_col = st.columns(2)
    hours_col.metric("⏰ Total hours/week", format_number(summary.total_weekly_hours))
    vacation_col.metric("🌴 Vacation (weeks)", summary.weeks_off)

    st.markdown("---")

    weekly_col, monthly_col = st.columns(2)
    weekly_col.metric("Weekly income", format_currency(summary.weekly_total, symbol))
    monthly_col.metric("Monthly income", format_currency(summary.monthly_total, symbol))

    yearly_col, expenses_col = st.columns(2)
    yearly_col.metric("Yearly income", format_currency(summary.yearly_total, symbol))
    expenses_col.metric("Monthly expenses", format_currency(summary.monthly_expenses, symbol))

    st.metric("Monthly net", format_currency(summary.monthly_net, symbol))

    with st.expander("Breakdown"):
        st.markdown(f"""
        - Hourly pay per week: {format_currency(summary.weekly_hourly_income, symbol)}
        - Salary per week: {format_currency(summary.weekly_salary_income, symbol)}
        - Salaries per year: {format_currency(summary.annual_salary_total, symbol, grouped=True)}
        - Passive income (not in totals): {format_currency(summary.passive_income_total, symbol)}
        """)


def render_sidebar(session: CalculatorSession) -> None:
    st.sidebar.title("💰 Income Calculatron")
    st.sidebar.markdown(
        """
        **How to use:**
        1. Drag the sliders
        2. Add jobs with the "Add job" button
        3. Read your totals on the right

        Nothing is saved: reloading the page starts over.
        """
    )

    with st.sidebar.expander("Activity"):
        events = session.events
        if not events:
            st.caption("No activity yet")
        for event in reversed(events[-20:]):
            st.caption(f"{event.timestamp:%H:%M:%S} {event.description}")

    with st.sidebar.expander("Configuration"):
        status = validate_all_settings()
        for name in ("app", "calculator"):
            if status.get(name, False):
                st.success(f"✅ {name} settings loaded")
            else:
                st.error(f"❌ {name} settings - {status.get(f'{name}_error', 'invalid')}")


if __name__ == "__main__":
    main()
