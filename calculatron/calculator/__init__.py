"""Income and expense totals."""

from calculatron.calculator.formatting import (
    expense_label,
    format_currency,
    format_number,
    job_label,
)
from calculatron.calculator.totals import (
    MONTHS_PER_YEAR,
    WEEKS_PER_MONTH,
    WEEKS_PER_YEAR,
    annual_salary_total,
    monthly_expense_total,
    monthly_total,
    partition_jobs,
    passive_income_total,
    round_half_up,
    summarize,
    total_weekly_hours,
    weekly_hourly_income,
    weekly_salary_income,
    weekly_total,
    yearly_total,
)

__all__ = [
    # Totals
    "MONTHS_PER_YEAR",
    "WEEKS_PER_MONTH",
    "WEEKS_PER_YEAR",
    "annual_salary_total",
    "monthly_expense_total",
    "monthly_total",
    "partition_jobs",
    "passive_income_total",
    "round_half_up",
    "summarize",
    "total_weekly_hours",
    "weekly_hourly_income",
    "weekly_salary_income",
    "weekly_total",
    "yearly_total",
    # Formatting
    "expense_label",
    "format_currency",
    "format_number",
    "job_label",
]
