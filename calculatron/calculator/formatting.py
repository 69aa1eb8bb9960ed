"""Display helpers for numbers, money and widget labels."""

from decimal import Decimal
from typing import Union

from calculatron.models.expense import Expense
from calculatron.models.job import Job, JobKind


def format_number(value: Union[int, Decimal], grouped: bool = False) -> str:
    """
    Whole numbers without decimals, everything else with two.

    >>> format_number(Decimal("5108"))
    '5108'
    >>> format_number(Decimal("120000"), grouped=True)
    '120,000'
    >>> format_number(Decimal("2307.6923"))
    '2307.69'
    """
    value = Decimal(value)
    if value == value.to_integral_value():
        whole = int(value)
        return f"{whole:,}" if grouped else str(whole)
    return f"{value:,.2f}" if grouped else f"{value:.2f}"


def format_currency(
    value: Union[int, Decimal],
    symbol: str = "$",
    grouped: bool = False,
) -> str:
    """Prefix a number with the currency symbol, sign first."""
    text = format_number(value, grouped=grouped)
    if text.startswith("-"):
        return f"-{symbol}{text[1:]}"
    return f"{symbol}{text}"


def job_label(job: Job, symbol: str = "$") -> str:
    """Slider label for a job."""
    if job.kind == JobKind.SALARY:
        return f"Salary job ({format_currency(job.rate, symbol, grouped=True)})"
    if job.kind == JobKind.HOURLY:
        return (
            f"Hourly job ({format_number(job.hours)} hours/wk "
            f"@ {format_currency(job.rate, symbol)}/hr)"
        )
    return f"Passive income ({format_currency(job.rate, symbol)})"


def expense_label(key: str, expense: Expense, symbol: str = "$") -> str:
    """Slider label for an expense, falling back to its key."""
    name = expense.name or key
    return f"{name} ({format_currency(expense.cost, symbol)}/mo)"
