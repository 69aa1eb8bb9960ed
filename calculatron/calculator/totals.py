"""
Totals Calculator

Pure, side-effect-free reductions from (jobs, expenses, weeks off) to
the numbers displayed on the page.

UNIT CONVENTION:
- hourly rate x weekly hours = weekly pay
- salary rate is ANNUAL, so weekly salary = rate / 52
- passive income is reported separately and never enters the totals

ROUNDING: half-up to whole currency units at the weekly and monthly
stages only. The yearly total inherits the rounding of the weekly
total and is not rounded again.

No error conditions: missing hours count as zero and negative values
propagate as given.
"""

from decimal import ROUND_FLOOR, Decimal
from typing import Iterable, Mapping, Union

from calculatron.models.expense import Expense
from calculatron.models.job import Job, JobKind
from calculatron.models.state import CalculatorState, IncomeSummary

WEEKS_PER_YEAR = 52
WEEKS_PER_MONTH = 4
MONTHS_PER_YEAR = 12

Number = Union[int, Decimal]

_ZERO = Decimal("0")
_HALF = Decimal("0.5")


def round_half_up(value: Decimal) -> Decimal:
    """Round to a whole number, halves going up (-2.5 -> -2)."""
    return (value + _HALF).to_integral_value(rounding=ROUND_FLOOR)


def partition_jobs(jobs: Iterable[Job]) -> dict[JobKind, list[Job]]:
    """Split jobs by kind, keeping their order. Every kind is present."""
    partitions: dict[JobKind, list[Job]] = {kind: [] for kind in JobKind}
    for job in jobs:
        partitions[job.kind].append(job)
    return partitions


def _of_kind(jobs: Iterable[Job], kind: JobKind) -> list[Job]:
    return [job for job in jobs if job.kind == kind]


def annual_salary_total(jobs: Iterable[Job]) -> Decimal:
    """Sum of salary rates (annual)."""
    return sum((job.rate for job in _of_kind(jobs, JobKind.SALARY)), _ZERO)


def weekly_hourly_income(jobs: Iterable[Job]) -> Decimal:
    """Sum over hourly jobs of rate x weekly hours."""
    return sum(
        (job.rate * job.hours for job in _of_kind(jobs, JobKind.HOURLY)),
        _ZERO,
    )


def weekly_salary_income(jobs: Iterable[Job]) -> Decimal:
    """Annual salary spread over the weeks of a year."""
    return annual_salary_total(jobs) / WEEKS_PER_YEAR


def passive_income_total(jobs: Iterable[Job]) -> Decimal:
    """Sum of passive rates. Tracked only, not part of any income total."""
    return sum((job.rate for job in _of_kind(jobs, JobKind.PASSIVE)), _ZERO)


def weekly_total(jobs: Iterable[Job]) -> Decimal:
    jobs = list(jobs)
    return round_half_up(weekly_hourly_income(jobs) + weekly_salary_income(jobs))


def monthly_total(jobs: Iterable[Job]) -> Decimal:
    jobs = list(jobs)
    return round_half_up(
        weekly_total(jobs) * WEEKS_PER_MONTH
        + annual_salary_total(jobs) / MONTHS_PER_YEAR
    )


def yearly_total(jobs: Iterable[Job], weeks_off: Number) -> Decimal:
    """
    Yearly income with vacation weeks taken out of the paid weeks.

    weeks_off is expected in [0, 52]; the calculator does not enforce it.
    """
    jobs = list(jobs)
    return (
        weekly_total(jobs) * (WEEKS_PER_YEAR - weeks_off)
        + annual_salary_total(jobs)
    )


def total_weekly_hours(jobs: Iterable[Job]) -> Decimal:
    return sum((job.hours for job in _of_kind(jobs, JobKind.HOURLY)), _ZERO)


def monthly_expense_total(expenses: Mapping[str, Expense]) -> Decimal:
    return sum((expense.cost for expense in expenses.values()), _ZERO)


def summarize(state: CalculatorState) -> IncomeSummary:
    """Compute every displayed number from a state snapshot."""
    jobs = list(state.jobs)
    return IncomeSummary(
        total_weekly_hours=total_weekly_hours(jobs),
        weeks_off=state.weeks_off,
        weekly_total=weekly_total(jobs),
        monthly_total=monthly_total(jobs),
        yearly_total=yearly_total(jobs, state.weeks_off),
        monthly_expenses=monthly_expense_total(state.expenses),
        annual_salary_total=annual_salary_total(jobs),
        weekly_hourly_income=weekly_hourly_income(jobs),
        weekly_salary_income=weekly_salary_income(jobs),
        passive_income_total=passive_income_total(jobs),
    )
