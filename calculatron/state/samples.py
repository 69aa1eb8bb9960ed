"""Sample data a new session starts with."""

from decimal import Decimal
from typing import Optional

from calculatron.config.settings import CalculatorSettings, get_settings
from calculatron.models.expense import Expense
from calculatron.models.job import Job, JobKind
from calculatron.models.state import CalculatorState


def sample_jobs() -> tuple[Job, ...]:
    return (
        Job(id=1, kind=JobKind.HOURLY, rate=Decimal("140"), weekly_hours=Decimal("20")),
        Job(id=2, kind=JobKind.SALARY, rate=Decimal("120000")),
        Job(id=3, kind=JobKind.PASSIVE, rate=Decimal("300")),
    )


def sample_expenses() -> dict[str, Expense]:
    return {
        "healthcare": Expense(name="Healthcare", cost=Decimal("1200")),
    }


def initial_state(settings: Optional[CalculatorSettings] = None) -> CalculatorState:
    """
    State shown on first page load.

    The id counter starts past the sample ids so added jobs never
    collide with them.
    """
    settings = settings or get_settings().calculator
    jobs = sample_jobs()
    return CalculatorState(
        jobs=jobs,
        expenses=sample_expenses(),
        weeks_off=settings.default_weeks_off,
        next_job_id=max(job.id for job in jobs) + 1,
    )
