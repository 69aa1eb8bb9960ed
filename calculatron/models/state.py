"""
Application State Models

CalculatorState is the whole model behind the page. It is replaced,
never mutated: every user interaction produces a new state via the
reducer in calculatron.state.

IncomeSummary is the derived view. It has no lifecycle of its own and
is recomputed from the state on every read.
"""

from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator

from calculatron.models.expense import Expense
from calculatron.models.job import Job, JobDraft


class CalculatorState(BaseModel):
    """
    Snapshot of one user's calculator session.

    INVARIANTS:
    - job ids are unique within `jobs`
    - next_job_id is greater than every id in `jobs`, so ids handed out
      by the counter never collide
    """
    model_config = ConfigDict(frozen=True)

    jobs: tuple[Job, ...] = Field(
        default_factory=tuple,
        description="Active income sources, in display order"
    )
    expenses: dict[str, Expense] = Field(
        default_factory=dict,
        description="Expenses by key, in display order"
    )
    weeks_off: int = Field(
        default=4,
        description="Vacation weeks per year"
    )
    next_job_id: int = Field(
        default=1,
        ge=1,
        description="Next identifier the add-job action hands out"
    )
    draft: JobDraft = Field(
        default_factory=JobDraft,
        description="Pending new job behind the add-job form"
    )
    job_form_open: bool = Field(
        default=False,
        description="Is the add-job form revealed?"
    )

    @model_validator(mode='after')
    def validate_job_ids(self) -> 'CalculatorState':
        """Job ids must be unique and below the id counter."""
        ids = [job.id for job in self.jobs]
        if len(ids) != len(set(ids)):
            raise ValueError("Job ids must be unique")
        if ids and max(ids) >= self.next_job_id:
            raise ValueError("next_job_id must be greater than every job id")
        return self

    def get_job(self, job_id: int) -> Optional[Job]:
        """Find a job by id."""
        for job in self.jobs:
            if job.id == job_id:
                return job
        return None


class IncomeSummary(BaseModel):
    """Numbers displayed on the page."""
    model_config = ConfigDict(frozen=True)

    total_weekly_hours: Decimal
    weeks_off: int
    weekly_total: Decimal
    monthly_total: Decimal
    yearly_total: Decimal
    monthly_expenses: Decimal

    # Breakdown
    annual_salary_total: Decimal
    weekly_hourly_income: Decimal
    weekly_salary_income: Decimal
    passive_income_total: Decimal

    @property
    def monthly_net(self) -> Decimal:
        """Monthly income left after monthly expenses."""
        return self.monthly_total - self.monthly_expenses
