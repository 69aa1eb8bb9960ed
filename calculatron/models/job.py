"""
Income Source Models

A job is anything that pays: hourly work, an annual salary, or a
passive income stream.

UNIT CONVENTION (must not change):
- hourly: rate is currency per hour, paid for weekly_hours each week
- salary: rate is currency per YEAR
- passive: rate is a flat recurring amount, tracked but never summed
  into the weekly/monthly/yearly income totals

DESIGN DECISION: Models are frozen. The only way to change a job is to
build a new one, which is what the state reducer does.
"""

from decimal import Decimal
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class JobKind(str, Enum):
    """Supported income source kinds."""
    HOURLY = "hourly"
    SALARY = "salary"
    PASSIVE = "passive"


class Job(BaseModel):
    """
    A single income source in the active job list.

    No sign constraint on rate or weekly_hours: the calculator lets
    whatever it is given flow into the totals. Range enforcement happens
    when raw input is parsed.
    """
    model_config = ConfigDict(frozen=True)

    id: int = Field(
        ...,
        description="Identifier, unique within the active job list"
    )
    kind: JobKind = Field(
        ...,
        description="Income source kind"
    )
    rate: Decimal = Field(
        default=Decimal("0"),
        description="Per hour (hourly), per year (salary), flat (passive)"
    )
    weekly_hours: Optional[Decimal] = Field(
        default=None,
        description="Hours worked per week, only meaningful for hourly jobs"
    )

    @property
    def hours(self) -> Decimal:
        """Weekly hours with absence treated as zero."""
        return self.weekly_hours if self.weekly_hours is not None else Decimal("0")


class JobDraft(BaseModel):
    """
    The pending new job behind the "Add job" form.

    Edited one field at a time; turned into a Job (with a fresh id)
    when the user clicks "Add".
    """
    model_config = ConfigDict(frozen=True)

    kind: JobKind = JobKind.HOURLY
    rate: Decimal = Decimal("10")
    weekly_hours: Optional[Decimal] = Decimal("20")
