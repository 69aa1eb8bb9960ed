"""Recurring expense model."""

from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class Expense(BaseModel):
    """
    A recurring monthly cost.

    interval is carried for display/future use; the totals ignore it
    and treat every cost as monthly.
    """
    model_config = ConfigDict(frozen=True, str_strip_whitespace=True)

    name: Optional[str] = Field(
        default=None,
        max_length=100,
        description="Display name"
    )
    cost: Decimal = Field(
        ...,
        ge=0,
        description="Cost per month"
    )
    interval: Optional[int] = Field(
        default=None,
        ge=1,
        description="Recurrence interval (not used in totals)"
    )
