"""
State Actions

Every user interaction on the page maps to exactly one action.
Actions carry RAW values (whatever the widget produced). Parsing and
clamping happen in the reducer, at the mutation boundary.

DESIGN DECISION: Actions are a discriminated union on the `action`
field so they can be built from plain dicts (e.g. in tests) as well as
constructed directly.
"""

from decimal import Decimal
from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, StrictBool, TypeAdapter

# What a slider / number input / select can hand us. bool is listed so
# True stays True and the parser rejects it, instead of becoming 1.
RawValue = Union[StrictBool, int, float, Decimal, str]


class _Action(BaseModel):
    model_config = ConfigDict(frozen=True)


class AddJob(_Action):
    """Append the draft as a new job."""
    action: Literal["add_job"] = "add_job"


class UpdateJobField(_Action):
    """Change one numeric field of one job."""
    action: Literal["update_job_field"] = "update_job_field"

    job_id: int
    field: Literal["rate", "weekly_hours"]
    value: RawValue


class UpdateExpenseCost(_Action):
    """Change the monthly cost of one expense."""
    action: Literal["update_expense_cost"] = "update_expense_cost"

    key: str
    value: RawValue


class SetWeeksOff(_Action):
    """Change the number of vacation weeks."""
    action: Literal["set_weeks_off"] = "set_weeks_off"

    value: RawValue


class UpdateDraftField(_Action):
    """Change one field of the pending new job."""
    action: Literal["update_draft_field"] = "update_draft_field"

    field: Literal["kind", "rate", "weekly_hours"]
    value: RawValue


class OpenJobForm(_Action):
    action: Literal["open_job_form"] = "open_job_form"


class CloseJobForm(_Action):
    action: Literal["close_job_form"] = "close_job_form"


Action = Annotated[
    Union[
        AddJob,
        UpdateJobField,
        UpdateExpenseCost,
        SetWeeksOff,
        UpdateDraftField,
        OpenJobForm,
        CloseJobForm,
    ],
    Field(discriminator="action"),
]

_action_adapter = TypeAdapter(Action)


def parse_action(data: dict) -> Action:
    """Build an action from a plain dict such as {"action": "add_job"}."""
    return _action_adapter.validate_python(data)
