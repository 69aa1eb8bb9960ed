"""
State Reducer

Every change to the calculator goes through `reduce(state, action)`,
which returns a NEW state and never touches the one it was given.

GUARANTEES:
- Updating one job field leaves every other job and field untouched,
  and keeps the job order
- Updating one expense cost leaves every other expense untouched
- New job ids come from a monotonic counter, never from the list
  length, so they stay unique whatever happened before
- Raw values are parsed here; rejected input raises and the caller
  keeps its previous state

There is no delete and no undo.
"""

from typing import Optional

from calculatron.config.settings import CalculatorSettings, get_settings
from calculatron.errors import StateUpdateError, UnknownExpenseError, UnknownJobError
from calculatron.models.actions import (
    Action,
    AddJob,
    CloseJobForm,
    OpenJobForm,
    SetWeeksOff,
    UpdateDraftField,
    UpdateExpenseCost,
    UpdateJobField,
)
from calculatron.models.job import Job, JobKind
from calculatron.models.state import CalculatorState
from calculatron.validation.parser import (
    clamp,
    parse_job_kind,
    parse_number,
    parse_whole_number,
)


def reduce(
    state: CalculatorState,
    action: Action,
    settings: Optional[CalculatorSettings] = None,
) -> CalculatorState:
    """
    Apply one action to a state.

    Args:
        state: Current snapshot (not modified).
        action: What the user did, with raw widget values.
        settings: Input ranges; defaults to the configured ones.

    Returns:
        The next state.

    Raises:
        InvalidInputError: Raw value could not be parsed.
        StateUpdateError: Action refers to something that does not exist.
    """
    settings = settings or get_settings().calculator

    if isinstance(action, AddJob):
        return _add_job(state, settings)
    elif isinstance(action, UpdateJobField):
        return _update_job_field(state, action, settings)
    elif isinstance(action, UpdateExpenseCost):
        return _update_expense_cost(state, action, settings)
    elif isinstance(action, SetWeeksOff):
        weeks_off = parse_whole_number(
            action.value, "weeks_off", settings.bounds_for("weeks_off")
        )
        return state.model_copy(update={"weeks_off": weeks_off})
    elif isinstance(action, UpdateDraftField):
        return _update_draft_field(state, action)
    elif isinstance(action, OpenJobForm):
        return state.model_copy(update={"job_form_open": True})
    elif isinstance(action, CloseJobForm):
        return state.model_copy(update={"job_form_open": False})
    else:
        raise StateUpdateError(f"Unsupported action: {type(action).__name__}")


def _add_job(state: CalculatorState, settings: CalculatorSettings) -> CalculatorState:
    """Turn the draft into a job; the draft itself stays as typed."""
    draft = state.draft
    rate = clamp(draft.rate, settings.bounds_for("rate", draft.kind.value))

    weekly_hours = None
    if draft.kind == JobKind.HOURLY and draft.weekly_hours is not None:
        weekly_hours = clamp(draft.weekly_hours, settings.bounds_for("weekly_hours"))

    job = Job(
        id=state.next_job_id,
        kind=draft.kind,
        rate=rate,
        weekly_hours=weekly_hours,
    )
    return state.model_copy(update={
        "jobs": state.jobs + (job,),
        "next_job_id": state.next_job_id + 1,
        "job_form_open": False,
    })


def _find_job_index(state: CalculatorState, job_id: int) -> int:
    for index, job in enumerate(state.jobs):
        if job.id == job_id:
            return index
    raise UnknownJobError(job_id)


def _update_job_field(
    state: CalculatorState,
    action: UpdateJobField,
    settings: CalculatorSettings,
) -> CalculatorState:
    index = _find_job_index(state, action.job_id)
    job = state.jobs[index]

    if action.field == "rate":
        bounds = settings.bounds_for("rate", job.kind.value)
    else:
        bounds = settings.bounds_for("weekly_hours")
    value = parse_number(action.value, action.field, bounds)

    updated = job.model_copy(update={action.field: value})
    jobs = state.jobs[:index] + (updated,) + state.jobs[index + 1:]
    return state.model_copy(update={"jobs": jobs})


def _update_expense_cost(
    state: CalculatorState,
    action: UpdateExpenseCost,
    settings: CalculatorSettings,
) -> CalculatorState:
    if action.key not in state.expenses:
        raise UnknownExpenseError(action.key)

    cost = parse_number(action.value, "cost", settings.bounds_for("cost"))

    # Re-assigning an existing key keeps the display order
    expenses = dict(state.expenses)
    expenses[action.key] = expenses[action.key].model_copy(update={"cost": cost})
    return state.model_copy(update={"expenses": expenses})


def _update_draft_field(
    state: CalculatorState,
    action: UpdateDraftField,
) -> CalculatorState:
    # Range clamping waits until the job is added, when the kind is final
    if action.field == "kind":
        value = parse_job_kind(action.value)
    else:
        value = parse_number(action.value, action.field)
    draft = state.draft.model_copy(update={action.field: value})
    return state.model_copy(update={"draft": draft})
