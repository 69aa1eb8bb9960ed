"""
Calculator Session

This module ties together state, reducer and audit trail for one
user's page session. It is the only stateful object in the system:
it holds the current CalculatorState and swaps it for the reducer's
result on every dispatched action.

DESIGN DECISION: The session enforces the boundaries:
- State only changes through the reducer
- Rejected input leaves the state exactly as it was
- Every transition (and every rejection) is audited

Totals are never stored; summary() recomputes them from the state.
"""

from typing import Optional, Union
from uuid import UUID

from pydantic import ValidationError

from calculatron.audit import AuditLogger, create_correlation_id
from calculatron.calculator.totals import summarize
from calculatron.config.settings import CalculatorSettings, get_settings
from calculatron.errors import InvalidInputError, StateUpdateError
from calculatron.models.actions import (
    Action,
    AddJob,
    CloseJobForm,
    OpenJobForm,
    SetWeeksOff,
    UpdateDraftField,
    UpdateExpenseCost,
    UpdateJobField,
    parse_action,
)
from calculatron.models.audit import AuditEvent
from calculatron.models.state import CalculatorState, IncomeSummary
from calculatron.state import initial_state, reduce


class CalculatorSession:
    """
    Holds one user's calculator state.

    Flow for every interaction:
    1. Widget change -> Action (raw value)
    2. Reducer parses the value and builds the next state
    3. Transition is audited
    4. Page re-renders from state + summary()
    """

    def __init__(
        self,
        state: CalculatorState,
        settings: Optional[CalculatorSettings] = None,
        audit_logger: Optional[AuditLogger] = None,
        session_id: Optional[UUID] = None,
    ):
        self._state = state
        self._settings = settings or get_settings().calculator
        self._audit_logger = audit_logger or AuditLogger()
        self._session_id = session_id or create_correlation_id()

    @property
    def state(self) -> CalculatorState:
        return self._state

    @property
    def settings(self) -> CalculatorSettings:
        return self._settings

    @property
    def session_id(self) -> UUID:
        return self._session_id

    @property
    def events(self) -> list[AuditEvent]:
        """Audit trail of this session, oldest first."""
        return self._audit_logger.events

    def summary(self) -> IncomeSummary:
        """Displayed numbers for the current state."""
        return summarize(self._state)

    def dispatch(self, action: Union[Action, dict]) -> CalculatorState:
        """
        Apply one action and make the result the current state.

        Args:
            action: An Action, or a dict such as
                    {"action": "set_weeks_off", "value": "6"}.

        Returns:
            The new current state.

        Raises:
            InvalidInputError: Raw value or malformed action rejected;
                state unchanged.
            StateUpdateError: Unknown job/expense; state unchanged.
        """
        action_name = (
            str(action.get("action", "unknown"))
            if isinstance(action, dict)
            else action.action
        )

        before = self._state
        try:
            if isinstance(action, dict):
                action = _action_from_dict(action)
            after = reduce(before, action, self._settings)
        except InvalidInputError as e:
            self._audit_logger.log_input_rejected(
                action=action_name,
                field=e.field,
                raw_value=e.raw_value,
                reason=str(e),
                correlation_id=self._session_id,
            )
            raise
        except StateUpdateError as e:
            self._audit_logger.log_error(
                error_type=type(e).__name__,
                error_message=str(e),
                details={"action": action_name},
                correlation_id=self._session_id,
            )
            raise

        self._state = after
        self._audit_transition(before, after, action)
        return after

    def _audit_transition(
        self,
        before: CalculatorState,
        after: CalculatorState,
        action: Action,
    ) -> None:
        audit = self._audit_logger
        session_id = self._session_id

        if isinstance(action, AddJob):
            job = after.jobs[-1]
            audit.log_job_added(
                job_id=job.id,
                kind=job.kind.value,
                rate=job.rate,
                correlation_id=session_id,
            )
        elif isinstance(action, UpdateJobField):
            audit.log_job_updated(
                job_id=action.job_id,
                field=action.field,
                old_value=getattr(before.get_job(action.job_id), action.field),
                new_value=getattr(after.get_job(action.job_id), action.field),
                correlation_id=session_id,
            )
        elif isinstance(action, UpdateExpenseCost):
            audit.log_expense_updated(
                key=action.key,
                old_cost=before.expenses[action.key].cost,
                new_cost=after.expenses[action.key].cost,
                correlation_id=session_id,
            )
        elif isinstance(action, SetWeeksOff):
            audit.log_weeks_off_changed(
                old_value=before.weeks_off,
                new_value=after.weeks_off,
                correlation_id=session_id,
            )
        elif isinstance(action, UpdateDraftField):
            audit.log_draft_updated(
                field=action.field,
                new_value=getattr(after.draft, action.field),
                correlation_id=session_id,
            )
        elif isinstance(action, (OpenJobForm, CloseJobForm)):
            audit.log_job_form_toggled(
                is_open=after.job_form_open,
                correlation_id=session_id,
            )


def _action_from_dict(data: dict) -> Action:
    """parse_action, with validation failures raised as InvalidInputError."""
    try:
        return parse_action(data)
    except ValidationError as e:
        first = e.errors()[0]
        field = ".".join(str(part) for part in first["loc"]) or "action"
        raise InvalidInputError(
            field=field,
            raw_value=data,
            message=f"Malformed action: {first['msg']}",
        ) from e


def create_session(
    settings: Optional[CalculatorSettings] = None,
    audit_logger: Optional[AuditLogger] = None,
) -> CalculatorSession:
    """
    Factory for a fresh session seeded with the sample jobs and expenses.

    Args:
        settings: Calculator settings; defaults to the configured ones.
        audit_logger: Logger to record into; a new local one by default.
    """
    settings = settings or get_settings().calculator
    if audit_logger is None:
        audit_logger = AuditLogger(max_events=get_settings().app.audit_trail_size)

    state = initial_state(settings)
    session = CalculatorSession(
        state=state,
        settings=settings,
        audit_logger=audit_logger,
    )
    audit_logger.log_session_started(
        job_count=len(state.jobs),
        expense_count=len(state.expenses),
        correlation_id=session.session_id,
    )
    return session
