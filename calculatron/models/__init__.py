"""
Data Models Package

This package contains all Pydantic models used in Income Calculatron.
All data flowing through the system must conform to these schemas.
"""

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
from calculatron.models.audit import (
    AuditEvent,
    AuditEventBuilder,
    AuditEventType,
    AuditSeverity,
)
from calculatron.models.expense import Expense
from calculatron.models.job import Job, JobDraft, JobKind
from calculatron.models.state import CalculatorState, IncomeSummary

__all__ = [
    # Income and expenses
    "Expense",
    "Job",
    "JobDraft",
    "JobKind",
    # State
    "CalculatorState",
    "IncomeSummary",
    # Actions
    "Action",
    "AddJob",
    "CloseJobForm",
    "OpenJobForm",
    "SetWeeksOff",
    "UpdateDraftField",
    "UpdateExpenseCost",
    "UpdateJobField",
    "parse_action",
    # Audit models
    "AuditEvent",
    "AuditEventBuilder",
    "AuditEventType",
    "AuditSeverity",
]
