"""
Audit Models for Income Calculatron

Every state transition in a session is recorded as an audit event.
This provides:
1. A readable history of what the user changed
2. Debugging information when a total looks wrong
3. Visibility of rejected input

DESIGN DECISION: The audit trail is append-only. Events are never
modified after creation.
"""

from datetime import datetime, timezone
from enum import Enum
from typing import Any, Optional
from uuid import UUID, uuid4

from pydantic import BaseModel, Field


class AuditEventType(str, Enum):
    """Types of events we audit."""
    # Session
    SESSION_STARTED = "session_started"

    # Jobs
    JOB_ADDED = "job_added"
    JOB_UPDATED = "job_updated"

    # Expenses
    EXPENSE_UPDATED = "expense_updated"

    # Vacation
    WEEKS_OFF_CHANGED = "weeks_off_changed"

    # Add-job form
    DRAFT_UPDATED = "draft_updated"
    JOB_FORM_OPENED = "job_form_opened"
    JOB_FORM_CLOSED = "job_form_closed"

    # Problems
    INPUT_REJECTED = "input_rejected"
    SYSTEM_ERROR = "system_error"


class AuditSeverity(str, Enum):
    """Severity level for audit events."""
    DEBUG = "debug"
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class AuditEvent(BaseModel):
    """
    A single audit event.

    This is the core unit of our audit trail.
    Every state transition creates one of these.
    """

    # Identity
    event_id: UUID = Field(
        default_factory=uuid4,
        description="Unique event identifier"
    )
    timestamp: datetime = Field(
        default_factory=_utcnow,
        description="When the event occurred (UTC)"
    )

    # Event classification
    event_type: AuditEventType = Field(
        ...,
        description="Type of event"
    )
    severity: AuditSeverity = Field(
        default=AuditSeverity.INFO,
        description="Event severity"
    )

    # Context - what entity is this about?
    entity_type: Optional[str] = Field(
        default=None,
        description="Type of entity (e.g., 'job', 'expense', 'session')"
    )
    entity_id: Optional[str] = Field(
        default=None,
        description="Job id or expense key this event relates to"
    )

    # Correlation - all events of one session share this
    correlation_id: Optional[UUID] = Field(
        default=None,
        description="Session identifier"
    )

    description: str = Field(
        ...,
        max_length=500,
        description="Human-readable description of what happened"
    )
    details: dict[str, Any] = Field(
        default_factory=dict,
        description="Additional event-specific data"
    )

    error_message: Optional[str] = None

    is_user_action: bool = Field(
        default=True,
        description="Was this triggered by a user action?"
    )

    def to_log_dict(self) -> dict:
        """
        Convert to a dictionary suitable for structured logging.
        """
        return {
            "event_id": str(self.event_id),
            "timestamp": self.timestamp.isoformat(),
            "event_type": self.event_type.value,
            "severity": self.severity.value,
            "entity_type": self.entity_type,
            "entity_id": self.entity_id,
            "correlation_id": str(self.correlation_id) if self.correlation_id else None,
            "description": self.description,
            "details": self.details,
            "error_message": self.error_message,
            "is_user_action": self.is_user_action,
        }


class AuditEventBuilder:
    """
    Helper class to build audit events with common patterns.

    Usage:
        event = AuditEventBuilder.job_added(job_id, kind, rate, correlation_id)
        event = AuditEventBuilder.weeks_off_changed(4, 6, correlation_id)
    """

    @staticmethod
    def session_started(
        job_count: int,
        expense_count: int,
        correlation_id: UUID
    ) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.SESSION_STARTED,
            entity_type="session",
            entity_id=str(correlation_id),
            correlation_id=correlation_id,
            description=f"Session started with {job_count} jobs and {expense_count} expenses",
            details={
                "job_count": job_count,
                "expense_count": expense_count,
            },
            is_user_action=False,
        )

    @staticmethod
    def job_added(
        job_id: int,
        kind: str,
        rate: str,
        correlation_id: UUID
    ) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.JOB_ADDED,
            entity_type="job",
            entity_id=str(job_id),
            correlation_id=correlation_id,
            description=f"Added {kind} job #{job_id}",
            details={
                "kind": kind,
                "rate": rate,
            },
        )

    @staticmethod
    def job_updated(
        job_id: int,
        field: str,
        old_value: Optional[str],
        new_value: Optional[str],
        correlation_id: UUID
    ) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.JOB_UPDATED,
            entity_type="job",
            entity_id=str(job_id),
            correlation_id=correlation_id,
            description=f"Job #{job_id} {field} changed",
            details={
                "field": field,
                "old_value": old_value,
                "new_value": new_value,
            },
        )

    @staticmethod
    def expense_updated(
        key: str,
        old_cost: str,
        new_cost: str,
        correlation_id: UUID
    ) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.EXPENSE_UPDATED,
            entity_type="expense",
            entity_id=key,
            correlation_id=correlation_id,
            description=f"Expense '{key}' cost changed",
            details={
                "old_cost": old_cost,
                "new_cost": new_cost,
            },
        )

    @staticmethod
    def weeks_off_changed(
        old_value: int,
        new_value: int,
        correlation_id: UUID
    ) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.WEEKS_OFF_CHANGED,
            entity_type="session",
            entity_id=str(correlation_id),
            correlation_id=correlation_id,
            description=f"Weeks off changed from {old_value} to {new_value}",
            details={
                "old_value": old_value,
                "new_value": new_value,
            },
        )

    @staticmethod
    def draft_updated(
        field: str,
        new_value: str,
        correlation_id: UUID
    ) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.DRAFT_UPDATED,
            severity=AuditSeverity.DEBUG,
            entity_type="draft",
            correlation_id=correlation_id,
            description=f"New job {field} set",
            details={
                "field": field,
                "new_value": new_value,
            },
        )

    @staticmethod
    def job_form_toggled(
        is_open: bool,
        correlation_id: UUID
    ) -> AuditEvent:
        return AuditEvent(
            event_type=(
                AuditEventType.JOB_FORM_OPENED
                if is_open
                else AuditEventType.JOB_FORM_CLOSED
            ),
            severity=AuditSeverity.DEBUG,
            entity_type="draft",
            correlation_id=correlation_id,
            description="Add-job form opened" if is_open else "Add-job form closed",
        )

    @staticmethod
    def input_rejected(
        action: str,
        field: str,
        raw_value: str,
        reason: str,
        correlation_id: UUID
    ) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.INPUT_REJECTED,
            severity=AuditSeverity.WARNING,
            correlation_id=correlation_id,
            description=f"Rejected input for {field}",
            error_message=reason,
            details={
                "action": action,
                "field": field,
                "raw_value": raw_value,
            },
        )

    @staticmethod
    def system_error(
        error_type: str,
        error_message: str,
        details: Optional[dict] = None,
        correlation_id: Optional[UUID] = None
    ) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.SYSTEM_ERROR,
            severity=AuditSeverity.ERROR,
            description=f"System error: {error_type}",
            error_message=error_message,
            details=details or {},
            correlation_id=correlation_id,
            is_user_action=False,
        )
