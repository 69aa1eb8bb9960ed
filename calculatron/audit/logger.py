"""
Audit Logger

DESIGN DECISION: Every state transition in a session is logged.
This provides:
1. Traceability of how the totals got where they are
2. Debugging capability
3. A visible history of the session for the user

The audit logger:
- Logs locally through structlog
- Keeps a bounded, in-memory trail for the current session only
  (nothing is persisted)
"""

import logging
import sys
from collections import deque
from decimal import Decimal
from typing import Any, Optional
from uuid import UUID, uuid4

import structlog

from calculatron.models.audit import AuditEvent, AuditEventBuilder, AuditSeverity


def configure_logging(level: str = "INFO", json: bool = True) -> None:
    """
    Configure structlog on top of stdlib logging.

    Call once at startup (the Streamlit app does this from settings).
    """
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=getattr(logging, level.upper(), logging.INFO),
    )

    renderer = (
        structlog.processors.JSONRenderer()
        if json
        else structlog.dev.ConsoleRenderer()
    )

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            renderer,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def _text(value: Any) -> Optional[str]:
    """Stringify values for event details (Decimal is not JSON-native)."""
    if value is None:
        return None
    if isinstance(value, Decimal):
        return format(value, "f")
    return str(value)


class AuditLogger:
    """
    Central audit logging service for one session.

    Logs events both to:
    1. Structured local log (for debugging)
    2. An in-memory trail (for the session's activity view)
    """

    def __init__(
        self,
        logger: Optional[Any] = None,
        max_events: int = 200,
    ):
        """
        Initialize audit logger.

        Args:
            logger: structlog-style logger; defaults to the
                    "calculatron.audit" logger.
            max_events: How many events the trail keeps. Oldest
                        events are dropped first.
        """
        self._logger = logger or structlog.get_logger("calculatron.audit")
        self._events: deque[AuditEvent] = deque(maxlen=max_events)

    @property
    def events(self) -> list[AuditEvent]:
        """Recorded events, oldest first."""
        return list(self._events)

    def log(self, event: AuditEvent) -> AuditEvent:
        """Log an audit event locally and append it to the trail."""
        log_dict = event.to_log_dict()

        if event.severity == AuditSeverity.ERROR:
            self._logger.error("audit_event", **log_dict)
        elif event.severity == AuditSeverity.WARNING:
            self._logger.warning("audit_event", **log_dict)
        elif event.severity == AuditSeverity.DEBUG:
            self._logger.debug("audit_event", **log_dict)
        else:
            self._logger.info("audit_event", **log_dict)

        self._events.append(event)
        return event

    def log_session_started(
        self,
        job_count: int,
        expense_count: int,
        correlation_id: UUID,
    ) -> None:
        self.log(AuditEventBuilder.session_started(
            job_count=job_count,
            expense_count=expense_count,
            correlation_id=correlation_id,
        ))

    def log_job_added(
        self,
        job_id: int,
        kind: str,
        rate: Decimal,
        correlation_id: UUID,
    ) -> None:
        self.log(AuditEventBuilder.job_added(
            job_id=job_id,
            kind=kind,
            rate=_text(rate),
            correlation_id=correlation_id,
        ))

    def log_job_updated(
        self,
        job_id: int,
        field: str,
        old_value: Optional[Decimal],
        new_value: Optional[Decimal],
        correlation_id: UUID,
    ) -> None:
        self.log(AuditEventBuilder.job_updated(
            job_id=job_id,
            field=field,
            old_value=_text(old_value),
            new_value=_text(new_value),
            correlation_id=correlation_id,
        ))

    def log_expense_updated(
        self,
        key: str,
        old_cost: Decimal,
        new_cost: Decimal,
        correlation_id: UUID,
    ) -> None:
        self.log(AuditEventBuilder.expense_updated(
            key=key,
            old_cost=_text(old_cost),
            new_cost=_text(new_cost),
            correlation_id=correlation_id,
        ))

    def log_weeks_off_changed(
        self,
        old_value: int,
        new_value: int,
        correlation_id: UUID,
    ) -> None:
        self.log(AuditEventBuilder.weeks_off_changed(
            old_value=old_value,
            new_value=new_value,
            correlation_id=correlation_id,
        ))

    def log_draft_updated(
        self,
        field: str,
        new_value: Any,
        correlation_id: UUID,
    ) -> None:
        self.log(AuditEventBuilder.draft_updated(
            field=field,
            new_value=_text(getattr(new_value, "value", new_value)),
            correlation_id=correlation_id,
        ))

    def log_job_form_toggled(self, is_open: bool, correlation_id: UUID) -> None:
        self.log(AuditEventBuilder.job_form_toggled(
            is_open=is_open,
            correlation_id=correlation_id,
        ))

    def log_input_rejected(
        self,
        action: str,
        field: str,
        raw_value: Any,
        reason: str,
        correlation_id: UUID,
    ) -> None:
        self.log(AuditEventBuilder.input_rejected(
            action=action,
            field=field,
            raw_value=repr(raw_value),
            reason=reason,
            correlation_id=correlation_id,
        ))

    def log_error(
        self,
        error_type: str,
        error_message: str,
        details: Optional[dict] = None,
        correlation_id: Optional[UUID] = None,
    ) -> None:
        self.log(AuditEventBuilder.system_error(
            error_type=error_type,
            error_message=error_message,
            details=details,
            correlation_id=correlation_id,
        ))


def create_correlation_id() -> UUID:
    """
    Create a new correlation ID for tracking related events.

    One per calculator session; every event of the session carries it.
    """
    return uuid4()
