"""
Input Parsing at the Mutation Boundary

Widgets hand us ints, floats or strings. Before anything reaches the
state, raw values go through here.

POLICY:
- empty, non-numeric, NaN and infinite input is REJECTED
  (InvalidInputError, carrying a ValidationIssue for display)
- numeric input outside the widget's range is CLAMPED to that range
- floats are converted through their string form, so 0.1 stays 0.1

IMPORTANT: Rejection never changes state. The caller keeps the
previous value and shows the issue to the user.
"""

import re
from decimal import ROUND_DOWN, Decimal, InvalidOperation
from typing import Optional, Union

from pydantic import BaseModel, Field

from calculatron.config.settings import SliderBounds
from calculatron.errors import InvalidInputError
from calculatron.models.job import JobKind

RawInput = Union[int, float, Decimal, str]

# Accepted spellings for job kinds, besides the enum values
_KIND_ALIASES = {
    "salaried": JobKind.SALARY,
}

# "1,200" or "-12,345.50": commas only between groups of three digits
_GROUPED_NUMBER = re.compile(r"^[+-]?\d{1,3}(,\d{3})+(\.\d+)?$")


class ValidationIssue(BaseModel):
    """A single problem found in raw input."""

    field: str = Field(
        ...,
        description="Field with the issue"
    )
    issue_type: str = Field(
        ...,
        description="Type of issue (e.g., 'missing', 'not_a_number', 'unknown_kind')"
    )
    message: str = Field(
        ...,
        description="Human-readable description of the issue"
    )
    severity: str = Field(
        default="error",
        pattern="^(error|warning|info)$",
        description="Issue severity"
    )
    suggested_fix: Optional[str] = Field(
        default=None,
        description="Suggested fix if available"
    )


class RejectedInputError(InvalidInputError):
    """InvalidInputError that carries a displayable issue."""

    def __init__(self, issue: ValidationIssue, raw_value: object):
        self.issue = issue
        super().__init__(issue.field, raw_value, issue.message)


def _reject(
    field: str,
    raw: object,
    issue_type: str,
    message: str,
    suggested_fix: Optional[str] = None,
) -> RejectedInputError:
    return RejectedInputError(
        ValidationIssue(
            field=field,
            issue_type=issue_type,
            message=message,
            suggested_fix=suggested_fix,
        ),
        raw,
    )


def clamp(value: Decimal, bounds: SliderBounds) -> Decimal:
    """Pull a value into [bounds.minimum, bounds.maximum]."""
    if value < bounds.minimum:
        return Decimal(bounds.minimum)
    if value > bounds.maximum:
        return Decimal(bounds.maximum)
    return value


def parse_number(
    raw: RawInput,
    field: str,
    bounds: Optional[SliderBounds] = None,
) -> Decimal:
    """
    Parse a raw widget value into a Decimal.

    Args:
        raw: Value as produced by a slider or input field.
        field: Field name, used in error messages.
        bounds: If given, the result is clamped into this range.

    Raises:
        RejectedInputError: If the value is not a finite number.
    """
    # bool is an int subclass, but a checkbox value is never a number here
    if isinstance(raw, bool):
        raise _reject(field, raw, "not_a_number", f"{field} must be a number, got {raw!r}")

    if isinstance(raw, Decimal):
        value = raw
    elif isinstance(raw, int):
        value = Decimal(raw)
    elif isinstance(raw, float):
        value = Decimal(str(raw))
    elif isinstance(raw, str):
        text = raw.strip()
        if not text:
            raise _reject(
                field, raw, "missing",
                f"{field} is empty",
                suggested_fix="Enter a number",
            )
        if "," in text:
            if not _GROUPED_NUMBER.match(text):
                raise _reject(
                    field, raw, "not_a_number",
                    f"{field} has misplaced thousands separators: {raw!r}",
                    suggested_fix="Group digits in threes, e.g. 1,200, or leave out commas",
                )
            text = text.replace(",", "")
        try:
            value = Decimal(text)
        except InvalidOperation:
            raise _reject(
                field, raw, "not_a_number",
                f"{field} must be a number, got {raw!r}",
                suggested_fix="Use digits only, e.g. 40 or 12.5",
            ) from None
    else:
        raise _reject(
            field, raw, "not_a_number",
            f"{field} must be a number, got {type(raw).__name__}",
        )

    if not value.is_finite():
        raise _reject(field, raw, "not_a_number", f"{field} must be a finite number")

    if bounds is not None:
        value = clamp(value, bounds)
    return value


def parse_whole_number(
    raw: RawInput,
    field: str,
    bounds: Optional[SliderBounds] = None,
) -> int:
    """Like parse_number, with the fraction dropped (12.9 -> 12)."""
    value = parse_number(raw, field).to_integral_value(rounding=ROUND_DOWN)
    if bounds is not None:
        value = clamp(value, bounds)
    return int(value)


def parse_job_kind(raw: Union[JobKind, str]) -> JobKind:
    """
    Parse a job kind from a select value.

    Case-insensitive; "salaried" is accepted for "salary".
    """
    if isinstance(raw, JobKind):
        return raw
    text = str(raw).strip().lower()
    if text in _KIND_ALIASES:
        return _KIND_ALIASES[text]
    try:
        return JobKind(text)
    except ValueError:
        allowed = ", ".join(kind.value for kind in JobKind)
        raise _reject(
            "kind", raw, "unknown_kind",
            f"Unknown job kind {raw!r}. Allowed: {allowed}",
        ) from None
