"""Input parsing package."""

from calculatron.validation.parser import (
    RejectedInputError,
    ValidationIssue,
    clamp,
    parse_job_kind,
    parse_number,
    parse_whole_number,
)

__all__ = [
    "RejectedInputError",
    "ValidationIssue",
    "clamp",
    "parse_job_kind",
    "parse_number",
    "parse_whole_number",
]
