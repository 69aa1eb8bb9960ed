"""
Exceptions for Income Calculatron.

CalculatorError (base)
├── InvalidInputError - raw widget value could not be parsed
└── StateUpdateError - an action does not fit the current state
    ├── UnknownJobError
    └── UnknownExpenseError

The totals themselves never raise. Errors only come from the
mutation boundary (parsing and the reducer).
"""


class CalculatorError(Exception):
    """Base exception for all calculator errors."""
    pass


class InvalidInputError(CalculatorError):
    """Raw input is not a usable value for its field."""

    def __init__(self, field: str, raw_value: object, message: str):
        self.field = field
        self.raw_value = raw_value
        super().__init__(message)


class StateUpdateError(CalculatorError):
    """An action cannot be applied to the current state."""
    pass


class UnknownJobError(StateUpdateError):
    """No job with the given id exists."""

    def __init__(self, job_id: int):
        self.job_id = job_id
        super().__init__(f"No job with id {job_id}")


class UnknownExpenseError(StateUpdateError):
    """No expense with the given key exists."""

    def __init__(self, key: str):
        self.key = key
        super().__init__(f"No expense with key '{key}'")
