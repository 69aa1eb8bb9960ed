"""State transitions package."""

from calculatron.state.reducer import reduce
from calculatron.state.samples import initial_state, sample_expenses, sample_jobs

__all__ = ["initial_state", "reduce", "sample_expenses", "sample_jobs"]
