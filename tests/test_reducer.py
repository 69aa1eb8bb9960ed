"""Tests for state transitions."""

import pytest
from decimal import Decimal

from calculatron.config import CalculatorSettings
from calculatron.errors import InvalidInputError, UnknownExpenseError, UnknownJobError
from calculatron.models import (
    AddJob,
    CalculatorState,
    CloseJobForm,
    Expense,
    Job,
    JobKind,
    OpenJobForm,
    SetWeeksOff,
    UpdateDraftField,
    UpdateExpenseCost,
    UpdateJobField,
)
from calculatron.state import initial_state, reduce


@pytest.fixture
def settings():
    return CalculatorSettings(_env_file=None)


@pytest.fixture
def state(settings):
    return initial_state(settings)


@pytest.fixture
def two_expenses():
    return CalculatorState(
        expenses={
            "healthcare": Expense(name="Healthcare", cost=Decimal("1200")),
            "rent": Expense(name="Rent", cost=Decimal("900")),
        },
    )


class TestInitialState:
    """Tests for the sample state."""

    def test_sample_jobs_loaded(self, state):
        assert [job.id for job in state.jobs] == [1, 2, 3]
        assert [job.kind for job in state.jobs] == [
            JobKind.HOURLY, JobKind.SALARY, JobKind.PASSIVE,
        ]
        assert state.next_job_id == 4

    def test_sample_expense_and_weeks_off(self, state, settings):
        assert state.expenses["healthcare"].cost == 1200
        assert state.weeks_off == settings.default_weeks_off


class TestUpdateJobField:
    """Updating one job field."""

    def test_only_target_field_changes(self, state, settings):
        """Test other jobs and fields are untouched and order kept."""
        new_state = reduce(
            state,
            UpdateJobField(job_id=1, field="weekly_hours", value="30"),
            settings,
        )
        assert new_state.jobs[0].weekly_hours == Decimal("30")
        assert new_state.jobs[0].rate == state.jobs[0].rate
        assert new_state.jobs[0].kind == state.jobs[0].kind
        assert new_state.jobs[1:] == state.jobs[1:]
        assert [job.id for job in new_state.jobs] == [1, 2, 3]

    def test_input_state_not_modified(self, state, settings):
        reduce(state, UpdateJobField(job_id=1, field="rate", value=150), settings)
        assert state.jobs[0].rate == Decimal("140")

    def test_update_middle_job_keeps_order(self, state, settings):
        new_state = reduce(
            state, UpdateJobField(job_id=2, field="rate", value=90000), settings,
        )
        assert [job.id for job in new_state.jobs] == [1, 2, 3]
        assert new_state.jobs[1].rate == Decimal("90000")
        assert new_state.jobs[0] == state.jobs[0]
        assert new_state.jobs[2] == state.jobs[2]

    def test_rate_clamped_to_kind_bounds(self, state, settings):
        """Test hourly and salary rates use their own slider ranges."""
        hourly = reduce(state, UpdateJobField(job_id=1, field="rate", value="500"), settings)
        assert hourly.jobs[0].rate == settings.hourly_rate_max

        salary = reduce(state, UpdateJobField(job_id=2, field="rate", value=600000), settings)
        assert salary.jobs[1].rate == settings.salary_rate_max

    def test_negative_input_clamped_to_zero(self, state, settings):
        new_state = reduce(
            state, UpdateJobField(job_id=1, field="weekly_hours", value=-5), settings,
        )
        assert new_state.jobs[0].weekly_hours == 0

    def test_unknown_job(self, state, settings):
        with pytest.raises(UnknownJobError, match="No job with id 99"):
            reduce(state, UpdateJobField(job_id=99, field="rate", value=1), settings)

    def test_non_numeric_input_rejected(self, state, settings):
        with pytest.raises(InvalidInputError):
            reduce(state, UpdateJobField(job_id=1, field="rate", value="abc"), settings)

    def test_boolean_input_rejected(self, state, settings):
        with pytest.raises(InvalidInputError):
            reduce(state, UpdateJobField(job_id=1, field="rate", value=True), settings)


class TestAddJob:
    """Adding jobs from the draft."""

    def test_add_default_draft(self, state, settings):
        """Test the default draft becomes an hourly job with a new id."""
        new_state = reduce(state.model_copy(update={"job_form_open": True}), AddJob(), settings)
        added = new_state.jobs[-1]
        assert len(new_state.jobs) == 4
        assert added.id == 4
        assert added.kind == JobKind.HOURLY
        assert added.rate == Decimal("10")
        assert added.weekly_hours == Decimal("20")
        assert new_state.next_job_id == 5
        assert new_state.job_form_open is False

    def test_existing_ids_untouched(self, state, settings):
        new_state = reduce(state, AddJob(), settings)
        assert new_state.jobs[:3] == state.jobs

    def test_ids_are_monotonic(self, state, settings):
        """Test consecutive adds hand out consecutive ids."""
        new_state = reduce(reduce(state, AddJob(), settings), AddJob(), settings)
        assert [job.id for job in new_state.jobs] == [1, 2, 3, 4, 5]

    def test_id_comes_from_counter_not_length(self, settings):
        """Test a gap in ids does not cause a collision."""
        sparse = CalculatorState(
            jobs=(
                Job(id=1, kind=JobKind.HOURLY, rate=10),
                Job(id=7, kind=JobKind.SALARY, rate=1000),
            ),
            next_job_id=8,
        )
        new_state = reduce(sparse, AddJob(), settings)
        assert new_state.jobs[-1].id == 8
        assert len({job.id for job in new_state.jobs}) == 3

    def test_add_salary_drops_hours(self, state, settings):
        """Test weekly hours are only kept for hourly jobs."""
        state = reduce(state, UpdateDraftField(field="kind", value="salary"), settings)
        state = reduce(state, UpdateDraftField(field="rate", value="120000"), settings)
        state = reduce(state, UpdateDraftField(field="weekly_hours", value="40"), settings)
        new_state = reduce(state, AddJob(), settings)
        added = new_state.jobs[-1]
        assert added.kind == JobKind.SALARY
        assert added.rate == Decimal("120000")
        assert added.weekly_hours is None

    def test_draft_clamped_when_added(self, state, settings):
        state = reduce(state, UpdateDraftField(field="rate", value=1000), settings)
        new_state = reduce(state, AddJob(), settings)
        assert new_state.jobs[-1].rate == settings.hourly_rate_max

    def test_draft_kept_after_add(self, state, settings):
        state = reduce(state, UpdateDraftField(field="rate", value="25"), settings)
        new_state = reduce(state, AddJob(), settings)
        assert new_state.draft.rate == Decimal("25")


class TestDraftAndForm:
    """Tests for the add-job form."""

    def test_open_and_close(self, state, settings):
        opened = reduce(state, OpenJobForm(), settings)
        assert opened.job_form_open is True
        assert reduce(opened, CloseJobForm(), settings).job_form_open is False

    def test_draft_kind_parsed(self, state, settings):
        new_state = reduce(state, UpdateDraftField(field="kind", value="Passive"), settings)
        assert new_state.draft.kind == JobKind.PASSIVE

    def test_invalid_draft_kind(self, state, settings):
        with pytest.raises(InvalidInputError, match="Unknown job kind"):
            reduce(state, UpdateDraftField(field="kind", value="contract"), settings)

    def test_empty_draft_number_rejected(self, state, settings):
        with pytest.raises(InvalidInputError):
            reduce(state, UpdateDraftField(field="weekly_hours", value=""), settings)


class TestUpdateExpenseCost:
    """Updating one expense."""

    def test_only_target_expense_changes(self, two_expenses, settings):
        new_state = reduce(
            two_expenses, UpdateExpenseCost(key="rent", value="1000"), settings,
        )
        assert new_state.expenses["rent"].cost == Decimal("1000")
        assert new_state.expenses["rent"].name == "Rent"
        assert new_state.expenses["healthcare"] == two_expenses.expenses["healthcare"]
        assert list(new_state.expenses) == ["healthcare", "rent"]
        assert two_expenses.expenses["rent"].cost == Decimal("900")

    def test_cost_clamped(self, two_expenses, settings):
        new_state = reduce(
            two_expenses, UpdateExpenseCost(key="rent", value=20000), settings,
        )
        assert new_state.expenses["rent"].cost == settings.expense_cost_max

    def test_unknown_expense(self, two_expenses, settings):
        with pytest.raises(UnknownExpenseError, match="No expense with key 'car'"):
            reduce(two_expenses, UpdateExpenseCost(key="car", value=100), settings)


class TestSetWeeksOff:
    """Vacation weeks."""

    def test_set_from_string(self, state, settings):
        assert reduce(state, SetWeeksOff(value="6"), settings).weeks_off == 6

    def test_clamped_to_year(self, state, settings):
        assert reduce(state, SetWeeksOff(value=60), settings).weeks_off == 52
        assert reduce(state, SetWeeksOff(value=-3), settings).weeks_off == 0

    def test_fraction_dropped(self, state, settings):
        assert reduce(state, SetWeeksOff(value="6.9"), settings).weeks_off == 6

    def test_empty_rejected(self, state, settings):
        with pytest.raises(InvalidInputError):
            reduce(state, SetWeeksOff(value=""), settings)


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
