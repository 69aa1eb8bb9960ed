"""Tests for the totals calculator."""

import pytest
from decimal import Decimal

from calculatron.calculator import (
    annual_salary_total,
    monthly_expense_total,
    monthly_total,
    partition_jobs,
    passive_income_total,
    round_half_up,
    summarize,
    total_weekly_hours,
    weekly_hourly_income,
    weekly_salary_income,
    weekly_total,
    yearly_total,
)
from calculatron.models import CalculatorState, Expense, Job, JobKind


@pytest.fixture
def sample_jobs():
    """Hourly 140/h x 20h, salary 120000/yr, passive 300."""
    return [
        Job(id=1, kind=JobKind.HOURLY, rate=Decimal("140"), weekly_hours=Decimal("20")),
        Job(id=2, kind=JobKind.SALARY, rate=Decimal("120000")),
        Job(id=3, kind=JobKind.PASSIVE, rate=Decimal("300")),
    ]


class TestWorkedExample:
    """The reference numbers for the sample jobs."""

    def test_weekly_total(self, sample_jobs):
        """round(140 x 20 + 120000 / 52) = round(5107.69)."""
        assert weekly_total(sample_jobs) == 5108

    def test_monthly_total(self, sample_jobs):
        """round(5108 x 4 + 120000 / 12)."""
        assert monthly_total(sample_jobs) == 30432

    def test_yearly_total(self, sample_jobs):
        """5108 x (52 - 4) + 120000."""
        assert yearly_total(sample_jobs, 4) == 365184

    def test_total_weekly_hours(self, sample_jobs):
        assert total_weekly_hours(sample_jobs) == 20

    def test_expense_total(self):
        expenses = {"healthcare": Expense(name="Healthcare", cost=Decimal("1200"))}
        assert monthly_expense_total(expenses) == 1200


class TestPartitions:
    """Tests for per-kind reductions."""

    def test_partition_keeps_order_and_all_kinds(self, sample_jobs):
        """Test every kind is a key, jobs stay in order."""
        extra = Job(id=4, kind=JobKind.HOURLY, rate=Decimal("10"), weekly_hours=Decimal("5"))
        partitions = partition_jobs(sample_jobs + [extra])
        assert set(partitions) == set(JobKind)
        assert [job.id for job in partitions[JobKind.HOURLY]] == [1, 4]
        assert [job.id for job in partitions[JobKind.SALARY]] == [2]
        assert [job.id for job in partitions[JobKind.PASSIVE]] == [3]

    def test_partition_of_empty_list(self):
        assert partition_jobs([]) == {kind: [] for kind in JobKind}

    def test_salary_is_annual(self, sample_jobs):
        """Test salary rate is read as a yearly figure."""
        assert annual_salary_total(sample_jobs) == 120000
        assert weekly_salary_income(sample_jobs) == Decimal("120000") / 52

    def test_weekly_hourly_income(self, sample_jobs):
        assert weekly_hourly_income(sample_jobs) == 2800

    def test_passive_income_tracked_separately(self, sample_jobs):
        """Test passive income is reported but left out of the totals."""
        assert passive_income_total(sample_jobs) == 300
        without_passive = [job for job in sample_jobs if job.kind != JobKind.PASSIVE]
        assert weekly_total(sample_jobs) == weekly_total(without_passive)
        assert monthly_total(sample_jobs) == monthly_total(without_passive)
        assert yearly_total(sample_jobs, 4) == yearly_total(without_passive, 4)

    def test_hours_only_count_for_hourly_jobs(self):
        """Test hours on a salary job are ignored."""
        jobs = [
            Job(id=1, kind=JobKind.HOURLY, rate=Decimal("20"), weekly_hours=Decimal("15")),
            Job(id=2, kind=JobKind.SALARY, rate=Decimal("52000"), weekly_hours=Decimal("40")),
        ]
        assert total_weekly_hours(jobs) == 15
        assert weekly_total(jobs) == 20 * 15 + 1000


class TestEdgeCases:
    """Missing values, rounding and negatives."""

    def test_empty_inputs_give_zero(self):
        assert weekly_total([]) == 0
        assert monthly_total([]) == 0
        assert yearly_total([], 4) == 0
        assert total_weekly_hours([]) == 0
        assert monthly_expense_total({}) == 0

    def test_missing_hours_default_to_zero(self):
        """Test an hourly job without hours earns nothing."""
        jobs = [Job(id=1, kind=JobKind.HOURLY, rate=Decimal("99"))]
        assert total_weekly_hours(jobs) == 0
        assert weekly_total(jobs) == 0

    def test_round_half_up(self):
        """Test halves round up, unlike Python's round()."""
        assert round_half_up(Decimal("2.5")) == 3
        assert round_half_up(Decimal("3.5")) == 4
        assert round_half_up(Decimal("2.49")) == 2

    @pytest.mark.parametrize("value,expected", [
        ("-2.5", -2),
        ("-0.5", 0),
        ("-2.51", -3),
        ("-3.49", -3),
    ])
    def test_negative_halves_round_toward_positive(self, value, expected):
        assert round_half_up(Decimal(value)) == expected

    def test_weekly_total_rounds_half_up(self):
        jobs = [Job(id=1, kind=JobKind.HOURLY, rate=Decimal("2.5"), weekly_hours=Decimal("1"))]
        assert weekly_total(jobs) == 3

    def test_negative_weekly_total_tie(self):
        jobs = [Job(id=1, kind=JobKind.HOURLY, rate=Decimal("-2.5"), weekly_hours=Decimal("1"))]
        assert weekly_total(jobs) == -2

    def test_negative_monthly_total_tie(self):
        """Salary -6: weekly round(-0.115) = 0, monthly round(0 - 0.5) = 0."""
        jobs = [Job(id=1, kind=JobKind.SALARY, rate=Decimal("-6"))]
        assert weekly_total(jobs) == 0
        assert monthly_total(jobs) == 0

    def test_monthly_total_rounds_half_up(self):
        """Salary 6: weekly round(0.115) = 0, monthly round(0 + 0.5) = 1."""
        jobs = [Job(id=1, kind=JobKind.SALARY, rate=Decimal("6"))]
        assert weekly_total(jobs) == 0
        assert monthly_total(jobs) == 1

    def test_yearly_total_not_rounded_again(self):
        """Test yearly uses the rounded weekly total plus the exact salary."""
        jobs = [Job(id=1, kind=JobKind.SALARY, rate=Decimal("100.40"))]
        # weekly = round(100.40 / 52) = round(1.93) = 2
        assert yearly_total(jobs, 0) == Decimal("2") * 52 + Decimal("100.40")
        assert yearly_total(jobs, 4) == Decimal("196.40")

    def test_all_weeks_off(self, sample_jobs):
        """Test 52 weeks off leaves only the annual salary."""
        assert yearly_total(sample_jobs, 52) == 120000

    def test_negative_values_propagate(self):
        """Test negatives are not clamped by the calculator."""
        jobs = [Job(id=1, kind=JobKind.HOURLY, rate=Decimal("-10"), weekly_hours=Decimal("5"))]
        assert weekly_total(jobs) == -50
        assert monthly_total(jobs) == -200
        assert yearly_total(jobs, 4) == -2400

    def test_expense_interval_ignored(self):
        """Test every cost is summed as monthly."""
        expenses = {
            "rent": Expense(name="Rent", cost=Decimal("900")),
            "insurance": Expense(name="Insurance", cost=Decimal("300"), interval=12),
        }
        assert monthly_expense_total(expenses) == 1200

    def test_accepts_generators(self, sample_jobs):
        """Test composite totals do not exhaust a one-shot iterable."""
        assert weekly_total(job for job in sample_jobs) == 5108
        assert monthly_total(job for job in sample_jobs) == 30432
        assert yearly_total((job for job in sample_jobs), 4) == 365184


class TestSummarize:
    """Tests for the bundled summary."""

    def test_summary_of_state(self, sample_jobs):
        state = CalculatorState(
            jobs=tuple(sample_jobs),
            expenses={"healthcare": Expense(name="Healthcare", cost=Decimal("1200"))},
            weeks_off=4,
            next_job_id=4,
        )
        summary = summarize(state)
        assert summary.total_weekly_hours == 20
        assert summary.weeks_off == 4
        assert summary.weekly_total == 5108
        assert summary.monthly_total == 30432
        assert summary.yearly_total == 365184
        assert summary.monthly_expenses == 1200
        assert summary.monthly_net == 29232
        assert summary.annual_salary_total == 120000
        assert summary.weekly_hourly_income == 2800
        assert summary.passive_income_total == 300

    def test_summary_is_recomputed(self, sample_jobs):
        """Test the summary follows the state it is given."""
        state = CalculatorState(jobs=tuple(sample_jobs), weeks_off=0, next_job_id=4)
        assert summarize(state).yearly_total == 5108 * 52 + 120000


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
