"""Tests for display formatting."""

import pytest
from decimal import Decimal

from calculatron.calculator import expense_label, format_currency, format_number, job_label
from calculatron.models import Expense, Job, JobKind


class TestNumbers:

    def test_whole_numbers(self):
        assert format_number(Decimal("5108")) == "5108"
        assert format_number(Decimal("20.0")) == "20"
        assert format_number(365184) == "365184"

    def test_grouping(self):
        assert format_number(Decimal("120000"), grouped=True) == "120,000"
        assert format_number(Decimal("1234.5"), grouped=True) == "1,234.50"

    def test_fractions_two_places(self):
        assert format_number(Decimal("120000") / 52) == "2307.69"

    def test_currency(self):
        assert format_currency(Decimal("5108")) == "$5108"
        assert format_currency(Decimal("120000"), grouped=True) == "$120,000"
        assert format_currency(Decimal("10"), symbol="€") == "€10"

    def test_negative_currency(self):
        assert format_currency(Decimal("-50")) == "-$50"


class TestLabels:

    def test_salary_label(self):
        job = Job(id=2, kind=JobKind.SALARY, rate=Decimal("120000"))
        assert job_label(job) == "Salary job ($120,000)"

    def test_hourly_label(self):
        job = Job(id=1, kind=JobKind.HOURLY, rate=Decimal("140"), weekly_hours=Decimal("20"))
        assert job_label(job) == "Hourly job (20 hours/wk @ $140/hr)"

    def test_hourly_label_without_hours(self):
        job = Job(id=1, kind=JobKind.HOURLY, rate=Decimal("15"))
        assert job_label(job) == "Hourly job (0 hours/wk @ $15/hr)"

    def test_passive_label(self):
        job = Job(id=3, kind=JobKind.PASSIVE, rate=Decimal("300"))
        assert job_label(job) == "Passive income ($300)"

    def test_expense_label(self):
        expense = Expense(name="Healthcare", cost=Decimal("1200"))
        assert expense_label("healthcare", expense) == "Healthcare ($1200/mo)"

    def test_expense_label_falls_back_to_key(self):
        assert expense_label("rent", Expense(cost=Decimal("900"))) == "rent ($900/mo)"


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
