"""Tests for emiplan.amortization.tenure."""

import pytest

from emiplan.amortization.models import UNPAYABLE, is_unpayable
from emiplan.amortization.tenure import solve_tenure_months
from emiplan.core.exceptions import InvalidTermError


class TestSolveTenure:
    def test_rounded_down_emi_needs_extra_month(self):
        # 8,678 is 8,678.23 rounded down, so 240 months fall just short
        assert solve_tenure_months(1_000_000, 8_678, 8.5) == 241

    def test_rounded_up_emi(self):
        # 8,775.72 rounded up to 8,776 finishes within 30 years
        assert solve_tenure_months(1_000_000, 8_776, 10) == 360

    def test_smaller_principal_pays_off_sooner(self):
        assert solve_tenure_months(500_000, 8_678, 8.5) == 75

    def test_ceiling(self):
        # 1,000 at 12% with 500/month needs 2.03 months
        assert solve_tenure_months(1_000, 500, 12) == 3

    def test_exact_whole_months_not_bumped(self):
        growth = 1.01**12
        exact_emi = 100_000 * 0.01 * growth / (growth - 1)
        assert solve_tenure_months(100_000, exact_emi, 12) == 12

    def test_cleared_principal(self):
        assert solve_tenure_months(0, 5_000, 8.5) == 0

    def test_emi_below_interest_is_unpayable(self):
        months = solve_tenure_months(1_000_000, 7_000, 8.5)
        assert months == UNPAYABLE
        assert is_unpayable(months)

    def test_emi_just_below_interest_is_unpayable(self):
        # Interest on 10 lakh at 8.5% is 7,083.33
        assert is_unpayable(solve_tenure_months(1_000_000, 7_083, 8.5))

    def test_zero_rate_rejected(self):
        with pytest.raises(InvalidTermError):
            solve_tenure_months(100_000, 10_000, 0)
