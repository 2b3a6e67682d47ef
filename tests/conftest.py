"""Shared test fixtures for emiplan."""

import tempfile
from datetime import date

import pytest

from emiplan.amortization import LoanTerms


@pytest.fixture
def tmp_dir():
    """Provide a temporary directory that is cleaned up after the test."""
    with tempfile.TemporaryDirectory() as d:
        yield d


@pytest.fixture
def home_loan():
    """10 lakh at 8.5% over 20 years, first installment 1 Jan 2025."""
    return LoanTerms(principal=1_000_000, annual_rate_percent=8.5, tenure_months=240, start_date=date(2025, 1, 1))
