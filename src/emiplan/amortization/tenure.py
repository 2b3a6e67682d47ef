"""Tenure solver — months needed for a given EMI to clear a principal."""

import math

from emiplan.core.exceptions import InvalidTermError

from .models import UNPAYABLE


def solve_tenure_months(principal: float, emi: float, annual_rate_percent: float) -> float:
    """Number of monthly installments of ``emi`` that amortize ``principal``.

    A partial final month still needs a payment, so the result is rounded up.

    Returns:
        Whole months as an int, 0 for a principal already cleared, or
        UNPAYABLE when the EMI does not cover the first month's interest.

    Raises:
        InvalidTermError: the monthly rate is zero.
    """
    monthly_rate = annual_rate_percent / 100 / 12
    if monthly_rate <= 0:
        raise InvalidTermError(f"Tenure is undefined at an effective monthly rate of {monthly_rate}")

    if principal <= 0:
        return 0

    monthly_interest = principal * monthly_rate
    if emi <= monthly_interest:
        return UNPAYABLE

    months = math.log(emi / (emi - monthly_interest)) / math.log(1 + monthly_rate)
    # Tolerate float noise on an exact whole number of months.
    return math.ceil(months - 1e-9)
