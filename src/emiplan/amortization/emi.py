"""EMI calculator.

EMIs are quoted in whole currency units, as lenders do. The rounding leaves a
bounded residue (at most half a unit per month) that the scheduler settles
with the last installment.
"""

from decimal import ROUND_HALF_UP, Decimal

from emiplan.core.exceptions import InvalidTermError


def round_to_unit(amount: float) -> float:
    """Round half-up to a whole currency unit."""
    return float(Decimal(str(amount)).quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def compute_emi(principal: float, annual_rate_percent: float, months: int) -> float:
    """Calculate the equal monthly installment for an amortizing loan.

    No validation beyond the degenerate cases; callers validate loan terms
    first (see ``emiplan.amortization.prepayment.validate_loan``).

    Args:
        principal: Loan amount
        annual_rate_percent: Annual interest rate in percent (e.g., 8.5)
        months: Number of monthly installments

    Returns:
        EMI rounded to a whole currency unit

    Raises:
        InvalidTermError: months is zero or the monthly rate is zero.
    """
    if months <= 0:
        raise InvalidTermError(f"EMI needs a positive number of months, got {months}")

    monthly_rate = annual_rate_percent / 100 / 12
    growth = (1 + monthly_rate) ** months
    if growth - 1 == 0:
        raise InvalidTermError(f"EMI is undefined at an effective monthly rate of {monthly_rate}")

    emi = principal * monthly_rate * growth / (growth - 1)
    return round_to_unit(emi)
