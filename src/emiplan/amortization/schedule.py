"""Month-by-month amortization schedule with optional prepayments."""

from collections import defaultdict
from collections.abc import Iterable, Sequence
from datetime import date

from loguru import logger

from .dates import add_months, months_between
from .emi import compute_emi
from .models import AmortizationRow, PrepaymentEvent, ScheduleSummary

# Balances below this are float residue, not money owed.
_SETTLED = 1e-6


def prepayments_by_month(start_date: date, prepayments: Iterable[PrepaymentEvent]) -> dict[int, float]:
    """Map elapsed months since start_date to the total prepaid in that month.

    Events dated before the start month are dropped.
    """
    lookup: dict[int, float] = defaultdict(float)
    for event in prepayments:
        elapsed = months_between(start_date, event.date)
        if elapsed < 0:
            logger.debug(f"Prepayment {event.id} on {event.date} precedes loan start {start_date}, ignored")
            continue
        lookup[elapsed] += event.amount
    return dict(lookup)


def build_schedule(
    principal: float,
    annual_rate_percent: float,
    months: int,
    emi: float | None,
    start_date: date,
    prepayments: Sequence[PrepaymentEvent] = (),
) -> list[AmortizationRow]:
    """Expand a loan into monthly rows until it is paid off.

    A prepayment lands in the row whose calendar month matches its date and is
    added to that month's principal. The schedule ends early once the balance
    reaches zero, and the last nominal month absorbs whatever residue EMI
    rounding left behind, so a completed schedule always closes at zero.

    Args:
        principal: Loan amount
        annual_rate_percent: Annual rate in percent
        months: Nominal tenure in months
        emi: Monthly installment; None computes it with compute_emi()
        start_date: Date of the first installment
        prepayments: Lump sums to fold into the schedule

    Returns:
        Rows ordered by month, at most ``months`` long
    """
    if emi is None:
        emi = compute_emi(principal, annual_rate_percent, months)

    monthly_rate = annual_rate_percent / 100 / 12
    extras = prepayments_by_month(start_date, prepayments)

    rows: list[AmortizationRow] = []
    balance = principal
    cumulative_interest = 0.0

    for month in range(1, months + 1):
        if balance <= 0:
            break

        interest = balance * monthly_rate
        regular_principal = emi - interest
        principal_part = regular_principal

        extra = extras.get(month - 1, 0.0)
        principal_part += extra

        # Final-payment adjustment
        if principal_part > balance or month == months:
            principal_part = balance

        applied_extra = min(extra, max(0.0, principal_part - regular_principal)) if extra else 0.0

        balance -= principal_part
        if balance < _SETTLED:
            balance = 0.0
        cumulative_interest += interest

        rows.append(
            AmortizationRow(
                month=month,
                date=add_months(start_date, month - 1),
                payment=principal_part + interest,
                principal_component=principal_part,
                interest_component=interest,
                remaining_balance=balance,
                cumulative_interest=cumulative_interest,
                prepayment=applied_extra,
            )
        )

    logger.debug(f"Built schedule: {len(rows)} of {months} months, {len(extras)} prepayment month(s)")
    return rows


def summarize_schedule(rows: Sequence[AmortizationRow]) -> ScheduleSummary:
    """Total payments and interest over a schedule."""
    return ScheduleSummary(
        months=len(rows),
        total_payments=sum(row.payment for row in rows),
        total_interest=rows[-1].cumulative_interest if rows else 0.0,
    )
