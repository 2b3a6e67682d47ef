"""Prepayment impact evaluator.

Walks prepayment events in date order against a loan. Each event is applied
on top of the plan left by the previous one:

1. Pay the EMI in force for every month since the previous event.
2. Knock the prepayment off the balance.
3. Re-quote the EMI over the months left in the horizon, then solve how many
   months that EMI actually needs.
4. Savings = cost of the old plan from the previous event onward, minus what
   the new plan costs (installments since then + new installments + the
   prepayment itself).

Both plans are priced with their settling last installment, since whole-unit
EMIs never amortize a balance exactly. Savings come from this walk. The
schedules on the result are for display.
"""

from collections.abc import Sequence

from loguru import logger

from emiplan.core.exceptions import ValidationError

from .dates import months_between
from .emi import compute_emi
from .models import UNPAYABLE, EngineResult, LoanTerms, PrepaymentEvent, PrepaymentOutcome, is_unpayable
from .schedule import build_schedule
from .tenure import solve_tenure_months

# Smallest EMI a positive balance can be quoted.
MIN_EMI = 1.0


def validate_loan(loan: LoanTerms) -> None:
    """Reject loans that cannot be amortized.

    Raises:
        ValidationError: principal, rate or tenure is not positive.
    """
    problems = []
    if loan.principal <= 0:
        problems.append("principal must be positive")
    if loan.annual_rate_percent <= 0:
        problems.append("interest rate must be positive")
    if loan.tenure_months <= 0:
        problems.append("tenure must be at least one month")
    if problems:
        raise ValidationError("Invalid loan terms: " + "; ".join(problems))


def pay_down(principal: float, emi: float, annual_rate_percent: float, payments: int) -> tuple[float, float]:
    """Make up to ``payments`` installments.

    Returns:
        Tuple of (remaining_balance, total_paid). The installment that clears
        the loan is cut to what is owed.
    """
    monthly_rate = annual_rate_percent / 100 / 12
    balance = principal
    paid = 0.0
    for _ in range(payments):
        if balance <= 0:
            break
        interest = balance * monthly_rate
        payment = min(emi, balance + interest)
        balance -= payment - interest
        paid += payment
    return max(balance, 0.0), paid


def balance_after_payments(principal: float, emi: float, annual_rate_percent: float, payments: int) -> float:
    """Outstanding balance after ``payments`` regular installments."""
    balance, _ = pay_down(principal, emi, annual_rate_percent, payments)
    return balance


def plan_cost(principal: float, emi: float, annual_rate_percent: float, months: int) -> float:
    """Total paid to clear ``principal`` in ``months`` installments of ``emi``.

    The last installment settles whatever is left, as in build_schedule().
    """
    if months <= 0:
        return 0.0
    balance, paid = pay_down(principal, emi, annual_rate_percent, months - 1)
    if balance > 0:
        paid += balance * (1 + annual_rate_percent / 100 / 12)
    return paid


def requote(
    balance: float,
    annual_rate_percent: float,
    remaining: int,
    current_emi: float,
    budget: float,
) -> tuple[float, int]:
    """New EMI and tenure for ``balance`` over the ``remaining`` months.

    The quote never exceeds the EMI in force, never drops below MIN_EMI, and
    never costs more than ``budget`` (what the plan in force would still
    cost). Whole-unit rounding can break the last rule on small prepayments;
    the EMI then goes up a unit at a time. At the EMI in force a lower balance
    always costs less, so the search ends there at the latest.
    """
    new_emi = min(max(compute_emi(balance, annual_rate_percent, remaining), MIN_EMI), current_emi)
    while True:
        new_tenure = solve_tenure_months(balance, new_emi, annual_rate_percent)
        if is_unpayable(new_tenure):
            if new_emi >= current_emi:
                return new_emi, new_tenure
        else:
            # A rounded-down EMI can need one month past the horizon; the last
            # installment settles that residue instead.
            new_tenure = min(new_tenure, remaining)
            if new_emi >= current_emi or plan_cost(balance, new_emi, annual_rate_percent, new_tenure) <= budget:
                return new_emi, new_tenure
        new_emi = min(new_emi + 1, current_emi)


def evaluate(loan: LoanTerms, events: Sequence[PrepaymentEvent]) -> EngineResult:
    """Evaluate the impact of prepayment events on a loan.

    Events are applied in date order (ties keep their input order). Events
    dated before the loan starts or after the plan in force has ended are
    skipped and reported in ``skipped_event_ids``.

    Args:
        loan: Loan terms
        events: Prepayments in any order; never mutated

    Returns:
        EngineResult with one outcome per processed event

    Raises:
        ValidationError: the loan terms are not all positive.
    """
    validate_loan(loan)

    rate = loan.annual_rate_percent
    baseline_emi = compute_emi(loan.principal, rate, loan.tenure_months)
    ordered = sorted(events, key=lambda e: e.date)

    # Plan in force: balance at month `anchor`, its EMI and its payoff month.
    current_principal = loan.principal
    current_emi = baseline_emi
    current_tenure = loan.tenure_months
    anchor = 0

    outcomes: list[PrepaymentOutcome] = []
    skipped: list[str] = []
    total_savings = 0.0

    for event in ordered:
        elapsed = months_between(loan.start_date, event.date)
        if elapsed < 0 or elapsed >= current_tenure:
            logger.warning(
                f"Prepayment {event.id} on {event.date} is outside the loan window "
                f"(month {elapsed}, tenure {current_tenure}), skipped"
            )
            skipped.append(event.id)
            continue

        old_cost = plan_cost(current_principal, current_emi, rate, current_tenure - anchor)
        balance, paid = pay_down(current_principal, current_emi, rate, elapsed - anchor)
        applied = min(event.amount, balance)
        balance -= applied
        remaining = current_tenure - elapsed
        spent = paid + applied

        if balance <= 0:
            new_emi = 0.0
            new_tenure = 0
        else:
            new_emi, new_tenure = requote(balance, rate, remaining, current_emi, old_cost - spent)

        if is_unpayable(new_tenure):
            logger.warning(
                f"Prepayment {event.id}: EMI {new_emi:,.0f} cannot amortize balance {balance:,.2f}, "
                f"EMI and payoff month unchanged"
            )
            outcomes.append(
                PrepaymentOutcome(
                    event_id=event.id,
                    amount=event.amount,
                    date=event.date,
                    interest_savings=0.0,
                    new_emi=new_emi,
                    new_payoff_month=UNPAYABLE,
                )
            )
            # The prepayment still came off the balance.
            current_principal = balance
            anchor = elapsed
            continue

        savings = old_cost - (spent + plan_cost(balance, new_emi, rate, new_tenure))

        logger.debug(
            f"Prepayment {event.id} at month {elapsed}: balance {balance:,.2f}, "
            f"EMI {current_emi:,.0f} -> {new_emi:,.0f}, payoff month {elapsed + new_tenure}, saves {savings:,.2f}"
        )

        outcomes.append(
            PrepaymentOutcome(
                event_id=event.id,
                amount=event.amount,
                date=event.date,
                interest_savings=savings,
                new_emi=new_emi,
                new_payoff_month=elapsed + new_tenure,
            )
        )
        total_savings += savings

        current_principal = balance
        current_emi = new_emi
        current_tenure = elapsed + new_tenure
        anchor = elapsed

    schedule = build_schedule(loan.principal, rate, loan.tenure_months, baseline_emi, loan.start_date, ordered)
    original_schedule = build_schedule(loan.principal, rate, loan.tenure_months, baseline_emi, loan.start_date)

    return EngineResult(
        loan=loan,
        baseline_emi=baseline_emi,
        schedule=tuple(schedule),
        original_schedule=tuple(original_schedule),
        outcomes=tuple(outcomes),
        total_savings=total_savings,
        skipped_event_ids=tuple(skipped),
    )
