"""Value objects for the amortization engine.

Every object here is created fresh per calculation and never mutated after
construction. Inputs (LoanTerms, PrepaymentEvent) discard the sign of their
numeric fields, matching how a UI coerces negative entries to their magnitude.
"""

from __future__ import annotations

import math
import uuid
from dataclasses import dataclass, field
from datetime import date

# Tenure of an EMI that never covers the monthly interest.
UNPAYABLE = math.inf


def is_unpayable(months: float) -> bool:
    """True if a tenure value is the unpayable sentinel."""
    return math.isinf(months)


@dataclass(frozen=True)
class LoanTerms:
    """Fixed-rate, fixed-tenure loan.

    Attributes:
        principal: Amount borrowed.
        annual_rate_percent: Nominal annual rate in percent (8.5 for 8.5%).
        tenure_months: Repayment term in months.
        start_date: Date of the first installment.
    """

    principal: float
    annual_rate_percent: float
    tenure_months: int
    start_date: date

    def __post_init__(self):
        object.__setattr__(self, "principal", abs(float(self.principal)))
        object.__setattr__(self, "annual_rate_percent", abs(float(self.annual_rate_percent)))
        object.__setattr__(self, "tenure_months", abs(int(self.tenure_months)))

    @classmethod
    def from_years(
        cls,
        principal: float,
        annual_rate_percent: float,
        tenure_years: float,
        start_date: date,
    ) -> LoanTerms:
        """Build terms from a tenure in years (rounded to whole months)."""
        return cls(principal, annual_rate_percent, round(abs(tenure_years) * 12), start_date)

    @property
    def monthly_rate(self) -> float:
        return self.annual_rate_percent / 100 / 12


@dataclass(frozen=True)
class PrepaymentEvent:
    """A lump-sum payment applied straight to principal on a given date."""

    amount: float
    date: date
    id: str = field(default_factory=lambda: uuid.uuid4().hex)

    def __post_init__(self):
        object.__setattr__(self, "amount", abs(float(self.amount)))


@dataclass(frozen=True)
class AmortizationRow:
    """One month of a schedule.

    ``payment`` includes any prepayment made that month, so
    ``payment == principal_component + interest_component`` on every row.
    """

    month: int
    date: date
    payment: float
    principal_component: float
    interest_component: float
    remaining_balance: float
    cumulative_interest: float
    prepayment: float = 0.0


@dataclass(frozen=True)
class ScheduleSummary:
    """Totals over a schedule."""

    months: int
    total_payments: float
    total_interest: float


@dataclass(frozen=True)
class PrepaymentOutcome:
    """Effect of one processed prepayment event.

    Attributes:
        event_id: Id of the PrepaymentEvent this outcome belongs to.
        amount: Prepaid amount.
        date: Prepayment date.
        interest_savings: Cost of the plan before the event minus cost after it.
        new_emi: Installment over the rest of the horizon after the prepayment.
        new_payoff_month: Months from loan start until payoff, or UNPAYABLE.
    """

    event_id: str
    amount: float
    date: date
    interest_savings: float
    new_emi: float
    new_payoff_month: float

    @property
    def unpayable(self) -> bool:
        return is_unpayable(self.new_payoff_month)


@dataclass(frozen=True)
class EngineResult:
    """Everything one evaluation produces."""

    loan: LoanTerms
    baseline_emi: float
    schedule: tuple[AmortizationRow, ...]
    original_schedule: tuple[AmortizationRow, ...]
    outcomes: tuple[PrepaymentOutcome, ...]
    total_savings: float
    skipped_event_ids: tuple[str, ...] = ()

    @property
    def final_emi(self) -> float:
        """EMI in force after the last payable prepayment."""
        for outcome in reversed(self.outcomes):
            if not outcome.unpayable:
                return outcome.new_emi
        return self.baseline_emi

    @property
    def final_payoff_month(self) -> float:
        """Payoff month of the plan in force after the last payable prepayment."""
        for outcome in reversed(self.outcomes):
            if not outcome.unpayable:
                return outcome.new_payoff_month
        return self.loan.tenure_months

    @property
    def tenure_reduction_months(self) -> int:
        """Months saved by keeping the baseline EMI and paying off early.

        Measured on the display schedules, i.e. the reduce-tenure view of the
        same prepayments whose reduce-EMI view is in ``outcomes``.
        """
        return max(0, len(self.original_schedule) - len(self.schedule))
