"""Amortization engine — EMI, schedules, tenure and prepayment impact."""

from .dates import add_months, months_between
from .emi import compute_emi
from .formatting import describe_amount, format_currency
from .models import (
    UNPAYABLE,
    AmortizationRow,
    EngineResult,
    LoanTerms,
    PrepaymentEvent,
    PrepaymentOutcome,
    ScheduleSummary,
    is_unpayable,
)
from .prepayment import evaluate, validate_loan
from .schedule import build_schedule, summarize_schedule
from .tenure import solve_tenure_months

__all__ = [
    "UNPAYABLE",
    "AmortizationRow",
    "EngineResult",
    "LoanTerms",
    "PrepaymentEvent",
    "PrepaymentOutcome",
    "ScheduleSummary",
    "add_months",
    "build_schedule",
    "compute_emi",
    "describe_amount",
    "evaluate",
    "format_currency",
    "is_unpayable",
    "months_between",
    "solve_tenure_months",
    "summarize_schedule",
    "validate_loan",
]
