"""emiplan emi — quote the baseline EMI."""

from __future__ import annotations

import click


@click.command()
@click.argument("principal", type=float)
@click.argument("rate", type=float)
@click.argument("years", type=float)
@click.pass_obj
def emi(config, principal: float, rate: float, years: float) -> None:
    """Print the monthly installment for PRINCIPAL at RATE percent over YEARS."""
    from datetime import date

    from emiplan.amortization import compute_emi, describe_amount, validate_loan
    from emiplan.core.cli.common import build_loan, fail, money
    from emiplan.core.exceptions import EmiPlanError

    loan = build_loan(principal, rate, years, date.today())
    try:
        validate_loan(loan)
        value = compute_emi(loan.principal, loan.annual_rate_percent, loan.tenure_months)
    except EmiPlanError as e:
        fail(str(e))

    click.echo(f"EMI: {money(config, value)} ({describe_amount(value)}) for {loan.tenure_months} months")
