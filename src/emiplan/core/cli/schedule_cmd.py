"""emiplan schedule — print the month-by-month amortization table."""

from __future__ import annotations

import click

from .common import parse_prepayments


@click.command()
@click.argument("principal", type=float)
@click.argument("rate", type=float)
@click.argument("years", type=float)
@click.option("--start", default=None, help="First installment date (YYYY-MM-DD).")
@click.option(
    "--prepay",
    "prepayments",
    multiple=True,
    callback=parse_prepayments,
    help="Prepayment as AMOUNT@YYYY-MM-DD; repeatable.",
)
@click.option("--limit", type=int, default=None, help="Only show the first N months.")
@click.pass_obj
def schedule(config, principal: float, rate: float, years: float, start, prepayments, limit) -> None:
    """Show the amortization schedule for PRINCIPAL at RATE percent over YEARS."""
    from rich.console import Console
    from rich.table import Table

    from emiplan.amortization import build_schedule, compute_emi, summarize_schedule, validate_loan
    from emiplan.core.cli.common import build_loan, fail, money, resolve_start_date
    from emiplan.core.exceptions import EmiPlanError

    loan = build_loan(principal, rate, years, resolve_start_date(config, start))
    try:
        validate_loan(loan)
        installment = compute_emi(loan.principal, loan.annual_rate_percent, loan.tenure_months)
        rows = build_schedule(
            loan.principal,
            loan.annual_rate_percent,
            loan.tenure_months,
            installment,
            loan.start_date,
            prepayments,
        )
    except EmiPlanError as e:
        fail(str(e))

    table = Table(title=f"Amortization schedule (EMI {money(config, installment)})")
    for header in ("Month", "Date", "Payment", "Principal", "Interest", "Balance", "Prepaid"):
        table.add_column(header, justify="right")
    for row in rows[:limit] if limit else rows:
        table.add_row(
            str(row.month),
            row.date.isoformat(),
            money(config, row.payment),
            money(config, row.principal_component),
            money(config, row.interest_component),
            money(config, row.remaining_balance),
            money(config, row.prepayment),
        )
    Console().print(table)

    summary = summarize_schedule(rows)
    click.echo(f"Months: {summary.months}")
    click.echo(f"Total payments: {money(config, summary.total_payments)}")
    click.echo(f"Total interest: {money(config, summary.total_interest)}")
