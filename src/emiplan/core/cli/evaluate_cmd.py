"""emiplan evaluate — savings from one or more prepayments."""

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
    required=True,
    callback=parse_prepayments,
    help="Prepayment as AMOUNT@YYYY-MM-DD; repeatable.",
)
@click.pass_obj
def evaluate(config, principal: float, rate: float, years: float, start, prepayments) -> None:
    """Calculate prepayment benefits for PRINCIPAL at RATE percent over YEARS."""
    from rich.console import Console
    from rich.table import Table

    from emiplan.amortization import evaluate as evaluate_loan
    from emiplan.amortization.formatting import format_months
    from emiplan.core.cli.common import build_loan, fail, money, resolve_start_date
    from emiplan.core.exceptions import EmiPlanError

    loan = build_loan(principal, rate, years, resolve_start_date(config, start))
    try:
        result = evaluate_loan(loan, prepayments)
    except EmiPlanError as e:
        fail(str(e))

    table = Table(title="Prepayment impact")
    for header in ("Event", "Date", "Amount", "Interest saved", "New EMI", "Payoff month"):
        table.add_column(header, justify="right")
    for outcome in result.outcomes:
        table.add_row(
            outcome.event_id,
            outcome.date.isoformat(),
            money(config, outcome.amount),
            money(config, outcome.interest_savings),
            money(config, outcome.new_emi),
            "unpayable" if outcome.unpayable else str(outcome.new_payoff_month),
        )
    Console().print(table)

    click.echo(f"Initial EMI: {money(config, result.baseline_emi)}")
    click.echo(f"Final EMI: {money(config, result.final_emi)}")
    click.echo(f"Total savings: {money(config, result.total_savings)}")
    click.echo(f"Loan tenure reduction: {format_months(result.tenure_reduction_months)}")
    if result.skipped_event_ids:
        click.echo(f"Skipped (outside loan window): {', '.join(result.skipped_event_ids)}")
