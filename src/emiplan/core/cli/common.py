"""Shared setup and parsing for CLI commands."""

from __future__ import annotations

import sys
from datetime import date, datetime

import click

from emiplan.amortization import LoanTerms, PrepaymentEvent, format_currency
from emiplan.core.config import Config
from emiplan.core.exceptions import ConfigurationError
from emiplan.core.utils.logging import configure_logging

DATE_FORMAT = "%Y-%m-%d"


def init_context(ctx: click.Context, config_file: str | None, log_level: str | None) -> None:
    """Load config, configure logging and stash the config on the context."""
    try:
        config = Config(config_file=config_file)
    except ConfigurationError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    configure_logging(config, level=log_level)
    ctx.obj = config


def parse_date(value: str) -> date:
    try:
        return datetime.strptime(value, DATE_FORMAT).date()
    except ValueError as e:
        raise click.BadParameter(f"expected a date like 2025-01-31, got {value!r}") from e


def parse_prepayments(ctx: click.Context, param: click.Parameter, values: tuple[str, ...]) -> list[PrepaymentEvent]:
    """Click callback turning AMOUNT@DATE strings into PrepaymentEvents."""
    events = []
    for index, value in enumerate(values, start=1):
        amount_str, sep, date_str = value.partition("@")
        if not sep:
            raise click.BadParameter(f"expected AMOUNT@YYYY-MM-DD, got {value!r}")
        try:
            amount = float(amount_str.replace(",", "").replace("_", ""))
        except ValueError as e:
            raise click.BadParameter(f"invalid amount in {value!r}") from e
        events.append(PrepaymentEvent(amount=amount, date=parse_date(date_str), id=f"p{index}"))
    return events


def resolve_start_date(config: Config, start: str | None) -> date:
    """Command-line start date, else the configured default, else today."""
    if start:
        return parse_date(start)
    return config.validated().defaults.start_date or date.today()


def build_loan(principal: float, rate: float, years: float, start_date: date) -> LoanTerms:
    return LoanTerms.from_years(principal, rate, years, start_date)


def money(config: Config, amount: float) -> str:
    """Format an amount with the configured currency style ("-" for zero)."""
    return format_currency(
        amount,
        symbol=config.get("display.currency_symbol", "₹"),
        grouping=config.get("display.grouping", "indian"),
    ) or "-"


def fail(message: str) -> None:
    click.echo(f"Error: {message}", err=True)
    sys.exit(1)
