"""Calendar-month arithmetic used to place prepayments on a schedule."""

from datetime import date

from dateutil.relativedelta import relativedelta


def months_between(start: date, end: date) -> int:
    """Whole calendar months from start to end, ignoring the day of month.

    Negative when end falls in an earlier month than start.
    """
    return (end.year * 12 + end.month) - (start.year * 12 + start.month)


def add_months(start: date, months: int) -> date:
    """Advance by calendar months, clamping to the last day of short months."""
    return start + relativedelta(months=months)
