"""Display helpers for engine output.

Cosmetic only: nothing here feeds back into a calculation.
"""

from .emi import round_to_unit

LAKH = 100_000
CRORE = 10_000_000


def _group_indian(digits: str) -> str:
    # Last three digits, then pairs: 12,34,56,789
    if len(digits) <= 3:
        return digits
    head, tail = digits[:-3], digits[-3:]
    pairs = []
    while len(head) > 2:
        pairs.insert(0, head[-2:])
        head = head[:-2]
    if head:
        pairs.insert(0, head)
    return ",".join(pairs + [tail])


def format_currency(amount: float, symbol: str = "₹", grouping: str = "indian") -> str:
    """Format an amount in whole currency units.

    Zero renders as an empty string so blank inputs stay blank.

    Args:
        amount: Value to format
        symbol: Currency symbol prefix
        grouping: "indian" (12,34,567) or "western" (1,234,567)
    """
    if amount == 0:
        return ""
    value = int(round_to_unit(abs(amount)))
    digits = _group_indian(str(value)) if grouping == "indian" else f"{value:,}"
    sign = "-" if amount < 0 else ""
    return f"{sign}{symbol}{digits}"


def describe_amount(amount: float) -> str:
    """Short magnitude phrase, e.g. 1_200_000 -> "12.0 lakh"."""
    if amount == 0:
        return ""
    if amount < 1000:
        return f"{amount:g}"
    if amount < LAKH:
        return f"{amount / 1000:.1f} thousand"
    if amount < CRORE:
        return f"{amount / LAKH:.1f} lakh"
    return f"{amount / CRORE:.1f} crore"


def format_months(months: float) -> str:
    """Render a month count as years and months, e.g. 230 -> "19y 2m"."""
    if months == float("inf"):
        return "never"
    years, rest = divmod(int(months), 12)
    if years and rest:
        return f"{years}y {rest}m"
    if years:
        return f"{years}y"
    return f"{rest}m"
