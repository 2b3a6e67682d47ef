"""emiplan — EMI amortization and prepayment impact engine."""

__version__ = "0.1.0"
