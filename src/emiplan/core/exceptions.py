"""
emiplan exception hierarchy.

All emiplan exceptions inherit from EmiPlanError, making it easy for consumers
to catch library-level errors while still distinguishing specific failure modes.

An EMI that can never amortize its principal is not an exception: the tenure
solver reports it as a value (see ``emiplan.amortization.models.UNPAYABLE``).
"""


class EmiPlanError(Exception):
    """Base exception class for all emiplan errors."""


class ValidationError(EmiPlanError):
    """Raised when loan terms fail the positivity check before a calculation.

    Recoverable: the caller should reject the request and let the user
    correct the input.
    """


class InvalidTermError(EmiPlanError):
    """Raised for degenerate numeric input (zero months, zero effective rate).

    Reaching this means a caller skipped validation; it is a contract
    violation rather than a user error.
    """


class ConfigurationError(EmiPlanError):
    """Raised for configuration errors (unreadable file, invalid values)."""
