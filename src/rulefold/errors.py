"""Exception hierarchy for rulefold.

Validation failures are never raised; they are reported through
:class:`~rulefold.domain.outcome.Invalid`. These exceptions cover
programming and configuration mistakes only.
"""


class RulefoldError(Exception):
    """Base exception for all rulefold errors."""


class SelectorError(RulefoldError, ValueError):
    """Raised at definition time when a property selector cannot be resolved."""


class ConfigError(RulefoldError):
    """Raised when a settings file cannot be read or parsed."""
