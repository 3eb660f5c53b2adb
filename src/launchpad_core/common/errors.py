"""
Exceptions raised outside the pricing engine.

The engine itself never raises for numeric input; these cover the layers
around it: environment configuration and pre-submit trade checks.
"""


class ConfigurationError(Exception):
    """Raised when an environment setting cannot be parsed or is out of range."""


class TradeValidationError(Exception):
    """Raised when a trade is rejected before submission. The message is shown to the user as-is."""
