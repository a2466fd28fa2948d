"""
Custom exception hierarchy for kcgraph.

All exceptions inherit from KcGraphError for easy catching.
"""


class KcGraphError(Exception):
    """
    Base exception for all kcgraph errors.
    All custom exceptions should inherit from this class.
    """

    def __init__(self, message: str, context: dict | None = None):
        """
        Initialize kcgraph error.
        Args:
            message: Error message
            context: Optional context dictionary with additional error details
        """
        super().__init__(message)
        self.message = message
        self.context = context or {}


class InvalidArgumentError(KcGraphError, ValueError):
    """
    Invalid argument errors.
    Raised when a public entry point receives a missing or malformed argument.
    The offending parameter name is stored in context["argument"].
    """

    pass


class ConfigurationError(KcGraphError):
    """
    Configuration errors.
    Raised when configuration is invalid or missing required values.
    """

    pass
