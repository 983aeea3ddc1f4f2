"""Base exception classes for boostmon.

This module defines the exception hierarchy used by the boosting loggers.
All boostmon-specific exceptions inherit from BoostmonError. None of them
describe transient failures: they signal configuration or programming
errors and are surfaced to the caller that drives the training loop.
"""

from typing import Iterable


class BoostmonError(Exception):
    """Base exception class for all boostmon errors."""

    def __init__(self, message: str, suggestion: str | None = None):
        """Initialize with error message and optional suggestion.

        Args:
            message: The error message
            suggestion: Optional suggestion for fixing the error
        """
        self.message = message
        self.suggestion = suggestion

        full_message = message
        if suggestion:
            full_message += f"\n\nSuggestion: {suggestion}"

        super().__init__(full_message)


class ConfigurationError(BoostmonError):
    """Raised when a logger or registry is configured with invalid values."""
    pass


class UnknownFeatureError(ConfigurationError, LookupError):
    """Raised when a base learner's feature is missing from the held-out data."""
    pass


class RiskComputationError(BoostmonError, ArithmeticError):
    """Raised when a relative risk improvement cannot be computed."""
    pass


class StateError(BoostmonError):
    """Raised when a logger is queried before it has recorded anything."""
    pass


class InconsistentTrajectoryError(StateError):
    """Raised when registered loggers hold trajectories of different lengths."""
    pass


# Convenience functions for common error patterns

def unknown_feature_error(identifier: str, available: Iterable[str]) -> UnknownFeatureError:
    """Create an UnknownFeatureError listing the features that do exist."""
    known = ", ".join(repr(name) for name in sorted(available)) or "<none>"
    return UnknownFeatureError(
        f"Feature '{identifier}' is not part of the held-out data (available: {known})",
        "Prepare the held-out data with the same features as the training data",
    )


def zero_risk_error(logger_name: str) -> RiskComputationError:
    """Create a RiskComputationError for a zero-valued previous risk."""
    return RiskComputationError(
        f"Logger '{logger_name}' cannot compute a relative improvement: previous risk is 0",
        "Use a loss whose empirical risk stays positive, or do not use this logger as a stopper",
    )


def no_observation_error(logger_name: str, operation: str) -> StateError:
    """Create a StateError for a query made before the first logged step."""
    return StateError(
        f"Logger '{logger_name}' has no logged steps; cannot {operation}",
        "Call log_step() at least once (and not right after clear_logger_data())",
    )
