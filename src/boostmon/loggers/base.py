"""Base logger contract for boostmon.

Every tracking policy observes one boosting iteration at a time through
``log_step``, keeps its own trajectory, and may act as a stopper that asks
the boosting loop to halt.
"""

from abc import ABC, abstractmethod
from typing import Any

import numpy as np

from ..exceptions import no_observation_error, zero_risk_error
from ..types import ArrayLike, BaseLearner, Trajectory


class BaseLogger(ABC):
    """Abstract base class for all boostmon loggers.

    Subclasses append exactly one observation per ``log_step`` call and
    never mutate the arguments they receive.
    """

    #: Width of the field rendered by ``print_logger_status``.
    status_width: int = 17

    def __init__(self, is_stopper: bool = False, name: str | None = None):
        """Initialize the logger.

        Args:
            is_stopper: Whether this logger may stop training
            name: Label used in error messages and default column headers
        """
        self._is_stopper = bool(is_stopper)
        self.name = name or type(self).__name__

    @property
    def is_stopper(self) -> bool:
        """Whether the logger takes part in the stop decision."""
        return self._is_stopper

    def get_if_logger_is_stopper(self) -> bool:
        """Return whether the logger takes part in the stop decision."""
        return self._is_stopper

    @property
    @abstractmethod
    def num_observations(self) -> int:
        """Number of ``log_step`` calls since construction or the last clear."""
        pass

    @abstractmethod
    def log_step(
        self,
        iteration: int,
        response: ArrayLike,
        prediction: ArrayLike,
        chosen_learner: BaseLearner,
        offset: float,
        learning_rate: float,
    ) -> None:
        """Record one boosting iteration.

        Args:
            iteration: Current iteration, starting at 1
            response: Training response vector
            prediction: Cumulative training prediction after this iteration
            chosen_learner: Base learner selected in this iteration
            offset: Initial prediction of the model
            learning_rate: Shrinkage applied to the learner's contribution
        """
        pass

    def reached_stop_criteria(self) -> bool:
        """Return True if this logger wants training to stop.

        Non-stoppers always return False. Stoppers raise StateError when
        nothing has been logged yet.
        """
        if not self._is_stopper:
            return False
        self._require_observations("evaluate its stop criterion")
        return self._stop_criterion()

    @abstractmethod
    def _stop_criterion(self) -> bool:
        """Evaluate the stop rule on a non-empty trajectory."""
        pass

    @abstractmethod
    def get_logged_data(self) -> Trajectory:
        """Return the recorded trajectory as a float64 vector in call order."""
        pass

    @abstractmethod
    def clear_logger_data(self) -> None:
        """Reset all accumulators before a new training run."""
        pass

    def print_logger_status(self) -> str:
        """Render the latest observation in a ``status_width`` wide field."""
        self._require_observations("print its status")
        return self._format_status()

    @abstractmethod
    def _format_status(self) -> str:
        """Format the latest observation; only called when one exists."""
        pass

    def _require_observations(self, operation: str) -> None:
        if self.num_observations == 0:
            raise no_observation_error(self.name, operation)

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(name={self.name!r}, is_stopper={self._is_stopper}, "
            f"observations={self.num_observations})"
        )


# Utility functions


def relative_improvement(previous: float, current: float, logger_name: str = "logger") -> float:
    """Relative risk improvement ``(previous - current) / previous``.

    Raises:
        RiskComputationError: If ``previous`` is zero
    """
    if previous == 0:
        raise zero_risk_error(logger_name)
    return (previous - current) / previous


def as_trajectory(values: Any) -> Trajectory:
    """Copy a sequence of numbers into a 1-D float64 vector."""
    return np.array(values, dtype=np.float64).reshape(-1)


__all__ = ["BaseLogger", "relative_improvement", "as_trajectory"]
