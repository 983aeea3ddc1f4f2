"""Iteration counting logger for boostmon."""

from __future__ import annotations

import logging
from typing import List, Optional

from .base import BaseLogger, as_trajectory
from ..exceptions import ConfigurationError
from ..types import ArrayLike, BaseLearner, Trajectory


logger = logging.getLogger(__name__)


class IterationLogger(BaseLogger):
    """Count boosting iterations, optionally stopping at a fixed maximum.

    ``max_iterations`` also sizes the status field. A non-stopper keeps
    counting past it, and its status then overflows ``status_width``.

    Example:
        >>> counter = IterationLogger(is_stopper=True, max_iterations=100)
        >>> counter.log_step(7, y, pred, learner, offset=0.0, learning_rate=0.1)
        >>> counter.print_logger_status()
        '  7/100'
    """

    def __init__(
        self,
        is_stopper: bool = False,
        max_iterations: Optional[int] = None,
        *,
        name: str = "iterations",
    ) -> None:
        super().__init__(is_stopper=is_stopper, name=name)
        if max_iterations is not None and max_iterations < 0:
            raise ConfigurationError(
                f"max_iterations must be non-negative, got {max_iterations}"
            )
        if is_stopper and max_iterations is None:
            raise ConfigurationError(
                "An iteration stopper needs max_iterations",
                suggestion="Pass max_iterations or create the logger with is_stopper=False",
            )
        self.max_iterations = max_iterations
        self._iterations: List[int] = []

    @property
    def num_observations(self) -> int:
        return len(self._iterations)

    @property
    def status_width(self) -> int:  # type: ignore[override]
        if self.max_iterations is None:
            return 9
        return 2 * len(str(self.max_iterations)) + 1

    @property
    def current_iteration(self) -> int:
        """Most recently logged iteration."""
        self._require_observations("report the current iteration")
        return self._iterations[-1]

    def log_step(
        self,
        iteration: int,
        response: ArrayLike,
        prediction: ArrayLike,
        chosen_learner: BaseLearner,
        offset: float,
        learning_rate: float,
    ) -> None:
        self._iterations.append(int(iteration))

    def _stop_criterion(self) -> bool:
        assert self.max_iterations is not None  # enforced in __init__
        return self.max_iterations <= self._iterations[-1]

    def get_logged_data(self) -> Trajectory:
        return as_trajectory(self._iterations)

    def clear_logger_data(self) -> None:
        logger.debug("Clearing %d iterations from '%s'", len(self._iterations), self.name)
        self._iterations.clear()

    def _format_status(self) -> str:
        current = str(self._iterations[-1])
        if self.max_iterations is not None:
            current = f"{current}/{self.max_iterations}"
        return current.rjust(self.status_width)


__all__ = ["IterationLogger"]
