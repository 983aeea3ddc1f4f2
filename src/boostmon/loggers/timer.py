"""Elapsed wall-clock time logger for boostmon."""

from __future__ import annotations

import enum
import logging
import time
from typing import List, Optional

from .base import BaseLogger, as_trajectory
from ..exceptions import ConfigurationError
from ..types import ArrayLike, BaseLearner, Trajectory


logger = logging.getLogger(__name__)


class TimeUnit(str, enum.Enum):
    """Units the elapsed time can be reported in."""

    MICROSECONDS = "microseconds"
    SECONDS = "seconds"
    MINUTES = "minutes"

    @property
    def nanoseconds(self) -> int:
        """Length of one unit in nanoseconds."""
        return _NANOSECONDS_PER_UNIT[self]

    @classmethod
    def parse(cls, value: "TimeUnit | str") -> "TimeUnit":
        """Convert a unit name into a TimeUnit, raising ConfigurationError."""
        try:
            return cls(value)
        except ValueError:
            allowed = ", ".join(repr(unit.value) for unit in cls)
            raise ConfigurationError(
                f"Time unit has to be one of {allowed}, got {value!r}"
            ) from None


_NANOSECONDS_PER_UNIT = {
    TimeUnit.MICROSECONDS: 1_000,
    TimeUnit.SECONDS: 1_000_000_000,
    TimeUnit.MINUTES: 60_000_000_000,
}


class TimeLogger(BaseLogger):
    """Track the time elapsed since the first logged iteration.

    The start instant is captured lazily by the first ``log_step`` after
    construction or ``clear_logger_data``. Elapsed durations are truncated
    to whole units of ``unit``. Values come from a monotonic wall clock and
    are therefore not reproducible between runs.
    """

    def __init__(
        self,
        is_stopper: bool = False,
        max_time: Optional[int] = None,
        unit: TimeUnit | str = TimeUnit.SECONDS,
        *,
        name: str = "time",
    ) -> None:
        super().__init__(is_stopper=is_stopper, name=name)
        self.unit = TimeUnit.parse(unit)
        if max_time is not None and max_time < 0:
            raise ConfigurationError(f"max_time must be non-negative, got {max_time}")
        if is_stopper and max_time is None:
            raise ConfigurationError(
                "A time stopper needs max_time",
                suggestion="Pass max_time or create the logger with is_stopper=False",
            )
        self.max_time = max_time
        self._start_ns: Optional[int] = None
        self._elapsed: List[int] = []

    @property
    def num_observations(self) -> int:
        return len(self._elapsed)

    @property
    def start_instant(self) -> Optional[int]:
        """Monotonic clock reading (ns) of the first step, or None."""
        return self._start_ns

    def log_step(
        self,
        iteration: int,
        response: ArrayLike,
        prediction: ArrayLike,
        chosen_learner: BaseLearner,
        offset: float,
        learning_rate: float,
    ) -> None:
        now = time.perf_counter_ns()
        if not self._elapsed or self._start_ns is None:
            self._start_ns = now
        self._elapsed.append((now - self._start_ns) // self.unit.nanoseconds)

    def _stop_criterion(self) -> bool:
        assert self.max_time is not None  # enforced in __init__
        if self._elapsed[-1] >= self.max_time:
            logger.debug(
                "'%s' reached its time budget: %d >= %d %s",
                self.name,
                self._elapsed[-1],
                self.max_time,
                self.unit.value,
            )
            return True
        return False

    def get_logged_data(self) -> Trajectory:
        return as_trajectory(self._elapsed)

    def clear_logger_data(self) -> None:
        logger.debug("Clearing %d time values from '%s'", len(self._elapsed), self.name)
        self._elapsed.clear()
        self._start_ns = None

    def _format_status(self) -> str:
        return f"{self._elapsed[-1]:>{self.status_width}d}"


__all__ = ["TimeLogger", "TimeUnit"]
