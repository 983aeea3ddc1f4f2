"""Logger registry for boostmon.

The registry owns the loggers of one training session, fans every
iteration out to them, and combines their stop flags into the decision
the boosting loop acts on.
"""

from __future__ import annotations

import dataclasses
import logging
from typing import Dict, Iterator, List, Mapping, Optional, Tuple

import numpy as np

from .base import BaseLogger
from ..exceptions import ConfigurationError, InconsistentTrajectoryError
from ..types import ArrayLike, BaseLearner, TrajectoryDict, Vector


logger = logging.getLogger(__name__)

STATUS_SEPARATOR = " | "


@dataclasses.dataclass(frozen=True, eq=False)
class LoggedData:
    """Trajectories of all registered loggers as one table.

    Args:
        logger_ids: Column names, in registration order
        values: Float64 matrix with one row per iteration and one column
            per logger
    """

    logger_ids: Tuple[str, ...]
    values: np.ndarray

    @property
    def num_iterations(self) -> int:
        return int(self.values.shape[0])

    def column(self, logger_id: str) -> Vector:
        """Return a copy of one logger's trajectory."""
        try:
            index = self.logger_ids.index(logger_id)
        except ValueError:
            raise KeyError(logger_id) from None
        return self.values[:, index].copy()

    def to_dict(self) -> TrajectoryDict:
        return {name: self.column(name) for name in self.logger_ids}

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, LoggedData):
            return NotImplemented
        return self.logger_ids == other.logger_ids and np.array_equal(self.values, other.values)


class LoggerRegistry:
    """Ordered collection of uniquely named loggers.

    Args:
        loggers: Initial loggers keyed by id, registered in iteration order
        stop_if_all_stoppers_fulfilled: If True, ``stop_criteria_reached``
            requires every stopper to agree instead of any one of them

    Example:
        >>> registry = LoggerRegistry({"iterations": IterationLogger(True, 100)})
        >>> registry.register("inbag", InbagRiskLogger(squared_error))
        >>> for m in range(1, 101):
        ...     registry.log_step(m, y, pred, learner, offset, 0.05)
        ...     if registry.any_stop_criteria_reached():
        ...         break
    """

    def __init__(
        self,
        loggers: Optional[Mapping[str, BaseLogger]] = None,
        *,
        stop_if_all_stoppers_fulfilled: bool = False,
    ) -> None:
        self._entries: Dict[str, BaseLogger] = {}
        self.stop_if_all_stoppers_fulfilled = stop_if_all_stoppers_fulfilled
        for logger_id, entry in (loggers or {}).items():
            self.register(logger_id, entry)

    def register(self, logger_id: str, entry: BaseLogger) -> None:
        """Add a logger under a new, unique id."""
        if not isinstance(entry, BaseLogger):
            raise ConfigurationError(
                f"Logger '{logger_id}' must be a BaseLogger, got {type(entry).__name__}"
            )
        if logger_id in self._entries:
            raise ConfigurationError(
                f"A logger with id '{logger_id}' is already registered",
                suggestion="Use a distinct id for every logger",
            )
        self._entries[logger_id] = entry
        logger.debug("Registered logger '%s': %r", logger_id, entry)

    @property
    def logger_ids(self) -> List[str]:
        return list(self._entries)

    def stoppers(self) -> List[str]:
        """Ids of the loggers that take part in the stop decision."""
        return [key for key, entry in self._entries.items() if entry.is_stopper]

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, logger_id: object) -> bool:
        return logger_id in self._entries

    def __getitem__(self, logger_id: str) -> BaseLogger:
        return self._entries[logger_id]

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def log_step(
        self,
        iteration: int,
        response: ArrayLike,
        prediction: ArrayLike,
        chosen_learner: BaseLearner,
        offset: float,
        learning_rate: float,
    ) -> None:
        """Forward one iteration to every logger, in registration order."""
        for entry in self._entries.values():
            entry.log_step(
                iteration, response, prediction, chosen_learner, offset, learning_rate
            )

    def any_stop_criteria_reached(self) -> bool:
        """True if at least one stopper reached its criterion."""
        return any(entry.reached_stop_criteria() for entry in self._entries.values())

    def stop_criteria_reached(self) -> bool:
        """Stop decision under the configured combination rule."""
        if not self.stop_if_all_stoppers_fulfilled:
            return self.any_stop_criteria_reached()
        stoppers = [entry for entry in self._entries.values() if entry.is_stopper]
        return bool(stoppers) and all(entry.reached_stop_criteria() for entry in stoppers)

    def clear_all(self) -> None:
        """Reset every logger; required before training again."""
        for entry in self._entries.values():
            entry.clear_logger_data()
        logger.debug("Cleared %d loggers", len(self._entries))

    def collect_logged_data(self) -> LoggedData:
        """Assemble all trajectories into one iterations x loggers table."""
        columns = [entry.get_logged_data() for entry in self._entries.values()]
        lengths = {key: column.size for key, column in zip(self._entries, columns)}
        if len(set(lengths.values())) > 1:
            raise InconsistentTrajectoryError(
                f"Logged trajectories differ in length: {lengths}",
                suggestion="Drive all loggers through the registry and clear them together",
            )
        if columns:
            values = np.column_stack(columns).astype(np.float64, copy=False)
        else:
            values = np.empty((0, 0), dtype=np.float64)
        return LoggedData(logger_ids=tuple(self._entries), values=values)

    def _column_width(self, logger_id: str) -> int:
        return max(len(logger_id), self._entries[logger_id].status_width)

    def render_header(self) -> str:
        """Logger ids aligned with the fields of ``render_status_line``."""
        return STATUS_SEPARATOR.join(
            key.rjust(self._column_width(key)) for key in self._entries
        )

    def render_status_line(self) -> str:
        """Concatenate the status of every logger, in registration order.

        Fields are padded to the longer of the logger id and its status
        width but never clipped. A non-stopping IterationLogger that runs past
        its max_iterations renders a wider status and shifts the columns
        after it.
        """
        return STATUS_SEPARATOR.join(
            entry.print_logger_status().rjust(self._column_width(key))
            for key, entry in self._entries.items()
        )


__all__ = ["LoggerRegistry", "LoggedData", "STATUS_SEPARATOR"]
