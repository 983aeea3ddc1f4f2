"""Configuration of the default boosting monitor.

This module provides a validated configuration object and a builder that
assembles the loggers a boosting front-end registers by default.
"""

import dataclasses
import logging
from typing import Optional

from .exceptions import ConfigurationError
from .loggers import (
    InbagRiskLogger,
    IterationLogger,
    LoggerRegistry,
    OobRiskLogger,
    TimeLogger,
    TimeUnit,
)
from .types import ArrayLike, HeldOutData, LossFunction


logger = logging.getLogger(__name__)

ITERATION_LOGGER_ID = "_iterations"
INBAG_RISK_LOGGER_ID = "_inbag_risk"
OOB_RISK_LOGGER_ID = "_oob_risk"
TIME_LOGGER_ID = "_time"


@dataclasses.dataclass(frozen=True)
class MonitorConfig:
    """Stopping and tracing configuration of a training session.

    Args:
        max_iterations: Number of boosting iterations to run at most
        eps_for_break: Relative risk improvement at or below which training
            stops; None keeps the risk loggers as plain trackers
        max_time: Time budget in ``time_unit``; None disables the time logger
        time_unit: Unit of ``max_time`` and of the logged elapsed time
        stop_if_all_stoppers_fulfilled: Require every stopper to agree
        trace: Print the status every ``trace`` iterations; 0 is silent
    """

    max_iterations: int = 100
    eps_for_break: Optional[float] = None
    max_time: Optional[int] = None
    time_unit: TimeUnit = TimeUnit.SECONDS
    stop_if_all_stoppers_fulfilled: bool = False
    trace: int = 0

    def __post_init__(self) -> None:
        """Validate the configuration."""
        if self.max_iterations <= 0:
            raise ConfigurationError(
                f"max_iterations must be positive, got {self.max_iterations}"
            )
        if self.max_time is not None and self.max_time < 0:
            raise ConfigurationError(f"max_time must be non-negative, got {self.max_time}")
        if self.trace < 0:
            raise ConfigurationError(f"trace must be non-negative, got {self.trace}")
        # Frozen dataclass: normalise the unit through object.__setattr__
        object.__setattr__(self, "time_unit", TimeUnit.parse(self.time_unit))

    def describe(self) -> str:
        """Return a human-readable description of the stopping rules."""
        parts = [f"max {self.max_iterations} iterations"]
        if self.eps_for_break is not None:
            parts.append(f"relative improvement <= {self.eps_for_break:g}")
        if self.max_time is not None:
            parts.append(f"max {self.max_time} {self.time_unit.value}")
        combine = " and " if self.stop_if_all_stoppers_fulfilled else " or "
        return combine.join(parts)


def build_registry(
    config: MonitorConfig,
    *,
    loss: Optional[LossFunction] = None,
    held_out_data: Optional[HeldOutData] = None,
    held_out_response: Optional[ArrayLike] = None,
) -> LoggerRegistry:
    """Assemble the default loggers for a training session.

    Args:
        config: Stopping configuration
        loss: Loss used for the risk loggers; without it no risk is tracked
        held_out_data: Held-out feature data keyed by data identifier
        held_out_response: Response of the held-out rows

    Returns:
        Registry with ``_iterations`` and, depending on the arguments,
        ``_inbag_risk``, ``_oob_risk`` and ``_time``

    Raises:
        ConfigurationError: If the held-out arguments are incomplete
    """
    has_held_out = held_out_data is not None or held_out_response is not None
    if has_held_out and (held_out_data is None or held_out_response is None):
        raise ConfigurationError(
            "held_out_data and held_out_response must be given together"
        )
    if has_held_out and loss is None:
        raise ConfigurationError(
            "Tracking the out-of-bag risk requires a loss",
            suggestion="Pass loss=... together with the held-out data",
        )

    registry = LoggerRegistry(
        stop_if_all_stoppers_fulfilled=config.stop_if_all_stoppers_fulfilled
    )
    registry.register(
        ITERATION_LOGGER_ID,
        IterationLogger(is_stopper=True, max_iterations=config.max_iterations),
    )

    use_eps = config.eps_for_break is not None
    eps = config.eps_for_break if use_eps else 0.0
    if loss is not None:
        registry.register(
            INBAG_RISK_LOGGER_ID,
            InbagRiskLogger(loss, is_stopper=use_eps and not has_held_out, eps_for_break=eps),
        )
    if has_held_out:
        registry.register(
            OOB_RISK_LOGGER_ID,
            OobRiskLogger(
                loss,
                held_out_data,
                held_out_response,
                is_stopper=use_eps,
                eps_for_break=eps,
            ),
        )
    if config.max_time is not None:
        registry.register(
            TIME_LOGGER_ID,
            TimeLogger(is_stopper=True, max_time=config.max_time, unit=config.time_unit),
        )

    logger.debug("Built registry %s for: %s", registry.logger_ids, config.describe())
    return registry


__all__ = [
    "MonitorConfig",
    "build_registry",
    "ITERATION_LOGGER_ID",
    "INBAG_RISK_LOGGER_ID",
    "OOB_RISK_LOGGER_ID",
    "TIME_LOGGER_ID",
]
