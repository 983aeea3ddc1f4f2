"""Empirical risk loggers for boostmon.

Two loggers track the empirical risk of the boosting model:

* ``InbagRiskLogger`` evaluates the loss on the training data, using the
  cumulative prediction supplied by the boosting loop.
* ``OobRiskLogger`` evaluates the loss on held-out data. It keeps its own
  shadow prediction for the held-out rows and updates it with the learner
  chosen in every iteration, exactly like the boosting loop updates the
  training prediction:

  .. code-block:: text

      f[0]  = offset
      f[m]  = f[m-1] + learning_rate * learner_m.predict(x_oob)
      R[m]  = mean(loss(y_oob, f[m]))

Both may act as stoppers. With risks ``R[m-1]`` and ``R[m]`` the relative
improvement ``(R[m-1] - R[m]) / R[m-1]`` is compared to ``eps_for_break``
and training stops once it is less than or equal to that threshold.
"""

from __future__ import annotations

import logging
from typing import List

import numpy as np

from .base import BaseLogger, as_trajectory, relative_improvement
from ..exceptions import ConfigurationError, unknown_feature_error
from ..types import ArrayLike, BaseLearner, HeldOutData, LossFunction, Trajectory, Vector


logger = logging.getLogger(__name__)


def empirical_risk(loss: LossFunction, response: ArrayLike, prediction: ArrayLike) -> float:
    """Average the loss over all observations.

    A loss that already aggregates (returning one value, e.g. an AUC) is
    averaged over that single value and therefore returned unchanged.
    """
    values = np.asarray(loss(response, prediction), dtype=np.float64)
    return float(np.mean(values))


class _RiskLogger(BaseLogger):
    """Shared trajectory, stop rule and status format of the risk loggers."""

    def __init__(
        self,
        loss: LossFunction,
        is_stopper: bool = False,
        eps_for_break: float = 0.0,
        *,
        name: str,
    ) -> None:
        super().__init__(is_stopper=is_stopper, name=name)
        if not callable(loss):
            raise ConfigurationError(
                f"loss must be callable, got {type(loss).__name__}",
                suggestion="Pass a function loss(response, prediction) -> values",
            )
        self.loss = loss
        self.eps_for_break = float(eps_for_break)
        self._tracked_risk: List[float] = []

    @property
    def num_observations(self) -> int:
        return len(self._tracked_risk)

    @property
    def current_risk(self) -> float:
        """Most recently logged risk."""
        self._require_observations("report its current risk")
        return self._tracked_risk[-1]

    def _stop_criterion(self) -> bool:
        if len(self._tracked_risk) < 2:
            return False
        improvement = relative_improvement(
            self._tracked_risk[-2], self._tracked_risk[-1], self.name
        )
        if improvement <= self.eps_for_break:
            logger.debug(
                "'%s' reached its stop criterion: relative improvement %.6g <= %.6g",
                self.name,
                improvement,
                self.eps_for_break,
            )
            return True
        return False

    def get_logged_data(self) -> Trajectory:
        return as_trajectory(self._tracked_risk)

    def clear_logger_data(self) -> None:
        logger.debug("Clearing %d risk values from '%s'", len(self._tracked_risk), self.name)
        self._tracked_risk.clear()

    def _format_status(self) -> str:
        return f"{self._tracked_risk[-1]:>{self.status_width}.2f}"


class InbagRiskLogger(_RiskLogger):
    """Track the empirical risk on the training data.

    The loss used here may differ from the one the model is trained with.
    """

    def __init__(
        self,
        loss: LossFunction,
        is_stopper: bool = False,
        eps_for_break: float = 0.0,
        *,
        name: str = "inbag_risk",
    ) -> None:
        super().__init__(loss, is_stopper, eps_for_break, name=name)

    def log_step(
        self,
        iteration: int,
        response: ArrayLike,
        prediction: ArrayLike,
        chosen_learner: BaseLearner,
        offset: float,
        learning_rate: float,
    ) -> None:
        self._tracked_risk.append(empirical_risk(self.loss, response, prediction))


class OobRiskLogger(_RiskLogger):
    """Track the empirical risk on held-out data.

    Args:
        loss: Loss used to compute the held-out risk
        held_out_data: Feature data of the held-out rows, keyed by the
            data identifier of the base learners
        held_out_response: Response of the held-out rows
        is_stopper: Whether the logger may stop training
        eps_for_break: Relative improvement at or below which to stop
    """

    def __init__(
        self,
        loss: LossFunction,
        held_out_data: HeldOutData,
        held_out_response: ArrayLike,
        is_stopper: bool = False,
        eps_for_break: float = 0.0,
        *,
        name: str = "oob_risk",
    ) -> None:
        super().__init__(loss, is_stopper, eps_for_break, name=name)
        response = np.asarray(held_out_response, dtype=np.float64)
        if response.ndim != 1 or response.size == 0:
            raise ConfigurationError(
                f"held_out_response must be a non-empty vector, got shape {response.shape}"
            )
        self.held_out_data = held_out_data
        self.held_out_response = response
        self._shadow_prediction: Vector = np.zeros_like(response)

    @property
    def shadow_prediction(self) -> Vector:
        """Copy of the cumulative model prediction on the held-out rows."""
        return self._shadow_prediction.copy()

    def log_step(
        self,
        iteration: int,
        response: ArrayLike,
        prediction: ArrayLike,
        chosen_learner: BaseLearner,
        offset: float,
        learning_rate: float,
    ) -> None:
        base = self._shadow_prediction
        if iteration == 1 or not self._tracked_risk:
            base = np.full_like(self.held_out_response, offset)

        identifier = chosen_learner.data_identifier
        try:
            feature_data = self.held_out_data[identifier]
        except KeyError:
            raise unknown_feature_error(identifier, self.held_out_data.keys()) from None

        contribution = np.asarray(chosen_learner.predict(feature_data), dtype=np.float64)
        contribution = contribution.reshape(-1)
        if contribution.shape != self.held_out_response.shape:
            raise ConfigurationError(
                f"Learner on '{identifier}' predicted {contribution.size} held-out values, "
                f"expected {self.held_out_response.size}",
                suggestion="Check that every held-out feature has one row per held-out response",
            )

        updated = base + learning_rate * contribution
        risk = empirical_risk(self.loss, self.held_out_response, updated)
        self._shadow_prediction = updated
        self._tracked_risk.append(risk)

    def clear_logger_data(self) -> None:
        super().clear_logger_data()
        self._shadow_prediction = np.zeros_like(self.held_out_response)


__all__ = ["InbagRiskLogger", "OobRiskLogger", "empirical_risk"]
