"""Common type definitions for boostmon.

This module provides type aliases and protocols describing the boundary
between the loggers and the boosting loop that drives them.
"""

from typing import Any, Dict, Mapping, Protocol, Union, runtime_checkable

import numpy as np
import numpy.typing as npt

# Array type aliases
Vector = npt.NDArray[np.float64]
ArrayLike = npt.ArrayLike

# Held-out feature data, keyed by data identifier
FeatureData = Any
HeldOutData = Mapping[str, FeatureData]

# Tabular export types
Trajectory = Vector
TrajectoryDict = Dict[str, Vector]

# Loss output: one value per observation or a single aggregate
LossValue = Union[float, ArrayLike]


@runtime_checkable
class BaseLearner(Protocol):
    """Protocol for the base learner chosen in a boosting iteration.

    The loggers only read from it; fitting happens in the boosting loop.
    """

    @property
    def data_identifier(self) -> str:
        """Identifier of the feature (or feature group) the learner uses."""
        ...

    def predict(self, data: FeatureData) -> ArrayLike:
        """Predict the learner's contribution for the given feature data."""
        ...


@runtime_checkable
class LossFunction(Protocol):
    """Protocol for losses used to compute an empirical risk."""

    def __call__(self, response: Vector, prediction: Vector) -> LossValue:
        """Evaluate the loss element-wise, or return one aggregate value."""
        ...
