"""boostmon: iteration loggers and stopping rules for component-wise boosting.

boostmon observes a component-wise boosting loop one iteration at a time.
Every logger records one trajectory (iterations, in-bag risk, out-of-bag
risk, elapsed time) and may act as a stopper; a registry drives all of
them and combines their stop flags.

Example Usage:
    ```python
    import boostmon as bm

    registry = bm.LoggerRegistry({
        "iterations": bm.IterationLogger(is_stopper=True, max_iterations=500),
        "inbag": bm.InbagRiskLogger(squared_error),
        "oob": bm.OobRiskLogger(
            squared_error, x_oob, y_oob, is_stopper=True, eps_for_break=1e-5
        ),
    })

    prediction = np.full_like(y, offset)
    for m in range(1, 501):
        learner = select_best_learner(y, prediction)
        prediction = prediction + learning_rate * learner.predict(x[learner.data_identifier])
        registry.log_step(m, y, prediction, learner, offset, learning_rate)
        if registry.any_stop_criteria_reached():
            break

    table = registry.collect_logged_data()
    ```
"""

# Version and metadata
from ._version import (
    __version__,
    __author__,
    __project_description__ as __description__,
)

# Loggers
from .loggers import (
    BaseLogger,
    IterationLogger,
    InbagRiskLogger,
    OobRiskLogger,
    TimeLogger,
    TimeUnit,
    LoggerRegistry,
    LoggedData,
    TracePrinter,
    CSVExporter,
    relative_improvement,
    empirical_risk,
)

# Configuration
from .config import MonitorConfig, build_registry

# Type system and exceptions
from .types import BaseLearner, LossFunction, Vector

from .exceptions import (
    BoostmonError,
    ConfigurationError,
    UnknownFeatureError,
    RiskComputationError,
    StateError,
    InconsistentTrajectoryError,
)

# Convenience namespace imports
from . import loggers

# Public API - organized for user convenience
__all__ = [
    # Version info
    "__version__",
    "__author__",
    "__description__",
    # Loggers
    "BaseLogger",
    "IterationLogger",
    "InbagRiskLogger",
    "OobRiskLogger",
    "TimeLogger",
    "TimeUnit",
    # Registry and output
    "LoggerRegistry",
    "LoggedData",
    "TracePrinter",
    "CSVExporter",
    # Utilities
    "relative_improvement",
    "empirical_risk",
    # Configuration
    "MonitorConfig",
    "build_registry",
    # Type system
    "BaseLearner",
    "LossFunction",
    "Vector",
    # Exceptions
    "BoostmonError",
    "ConfigurationError",
    "UnknownFeatureError",
    "RiskComputationError",
    "StateError",
    "InconsistentTrajectoryError",
    # Namespaces
    "loggers",
]
