"""boostmon loggers and stopping rules.

This package provides the loggers that observe a component-wise boosting
loop, the registry that drives them, and utilities to print and export
their trajectories.
"""

from .base import BaseLogger, relative_improvement
from .iteration import IterationLogger
from .risk import InbagRiskLogger, OobRiskLogger, empirical_risk
from .timer import TimeLogger, TimeUnit
from .registry import LoggerRegistry, LoggedData, STATUS_SEPARATOR
from .basic import TracePrinter
from .csv import CSVExporter, read_logged_data

__all__ = [
    # Contract
    "BaseLogger",

    # Concrete loggers
    "IterationLogger",
    "InbagRiskLogger",
    "OobRiskLogger",
    "TimeLogger",
    "TimeUnit",

    # Registry
    "LoggerRegistry",
    "LoggedData",
    "STATUS_SEPARATOR",

    # Output
    "TracePrinter",
    "CSVExporter",
    "read_logged_data",

    # Utilities
    "relative_improvement",
    "empirical_risk",
]
