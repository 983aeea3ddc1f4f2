"""boostmon version information."""

__version__ = "0.1.0"
__version_tuple__ = (0, 1, 0)

# Build metadata
__build_date__ = "2026-10-18"
__build_type__ = "development"

# Project metadata
__project_name__ = "boostmon"
__project_description__ = "Iteration loggers and stopping rules for component-wise boosting"
__author__ = "boostmon developers"
__license__ = "MIT"

# Numeric stack compatibility info
__numpy_min_version__ = "1.24"
__tensorboard_min_version__ = "2.14"
