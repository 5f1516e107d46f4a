"""
Unit Root Toolbox Core Module

Base classes, exception hierarchy, configuration management, type aliases,
and input validation shared by the statistical modules.
"""

import logging

# Set up module-level logger
logger = logging.getLogger("unitroot.core")

from .base import HypothesisTestBase

from .config import (
    ConfigManager,
    get_config,
    get_config_manager,
    get_numerical_config,
    get_unit_root_config,
    reset_config,
    set_config,
)

from .exceptions import (
    UnitRootError,
    ParameterError,
    DimensionError,
    DataError,
    InsufficientDataError,
    EstimationError,
    DegreesOfFreedomError,
    SingularDesignError,
    NumericError,
    ConfigurationError,
    UnitRootWarning,
    NumericWarning,
)

from .types import TimeSeriesData, Vector, Matrix

from .validation import (
    MIN_OBSERVATIONS,
    validate_time_series,
    validate_lag_order,
    validate_significance_level,
)

__all__ = [
    "HypothesisTestBase",
    "ConfigManager",
    "get_config",
    "get_config_manager",
    "get_numerical_config",
    "get_unit_root_config",
    "reset_config",
    "set_config",
    "UnitRootError",
    "ParameterError",
    "DimensionError",
    "DataError",
    "InsufficientDataError",
    "EstimationError",
    "DegreesOfFreedomError",
    "SingularDesignError",
    "NumericError",
    "ConfigurationError",
    "UnitRootWarning",
    "NumericWarning",
    "TimeSeriesData",
    "Vector",
    "Matrix",
    "MIN_OBSERVATIONS",
    "validate_time_series",
    "validate_lag_order",
    "validate_significance_level",
]

logger.debug("Unit Root Toolbox core module initialized")
