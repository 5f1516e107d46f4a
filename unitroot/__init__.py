# unitroot/__init__.py
"""
Unit Root Toolbox - Dickey-Fuller and Phillips-Perron tests for Python

Tests a single time series for a unit root with the (augmented)
Dickey-Fuller regression

    dy_t = beta_0 + beta_1 * y_{t-1} + sum_k beta_{k+1} * dy_{t-k} + e_t

choosing the number of lagged differences by a forward significance scan and
reporting, for each evaluated regression, the coefficients with their
Dickey-Fuller or Student's t significance levels, the Durbin-Watson and
Durbin-h residual autocorrelation statistics, and the Phillips-Perron
corrected t-ratio.

This module serves as the main entry point for the package.
"""

import logging
import os
from typing import Union

# Set up package-wide logger
logger = logging.getLogger("unitroot")
logger.setLevel(logging.WARNING)
_handler = logging.StreamHandler()
_handler.setFormatter(logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s'))
logger.addHandler(_handler)

from .version import __version__, __title__, __description__, __license__

from . import core
from . import models

from .core.config import (
    get_config,
    get_config_manager,
    initialize_config,
    reset_config,
    set_config,
)
from .core.exceptions import (
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
from .models.time_series import (
    ADFRegressionResult,
    DurbinHResult,
    DurbinWatsonResult,
    PhillipsPerronResult,
    UnitRootEvaluation,
    UnitRootTester,
    UnitRootTestResult,
    adf_regression,
    arch_test,
    df_critical_value,
    df_critical_values,
    df_significance,
    durbin_h,
    durbin_watson,
    ljung_box,
    max_feasible_lags,
    phillips_perron,
    residual_diagnostics,
    select_lag_order,
    unitroot,
)


def set_log_level(level: Union[int, str]) -> None:
    """
    Set the level of the package logger.

    Args:
        level: A logging level name such as "DEBUG" or a numeric level

    Raises:
        ValueError: If the level name is not recognised
    """
    if isinstance(level, str):
        numeric = logging.getLevelName(level.upper())
        if not isinstance(numeric, int):
            raise ValueError(f"Unknown log level: {level}")
        level = numeric
    logger.setLevel(level)


def get_version() -> str:
    """Return the package version string."""
    return __version__


def _initialize() -> None:
    """Load configuration and apply the UNITROOT_LOG_LEVEL override."""
    try:
        initialize_config()
    except ConfigurationError as e:
        logger.warning(f"Failed to initialize configuration: {e.message}")
        logger.warning("Using default settings")

    log_level = os.environ.get("UNITROOT_LOG_LEVEL")
    if log_level:
        try:
            set_log_level(log_level)
        except ValueError:
            logger.warning(f"Ignoring invalid UNITROOT_LOG_LEVEL: {log_level}")


_initialize()

__all__ = [
    "__version__",
    "get_version",
    "set_log_level",
    "core",
    "models",
    "get_config",
    "get_config_manager",
    "initialize_config",
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
    "ADFRegressionResult",
    "DurbinHResult",
    "DurbinWatsonResult",
    "PhillipsPerronResult",
    "UnitRootEvaluation",
    "UnitRootTester",
    "UnitRootTestResult",
    "adf_regression",
    "arch_test",
    "df_critical_value",
    "df_critical_values",
    "df_significance",
    "durbin_h",
    "durbin_watson",
    "ljung_box",
    "max_feasible_lags",
    "phillips_perron",
    "residual_diagnostics",
    "select_lag_order",
    "unitroot",
]

logger.debug(f"Unit Root Toolbox v{__version__} initialized")
