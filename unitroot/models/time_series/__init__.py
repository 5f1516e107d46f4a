# unitroot/models/time_series/__init__.py
"""
Unit Root Toolbox Time Series Module

Unit root testing for a single time series:
- The (augmented) Dickey-Fuller regression and its significance levels
- Durbin-Watson, Durbin-h, Ljung-Box and ARCH residual diagnostics
- The Phillips-Perron correction of the Dickey-Fuller t-ratio
- Lag order selection and the combined unit root tester
"""

import logging

# Set up module-level logger
logger = logging.getLogger("unitroot.models.time_series")

from .regression import (
    ADFRegressionResult, adf_regression, build_adf_design,
    residual_degrees_of_freedom
)
from .diagnostics import (
    ARCHTestResult,
    DiagnosticTestResult,
    DurbinHResult,
    DurbinWatsonResult,
    LjungBoxResult,
    arch_test,
    durbin_h,
    durbin_watson,
    ljung_box,
    residual_diagnostics,
)
from .phillips_perron import PhillipsPerronResult, default_bandwidth, phillips_perron
from .lag_selection import max_feasible_lags, select_lag_order
from .tables import df_critical_value, df_critical_values, df_significance
from .unit_root import (
    UnitRootEvaluation, UnitRootTester, UnitRootTestResult, unitroot
)

__all__ = [
    "ADFRegressionResult",
    "adf_regression",
    "build_adf_design",
    "residual_degrees_of_freedom",
    "ARCHTestResult",
    "DiagnosticTestResult",
    "DurbinHResult",
    "DurbinWatsonResult",
    "LjungBoxResult",
    "arch_test",
    "durbin_h",
    "durbin_watson",
    "ljung_box",
    "residual_diagnostics",
    "PhillipsPerronResult",
    "default_bandwidth",
    "phillips_perron",
    "max_feasible_lags",
    "select_lag_order",
    "df_critical_value",
    "df_critical_values",
    "df_significance",
    "UnitRootEvaluation",
    "UnitRootTester",
    "UnitRootTestResult",
    "unitroot",
]

logger.debug("Unit Root Toolbox time series module initialized")
