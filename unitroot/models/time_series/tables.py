# unitroot/models/time_series/tables.py
"""
Dickey-Fuller reference distribution for the constant-only regression.

The t-ratio on the lagged level in a Dickey-Fuller regression with an
intercept does not follow Student's t distribution under the unit-root null.
Its percentiles are tabulated below (Fuller, 1976, Table 8.5.2, the
"tau_mu" statistic) by sample size and cumulative probability.

The table is created once at import and is read-only; lookups interpolate
linearly in the statistic and in the reciprocal of the sample size, and clamp
to the nearest tabulated bound outside the tabulated range.

References:
    Fuller, W. A. (1976). Introduction to Statistical Time Series. Wiley.
    Dickey, D. A. and Fuller, W. A. (1979). Distribution of the estimators
    for autoregressive time series with a unit root. JASA 74, 427-431.
"""

import logging
from typing import Dict

import numpy as np

from unitroot.core.validation import validate_significance_level

# Set up module-level logger
logger = logging.getLogger("unitroot.models.time_series.tables")


def _frozen(values) -> np.ndarray:
    array = np.array(values, dtype=np.float64)
    array.setflags(write=False)
    return array


# Cumulative probabilities P(tau <= value) for each tabulated column
DF_PROBABILITIES = _frozen([0.01, 0.025, 0.05, 0.10, 0.90, 0.95, 0.975, 0.99])

# Tabulated sample sizes; the last row is the asymptotic distribution
DF_SAMPLE_SIZES = _frozen([25, 50, 100, 250, 500, np.inf])

# Percentiles of tau_mu, one row per sample size
DF_TAU_MU = _frozen([
    [-3.75, -3.33, -3.00, -2.63, -0.37, 0.00, 0.34, 0.72],
    [-3.58, -3.22, -2.93, -2.60, -0.40, -0.03, 0.29, 0.66],
    [-3.51, -3.17, -2.89, -2.58, -0.42, -0.05, 0.26, 0.63],
    [-3.46, -3.14, -2.88, -2.57, -0.42, -0.06, 0.24, 0.62],
    [-3.44, -3.13, -2.87, -2.57, -0.43, -0.07, 0.24, 0.61],
    [-3.43, -3.12, -2.86, -2.57, -0.44, -0.07, 0.23, 0.60],
])

_INVERSE_SIZES = _frozen(1.0 / DF_SAMPLE_SIZES)


def _percentiles_for(nobs: float) -> np.ndarray:
    """Row of percentiles for a sample size, interpolated in 1/nobs."""
    inv = 1.0 / max(float(nobs), 1.0)
    # _INVERSE_SIZES is decreasing; np.interp needs increasing abscissae
    xp = _INVERSE_SIZES[::-1]
    table = DF_TAU_MU[::-1]
    return np.array([np.interp(inv, xp, table[:, j]) for j in range(table.shape[1])])


def df_significance(statistic: float, nobs: float) -> float:
    """
    Lower-tail significance level of a Dickey-Fuller t-ratio.

    Returns ``P(tau <= statistic)`` for a sample of ``nobs`` observations:
    the smallest level at which the unit-root null is rejected in favour of
    stationarity. Sample sizes below 25 use the 25-observation row; values
    beyond the tabulated percentiles return the nearest tabulated probability
    (0.01 or 0.99).

    Args:
        statistic: Dickey-Fuller (or Phillips-Perron) t-ratio
        nobs: Number of observations in the regression

    Returns:
        float: Significance level in [0.01, 0.99]; NaN for a NaN statistic
    """
    if not np.isfinite(statistic):
        if np.isnan(statistic):
            return np.nan
        return float(DF_PROBABILITIES[0] if statistic < 0 else DF_PROBABILITIES[-1])

    row = _percentiles_for(nobs)
    return float(np.interp(statistic, row, DF_PROBABILITIES))


def df_critical_value(level: float, nobs: float) -> float:
    """
    Dickey-Fuller critical value for a lower-tail test at ``level``.

    Args:
        level: Cumulative probability, clamped to [0.01, 0.99]
        nobs: Number of observations in the regression

    Returns:
        float: The interpolated percentile of tau_mu
    """
    level = validate_significance_level(level, "level")
    row = _percentiles_for(nobs)
    return float(np.interp(level, DF_PROBABILITIES, row))


def df_critical_values(nobs: float) -> Dict[str, float]:
    """Critical values at the 1%, 5% and 10% levels for a sample size."""
    return {
        "1%": df_critical_value(0.01, nobs),
        "5%": df_critical_value(0.05, nobs),
        "10%": df_critical_value(0.10, nobs),
    }
