"""
Numba-accelerated core functions for unit root testing.

This module provides the loop-heavy numeric kernels used by the regression,
diagnostics, and Phillips-Perron modules. The kernels are compiled with
Numba's just-in-time compiler and operate on contiguous float64 arrays; all
input checking happens in the calling modules.

The module includes:
- Construction of the (augmented) Dickey-Fuller regression sample
- The Durbin-Watson statistic and the moments of its bounding distributions
- Residual autocovariances and the Bartlett long-run variance
"""

import logging
from typing import Tuple

import numpy as np
from numba import jit

# Set up module-level logger
logger = logging.getLogger("unitroot.models.time_series._numba_core")

# ============================================================================
# Regression Sample Construction
# ============================================================================

@jit(nopython=True, cache=True)
def adf_design(y: np.ndarray, dlags: int) -> Tuple[np.ndarray, np.ndarray]:
    """
    Build the regressand and design matrix of the Dickey-Fuller regression.

    The regression is

        dy_t = b0 + b1 * y_{t-1} + b2 * dy_{t-1} + ... + b_{dlags+1} * dy_{t-dlags} + e_t

    estimated over the last ``len(y) - dlags - 1`` differences.

    Args:
        y: Series in levels
        dlags: Number of lagged differences

    Returns:
        Tuple[np.ndarray, np.ndarray]: Regressand of length n and design
            matrix of shape (n, 2 + dlags), with n = len(y) - dlags - 1
    """
    obs = len(y)
    n = obs - dlags - 1

    dy = np.empty(obs - 1)
    for t in range(1, obs):
        dy[t - 1] = y[t] - y[t - 1]

    regressand = np.empty(n)
    X = np.empty((n, 2 + dlags))
    for i in range(n):
        j = i + dlags  # position in dy
        regressand[i] = dy[j]
        X[i, 0] = 1.0
        X[i, 1] = y[j]  # y_{t-1} for dy_t = y[j + 1] - y[j]
        for k in range(1, dlags + 1):
            X[i, 1 + k] = dy[j - k]

    return regressand, X


# ============================================================================
# Autocorrelation Diagnostics
# ============================================================================

@jit(nopython=True, cache=True)
def durbin_watson_statistic(resid: np.ndarray) -> float:
    """
    Compute the Durbin-Watson statistic sum((e_t - e_{t-1})^2) / sum(e_t^2).

    Args:
        resid: Regression residuals

    Returns:
        float: The statistic, in [0, 4]; NaN if the residuals are all zero
    """
    n = len(resid)
    num = 0.0
    den = resid[0] * resid[0]
    for t in range(1, n):
        d = resid[t] - resid[t - 1]
        num += d * d
        den += resid[t] * resid[t]

    if den <= 0.0:
        return np.nan
    return num / den


@jit(nopython=True, cache=True)
def dw_bound_moments(nobs: int, nregressors: int) -> Tuple[float, float, float, float]:
    """
    Mean and variance of the lower and upper Durbin-Watson bound statistics.

    Under the null of no autocorrelation the Durbin-Watson statistic lies
    between two ratios of quadratic forms in independent normals whose
    weights are eigenvalues of the first-difference matrix,
    ``2 * (1 - cos(pi * j / nobs))`` for ``j = 0, ..., nobs - 1``. The lower
    bound uses the smallest ``nobs - nregressors`` non-zero eigenvalues and
    the upper bound the largest.

    Args:
        nobs: Number of residuals
        nregressors: Number of regressors including the intercept

    Returns:
        Tuple[float, float, float, float]: mean and variance of the lower
            bound, then mean and variance of the upper bound. NaN when fewer
            than two residual degrees of freedom remain.
    """
    m = nobs - nregressors
    if m < 2:
        return np.nan, np.nan, np.nan, np.nan

    eig = np.empty(nobs)
    for j in range(nobs):
        eig[j] = 2.0 * (1.0 - np.cos(np.pi * j / nobs))

    lower = eig[1:m + 1]
    upper = eig[nregressors:nregressors + m]

    mean_l = np.mean(lower)
    mean_u = np.mean(upper)
    ss_l = 0.0
    ss_u = 0.0
    for i in range(m):
        ss_l += (lower[i] - mean_l) ** 2
        ss_u += (upper[i] - mean_u) ** 2

    scale = 2.0 / (m * (m + 2.0))
    return mean_l, scale * ss_l, mean_u, scale * ss_u


# ============================================================================
# Long-Run Variance
# ============================================================================

@jit(nopython=True, cache=True)
def autocovariance(resid: np.ndarray, lag: int) -> float:
    """
    Uncentred sample autocovariance (1/T) * sum(e_t * e_{t-lag}).

    Regression residuals with an intercept have mean zero, so no demeaning
    is applied.
    """
    n = len(resid)
    total = 0.0
    for t in range(lag, n):
        total += resid[t] * resid[t - lag]
    return total / n


@jit(nopython=True, cache=True)
def bartlett_long_run_variance(resid: np.ndarray, lags: int) -> float:
    """
    Newey-West long-run variance with Bartlett weights 1 - j / (lags + 1).

    Args:
        resid: Regression residuals
        lags: Truncation lag (bandwidth)

    Returns:
        float: gamma_0 + 2 * sum_j w_j * gamma_j, which is non-negative
    """
    lrv = autocovariance(resid, 0)
    for j in range(1, lags + 1):
        weight = 1.0 - j / (lags + 1.0)
        lrv += 2.0 * weight * autocovariance(resid, j)
    return lrv
