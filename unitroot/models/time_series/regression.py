# unitroot/models/time_series/regression.py
"""
The (augmented) Dickey-Fuller regression.

Fits

    dy_t = beta_0 + beta_1 * y_{t-1} + beta_2 * dy_{t-1} + ... + beta_{d+1} * dy_{t-d} + e_t

by ordinary least squares for a given number ``d`` of lagged differences and
returns the coefficients, standard errors, t-ratios and significance levels
together with the residuals. The significance of ``beta_1`` is read from the
Dickey-Fuller distribution; the augmented lags use Student's t.
"""

import logging
from dataclasses import dataclass
from typing import Any, Dict, Tuple

import numpy as np
import statsmodels.api as sm
from scipy import stats

from unitroot.core.config import get_numerical_config
from unitroot.core.exceptions import DegreesOfFreedomError, SingularDesignError
from unitroot.core.types import TimeSeriesData
from unitroot.core.validation import (
    MIN_OBSERVATIONS, validate_lag_order, validate_time_series
)
from unitroot.models.time_series._numba_core import adf_design
from unitroot.models.time_series.tables import df_significance

# Set up module-level logger
logger = logging.getLogger("unitroot.models.time_series.regression")


def _readonly(array: np.ndarray) -> np.ndarray:
    array = np.array(array, dtype=np.float64)
    array.setflags(write=False)
    return array


@dataclass(frozen=True)
class ADFRegressionResult:
    """Estimates from one Dickey-Fuller regression.

    Coefficient vectors are ordered as intercept, lagged level, then the
    lagged differences from lag 1 upwards.

    Attributes:
        params: Coefficient estimates, length 2 + dlags
        bse: Standard errors of the coefficients
        tvalues: t-ratios params / bse
        pvalues: Significance levels; NaN for the intercept, Dickey-Fuller
            lower-tail level for the lagged level, two-sided Student's t for
            the lagged differences
        resid: Residuals, length nobs
        rss: Residual sum of squares
        sigma: Residual standard error sqrt(rss / df_resid)
        nobs: Number of observations in the regression sample
        dlags: Number of lagged differences
        df_resid: Residual degrees of freedom
    """

    params: np.ndarray
    bse: np.ndarray
    tvalues: np.ndarray
    pvalues: np.ndarray
    resid: np.ndarray
    rss: float
    sigma: float
    nobs: int
    dlags: int
    df_resid: int

    @property
    def nregressors(self) -> int:
        """Number of regressors including the intercept."""
        return 2 + self.dlags

    def to_dict(self) -> Dict[str, Any]:
        """Convert the result to a dictionary of lists and scalars."""
        return {
            "params": self.params.tolist(),
            "bse": self.bse.tolist(),
            "tvalues": self.tvalues.tolist(),
            "pvalues": self.pvalues.tolist(),
            "resid": self.resid.tolist(),
            "rss": self.rss,
            "sigma": self.sigma,
            "nobs": self.nobs,
            "dlags": self.dlags,
            "df_resid": self.df_resid,
        }


def residual_degrees_of_freedom(obs: int, dlags: int) -> int:
    """Residual degrees of freedom of the regression with ``dlags`` lags.

    The sample has ``obs - dlags - 1`` observations and ``2 + dlags``
    regressors, leaving ``obs - 2 * dlags - 3``.
    """
    return obs - 2 * dlags - 3


def build_adf_design(series: TimeSeriesData, dlags: int) -> Tuple[np.ndarray, np.ndarray]:
    """
    Build the regressand and design matrix for ``dlags`` lagged differences.

    Args:
        series: Series in levels
        dlags: Number of lagged differences

    Returns:
        Tuple[np.ndarray, np.ndarray]: Regressand (length obs - dlags - 1) and
            design matrix with columns [1, y_{t-1}, dy_{t-1}, ..., dy_{t-dlags}]

    Raises:
        DegreesOfFreedomError: If the lag order leaves no observations
    """
    y = validate_time_series(series, min_length=2)
    dlags = validate_lag_order(dlags)
    if y.shape[0] - dlags - 1 < 1:
        raise DegreesOfFreedomError(
            f"{dlags} lagged differences leave no observations in a series "
            f"of length {y.shape[0]}",
            nobs=y.shape[0] - dlags - 1,
            nregressors=2 + dlags,
            dlags=dlags
        )
    return adf_design(np.ascontiguousarray(y), dlags)


def _check_rank(X: np.ndarray, dlags: int) -> None:
    tol = get_numerical_config().matrix_rank_tolerance
    singular_values = np.linalg.svd(X, compute_uv=False)
    rank = int(np.sum(singular_values > singular_values[0] * tol))
    if rank < X.shape[1]:
        raise SingularDesignError(
            f"Design matrix with {dlags} lagged differences has rank {rank} "
            f"but {X.shape[1]} columns; the series may be constant or degenerate",
            rank=rank,
            nregressors=X.shape[1],
            dlags=dlags
        )


def adf_regression(series: TimeSeriesData, dlags: int) -> ADFRegressionResult:
    """
    Estimate the (augmented) Dickey-Fuller regression.

    Args:
        series: Series in levels, at least 4 observations
        dlags: Number of lagged differences

    Returns:
        ADFRegressionResult: Coefficients, standard errors, t-ratios,
            significance levels, and residuals

    Raises:
        InsufficientDataError: If the series has fewer than 4 observations
        ParameterError: If dlags is not a non-negative integer
        DegreesOfFreedomError: If the lag order leaves no residual degrees
            of freedom
        SingularDesignError: If the design matrix is rank deficient or the
            regression fits exactly

    Examples:
        >>> import numpy as np
        >>> from unitroot.models.time_series.regression import adf_regression
        >>> y = np.cumsum(np.random.default_rng(0).standard_normal(100))
        >>> res = adf_regression(y, 2)
        >>> res.params.shape
        (4,)
    """
    y = validate_time_series(series, min_length=MIN_OBSERVATIONS)
    dlags = validate_lag_order(dlags)
    obs = y.shape[0]

    df_resid = residual_degrees_of_freedom(obs, dlags)
    nobs = obs - dlags - 1
    if df_resid < 1:
        raise DegreesOfFreedomError(
            f"A regression with {dlags} lagged differences on {obs} observations "
            f"has {df_resid} residual degrees of freedom",
            nobs=nobs,
            nregressors=2 + dlags,
            dlags=dlags,
            details="At most (obs - 4) // 2 lagged differences can be estimated."
        )

    regressand, X = adf_design(np.ascontiguousarray(y), dlags)
    _check_rank(X, dlags)

    results = sm.OLS(regressand, X).fit()
    resid = np.asarray(results.resid, dtype=np.float64)
    rss = float(resid @ resid)

    tol = get_numerical_config().zero_variance_tolerance
    scale = float(regressand @ regressand)
    if rss <= tol * scale or rss == 0.0:
        raise SingularDesignError(
            f"Regression with {dlags} lagged differences fits the series exactly; "
            "the residual variance is zero",
            rank=X.shape[1],
            nregressors=X.shape[1],
            dlags=dlags,
            issue="zero residual variance"
        )

    params = np.asarray(results.params, dtype=np.float64)
    sigma = float(np.sqrt(rss / df_resid))
    bse = np.asarray(results.bse, dtype=np.float64)
    tvalues = params / bse

    pvalues = np.empty_like(params)
    pvalues[0] = np.nan
    pvalues[1] = df_significance(tvalues[1], nobs)
    if dlags > 0:
        pvalues[2:] = 2.0 * stats.t.sf(np.abs(tvalues[2:]), df_resid)

    logger.debug(
        f"ADF regression with {dlags} lagged differences: nobs={nobs}, "
        f"beta_1={params[1]:.6f}, t_1={tvalues[1]:.4f}, sigma={sigma:.6f}"
    )

    return ADFRegressionResult(
        params=_readonly(params),
        bse=_readonly(bse),
        tvalues=_readonly(tvalues),
        pvalues=_readonly(pvalues),
        resid=_readonly(resid),
        rss=rss,
        sigma=sigma,
        nobs=nobs,
        dlags=dlags,
        df_resid=df_resid,
    )
