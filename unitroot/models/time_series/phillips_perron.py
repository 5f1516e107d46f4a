# unitroot/models/time_series/phillips_perron.py
"""
Phillips-Perron correction of the Dickey-Fuller t-ratio.

Rather than adding lagged differences to whiten the regression errors, the
Phillips-Perron test corrects the t-ratio on the lagged level with a
non-parametric estimate of the long-run residual variance. The corrected
statistic has the same asymptotic null distribution as the Dickey-Fuller
t-ratio, so its significance is read from the same table.

References:
    Phillips, P. C. B. and Perron, P. (1988). Testing for a unit root in time
    series regression. Biometrika 75, 335-346.
    Newey, W. K. and West, K. D. (1987). A simple, positive semi-definite,
    heteroskedasticity and autocorrelation consistent covariance matrix.
    Econometrica 55, 703-708.
"""

import logging
from dataclasses import asdict, dataclass
from typing import Any, Dict, Optional

import numpy as np

from unitroot.core.config import get_unit_root_config
from unitroot.core.exceptions import raise_numeric_error, raise_parameter_error
from unitroot.core.types import TimeSeriesData
from unitroot.core.validation import validate_lag_order, validate_residuals
from unitroot.models.time_series._numba_core import bartlett_long_run_variance
from unitroot.models.time_series.tables import df_significance

# Set up module-level logger
logger = logging.getLogger("unitroot.models.time_series.phillips_perron")


@dataclass(frozen=True)
class PhillipsPerronResult:
    """Phillips-Perron corrected t-ratio.

    Attributes:
        statistic: Corrected t-ratio on the lagged level
        significance: Dickey-Fuller lower-tail significance of the statistic
        long_run_variance: Bartlett estimate of the long-run residual variance
        short_run_variance: Residual variance rss / T
        lags: Bandwidth of the Bartlett kernel
    """

    statistic: float
    significance: float
    long_run_variance: float
    short_run_variance: float
    lags: int

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


def default_bandwidth(nobs: int) -> int:
    """Automatic Bartlett bandwidth ceil(12 * (nobs / 100) ** (1/4))."""
    return int(np.ceil(12.0 * (nobs / 100.0) ** 0.25))


def phillips_perron(
    se: float,
    tstat: float,
    resid: TimeSeriesData,
    rss: float,
    sigma: float,
    nobs: int,
    lags: Optional[int] = None
) -> PhillipsPerronResult:
    """
    Compute the Phillips-Perron corrected t-ratio and its significance.

    With ``T`` residuals, ``gamma_0 = rss / T`` and the Bartlett long-run
    variance ``lambda^2``, the statistic is

        t_pp = sqrt(gamma_0 / lambda^2) * t_1
               - 0.5 * (lambda^2 - gamma_0) / lambda * (T * se_1 / sigma)

    where ``t_1`` and ``se_1`` are the t-ratio and standard error of the
    lagged level coefficient and ``sigma`` is the residual standard error.

    Args:
        se: Standard error of the lagged level coefficient
        tstat: t-ratio of the lagged level coefficient
        resid: Regression residuals
        rss: Residual sum of squares
        sigma: Residual standard error
        nobs: Sample size used for the automatic bandwidth and for the
            Dickey-Fuller table lookup, normally the regression sample
            ``len(resid)``. The formula itself always uses ``T = len(resid)``.
        lags: Bartlett bandwidth. Defaults to the ``pp_lags`` configuration
            option, or ``ceil(12 * (nobs / 100) ** (1/4))`` when that is unset.
            Values of ``T`` or more are reduced to ``T - 1``.

    Returns:
        PhillipsPerronResult: The corrected statistic and its significance

    Raises:
        ParameterError: If lags is negative or nobs is not positive
        NumericError: If the long-run variance is not positive and finite

    Examples:
        >>> import numpy as np
        >>> from unitroot.models.time_series.regression import adf_regression
        >>> from unitroot.models.time_series.phillips_perron import phillips_perron
        >>> y = np.cumsum(np.random.default_rng(1).standard_normal(200))
        >>> r = adf_regression(y, 0)
        >>> pp = phillips_perron(r.bse[1], r.tvalues[1], r.resid, r.rss, r.sigma, r.nobs)
        >>> 0.0 <= pp.significance <= 1.0
        True
    """
    e = validate_residuals(resid)
    T = e.shape[0]
    nobs = validate_lag_order(nobs, "nobs")
    if nobs < 1:
        raise_parameter_error(
            "nobs must be positive",
            param_name="nobs",
            param_value=nobs,
            constraint="nobs >= 1"
        )

    if lags is None:
        lags = get_unit_root_config().pp_lags
    if lags is None:
        lags = default_bandwidth(nobs)
    lags = validate_lag_order(lags, "lags")
    if lags >= T:
        logger.warning(
            f"Bandwidth {lags} is not smaller than the {T} residuals; using {T - 1}"
        )
        lags = T - 1

    gamma0 = rss / T
    lam2 = float(bartlett_long_run_variance(np.ascontiguousarray(e), lags))
    if not np.isfinite(lam2) or lam2 <= 0.0:
        raise_numeric_error(
            "Long-run variance estimate is not positive",
            operation="phillips_perron",
            values=lam2,
            error_type="non-positive variance"
        )
    lam = np.sqrt(lam2)

    tpp = float(np.sqrt(gamma0 / lam2) * tstat
                - 0.5 * (lam2 - gamma0) / lam * (T * se / sigma))
    significance = df_significance(tpp, nobs)

    logger.debug(
        f"Phillips-Perron: lags={lags}, gamma0={gamma0:.6f}, "
        f"lambda2={lam2:.6f}, tpp={tpp:.4f}"
    )

    return PhillipsPerronResult(
        statistic=tpp,
        significance=significance,
        long_run_variance=lam2,
        short_run_variance=float(gamma0),
        lags=lags,
    )
