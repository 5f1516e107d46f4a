# unitroot/models/time_series/lag_selection.py
"""
Selection of the number of lagged differences in the augmented regression.

The order is chosen by a general-to-specific forward scan: lagged differences
are added one at a time while the coefficient on the newest lag is
significant. The first insignificant lag stops the scan and the previous
order is kept.
"""

import logging
from typing import Optional

from unitroot.core.config import get_unit_root_config
from unitroot.core.types import TimeSeriesData
from unitroot.core.validation import (
    MIN_OBSERVATIONS, validate_lag_order, validate_significance_level,
    validate_time_series
)
from unitroot.models.time_series.regression import adf_regression

# Set up module-level logger
logger = logging.getLogger("unitroot.models.time_series.lag_selection")


def max_feasible_lags(nobs: int) -> int:
    """Largest lag order that leaves at least one residual degree of freedom.

    A regression with ``d`` lagged differences on ``nobs`` observations has
    ``nobs - 2 * d - 3`` residual degrees of freedom, so ``d`` can be at
    most ``(nobs - 4) // 2``.
    """
    return max((nobs - 4) // 2, 0)


def select_lag_order(
    series: TimeSeriesData,
    significance: Optional[float] = None,
    max_lags: Optional[int] = None
) -> int:
    """
    Select the number of lagged differences for the augmented regression.

    Regressions with 1, 2, ... lagged differences are fitted in turn. The
    scan stops at the first order whose newest lag has a significance level
    above ``significance`` and returns the order before it, so 0 is returned
    when even a single lag is insignificant. If every feasible order is
    significant the largest feasible order is returned.

    Args:
        series: Series in levels, at least 4 observations
        significance: Level at which the newest lag must be significant.
            Defaults to the ``lag_significance`` configuration option.
        max_lags: Optional upper bound on the lag order. Defaults to the
            ``max_lags`` configuration option; never exceeds
            ``(obs - 4) // 2``.

    Returns:
        int: Selected number of lagged differences

    Raises:
        InsufficientDataError: If the series has fewer than 4 observations
        ParameterError: If significance or max_lags is invalid
        SingularDesignError: If a regression in the scan is degenerate
    """
    y = validate_time_series(series, min_length=MIN_OBSERVATIONS)
    config = get_unit_root_config()
    if significance is None:
        significance = config.lag_significance
    significance = validate_significance_level(significance, "significance")
    if max_lags is None:
        max_lags = config.max_lags
    max_lags = validate_lag_order(max_lags, "max_lags", allow_none=True)

    upper = max_feasible_lags(y.shape[0])
    if max_lags is not None:
        upper = min(upper, max_lags)

    selected = 0
    for augterms in range(1, upper + 1):
        result = adf_regression(y, augterms)
        newest = result.pvalues[-1]
        logger.debug(
            f"Lag order {augterms}: t={result.tvalues[-1]:.4f}, significance={newest:.4f}"
        )
        if newest > significance:
            break
        selected = augterms

    logger.info(f"Selected {selected} lagged differences (maximum {upper})")
    return selected
