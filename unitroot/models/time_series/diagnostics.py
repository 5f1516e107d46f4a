# unitroot/models/time_series/diagnostics.py

"""
Residual Diagnostics Module

Tests for serial correlation and conditional heteroskedasticity in the
residuals of a Dickey-Fuller regression. A well specified (augmented)
regression leaves residuals free of autocorrelation, otherwise the
coefficient estimates are biased; and ideally free of heteroskedasticity,
otherwise they are inefficient.

Functions:
    durbin_watson: Durbin-Watson d statistic with bound significance levels
    durbin_h: Durbin's h statistic, valid with lagged dependent regressors
    ljung_box: Ljung-Box portmanteau test for higher-order autocorrelation
    arch_test: Engle's LM test for ARCH effects
    residual_diagnostics: Ljung-Box and ARCH tests in one call

References:
    Durbin, J. and Watson, G. S. (1971). Testing for serial correlation in
    least squares regression III. Biometrika 58, 1-19.
    Durbin, J. (1970). Testing for serial correlation in least-squares
    regression when some of the regressors are lagged dependent variables.
    Econometrica 38, 410-421.
    Ljung, G. M. and Box, G. E. P. (1978). On a measure of lack of fit in
    time series models. Biometrika 65, 297-303.
    Engle, R. F. (1982). Autoregressive conditional heteroscedasticity with
    estimates of the variance of United Kingdom inflation. Econometrica 50,
    987-1007.
"""
import logging
from dataclasses import asdict, dataclass, field
from typing import Any, Dict, Optional, Tuple

import numpy as np
import statsmodels.api as sm
import statsmodels.stats.diagnostic as smd
from scipy import stats

from unitroot.core.exceptions import raise_parameter_error, warn_numeric
from unitroot.core.types import TimeSeriesData
from unitroot.core.validation import (
    validate_lag_order, validate_residuals, validate_significance_level
)
from unitroot.models.time_series._numba_core import (
    durbin_watson_statistic, dw_bound_moments
)

# Set up module-level logger
logger = logging.getLogger("unitroot.models.time_series.diagnostics")


@dataclass
class DiagnosticTestResult:
    """Base class for residual diagnostic test results.

    Attributes:
        test_name: Name of the test
        test_statistic: Test statistic value
        p_value: Significance level of the test statistic
        critical_values: Dictionary of critical values
        null_hypothesis: Description of the null hypothesis
        alternative_hypothesis: Description of the alternative hypothesis
        conclusion: Conclusion of the test
        significance_level: Significance level used for the conclusion
        additional_info: Dictionary of additional test-specific information
    """

    test_name: str
    test_statistic: float
    p_value: float
    critical_values: Dict[str, float] = field(default_factory=dict)
    null_hypothesis: str = ""
    alternative_hypothesis: str = ""
    conclusion: Optional[str] = None
    significance_level: float = 0.05
    additional_info: Dict[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        """Set the conclusion if not provided."""
        if self.conclusion is None:
            if np.isnan(self.p_value):
                self.conclusion = "Test statistic undefined"
            elif self.p_value < self.significance_level:
                self.conclusion = f"Reject null hypothesis at {self.significance_level:.2f} significance level"
            else:
                self.conclusion = f"Fail to reject null hypothesis at {self.significance_level:.2f} significance level"

    @property
    def rejected(self) -> bool:
        """Whether the null hypothesis is rejected at the significance level."""
        return bool(self.p_value < self.significance_level)

    def __str__(self) -> str:
        result = [
            f"{self.test_name} Test Results:",
            f"  Test statistic: {self.test_statistic:.6f}",
            f"  P-value: {self.p_value:.6f}",
        ]

        if self.critical_values:
            result.append("  Critical values:")
            for level, value in self.critical_values.items():
                result.append(f"    {level}: {value:.6f}")

        if self.null_hypothesis:
            result.append(f"  Null hypothesis: {self.null_hypothesis}")

        if self.alternative_hypothesis:
            result.append(f"  Alternative hypothesis: {self.alternative_hypothesis}")

        result.append(f"  Conclusion: {self.conclusion}")

        return "\n".join(result)

    def to_dict(self) -> Dict[str, Any]:
        """Convert the result to a dictionary."""
        return asdict(self)


@dataclass
class DurbinWatsonResult(DiagnosticTestResult):
    """Results from the Durbin-Watson test.

    The exact null distribution of d depends on the regressors, but d always
    lies between a lower-bound and an upper-bound statistic that depend only
    on the sample size and the number of regressors. ``sig_upper`` and
    ``sig_lower`` are the significance levels of d under those two bounding
    distributions; the exact level lies between them. ``p_value`` holds the
    conservative ``sig_upper``.

    Attributes:
        sig_upper: Significance level under the lower-bound distribution
        sig_lower: Significance level under the upper-bound distribution
        dw_lower: Lower critical bound d_L at the significance level
        dw_upper: Upper critical bound d_U at the significance level
        nobs: Number of residuals
        nregressors: Number of regressors including the intercept
    """

    sig_upper: float = np.nan
    sig_lower: float = np.nan
    dw_lower: float = np.nan
    dw_upper: float = np.nan
    nobs: int = 0
    nregressors: int = 2

    def __post_init__(self) -> None:
        """Set hypotheses and the bounds-test conclusion."""
        positive = not self.test_statistic > 2.0
        if not self.null_hypothesis:
            self.null_hypothesis = "No first-order autocorrelation in residuals"
        if not self.alternative_hypothesis:
            sign = "Positive" if positive else "Negative"
            self.alternative_hypothesis = f"{sign} first-order autocorrelation in residuals"

        if self.conclusion is None:
            level = self.significance_level
            if np.isnan(self.sig_upper) or np.isnan(self.sig_lower):
                self.conclusion = "Bounds undefined for this sample size"
            elif self.sig_upper < level:
                self.conclusion = f"Reject null hypothesis at {level:.2f} significance level"
            elif self.sig_lower >= level:
                self.conclusion = f"Fail to reject null hypothesis at {level:.2f} significance level"
            else:
                self.conclusion = "Inconclusive: statistic lies between the bounds"

        super().__post_init__()

    @property
    def statistic(self) -> float:
        """The Durbin-Watson d statistic."""
        return self.test_statistic

    @property
    def dl(self) -> float:
        return self.dw_lower

    @property
    def du(self) -> float:
        return self.dw_upper


@dataclass
class DurbinHResult(DiagnosticTestResult):
    """Results from Durbin's h test.

    Attributes:
        tails: Number of tails used for the significance level
        nobs: Number of residuals
    """

    tails: int = 2
    nobs: int = 0

    def __post_init__(self) -> None:
        """Set default values for null and alternative hypotheses."""
        if not self.null_hypothesis:
            self.null_hypothesis = "No first-order autocorrelation in residuals"
        if not self.alternative_hypothesis:
            if self.tails == 2:
                self.alternative_hypothesis = "Positive or negative first-order autocorrelation"
            elif self.test_statistic < 0:
                self.alternative_hypothesis = "Negative first-order autocorrelation"
            else:
                self.alternative_hypothesis = "Positive first-order autocorrelation"
        super().__post_init__()

    @property
    def statistic(self) -> float:
        """Durbin's h statistic."""
        return self.test_statistic

    @property
    def significance(self) -> float:
        """Significance level of h."""
        return self.p_value


@dataclass
class LjungBoxResult(DiagnosticTestResult):
    """Results from the Ljung-Box test.

    Attributes:
        lags: Number of autocorrelations included
        df: Degrees of freedom adjustment for estimated parameters
    """

    lags: int = 0
    df: int = 0

    def __post_init__(self) -> None:
        """Set default values for null and alternative hypotheses."""
        if not self.null_hypothesis:
            self.null_hypothesis = "No autocorrelation up to the given lag"
        if not self.alternative_hypothesis:
            self.alternative_hypothesis = "Autocorrelation present in residuals"
        super().__post_init__()


@dataclass
class ARCHTestResult(DiagnosticTestResult):
    """Results from Engle's ARCH LM test.

    Attributes:
        lags: Number of lagged squared residuals
        f_statistic: Finite-sample F form of the test
        f_p_value: Significance level of the F form
    """

    lags: int = 1
    f_statistic: float = np.nan
    f_p_value: float = np.nan

    def __post_init__(self) -> None:
        """Set default values for null and alternative hypotheses."""
        if not self.null_hypothesis:
            self.null_hypothesis = "No ARCH effects in residuals"
        if not self.alternative_hypothesis:
            self.alternative_hypothesis = "ARCH effects present in residuals"
        super().__post_init__()


def _beta_parameters(mean: float, variance: float) -> Tuple[float, float]:
    """Beta(a, b) on [0, 4] matching the given mean and variance."""
    mu = mean / 4.0
    s2 = variance / 16.0
    common = mu * (1.0 - mu) / s2 - 1.0
    return mu * common, (1.0 - mu) * common


def durbin_watson(
    resid: TimeSeriesData,
    nregressors: int = 2,
    significance_level: float = 0.05
) -> DurbinWatsonResult:
    """Perform the Durbin-Watson bounds test on regression residuals.

    The bounding distributions are approximated by beta distributions on
    [0, 4] with matching first two moments (Durbin and Watson, 1971), so the
    bounds are available for every sample size and regressor count rather
    than only at tabulated points. A statistic above 2 is tested against
    negative autocorrelation through ``4 - d``.

    Args:
        resid: Regression residuals
        nregressors: Number of regressors including the intercept
        significance_level: Level at which the critical bounds are reported

    Returns:
        DurbinWatsonResult: The statistic, bound significance levels, and
            critical bounds

    Raises:
        DataError: If residuals contain NaN or infinite values
        ParameterError: If nregressors is not a positive integer

    Examples:
        >>> import numpy as np
        >>> from unitroot.models.time_series.diagnostics import durbin_watson
        >>> e = np.random.default_rng(42).standard_normal(100)
        >>> 1.5 < durbin_watson(e).statistic < 2.5
        True
    """
    e = validate_residuals(resid)
    nregressors = validate_lag_order(nregressors, "nregressors")
    if nregressors < 1:
        raise_parameter_error(
            "nregressors must be at least 1 (the intercept)",
            param_name="nregressors",
            param_value=nregressors,
            constraint="nregressors >= 1"
        )
    significance_level = validate_significance_level(significance_level)

    nobs = e.shape[0]
    dw = float(durbin_watson_statistic(np.ascontiguousarray(e)))

    mean_l, var_l, mean_u, var_u = dw_bound_moments(nobs, nregressors)
    sig_upper = sig_lower = dl = du = np.nan
    if np.isfinite(var_l) and var_l > 0 and var_u > 0 and np.isfinite(dw):
        a_l, b_l = _beta_parameters(mean_l, var_l)
        a_u, b_u = _beta_parameters(mean_u, var_u)
        x = min(dw, 4.0 - dw) / 4.0
        sig_upper = float(stats.beta.cdf(x, a_l, b_l))
        sig_lower = float(stats.beta.cdf(x, a_u, b_u))
        dl = float(4.0 * stats.beta.ppf(significance_level, a_l, b_l))
        du = float(4.0 * stats.beta.ppf(significance_level, a_u, b_u))
    else:
        logger.debug(
            f"Durbin-Watson bounds undefined for {nobs} residuals and "
            f"{nregressors} regressors"
        )

    return DurbinWatsonResult(
        test_name="Durbin-Watson",
        test_statistic=dw,
        p_value=sig_upper,
        critical_values={"dL": dl, "dU": du},
        significance_level=significance_level,
        sig_upper=sig_upper,
        sig_lower=sig_lower,
        dw_lower=dl,
        dw_upper=du,
        nobs=nobs,
        nregressors=nregressors
    )


def durbin_h(
    dw: float,
    se: float,
    nobs: int,
    tails: int = 2,
    significance_level: float = 0.05
) -> DurbinHResult:
    """Compute Durbin's h statistic and its significance level.

    ``h = (1 - dw / 2) * sqrt(n / (1 - n * se^2))`` where ``se`` is the
    standard error of the coefficient on the lagged dependent variable. In
    the Dickey-Fuller regression that coefficient is ``1 + beta_1`` and
    shares the standard error of ``beta_1``. h is asymptotically standard
    normal and remains valid when lagged differences are included, unlike d.

    When ``n * se^2 >= 1`` the statistic is undefined; NaN is returned for
    both the statistic and its significance and a NumericWarning is issued.

    Args:
        dw: Durbin-Watson statistic of the residuals
        se: Standard error of the lagged level coefficient
        nobs: Number of residuals
        tails: 2 for a test against positive or negative autocorrelation,
            1 for a test against autocorrelation of the sign of h
        significance_level: Level used for the conclusion

    Returns:
        DurbinHResult: The statistic and its significance level

    Raises:
        ParameterError: If tails is not 1 or 2 or nobs is not positive
    """
    if tails not in (1, 2):
        raise_parameter_error(
            f"tails must be 1 or 2, got {tails}",
            param_name="tails",
            param_value=tails,
            constraint="tails in (1, 2)"
        )
    nobs = validate_lag_order(nobs, "nobs")
    if nobs < 1:
        raise_parameter_error(
            "nobs must be positive",
            param_name="nobs",
            param_value=nobs,
            constraint="nobs >= 1"
        )
    significance_level = validate_significance_level(significance_level)

    denominator = 1.0 - nobs * se ** 2
    if not denominator > 0.0 or not np.isfinite(dw):
        warn_numeric(
            "Durbin h statistic is undefined because n * se^2 >= 1",
            operation="durbin_h",
            issue="negative variance estimate",
            value=nobs * se ** 2
        )
        logger.warning(f"Durbin h undefined: n * se^2 = {nobs * se ** 2:.4f}")
        h = np.nan
        significance = np.nan
    else:
        h = float((1.0 - dw / 2.0) * np.sqrt(nobs / denominator))
        significance = float(tails * stats.norm.sf(abs(h)))

    return DurbinHResult(
        test_name="Durbin-h",
        test_statistic=h,
        p_value=significance,
        significance_level=significance_level,
        tails=tails,
        nobs=nobs
    )


def ljung_box(
    resid: TimeSeriesData,
    lags: Optional[int] = None,
    df: int = 0,
    significance_level: float = 0.05
) -> LjungBoxResult:
    """Perform the Ljung-Box test for autocorrelation up to ``lags``.

    Args:
        resid: Regression residuals
        lags: Number of autocorrelations; defaults to min(10, T // 5), at
            least 1
        df: Number of estimated parameters to subtract from the degrees of
            freedom
        significance_level: Level used for the conclusion

    Returns:
        LjungBoxResult: Q statistic and its chi-squared significance

    Raises:
        DataError: If residuals contain NaN or infinite values
        ParameterError: If lags or df are out of range
    """
    e = validate_residuals(resid, min_length=3)
    nobs = e.shape[0]
    if lags is None:
        lags = max(1, min(10, nobs // 5))
    lags = validate_lag_order(lags, "lags")
    df = validate_lag_order(df, "df")
    significance_level = validate_significance_level(significance_level)

    if lags < 1 or lags >= nobs:
        raise_parameter_error(
            f"lags must be between 1 and {nobs - 1}, got {lags}",
            param_name="lags",
            param_value=lags,
            constraint="1 <= lags < nobs"
        )
    if df >= lags:
        raise_parameter_error(
            f"df must be smaller than lags ({lags}), got {df}",
            param_name="df",
            param_value=df,
            constraint="df < lags"
        )

    lb = sm.stats.acorr_ljungbox(e, lags=[lags], model_df=df, return_df=True)
    q = float(lb["lb_stat"].iloc[0])
    p_value = float(lb["lb_pvalue"].iloc[0])

    return LjungBoxResult(
        test_name="Ljung-Box",
        test_statistic=q,
        p_value=p_value,
        critical_values={"5%": float(stats.chi2.ppf(0.95, lags - df))},
        significance_level=significance_level,
        lags=lags,
        df=df
    )


def arch_test(
    resid: TimeSeriesData,
    lags: int = 1,
    significance_level: float = 0.05
) -> ARCHTestResult:
    """Perform Engle's LM test for ARCH effects.

    Computed with statsmodels' ``het_arch``, which regresses squared
    residuals on a constant and ``lags`` of their own lags;
    ``T * R^2`` is asymptotically chi-squared with ``lags`` degrees of
    freedom. The finite-sample F form ``(R^2 / q) / ((1 - R^2) / (T - q - 1))``
    is reported alongside.

    Args:
        resid: Regression residuals
        lags: Number of lagged squared residuals
        significance_level: Level used for the conclusion

    Returns:
        ARCHTestResult: LM statistic, F statistic and their significance

    Raises:
        DataError: If residuals contain NaN or infinite values
        ParameterError: If lags is out of range
    """
    e = validate_residuals(resid, min_length=3)
    lags = validate_lag_order(lags, "lags")
    significance_level = validate_significance_level(significance_level)
    nobs = e.shape[0]

    if lags < 1 or nobs - lags <= lags + 1:
        raise_parameter_error(
            f"lags must be at least 1 and leave residual degrees of freedom, got {lags}",
            param_name="lags",
            param_value=lags,
            constraint="1 <= lags < (nobs - 1) / 2"
        )

    lm, p_value, f_stat, f_p_value = smd.het_arch(e, nlags=lags)

    return ARCHTestResult(
        test_name="ARCH LM",
        test_statistic=float(lm),
        p_value=float(p_value),
        critical_values={"5%": float(stats.chi2.ppf(0.95, lags))},
        significance_level=significance_level,
        lags=lags,
        f_statistic=float(f_stat),
        f_p_value=float(f_p_value)
    )


def residual_diagnostics(
    resid: TimeSeriesData,
    lags: Optional[int] = None,
    arch_lags: int = 1,
    df: int = 0,
    significance_level: float = 0.05
) -> Dict[str, DiagnosticTestResult]:
    """Run the Ljung-Box and ARCH tests on a residual vector.

    Returns:
        Dict[str, DiagnosticTestResult]: Results keyed by "ljung_box" and
            "arch"
    """
    return {
        "ljung_box": ljung_box(resid, lags=lags, df=df,
                               significance_level=significance_level),
        "arch": arch_test(resid, lags=arch_lags,
                          significance_level=significance_level),
    }
