# unitroot/models/time_series/unit_root.py
"""
Augmented Dickey-Fuller and Phillips-Perron unit root testing.

This module ties the Dickey-Fuller regression, the residual autocorrelation
diagnostics and the Phillips-Perron correction together. The tester picks the
number of lagged differences by a forward significance scan, evaluates the
augmented regression at that order and, when requested, the plain
Dickey-Fuller regression without lagged differences.

Each evaluation is summarised in a 3 x (4 + dlags) matrix:

    row 0: [sigma,  dw,    beta_0, beta_1, beta_2, ...]
    row 1: [tpp,    dh,    t_0,    t_1,    t_2,    ...]
    row 2: [tppsig, dhsig, NaN,    tsig_1, tsig_2, ...]

where sigma is the residual standard error, dw the Durbin-Watson statistic,
dh Durbin's h, tpp the Phillips-Perron corrected t-ratio, and tsig the
significance levels of the coefficients (Dickey-Fuller for beta_1, Student's
t for the lagged differences).

The null of a unit root is usually rejected when the significance of beta_1
is at most 0.10 and the residuals show no autocorrelation, or when the
Phillips-Perron statistic is significant. The tester does not apply this
rule; ``UnitRootTestResult.rejects_unit_root`` does on request.

References:
    Dickey, D. A. and Fuller, W. A. (1979). Distribution of the estimators
    for autoregressive time series with a unit root. JASA 74, 427-431.
    Phillips, P. C. B. and Perron, P. (1988). Testing for a unit root in time
    series regression. Biometrika 75, 335-346.
"""

import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Tuple

import numpy as np
import pandas as pd

from unitroot.core.base import HypothesisTestBase
from unitroot.core.config import get_unit_root_config
from unitroot.core.exceptions import raise_parameter_error
from unitroot.core.types import TimeSeriesData
from unitroot.core.validation import (
    MIN_OBSERVATIONS, validate_lag_order, validate_significance_level,
    validate_time_series
)
from unitroot.models.time_series.diagnostics import (
    DiagnosticTestResult, DurbinHResult, DurbinWatsonResult, durbin_h,
    durbin_watson, residual_diagnostics
)
from unitroot.models.time_series.lag_selection import select_lag_order
from unitroot.models.time_series.phillips_perron import (
    PhillipsPerronResult, phillips_perron
)
from unitroot.models.time_series.regression import (
    ADFRegressionResult, adf_regression
)
from unitroot.models.time_series.tables import df_critical_values

# Set up module-level logger
logger = logging.getLogger("unitroot.models.time_series.unit_root")


def _column_labels(dlags: int) -> List[str]:
    return ["sigma/pp", "dw/dh", "const", "level_lag"] + [
        f"diff_lag_{k}" for k in range(1, dlags + 1)
    ]


@dataclass(frozen=True)
class UnitRootEvaluation:
    """One evaluated Dickey-Fuller regression.

    Attributes:
        matrix: Read-only 3 x (4 + dlags) result matrix
        resid: Regression residuals, length obs - dlags - 1
        regression: Coefficient estimates and significance levels
        durbin_watson: Durbin-Watson bounds test on the residuals
        durbin_h: Durbin's h test on the residuals
        phillips_perron: Phillips-Perron corrected t-ratio
    """

    matrix: np.ndarray
    resid: np.ndarray
    regression: ADFRegressionResult
    durbin_watson: DurbinWatsonResult
    durbin_h: DurbinHResult
    phillips_perron: PhillipsPerronResult

    @property
    def dlags(self) -> int:
        """Number of lagged differences."""
        return self.regression.dlags

    @property
    def nobs(self) -> int:
        """Number of observations in the regression."""
        return self.regression.nobs

    @property
    def level_significance(self) -> float:
        """Dickey-Fuller significance of the lagged level coefficient."""
        return float(self.matrix[2, 3])

    def autocorrelated(self, level: float = 0.05) -> Optional[bool]:
        """Whether the residuals show first-order autocorrelation at ``level``.

        Durbin's h is used when it is defined. Otherwise the Durbin-Watson
        bounds decide: autocorrelation is absent only when even the smaller
        bound significance exceeds ``level``. Returns None when neither
        statistic is available.
        """
        level = validate_significance_level(level, "level")
        dhsig = self.durbin_h.p_value
        if np.isfinite(dhsig):
            return bool(dhsig <= level)
        sig_lower = self.durbin_watson.sig_lower
        if np.isfinite(sig_lower):
            return bool(sig_lower <= level)
        return None

    def to_frame(self) -> pd.DataFrame:
        """The result matrix as a labelled DataFrame."""
        return pd.DataFrame(
            np.array(self.matrix),
            index=["value", "statistic", "significance"],
            columns=_column_labels(self.dlags),
        )

    def residual_diagnostics(
        self,
        lags: Optional[int] = None,
        arch_lags: int = 1,
        significance_level: float = 0.05
    ) -> Dict[str, DiagnosticTestResult]:
        """Ljung-Box and ARCH tests on the residuals of this regression.

        The Ljung-Box degrees of freedom are reduced by the number of lagged
        differences when that leaves at least one.
        """
        if lags is None:
            lags = max(1, min(10, self.resid.shape[0] // 5))
        df = self.dlags if self.dlags < lags else 0
        return residual_diagnostics(
            self.resid, lags=lags, arch_lags=arch_lags, df=df,
            significance_level=significance_level
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "matrix": self.matrix.tolist(),
            "resid": self.resid.tolist(),
            "regression": self.regression.to_dict(),
            "durbin_watson": self.durbin_watson.to_dict(),
            "durbin_h": self.durbin_h.to_dict(),
            "phillips_perron": self.phillips_perron.to_dict(),
        }


@dataclass(frozen=True)
class UnitRootTestResult:
    """Result of a unit root test on one series.

    Attributes:
        lags: Selected number of lagged differences
        nobs: Length of the tested series
        adf: Evaluation of the augmented regression with ``lags`` differences
        df: Evaluation of the plain Dickey-Fuller regression, the same object
            as ``adf`` when ``lags`` is 0, or None if it was not requested
    """

    lags: int
    nobs: int
    adf: UnitRootEvaluation
    df: Optional[UnitRootEvaluation] = None

    @property
    def critical_values(self) -> Dict[str, float]:
        """Dickey-Fuller critical values for the augmented regression."""
        return df_critical_values(self.adf.nobs)

    def _evaluations(self) -> List[UnitRootEvaluation]:
        if self.df is None or self.df is self.adf:
            return [self.adf]
        return [self.adf, self.df]

    def rejects_unit_root(
        self,
        level: Optional[float] = None,
        autocorrelation_level: Optional[float] = None
    ) -> bool:
        """Apply the conventional decision rule to the evaluated regressions.

        The unit root is rejected if the lagged level in the augmented
        regression is significant at ``level`` and its residuals show no
        first-order autocorrelation at ``autocorrelation_level``, or if the
        Phillips-Perron statistic of any evaluated regression is significant
        at ``level``. The t-ratio of the plain Dickey-Fuller regression does
        not enter the rule.

        Args:
            level: Significance level for the unit root. Defaults to the
                ``reject_level`` configuration option (0.10).
            autocorrelation_level: Significance level for the residual
                autocorrelation check. Defaults to the
                ``autocorrelation_level`` configuration option (0.05).

        Returns:
            bool: True if the unit root null is rejected
        """
        config = get_unit_root_config()
        level = validate_significance_level(
            config.reject_level if level is None else level, "level"
        )
        autocorrelation_level = validate_significance_level(
            config.autocorrelation_level if autocorrelation_level is None
            else autocorrelation_level,
            "autocorrelation_level"
        )

        if (self.adf.level_significance <= level
                and self.adf.autocorrelated(autocorrelation_level) is False):
            return True
        return any(evaluation.phillips_perron.significance <= level
                   for evaluation in self._evaluations())

    def rejects_random_walk(self, level: Optional[float] = None) -> bool:
        """Whether the series is unlikely to be a pure random walk.

        A random walk is rejected when the unit root is rejected, or when any
        lagged difference in the augmented regression is significant at
        ``level``, since a random walk has serially uncorrelated differences.
        """
        if self.rejects_unit_root(level):
            return True
        level = validate_significance_level(
            get_unit_root_config().reject_level if level is None else level, "level"
        )
        return bool(np.any(self.adf.regression.pvalues[2:] <= level))

    def as_tuple(self) -> Tuple[np.ndarray, np.ndarray,
                                Optional[np.ndarray], Optional[np.ndarray]]:
        """Return ``(adf, adfresid, df, dfresid)``; the last two may be None."""
        if self.df is None:
            return self.adf.matrix, self.adf.resid, None, None
        return self.adf.matrix, self.adf.resid, self.df.matrix, self.df.resid

    def summary(self) -> str:
        """Generate a text summary of the test results.

        Returns:
            str: A formatted string containing the test results summary
        """
        header = "Unit Root Test Results\n"
        header += "=" * len(header) + "\n\n"

        config = "Test Configuration:\n"
        config += f"  Number of observations: {self.nobs}\n"
        config += f"  Lagged differences: {self.lags} (selected by significance scan)\n\n"

        sections = [header, config]
        for name, evaluation in (("Augmented Dickey-Fuller", self.adf),
                                 ("Dickey-Fuller", self.df)):
            if evaluation is None or (name == "Dickey-Fuller" and self.lags == 0
                                      and evaluation is self.adf):
                continue
            reg = evaluation.regression
            text = f"{name} Regression ({evaluation.dlags} lags, {evaluation.nobs} obs):\n"
            for label, b, t, p in zip(_column_labels(evaluation.dlags)[2:],
                                      reg.params, reg.tvalues, reg.pvalues):
                sig = "" if np.isnan(p) else f"{p:.4f}"
                text += f"  {label:<12} {b:>12.6f} {t:>10.4f} {sig:>8}\n"
            text += f"  Residual standard error: {reg.sigma:.6f}\n"
            text += f"  Durbin-Watson: {evaluation.durbin_watson.statistic:.4f}\n"
            text += (f"  Durbin-h: {evaluation.durbin_h.statistic:.4f} "
                     f"(significance {evaluation.durbin_h.p_value:.4f})\n")
            text += (f"  Phillips-Perron: {evaluation.phillips_perron.statistic:.4f} "
                     f"(significance {evaluation.phillips_perron.significance:.4f})\n\n")
            sections.append(text)

        cv = "Critical Values:\n"
        for level, value in self.critical_values.items():
            cv += f"  {level}: {value:.6f}\n"
        cv += "\n"
        sections.append(cv)

        conclusion = "Conclusion:\n"
        if self.rejects_unit_root():
            conclusion += "  Reject the unit root null hypothesis.\n"
            conclusion += "  The series appears to be stationary.\n"
        else:
            conclusion += "  Fail to reject the unit root null hypothesis.\n"
            conclusion += "  The series appears to be non-stationary.\n"
        sections.append(conclusion)

        return "".join(sections)

    def __str__(self) -> str:
        return self.summary()

    def to_dict(self) -> Dict[str, Any]:
        return {
            "lags": self.lags,
            "nobs": self.nobs,
            "adf": self.adf.to_dict(),
            "df": None if self.df is None else self.df.to_dict(),
            "critical_values": self.critical_values,
        }


class UnitRootTester(HypothesisTestBase[UnitRootTestResult]):
    """Augmented Dickey-Fuller and Phillips-Perron unit root tester.

    Settings not given to the constructor are read from the ``unit_root``
    configuration section when the tester is created.

    Args:
        significance: Level at which the newest lag must be significant
            during lag selection
        max_lags: Upper bound on the number of lagged differences
        pp_lags: Bartlett bandwidth of the Phillips-Perron correction
        dw_significance: Level at which Durbin-Watson critical bounds are
            reported
        durbin_h_tails: Tails used for the Durbin-h significance (1 or 2)

    Examples:
        >>> import numpy as np
        >>> from unitroot import UnitRootTester
        >>> y = np.cumsum(np.random.default_rng(0).standard_normal(200))
        >>> result = UnitRootTester().test(y)
        >>> result.adf.matrix.shape == (3, 4 + result.lags)
        True
    """

    def __init__(
        self,
        significance: Optional[float] = None,
        max_lags: Optional[int] = None,
        pp_lags: Optional[int] = None,
        dw_significance: Optional[float] = None,
        durbin_h_tails: Optional[int] = None
    ) -> None:
        super().__init__(name="Unit Root Test")
        config = get_unit_root_config()
        self.significance = validate_significance_level(
            config.lag_significance if significance is None else significance,
            "significance"
        )
        self.max_lags = validate_lag_order(
            config.max_lags if max_lags is None else max_lags,
            "max_lags", allow_none=True
        )
        self.pp_lags = validate_lag_order(
            config.pp_lags if pp_lags is None else pp_lags,
            "pp_lags", allow_none=True
        )
        self.dw_significance = validate_significance_level(
            config.dw_significance if dw_significance is None else dw_significance,
            "dw_significance"
        )
        tails = config.durbin_h_tails if durbin_h_tails is None else durbin_h_tails
        if tails not in (1, 2):
            raise_parameter_error(
                f"durbin_h_tails must be 1 or 2, got {tails}",
                param_name="durbin_h_tails",
                param_value=tails,
                constraint="durbin_h_tails in (1, 2)"
            )
        self.durbin_h_tails = tails

    def validate_data(self, data: TimeSeriesData) -> np.ndarray:
        return validate_time_series(data, min_length=MIN_OBSERVATIONS)

    def select_lags(self, data: TimeSeriesData) -> int:
        """Select the number of lagged differences for ``data``."""
        return select_lag_order(data, significance=self.significance,
                                max_lags=self.max_lags)

    def evaluate(self, data: TimeSeriesData, dlags: int) -> UnitRootEvaluation:
        """
        Evaluate the Dickey-Fuller regression with ``dlags`` lagged differences.

        Fits the regression, tests its residuals for autocorrelation and
        applies the Phillips-Perron correction, then assembles the result
        matrix.

        Raises:
            DegreesOfFreedomError: If ``dlags`` leaves no residual degrees of
                freedom
            SingularDesignError: If the regression is degenerate
        """
        reg = adf_regression(data, dlags)
        dw = durbin_watson(reg.resid, nregressors=reg.nregressors,
                           significance_level=self.dw_significance)
        dh = durbin_h(dw.statistic, reg.bse[1], reg.nobs, tails=self.durbin_h_tails)
        pp = phillips_perron(reg.bse[1], reg.tvalues[1], reg.resid, reg.rss,
                             reg.sigma, reg.nobs, lags=self.pp_lags)

        matrix = np.empty((3, 4 + reg.dlags))
        matrix[0, 0], matrix[0, 1] = reg.sigma, dw.statistic
        matrix[1, 0], matrix[1, 1] = pp.statistic, dh.statistic
        matrix[2, 0], matrix[2, 1] = pp.significance, dh.p_value
        matrix[0, 2:] = reg.params
        matrix[1, 2:] = reg.tvalues
        matrix[2, 2:] = reg.pvalues
        matrix.setflags(write=False)

        return UnitRootEvaluation(
            matrix=matrix,
            resid=reg.resid,
            regression=reg,
            durbin_watson=dw,
            durbin_h=dh,
            phillips_perron=pp,
        )

    def test(self, data: TimeSeriesData, include_df: bool = True) -> UnitRootTestResult:
        """
        Test a series for a unit root.

        Args:
            data: Series in levels, at least 4 observations
            include_df: Whether to also evaluate the plain Dickey-Fuller
                regression without lagged differences

        Returns:
            UnitRootTestResult: Augmented and, if requested, plain evaluations

        Raises:
            InsufficientDataError: If the series has fewer than 4 observations
            DataError: If the series contains NaN or infinite values
            SingularDesignError: If a regression is degenerate, for example
                for a constant series
        """
        y = self.validate_data(data)
        dlags = self.select_lags(y)
        adf = self.evaluate(y, dlags)

        df: Optional[UnitRootEvaluation] = None
        if include_df:
            df = adf if dlags == 0 else self.evaluate(y, 0)

        result = UnitRootTestResult(lags=dlags, nobs=y.shape[0], adf=adf, df=df)
        self._results = result
        logger.debug(
            f"Unit root test on {y.shape[0]} observations: dlags={dlags}, "
            f"tsig1={adf.level_significance:.4f}, "
            f"tppsig={adf.phillips_perron.significance:.4f}"
        )
        return result

    def test_augmented(self, data: TimeSeriesData) -> UnitRootTestResult:
        """Evaluate only the augmented regression at the selected lag order."""
        return self.test(data, include_df=False)

    def test_both(self, data: TimeSeriesData) -> UnitRootTestResult:
        """Evaluate the augmented and the plain Dickey-Fuller regressions."""
        return self.test(data, include_df=True)


def unitroot(
    series: TimeSeriesData,
    include_df: bool = True,
    **kwargs: Any
) -> Tuple[np.ndarray, np.ndarray, Optional[np.ndarray], Optional[np.ndarray]]:
    """
    Test a series for a unit root and return the result matrices.

    Args:
        series: Series in levels, at least 4 observations
        include_df: Whether to evaluate the plain Dickey-Fuller regression
        **kwargs: Options passed to ``UnitRootTester``

    Returns:
        Tuple: ``(adf, adfresid, df, dfresid)``. ``df`` and ``dfresid`` are
            None when ``include_df`` is False and are the ADF values when no
            lagged differences are selected.
    """
    return UnitRootTester(**kwargs).test(series, include_df=include_df).as_tuple()
