# tests/test_time_series.py

"""
Tests for the unit root testing functionality in the Unit Root Toolbox.

This module contains tests for the Dickey-Fuller regression, lag order
selection, and the combined unit root tester. Tests verify the regression
against a direct statsmodels fit, the forward lag scan and its bounds, the
shape and content of the result matrices, the size and power of the test on
simulated series, and the handling of degenerate and invalid inputs.

The test suite includes:
- Tests for the regression design, estimates, and significance levels
- Tests for lag selection bounds and the stopping rule
- Tests for the tester's result matrices and entry points
- Tests for the decision helpers and reporting
- Property-based tests with hypothesis
"""

import warnings
from dataclasses import replace

import numpy as np
import pandas as pd
import pytest
import statsmodels.api as sm
from hypothesis import given, settings, strategies as st
from numpy.testing import assert_allclose, assert_array_equal
from scipy import stats

from unitroot import unitroot
from unitroot.core.config import set_config
from unitroot.core.exceptions import (
    DataError, DegreesOfFreedomError, InsufficientDataError, NumericWarning,
    ParameterError, SingularDesignError
)
from unitroot.models.time_series.lag_selection import (
    max_feasible_lags, select_lag_order
)
from unitroot.models.time_series.regression import (
    ADFRegressionResult, adf_regression, build_adf_design,
    residual_degrees_of_freedom
)
from unitroot.models.time_series.tables import df_significance
from unitroot.models.time_series.unit_root import (
    UnitRootEvaluation, UnitRootTester, UnitRootTestResult
)


def manual_design(y: np.ndarray, dlags: int):
    """Build the Dickey-Fuller regression with NumPy slicing."""
    dy = np.diff(y)
    n = len(y) - dlags - 1
    regressand = dy[dlags:]
    columns = [np.ones(n), y[dlags:-1]]
    for k in range(1, dlags + 1):
        columns.append(dy[dlags - k:len(dy) - k])
    return regressand, np.column_stack(columns)


def with_significances(evaluation: UnitRootEvaluation, tsig1: float,
                       tppsig: float, dhsig: float) -> UnitRootEvaluation:
    """Copy an evaluation with the given level, Phillips-Perron and Durbin-h significances."""
    matrix = np.array(evaluation.matrix)
    matrix[2, 0], matrix[2, 1], matrix[2, 3] = tppsig, dhsig, tsig1
    matrix.setflags(write=False)
    return replace(
        evaluation,
        matrix=matrix,
        phillips_perron=replace(evaluation.phillips_perron, significance=tppsig),
        durbin_h=replace(evaluation.durbin_h, p_value=dhsig, conclusion=None),
    )


class TestADFRegression:
    """Tests for the (augmented) Dickey-Fuller regression."""

    def test_design_matches_manual_construction(self, random_walk):
        """Test that the regression sample aligns differences and lags."""
        for dlags in range(4):
            regressand, X = build_adf_design(random_walk, dlags)
            expected_y, expected_X = manual_design(random_walk, dlags)
            assert_allclose(regressand, expected_y)
            assert_allclose(X, expected_X)

    def test_estimates_match_statsmodels(self, random_walk):
        """Test coefficients and standard errors against a direct OLS fit."""
        dlags = 2
        result = adf_regression(random_walk, dlags)
        regressand, X = manual_design(random_walk, dlags)
        expected = sm.OLS(regressand, X).fit()

        assert isinstance(result, ADFRegressionResult)
        assert_allclose(result.params, expected.params, rtol=1e-8)
        assert_allclose(result.bse, expected.bse, rtol=1e-8)
        assert_allclose(result.resid, expected.resid, rtol=1e-8, atol=1e-10)
        assert_allclose(result.rss, expected.ssr, rtol=1e-8)

    def test_shapes_and_sample_size(self, random_walk):
        """Test the lengths of the estimates and residuals."""
        obs = len(random_walk)
        for dlags in (0, 1, 5):
            result = adf_regression(random_walk, dlags)
            assert result.params.shape == (2 + dlags,)
            assert result.bse.shape == (2 + dlags,)
            assert result.tvalues.shape == (2 + dlags,)
            assert result.pvalues.shape == (2 + dlags,)
            assert result.resid.shape == (obs - dlags - 1,)
            assert result.nobs == obs - dlags - 1
            assert result.nregressors == 2 + dlags
            assert result.df_resid == obs - 2 * dlags - 3

    def test_derived_statistics(self, random_walk):
        """Test sigma, t-ratios, and significance levels."""
        result = adf_regression(random_walk, 3)

        assert_allclose(result.sigma, np.sqrt(result.rss / result.df_resid))
        assert_allclose(result.tvalues, result.params / result.bse)
        assert np.isnan(result.pvalues[0])
        assert result.pvalues[1] == df_significance(result.tvalues[1], result.nobs)
        expected = 2.0 * stats.t.sf(np.abs(result.tvalues[2:]), result.df_resid)
        assert_allclose(result.pvalues[2:], expected)

    def test_intercept_significance_undefined(self, random_walk):
        """Test that the intercept is never given a significance level."""
        for dlags in range(5):
            assert np.isnan(adf_regression(random_walk, dlags).pvalues[0])

    def test_results_are_read_only(self, random_walk):
        """Test that the result arrays cannot be modified."""
        result = adf_regression(random_walk, 1)
        with pytest.raises(ValueError):
            result.params[0] = 1.0
        with pytest.raises(ValueError):
            result.resid[0] = 1.0

    def test_input_not_modified(self, random_walk):
        """Test that the caller's series is left untouched."""
        original = random_walk.copy()
        adf_regression(random_walk, 2)
        assert_array_equal(random_walk, original)

    def test_pandas_input(self, random_walk):
        """Test that a Pandas Series gives the same result as an array."""
        series = pd.Series(random_walk, index=pd.date_range("2000-01-01", periods=len(random_walk)))
        from_array = adf_regression(random_walk, 1)
        from_series = adf_regression(series, 1)
        assert_allclose(from_series.params, from_array.params)

    def test_minimum_observations(self):
        """Test the smallest admissible series."""
        result = adf_regression([1.0, 2.5, 2.0, 4.0], 0)
        assert result.nobs == 3
        assert result.df_resid == 1
        assert np.isfinite(result.tvalues[1])

    def test_too_few_observations(self):
        """Test that fewer than four observations are rejected."""
        with pytest.raises(InsufficientDataError):
            adf_regression([1.0, 2.0, 1.5], 0)

    def test_degrees_of_freedom_exhausted(self, rng):
        """Test that a lag order leaving no residual degrees of freedom fails."""
        y = np.cumsum(rng.standard_normal(10))
        assert residual_degrees_of_freedom(10, 3) == 1
        adf_regression(y, 3)
        with pytest.raises(DegreesOfFreedomError):
            adf_regression(y, 4)
        with pytest.raises(DegreesOfFreedomError):
            adf_regression(y, 8)

    def test_negative_lags(self, random_walk):
        """Test that a negative lag order is rejected."""
        with pytest.raises(ParameterError):
            adf_regression(random_walk, -1)

    def test_non_integer_lags(self, random_walk):
        """Test that a non-integer lag order is rejected."""
        with pytest.raises(ParameterError):
            adf_regression(random_walk, 1.5)

    def test_constant_series(self):
        """Test that a constant series is reported as singular."""
        with pytest.raises(SingularDesignError):
            adf_regression(np.full(50, 3.0), 0)

    def test_exact_fit(self):
        """Test that a series with constant differences is reported as singular."""
        y = 1.0 + 0.5 * np.arange(50)
        with pytest.raises(SingularDesignError):
            adf_regression(y, 0)

    def test_near_exact_fit(self, rng):
        """Test that residual variance at rounding-error scale counts as an exact fit."""
        y = 1.0 + 0.5 * np.arange(50) + 1e-9 * rng.standard_normal(50)
        with pytest.raises(SingularDesignError):
            adf_regression(y, 0)

    def test_missing_values(self, random_walk):
        """Test that NaN values are rejected."""
        y = random_walk.copy()
        y[10] = np.nan
        with pytest.raises(DataError):
            adf_regression(y, 0)


class TestLagSelection:
    """Tests for the forward lag order scan."""

    def test_max_feasible_lags(self):
        """Test the largest estimable lag order for several sample sizes."""
        assert max_feasible_lags(4) == 0
        assert max_feasible_lags(5) == 0
        assert max_feasible_lags(6) == 1
        assert max_feasible_lags(10) == 3
        assert max_feasible_lags(200) == 98

    def test_max_feasible_lags_is_estimable(self, rng):
        """Test that the largest feasible order can be fitted and one more cannot."""
        for obs in (6, 9, 12):
            y = np.cumsum(rng.standard_normal(obs))
            d = max_feasible_lags(obs)
            assert adf_regression(y, d).df_resid >= 1
            with pytest.raises(DegreesOfFreedomError):
                adf_regression(y, d + 1)

    def test_selects_lag_for_autocorrelated_differences(self, integrated_ar1):
        """Test that autocorrelated differences require at least one lag."""
        assert select_lag_order(integrated_ar1) >= 1

    def test_stopping_rule(self, integrated_ar1):
        """Test that the scan stops at the first insignificant lag."""
        selected = select_lag_order(integrated_ar1)
        for k in range(1, selected + 1):
            assert adf_regression(integrated_ar1, k).pvalues[-1] <= 0.05
        if selected < max_feasible_lags(len(integrated_ar1)):
            assert adf_regression(integrated_ar1, selected + 1).pvalues[-1] > 0.05

    def test_all_orders_significant_returns_bound(self, integrated_ar1):
        """Test that the bound is returned when every order up to it is significant."""
        selected = select_lag_order(integrated_ar1)
        assert selected >= 1
        for bound in range(1, selected + 1):
            assert all(adf_regression(integrated_ar1, k).pvalues[-1] <= 0.05
                       for k in range(1, bound + 1))
            assert select_lag_order(integrated_ar1, max_lags=bound) == bound

    def test_max_lags_bound(self, integrated_ar1):
        """Test that max_lags caps the selected order."""
        assert select_lag_order(integrated_ar1, max_lags=0) == 0
        assert select_lag_order(integrated_ar1, max_lags=1) <= 1

    def test_max_lags_from_config(self, integrated_ar1):
        """Test that the configured max_lags is used by default."""
        set_config("unit_root", "max_lags", 0)
        assert select_lag_order(integrated_ar1) == 0

    def test_significance_changes_selection(self, integrated_ar1):
        """Test that a stricter level never selects more lags."""
        loose = select_lag_order(integrated_ar1, significance=0.20)
        strict = select_lag_order(integrated_ar1, significance=0.001)
        assert strict <= loose

    def test_invalid_significance(self, random_walk):
        """Test that an invalid significance level is rejected."""
        with pytest.raises(ParameterError):
            select_lag_order(random_walk, significance=1.5)
        with pytest.raises(ParameterError):
            select_lag_order(random_walk, significance=0.0)

    def test_minimum_series(self):
        """Test that a four-observation series selects no lags."""
        assert select_lag_order([1.0, 2.5, 2.0, 4.0]) == 0

    def test_too_short(self):
        """Test that fewer than four observations are rejected."""
        with pytest.raises(InsufficientDataError):
            select_lag_order([1.0, 2.0, 3.0])

    def test_constant_series(self):
        """Test that a constant series propagates the singular design error."""
        with pytest.raises(SingularDesignError):
            select_lag_order(np.zeros(30))

    @given(st.integers(min_value=0, max_value=2 ** 32 - 1),
           st.integers(min_value=4, max_value=80))
    @settings(deadline=None, max_examples=30)
    def test_lag_bounds_property(self, seed, obs):
        """Test that the selected order lies within the feasible range."""
        y = np.cumsum(np.random.default_rng(seed).standard_normal(obs))
        selected = select_lag_order(y)
        assert 0 <= selected <= max_feasible_lags(obs)
        assert selected <= obs - 3


class TestUnitRootTester:
    """Tests for the combined unit root tester."""

    def test_result_structure(self, random_walk):
        """Test the shape of the result matrices and residuals."""
        result = UnitRootTester().test(random_walk)
        d = result.lags
        obs = len(random_walk)

        assert isinstance(result, UnitRootTestResult)
        assert isinstance(result.adf, UnitRootEvaluation)
        assert result.nobs == obs
        assert result.adf.matrix.shape == (3, 4 + d)
        assert result.adf.resid.shape == (obs - d - 1,)
        assert result.df is not None
        assert result.df.matrix.shape == (3, 4)
        assert result.df.resid.shape == (obs - 1,)

    def test_matrix_contents(self, random_walk):
        """Test that the matrix collects the component results."""
        evaluation = UnitRootTester().evaluate(random_walk, 2)
        m = evaluation.matrix
        reg = evaluation.regression

        assert m[0, 0] == reg.sigma
        assert m[0, 1] == evaluation.durbin_watson.statistic
        assert m[1, 0] == evaluation.phillips_perron.statistic
        assert m[1, 1] == evaluation.durbin_h.statistic
        assert m[2, 0] == evaluation.phillips_perron.significance
        assert_array_equal(m[2, 1], evaluation.durbin_h.significance)
        assert_array_equal(m[0, 2:], reg.params)
        assert_array_equal(m[1, 2:], reg.tvalues)
        assert_array_equal(m[2, 2:], reg.pvalues)
        assert np.isnan(m[2, 2])
        assert evaluation.level_significance == reg.pvalues[1]

    def test_matrix_is_read_only(self, random_walk):
        """Test that the result matrix cannot be modified."""
        result = UnitRootTester().test(random_walk)
        with pytest.raises(ValueError):
            result.adf.matrix[0, 0] = 0.0

    def test_evaluation_uses_selected_lags(self, integrated_ar1):
        """Test that the augmented evaluation uses the selected order."""
        tester = UnitRootTester()
        result = tester.test(integrated_ar1)
        assert result.lags == select_lag_order(integrated_ar1)
        assert result.adf.dlags == result.lags
        assert result.lags > 0
        assert result.df is not result.adf
        assert result.df.dlags == 0

    def test_zero_lags_reuses_evaluation(self, random_walk):
        """Test that the plain regression equals the augmented one without lags."""
        result = UnitRootTester(max_lags=0).test(random_walk)
        assert result.lags == 0
        assert result.df is result.adf
        assert_array_equal(result.df.matrix, result.adf.matrix)
        assert_array_equal(result.df.resid, result.adf.resid)

    def test_augmented_only(self, integrated_ar1):
        """Test that the plain regression is skipped when not requested."""
        tester = UnitRootTester()
        assert tester.test(integrated_ar1, include_df=False).df is None
        assert tester.test_augmented(integrated_ar1).df is None
        assert tester.test_both(integrated_ar1).df is not None

    def test_determinism(self, random_walk):
        """Test that repeated runs give identical results."""
        first = UnitRootTester().test(random_walk)
        second = UnitRootTester().test(random_walk)
        assert first.lags == second.lags
        assert_array_equal(first.adf.matrix, second.adf.matrix)
        assert_array_equal(first.adf.resid, second.adf.resid)
        assert_array_equal(first.df.matrix, second.df.matrix)

    def test_results_property(self, random_walk):
        """Test access to the most recent result."""
        tester = UnitRootTester()
        with pytest.raises(RuntimeError):
            tester.results
        result = tester.test(random_walk)
        assert tester.results is result
        assert "Unit Root Test Results" in tester.summary()

    def test_minimum_observations(self):
        """Test the tester on the smallest admissible series."""
        y = [1.0, 2.5, 2.0, 4.0]
        with pytest.warns(NumericWarning):
            result = UnitRootTester().test(y)
        assert result.lags == 0
        assert result.adf.matrix.shape == (3, 4)
        assert result.adf.resid.shape == (3,)
        assert np.isnan(result.adf.matrix[1, 1])
        assert np.isnan(result.adf.matrix[2, 1])
        assert np.isfinite(result.adf.matrix[1, 0])

    def test_too_short(self):
        """Test that fewer than four observations are rejected before estimation."""
        with pytest.raises(InsufficientDataError):
            UnitRootTester().test([1.0, 2.0, 3.0])

    def test_constant_series(self):
        """Test that a constant series is reported as singular."""
        with pytest.raises(SingularDesignError):
            UnitRootTester().test(np.ones(100))

    def test_invalid_settings(self):
        """Test that invalid constructor arguments are rejected."""
        with pytest.raises(ParameterError):
            UnitRootTester(durbin_h_tails=3)
        with pytest.raises(ParameterError):
            UnitRootTester(significance=2.0)
        with pytest.raises(ParameterError):
            UnitRootTester(max_lags=-1)

    def test_settings_from_config(self, integrated_ar1):
        """Test that defaults are read from the configuration."""
        set_config("unit_root", "max_lags", 0)
        set_config("unit_root", "pp_lags", 3)
        result = UnitRootTester().test(integrated_ar1)
        assert result.lags == 0
        assert result.adf.phillips_perron.lags == 3

    def test_constructor_overrides_config(self, integrated_ar1):
        """Test that constructor arguments take precedence over the configuration."""
        set_config("unit_root", "max_lags", 0)
        result = UnitRootTester(max_lags=5).test(integrated_ar1)
        assert result.lags >= 1

    def test_random_walk_size(self, rng):
        """Test that the plain Dickey-Fuller test rarely rejects a random walk."""
        tester = UnitRootTester()
        rejections = 0
        for _ in range(100):
            y = np.cumsum(rng.standard_normal(200))
            rejections += tester.evaluate(y, 0).level_significance <= 0.05
        assert rejections / 100 < 0.15

    def test_stationary_power(self, rng, ar1_simulator):
        """Test that the plain Dickey-Fuller test rejects a stationary AR(1)."""
        tester = UnitRootTester()
        rejections = 0
        for _ in range(50):
            y = ar1_simulator(rng, 200, 0.5)
            with warnings.catch_warnings():
                warnings.simplefilter("ignore", NumericWarning)
                rejections += tester.evaluate(y, 0).level_significance <= 0.05
        assert rejections / 50 >= 0.9

    def test_rejects_unit_root_stationary(self, ar1_process):
        """Test the decision rule on a stationary series."""
        with warnings.catch_warnings():
            warnings.simplefilter("ignore", NumericWarning)
            result = UnitRootTester().test(ar1_process)
        assert result.rejects_unit_root()
        assert result.rejects_random_walk()

    def test_rejects_unit_root_random_walks(self, rng):
        """Test that the decision rule seldom rejects for random walks."""
        tester = UnitRootTester()
        rejections = 0
        for _ in range(50):
            y = np.cumsum(rng.standard_normal(200))
            rejections += tester.test(y).rejects_unit_root()
        assert rejections / 50 < 0.5

    def test_rejects_random_walk_with_autocorrelated_differences(self, integrated_ar1):
        """Test that significant lagged differences reject a pure random walk."""
        result = UnitRootTester().test(integrated_ar1)
        assert result.rejects_random_walk()

    def test_decision_rule_levels(self, ar1_process):
        """Test that invalid decision levels are rejected."""
        with warnings.catch_warnings():
            warnings.simplefilter("ignore", NumericWarning)
            result = UnitRootTester().test(ar1_process)
        with pytest.raises(ParameterError):
            result.rejects_unit_root(level=1.5)
        with pytest.raises(ParameterError):
            result.rejects_unit_root(autocorrelation_level=0.0)

    def test_plain_regression_t_ratio_not_used(self, integrated_ar1):
        """Test that only the augmented t-ratio enters the decision rule."""
        result = UnitRootTester().test(integrated_ar1)
        assert result.df is not result.adf
        adf = with_significances(result.adf, tsig1=0.50, tppsig=0.50, dhsig=0.90)
        df = with_significances(result.df, tsig1=0.01, tppsig=0.50, dhsig=0.90)
        combined = UnitRootTestResult(lags=result.lags, nobs=result.nobs, adf=adf, df=df)
        assert not combined.rejects_unit_root(level=0.10)

    def test_decision_rule_clauses(self, integrated_ar1):
        """Test the augmented t-ratio clause and the Phillips-Perron clause."""
        result = UnitRootTester().test(integrated_ar1)
        df = with_significances(result.df, tsig1=0.50, tppsig=0.50, dhsig=0.90)

        clean = with_significances(result.adf, tsig1=0.01, tppsig=0.50, dhsig=0.90)
        assert UnitRootTestResult(result.lags, result.nobs, clean, df).rejects_unit_root()

        autocorrelated = with_significances(result.adf, tsig1=0.01, tppsig=0.50, dhsig=0.01)
        assert autocorrelated.autocorrelated(0.05)
        assert not UnitRootTestResult(result.lags, result.nobs, autocorrelated, df).rejects_unit_root()

        insignificant = with_significances(result.adf, tsig1=0.50, tppsig=0.50, dhsig=0.90)
        pp_df = with_significances(result.df, tsig1=0.50, tppsig=0.01, dhsig=0.01)
        assert UnitRootTestResult(result.lags, result.nobs, insignificant, pp_df).rejects_unit_root()
        assert not UnitRootTestResult(result.lags, result.nobs, insignificant, None).rejects_unit_root()

    def test_critical_values(self, random_walk):
        """Test that critical values are ordered by level."""
        cv = UnitRootTester().test(random_walk).critical_values
        assert set(cv) == {"1%", "5%", "10%"}
        assert cv["1%"] < cv["5%"] < cv["10%"] < 0

    def test_to_frame(self, integrated_ar1):
        """Test the labelled DataFrame view of the result matrix."""
        result = UnitRootTester().test(integrated_ar1)
        frame = result.adf.to_frame()
        d = result.lags

        assert isinstance(frame, pd.DataFrame)
        assert frame.shape == (3, 4 + d)
        assert list(frame.index) == ["value", "statistic", "significance"]
        assert list(frame.columns[:4]) == ["sigma/pp", "dw/dh", "const", "level_lag"]
        assert frame.columns[-1] == f"diff_lag_{d}"
        assert_allclose(frame.to_numpy(), result.adf.matrix)

    def test_summary_and_dict(self, integrated_ar1):
        """Test the text report and dictionary export."""
        result = UnitRootTester().test(integrated_ar1)
        text = result.summary()
        assert "Augmented Dickey-Fuller Regression" in text
        assert "Dickey-Fuller Regression (0 lags" in text
        assert "Phillips-Perron" in text
        assert str(result) == text

        exported = result.to_dict()
        assert exported["lags"] == result.lags
        assert exported["nobs"] == len(integrated_ar1)
        assert len(exported["adf"]["matrix"]) == 3
        assert exported["df"] is not None

    def test_residual_diagnostics(self, random_walk):
        """Test the residual diagnostics attached to an evaluation."""
        evaluation = UnitRootTester().evaluate(random_walk, 0)
        results = evaluation.residual_diagnostics()
        assert set(results) == {"ljung_box", "arch"}
        assert 0.0 <= results["ljung_box"].p_value <= 1.0
        assert 0.0 <= results["arch"].p_value <= 1.0

    def test_autocorrelated_flag(self, rng, ar1_simulator):
        """Test the residual autocorrelation check used by the decision rule."""
        y = np.cumsum(ar1_simulator(rng, 300, 0.7))
        evaluation = UnitRootTester().evaluate(y, 0)
        assert evaluation.autocorrelated(0.05) is True

    @given(st.integers(min_value=0, max_value=2 ** 32 - 1),
           st.integers(min_value=10, max_value=120))
    @settings(deadline=None, max_examples=25)
    def test_matrix_shape_property(self, seed, obs):
        """Test matrix and residual shapes for random walks of any length."""
        y = np.cumsum(np.random.default_rng(seed).standard_normal(obs))
        with warnings.catch_warnings():
            warnings.simplefilter("ignore", NumericWarning)
            result = UnitRootTester().test(y)
        d = result.lags
        assert 0 <= d <= obs - 3
        assert result.adf.matrix.shape == (3, 4 + d)
        assert result.adf.resid.shape == (obs - d - 1,)
        assert np.isnan(result.adf.matrix[2, 2])
        assert 0.0 <= result.adf.matrix[0, 1] <= 4.0


class TestUnitrootFunction:
    """Tests for the functional interface."""

    def test_returns_matrices(self, integrated_ar1):
        """Test the four returned arrays."""
        adf, adfresid, df, dfresid = unitroot(integrated_ar1)
        d = adf.shape[1] - 4
        assert d >= 1
        assert adfresid.shape == (len(integrated_ar1) - d - 1,)
        assert df.shape == (3, 4)
        assert dfresid.shape == (len(integrated_ar1) - 1,)

    def test_without_plain_regression(self, random_walk):
        """Test that the plain regression outputs are None when not requested."""
        adf, adfresid, df, dfresid = unitroot(random_walk, include_df=False)
        assert adf.shape[0] == 3
        assert df is None
        assert dfresid is None

    def test_zero_lags_duplicates(self, random_walk):
        """Test that without lags the plain outputs equal the augmented ones."""
        adf, adfresid, df, dfresid = unitroot(random_walk, max_lags=0)
        assert_array_equal(adf, df)
        assert_array_equal(adfresid, dfresid)

    def test_matches_tester(self, random_walk):
        """Test that the function agrees with the tester."""
        adf, _, df, _ = unitroot(random_walk)
        result = UnitRootTester().test(random_walk)
        assert_array_equal(adf, result.adf.matrix)
        assert_array_equal(df, result.df.matrix)
