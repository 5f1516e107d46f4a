# unitroot/core/validation.py

"""
Validation utilities for the Unit Root Toolbox.

Input checks shared by the regression, diagnostics, and unit root modules.
Every check raises one of the package exceptions so that invalid inputs are
rejected before any computation begins.
"""

from typing import Any, Optional

import numpy as np
import pandas as pd

from unitroot.core.exceptions import (
    InsufficientDataError, raise_data_error, raise_dimension_error,
    raise_parameter_error
)
from unitroot.core.types import TimeSeriesData

# Smallest series for which the Dickey-Fuller regression leaves one residual
# degree of freedom: obs - 1 differences, minus the intercept and the slope.
MIN_OBSERVATIONS = 4


def validate_time_series(
    data: TimeSeriesData,
    min_length: int = MIN_OBSERVATIONS,
    data_name: str = "series"
) -> np.ndarray:
    """Validate a single time series and return it as a float64 array.

    The returned array is a copy, so callers never share memory with (or
    modify) the caller's input.

    Args:
        data: Series as a NumPy array, Pandas Series, or sequence of numbers
        min_length: Minimum required length
        data_name: Name of the data for error messages

    Returns:
        np.ndarray: The validated series

    Raises:
        TypeError: If data is None
        DimensionError: If data is not one-dimensional
        DataError: If data is non-numeric or contains NaN or infinite values
        InsufficientDataError: If data is shorter than min_length
    """
    if data is None:
        raise TypeError(f"{data_name} cannot be None")

    if isinstance(data, pd.DataFrame):
        if data.shape[1] != 1:
            raise_dimension_error(
                f"{data_name} must be a single column, got {data.shape[1]} columns",
                array_name=data_name,
                expected_shape="(n,)",
                actual_shape=data.shape
            )
        data = data.iloc[:, 0]

    if isinstance(data, pd.Series):
        values = data.to_numpy()
    else:
        values = np.asarray(data)

    try:
        array = np.array(values, dtype=np.float64)
    except (TypeError, ValueError) as e:
        raise_data_error(
            f"{data_name} could not be converted to floating point",
            data_name=data_name,
            issue="non-numeric values",
            details=str(e)
        )

    if array.ndim == 2 and 1 in array.shape:
        array = array.ravel()

    if array.ndim != 1:
        raise_dimension_error(
            f"{data_name} must be 1-dimensional, got {array.ndim} dimensions",
            array_name=data_name,
            expected_shape="(n,)",
            actual_shape=array.shape
        )

    if array.shape[0] < min_length:
        raise InsufficientDataError(
            f"{data_name} is too short (length {array.shape[0]}), "
            f"minimum required length is {min_length}",
            nobs=array.shape[0],
            min_nobs=min_length,
            data_name=data_name
        )

    if np.isnan(array).any():
        raise_data_error(
            f"{data_name} contains NaN values",
            data_name=data_name,
            issue="contains NaN values",
            index=int(np.flatnonzero(np.isnan(array))[0])
        )

    if np.isinf(array).any():
        raise_data_error(
            f"{data_name} contains infinite values",
            data_name=data_name,
            issue="contains infinite values",
            index=int(np.flatnonzero(np.isinf(array))[0])
        )

    return array


def validate_residuals(resid: Any, min_length: int = 2,
                       data_name: str = "residuals") -> np.ndarray:
    """Validate a residual vector.

    Residuals follow the same rules as a series but may be as short as two
    observations.
    """
    return validate_time_series(resid, min_length=min_length, data_name=data_name)


def validate_lag_order(lags: Any, param_name: str = "dlags",
                       allow_none: bool = False) -> Optional[int]:
    """Validate a non-negative integer lag order.

    Args:
        lags: Lag order to validate
        param_name: Name of the parameter for error messages
        allow_none: Whether None is accepted

    Returns:
        Optional[int]: The lag order as a Python int

    Raises:
        ParameterError: If lags is not a non-negative integer
    """
    if lags is None:
        if allow_none:
            return None
        raise_parameter_error(
            f"{param_name} cannot be None",
            param_name=param_name,
            constraint="non-negative integer"
        )

    if isinstance(lags, (bool, np.bool_)) or not isinstance(lags, (int, np.integer)):
        raise_parameter_error(
            f"{param_name} must be an integer, got {type(lags).__name__}",
            param_name=param_name,
            param_value=lags,
            constraint="non-negative integer"
        )

    if lags < 0:
        raise_parameter_error(
            f"{param_name} must be non-negative, got {lags}",
            param_name=param_name,
            param_value=lags,
            constraint="non-negative integer"
        )

    return int(lags)


def validate_significance_level(level: Any, param_name: str = "significance_level") -> float:
    """Validate a significance level strictly between 0 and 1.

    Raises:
        ParameterError: If level is not a number in (0, 1)
    """
    try:
        value = float(level)
    except (TypeError, ValueError):
        raise_parameter_error(
            f"{param_name} must be a number, got {type(level).__name__}",
            param_name=param_name,
            param_value=level,
            constraint="0 < level < 1"
        )

    if not 0.0 < value < 1.0:
        raise_parameter_error(
            f"{param_name} must be between 0 and 1, got {value}",
            param_name=param_name,
            param_value=value,
            constraint="0 < level < 1"
        )

    return value
