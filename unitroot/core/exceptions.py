'''
Custom exception classes for the Unit Root Toolbox.

This module defines the hierarchy of exception and warning classes used
throughout the toolbox. Every error carries a primary message plus optional
details and a context dictionary, so that a failed unit-root test reports what
was being estimated (lag order, sample size, regressor count) when it failed.

The hierarchy is shallow:

    UnitRootError
    ├── ParameterError
    ├── DimensionError
    ├── DataError
    │   └── InsufficientDataError
    ├── EstimationError
    │   ├── DegreesOfFreedomError
    │   └── SingularDesignError
    ├── NumericError
    └── ConfigurationError

All errors raised during a test abort the whole test; there is no partial
result and no retry.
'''

import inspect
import warnings
from pathlib import Path
from typing import Any, Dict, Optional, Tuple, Union

import numpy as np


class UnitRootError(Exception):
    """Base exception class for all Unit Root Toolbox errors.

    Attributes:
        message: The error message
        details: Additional details about the error
        context: Dictionary containing contextual information about the error
    """

    def __init__(self,
                 message: str,
                 details: Optional[str] = None,
                 context: Optional[Dict[str, Any]] = None) -> None:
        """Initialize the UnitRootError.

        Args:
            message: The primary error message
            details: Additional details about the error
            context: Dictionary containing contextual information about the error
        """
        self.message = message
        self.details = details
        self.context = context or {}

        full_message = message
        if details:
            full_message += f"\n\nDetails: {details}"

        if self.context:
            context_str = "\n".join(f"  {k}: {v}" for k, v in self.context.items())
            full_message += f"\n\nContext:\n{context_str}"

        # Add caller information for better debugging
        frame = inspect.currentframe()
        if frame:
            try:
                frame = frame.f_back
                # Skip the constructors of subclasses
                while frame is not None and frame.f_code.co_name == "__init__":
                    frame = frame.f_back
                if frame:
                    caller_info = inspect.getframeinfo(frame)
                    full_message += f"\n\nLocation: {Path(caller_info.filename).name}:{caller_info.lineno}"
            finally:
                del frame  # Avoid reference cycles

        super().__init__(full_message)


class ParameterError(UnitRootError):
    """Exception raised for invalid argument values.

    Attributes:
        param_name: The name of the parameter that caused the error
        param_value: The invalid parameter value
        constraint: Description of the constraint that was violated
    """

    def __init__(self,
                 message: str,
                 param_name: Optional[str] = None,
                 param_value: Optional[Any] = None,
                 constraint: Optional[str] = None,
                 details: Optional[str] = None,
                 context: Optional[Dict[str, Any]] = None) -> None:
        self.param_name = param_name
        self.param_value = param_value
        self.constraint = constraint

        context_dict = dict(context or {})
        if param_name:
            context_dict["Parameter"] = param_name
        if param_value is not None:
            context_dict["Value"] = param_value
        if constraint:
            context_dict["Constraint"] = constraint

        super().__init__(message, details, context_dict)


class DimensionError(UnitRootError):
    """Exception raised when an array does not have the expected shape.

    Attributes:
        array_name: The name of the array that caused the error
        expected_shape: The expected shape of the array
        actual_shape: The actual shape of the array
    """

    def __init__(self,
                 message: str,
                 array_name: Optional[str] = None,
                 expected_shape: Optional[Union[Tuple[int, ...], str]] = None,
                 actual_shape: Optional[Tuple[int, ...]] = None,
                 details: Optional[str] = None,
                 context: Optional[Dict[str, Any]] = None) -> None:
        self.array_name = array_name
        self.expected_shape = expected_shape
        self.actual_shape = actual_shape

        context_dict = dict(context or {})
        if array_name:
            context_dict["Array"] = array_name
        if expected_shape is not None:
            context_dict["Expected Shape"] = expected_shape
        if actual_shape is not None:
            context_dict["Actual Shape"] = actual_shape

        super().__init__(message, details, context_dict)


class DataError(UnitRootError):
    """Exception raised for errors related to input data.

    This exception is used when input data contains missing or infinite
    values, cannot be converted to floating point, or is otherwise unsuitable
    for the requested operation.

    Attributes:
        data_name: The name of the data that caused the error
        issue: Description of the issue with the data
        index: The index or location where the issue was detected
    """

    def __init__(self,
                 message: str,
                 data_name: Optional[str] = None,
                 issue: Optional[str] = None,
                 index: Optional[Union[int, Tuple[int, ...], str]] = None,
                 details: Optional[str] = None,
                 context: Optional[Dict[str, Any]] = None) -> None:
        self.data_name = data_name
        self.issue = issue
        self.index = index

        context_dict = dict(context or {})
        if data_name:
            context_dict["Data"] = data_name
        if issue:
            context_dict["Issue"] = issue
        if index is not None:
            context_dict["Index"] = index

        super().__init__(message, details, context_dict)


class InsufficientDataError(DataError):
    """Exception raised when a series is too short for the minimum regression.

    The Dickey-Fuller regression needs at least one lagged level, one
    difference, and one residual degree of freedom beyond the intercept and
    slope, which is four observations.

    Attributes:
        nobs: Number of observations supplied
        min_nobs: Minimum number of observations required
    """

    def __init__(self,
                 message: str,
                 nobs: Optional[int] = None,
                 min_nobs: Optional[int] = None,
                 data_name: Optional[str] = None,
                 details: Optional[str] = None,
                 context: Optional[Dict[str, Any]] = None) -> None:
        self.nobs = nobs
        self.min_nobs = min_nobs

        context_dict = dict(context or {})
        if nobs is not None:
            context_dict["Observations"] = nobs
        if min_nobs is not None:
            context_dict["Required"] = min_nobs

        super().__init__(message, data_name=data_name,
                         issue="insufficient length", details=details,
                         context=context_dict)


class EstimationError(UnitRootError):
    """Exception raised when a regression cannot be estimated.

    Attributes:
        model_type: The regression being estimated
        dlags: Number of lagged differences in the regression
        issue: Description of the estimation issue
    """

    def __init__(self,
                 message: str,
                 model_type: Optional[str] = None,
                 dlags: Optional[int] = None,
                 issue: Optional[str] = None,
                 details: Optional[str] = None,
                 context: Optional[Dict[str, Any]] = None) -> None:
        self.model_type = model_type
        self.dlags = dlags
        self.issue = issue

        context_dict = dict(context or {})
        if model_type:
            context_dict["Model Type"] = model_type
        if dlags is not None:
            context_dict["Lagged Differences"] = dlags
        if issue:
            context_dict["Issue"] = issue

        super().__init__(message, details, context_dict)


class DegreesOfFreedomError(EstimationError):
    """Exception raised when a lag order leaves no residual degrees of freedom.

    Attributes:
        nobs: Number of observations in the regression sample
        nregressors: Number of regressors including the intercept
    """

    def __init__(self,
                 message: str,
                 nobs: Optional[int] = None,
                 nregressors: Optional[int] = None,
                 dlags: Optional[int] = None,
                 details: Optional[str] = None,
                 context: Optional[Dict[str, Any]] = None) -> None:
        self.nobs = nobs
        self.nregressors = nregressors

        context_dict = dict(context or {})
        if nobs is not None:
            context_dict["Regression Observations"] = nobs
        if nregressors is not None:
            context_dict["Regressors"] = nregressors

        super().__init__(message, model_type="ADF", dlags=dlags,
                         issue="non-positive residual degrees of freedom",
                         details=details, context=context_dict)


class SingularDesignError(EstimationError):
    """Exception raised when the design matrix is not of full column rank.

    A constant series makes the lagged level collinear with the intercept; a
    series with a constant first difference fits exactly and leaves no
    residual variance. Both are reported here instead of returning NaN or
    infinite coefficients.

    Attributes:
        rank: Numerical rank of the design matrix
        nregressors: Number of columns in the design matrix
    """

    def __init__(self,
                 message: str,
                 rank: Optional[int] = None,
                 nregressors: Optional[int] = None,
                 dlags: Optional[int] = None,
                 issue: Optional[str] = "design matrix is not of full rank",
                 details: Optional[str] = None,
                 context: Optional[Dict[str, Any]] = None) -> None:
        self.rank = rank
        self.nregressors = nregressors

        context_dict = dict(context or {})
        if rank is not None:
            context_dict["Rank"] = rank
        if nregressors is not None:
            context_dict["Regressors"] = nregressors

        super().__init__(message, model_type="ADF", dlags=dlags, issue=issue,
                         details=details, context=context_dict)


class NumericError(UnitRootError):
    """Exception raised for numerical computation errors.

    Attributes:
        operation: The operation that caused the error
        values: The values that caused the error
        error_type: The type of numerical error
    """

    def __init__(self,
                 message: str,
                 operation: Optional[str] = None,
                 values: Optional[Any] = None,
                 error_type: Optional[str] = None,
                 details: Optional[str] = None,
                 context: Optional[Dict[str, Any]] = None) -> None:
        self.operation = operation
        self.values = values
        self.error_type = error_type

        context_dict = dict(context or {})
        if operation:
            context_dict["Operation"] = operation
        if values is not None:
            if isinstance(values, np.ndarray) and values.size > 10:
                # Truncate large arrays for readability
                context_dict["Values"] = f"Array with shape {values.shape}"
            else:
                context_dict["Values"] = values
        if error_type:
            context_dict["Error Type"] = error_type

        super().__init__(message, details, context_dict)


class ConfigurationError(UnitRootError):
    """Exception raised for invalid configuration settings.

    Attributes:
        setting: The configuration setting that caused the error
        value: The invalid value
        issue: Description of the issue
    """

    def __init__(self,
                 message: str,
                 setting: Optional[str] = None,
                 value: Optional[Any] = None,
                 issue: Optional[str] = None,
                 details: Optional[str] = None,
                 context: Optional[Dict[str, Any]] = None) -> None:
        self.setting = setting
        self.value = value
        self.issue = issue

        context_dict = dict(context or {})
        if setting:
            context_dict["Setting"] = setting
        if value is not None:
            context_dict["Value"] = value
        if issue:
            context_dict["Issue"] = issue

        super().__init__(message, details, context_dict)


class UnitRootWarning(Warning):
    """Base warning class for all Unit Root Toolbox warnings.

    Attributes:
        message: The warning message
        details: Additional details about the warning
        context: Dictionary containing contextual information about the warning
    """

    def __init__(self,
                 message: str,
                 details: Optional[str] = None,
                 context: Optional[Dict[str, Any]] = None) -> None:
        self.message = message
        self.details = details
        self.context = context or {}

        full_message = message
        if details:
            full_message += f"\n\nDetails: {details}"

        if self.context:
            context_str = "\n".join(f"  {k}: {v}" for k, v in self.context.items())
            full_message += f"\n\nContext:\n{context_str}"

        super().__init__(full_message)


class NumericWarning(UnitRootWarning):
    """Warning for statistics that cannot be computed for the given inputs.

    Attributes:
        operation: The operation where the issue was detected
        issue: Description of the numerical issue
        value: The value that caused the issue
    """

    def __init__(self,
                 message: str,
                 operation: Optional[str] = None,
                 issue: Optional[str] = None,
                 value: Optional[Any] = None,
                 details: Optional[str] = None,
                 context: Optional[Dict[str, Any]] = None) -> None:
        self.operation = operation
        self.issue = issue
        self.value = value

        context_dict = dict(context or {})
        if operation:
            context_dict["Operation"] = operation
        if issue:
            context_dict["Issue"] = issue
        if value is not None:
            context_dict["Value"] = value

        super().__init__(message, details, context_dict)


def raise_parameter_error(message: str,
                          param_name: Optional[str] = None,
                          param_value: Optional[Any] = None,
                          constraint: Optional[str] = None,
                          details: Optional[str] = None,
                          context: Optional[Dict[str, Any]] = None) -> None:
    """Raise a ParameterError with consistent formatting.

    Raises:
        ParameterError: The formatted parameter error
    """
    raise ParameterError(message, param_name, param_value, constraint, details, context)


def raise_dimension_error(message: str,
                          array_name: Optional[str] = None,
                          expected_shape: Optional[Union[Tuple[int, ...], str]] = None,
                          actual_shape: Optional[Tuple[int, ...]] = None,
                          details: Optional[str] = None,
                          context: Optional[Dict[str, Any]] = None) -> None:
    """Raise a DimensionError with consistent formatting.

    Raises:
        DimensionError: The formatted dimension error
    """
    raise DimensionError(message, array_name, expected_shape, actual_shape, details, context)


def raise_data_error(message: str,
                     data_name: Optional[str] = None,
                     issue: Optional[str] = None,
                     index: Optional[Union[int, Tuple[int, ...], str]] = None,
                     details: Optional[str] = None,
                     context: Optional[Dict[str, Any]] = None) -> None:
    """Raise a DataError with consistent formatting.

    Raises:
        DataError: The formatted data error
    """
    raise DataError(message, data_name, issue, index, details, context)


def raise_numeric_error(message: str,
                        operation: Optional[str] = None,
                        values: Optional[Any] = None,
                        error_type: Optional[str] = None,
                        details: Optional[str] = None,
                        context: Optional[Dict[str, Any]] = None) -> None:
    """Raise a NumericError with consistent formatting.

    Raises:
        NumericError: The formatted numeric error
    """
    raise NumericError(message, operation, values, error_type, details, context)


def warn_numeric(message: str,
                 operation: Optional[str] = None,
                 issue: Optional[str] = None,
                 value: Optional[Any] = None,
                 details: Optional[str] = None,
                 context: Optional[Dict[str, Any]] = None) -> None:
    """Issue a NumericWarning with consistent formatting.

    Args:
        message: The primary warning message
        operation: The operation where the issue was detected
        issue: Description of the numerical issue
        value: The value that caused the issue
        details: Additional details about the warning
        context: Dictionary containing contextual information about the warning
    """
    warnings.warn(
        NumericWarning(message, operation, issue, value, details, context),
        stacklevel=3
    )
