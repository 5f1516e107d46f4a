'''
Abstract base classes for the Unit Root Toolbox.

This module defines the contract shared by the hypothesis tests in the
toolbox: a descriptive name, input validation, a ``test`` entry point, and
access to the most recent result.
'''

import abc
from typing import Any, Generic, Optional, TypeVar, cast

import numpy as np

from unitroot.core.types import TimeSeriesData

R = TypeVar('R')  # Generic type for results


class HypothesisTestBase(abc.ABC, Generic[R]):
    """Abstract base class for hypothesis tests on a single series.

    Type Parameters:
        R: The result type returned by ``test``
    """

    def __init__(self, name: str = "HypothesisTest"):
        """Initialize the test with a name.

        Args:
            name: A descriptive name for the test
        """
        self._name = name
        self._results: Optional[R] = None

    @property
    def name(self) -> str:
        """Get the test name."""
        return self._name

    @property
    def results(self) -> R:
        """Get the result of the most recent call to ``test``.

        Raises:
            RuntimeError: If the test has not been run
        """
        if self._results is None:
            raise RuntimeError("Test has not been run. Call test() first.")
        return self._results

    @abc.abstractmethod
    def test(self, data: TimeSeriesData, **kwargs: Any) -> R:
        """Run the test on the provided data.

        Args:
            data: The series to test
            **kwargs: Test-specific options

        Returns:
            R: The test result
        """

    @abc.abstractmethod
    def validate_data(self, data: TimeSeriesData) -> np.ndarray:
        """Validate the input data and return it as a float array.

        Raises:
            DataError: If the data is invalid
            DimensionError: If the data has the wrong shape
        """

    def summary(self) -> str:
        """Generate a text summary of the most recent result."""
        if self._results is None:
            return f"Test: {self._name} (not run)"

        if hasattr(self._results, "summary") and callable(getattr(self._results, "summary")):
            return cast(Any, self._results).summary()

        return f"Test: {self._name} (run)"

    def __str__(self) -> str:
        return self.summary()

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(name='{self._name}', run={self._results is not None})"
