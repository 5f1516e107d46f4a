# unitroot/core/types.py

"""
Core type annotations for the Unit Root Toolbox.

Type aliases shared by the validation, configuration, and test modules.
"""

from pathlib import Path
from typing import Any, Dict, Literal, Sequence, Union

import numpy as np
import pandas as pd

# NumPy array aliases
Vector = np.ndarray  # 1D array
Matrix = np.ndarray  # 2D array

# Input accepted wherever a single series is expected
TimeSeriesData = Union[np.ndarray, pd.Series, Sequence[float]]

# Configuration types
ConfigDict = Dict[str, Any]
ConfigPath = Union[str, Path]
LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]

# Number of tails for a significance level
Tails = Literal[1, 2]
