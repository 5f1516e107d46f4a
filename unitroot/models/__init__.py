"""
Unit Root Toolbox Models

Statistical models and tests. All unit root functionality lives in the
``time_series`` subpackage.
"""

import logging

# Set up module-level logger
logger = logging.getLogger("unitroot.models")

from . import time_series

__all__ = ["time_series"]
