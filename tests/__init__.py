"""
Unit Root Toolbox Test Suite

Tests for the Dickey-Fuller regression, the residual diagnostics, the
Phillips-Perron correction, lag selection, the unit root tester, and the
configuration and validation utilities.
"""

# Version information for the test package
__version__ = "1.0.0"
