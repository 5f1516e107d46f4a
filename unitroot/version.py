# unitroot/version.py
"""
Unit Root Toolbox Version Information

Version number and package metadata, exposed as ``unitroot.__version__``.
The package follows semantic versioning (MAJOR.MINOR.PATCH).
"""

from typing import Dict, Tuple

# Version components
VERSION_MAJOR = 1
VERSION_MINOR = 0
VERSION_PATCH = 0

# Full version string
__version__ = f"{VERSION_MAJOR}.{VERSION_MINOR}.{VERSION_PATCH}"

# Package metadata
__title__ = "Unit Root Toolbox"
__description__ = "Augmented Dickey-Fuller and Phillips-Perron unit root tests"
__license__ = "MIT"

# Python version requirements
__python_requires__ = ">=3.9"

# Package dependencies
__dependencies__ = {
    "numpy": ">=1.26.0",
    "scipy": ">=1.11.3",
    "pandas": ">=2.1.1",
    "numba": ">=0.58.0",
    "statsmodels": ">=0.14.0",
}


def get_version() -> str:
    """Return the version string."""
    return __version__


def get_version_info() -> Tuple[int, int, int]:
    """Return the version as a (major, minor, patch) tuple."""
    return (VERSION_MAJOR, VERSION_MINOR, VERSION_PATCH)


def get_package_info() -> Dict[str, str]:
    """Return package metadata as a dictionary."""
    return {
        "title": __title__,
        "version": __version__,
        "description": __description__,
        "license": __license__,
        "python_requires": __python_requires__,
    }
