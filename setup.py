#!/usr/bin/env python
# -*- coding: utf-8 -*-

"""
Legacy entry point for the Unit Root Toolbox.

All package metadata, dependencies and extras live in pyproject.toml; this
file only lets tools that still call ``setup.py`` build the ``unitroot``
package.
"""

import setuptools

if __name__ == "__main__":
    setuptools.setup()
