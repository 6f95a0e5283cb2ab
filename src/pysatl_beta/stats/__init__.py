"""
Statistical Routines
====================

Numerical backend of PySATL Beta: special-function kernels and the Beta
distribution characteristics built on them.
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from . import beta

__all__ = [
    "beta",
]
