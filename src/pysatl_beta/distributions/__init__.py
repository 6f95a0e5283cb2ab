"""
Distributions module
====================

Distribution protocol, analytical computation primitive and support
descriptors shared by all distribution implementations.
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from .computation import AnalyticalComputation
from .distribution import Distribution
from .support import UNIT_INTERVAL, ContinuousSupport, Support

__all__ = [
    "AnalyticalComputation",
    "ContinuousSupport",
    "Distribution",
    "Support",
    "UNIT_INTERVAL",
]
