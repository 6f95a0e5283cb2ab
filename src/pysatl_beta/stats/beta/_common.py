"""Argument checks shared by the Beta characteristics."""

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


def invalid_shapes(alpha: float, beta: float) -> bool:
    """True unless both shape parameters are positive (NaN included)."""
    return not (alpha > 0.0 and beta > 0.0)
